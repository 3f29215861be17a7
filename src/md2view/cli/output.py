"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2view/cli/output.py
import argparse
import sys
from typing import IO, Any, Optional, Sequence

from md2view.exceptions import DependencyError
from md2view.presentation.debug import describe_node
from md2view.presentation.nodes import PresentationNode, TextLeaf


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(
    args: argparse.Namespace, raise_on_missing: bool = False, stream: Optional[IO[str]] = None
) -> bool:
    """Decide whether the tree view should be drawn with Rich.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    raise_on_missing : bool, default False
        Raise DependencyError if rich is requested but not installed
    stream : optional, default None
        Output stream to test for a terminal; sys.stdout unless given

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output needs ``--rich``, the rich package, and either
    ``--force-rich`` or a terminal on the output stream.

    """
    if not args.rich:
        return False

    if not check_rich_available():
        if raise_on_missing:
            raise DependencyError(
                feature_name="rich-output",
                missing_packages=[("rich", "")],
                message="Rich output requires the optional 'rich' dependency. Install with: pip install md2view[rich]",
            )
        return False

    if getattr(args, "force_rich", False):
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def node_label(node: Any) -> str:
    """Return a one-line label for a rendered value.

    Text leaves show their direct string content; every node shows its style
    roles.
    """
    label = describe_node(node)
    if not isinstance(node, PresentationNode):
        return f"{label} {node!r}"
    if node.styles:
        label += f" [{', '.join(node.styles)}]"
    if isinstance(node, TextLeaf):
        direct_text = "".join(child for child in node.children if isinstance(child, str))
        if direct_text:
            label += f" {direct_text!r}"
    return label


def _plain_lines(nodes: Sequence[Any], depth: int, lines: list[str]) -> None:
    for node in nodes:
        if isinstance(node, str):
            continue
        lines.append("  " * depth + node_label(node))
        if isinstance(node, PresentationNode):
            _plain_lines(node.children, depth + 1, lines)


def format_plain_tree(nodes: Sequence[Any]) -> str:
    """Format a rendered tree as indented text, one node per line."""
    lines: list[str] = []
    _plain_lines(nodes, 0, lines)
    return "\n".join(lines)


def print_rich_tree(nodes: Sequence[Any], title: str = "presentation tree", console: Any = None) -> None:
    """Draw a rendered tree with ``rich.tree.Tree``.

    Parameters
    ----------
    nodes : Sequence
        Root sequence of a render pass
    title : str, default "presentation tree"
        Label of the root of the drawn tree
    console : rich.console.Console, optional
        Console to print to; a new stdout console when omitted

    """
    from rich.console import Console
    from rich.markup import escape
    from rich.tree import Tree

    def add_branch(parent: Tree, children: Sequence[Any]) -> None:
        for child in children:
            if isinstance(child, str):
                continue
            style = "cyan" if isinstance(child, TextLeaf) else "bold"
            branch = parent.add(f"[{style}]{escape(node_label(child))}[/{style}]")
            if isinstance(child, PresentationNode):
                add_branch(branch, child.children)

    root = Tree(f"[bold magenta]{escape(title)}[/bold magenta]")
    add_branch(root, nodes)
    (console or Console()).print(root)
