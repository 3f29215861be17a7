#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2view/ast/nodes.py
"""Syntax tree node model for parsed Markdown documents.

The syntax tree is the input of the rendering engine. It is produced once per
parse (by :class:`md2view.parsers.markdown.MarkdownParser` or by a host that
builds trees directly) and is treated as read-only by the renderer.

A tree is a list whose entries are either bare strings (plain text) or
:class:`SyntaxNode` instances. Each node carries a ``kind`` tag that the node
dispatcher maps to a renderer, and a ``data`` payload that is either a literal
string or an ordered list of children.

Node Kinds
----------
Block-level kinds:
    - ``div`` (generic block / paragraph), ``blockquote``, ``hr``
    - ``ul``, ``ol``, ``li``
    - ``h1`` .. ``h6``

Inline kinds:
    - ``text`` and untagged (``None``) text runs
    - ``em``, ``strong``, ``del``, ``u``, ``code``
    - ``a`` (link), ``img`` (media)

Host extension:
    - ``custom`` carries a prebuilt host value in ``element``

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Union

from md2view.constants import (
    KIND_BLOCK,
    KIND_CUSTOM,
    KIND_LINK,
    KIND_MEDIA,
    KIND_ORDERED_LIST,
    KIND_QUOTE,
    KIND_UNORDERED_LIST,
    NULL_SENTINELS,
)


@dataclass
class SyntaxNode:
    """A tagged node of the parsed document.

    Parameters
    ----------
    kind : str or None
        Kind tag (see module docstring). ``None`` marks an untagged text run.
    data : str or list, default = empty list
        Literal text payload, or ordered children (``SyntaxNode`` or ``str``)
    src : str or None, default = None
        Media source URL (``img``)
    alt : str or None, default = None
        Media alternative text (``img``)
    title : str or None, default = None
        Media or link title (``img``, ``a``)
    href : str or None, default = None
        Link destination (``a``)
    element : Any, default = None
        Prebuilt host value passed through unchanged (``custom``)
    metadata : dict, default = empty dict
        Arbitrary parser metadata; ignored by the renderer

    """

    kind: Optional[str]
    data: Union[str, list[SyntaxChild]] = field(default_factory=list)
    src: Optional[str] = None
    alt: Optional[str] = None
    title: Optional[str] = None
    href: Optional[str] = None
    element: Any = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def children(self) -> list[SyntaxChild]:
        """Return the child sequence, wrapping a literal payload as a single text child."""
        if isinstance(self.data, str):
            return [self.data]
        return list(self.data)

    @property
    def is_literal(self) -> bool:
        """Whether the payload is a literal string rather than a child sequence."""
        return isinstance(self.data, str)

    def text_content(self) -> str:
        """Concatenate all literal text beneath this node.

        Returns
        -------
        str
            Text of every string payload in document order

        """
        return "".join(_collect_text(self.data))


SyntaxChild = Union[SyntaxNode, str]
SyntaxTree = Sequence[SyntaxChild]


def _collect_text(data: Any) -> list[str]:
    if isinstance(data, str):
        return [data]
    parts: list[str] = []
    for child in data or ():
        if isinstance(child, SyntaxNode):
            parts.extend(_collect_text(child.data))
        elif isinstance(child, str):
            parts.append(child)
    return parts


def is_null_payload(value: Any) -> bool:
    """Return True for payloads treated as absent upstream data.

    ``None``, the empty string and the literal strings ``"null"`` and
    ``"undefined"`` all count as absent, whether they appear as a bare tree
    entry or as a node's literal ``data``.

    Parameters
    ----------
    value : Any
        Tree entry or node payload

    Returns
    -------
    bool
        True if the value should render to nothing

    """
    if value is None:
        return True
    if isinstance(value, str):
        return value in NULL_SENTINELS
    if isinstance(value, SyntaxNode):
        return value.data is None or (isinstance(value.data, str) and value.data in NULL_SENTINELS)
    return False


# ============================================================================
# Convenience constructors
# ============================================================================


def block(*children: SyntaxChild) -> SyntaxNode:
    """Build a generic block (paragraph) node."""
    return SyntaxNode(KIND_BLOCK, list(children))


def quote(*children: SyntaxChild) -> SyntaxNode:
    """Build a block quote node."""
    return SyntaxNode(KIND_QUOTE, list(children))


def bullet_list(*items: SyntaxChild, ordered: bool = False) -> SyntaxNode:
    """Build an unordered (or, with ``ordered=True``, ordered) list node."""
    return SyntaxNode(KIND_ORDERED_LIST if ordered else KIND_UNORDERED_LIST, list(items))


def link(href: str, *children: SyntaxChild, title: Optional[str] = None) -> SyntaxNode:
    """Build a link node."""
    return SyntaxNode(KIND_LINK, list(children), href=href, title=title)


def media(src: str, alt: str = "", title: Optional[str] = None) -> SyntaxNode:
    """Build a media (image) node."""
    return SyntaxNode(KIND_MEDIA, [], src=src, alt=alt, title=title)


def custom(element: Any) -> SyntaxNode:
    """Build a custom node carrying a prebuilt host value."""
    return SyntaxNode(KIND_CUSTOM, [], element=element)
