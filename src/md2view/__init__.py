"""md2view - Markdown to native presentation trees.

md2view turns Markdown into a tree of presentation nodes (text leaves and
containers) that a host UI layer can mount directly. Styling is expressed as
role references resolved against a style table, so hosts keep full control
over appearance while the engine decides structure.

The pipeline has two stages. A parser adapter (built on mistune) produces a
tagged syntax tree, and the tree renderer walks that tree, cascading styles
and collapsing text-only runs into single text leaves.

Key Features
------------
- Default style table with per-role overrides
- Style cascade through headings, emphasis, strikethrough and links
- Text-only collapsing for blocks, list items, links and quotes
- Per-slot renderer overrides (media, links, lists, blocks, quotes, text)
- Depth-guarded rendering that never fails on malformed input
- JSON serialization and a ``md2view`` command-line previewer

Requirements
------------
- Python 3.10+
- mistune 3 for parsing; rich is optional for the CLI tree view

Examples
--------
Render Markdown in one call:

    >>> from md2view import render_markdown
    >>> nodes = render_markdown("# Hello\\n\\nSome *emphasis* here.")
    >>> nodes[0].styles
    ('text', 'h1')

Keep a view and update it as the source changes:

    >>> from md2view import MarkdownView, RenderConfig
    >>> view = MarkdownView("Draft", RenderConfig(markdown_styles={"text": {"color": "#222"}}))
    >>> if view.update(source="Final"):
    ...     nodes = view.render()

See Also
--------
md2view.ast : Syntax tree node definitions
md2view.presentation : Presentation node definitions and serialization

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2view requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2view.api import MarkdownView, render_markdown, render_tree
from md2view.ast import SyntaxNode
from md2view.exceptions import (
    DependencyError,
    Md2ViewError,
    ParsingError,
    RenderDepthError,
    RenderingError,
    StyleConfigError,
    ValidationError,
)
from md2view.options import RenderConfig, RendererOverrides
from md2view.parsers import MarkdownParser
from md2view.presentation import Container, TextLeaf, presentation_to_dict, presentation_to_json
from md2view.renderers import RenderContext, TreeRenderer
from md2view.styles import DEFAULT_STYLES, StyleTable, build_style_table

__all__ = [
    "__version__",
    "render_markdown",
    "render_tree",
    "MarkdownView",
    "MarkdownParser",
    "TreeRenderer",
    "RenderConfig",
    "RendererOverrides",
    "RenderContext",
    "SyntaxNode",
    "TextLeaf",
    "Container",
    "presentation_to_dict",
    "presentation_to_json",
    "DEFAULT_STYLES",
    "StyleTable",
    "build_style_table",
    "Md2ViewError",
    "ValidationError",
    "ParsingError",
    "RenderingError",
    "RenderDepthError",
    "StyleConfigError",
    "DependencyError",
]
