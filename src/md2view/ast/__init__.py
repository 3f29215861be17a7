#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2view/ast/__init__.py
"""Syntax tree module for parsed Markdown documents.

Examples
--------
Building a tree by hand:

    >>> from md2view.ast import SyntaxNode, block, link
    >>> tree = [
    ...     SyntaxNode("h1", ["Title"]),
    ...     block("See ", link("https://example.com", "the docs"), "."),
    ... ]

"""

from __future__ import annotations

from md2view.ast.nodes import (
    SyntaxChild,
    SyntaxNode,
    SyntaxTree,
    block,
    bullet_list,
    custom,
    is_null_payload,
    link,
    media,
    quote,
)

__all__ = [
    "SyntaxChild",
    "SyntaxNode",
    "SyntaxTree",
    "block",
    "bullet_list",
    "custom",
    "is_null_payload",
    "link",
    "media",
    "quote",
]
