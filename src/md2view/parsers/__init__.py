#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2view/parsers/__init__.py
"""Markdown source parsers producing syntax trees."""

from md2view.parsers.markdown import MarkdownParser, parse_markdown

__all__ = ["MarkdownParser", "parse_markdown"]
