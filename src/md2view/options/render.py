#  Copyright (c) 2025 Tom Villani, Ph.D.
# md2view/options/render.py
"""Configuration options for presentation tree rendering.

This module defines :class:`RenderConfig`, the caller-facing configuration of
a render pass, and :class:`RendererOverrides`, the table of optional
callbacks that replace individual default renderers.
"""

from __future__ import annotations

import webbrowser
from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional, Tuple

from md2view.constants import (
    DEFAULT_BULLET_GLYPH,
    DEFAULT_FAIL_ON_DEPTH_EXCEEDED,
    DEFAULT_MAX_DEPTH,
    DEFAULT_PARSE_INLINE,
    DEFAULT_RENDER_INLINE,
    DEFAULT_USE_DEFAULT_STYLES,
)
from md2view.options.base import BaseRendererOptions, CloneFrozenMixin

ReferenceOpener = Callable[[str], Any]


@dataclass(frozen=True)
class RendererOverrides(CloneFrozenMixin):
    """Optional replacements for the default renderer of each slot.

    Every slot receives already-rendered children (where it has any) and
    returns whatever the host wants placed in the tree. All slots except
    ``media`` and ``bullet`` also get the render key as their last positional
    argument. A slot left as ``None`` uses the default implementation.

    Parameters
    ----------
    media : callable, optional
        ``media(src, alt, title)``
    link : callable, optional
        ``link(href, title, children, key)``
    list : callable, optional
        ``list(ordered, children, key)``
    list_item : callable, optional
        ``list_item(bullet, children, key, index)``
    bullet : callable, optional
        ``bullet(ordered, index)``
    block : callable, optional
        ``block(children, key)`` for blocks with structured children
    block_quote : callable, optional
        ``block_quote(children, key)``
    plain_block_text : callable, optional
        ``plain_block_text(children, key)`` for blocks whose children are all text
    text : callable, optional
        ``text(content, styles, key)`` where ``content`` is a tuple of strings
        or rendered inline children

    """

    media: Optional[Callable[..., Any]] = None
    link: Optional[Callable[..., Any]] = None
    list: Optional[Callable[..., Any]] = None
    list_item: Optional[Callable[..., Any]] = None
    bullet: Optional[Callable[..., Any]] = None
    block: Optional[Callable[..., Any]] = None
    block_quote: Optional[Callable[..., Any]] = None
    plain_block_text: Optional[Callable[..., Any]] = None
    text: Optional[Callable[..., Any]] = None

    def __post_init__(self) -> None:
        """Reject non-callable slot values.

        Raises
        ------
        ValueError
            If a slot holds something other than None or a callable.

        """
        for slot, value in self.items():
            if value is not None and not callable(value):
                raise ValueError(f"Override for slot '{slot}' must be callable, got {type(value).__name__}")

    def items(self) -> List[Tuple[str, Optional[Callable[..., Any]]]]:
        """Return ``(slot, override)`` pairs in declaration order."""
        return [(name, getattr(self, name)) for name in RENDERER_SLOTS]


RENDERER_SLOTS = (
    "media",
    "link",
    "list",
    "list_item",
    "bullet",
    "block",
    "block_quote",
    "plain_block_text",
    "text",
)


@dataclass(frozen=True)
class RenderConfig(BaseRendererOptions):
    """Configuration options for a render pass.

    Parameters
    ----------
    use_default_styles : bool, default True
        Seed the style table with the built-in defaults before applying
        ``markdown_styles``.
    markdown_styles : Mapping[str, Mapping], default empty
        Style overrides keyed by role; each replaces the default for its role.
    parse_inline : bool, default False
        Parse the source with the inline grammar only (no blocks). Consumed
        by the parser adapter before rendering.
    render_inline : bool, default False
        Mark collapsed text blocks as single-line (``numberOfLines=1``,
        ``ellipsizeMode="tail"``), for previews in lists and table cells.
    bullet_glyph : str, default "•"
        Marker text for unordered list items.
    max_depth : int, default 64
        Maximum syntax nesting depth; deeper subtrees are dropped.
    fail_on_depth_exceeded : bool, default False
        Raise RenderDepthError instead of dropping over-deep subtrees.
    open_reference : callable, default webbrowser.open
        Called with a link target when a rendered link is pressed. Failures
        are logged and absorbed.
    overrides : RendererOverrides
        Per-slot renderer replacements.

    Examples
    --------
        >>> config = RenderConfig(markdown_styles={"h1": {"fontSize": 40}})
        >>> quiet = config.create_updated(debug=False, render_inline=True)

    """

    use_default_styles: bool = field(
        default=DEFAULT_USE_DEFAULT_STYLES,
        metadata={"help": "Seed the style table with built-in defaults", "importance": "core"},
    )
    markdown_styles: Mapping[str, Mapping[str, Any]] = field(
        default_factory=dict,
        metadata={"help": "Style overrides keyed by role name", "importance": "core"},
    )
    parse_inline: bool = field(
        default=DEFAULT_PARSE_INLINE,
        metadata={"help": "Parse with the inline grammar only", "importance": "core"},
    )
    render_inline: bool = field(
        default=DEFAULT_RENDER_INLINE,
        metadata={"help": "Render collapsed text blocks as single ellipsized lines", "importance": "advanced"},
    )
    bullet_glyph: str = field(
        default=DEFAULT_BULLET_GLYPH,
        metadata={"help": "Marker text for unordered list items", "importance": "advanced"},
    )
    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Maximum syntax nesting depth before subtrees are dropped", "importance": "security"},
    )
    fail_on_depth_exceeded: bool = field(
        default=DEFAULT_FAIL_ON_DEPTH_EXCEEDED,
        metadata={"help": "Raise instead of dropping subtrees deeper than max_depth", "importance": "advanced"},
    )
    open_reference: ReferenceOpener = field(
        default=webbrowser.open,
        metadata={"help": "Callable that opens a link target", "importance": "advanced"},
    )
    overrides: RendererOverrides = field(
        default_factory=RendererOverrides,
        metadata={"help": "Per-slot renderer replacements", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and table shapes.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

        if not isinstance(self.markdown_styles, Mapping):
            raise ValueError(f"markdown_styles must be a mapping, got {type(self.markdown_styles).__name__}")
        for role, value in self.markdown_styles.items():
            if not isinstance(value, Mapping):
                raise ValueError(f"Style for role '{role}' must be a mapping, got {type(value).__name__}")

        if not callable(self.open_reference):
            raise ValueError("open_reference must be callable")
