#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2view/renderers/context.py
"""Per-branch rendering context and the style cascade.

A :class:`RenderContext` travels down the recursion carrying the ordered
styles to apply to descendant text and a few transient flags. Contexts are
immutable values: every cascade step derives a new one, so a caller can keep
rendering siblings under its own unmodified context.

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from md2view.constants import StyleRef


@dataclass(frozen=True)
class RenderContext:
    """Immutable context threaded through a render pass.

    Parameters
    ----------
    styles : tuple of str, default = ()
        Style references accumulated for descendant text, outermost first
    ordered : bool, default = False
        The enclosing list is ordered
    inside_quote : bool, default = False
        One-shot marker: the next block renderer applies quote styling and
        clears the flag for everything beneath it

    """

    styles: tuple[StyleRef, ...] = ()
    ordered: bool = False
    inside_quote: bool = False

    def with_flags(self, *, ordered: Optional[bool] = None, inside_quote: Optional[bool] = None) -> RenderContext:
        """Return a copy with the given flags replaced and styles unchanged."""
        changes: dict[str, bool] = {}
        if ordered is not None:
            changes["ordered"] = ordered
        if inside_quote is not None:
            changes["inside_quote"] = inside_quote
        return replace(self, **changes) if changes else self


def extend(
    context: Optional[RenderContext],
    style: StyleRef,
    *,
    ordered: Optional[bool] = None,
    inside_quote: Optional[bool] = None,
) -> RenderContext:
    """Derive a child context with one more style appended.

    Parameters
    ----------
    context : RenderContext or None
        Parent context; ``None`` starts a fresh cascade
    style : str
        Style reference to append
    ordered, inside_quote : bool, optional
        Explicit flag overrides; omitted flags are copied from the parent

    Returns
    -------
    RenderContext
        New context; ``context`` itself is never modified

    Examples
    --------
        >>> base = RenderContext(styles=("h1",))
        >>> extend(extend(base, "strong"), "em").styles
        ('h1', 'strong', 'em')
        >>> base.styles
        ('h1',)

    """
    parent = context if context is not None else RenderContext()
    return replace(parent, styles=parent.styles + (style,)).with_flags(ordered=ordered, inside_quote=inside_quote)
