#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2view rendering."""

from md2view.options.base import BaseRendererOptions, CloneFrozenMixin
from md2view.options.render import RENDERER_SLOTS, ReferenceOpener, RenderConfig, RendererOverrides

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "RENDERER_SLOTS",
    "ReferenceOpener",
    "RenderConfig",
    "RendererOverrides",
]
