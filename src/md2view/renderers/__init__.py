#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2view/renderers/__init__.py
"""Syntax tree renderers and the rendering context."""

from md2view.renderers.base import BaseRenderer
from md2view.renderers.context import RenderContext, extend
from md2view.renderers.defaults import DefaultRenderers, ResolvedRenderers, open_reference_safely, resolve_renderers
from md2view.renderers.tree import TreeRenderer

__all__ = [
    "BaseRenderer",
    "DefaultRenderers",
    "RenderContext",
    "ResolvedRenderers",
    "TreeRenderer",
    "extend",
    "open_reference_safely",
    "resolve_renderers",
]
