#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2view/presentation/__init__.py
"""Presentation tree: the rendered output handed to the host UI layer."""

from __future__ import annotations

from md2view.presentation.debug import describe_node, log_presentation_tree
from md2view.presentation.nodes import Container, PresentationNode, PressHandler, TextLeaf, is_text_only
from md2view.presentation.serialization import presentation_to_dict, presentation_to_json

__all__ = [
    "Container",
    "PresentationNode",
    "PressHandler",
    "TextLeaf",
    "describe_node",
    "is_text_only",
    "log_presentation_tree",
    "presentation_to_dict",
    "presentation_to_json",
]
