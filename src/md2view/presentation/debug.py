#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2view/presentation/debug.py
"""Debug dump of rendered presentation trees."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from md2view.presentation.nodes import Container, PresentationNode

logger = logging.getLogger(__name__)


def describe_node(node: Any) -> str:
    """Return the one-line label used in tree dumps (``"<key> - <kind>"``)."""
    if isinstance(node, Container):
        return f"{node.key} - {node.kind}:{node.variant}"
    if isinstance(node, PresentationNode):
        return f"{node.key} - {node.kind}"
    return f"? - {type(node).__name__}"


def log_presentation_tree(nodes: Sequence[Any], log: logging.Logger | None = None, _depth: int = 0) -> None:
    """Log one line per rendered node, depth first.

    Reads the tree only; the rendered values are never modified.

    Parameters
    ----------
    nodes : Sequence
        Rendered sequence (the root list or a node's children)
    log : logging.Logger, optional
        Destination logger, defaults to this module's logger

    """
    log = log or logger
    if _depth == 0:
        log.debug("==== LOGGING NODE TREE ===")
    for node in nodes:
        if node is None or isinstance(node, str):
            continue
        log.debug("%s%s", "  " * _depth, describe_node(node))
        if isinstance(node, PresentationNode) and node.children:
            log_presentation_tree(node.children, log, _depth + 1)
