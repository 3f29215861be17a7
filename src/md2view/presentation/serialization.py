#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2view/presentation/serialization.py
"""JSON serialization for presentation trees.

Presentation trees are handed to a host layer that is often in another
process (a UI bridge, a snapshot test, the ``md2view`` CLI). This module turns
them into plain dictionaries and JSON.

Activation handlers are not serializable and are reported only as a
``pressable`` flag. Values that are not presentation nodes (host elements
passed through ``custom`` nodes or returned by overrides) are serialized as
opaque entries carrying their type name, plus the value itself for JSON
scalars.

Examples
--------
    >>> from md2view.presentation import TextLeaf
    >>> from md2view.presentation.serialization import presentation_to_json
    >>> print(presentation_to_json([TextLeaf(key="0", styles=("text",), children=("hi",))]))
    [{"node_type": "text-leaf", "key": "0", "styles": ["text"], "children": ["hi"]}]

"""

from __future__ import annotations

import json
from typing import Any, Sequence

from md2view.presentation.nodes import Container, PresentationNode, TextLeaf

_JSON_SCALARS = (bool, int, float, str)


def _serialize_child(child: Any) -> Any:
    if isinstance(child, str):
        return child
    return presentation_to_dict(child)


def _add_common_fields(result: dict[str, Any], node: PresentationNode) -> None:
    """Add props and the activation flag when present."""
    if node.props:
        result["props"] = {key: node.props[key] for key in sorted(node.props)}
    if node.on_press is not None:
        result["pressable"] = True


def _serialize_text_leaf(node: TextLeaf) -> dict[str, Any]:
    result: dict[str, Any] = {
        "node_type": node.kind,
        "key": node.key,
        "styles": list(node.styles),
        "children": [_serialize_child(child) for child in node.children],
    }
    _add_common_fields(result, node)
    return result


def _serialize_container(node: Container) -> dict[str, Any]:
    result: dict[str, Any] = {
        "node_type": node.kind,
        "variant": node.variant,
        "key": node.key,
        "styles": list(node.styles),
        "children": [_serialize_child(child) for child in node.children],
    }
    _add_common_fields(result, node)
    return result


def presentation_to_dict(node: Any) -> dict[str, Any]:
    """Convert one rendered value to a dictionary.

    Parameters
    ----------
    node : Any
        A presentation node or an opaque host value

    Returns
    -------
    dict
        Serialized representation

    """
    if isinstance(node, TextLeaf):
        return _serialize_text_leaf(node)
    if isinstance(node, Container):
        return _serialize_container(node)
    result: dict[str, Any] = {"node_type": "opaque", "type": type(node).__name__}
    if node is None or isinstance(node, _JSON_SCALARS):
        result["value"] = node
    return result


def presentation_to_json(nodes: Sequence[Any], indent: int | None = None) -> str:
    """Serialize a rendered tree (the root sequence) to a JSON string.

    Parameters
    ----------
    nodes : Sequence
        Root sequence returned by a render pass
    indent : int or None, default = None
        JSON indentation level

    Returns
    -------
    str
        JSON document

    """
    return json.dumps([presentation_to_dict(node) for node in nodes], indent=indent, ensure_ascii=False)
