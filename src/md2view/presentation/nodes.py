#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2view/presentation/nodes.py
"""Presentation tree node classes.

The presentation tree is the output of a render pass and is handed to the
host UI layer, which owns it from then on. Every node is an explicit tagged
variant carrying a non-optional ``kind`` discriminant:

    - :class:`TextLeaf` (``kind == "text-leaf"``) holds inline text: literal
      strings and nested text leaves
    - :class:`Container` (``kind == "container"``) holds structured children
      and is further tagged by ``variant``: ``generic``, ``pressable`` or
      ``media``

Nodes are frozen dataclasses. ``on_press`` handlers are excluded from
equality so that two passes over the same input compare structurally equal.

"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping, Optional, Sequence

from md2view.constants import (
    CONTAINER,
    TEXT_LEAF,
    VARIANT_GENERIC,
    ContainerVariant,
    PresentationKind,
    StyleRef,
)

PressHandler = Callable[[], Any]


class PresentationNode(ABC):
    """Base class for rendered output nodes.

    Parameters
    ----------
    key : str
        Stable render key, unique among siblings
    styles : tuple of str
        Style role references, applied in order
    children : tuple
        Rendered children
    props : Mapping
        Additional host properties (link target, media source, ...)
    on_press : callable or None
        Activation handler for pressable output

    """

    kind: PresentationKind
    key: str
    styles: tuple[StyleRef, ...]
    children: tuple[Any, ...]
    props: Mapping[str, Any]
    on_press: Optional[PressHandler]

    def walk(self) -> Iterator[PresentationNode]:
        """Yield this node and every presentation node beneath it, depth first."""
        yield self
        for child in self.children:
            if isinstance(child, PresentationNode):
                yield from child.walk()

    def text(self) -> str:
        """Concatenate every literal string beneath this node."""
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, str):
                parts.append(child)
            elif isinstance(child, PresentationNode):
                parts.append(child.text())
        return "".join(parts)

    def press(self) -> None:
        """Invoke the activation handler, if any."""
        if self.on_press is not None:
            self.on_press()


@dataclass(frozen=True)
class TextLeaf(PresentationNode):
    """Inline text run.

    Children are literal strings and nested text-compatible values. A block
    whose rendered children are all text collapses into one of these so that
    inline flow is preserved.
    """

    key: str
    styles: tuple[StyleRef, ...] = ()
    children: tuple[Any, ...] = ()
    props: Mapping[str, Any] = field(default_factory=dict)
    on_press: Optional[PressHandler] = field(default=None, compare=False, repr=False)
    kind: PresentationKind = field(default=TEXT_LEAF, init=False)


@dataclass(frozen=True)
class Container(PresentationNode):
    """Structured container.

    ``variant`` selects the host primitive: a generic view, a pressable
    view, or a media leaf (which has no children and carries its source in
    ``props``).
    """

    key: str
    variant: ContainerVariant = VARIANT_GENERIC
    styles: tuple[StyleRef, ...] = ()
    children: tuple[Any, ...] = ()
    props: Mapping[str, Any] = field(default_factory=dict)
    on_press: Optional[PressHandler] = field(default=None, compare=False, repr=False)
    kind: PresentationKind = field(default=CONTAINER, init=False)


def is_text_only(nodes: Sequence[Any]) -> bool:
    """Report whether every rendered node is a text leaf.

    An empty sequence is text-only so that an empty block can collapse to an
    empty text leaf. Values that are not presentation nodes (override output,
    ``None``, anything lacking a discriminant) make the whole verdict False;
    the classifier never raises.

    Parameters
    ----------
    nodes : Sequence
        Rendered children

    Returns
    -------
    bool
        True iff all elements are text leaves

    """
    try:
        iterator = iter(nodes)
    except TypeError:
        return False
    for node in iterator:
        if not isinstance(node, PresentationNode) or node.kind != TEXT_LEAF:
            return False
    return True
