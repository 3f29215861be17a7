#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2view/renderers/defaults.py
"""Default renderer slots and per-pass slot resolution.

Each overridable node kind has one *slot*: a function that assembles the
output for that kind from already-rendered children. :class:`DefaultRenderers`
implements every slot; :func:`resolve_renderers` builds the table used by a
pass, taking the caller override where one is set and the default otherwise.
Override-versus-default is therefore a single lookup made once per pass.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Optional, Sequence

from md2view.constants import (
    INLINE_TEXT_PROPS,
    ROLE_BLOCK,
    ROLE_BLOCK_QUOTE,
    ROLE_IMAGE,
    ROLE_IMAGE_WRAPPER,
    ROLE_LINK_WRAPPER,
    ROLE_LIST,
    ROLE_LIST_ITEM,
    ROLE_LIST_ITEM_BULLET,
    ROLE_LIST_ITEM_CONTENT,
    ROLE_LIST_ITEM_NUMBER,
    ROLE_LIST_ITEM_TEXT_CONTENT,
    VARIANT_MEDIA,
    VARIANT_PRESSABLE,
    StyleRef,
)
from md2view.options.render import RENDERER_SLOTS, ReferenceOpener, RenderConfig
from md2view.presentation.nodes import Container, PressHandler, TextLeaf, is_text_only

logger = logging.getLogger(__name__)

Slot = Callable[..., Any]

# Overrides for these slots take no render key; the key is applied to the
# defaults only.
KEYLESS_SLOTS = ("media", "bullet")


def open_reference_safely(opener: ReferenceOpener, href: str) -> None:
    """Invoke the reference opener, absorbing any failure.

    Broken or unsupported link targets must not propagate out of an
    activation handler; the failure is logged and dropped.

    Parameters
    ----------
    opener : callable
        Reference-opening collaborator
    href : str
        Link target

    """
    try:
        opener(href)
    except Exception as exc:
        logger.warning("Could not open reference %s: %s", href, exc)


class DefaultRenderers:
    """Built-in implementation of every renderer slot.

    Parameters
    ----------
    config : RenderConfig
        Pass configuration (inline mode, bullet glyph, reference opener)

    """

    def __init__(self, config: RenderConfig):
        """Bind the slot implementations to a configuration."""
        self.config = config

    def _press_handler(self, href: Optional[str]) -> Optional[PressHandler]:
        if not href:
            return None
        return partial(open_reference_safely, self.config.open_reference, href)

    def media(self, src: Optional[str], alt: Optional[str], title: Optional[str], key: str) -> Container:
        """Wrap a media leaf in a generic image container."""
        leaf = Container(
            key=f"image_{key}",
            variant=VARIANT_MEDIA,
            styles=(ROLE_IMAGE,),
            props={"src": src, "alt": alt, "title": title},
        )
        return Container(key=f"imageWrapper_{key}", styles=(ROLE_IMAGE_WRAPPER,), children=(leaf,))

    def link(self, href: Optional[str], title: Optional[str], children: Sequence[Any], key: str) -> Any:
        """Collapse text-only link content to a text leaf, else a pressable container."""
        props = {"href": href, "title": title}
        if is_text_only(children):
            return TextLeaf(
                key=f"linkWrapper_{key}",
                styles=(ROLE_LINK_WRAPPER,),
                children=tuple(children),
                props=props,
                on_press=self._press_handler(href),
            )
        return Container(
            key=f"linkWrapper_{key}",
            variant=VARIANT_PRESSABLE,
            styles=(ROLE_LINK_WRAPPER,),
            children=tuple(children),
            props=props,
            on_press=self._press_handler(href),
        )

    def list(self, ordered: bool, children: Sequence[Any], key: str) -> Container:
        """Wrap rendered items in a list container."""
        return Container(key=f"list_{key}", styles=(ROLE_LIST,), children=tuple(children), props={"ordered": ordered})

    def bullet(self, ordered: bool, index: int, key: str) -> TextLeaf:
        """Render the item prefix: ``"<index+1>."`` when ordered, the bullet glyph otherwise."""
        if ordered:
            return TextLeaf(key=f"listBullet_{key}", styles=(ROLE_LIST_ITEM_NUMBER,), children=(f"{index + 1}.",))
        return TextLeaf(key=f"listBullet_{key}", styles=(ROLE_LIST_ITEM_BULLET,), children=(self.config.bullet_glyph,))

    def list_item(self, bullet: Any, children: Sequence[Any], key: str, index: int) -> Container:
        """Place the bullet beside a text or structured item body."""
        if is_text_only(children):
            body: Any = TextLeaf(
                key=f"listItemContent_{key}",
                styles=(ROLE_LIST_ITEM_CONTENT, ROLE_LIST_ITEM_TEXT_CONTENT),
                children=tuple(children),
            )
        else:
            body = Container(key=f"listItemContent_{key}", styles=(ROLE_LIST_ITEM_CONTENT,), children=tuple(children))
        parts = tuple(part for part in (bullet, body) if part is not None)
        return Container(key=f"listItem_{key}", styles=(ROLE_LIST_ITEM,), children=parts, props={"index": index})

    def block(self, children: Sequence[Any], key: str) -> Container:
        """Wrap structured block content in a generic container."""
        return Container(key=f"block_{key}", styles=(ROLE_BLOCK,), children=tuple(children))

    def block_quote(self, children: Sequence[Any], key: str) -> Container:
        """Wrap quoted content in a quote-styled container.

        Text-only content is gathered into a single text leaf first so that it
        flows inline inside the quote box.
        """
        if is_text_only(children):
            body: tuple[Any, ...] = (TextLeaf(key=f"blockQuoteText_{key}", children=tuple(children)),)
        else:
            body = tuple(children)
        return Container(key=f"blockQuote_{key}", styles=(ROLE_BLOCK, ROLE_BLOCK_QUOTE), children=body)

    def plain_block_text(self, children: Sequence[Any], key: str) -> TextLeaf:
        """Collapse a text-only block to one text leaf."""
        props = dict(INLINE_TEXT_PROPS) if self.config.render_inline else {}
        return TextLeaf(key=f"block_{key}", styles=(ROLE_BLOCK,), children=tuple(children), props=props)

    def text(self, content: Sequence[Any], styles: tuple[StyleRef, ...], key: str) -> TextLeaf:
        """Render a text run with the cascaded styles."""
        return TextLeaf(key=key, styles=styles, children=tuple(content))


def _call_without_key(override: Slot, *args: Any) -> Any:
    return override(*args[:-1])


@dataclass(frozen=True)
class ResolvedRenderers:
    """Slot table for one render pass; each entry is an override or the default."""

    media: Slot
    link: Slot
    list: Slot
    list_item: Slot
    bullet: Slot
    block: Slot
    block_quote: Slot
    plain_block_text: Slot
    text: Slot


def resolve_renderers(config: RenderConfig) -> ResolvedRenderers:
    """Build the slot table for a pass.

    Overrides for the media and bullet slots are called without the render
    key, as ``media(src, alt, title)`` and ``bullet(ordered, index)``.

    Parameters
    ----------
    config : RenderConfig
        Pass configuration carrying the overrides

    Returns
    -------
    ResolvedRenderers
        One callable per slot

    """
    defaults = DefaultRenderers(config)
    overrides = config.overrides
    table: dict[str, Slot] = {}
    for slot in RENDERER_SLOTS:
        override = getattr(overrides, slot)
        if override is None:
            table[slot] = getattr(defaults, slot)
        elif slot in KEYLESS_SLOTS:
            table[slot] = partial(_call_without_key, override)
        else:
            table[slot] = override
    return ResolvedRenderers(**table)
