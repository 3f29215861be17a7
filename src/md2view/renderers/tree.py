#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2view/renderers/tree.py
"""Presentation tree rendering from a syntax tree.

This module provides the TreeRenderer class, which walks a parsed Markdown
syntax tree top-down and produces the presentation tree consumed by a host UI
layer. The pass is a pure function of the syntax tree, the resolved style
table and the render configuration: rendering the same inputs twice yields
structurally equal trees.

The rendering process:

1. Each node is dispatched on its ``kind`` tag through a handler map
2. Handlers recurse into children under an immutable :class:`RenderContext`,
   cascading styles (headings, emphasis, links) as they go
3. Rendered children are classified as text-only or structured, which
   decides between a text leaf and a container
4. The final assembly goes through the pass's renderer slot table, so caller
   overrides and defaults are handled uniformly

Malformed input never halts a pass: null payloads and unknown kinds render to
nothing, and subtrees deeper than ``max_depth`` are dropped.

"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, Optional

from md2view.ast.nodes import SyntaxChild, SyntaxNode, SyntaxTree, is_null_payload
from md2view.constants import (
    KIND_BLOCK,
    KIND_CUSTOM,
    KIND_INLINE_CODE,
    KIND_LINK,
    KIND_LIST_ITEM,
    KIND_MEDIA,
    KIND_ORDERED_LIST,
    KIND_QUOTE,
    KIND_RULE,
    KIND_TEXT,
    KIND_UNORDERED_LIST,
    ROLE_CODE,
    ROLE_LINK,
    ROLE_RULE,
    ROLE_TEXT,
    STYLED_TEXT_KINDS,
)
from md2view.exceptions import RenderDepthError
from md2view.options.render import RenderConfig
from md2view.presentation.debug import log_presentation_tree
from md2view.presentation.nodes import Container, is_text_only
from md2view.renderers.base import BaseRenderer
from md2view.renderers.context import RenderContext, extend
from md2view.renderers.defaults import ResolvedRenderers, resolve_renderers
from md2view.styles import StyleTable, build_style_table

logger = logging.getLogger(__name__)

Handler = Callable[[SyntaxNode, str, int, RenderContext, int], Any]


class TreeRenderer(BaseRenderer):
    """Render syntax trees to presentation trees.

    Parameters
    ----------
    options : RenderConfig or None, default = None
        Render configuration; defaults are used when omitted
    styles : StyleTable or None, default = None
        Pre-resolved style table. When omitted it is resolved from
        ``options.markdown_styles`` and ``options.use_default_styles``.

    Examples
    --------
    Basic usage:

        >>> from md2view.ast import SyntaxNode, block
        >>> from md2view.renderers.tree import TreeRenderer
        >>> tree = [SyntaxNode("h1", ["Title"]), block("Hello ", SyntaxNode("strong", ["world"]))]
        >>> rendered = TreeRenderer().render(tree)
        >>> rendered[0].styles
        ('text', 'h1')

    """

    def __init__(self, options: RenderConfig | None = None, styles: StyleTable | None = None):
        """Initialize the renderer and resolve its slot table."""
        BaseRenderer._validate_options_type(options, RenderConfig, "tree")
        options = options or RenderConfig()
        super().__init__(options)
        self.options: RenderConfig = options
        self.styles: StyleTable = (
            styles if styles is not None else build_style_table(options.markdown_styles, options.use_default_styles)
        )
        self.renderers: ResolvedRenderers = resolve_renderers(options)
        self._handlers: dict[Optional[str], Handler] = self._build_handler_map()

    def _build_handler_map(self) -> dict[Optional[str], Handler]:
        """Map every supported kind tag to its handler."""
        handlers: dict[Optional[str], Handler] = {
            kind: partial(self._render_styled_text, role=kind) for kind in STYLED_TEXT_KINDS
        }
        handlers.update(
            {
                None: self._render_text_node,
                KIND_TEXT: self._render_text_node,
                KIND_RULE: self.render_rule,
                KIND_BLOCK: self.render_block,
                KIND_QUOTE: self.render_block_quote,
                KIND_UNORDERED_LIST: partial(self.render_list, ordered=False),
                KIND_ORDERED_LIST: partial(self.render_list, ordered=True),
                KIND_LIST_ITEM: self.render_list_item,
                KIND_LINK: self.render_link,
                KIND_MEDIA: self.render_media,
                KIND_INLINE_CODE: self.render_inline_code,
                KIND_CUSTOM: self.render_custom,
            }
        )
        return handlers

    # ------------------------------------------------------------------
    # Orchestration
    # ------------------------------------------------------------------

    def render(self, tree: SyntaxTree | SyntaxChild) -> list[Any]:
        """Render a full syntax tree.

        Parameters
        ----------
        tree : SyntaxTree
            Root sequence of syntax nodes and bare strings. A single node or
            string is treated as a one-element tree.

        Returns
        -------
        list
            Rendered root sequence, with dropped nodes omitted

        """
        if isinstance(tree, (str, SyntaxNode)):
            tree = [tree]
        content = self.render_nodes(tree, None, RenderContext(), depth=1)

        if self.options.debug:
            log_presentation_tree(content)

        return content

    def render_nodes(
        self, nodes: SyntaxTree, key: Optional[str], context: RenderContext, depth: int
    ) -> list[Any]:
        """Render a sibling sequence.

        Child keys are ``key + "_" + index`` (root nodes use their index).
        Nodes that render to nothing are omitted, but still count towards the
        indices of their later siblings.

        Parameters
        ----------
        nodes : SyntaxTree
            Siblings to render
        key : str or None
            Parent key, ``None`` at the root
        context : RenderContext
            Context shared by all siblings
        depth : int
            Nesting depth of the siblings (1 at the root)

        Returns
        -------
        list
            Rendered siblings

        """
        rendered: list[Any] = []
        for index, node in enumerate(nodes):
            child_key = f"{key}_{index}" if key is not None else str(index)
            result = self.render_node(node, child_key, index, context, depth)
            if result is not None:
                rendered.append(result)
        return rendered

    def render_node(
        self, node: Any, key: str, index: int, context: RenderContext, depth: int
    ) -> Any:
        """Dispatch one node to the renderer for its kind.

        Parameters
        ----------
        node : SyntaxNode, str or None
            Node to render
        key : str
            Render key for the node
        index : int
            Position among siblings
        context : RenderContext
            Current context
        depth : int
            Nesting depth of the node

        Returns
        -------
        Any
            Rendered value, or None when the node renders to nothing

        Raises
        ------
        RenderDepthError
            Only when ``fail_on_depth_exceeded`` is set and ``depth`` exceeds
            ``max_depth``

        """
        if is_null_payload(node):
            return None

        if depth > self.options.max_depth:
            if self.options.fail_on_depth_exceeded:
                raise RenderDepthError(self.options.max_depth, key)
            logger.warning("Dropping subtree at %s: nesting exceeds max_depth=%d", key, self.options.max_depth)
            return None

        if isinstance(node, str):
            return self.render_text(node, key, context, depth)

        if not isinstance(node, SyntaxNode):
            if self.options.debug:
                logger.debug("Value of type %s is not a syntax node", type(node).__name__)
            return None

        handler = self._handlers.get(node.kind)
        if handler is None:
            if self.options.debug:
                logger.debug("Node type %s is not supported", node.kind)
            return None

        return handler(node, key, index, context, depth)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def render_text(self, node: SyntaxChild, key: str, context: RenderContext, depth: int) -> Any:
        """Render a text run with the context's cascaded styles.

        A bare string or literal payload becomes the run's content; a node
        with children has them rendered under the same context.
        """
        styles = (ROLE_TEXT,) + context.styles
        if isinstance(node, str):
            content: tuple[Any, ...] = (node,)
        elif node.is_literal:
            content = (node.data,)
        else:
            content = tuple(self.render_nodes(node.children, key, context, depth + 1))
        return self.renderers.text(content, styles, key)

    def _render_text_node(self, node: SyntaxNode, key: str, index: int, context: RenderContext, depth: int) -> Any:
        return self.render_text(node, key, context, depth)

    def _render_styled_text(
        self, node: SyntaxNode, key: str, index: int, context: RenderContext, depth: int, role: str
    ) -> Any:
        return self.render_text(node, key, extend(context, role), depth)

    def render_inline_code(self, node: SyntaxNode, key: str, index: int, context: RenderContext, depth: int) -> Any:
        """Render inline code as a code-styled text run."""
        styles = (ROLE_CODE,) + context.styles
        return self.renderers.text((node.text_content(),), styles, key)

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def render_block(self, node: SyntaxNode, key: str, index: int, context: RenderContext, depth: int) -> Any:
        """Render a generic block, or a quote when the one-shot quote flag is set.

        The flag is cleared in the context handed to the children, so only a
        nested quote (which sets it again) receives quote styling beneath
        this one.
        """
        is_quote = context.inside_quote
        child_context = context.with_flags(inside_quote=False) if is_quote else context
        children = self.render_nodes(node.children, key, child_context, depth + 1)

        if is_quote:
            return self.renderers.block_quote(children, key)
        if is_text_only(children):
            return self.renderers.plain_block_text(children, key)
        return self.renderers.block(children, key)

    def render_block_quote(self, node: SyntaxNode, key: str, index: int, context: RenderContext, depth: int) -> Any:
        """Flag the context as quoted and render the node as a block."""
        return self.render_block(node, key, index, context.with_flags(inside_quote=True), depth)

    def render_rule(self, node: SyntaxNode, key: str, index: int, context: RenderContext, depth: int) -> Container:
        """Render a horizontal rule divider."""
        return Container(key=f"hr_{key}", styles=(ROLE_RULE,))

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def render_list(
        self, node: SyntaxNode, key: str, index: int, context: RenderContext, depth: int, ordered: bool
    ) -> Any:
        """Render list items under a context recording whether the list is ordered."""
        list_context = context.with_flags(ordered=ordered)
        children = self.render_nodes(node.children, key, list_context, depth + 1)
        return self.renderers.list(ordered, children, key)

    def render_list_item(self, node: SyntaxNode, key: str, index: int, context: RenderContext, depth: int) -> Any:
        """Render one item with its bullet; ``index`` is its position in the list."""
        children = self.render_nodes(node.children, key, context, depth + 1)
        bullet = self.renderers.bullet(context.ordered, index, key)
        return self.renderers.list_item(bullet, children, key, index)

    # ------------------------------------------------------------------
    # Links, media, custom
    # ------------------------------------------------------------------

    def render_link(self, node: SyntaxNode, key: str, index: int, context: RenderContext, depth: int) -> Any:
        """Render a link.

        Link content starts its own cascade with only the link style; the
        caller's running styles are not inherited.
        """
        link_context = extend(None, ROLE_LINK)
        children = self.render_nodes(node.children, key, link_context, depth + 1)
        return self.renderers.link(node.href, node.title, children, key)

    def render_media(self, node: SyntaxNode, key: str, index: int, context: RenderContext, depth: int) -> Any:
        """Render an image or other media reference."""
        return self.renderers.media(node.src, node.alt, node.title, key)

    def render_custom(self, node: SyntaxNode, key: str, index: int, context: RenderContext, depth: int) -> Any:
        """Pass a host-provided element through unchanged."""
        return node.element
