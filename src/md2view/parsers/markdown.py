#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2view/parsers/markdown.py
"""Markdown to syntax tree conversion.

This module turns Markdown source into the tagged syntax tree consumed by the
rendering engine. Tokenizing is delegated to mistune (run with
``renderer=None`` so it yields its token stream); the adapter maps each token
onto a :class:`~md2view.ast.nodes.SyntaxNode` kind tag.

Token types the adapter does not know are kept as nodes tagged with the token
type, so the renderer's unknown-kind handling decides what happens to them.

"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Union

import mistune

from md2view.ast.nodes import SyntaxChild, SyntaxNode
from md2view.constants import (
    BLOCK_SOURCE_SUFFIX,
    DEFAULT_MARKDOWN_PLUGINS,
    KIND_BLOCK,
    KIND_EMPHASIS,
    KIND_INLINE_CODE,
    KIND_LINK,
    KIND_LIST_ITEM,
    KIND_MEDIA,
    KIND_ORDERED_LIST,
    KIND_QUOTE,
    KIND_RULE,
    KIND_STRIKETHROUGH,
    KIND_STRONG,
    KIND_UNORDERED_LIST,
)
from md2view.exceptions import ParsingError, ValidationError

logger = logging.getLogger(__name__)

ParsedChild = Union[SyntaxChild, None]


class MarkdownParser:
    r"""Parse Markdown source into a syntax tree.

    Parameters
    ----------
    plugins : iterable of str, default = ("strikethrough",)
        mistune plugin names to enable

    Examples
    --------
    Block parsing:

        >>> tree = MarkdownParser().parse("# Hello\n\nThis is **bold**.")
        >>> [node.kind for node in tree]
        ['h1', 'div']

    Inline parsing:

        >>> MarkdownParser().parse("*hi* there", inline=True)[1]
        ' there'

    """

    def __init__(self, plugins: Iterable[str] = DEFAULT_MARKDOWN_PLUGINS):
        """Initialize the parser and build the mistune instance."""
        self.plugins = tuple(plugins)
        self._markdown = mistune.create_markdown(renderer=None, plugins=list(self.plugins))

    def parse(self, source: Union[str, bytes], inline: bool = False) -> list[SyntaxChild]:
        """Parse Markdown source.

        Parameters
        ----------
        source : str or bytes
            Markdown text; bytes are decoded as UTF-8
        inline : bool, default = False
            Run only the inline grammar, so the result holds text runs and
            inline kinds but no blocks

        Returns
        -------
        list
            Root sequence of syntax nodes and bare strings

        Raises
        ------
        ValidationError
            If ``source`` is neither text nor bytes
        ParsingError
            If the source cannot be decoded or tokenized

        """
        text = self._load_text(source)

        try:
            if inline:
                tokens = self._markdown.inline(text, {"ref_links": {}})
            else:
                # Terminates a trailing paragraph that has no final newline
                tokens, _state = self._markdown.parse(text + BLOCK_SOURCE_SUFFIX)
        except Exception as e:
            raise ParsingError(
                f"Failed to tokenize Markdown source: {e}",
                parsing_stage="inline" if inline else "block",
                original_error=e,
            ) from e

        tree = self._process_tokens(tokens)
        logger.debug("Parsed %d root node(s) from %d character(s)", len(tree), len(text))
        return tree

    @staticmethod
    def _load_text(source: Union[str, bytes]) -> str:
        if isinstance(source, str):
            return source
        if isinstance(source, (bytes, bytearray)):
            try:
                return bytes(source).decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParsingError("Markdown source is not valid UTF-8", parsing_stage="decode", original_error=e) from e
        raise ValidationError(
            f"Markdown source must be str or bytes, got {type(source).__name__}",
            parameter_name="source",
            parameter_value=source,
        )

    # ------------------------------------------------------------------
    # Token processing
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: Optional[list[dict[str, Any]]]) -> list[SyntaxChild]:
        """Convert a token list, dropping tokens that map to nothing."""
        nodes: list[SyntaxChild] = []
        for token in tokens or ():
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> ParsedChild:
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "paragraph": self._handle_block,
            "block_text": self._handle_block,
            "heading": self._handle_heading,
            "thematic_break": self._handle_rule,
            "block_quote": self._handle_quote,
            "list": self._handle_list,
            "list_item": self._handle_list_item,
            "block_code": self._handle_block_code,
            "block_html": self._handle_raw,
            "blank_line": self._handle_blank,
            "text": self._handle_raw,
            "inline_html": self._handle_raw,
            "softbreak": self._handle_break,
            "linebreak": self._handle_break,
            "emphasis": self._handle_emphasis,
            "strong": self._handle_strong,
            "strikethrough": self._handle_strikethrough,
            "codespan": self._handle_codespan,
            "link": self._handle_link,
            "image": self._handle_image,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        logger.debug("Keeping unrecognized token type %r as an unknown node", token_type)
        return SyntaxNode(token_type or None, self._process_tokens(token.get("children")))

    def _children(self, token: dict[str, Any]) -> list[SyntaxChild]:
        return self._process_tokens(token.get("children"))

    def _handle_block(self, token: dict[str, Any]) -> SyntaxNode:
        return SyntaxNode(KIND_BLOCK, self._children(token))

    def _handle_heading(self, token: dict[str, Any]) -> SyntaxNode:
        level = token.get("attrs", {}).get("level", 1)
        level = min(max(int(level), 1), 6)
        return SyntaxNode(f"h{level}", self._children(token))

    def _handle_rule(self, token: dict[str, Any]) -> SyntaxNode:
        return SyntaxNode(KIND_RULE)

    def _handle_quote(self, token: dict[str, Any]) -> SyntaxNode:
        return SyntaxNode(KIND_QUOTE, self._children(token))

    def _handle_list(self, token: dict[str, Any]) -> SyntaxNode:
        attrs = token.get("attrs", {})
        ordered = bool(attrs.get("ordered", False))
        return SyntaxNode(KIND_ORDERED_LIST if ordered else KIND_UNORDERED_LIST, self._children(token))

    def _handle_list_item(self, token: dict[str, Any]) -> SyntaxNode:
        return SyntaxNode(KIND_LIST_ITEM, self._children(token))

    def _handle_block_code(self, token: dict[str, Any]) -> SyntaxNode:
        """Fenced and indented code become a block holding one code run."""
        raw = token.get("raw", "").rstrip("\n")
        info = token.get("attrs", {}).get("info")
        code = SyntaxNode(KIND_INLINE_CODE, raw, metadata={"info": info} if info else {})
        return SyntaxNode(KIND_BLOCK, [code])

    def _handle_raw(self, token: dict[str, Any]) -> Optional[str]:
        # Raw HTML is shown as its source text
        return token.get("raw") or None

    def _handle_blank(self, token: dict[str, Any]) -> None:
        return None

    def _handle_break(self, token: dict[str, Any]) -> str:
        return "\n"

    def _handle_emphasis(self, token: dict[str, Any]) -> SyntaxNode:
        return SyntaxNode(KIND_EMPHASIS, self._children(token))

    def _handle_strong(self, token: dict[str, Any]) -> SyntaxNode:
        return SyntaxNode(KIND_STRONG, self._children(token))

    def _handle_strikethrough(self, token: dict[str, Any]) -> SyntaxNode:
        return SyntaxNode(KIND_STRIKETHROUGH, self._children(token))

    def _handle_codespan(self, token: dict[str, Any]) -> SyntaxNode:
        return SyntaxNode(KIND_INLINE_CODE, token.get("raw", ""))

    def _handle_link(self, token: dict[str, Any]) -> SyntaxNode:
        attrs = token.get("attrs", {})
        return SyntaxNode(KIND_LINK, self._children(token), href=attrs.get("url"), title=attrs.get("title"))

    def _handle_image(self, token: dict[str, Any]) -> SyntaxNode:
        attrs = token.get("attrs", {})
        alt = SyntaxNode(None, self._children(token)).text_content()
        return SyntaxNode(KIND_MEDIA, src=attrs.get("url"), alt=alt, title=attrs.get("title"))


def parse_markdown(source: Union[str, bytes], inline: bool = False) -> list[SyntaxChild]:
    """Parse Markdown with the default plugin set.

    Parameters
    ----------
    source : str or bytes
        Markdown text
    inline : bool, default = False
        Parse with the inline grammar only

    Returns
    -------
    list
        Root sequence of syntax nodes and bare strings

    """
    return MarkdownParser().parse(source, inline=inline)
