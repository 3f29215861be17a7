"""The major exported API for rendering Markdown to presentation trees."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2view/api.py
import logging
from typing import Any, Optional, Union

from md2view.ast.nodes import SyntaxChild, SyntaxTree
from md2view.options.render import RenderConfig
from md2view.parsers.markdown import MarkdownParser
from md2view.presentation.serialization import presentation_to_json
from md2view.renderers.tree import TreeRenderer
from md2view.styles import StyleTable, build_style_table

logger = logging.getLogger(__name__)


def _styles_changed(old: RenderConfig, new: RenderConfig) -> bool:
    return (
        old.use_default_styles != new.use_default_styles
        or dict(old.markdown_styles) != dict(new.markdown_styles)
    )


class MarkdownView:
    """A Markdown source bound to its parsed tree and resolved style table.

    The view caches the two expensive derivations of its inputs. The syntax
    tree is rebuilt only when the source text (or the inline parsing mode)
    changes, and the style table only when the style overrides change.

    Parameters
    ----------
    source : str or bytes, default ""
        Markdown source text
    config : RenderConfig, optional
        Render configuration; defaults are used when omitted
    parser : MarkdownParser, optional
        Parser adapter to use; a default ``MarkdownParser`` when omitted

    Examples
    --------
        >>> view = MarkdownView("# Title")
        >>> view.update(source="# Title")
        False
        >>> view.update(source="# Other")
        True
        >>> nodes = view.render()

    """

    def __init__(
        self,
        source: Union[str, bytes] = "",
        config: Optional[RenderConfig] = None,
        parser: Optional[MarkdownParser] = None,
    ):
        """Parse the source and resolve the style table."""
        self._config = config or RenderConfig()
        self._parser = parser or MarkdownParser()
        self._source = source
        self._tree = self._parse()
        self._styles = self._resolve_styles()

    @property
    def source(self) -> Union[str, bytes]:
        """Current Markdown source."""
        return self._source

    @property
    def config(self) -> RenderConfig:
        """Current render configuration."""
        return self._config

    @property
    def tree(self) -> list[SyntaxChild]:
        """Cached syntax tree for the current source."""
        return self._tree

    @property
    def styles(self) -> StyleTable:
        """Cached style table for the current configuration."""
        return self._styles

    def _parse(self) -> list[SyntaxChild]:
        return self._parser.parse(self._source, inline=self._config.parse_inline)

    def _resolve_styles(self) -> StyleTable:
        return build_style_table(self._config.markdown_styles, self._config.use_default_styles)

    def update(self, source: Optional[Union[str, bytes]] = None, config: Optional[RenderConfig] = None) -> bool:
        """Replace the source and/or configuration.

        Parameters
        ----------
        source : str or bytes, optional
            New Markdown source; unchanged when omitted
        config : RenderConfig, optional
            New configuration; unchanged when omitted

        Returns
        -------
        bool
            True if the rendered output may differ and ``render`` should be
            called again

        """
        new_source = self._source if source is None else source
        new_config = self._config if config is None else config
        old_config = self._config

        reparse = new_source != self._source or new_config.parse_inline != old_config.parse_inline
        restyle = _styles_changed(old_config, new_config)

        self._source = new_source
        self._config = new_config

        if reparse:
            logger.debug("Source changed, re-parsing")
            self._tree = self._parse()
        if restyle:
            logger.debug("Style overrides changed, re-resolving style table")
            self._styles = self._resolve_styles()

        return reparse or restyle or new_config != old_config

    def render(self) -> list[Any]:
        """Run a render pass over the cached tree.

        Returns
        -------
        list
            Presentation tree root sequence

        """
        return TreeRenderer(self._config, styles=self._styles).render(self._tree)

    def to_json(self, indent: Optional[int] = None) -> str:
        """Render and serialize the presentation tree to JSON."""
        return presentation_to_json(self.render(), indent=indent)


def render_markdown(source: Union[str, bytes], config: Optional[RenderConfig] = None) -> list[Any]:
    """Parse Markdown source and render it in one step.

    Parameters
    ----------
    source : str or bytes
        Markdown source text
    config : RenderConfig, optional
        Render configuration

    Returns
    -------
    list
        Presentation tree root sequence

    Raises
    ------
    ParsingError
        If the source cannot be tokenized
    RenderDepthError
        If nesting exceeds ``max_depth`` and ``fail_on_depth_exceeded`` is set

    Examples
    --------
        >>> nodes = render_markdown("Hello **world**")
        >>> nodes[0].key
        'block_0'

    """
    return MarkdownView(source, config).render()


def render_tree(tree: SyntaxTree, config: Optional[RenderConfig] = None) -> list[Any]:
    """Render a syntax tree built without the parser adapter.

    Parameters
    ----------
    tree : SyntaxTree
        Root sequence of syntax nodes and bare strings
    config : RenderConfig, optional
        Render configuration

    Returns
    -------
    list
        Presentation tree root sequence

    """
    return TreeRenderer(config).render(tree)
