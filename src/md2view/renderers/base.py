#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2view/renderers/base.py
"""Base classes for syntax tree renderers.

This module defines the abstract base class that presentation renderers
inherit from. The BaseRenderer provides a consistent interface for turning a
syntax tree into rendered output, plus shared option validation.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from md2view.ast.nodes import SyntaxTree
from md2view.exceptions import InvalidOptionsError
from md2view.options.base import BaseRendererOptions
from md2view.presentation.serialization import presentation_to_json


class BaseRenderer(ABC):
    """Abstract base class for syntax tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer-specific options

    Examples
    --------
    Creating a custom renderer:

        >>> from md2view.renderers.base import BaseRenderer
        >>>
        >>> class KindCounter(BaseRenderer):
        ...     def render(self, tree):
        ...         return [getattr(node, "kind", "text") for node in tree]

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, tree: SyntaxTree) -> list[Any]:
        """Render the syntax tree into a sequence of output values.

        Parameters
        ----------
        tree : SyntaxTree
            Root sequence of syntax nodes and bare strings

        Returns
        -------
        list
            Rendered root sequence

        """
        pass

    def render_to_json(self, tree: SyntaxTree, indent: int | None = None) -> str:
        """Render the tree and serialize the result to JSON.

        Parameters
        ----------
        tree : SyntaxTree
            Root sequence to render
        indent : int or None, default = None
            JSON indentation level

        Returns
        -------
        str
            JSON representation of the rendered tree

        """
        return presentation_to_json(self.render(tree), indent=indent)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
