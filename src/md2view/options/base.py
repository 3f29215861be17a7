"""Base classes for renderer options.

This module defines the foundation classes for md2view configuration objects.
Options are frozen dataclasses; modified copies are derived with
:meth:`CloneFrozenMixin.create_updated`.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2view/options/base.py
from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from md2view.constants import DEFAULT_DEBUG


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def field_help(cls) -> dict[str, str]:
        """Return the ``help`` metadata of every field, keyed by field name."""
        return {f.name: f.metadata.get("help", "") for f in fields(cls)}  # type: ignore[arg-type]


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Parameters
    ----------
    debug : bool, default=False
        Emit dispatch diagnostics (unsupported node kinds) and a dump of the
        finished presentation tree through the ``md2view`` loggers.

    Notes
    -----
    Subclasses should define renderer-specific options as frozen dataclass fields.

    """

    debug: bool = field(
        default=DEFAULT_DEBUG,
        metadata={
            "help": "Log unsupported node kinds and dump the rendered tree at DEBUG level",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate base options (nothing to check at this level)."""
        pass
