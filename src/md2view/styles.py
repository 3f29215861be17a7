#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2view/styles.py
"""Named style tables and their resolution.

A style table maps a semantic role name (``h1``, ``link``, ``listItem``, ...)
to a style value, a flat mapping of host style properties. The renderer only
ever emits role *names*; hosts look the values up in the resolved table,
usually through :meth:`StyleTable.flatten`.

Resolution is shallow: an override for a role replaces the default for that
role wholesale. No property-level merge is performed.

"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional

StyleValue = Mapping[str, Any]

DEFAULT_STYLES: Mapping[str, StyleValue] = MappingProxyType(
    {
        "block": {"marginBottom": 10, "flexWrap": "wrap", "flexDirection": "row"},
        "blockQuote": {
            "borderLeftWidth": 5,
            "borderLeftColor": "#aaaaaa",
            "backgroundColor": "#cccccc",
            "paddingLeft": 10,
        },
        "h1": {"fontSize": 30, "marginTop": 20, "marginBottom": 8},
        "h2": {"fontSize": 20, "marginTop": 16, "marginBottom": 8},
        "h3": {"fontSize": 20, "marginTop": 16, "marginBottom": 8},
        "h4": {"fontSize": 20, "marginTop": 16, "marginBottom": 8},
        "h5": {"fontSize": 20, "marginTop": 12, "marginBottom": 6},
        "h6": {"fontSize": 20, "marginTop": 12, "marginBottom": 6},
        "hr": {"alignSelf": "stretch", "height": 1, "backgroundColor": "#333333", "marginVertical": 8},
        "text": {"alignSelf": "flex-start"},
        "strong": {"fontWeight": "bold"},
        "em": {"fontStyle": "italic"},
        "del": {"textDecorationLine": "line-through"},
        "u": {"textDecorationLine": "underline"},
        "linkWrapper": {"alignSelf": "flex-start"},
        "link": {"textDecorationLine": "underline", "alignSelf": "flex-start"},
        "list": {"marginBottom": 20},
        "listItem": {
            "flexDirection": "row",
            "justifyContent": "flex-start",
            "alignItems": "center",
            "marginVertical": 5,
        },
        "listItemContent": {"flexDirection": "row", "justifyContent": "flex-start", "alignItems": "flex-start"},
        "listItemTextContent": {},
        "listItemBullet": {"marginRight": 10},
        "listItemNumber": {"marginRight": 10},
        "imageWrapper": {"flex": 1, "flexDirection": "row", "justifyContent": "flex-start"},
        "image": {"flex": 1, "minWidth": 200, "height": 200},
        "code": {"backgroundColor": "#cccccc"},
    }
)


class StyleTable(Mapping[str, StyleValue]):
    """Read-only mapping from role name to style value.

    Built once per render pass and never mutated afterwards; both the table
    and each style value are exposed through read-only proxies.

    Parameters
    ----------
    styles : Mapping[str, Mapping], optional
        Role name to style properties

    """

    def __init__(self, styles: Optional[Mapping[str, StyleValue]] = None):
        """Freeze a copy of the given styles."""
        frozen = {role: MappingProxyType(dict(value)) for role, value in (styles or {}).items()}
        self._styles: Mapping[str, StyleValue] = MappingProxyType(frozen)

    def __getitem__(self, role: str) -> StyleValue:
        return self._styles[role]

    def __iter__(self) -> Iterator[str]:
        return iter(self._styles)

    def __len__(self) -> int:
        return len(self._styles)

    def __repr__(self) -> str:
        return f"StyleTable(roles={sorted(self._styles)!r})"

    def flatten(self, refs: Iterable[str]) -> dict[str, Any]:
        """Merge the referenced styles in order into one property dict.

        Later references win over earlier ones, so a cascaded style such as
        ``strong`` applied after ``text`` overrides the properties they share.
        Roles missing from the table contribute nothing.

        Parameters
        ----------
        refs : Iterable[str]
            Style role names, in application order

        Returns
        -------
        dict
            Flattened style properties

        """
        merged: dict[str, Any] = {}
        for role in refs:
            value = self._styles.get(role)
            if value:
                merged.update(value)
        return merged


def resolve_style_table(
    defaults: Optional[Mapping[str, StyleValue]] = None,
    overrides: Optional[Mapping[str, StyleValue]] = None,
) -> StyleTable:
    """Merge a default table with caller overrides.

    Parameters
    ----------
    defaults : Mapping, optional
        Default role table (empty when omitted)
    overrides : Mapping, optional
        Caller overrides; each entry replaces the default for its role

    Returns
    -------
    StyleTable
        Resolved, read-only table

    Examples
    --------
        >>> table = resolve_style_table(DEFAULT_STYLES, {"h1": {"fontSize": 40}})
        >>> dict(table["h1"])
        {'fontSize': 40}

    """
    merged: dict[str, StyleValue] = dict(defaults or {})
    merged.update(overrides or {})
    return StyleTable(merged)


def build_style_table(markdown_styles: Optional[Mapping[str, StyleValue]], use_default_styles: bool) -> StyleTable:
    """Resolve the table for a render configuration.

    Parameters
    ----------
    markdown_styles : Mapping, optional
        Caller override table
    use_default_styles : bool
        Whether :data:`DEFAULT_STYLES` seeds the table

    Returns
    -------
    StyleTable
        Resolved table

    """
    return resolve_style_table(DEFAULT_STYLES if use_default_styles else None, markdown_styles)
