#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for style table resolution."""

import pytest

from md2view.styles import DEFAULT_STYLES, StyleTable, build_style_table, resolve_style_table


@pytest.mark.unit
class TestStyleResolution:
    """Test merging defaults with overrides."""

    def test_defaults_only(self):
        """Test the default table is used when there are no overrides."""
        table = build_style_table(None, use_default_styles=True)

        assert set(table) == set(DEFAULT_STYLES)
        assert dict(table["strong"]) == {"fontWeight": "bold"}

    def test_override_replaces_role_wholesale(self):
        """Test that an override replaces the default for its role without merging."""
        table = build_style_table({"h1": {"color": "red"}}, use_default_styles=True)

        assert dict(table["h1"]) == {"color": "red"}
        assert dict(table["h2"]) == dict(DEFAULT_STYLES["h2"])

    def test_new_roles_added(self):
        """Test that overrides may introduce roles absent from the defaults."""
        table = build_style_table({"custom": {"margin": 1}}, use_default_styles=True)

        assert "custom" in table

    def test_without_defaults(self):
        """Test that disabling defaults leaves only the overrides."""
        table = build_style_table({"h1": {"fontSize": 12}}, use_default_styles=False)

        assert list(table) == ["h1"]

    def test_empty_without_defaults(self):
        """Test an empty table when nothing is configured."""
        assert len(resolve_style_table()) == 0

    def test_overrides_copied(self):
        """Test that later changes to the caller's mapping do not leak into the table."""
        overrides = {"h1": {"fontSize": 12}}
        table = build_style_table(overrides, use_default_styles=False)

        overrides["h1"]["fontSize"] = 99

        assert table["h1"]["fontSize"] == 12


@pytest.mark.unit
class TestStyleTable:
    """Test the read-only table."""

    def test_read_only(self):
        """Test that the table and its values reject assignment."""
        table = StyleTable({"h1": {"fontSize": 30}})

        with pytest.raises(TypeError):
            table["h1"] = {}  # type: ignore[index]
        with pytest.raises(TypeError):
            table["h1"]["fontSize"] = 1  # type: ignore[index]

    def test_flatten_later_wins(self):
        """Test that flattening applies references in order."""
        table = StyleTable({"text": {"color": "black", "alignSelf": "flex-start"}, "link": {"color": "blue"}})

        assert table.flatten(["text", "link"]) == {"color": "blue", "alignSelf": "flex-start"}

    def test_flatten_ignores_missing_roles(self):
        """Test that unknown role references contribute nothing."""
        assert StyleTable({"text": {"a": 1}}).flatten(["missing", "text"]) == {"a": 1}

    def test_repr(self):
        """Test the table repr lists roles."""
        assert repr(StyleTable({"b": {}, "a": {}})) == "StyleTable(roles=['a', 'b'])"
