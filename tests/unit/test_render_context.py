#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the render context and style cascade."""

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2view.renderers import RenderContext, extend

style_names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=8)


@pytest.mark.unit
class TestExtend:
    """Test non-mutating style cascade derivation."""

    def test_appends_in_order(self):
        """Test that extending twice yields both styles after the original ones."""
        base = RenderContext(styles=("h1",))

        result = extend(extend(base, "strong"), "em")

        assert result.styles == ("h1", "strong", "em")
        assert base.styles == ("h1",)

    def test_none_starts_fresh(self):
        """Test that an absent context starts a new cascade."""
        assert extend(None, "link") == RenderContext(styles=("link",))

    def test_flags_copied_from_parent(self):
        """Test that flags not given explicitly are inherited."""
        parent = RenderContext(ordered=True, inside_quote=True)

        child = extend(parent, "em")

        assert child.ordered is True
        assert child.inside_quote is True

    def test_explicit_flags_override(self):
        """Test that explicit flags replace the parent's values."""
        child = extend(RenderContext(ordered=True), "em", ordered=False, inside_quote=True)

        assert child.ordered is False
        assert child.inside_quote is True

    def test_context_is_frozen(self):
        """Test that contexts cannot be modified in place."""
        context = RenderContext()

        with pytest.raises(dataclasses.FrozenInstanceError):
            context.inside_quote = True  # type: ignore[misc]

    @given(st.lists(style_names, max_size=5), st.lists(style_names, max_size=5))
    def test_cascade_never_mutates(self, initial, additions):
        """Test that any chain of extensions leaves every ancestor unchanged."""
        base = RenderContext(styles=tuple(initial))
        contexts = [base]
        for style in additions:
            contexts.append(extend(contexts[-1], style))

        assert base.styles == tuple(initial)
        for depth, context in enumerate(contexts):
            assert context.styles == tuple(initial) + tuple(additions[:depth])


@pytest.mark.unit
class TestWithFlags:
    """Test flag replacement."""

    def test_unchanged_returns_same_instance(self):
        """Test that no changes return the context itself."""
        context = RenderContext(styles=("a",))

        assert context.with_flags() is context

    def test_clears_quote_flag(self):
        """Test deriving a context with the quote flag cleared."""
        quoted = RenderContext(styles=("a",), inside_quote=True)

        cleared = quoted.with_flags(inside_quote=False)

        assert cleared == RenderContext(styles=("a",))
        assert quoted.inside_quote is True
