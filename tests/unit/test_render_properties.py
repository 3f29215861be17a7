#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Property-based tests for the tree renderer.

Random syntax trees, including unknown kinds, null payloads and missing
attributes, are rendered to check that a pass never raises, is
deterministic, and produces unique keys among siblings.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2view.ast import SyntaxNode
from md2view.options import RenderConfig
from md2view.parsers import parse_markdown
from md2view.presentation import PresentationNode
from md2view.renderers import TreeRenderer

KINDS = [
    None,
    "text",
    "h1",
    "h3",
    "hr",
    "div",
    "ul",
    "ol",
    "li",
    "a",
    "img",
    "em",
    "strong",
    "del",
    "u",
    "code",
    "blockquote",
    "custom",
    "foobar",
]

leaves = st.one_of(
    st.text(max_size=8),
    st.sampled_from(["null", "undefined", ""]),
    st.none(),
)


def _node(children):
    return st.builds(
        SyntaxNode,
        kind=st.sampled_from(KINDS),
        data=st.one_of(st.lists(children, max_size=4), st.text(max_size=6)),
        href=st.one_of(st.none(), st.just("https://example.com")),
        src=st.one_of(st.none(), st.just("a.png")),
    )


syntax_trees = st.lists(st.recursive(leaves, _node, max_leaves=25), max_size=5)


def _never_open(href):
    raise AssertionError("rendering must not activate links")


CONFIG = RenderConfig(open_reference=_never_open)


def _assert_unique_sibling_keys(nodes):
    keys = [node.key for node in nodes if isinstance(node, PresentationNode)]
    assert len(keys) == len(set(keys))
    for node in nodes:
        if isinstance(node, PresentationNode):
            _assert_unique_sibling_keys(node.children)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestRenderProperties:
    """Property-based checks over random syntax trees."""

    @given(syntax_trees)
    def test_never_raises_and_is_deterministic(self, tree):
        """Test that any tree renders without error and identically twice."""
        renderer = TreeRenderer(CONFIG)

        first = renderer.render(tree)
        second = TreeRenderer(CONFIG).render(tree)

        assert first == second
        assert None not in first

    @given(syntax_trees)
    def test_sibling_keys_unique(self, tree):
        """Test that rendered siblings never share a key."""
        _assert_unique_sibling_keys(TreeRenderer(CONFIG).render(tree))

    @given(syntax_trees, st.integers(min_value=1, max_value=4))
    def test_depth_limit_respected(self, tree, max_depth):
        """Test that no rendered key is nested deeper than the limit allows."""
        result = TreeRenderer(CONFIG.create_updated(max_depth=max_depth)).render(tree)

        for root in result:
            if isinstance(root, PresentationNode):
                for node in root.walk():
                    # one index per nesting level, plus at most one role prefix
                    assert node.key.count("_") <= max_depth

    @given(st.text(max_size=200))
    def test_arbitrary_markdown_renders(self, source):
        """Test that any Markdown text parses and renders without error."""
        tree = parse_markdown(source)

        assert isinstance(TreeRenderer(CONFIG).render(tree), list)
