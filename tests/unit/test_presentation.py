#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for presentation nodes, classification, serialization and debug dumps."""

import json
import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2view.presentation import (
    Container,
    TextLeaf,
    describe_node,
    is_text_only,
    log_presentation_tree,
    presentation_to_dict,
    presentation_to_json,
)

text_leaves = st.builds(TextLeaf, key=st.text(max_size=5), children=st.lists(st.text(max_size=5)).map(tuple))


@pytest.mark.unit
class TestTextOnlyClassifier:
    """Test the text-only classification of rendered children."""

    def test_empty_is_text_only(self):
        """Test that an empty sequence is text-only."""
        assert is_text_only([]) is True

    def test_all_text(self):
        """Test that a sequence of text leaves is text-only."""
        leaves = [TextLeaf(key=str(i), children=("x",)) for i in range(3)]

        assert is_text_only(leaves) is True

    def test_container_present(self):
        """Test that any container makes the sequence structured."""
        assert is_text_only([TextLeaf(key="0"), Container(key="1")]) is False

    @pytest.mark.parametrize("value", ["raw string", None, 42, {"kind": "text-leaf"}, object()])
    def test_foreign_values_are_not_text(self, value):
        """Test that values without a discriminant are never text."""
        assert is_text_only([TextLeaf(key="0"), value]) is False

    def test_non_iterable_is_not_text_only(self):
        """Test that a non-sequence input is classified conservatively."""
        assert is_text_only(None) is False  # type: ignore[arg-type]

    @given(st.lists(text_leaves, max_size=6), st.integers(min_value=0, max_value=6))
    def test_any_container_breaks_text_only(self, leaves, position):
        """Test that inserting a container anywhere flips the verdict."""
        assert is_text_only(leaves) is True

        mixed = list(leaves)
        mixed.insert(min(position, len(mixed)), Container(key="c"))

        assert is_text_only(mixed) is False


@pytest.mark.unit
class TestPresentationNodes:
    """Test the node value types."""

    def test_discriminants(self):
        """Test that each variant carries its kind tag."""
        assert TextLeaf(key="0").kind == "text-leaf"
        assert Container(key="0").kind == "container"
        assert Container(key="0").variant == "generic"

    def test_on_press_excluded_from_equality(self):
        """Test that activation handlers do not affect equality."""
        assert TextLeaf(key="0", on_press=lambda: None) == TextLeaf(key="0", on_press=lambda: None)

    def test_walk_and_text(self):
        """Test depth-first traversal and text concatenation."""
        tree = Container(
            key="root",
            children=(TextLeaf(key="a", children=("Hello ",)), TextLeaf(key="b", children=("world",))),
        )

        assert [node.key for node in tree.walk()] == ["root", "a", "b"]
        assert tree.text() == "Hello world"

    def test_press(self):
        """Test press invokes the handler and is a no-op without one."""
        pressed = []
        TextLeaf(key="0", on_press=lambda: pressed.append(True)).press()
        TextLeaf(key="1").press()

        assert pressed == [True]


@pytest.mark.unit
class TestSerialization:
    """Test dictionary and JSON serialization."""

    def test_text_leaf_dict(self):
        """Test text leaf serialization."""
        leaf = TextLeaf(key="0", styles=("text", "h1"), children=("Title",))

        assert presentation_to_dict(leaf) == {
            "node_type": "text-leaf",
            "key": "0",
            "styles": ["text", "h1"],
            "children": ["Title"],
        }

    def test_container_dict_with_props_and_press(self):
        """Test container serialization includes variant, sorted props and press flag."""
        node = Container(
            key="linkWrapper_0",
            variant="pressable",
            styles=("linkWrapper",),
            props={"title": None, "href": "https://example.com"},
            on_press=lambda: None,
        )

        result = presentation_to_dict(node)

        assert result["variant"] == "pressable"
        assert list(result["props"]) == ["href", "title"]
        assert result["pressable"] is True

    def test_opaque_values(self):
        """Test that host values are serialized by type name."""
        assert presentation_to_dict(("raw", 1)) == {"node_type": "opaque", "type": "tuple"}

    def test_opaque_scalars_keep_value(self):
        """Test that JSON scalar host values carry their value."""
        assert presentation_to_dict(3) == {"node_type": "opaque", "type": "int", "value": 3}
        assert presentation_to_dict(None) == {"node_type": "opaque", "type": "NoneType", "value": None}

    def test_opaque_objects_serialize_identically(self):
        """Test that distinct host objects give identical JSON output."""

        class HostElement:
            pass

        first = presentation_to_json([Container(key="0", children=(HostElement(),))])
        second = presentation_to_json([Container(key="0", children=(HostElement(),))])

        assert first == second
        assert "0x" not in first
        assert json.loads(first)[0]["children"][0] == {"node_type": "opaque", "type": "HostElement"}

    def test_json_keeps_unicode(self):
        """Test that JSON output keeps non-ASCII text readable."""
        output = presentation_to_json([TextLeaf(key="b", children=("•",))])

        assert "•" in output
        assert json.loads(output)[0]["children"] == ["•"]


@pytest.mark.unit
class TestDebugDump:
    """Test the presentation tree debug dump."""

    def test_describe_node(self):
        """Test one-line node labels."""
        assert describe_node(TextLeaf(key="0")) == "0 - text-leaf"
        assert describe_node(Container(key="1", variant="media")) == "1 - container:media"
        assert describe_node(3) == "? - int"

    def test_log_presentation_tree(self, caplog):
        """Test that every node is logged with indentation by depth."""
        tree = [Container(key="block_0", children=(TextLeaf(key="0_0", children=("x",)),))]

        with caplog.at_level(logging.DEBUG, logger="md2view.presentation.debug"):
            log_presentation_tree(tree)

        messages = [record.getMessage() for record in caplog.records]
        assert messages == ["==== LOGGING NODE TREE ===", "block_0 - container:generic", "  0_0 - text-leaf"]
