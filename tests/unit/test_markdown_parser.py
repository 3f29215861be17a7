#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the Markdown to syntax tree parser adapter."""

from unittest.mock import patch

import pytest

from md2view.ast import SyntaxNode
from md2view.exceptions import ParsingError, ValidationError
from md2view.parsers import MarkdownParser, parse_markdown


def kinds(tree):
    return [node.kind if isinstance(node, SyntaxNode) else "str" for node in tree]


@pytest.mark.unit
class TestBlockParsing:
    """Test block-level token mapping."""

    def test_heading_and_paragraph(self):
        """Test a heading followed by a paragraph."""
        tree = parse_markdown("# Hello\n\nThis is **bold**.")

        assert kinds(tree) == ["h1", "div"]
        assert tree[0].text_content() == "Hello"
        assert tree[1].text_content() == "This is bold."
        assert "strong" in kinds(tree[1].children)

    def test_heading_levels(self):
        """Test all six heading levels."""
        tree = parse_markdown("# H1\n## H2\n### H3\n#### H4\n##### H5\n###### H6")

        assert kinds(tree) == ["h1", "h2", "h3", "h4", "h5", "h6"]

    def test_thematic_break(self):
        """Test horizontal rules between paragraphs."""
        tree = parse_markdown("above\n\n---\n\nbelow")

        assert kinds(tree) == ["div", "hr", "div"]

    def test_block_quote(self):
        """Test block quotes wrap their paragraphs."""
        tree = parse_markdown("> quoted text")

        assert kinds(tree) == ["blockquote"]
        assert kinds(tree[0].children) == ["div"]
        assert tree[0].text_content() == "quoted text"

    def test_unordered_list(self):
        """Test bullet lists map to ul and li."""
        tree = parse_markdown("- a\n- b")

        assert kinds(tree) == ["ul"]
        assert kinds(tree[0].children) == ["li", "li"]
        assert [item.text_content() for item in tree[0].children] == ["a", "b"]

    def test_ordered_list(self):
        """Test numbered lists map to ol."""
        tree = parse_markdown("1. one\n2. two\n3. three")

        assert kinds(tree) == ["ol"]
        assert len(tree[0].children) == 3

    def test_ordered_list_start_is_not_recorded(self):
        """Test that a list's source start number is not carried into the tree."""
        tree = parse_markdown("5. five\n6. six")

        assert kinds(tree) == ["ol"]
        assert tree[0].metadata == {}

    def test_nested_list(self):
        """Test a list nested in a list item."""
        tree = parse_markdown("- outer\n  - inner")

        item = tree[0].children[0]
        assert "ul" in kinds(item.children)

    def test_fenced_code(self):
        """Test fenced code becomes a block holding one code run."""
        tree = parse_markdown("```python\nx = 1\n```")

        assert kinds(tree) == ["div"]
        code = tree[0].children[0]
        assert code.kind == "code"
        assert code.data == "x = 1"
        assert code.metadata == {"info": "python"}

    def test_raw_html_is_text(self):
        """Test that raw HTML blocks are kept as plain text."""
        tree = parse_markdown("<div>hi</div>")

        assert isinstance(tree[0], str)
        assert "<div>hi</div>" in tree[0]

    def test_blank_lines_skipped(self):
        """Test that blank lines produce no nodes."""
        assert kinds(parse_markdown("a\n\n\n\nb")) == ["div", "div"]

    def test_empty_source(self):
        """Test that an empty document parses to an empty tree."""
        assert parse_markdown("") == []


@pytest.mark.unit
class TestInlineTokens:
    """Test inline token mapping inside paragraphs."""

    def test_emphasis_strong_strikethrough(self):
        """Test inline formatting kinds."""
        tree = parse_markdown("*em* **strong** ~~gone~~")

        assert [k for k in kinds(tree[0].children) if k != "str"] == ["em", "strong", "del"]

    def test_codespan(self):
        """Test inline code spans."""
        code = parse_markdown("run `x = 1` now")[0].children[1]

        assert code == SyntaxNode("code", "x = 1")

    def test_link(self):
        """Test link target, title and content."""
        node = parse_markdown('[go](https://example.com "Example")')[0].children[0]

        assert node.kind == "a"
        assert node.href == "https://example.com"
        assert node.title == "Example"
        assert node.children == ["go"]

    def test_image(self):
        """Test image source and alt text."""
        node = parse_markdown("![alt text](pic.png)")[0].children[0]

        assert node.kind == "img"
        assert node.src == "pic.png"
        assert node.alt == "alt text"

    def test_breaks_become_newlines(self):
        """Test soft and hard line breaks render as newline text."""
        soft = parse_markdown("a\nb")[0]
        hard = parse_markdown("a  \nb")[0]

        assert soft.text_content() == "a\nb"
        assert hard.text_content() == "a\nb"


@pytest.mark.unit
class TestInlineMode:
    """Test inline-only parsing."""

    def test_inline_produces_no_blocks(self):
        """Test that inline mode returns inline kinds and bare strings."""
        tree = MarkdownParser().parse("*hi* there", inline=True)

        assert kinds(tree) == ["em", "str"]
        assert tree[1] == " there"

    def test_inline_ignores_block_syntax(self):
        """Test that heading markers are plain text in inline mode."""
        tree = MarkdownParser().parse("# not a heading", inline=True)

        assert "h1" not in kinds(tree)


@pytest.mark.unit
class TestParserErrors:
    """Test input handling and error wrapping."""

    def test_bytes_input(self):
        """Test UTF-8 bytes are decoded."""
        assert kinds(parse_markdown("# Hi".encode("utf-8"))) == ["h1"]

    def test_invalid_utf8(self):
        """Test undecodable bytes raise ParsingError."""
        with pytest.raises(ParsingError) as exc_info:
            parse_markdown(b"\xff\xfe\xfa")

        assert exc_info.value.parsing_stage == "decode"

    def test_wrong_source_type(self):
        """Test non-text sources raise ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            parse_markdown(123)  # type: ignore[arg-type]

        assert exc_info.value.parameter_name == "source"

    def test_tokenizer_failure_wrapped(self):
        """Test that mistune failures surface as ParsingError."""
        parser = MarkdownParser()
        with patch.object(parser._markdown, "parse", side_effect=RuntimeError("boom")):
            with pytest.raises(ParsingError) as exc_info:
                parser.parse("text")

        assert isinstance(exc_info.value.original_error, RuntimeError)
        assert exc_info.value.parsing_stage == "block"

    def test_unknown_token_kept(self):
        """Test unrecognized token types are kept as unknown-kind nodes."""
        node = MarkdownParser()._process_token({"type": "table", "children": [{"type": "text", "raw": "x"}]})

        assert node == SyntaxNode("table", ["x"])
