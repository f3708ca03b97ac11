"""
Tests for editor markup conversion

Tests cover:
- Parsing inline formats and links
- Parsing list and quote prefixes
- Rendering documents back to markup
- Toggling formats on selections and lines
"""
import pytest

from huddle.core.document import Delta
from huddle.core.markup import (
    delta_to_markup,
    markup_to_delta,
    toggle_inline_format,
    toggle_line_format,
)


class TestMarkupToDelta:
    """Tests for parsing editor markup"""

    def test_plain_text(self):
        """Test text without markup becomes a single insert"""
        assert markup_to_delta("hello").to_ops() == [{"insert": "hello\n"}]

    def test_inline_formats(self):
        """Test bold, italic, strike and code markers"""
        ops = markup_to_delta("*b* _i_ ~s~ `c`").to_ops()
        assert ops == [
            {"insert": "b", "attributes": {"bold": True}},
            {"insert": " "},
            {"insert": "i", "attributes": {"italic": True}},
            {"insert": " "},
            {"insert": "s", "attributes": {"strike": True}},
            {"insert": " "},
            {"insert": "c", "attributes": {"code": True}},
            {"insert": "\n"},
        ]

    def test_nested_formats(self):
        """Test italic inside bold carries both attributes"""
        ops = markup_to_delta("*very _much_*").to_ops()
        assert ops[1] == {"insert": "much", "attributes": {"bold": True, "italic": True}}

    def test_markers_inside_words_are_literal(self):
        """Test snake_case identifiers are not italicised"""
        assert markup_to_delta("snake_case_name").to_ops() == [{"insert": "snake_case_name\n"}]

    def test_unclosed_marker_is_literal(self):
        """Test a lone marker stays as text"""
        assert markup_to_delta("2 * 3").plain_text() == "2 * 3\n"

    def test_code_keeps_markers_literal(self):
        """Test markers inside code spans are not parsed"""
        ops = markup_to_delta("`*not bold*`").to_ops()
        assert ops[0] == {"insert": "*not bold*", "attributes": {"code": True}}

    def test_link_with_label(self):
        """Test <url|label> links"""
        ops = markup_to_delta("see <https://example.com|docs>").to_ops()
        assert ops[1] == {"insert": "docs", "attributes": {"link": "https://example.com"}}

    def test_bare_link(self):
        """Test <url> links use the url as label"""
        ops = markup_to_delta("<https://example.com>").to_ops()
        assert ops[0] == {"insert": "https://example.com", "attributes": {"link": "https://example.com"}}

    def test_line_formats(self):
        """Test list and quote prefixes become newline attributes"""
        ops = markup_to_delta("- one\n1. two\n> three").to_ops()
        assert ops == [
            {"insert": "one"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
            {"insert": "two"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
            {"insert": "three"},
            {"insert": "\n", "attributes": {"blockquote": True}},
        ]

    def test_bullet_glyph_prefix(self):
        """Test a pasted bullet glyph is treated as a list item"""
        ops = markup_to_delta("• item").to_ops()
        assert ops[1] == {"insert": "\n", "attributes": {"list": "bullet"}}


class TestDeltaToMarkup:
    """Tests for rendering documents as markup"""

    def test_inline_formats(self):
        """Test formats render with their markers"""
        delta = Delta.from_ops([
            {"insert": "hi "},
            {"insert": "there", "attributes": {"bold": True}},
            {"insert": "\n"},
        ])
        assert delta_to_markup(delta) == "hi *there*"

    def test_whitespace_stays_outside_markers(self):
        """Test surrounding spaces are not wrapped"""
        delta = Delta.from_ops([{"insert": " x ", "attributes": {"italic": True}}, {"insert": "\n"}])
        assert delta_to_markup(delta) == " _x_ "

    def test_ordered_lines_are_numbered(self):
        """Test consecutive ordered items count up"""
        delta = Delta.from_ops([
            {"insert": "a"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
            {"insert": "b"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
        ])
        assert delta_to_markup(delta) == "1. a\n2. b"

    def test_merged_bullet_newlines_keep_format(self):
        """Test empty bullet lines merged into one op keep their prefix"""
        delta = Delta.from_ops([
            {"insert": "a"},
            {"insert": "\n\n", "attributes": {"list": "bullet"}},
        ])
        assert delta_to_markup(delta) == "- a\n- "

    def test_link(self):
        """Test links render with their label"""
        delta = Delta.from_ops([
            {"insert": "docs", "attributes": {"link": "https://example.com"}},
            {"insert": "\n"},
        ])
        assert delta_to_markup(delta) == "<https://example.com|docs>"

    def test_embeds_skipped(self):
        """Test embeds have no markup form"""
        delta = Delta.from_ops([{"insert": {"image": "a.png"}}, {"insert": "caption\n"}])
        assert delta_to_markup(delta) == "caption"

    def test_markup_survives_reparse(self, sample_ops):
        """Test rendering then parsing keeps the document"""
        delta = Delta.from_ops(sample_ops)
        assert markup_to_delta(delta_to_markup(delta)).to_ops() == delta.to_ops()


class TestToggleFormats:
    """Tests for formatting helpers used by the toolbar"""

    def test_wrap_inline(self):
        """Test wrapping a fragment"""
        assert toggle_inline_format("word", "bold") == "*word*"

    def test_unwrap_inline(self):
        """Test unwrapping an already formatted fragment"""
        assert toggle_inline_format("`code`", "code") == "code"

    def test_wrap_each_line(self):
        """Test multi-line fragments are wrapped per line"""
        assert toggle_inline_format("a\n\nb", "strike") == "~a~\n\n~b~"

    def test_add_line_format(self):
        """Test adding a prefix"""
        assert toggle_line_format("item", "bullet") == "- item"

    def test_remove_line_format(self):
        """Test toggling the same format off"""
        assert toggle_line_format("> quoted", "blockquote") == "quoted"

    def test_switch_line_format(self):
        """Test another format replaces the current one"""
        assert toggle_line_format("- item", "ordered") == "1. item"

    @pytest.mark.parametrize("helper", [toggle_inline_format, toggle_line_format])
    def test_unknown_format(self, helper):
        """Test unknown formats are rejected"""
        with pytest.raises(ValueError):
            helper("x", "underline")
