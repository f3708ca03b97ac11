"""
Tests for rendering documents in the message list

Tests cover:
- Line prefixes for lists and quotes
- Inline styles and links
"""
from huddle.core.document import Delta
from huddle.tui.render import delta_to_text


class TestDeltaToText:
    """Tests for delta_to_text"""

    def test_plain_lines(self):
        text = delta_to_text(Delta.from_ops([{"insert": "one\ntwo\n"}]))
        assert text.plain == "one\ntwo"

    def test_list_and_quote_prefixes(self):
        """Test bullets, numbering and quote bars"""
        delta = Delta.from_ops([
            {"insert": "a"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
            {"insert": "b"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
            {"insert": "c"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
            {"insert": "d"},
            {"insert": "\n", "attributes": {"blockquote": True}},
        ])
        assert delta_to_text(delta).plain == "• a\n1. b\n2. c\n▎ d"

    def test_inline_styles(self):
        """Test formatted spans carry styles"""
        delta = Delta.from_ops([
            {"insert": "bold", "attributes": {"bold": True}},
            {"insert": " "},
            {"insert": "link", "attributes": {"link": "https://example.com"}},
            {"insert": "\n"},
        ])
        text = delta_to_text(delta)
        assert text.plain == "bold link"
        bold_span = next(span for span in text.spans if span.start == 0)
        assert bold_span.style.bold
        link_span = next(span for span in text.spans if span.start == 5)
        assert link_span.style.link == "https://example.com"

    def test_embed_placeholder(self):
        delta = Delta.from_ops([{"insert": {"image": "a.png"}}, {"insert": "\n"}])
        assert delta_to_text(delta).plain == "[image]"
