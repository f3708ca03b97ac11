"""
Tests for the rich text document model

Tests cover:
- Normalizing accepted document shapes
- Op merging and attribute cleanup
- Rejecting malformed documents
- Blank detection and plain text
"""
import json

import pytest

from huddle.core.document import Delta, Op
from huddle.utils.errors import InvalidDocumentError


class TestDeltaInsert:
    """Tests for building documents"""

    def test_insert_merges_matching_attributes(self):
        """Test consecutive inserts with equal formats merge into one op"""
        delta = Delta().insert("Hel").insert("lo")
        assert delta.to_ops() == [{"insert": "Hello"}]

    def test_insert_keeps_differently_formatted_ops(self):
        """Test inserts with different formats stay separate"""
        delta = Delta().insert("plain ").insert("bold", {"bold": True})
        assert len(delta) == 2
        assert delta.ops[1].attributes == {"bold": True}

    def test_insert_drops_false_and_none_attributes(self):
        """Test falsy format flags do not become attributes"""
        delta = Delta().insert("x", {"bold": False, "italic": None})
        assert delta.to_ops() == [{"insert": "x"}]

    def test_empty_text_insert_ignored(self):
        """Test inserting an empty string is a no-op"""
        assert len(Delta().insert("")) == 0

    def test_embeds_never_merge(self):
        """Test embed inserts are kept as their own op"""
        delta = Delta().insert({"image": "a.png"}).insert({"image": "b.png"})
        assert len(delta) == 2
        assert delta.has_embeds()


class TestDeltaFromValue:
    """Tests for normalizing document values"""

    def test_none_is_empty_document(self):
        """Test None becomes a single newline"""
        assert Delta.from_value(None).to_ops() == [{"insert": "\n"}]

    def test_from_ops_dict(self, sample_ops):
        """Test the {'ops': [...]} mapping form"""
        delta = Delta.from_value({"ops": sample_ops})
        assert delta.plain_text() == "Hello team\nfirst\nsecond\n"

    def test_from_json_string(self, sample_ops):
        """Test the JSON body form"""
        delta = Delta.from_value(json.dumps({"ops": sample_ops}))
        assert delta.ops[1] == Op("team", {"bold": True})

    def test_from_list_adds_trailing_newline(self):
        """Test a bare op list is normalized to end with a newline"""
        delta = Delta.from_value([{"insert": "hi"}])
        assert delta.to_ops() == [{"insert": "hi\n"}]

    def test_from_delta_copies(self):
        """Test a Delta input is copied, not shared"""
        original = Delta().insert("x\n")
        copy = Delta.from_value(original)
        copy.insert("more")
        assert original.to_ops() == [{"insert": "x\n"}]

    def test_json_round_trip(self, sample_ops):
        """Test to_json output parses back to the same ops"""
        delta = Delta.from_ops(sample_ops)
        assert Delta.from_json(delta.to_json()).to_ops() == delta.to_ops()

    @pytest.mark.parametrize("value", [
        "not json",
        {"no_ops": []},
        {"ops": "nope"},
        [{"delete": 3}],
        [{"retain": 1}],
        [{"insert": ""}],
        [{"insert": {"image": "a", "video": "b"}}],
        [{"insert": "x", "attributes": ["bold"]}],
        ["plain string"],
        42,
    ])
    def test_malformed_documents_rejected(self, value):
        """Test malformed documents raise InvalidDocumentError"""
        with pytest.raises(InvalidDocumentError):
            Delta.from_value(value)


class TestDeltaBlank:
    """Tests for blank detection"""

    @pytest.mark.parametrize("ops", [
        [{"insert": "\n"}],
        [{"insert": "   \n\n\t\n"}],
    ])
    def test_blank_documents(self, ops):
        """Test whitespace-only documents are blank"""
        assert Delta.from_ops(ops).is_blank()

    def test_angle_brackets_are_text(self):
        """Test literal angle-bracket text is content, not a blank tag"""
        assert not Delta.from_ops([{"insert": "<draft>\n"}]).is_blank()

    def test_text_is_not_blank(self):
        """Test a document with text is not blank"""
        assert not Delta.from_ops([{"insert": "hi\n"}]).is_blank()

    def test_embed_is_not_blank(self):
        """Test a document with only an embed is not blank"""
        assert not Delta.from_ops([{"insert": {"image": "a.png"}}]).is_blank()
