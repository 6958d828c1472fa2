"""Tests for extraction.arguments module."""

import pytest

from extraction.arguments import (
    UNSUPPORTED,
    ArgumentKind,
    MapLiteral,
    StringLiteral,
    UnsupportedExpression,
    classify,
    classify_all,
    iter_kinds,
)


@pytest.mark.unit
class TestClassify:
    """Tests for argument classification."""

    def test_string_becomes_string_literal(self):
        arg = classify("Hello")
        assert arg == StringLiteral("Hello")
        assert arg.kind is ArgumentKind.STRING

    def test_mapping_becomes_map_literal(self):
        arg = classify({"count": 1})
        assert isinstance(arg, MapLiteral)
        assert arg.kind is ArgumentKind.MAP
        assert arg.keys() == ["count"]

    def test_other_values_are_unsupported(self):
        """Values that are not literals keep their repr as source."""
        arg = classify(3)
        assert arg == UnsupportedExpression("3")
        assert arg.kind is ArgumentKind.UNSUPPORTED

    def test_classified_arguments_pass_through(self):
        literal = StringLiteral("x")
        assert classify(literal) is literal
        assert classify(UNSUPPORTED) is UNSUPPORTED

    def test_classify_all_keeps_order(self):
        args = classify_all("key", "value", {"count": 1})
        assert iter_kinds(args) == ["string", "string", "map"]


@pytest.mark.unit
class TestMapLiteral:
    """Tests for map literal entries."""

    def test_entries_are_classified(self):
        """Strings and nested mappings inside a map are classified too."""
        literal = MapLiteral({"one": "1 item", "nested": {"a": "b"}, "count": 2})
        assert literal.get("one") == StringLiteral("1 item")
        assert isinstance(literal.get("nested"), MapLiteral)
        assert literal.get("count") == 2

    def test_unsupported_entries_are_kept(self):
        literal = MapLiteral({"count": UNSUPPORTED})
        assert literal.get("count") is UNSUPPORTED

    def test_to_dict_unwraps_literals(self):
        literal = MapLiteral({"name": "Bob", "nested": {"a": "b"}, "count": 2})
        assert literal.to_dict() == {"name": "Bob", "nested": {"a": "b"}, "count": 2}

    def test_get_missing_entry(self):
        assert MapLiteral({}).get("count") is None

    def test_is_immutable(self):
        literal = MapLiteral({"a": "b"})
        with pytest.raises(AttributeError):
            literal.entries = {}
