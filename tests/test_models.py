"""Tests for column/index records and default value parsing."""

import dataclasses

import pytest

from dm8_schema.database.models import ColumnRecord, IndexRecord, parse_default_value


class TestParseDefaultValue:
    """Test DATA_DEFAULT normalization."""

    def test_quoted_string_is_unquoted(self):
        assert parse_default_value("'abc'") == "abc"

    def test_numeric_default_passes_through(self):
        assert parse_default_value("123") == "123"

    def test_absent_default_is_none(self):
        """No default is None, which is not the same as an empty string."""
        assert parse_default_value(None) is None
        assert parse_default_value(None) != ""

    def test_empty_quoted_string_is_empty(self):
        assert parse_default_value("''") == ""

    def test_surrounding_whitespace_is_trimmed(self):
        assert parse_default_value("  'abc'  \n") == "abc"
        assert parse_default_value(" SYSDATE ") == "SYSDATE"

    def test_only_outer_quote_pair_is_removed(self):
        assert parse_default_value("'it''s'") == "it''s"

    def test_unbalanced_quote_returned_trimmed(self):
        assert parse_default_value("'abc") == "'abc"
        assert parse_default_value("abc'") == "abc'"

    def test_double_quotes_are_left_alone(self):
        assert parse_default_value('"abc"') == '"abc"'

    def test_multiline_quoted_default(self):
        assert parse_default_value("'line1\nline2'") == "line1\nline2"

    def test_non_string_value_is_stringified(self):
        assert parse_default_value(0) == "0"


class TestColumnRecord:
    """Test ColumnRecord behaviour."""

    def test_record_is_immutable(self):
        record = ColumnRecord(name="id", native_type="number")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.name = "other"

    def test_has_default(self):
        assert ColumnRecord(name="a", native_type="int", default="").has_default is True
        assert ColumnRecord(name="a", native_type="int").has_default is False

    def test_to_dict(self):
        record = ColumnRecord(name="id", native_type="number", precision=10, scale=0, position=1)
        assert record.to_dict() == {
            "name": "id",
            "native_type": "number",
            "length": None,
            "precision": 10,
            "scale": 0,
            "nullable": False,
            "default": None,
            "position": 1,
        }


class TestIndexRecord:
    """Test IndexRecord behaviour."""

    def test_add_column_keeps_order(self):
        index = IndexRecord(name="IDX1")
        for name in ("A", "B", "C"):
            index.add_column(name)
        assert index.columns == ["A", "B", "C"]

    def test_columns_not_shared_between_records(self):
        first = IndexRecord(name="I1")
        second = IndexRecord(name="I2")
        first.add_column("X")
        assert second.columns == []

    def test_to_dict_copies_columns(self):
        index = IndexRecord(name="IDX1", is_unique=True, columns=["A"])
        data = index.to_dict()
        data["columns"].append("B")
        assert index.columns == ["A"]
        assert data["is_unique"] is True
        assert data["is_primary"] is False
