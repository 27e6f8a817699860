"""Tests for primitive tokenizers and FieldReader."""

import pytest

from nmeadecode import IncompleteInput, MalformedField
from nmeadecode.fields import (
    FieldReader,
    parse_float_field,
    parse_hex_field,
    parse_int_field,
    parse_signed_int_field,
    parse_string_field,
    parse_u8_field,
)


class TestParseFloatField:
    """Tests for parse_float_field function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("545.4", 545.4), ("-30.0", -30.0), ("+1.5", 1.5), ("7", 7.0),
         ("7.", 7.0), (".5", 0.5), ("0004717.11364", 4717.11364)],
    )
    def test_decimal_numbers(self, value, expected):
        assert parse_float_field(value) == expected

    def test_empty_field(self):
        assert parse_float_field("") is None

    @pytest.mark.parametrize(
        "value",
        ["abc", "1.2.3", "nan", "inf", "1e5", " 1.0", "1_000", "-", ".", "1,2"],
    )
    def test_malformed_raises(self, value):
        with pytest.raises(ValueError):
            parse_float_field(value)

    def test_too_large_for_a_float(self):
        with pytest.raises(ValueError):
            parse_float_field("9" * 400)

    def test_too_large_is_malformed_field(self):
        fields = FieldReader("1.0," + "9" * 400)
        fields.read(parse_float_field)
        with pytest.raises(MalformedField) as excinfo:
            fields.read(parse_float_field)
        assert excinfo.value.position == 2


class TestParseIntegerFields:
    """Tests for the integer tokenizers."""

    def test_int_with_leading_zeros(self):
        assert parse_int_field("0000") == 0
        assert parse_int_field("08") == 8

    def test_int_rejects_sign(self):
        with pytest.raises(ValueError):
            parse_int_field("-1")

    def test_signed_int(self):
        assert parse_signed_int_field("-05") == -5
        assert parse_signed_int_field("+05") == 5

    def test_u8_range(self):
        assert parse_u8_field("255") == 255
        with pytest.raises(ValueError):
            parse_u8_field("256")

    def test_hex(self):
        assert parse_hex_field("B") == 11
        assert parse_hex_field("1") == 1
        with pytest.raises(ValueError):
            parse_hex_field("G")

    @pytest.mark.parametrize(
        "parse",
        [parse_int_field, parse_signed_int_field, parse_u8_field, parse_hex_field],
    )
    def test_empty_is_none(self, parse):
        assert parse("") is None

    def test_string(self):
        assert parse_string_field("W84") == "W84"
        assert parse_string_field("") is None


class TestFieldReader:
    """Tests for FieldReader."""

    def test_reads_fields_in_order(self):
        fields = FieldReader("a,b,c")
        assert [fields.next_token() for _ in range(3)] == ["a", "b", "c"]
        assert fields.exhausted

    def test_trailing_comma_is_an_empty_field(self):
        fields = FieldReader("1.8,,")
        assert fields.remaining == 3

    def test_empty_payload_has_one_empty_field(self):
        fields = FieldReader("")
        assert fields.next_token() == ""
        assert fields.exhausted

    def test_reading_past_end_is_incomplete(self):
        fields = FieldReader("a")
        fields.next_token()
        with pytest.raises(IncompleteInput):
            fields.next_token()

    def test_position_counts_from_address_field(self):
        fields = FieldReader("a,b")
        assert fields.position == 1
        fields.next_token()
        assert fields.position == 2

    def test_read_reports_malformed_position_and_text(self):
        fields = FieldReader("1.0,x.y")
        fields.read(parse_float_field)
        with pytest.raises(MalformedField) as excinfo:
            fields.read(parse_float_field)
        assert excinfo.value.position == 2
        assert excinfo.value.raw == "x.y"
