"""Tests for time and date field decoders."""

import datetime

import pytest

from nmeadecode import MalformedField
from nmeadecode.fields import FieldReader
from nmeadecode.timefields import parse_date, parse_time


class TestParseTime:
    """Tests for parse_time function."""

    def test_hundredths(self):
        assert parse_time(FieldReader("092321.00")) == datetime.time(9, 23, 21)

    def test_fraction_to_microseconds(self):
        assert parse_time(FieldReader("103600.01")) == datetime.time(10, 36, 0, 10000)

    def test_without_fraction(self):
        assert parse_time(FieldReader("123519")) == datetime.time(12, 35, 19)

    def test_long_fraction_truncated(self):
        time = parse_time(FieldReader("000000.1234567"))
        assert time.microsecond == 123456

    def test_empty_is_none(self):
        assert parse_time(FieldReader("")) is None

    @pytest.mark.parametrize(
        "value", ["250000.00", "126000", "12:35:19", "1235", "abcdef", "123519.0a"]
    )
    def test_malformed(self, value):
        with pytest.raises(MalformedField):
            parse_time(FieldReader(value))


class TestParseDate:
    """Tests for parse_date function."""

    def test_ddmmyy(self):
        assert parse_date(FieldReader("091202")) == datetime.date(2002, 12, 9)

    def test_empty_is_none(self):
        assert parse_date(FieldReader("")) is None

    @pytest.mark.parametrize("value", ["320102", "011302", "0912", "09122002", "ab1202"])
    def test_malformed(self, value):
        with pytest.raises(MalformedField):
            parse_date(FieldReader(value))
