"""Tests for ZDA sentence decoding."""

import datetime

import pytest

from nmeadecode import MalformedField, parse_sentence
from nmeadecode.fields import FieldReader
from nmeadecode.messages import ZDAMessage, parse_zda


class TestParseZDA:
    def test_valid_zda(self):
        result = parse_sentence("$GPZDA,082710.00,16,09,2002,00,00*64\r\n").message
        assert result == ZDAMessage(
            time=datetime.time(8, 27, 10),
            day=16,
            month=9,
            year=2002,
            ltzh=0,
            ltzn=0,
        )

    def test_empty_zda(self):
        result = parse_sentence("$GPZDA,,,,,,*48\r\n").message
        assert result == ZDAMessage(None, None, None, None, None, None)

    def test_negative_local_zone(self):
        result = parse_zda(FieldReader("082710.00,16,09,2002,-05,30"))
        assert result.ltzh == -5
        assert result.ltzn == 30

    def test_day_out_of_byte_range(self):
        with pytest.raises(MalformedField) as excinfo:
            parse_zda(FieldReader("082710.00,300,09,2002,00,00"))
        assert excinfo.value.position == 2
