"""Tests for GBS sentence decoding."""

import datetime

import pytest

from nmeadecode import IncompleteInput, Meter, parse_sentence
from nmeadecode.messages import GBSMessage


class TestParseGBS:
    def test_valid_gbs(self):
        result = parse_sentence("$GPGBS,235458.00,1.4,1.3,3.1,03,,-21.4,3.8,1,0*5A\r\n").message
        assert result == GBSMessage(
            time=datetime.time(23, 54, 58),
            err_lat=Meter(1.4),
            err_lon=Meter(1.3),
            err_alt=Meter(3.1),
            svid=3,
            prob=None,
            bias=Meter(-21.4),
            stddev=Meter(3.8),
            system_id=1,
            signal_id=0,
        )

    def test_signal_id_required(self, frame):
        with pytest.raises(IncompleteInput):
            parse_sentence(frame("GPGBS,235458.00,1.4,1.3,3.1,03,,-21.4,3.8,1"))
