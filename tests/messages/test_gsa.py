"""Tests for GSA sentence decoding."""

import pytest

from nmeadecode import IncompleteInput, NavigationMode, OperationMode, parse_sentence
from nmeadecode.fields import FieldReader
from nmeadecode.messages import parse_gsa


class TestParseGSA:
    def test_valid_gsa(self):
        result = parse_sentence(
            "$GPGSA,A,3,23,29,07,08,09,18,26,,,,,,1.94,1.18,1.54,1*1A\r\n"
        ).message
        assert result.op_mode is OperationMode.AUTOMATIC
        assert result.nav_mode is NavigationMode.FIX_3D
        assert result.svid == (23, 29, 7, 8, 9, 18, 26, None, None, None, None, None)
        assert result.pdop == pytest.approx(1.94)
        assert result.hdop == pytest.approx(1.18)
        assert result.vdop == pytest.approx(1.54)
        assert result.system_id == 1

    def test_system_id_required(self):
        with pytest.raises(IncompleteInput):
            parse_sentence("$GPGSA,A,3,23,29,07,08,09,18,26,,,,,,1.94,1.18,1.54*07\r\n")

    def test_no_fix(self):
        result = parse_gsa(FieldReader("M,1,,,,,,,,,,,,,,,,"))
        assert result.op_mode is OperationMode.MANUAL
        assert result.nav_mode is NavigationMode.FIX_NOT_AVAILABLE
        assert result.svid == (None,) * 12
        assert result.pdop is None
        assert result.system_id is None
