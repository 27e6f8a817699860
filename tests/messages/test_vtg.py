"""Tests for VTG sentence decoding."""

import pytest

from nmeadecode import (
    CourseOverGroundUnit,
    Fix,
    IncompleteInput,
    MalformedField,
    SpeedOverGroundUnit,
    parse_sentence,
)
from nmeadecode.fields import FieldReader
from nmeadecode.messages import VTGMessage, parse_vtg


class TestParseVTG:
    """Tests for parse_vtg function."""

    def test_valid_vtg_autonomous(self):
        result = parse_sentence("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B\r\n").message
        assert result == VTGMessage(
            cogt=pytest.approx(54.7),
            cogt_unit=CourseOverGroundUnit.DEGREES_TRUE,
            cogm=pytest.approx(34.4),
            cogm_unit=CourseOverGroundUnit.DEGREES_MAGNETIC,
            sogn=pytest.approx(5.5),
            sogn_unit=SpeedOverGroundUnit.KNOTS,
            sogk=pytest.approx(10.2),
            sogk_unit=SpeedOverGroundUnit.KILOMETERS_PER_HOUR,
            pos_mode=Fix.AUTONOMOUS_GNSS_FIX,
        )

    def test_vtg_differential_mode(self):
        result = parse_sentence("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,D*3E\r\n").message
        assert result.pos_mode is Fix.DIFFERENTIAL_GNSS_FIX

    def test_vtg_not_valid_mode(self):
        result = parse_sentence("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,N*34\r\n").message
        assert result.pos_mode is Fix.NO_FIX

    def test_vtg_stationary_empty_track(self):
        result = parse_sentence("$GNVTG,,T,,M,0.0,N,0.0,K,A*3D\r\n").message
        assert result.cogt is None
        assert result.cogm is None
        assert result.cogt_unit is CourseOverGroundUnit.DEGREES_TRUE
        assert result.sogn == pytest.approx(0.0)
        assert result.sogk == pytest.approx(0.0)

    def test_vtg_all_empty_fields(self):
        result = parse_sentence("$GNVTG,,T,,M,,N,,K,N*32\r\n").message
        assert result.cogt is None
        assert result.sogn is None
        assert result.sogk is None
        assert result.pos_mode is Fix.NO_FIX

    def test_vtg_no_mode_indicator(self):
        with pytest.raises(IncompleteInput):
            parse_sentence("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K*56\r\n")

    def test_vtg_bad_course_unit(self):
        with pytest.raises(MalformedField) as excinfo:
            parse_sentence("$GNVTG,054.7,X,034.4,M,005.5,N,010.2,K,A*37\r\n")
        assert excinfo.value.position == 2
        assert excinfo.value.raw == "X"

    def test_vtg_empty_units(self):
        result = parse_vtg(FieldReader("054.7,,034.4,,005.5,,010.2,,A"))
        assert result.cogt_unit is None
        assert result.sogk_unit is None
        assert result.sogk == pytest.approx(10.2)

    def test_zedf9p_vtg_moving(self):
        result = parse_sentence("$GNVTG,325.5,T,337.8,M,0.5,N,0.9,K,D*3A\r\n").message
        assert result.cogt == pytest.approx(325.5)
        assert result.pos_mode is Fix.DIFFERENTIAL_GNSS_FIX
