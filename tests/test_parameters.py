"""Tests for enumerated parameter decoders."""

import pytest

from nmeadecode import (
    ComputationMethod,
    EastWest,
    Fix,
    MalformedField,
    NavigationalStatus,
    NorthSouth,
    SentenceType,
    Status,
)
from nmeadecode.fields import FieldReader
from nmeadecode.parameters import (
    parse_computation_method,
    parse_east_west_indicator,
    parse_navigational_status,
    parse_north_south_indicator,
    parse_pos_mode,
    parse_pos_mode_vec,
    parse_sentence_type,
    parse_status,
)


class TestEnumDecoders:
    """Tests for single-token enum decoders."""

    @pytest.mark.parametrize(
        ("decoder", "token", "expected"),
        [
            (parse_north_south_indicator, "S", NorthSouth.SOUTH),
            (parse_east_west_indicator, "W", EastWest.WEST),
            (parse_pos_mode, "A", Fix.AUTONOMOUS_GNSS_FIX),
            (parse_pos_mode, "R", Fix.RTK_FIXED),
            (parse_status, "A", Status.DATA_VALID),
            (parse_status, "V", Status.DATA_INVALID),
            (parse_navigational_status, "V", NavigationalStatus.NOT_VALID),
            (parse_computation_method, "1", ComputationMethod.AFTER_GGA),
        ],
    )
    def test_known_tokens(self, decoder, token, expected):
        assert decoder(FieldReader(token)) is expected

    @pytest.mark.parametrize(
        "decoder",
        [parse_north_south_indicator, parse_east_west_indicator, parse_pos_mode,
         parse_status, parse_navigational_status, parse_computation_method],
    )
    def test_empty_is_none(self, decoder):
        assert decoder(FieldReader("")) is None

    @pytest.mark.parametrize(
        "decoder",
        [parse_north_south_indicator, parse_east_west_indicator, parse_pos_mode,
         parse_status, parse_navigational_status, parse_computation_method],
    )
    def test_unknown_token_is_malformed(self, decoder):
        with pytest.raises(MalformedField):
            decoder(FieldReader("Q"))

    def test_tokens_are_case_sensitive(self):
        with pytest.raises(MalformedField):
            parse_status(FieldReader("a"))


class TestPosModeVec:
    """Tests for the per-constellation GNS mode field."""

    def test_one_fix_per_character(self):
        assert parse_pos_mode_vec(FieldReader("ANNN")) == (
            Fix.AUTONOMOUS_GNSS_FIX,
            Fix.NO_FIX,
            Fix.NO_FIX,
            Fix.NO_FIX,
        )

    def test_unknown_character_is_malformed(self):
        with pytest.raises(MalformedField):
            parse_pos_mode_vec(FieldReader("AXN"))


class TestSentenceType:
    """Tests for parse_sentence_type."""

    def test_envelopes(self):
        assert parse_sentence_type("$") is SentenceType.PARAMETRIC
        assert parse_sentence_type("!") is SentenceType.ENCAPSULATION

    def test_other_character(self):
        with pytest.raises(ValueError):
            parse_sentence_type("#")
