"""Tests for talker and message identifier registries."""

import pytest

from nmeadecode import (
    DECODERS,
    MESSAGE_TYPES,
    IncompleteInput,
    InvalidEnvelope,
    MalformedField,
    Talker,
    UnknownTalker,
    UnrecognizedTalkerLength,
    UnsupportedMessageType,
)
from nmeadecode.fields import FieldReader
from nmeadecode.identity import (
    lookup_talker,
    parse_message_type,
    parse_signal_id,
    parse_talker,
)


class TestParseTalker:
    """Tests for parse_talker function."""

    def test_known_talker(self):
        assert parse_talker("HNtest") == (Talker.HEADING_NON_NORTH_SEEKING_GYRO, "test")

    @pytest.mark.parametrize(
        ("code", "talker"),
        [("GP", Talker.GPS), ("GN", Talker.GNSS), ("GL", Talker.GLONASS),
         ("GA", Talker.GALILEO), ("GB", Talker.BEIDOU), ("GQ", Talker.QZSS)],
    )
    def test_multi_constellation_talkers(self, code, talker):
        assert lookup_talker(code) is talker

    def test_unknown_talker_kept_verbatim(self):
        assert parse_talker("PAtest") == (UnknownTalker("PA"), "test")

    @pytest.mark.parametrize("data", ["", "G"])
    def test_too_short(self, data):
        with pytest.raises(UnrecognizedTalkerLength):
            parse_talker(data)


class TestParseMessageType:
    """Tests for parse_message_type function."""

    def test_splits_id_and_payload(self):
        assert parse_message_type("GLL,4717.11364,N") == ("GLL", "4717.11364,N")

    def test_empty_payload(self):
        assert parse_message_type("GLQ,") == ("GLQ", "")

    def test_unsupported(self):
        with pytest.raises(UnsupportedMessageType) as excinfo:
            parse_message_type("XYZ,1")
        assert excinfo.value.code == "XYZ"

    def test_case_sensitive(self):
        with pytest.raises(UnsupportedMessageType):
            parse_message_type("gll,1")

    def test_too_short(self):
        with pytest.raises(IncompleteInput):
            parse_message_type("GLL")

    def test_missing_comma(self):
        with pytest.raises(InvalidEnvelope):
            parse_message_type("GLLX,1")


class TestRegistries:
    """The message registry and the dispatch table agree."""

    def test_eighteen_message_types(self):
        assert len(MESSAGE_TYPES) == 18

    def test_every_registered_type_has_a_decoder(self):
        assert set(DECODERS) == MESSAGE_TYPES

    def test_dispatch_table_is_read_only(self):
        with pytest.raises(TypeError):
            DECODERS["XYZ"] = None

    def test_talker_codes_are_two_characters(self):
        assert all(len(talker.value) == 2 for talker in Talker)


class TestParseSignalId:
    """Tests for parse_signal_id function."""

    def test_hex_digit(self):
        assert parse_signal_id(FieldReader("B")) == 11

    def test_empty_is_none(self):
        assert parse_signal_id(FieldReader("")) is None

    def test_oversized_is_malformed(self):
        with pytest.raises(MalformedField):
            parse_signal_id(FieldReader("F" * 400))
