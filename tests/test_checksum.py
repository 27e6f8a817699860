"""Tests for NMEA checksum calculation and verification."""

import pytest

from nmeadecode import (
    ChecksumMismatch,
    IncompleteInput,
    MalformedChecksum,
    calculate_checksum,
)
from nmeadecode.checksum import decode_checksum, verify_checksum


class TestCalculateChecksum:
    """Tests for calculate_checksum function."""

    def test_known_sentences(self):
        assert calculate_checksum("GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A") == 0x3B
        assert calculate_checksum("EIGNQ,RMC") == 0x24

    def test_empty_content(self):
        assert calculate_checksum("") == 0

    def test_repeated_character_cancels_out(self):
        assert calculate_checksum("GG") == 0


class TestDecodeChecksum:
    """Tests for decode_checksum and verify_checksum."""

    def test_two_hex_digits(self):
        assert decode_checksum("7F\r\n") == 0x7F

    @pytest.mark.parametrize("text", ["", "7", "F"])
    def test_too_short_is_incomplete(self, text):
        with pytest.raises(IncompleteInput):
            decode_checksum(text)

    @pytest.mark.parametrize("text", ["7G", "+1", " 7", "\r\n"])
    def test_non_hex_is_malformed(self, text):
        with pytest.raises(MalformedChecksum):
            decode_checksum(text)

    def test_verify_mismatch_reports_both_values(self):
        with pytest.raises(ChecksumMismatch) as excinfo:
            verify_checksum("EIGNQ,RMC", 0x25)
        assert excinfo.value.expected == 0x25
        assert excinfo.value.actual == 0x24

    def test_verify_match(self):
        verify_checksum("EIGNQ,RMC", 0x24)
