"""NMEA checksum calculation and verification.

The checksum is the XOR of every character between the envelope character
('$' or '!') and '*', sent as two hexadecimal digits after the '*':

    $GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F
     |<---------------------- checksummed data ---------------------->|^^
"""

from nmeadecode.errors import ChecksumMismatch, IncompleteInput, MalformedChecksum
from nmeadecode.fields import parse_hex_field

CHECKSUM_LENGTH = 2


def calculate_checksum(content: str) -> int:
    """XOR-fold the characters of *content* into one byte.

    Example:
        >>> calculate_checksum("EIGNQ,RMC")
        36
    """
    result = 0
    for character in content:
        result ^= ord(character)
    return result


def decode_checksum(text: str) -> int:
    """Decode the two hex digits that follow '*'.

    Only the first two characters are read; whatever follows them is the
    caller's to check.

    Raises:
        IncompleteInput: If fewer than 2 characters are available.
        MalformedChecksum: If the 2 characters are not hexadecimal.
    """
    digits = text[:CHECKSUM_LENGTH]
    if len(digits) < CHECKSUM_LENGTH:
        raise IncompleteInput(f"Checksum too short: {digits!r}")
    try:
        return parse_hex_field(digits)
    except ValueError as e:
        raise MalformedChecksum(digits) from e


def verify_checksum(content: str, transmitted: int) -> None:
    """Raise ``ChecksumMismatch`` unless *content* folds to *transmitted*."""
    calculated = calculate_checksum(content)
    if calculated != transmitted:
        raise ChecksumMismatch(transmitted, calculated)
