"""Decode errors.

Every failure while decoding a sentence raises a subclass of
:class:`DecodeError`. Decoding stops at the first failure, so a caller
either gets a complete ``Sentence`` or exactly one of these exceptions.

``DecodeError`` derives from ``ValueError`` so callers that already guard
NMEA parsing with ``except ValueError`` keep working.
"""


class DecodeError(ValueError):
    """Base class for all sentence decode failures."""


class EmptyInput(DecodeError):
    """The sentence string was empty."""

    def __init__(self) -> None:
        super().__init__("Empty sentence.")


class InvalidEnvelope(DecodeError):
    """The sentence does not have a valid ``$``/``!`` ... ``*`` frame."""


class UnrecognizedTalkerLength(DecodeError):
    """The data span is too short to hold a two-character talker code."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Talker code too short: {raw!r}")
        self.raw = raw


class UnsupportedMessageType(DecodeError):
    """The three-character message identifier has no decoder."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Unsupported message type: {code!r}")
        self.code = code


class MalformedField(DecodeError):
    """A non-empty field could not be parsed as the expected shape.

    Attributes:
        position: NMEA field number, counting the address field
            (e.g. ``GPGLL``) as field 0.
        raw: The offending field text.
    """

    def __init__(self, position: int, raw: str) -> None:
        super().__init__(f"Malformed field {position}: {raw!r}")
        self.position = position
        self.raw = raw


class MalformedChecksum(DecodeError):
    """The checksum is not two hexadecimal digits."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Checksum is not hexadecimal: {raw!r}")
        self.raw = raw


class ChecksumMismatch(DecodeError):
    """The transmitted checksum differs from the computed one."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Checksum mismatch: transmitted {expected:02X}, computed {actual:02X}"
        )
        self.expected = expected
        self.actual = actual


class IncompleteInput(DecodeError):
    """The input ended before every required character or field was read."""


class TrailingData(DecodeError):
    """Input remained after the sentence was fully decoded."""
