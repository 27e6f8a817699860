"""NMEA field parsing utilities.

This module provides the primitive tokenizers every field decoder is built
on, and :class:`FieldReader`, the cursor that walks a sentence payload one
comma-separated field at a time.

NMEA fields may be empty (consecutive commas indicate missing data). The
tokenizers return None for an empty field, so callers can distinguish "no
data" from "zero value". A non-empty field that does not have the expected
shape raises ``ValueError``; :meth:`FieldReader.read` turns that into a
:class:`~nmeadecode.errors.MalformedField` carrying the field position.
"""

import math
import re
from collections.abc import Callable
from typing import TypeVar

from nmeadecode.errors import IncompleteInput, MalformedField

T = TypeVar("T")

# Python's float() and int() accept whitespace, underscores, exponents,
# "nan" and "inf". NMEA numeric fields are plain ASCII decimals.
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_UNSIGNED_PATTERN = re.compile(r"[0-9]+")
_SIGNED_PATTERN = re.compile(r"[+-]?[0-9]+")
_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]+")

_U8_MAX = 0xFF


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed float value, or None if the field is empty

    Raises:
        ValueError: If the field is not a plain decimal number, or is too
            large to fit a finite float

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")  # empty field
        None
    """
    if not value:
        return None
    if not _DECIMAL_PATTERN.fullmatch(value):
        raise ValueError(f"not a decimal number: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"out of range for a float: {value!r}")
    return number


def parse_int_field(value: str) -> int | None:
    """Parse an unsigned integer field, returning None if empty.

    Used for counts and identifiers such as the number of satellites or a
    differential station ID.

    Example:
        >>> parse_int_field("0000")
        0
        >>> parse_int_field("")
        None
    """
    if not value:
        return None
    if not _UNSIGNED_PATTERN.fullmatch(value):
        raise ValueError(f"not an unsigned integer: {value!r}")
    return int(value)


def parse_signed_int_field(value: str) -> int | None:
    """Parse an integer field that may carry a sign (e.g. "-05")."""
    if not value:
        return None
    if not _SIGNED_PATTERN.fullmatch(value):
        raise ValueError(f"not an integer: {value!r}")
    return int(value)


def parse_u8_field(value: str) -> int | None:
    """Parse an unsigned byte field (0-255), returning None if empty.

    Example:
        >>> parse_u8_field("08")
        8
        >>> parse_u8_field("256")
        Traceback (most recent call last):
        ValueError: ...
    """
    number = parse_int_field(value)
    if number is not None and number > _U8_MAX:
        raise ValueError(f"out of range for an unsigned byte: {value!r}")
    return number


def parse_hex_field(value: str) -> int | None:
    """Parse a hexadecimal field such as an NMEA 4.10 signal ID."""
    if not value:
        return None
    if not _HEX_PATTERN.fullmatch(value):
        raise ValueError(f"not hexadecimal: {value!r}")
    return int(value, 16)


def parse_string_field(value: str) -> str | None:
    """Parse a string field, returning None if empty.

    Used for fields like datum codes, polled message IDs or text where the
    raw string value is meaningful.

    Example:
        >>> parse_string_field("W84")
        'W84'
        >>> parse_string_field("")
        None
    """
    if not value:
        return None
    return value


class FieldReader:
    """Cursor over the comma-separated fields of a sentence payload.

    The payload is everything after the address field and before the
    ``*`` checksum delimiter, e.g. ``"4717.11364,N,00833.91565,E"``. A
    trailing comma yields a final empty field, so ``"1.8,,"`` holds three
    fields.

    Field decoders consume fields strictly in order. Reading past the last
    field raises :class:`~nmeadecode.errors.IncompleteInput`; the caller
    checks :attr:`exhausted` afterwards to reject leftover fields.

    Args:
        payload: The payload text.
        first_position: NMEA field number of the first payload field.
            Field 0 is the address field, so this defaults to 1.
    """

    def __init__(self, payload: str, first_position: int = 1) -> None:
        self._fields = payload.split(",")
        self._index = 0
        self._first_position = first_position

    @property
    def position(self) -> int:
        """NMEA field number of the next field to be read."""
        return self._first_position + self._index

    @property
    def remaining(self) -> int:
        """Number of fields not yet consumed."""
        return len(self._fields) - self._index

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._fields)

    def next_token(self) -> str:
        """Consume and return the raw text of the next field."""
        if self.exhausted:
            raise IncompleteInput(
                f"Payload ended before field {self.position}."
            )
        token = self._fields[self._index]
        self._index += 1
        return token

    def read(self, parse: Callable[[str], T]) -> T:
        """Consume the next field and convert it with *parse*.

        Args:
            parse: A token-level parser that raises ``ValueError`` when the
                token has the wrong shape.

        Raises:
            IncompleteInput: If no field is left.
            MalformedField: If *parse* rejects the token.
        """
        position = self.position
        token = self.next_token()
        try:
            return parse(token)
        except ValueError as e:
            raise MalformedField(position, token) from e


def parse_float(fields: FieldReader) -> float | None:
    """Decode a dimensionless number such as a dilution of precision."""
    return fields.read(parse_float_field)


def parse_u8(fields: FieldReader) -> int | None:
    """Decode a count or identifier that fits in an unsigned byte."""
    return fields.read(parse_u8_field)


def parse_int(fields: FieldReader) -> int | None:
    return fields.read(parse_int_field)


def parse_signed_int(fields: FieldReader) -> int | None:
    return fields.read(parse_signed_int_field)


def parse_string(fields: FieldReader) -> str | None:
    """Decode a free-form text field."""
    return fields.read(parse_string_field)
