"""UTC time and date field decoders.

Time fields use HHMMSS with an optional fraction of a second
("092321.00", "103600.01"); date fields use DDMMYY ("091202" is
2002-12-09). Two-digit years are taken to be in 2000-2099.
"""

import datetime
import re

from nmeadecode.fields import FieldReader

_TIME_PATTERN = re.compile(r"([0-9]{2})([0-9]{2})([0-9]{2})(?:\.([0-9]*))?")
_DATE_PATTERN = re.compile(r"([0-9]{2})([0-9]{2})([0-9]{2})")

_CENTURY = 2000
_MICROSECOND_DIGITS = 6


def _parse_time_field(value: str) -> datetime.time | None:
    """Parse HHMMSS.ss into a ``datetime.time``.

    Fraction digits beyond microseconds are truncated. Out-of-range
    components (hour 24, minute 60, ...) raise ``ValueError``.

    Example:
        >>> _parse_time_field("103600.01")
        datetime.time(10, 36, 0, 10000)
    """
    if not value:
        return None
    match = _TIME_PATTERN.fullmatch(value)
    if match is None:
        raise ValueError(f"not an HHMMSS time: {value!r}")
    hour, minute, second, fraction = match.groups()
    fraction = (fraction or "")[:_MICROSECOND_DIGITS]
    microsecond = int(fraction.ljust(_MICROSECOND_DIGITS, "0"))
    return datetime.time(int(hour), int(minute), int(second), microsecond)


def _parse_date_field(value: str) -> datetime.date | None:
    if not value:
        return None
    match = _DATE_PATTERN.fullmatch(value)
    if match is None:
        raise ValueError(f"not a DDMMYY date: {value!r}")
    day, month, year = match.groups()
    return datetime.date(_CENTURY + int(year), int(month), int(day))


def parse_time(fields: FieldReader) -> datetime.time | None:
    """Decode a UTC time-of-day field."""
    return fields.read(_parse_time_field)


def parse_date(fields: FieldReader) -> datetime.date | None:
    """Decode a DDMMYY calendar date field."""
    return fields.read(_parse_date_field)
