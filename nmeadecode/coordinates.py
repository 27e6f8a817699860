"""Angle and position field decoders.

NMEA carries angles in three layouts, and different sentences use
different ones for fields that look alike:

    raw degree       77.52       -> 77.52 degrees (course, variation)
    scaled degree    4717.11437  -> 47.1711437 degrees (value / 100)
    position degree  4717.11364  -> 47 degrees + 17.11364 minutes
                                 -> 47.2852273 degrees

Latitude and longitude combine a position degree with the following
hemisphere field and fold the sign into the value: South and West are
negative, North and East (or an empty indicator) positive.
"""

from nmeadecode.fields import FieldReader, parse_float_field
from nmeadecode.parameters import (
    EastWest,
    NorthSouth,
    parse_east_west_indicator,
    parse_north_south_indicator,
)
from nmeadecode.units import Degree, Minute

# Minutes are the last 2 digits before the decimal point of DDDMM.MMMM
_MINUTE_DIGITS_SCALE = 100.0
_MINUTES_PER_DEGREE = 60.0


def _position_to_decimal_degrees(value: float) -> float:
    """Convert a DDDMM.MMMM number to decimal degrees.

    Example:
        >>> _position_to_decimal_degrees(4807.038)  # 48° 07.038'
        48.1173
    """
    value /= _MINUTE_DIGITS_SCALE
    degrees = int(value)
    minutes = (value - degrees) * _MINUTE_DIGITS_SCALE
    return degrees + minutes / _MINUTES_PER_DEGREE


def parse_raw_degree(fields: FieldReader) -> Degree | None:
    """Decode a degree field taken as-is, such as course over ground."""
    value = fields.read(parse_float_field)
    if value is None:
        return None
    return Degree(value)


def parse_degree(fields: FieldReader) -> Degree | None:
    """Decode a compact degree field, dividing the value by 100.

    Example:
        "4717.11399" -> Degree(47.1711399)
    """
    value = fields.read(parse_float_field)
    if value is None:
        return None
    return Degree(value / _MINUTE_DIGITS_SCALE)


def parse_position_degree(fields: FieldReader) -> Degree | None:
    """Decode an unsigned NMEA DDMM.MMMM / DDDMM.MMMM coordinate."""
    value = fields.read(parse_float_field)
    if value is None:
        return None
    return Degree(_position_to_decimal_degrees(value))


def parse_latitude(fields: FieldReader) -> Degree | None:
    """Decode a latitude and its N/S indicator into signed degrees.

    Consumes two fields. The result is None if the coordinate is empty;
    an empty indicator leaves the value positive.

    Example:
        "4717.11364,S" -> Degree(-47.2852273...)
    """
    degree = parse_position_degree(fields)
    hemisphere = parse_north_south_indicator(fields)
    if degree is not None and hemisphere is NorthSouth.SOUTH:
        return Degree(-degree.value)
    return degree


def parse_longitude(fields: FieldReader) -> Degree | None:
    """Decode a longitude and its E/W indicator into signed degrees."""
    degree = parse_position_degree(fields)
    hemisphere = parse_east_west_indicator(fields)
    if degree is not None and hemisphere is EastWest.WEST:
        return Degree(-degree.value)
    return degree


def parse_minute(fields: FieldReader) -> Minute | None:
    """Decode an angle given in minutes, such as a DTM datum offset."""
    value = fields.read(parse_float_field)
    if value is None:
        return None
    return Minute(value)
