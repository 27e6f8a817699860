"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F
           |         |        | |         | | |  |   |     | |     | ||
           |         |        | |         | | |  |   |     | |     | |+-- DGPS station ID
           |         |        | |         | | |  |   |     | |     | +-- DGPS age (seconds)
           |         |        | |         | | |  |   |     | +-----+-- Geoid height (M=meters)
           |         |        | |         | | |  |   +-----+-- Altitude above MSL
           |         |        | |         | | |  +-- HDOP (horizontal dilution)
           |         |        | |         | | +-- Number of satellites
           |         |        | |         | +-- Fix quality (0-8)
           |         |        | +---------+-- Longitude + E/W
           |         +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

Coordinates are DDMM.MMMM with the hemisphere folded into the sign. The two
unit fields must be "M" (or empty when the receiver has no fix).
"""

from nmeadecode.coordinates import parse_latitude, parse_longitude
from nmeadecode.fields import FieldReader, parse_float, parse_int, parse_u8
from nmeadecode.measures import parse_meter, parse_meter_unit, parse_second
from nmeadecode.messages.types import GGAMessage
from nmeadecode.parameters import parse_fix_quality
from nmeadecode.timefields import parse_time


def parse_gga(fields: FieldReader) -> GGAMessage:
    """Decode a GGA payload.

    Note:
        A returned GGAMessage with quality INVALID is a successfully decoded
        sentence that has no GPS fix. This is different from a raised
        DecodeError, which indicates a malformed sentence.
    """
    time = parse_time(fields)
    lat = parse_latitude(fields)
    lon = parse_longitude(fields)
    quality = parse_fix_quality(fields)
    num_sv = parse_u8(fields)
    hdop = parse_float(fields)
    alt = parse_meter(fields)
    parse_meter_unit(fields)
    sep = parse_meter(fields)
    parse_meter_unit(fields)
    diff_age = parse_second(fields)
    diff_station = parse_int(fields)

    return GGAMessage(
        time=time,
        lat=lat,
        lon=lon,
        quality=quality,
        num_sv=num_sv,
        hdop=hdop,
        alt=alt,
        sep=sep,
        diff_age=diff_age,
        diff_station=diff_station,
    )
