"""GSV sentence decoder.

GSV (GNSS Satellites in View) reports up to 4 satellites per sentence; a
receiver sends as many sentences as needed to cover every satellite.

GSV Sentence Format:
    $GPGSV,3,1,09,09,,,17,10,,,40,12,,,49,13,,,35,1*6F
           | | |  |              |              |
           | | |  +--------------+--------------+-- 1-4 satellite blocks:
           | | |                                    ID, elevation, azimuth, C/N0
           | | +-- Number of satellites in view     (last field: signal ID)
           | +-- Sentence number
           +-- Number of sentences

The number of satellite blocks is implied by the field count. NMEA 4.10
receivers append a signal ID after the last block, older ones do not.
"""

from nmeadecode.fields import FieldReader, parse_int, parse_u8
from nmeadecode.identity import parse_satellite_id, parse_signal_id
from nmeadecode.messages.types import GSVMessage, SatelliteInView

MAX_SATELLITES_PER_GSV = 4

_FIELDS_PER_SATELLITE = 4


def _parse_satellite(fields: FieldReader) -> SatelliteInView:
    return SatelliteInView(
        svid=parse_satellite_id(fields),
        elv=parse_u8(fields),
        az=parse_int(fields),
        cno=parse_u8(fields),
    )


def parse_gsv(fields: FieldReader) -> GSVMessage:
    """Decode a GSV payload.

    Whatever is left after 4 satellite blocks and the signal ID is left
    unread, so the caller reports it as trailing data.
    """
    num_msg = parse_u8(fields)
    msg_num = parse_u8(fields)
    num_sv = parse_u8(fields)

    satellites = []
    while (
        len(satellites) < MAX_SATELLITES_PER_GSV
        and fields.remaining >= _FIELDS_PER_SATELLITE
    ):
        satellites.append(_parse_satellite(fields))

    signal_id = None
    if not fields.exhausted:
        signal_id = parse_signal_id(fields)

    return GSVMessage(
        num_msg=num_msg,
        msg_num=msg_num,
        num_sv=num_sv,
        satellites=tuple(satellites),
        signal_id=signal_id,
    )
