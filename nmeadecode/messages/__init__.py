"""Message decoders, one per supported NMEA message ID."""

from nmeadecode.messages.dtm import parse_dtm
from nmeadecode.messages.gbs import parse_gbs
from nmeadecode.messages.gga import parse_gga
from nmeadecode.messages.gll import parse_gll
from nmeadecode.messages.gns import parse_gns
from nmeadecode.messages.grs import parse_grs
from nmeadecode.messages.gsa import parse_gsa
from nmeadecode.messages.gst import parse_gst
from nmeadecode.messages.gsv import parse_gsv
from nmeadecode.messages.poll import parse_gbq, parse_glq, parse_gnq, parse_gpq
from nmeadecode.messages.rmc import parse_rmc, parse_rmc_signed
from nmeadecode.messages.txt import parse_txt
from nmeadecode.messages.types import (
    DTMMessage,
    GBQMessage,
    GBSMessage,
    GGAMessage,
    GLLMessage,
    GLQMessage,
    GNQMessage,
    GNSMessage,
    GPQMessage,
    GRSMessage,
    GSAMessage,
    GSTMessage,
    GSVMessage,
    RMCMessage,
    SatelliteInView,
    SignedRMCMessage,
    TXTMessage,
    VLWMessage,
    VTGMessage,
    ZDAMessage,
)
from nmeadecode.messages.vlw import parse_vlw
from nmeadecode.messages.vtg import parse_vtg
from nmeadecode.messages.zda import parse_zda

__all__ = [
    "DTMMessage",
    "GBQMessage",
    "GBSMessage",
    "GGAMessage",
    "GLLMessage",
    "GLQMessage",
    "GNQMessage",
    "GNSMessage",
    "GPQMessage",
    "GRSMessage",
    "GSAMessage",
    "GSTMessage",
    "GSVMessage",
    "RMCMessage",
    "SatelliteInView",
    "SignedRMCMessage",
    "TXTMessage",
    "VLWMessage",
    "VTGMessage",
    "ZDAMessage",
    "parse_dtm",
    "parse_gbq",
    "parse_gbs",
    "parse_gga",
    "parse_gll",
    "parse_glq",
    "parse_gnq",
    "parse_gns",
    "parse_gpq",
    "parse_grs",
    "parse_gsa",
    "parse_gst",
    "parse_gsv",
    "parse_rmc",
    "parse_rmc_signed",
    "parse_txt",
    "parse_vlw",
    "parse_vtg",
    "parse_zda",
]
