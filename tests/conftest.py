"""Shared fixtures for nmeadecode tests."""

import pytest

from nmeadecode import calculate_checksum


def _frame(data: str, envelope: str = "$") -> str:
    return f"{envelope}{data}*{calculate_checksum(data):02X}\r\n"


@pytest.fixture
def frame():
    """Wrap a data span in an envelope, a valid checksum and CRLF.

    Example:
        frame("GPGLQ,RMC") -> "$GPGLQ,RMC*26\\r\\n"
    """
    return _frame
