"""Magic packet construction.

Wire layout (byte exact, NIC firmware matches on it):

    offset 0..5   : 6 x 0xFF            synchronization stream
    offset 6..101 : 16 x target MAC     6 bytes each

The result is always `MAGIC_PACKET_SIZE` bytes and is sent as the payload of
a single UDP datagram.
"""

from __future__ import annotations

from core.domain.models import MAC_LENGTH, MacAddress

SYNC_STREAM = b"\xff" * 6
MAC_REPETITIONS = 16
MAGIC_PACKET_SIZE = len(SYNC_STREAM) + MAC_LENGTH * MAC_REPETITIONS


def build_magic_packet(mac: MacAddress) -> bytes:
    """Return the 102-byte magic packet for `mac`."""

    return SYNC_STREAM + bytes(mac) * MAC_REPETITIONS


def format_mac_for_display(mac: MacAddress) -> str:
    """Render `mac` as ``AA:BB:CC:DD:EE:FF``."""

    return mac.display()
