"""UDP transport for magic packets.

Implements `core.interfaces.transport.PacketTransport` with a plain IPv4
datagram socket. The socket is created per send and closed when the `with`
block exits, on success and on failure alike.
"""

from __future__ import annotations

import logging
import socket

from core.domain.errors import SendFailedError
from core.domain.models import IPv4Endpoint
from core.interfaces.transport import PacketTransport

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 1.0


class UdpSender(PacketTransport):
    """Send one datagram per call; never retries."""

    def __init__(self, *, broadcast: bool = True) -> None:
        # SO_BROADCAST lets a directed-broadcast address (x.x.x.255) be used as the target.
        self._broadcast = broadcast

    def send(
        self,
        payload: bytes,
        endpoint: IPv4Endpoint,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> int:
        logger.debug("Sending %d bytes to %s (timeout=%.2fs)", len(payload), endpoint, timeout)
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                if self._broadcast:
                    sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
                sock.settimeout(timeout)
                sent = sock.sendto(payload, endpoint.address)
        except OSError as exc:
            logger.warning("UDP send to %s failed: %s", endpoint, exc)
            raise SendFailedError(
                f"Failed to send magic packet to {endpoint}: {exc}",
                "Check that the address is reachable from this host",
                cause=exc,
            ) from exc

        if sent != len(payload):
            raise SendFailedError(
                f"Failed to send magic packet to {endpoint}: "
                f"only {sent} of {len(payload)} bytes were sent",
            )
        return sent


def send_packet(
    payload: bytes,
    endpoint: IPv4Endpoint,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> int:
    """Send `payload` to `endpoint` with a default `UdpSender`."""

    return UdpSender().send(payload, endpoint, timeout)
