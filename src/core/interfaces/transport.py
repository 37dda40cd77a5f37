"""Transport contract for delivering a magic packet.

`PacketTransport` is structural (duck typing), so the UDP adapter and test
doubles are interchangeable without inheritance.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import IPv4Endpoint


@runtime_checkable
class PacketTransport(Protocol):
    """Minimal contract for a one-shot datagram sender.

    Rules:
    - One call sends one datagram; implementations never retry.
    - Transport failures are raised as `SendFailedError`.
    - Returns the number of bytes handed to the network stack.
    """

    def send(self, payload: bytes, endpoint: IPv4Endpoint, timeout: float) -> int:
        """Send `payload` to `endpoint`, blocking at most `timeout` seconds."""

        ...
