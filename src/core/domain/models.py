"""Domain models (Pydantic v2).

These models describe *what* a wake target is, not how it is parsed from the
command line or delivered over the network. All of them are frozen: a MAC or
an endpoint is validated once and never mutated afterwards.
"""

from __future__ import annotations

from datetime import datetime, timezone
from ipaddress import IPv4Address

from pydantic import BaseModel, Field, field_serializer
from pydantic.config import ConfigDict

MAC_LENGTH = 6


class MacAddress(BaseModel):
    """A 48-bit hardware address, stored as its 6 raw bytes."""

    model_config = ConfigDict(frozen=True)

    octets: bytes = Field(
        ...,
        min_length=MAC_LENGTH,
        max_length=MAC_LENGTH,
        description="The 6 raw bytes of the address.",
    )

    @field_serializer("octets")
    def _serialize_octets(self, octets: bytes) -> str:
        return octets.hex()

    def __bytes__(self) -> bytes:
        return self.octets

    def hex(self) -> str:
        """Lowercase 12-character hex form, no separators."""

        return self.octets.hex()

    def display(self) -> str:
        """Colon separated uppercase form, e.g. ``AA:BB:CC:DD:EE:FF``."""

        return ":".join(f"{octet:02X}" for octet in self.octets)

    def __str__(self) -> str:
        return self.display()


class IPv4Endpoint(BaseModel):
    """Destination of the magic packet: IPv4 host plus UDP port."""

    model_config = ConfigDict(frozen=True)

    host: IPv4Address = Field(
        ...,
        description="Target IPv4 address (unicast or directed broadcast).",
    )
    port: int = Field(
        default=9,
        ge=1,
        le=65535,
        description="Destination UDP port.",
    )

    @property
    def address(self) -> tuple[str, int]:
        """``(host, port)`` tuple as expected by ``socket.sendto``."""

        return str(self.host), self.port

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


class WakeResult(BaseModel):
    """Outcome of a magic packet handed to the network stack.

    WoL has no acknowledgement, so this only records that the datagram left
    without a transport error, never that the device actually woke up.
    """

    model_config = ConfigDict(frozen=True)

    mac: MacAddress
    endpoint: IPv4Endpoint
    bytes_sent: int = Field(..., ge=0, description="Bytes accepted by the socket.")
    sent_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Moment the datagram was sent (UTC).",
    )

    @property
    def mac_display(self) -> str:
        return self.mac.display()
