"""Wake flow orchestration.

Validation, packet building and delivery live here so that every entry
point (CLI, tests, future APIs) runs the same sequence. Printing stays in the
CLI layer; this module only logs and raises `WakeError` subclasses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from adapters.udp_sender import UdpSender
from core.config import AppSettings
from core.domain.models import IPv4Endpoint, MacAddress, WakeResult
from core.interfaces.transport import PacketTransport
from core.packet import build_magic_packet
from core.validation import validate_ipv4, validate_mac, validate_port

logger = logging.getLogger(__name__)

DEFAULT_PORT = "9"


@dataclass
class WakeRequest:
    """Raw, unvalidated input for one wake attempt."""

    mac: str
    ip: str
    port: str = DEFAULT_PORT
    timeout: float | None = None


@dataclass(frozen=True)
class WakeTarget:
    """A request after validation."""

    mac: MacAddress
    endpoint: IPv4Endpoint


def resolve_target(request: WakeRequest) -> WakeTarget:
    """Validate MAC, then IP, then port; the first failure is raised."""

    mac = validate_mac(request.mac)
    host = validate_ipv4(request.ip)
    port = validate_port(request.port)
    return WakeTarget(mac=mac, endpoint=IPv4Endpoint(host=host, port=port))


def wake(
    request: WakeRequest,
    *,
    transport: PacketTransport | None = None,
    settings: AppSettings | None = None,
) -> WakeResult:
    """Validate `request`, build its magic packet and send it once.

    Raises:
        InvalidMacError, InvalidIpError, InvalidPortError: before any send.
        SendFailedError: when the transport could not send the datagram.
    """

    target = resolve_target(request)
    payload = build_magic_packet(target.mac)
    logger.debug("Built %d-byte magic packet for %s", len(payload), target.mac)

    transport = transport or UdpSender()
    if request.timeout is not None:
        timeout = request.timeout
    else:
        timeout = (settings or AppSettings()).send_timeout_seconds

    sent = transport.send(payload, target.endpoint, timeout)
    logger.info("Magic packet for %s sent to %s", target.mac, target.endpoint)
    return WakeResult(mac=target.mac, endpoint=target.endpoint, bytes_sent=sent)
