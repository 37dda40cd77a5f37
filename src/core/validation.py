"""Input validation for wake targets.

Every check is pure: it either returns the parsed value or raises the
matching `WakeError` subclass with a user-actionable hint. The caller decides
the order; the CLI runs MAC, then IP, then port, matching argument order.
"""

from __future__ import annotations

import re
from ipaddress import IPv4Address

from core.domain.errors import InvalidIpError, InvalidMacError, InvalidPortError
from core.domain.models import IPv4Endpoint, MacAddress

_MAC_RE = re.compile(r"[0-9A-Fa-f]{12}")
# Each group is "0" or a digit run without a leading zero.
_IPV4_RE = re.compile(r"(?:0|[1-9][0-9]*)(?:\.(?:0|[1-9][0-9]*)){3}")
_PORT_RE = re.compile(r"[0-9]+")

MIN_PORT = 1
MAX_PORT = 65535

MAC_HINT = "Expected: 12 hexadecimal characters (e.g., AABBCCDDEEFF)"
IP_SHAPE_HINT = "Expected: Valid IPv4 address (e.g., 192.168.1.100)"
IP_RANGE_HINT = "Each octet must be between 0 and 255"
PORT_NUMERIC_HINT = f"Expected: Numeric value between {MIN_PORT} and {MAX_PORT}"
PORT_RANGE_HINT = f"Expected: Value between {MIN_PORT} and {MAX_PORT}"


def validate_mac(raw: str) -> MacAddress:
    """Parse a 12-character hex MAC (any case, no separators)."""

    if len(raw) != 12 or not _MAC_RE.fullmatch(raw):
        raise InvalidMacError(f"Invalid MAC address '{raw}'", MAC_HINT)
    return MacAddress(octets=bytes.fromhex(raw))


def validate_ipv4(raw: str) -> IPv4Address:
    """Parse a dotted-quad IPv4 address.

    The shape check rejects empty groups, signs, whitespace and leading zeros;
    the range check then requires every octet to be in ``[0, 255]``.
    """

    if not _IPV4_RE.fullmatch(raw):
        raise InvalidIpError(f"Invalid IP address '{raw}'", IP_SHAPE_HINT)

    groups = raw.split(".")
    # Without leading zeros, more than three digits is always above 255.
    if any(len(group) > 3 for group in groups):
        raise InvalidIpError(f"Invalid IP address '{raw}'", IP_RANGE_HINT)

    octets = [int(group) for group in groups]
    if any(octet > 255 for octet in octets):
        raise InvalidIpError(f"Invalid IP address '{raw}'", IP_RANGE_HINT)
    return IPv4Address(bytes(octets))


def validate_port(raw: str) -> int:
    """Parse a decimal UDP port in ``[1, 65535]``."""

    if not _PORT_RE.fullmatch(raw):
        raise InvalidPortError(f"Invalid port '{raw}'", PORT_NUMERIC_HINT)

    # More than five significant digits is always out of range.
    digits = raw.lstrip("0")
    if len(digits) > len(str(MAX_PORT)):
        raise InvalidPortError(f"Invalid port '{raw}'", PORT_RANGE_HINT)

    port = int(raw)
    if port < MIN_PORT or port > MAX_PORT:
        raise InvalidPortError(f"Invalid port '{raw}'", PORT_RANGE_HINT)
    return port


def validate_endpoint(ip: str, port: str) -> IPv4Endpoint:
    """Validate IP then port and combine them into an `IPv4Endpoint`."""

    host = validate_ipv4(ip)
    return IPv4Endpoint(host=host, port=validate_port(port))
