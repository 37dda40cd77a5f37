"""Doctor command for environment diagnostics."""

from __future__ import annotations

import socket

import typer
from pydantic import ValidationError

from adapters.udp_sender import UdpSender
from cli.ui_components import build_console, build_doctor_table, format_settings_error
from core.config import AppSettings, get_user_env_file
from core.domain.errors import SendFailedError
from core.domain.models import IPv4Endpoint
from core.packet import MAGIC_PACKET_SIZE, build_magic_packet
from core.validation import validate_mac

_SELF_TEST_MAC = "AABBCCDDEEFF"


def _check_settings() -> tuple[bool, str, AppSettings | None]:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        return False, format_settings_error(exc), None
    detail = (
        f"port={settings.default_port} timeout={settings.send_timeout_seconds}s "
        f"log_level={settings.log_level}"
    )
    return True, detail, settings


def _check_udp_socket() -> tuple[bool, str]:
    """Create an IPv4 UDP socket with SO_BROADCAST enabled."""

    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        return True, "IPv4 UDP socket with SO_BROADCAST"
    except OSError as exc:
        return False, str(exc)


def _check_loopback(timeout: float) -> tuple[bool, str]:
    """Send a magic packet to a local listener and compare what arrives."""

    payload = build_magic_packet(validate_mac(_SELF_TEST_MAC))
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as listener:
            listener.bind(("127.0.0.1", 0))
            listener.settimeout(timeout)
            port = listener.getsockname()[1]
            endpoint = IPv4Endpoint(host="127.0.0.1", port=port)
            UdpSender(broadcast=False).send(payload, endpoint, timeout)
            data, _ = listener.recvfrom(2048)
    except SendFailedError as exc:
        return False, exc.message
    except OSError as exc:
        return False, str(exc)

    if data != payload:
        return False, f"received {len(data)} bytes, expected the {MAGIC_PACKET_SIZE}-byte packet"
    return True, f"{len(data)} bytes received on 127.0.0.1:{port}"


def run(
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output."),
) -> None:
    """Run environment diagnostics (config, UDP socket, loopback self-test)."""

    console = build_console(color=False if no_color else None)
    table = build_doctor_table()
    failed = False

    ok_cfg, detail_cfg, settings = _check_settings()
    table.add_row("Configuration", "OK" if ok_cfg else "FAIL", detail_cfg)
    table.add_row("User config file", "OK", str(get_user_env_file()))
    failed |= not ok_cfg

    ok_sock, detail_sock = _check_udp_socket()
    table.add_row("UDP socket", "OK" if ok_sock else "FAIL", detail_sock)
    failed |= not ok_sock

    timeout = settings.send_timeout_seconds if settings else 1.0
    ok_loop, detail_loop = _check_loopback(timeout)
    table.add_row("Loopback self-test", "OK" if ok_loop else "FAIL", detail_loop)
    failed |= not ok_loop

    console.print(table)

    if failed:
        console.print("\n[yellow]Note:[/yellow] Fix the failing checks before sending magic packets.")
        raise typer.Exit(code=1)
