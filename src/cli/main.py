"""Typer application for `wol`.

The CLI gathers raw strings, hands them to the wake pipeline and renders the
outcome. All validation and network work happens in `core`.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.logging import RichHandler

from adapters.json_exporter import export_result_json, result_to_json
from cli import doctor
from cli.ui_components import build_console, format_settings_error, print_error, print_success
from core.config import AppSettings
from core.domain.errors import WakeError
from core.services.wake_pipeline import WakeRequest, wake as run_wake

# click exits 2 on usage errors (missing argument, unknown option, bad value).
USAGE_ERROR_EXIT_CODE = 2

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Wake-on-LAN: send a magic packet to wake a network device.",
)
app.command(name="doctor")(doctor.run)

_WAKE_EPILOG = """
Examples:

  wol wake AABBCCDDEEFF 192.168.1.100

  wol wake -p 7 aabbccddeeff 192.168.1.100

  wol wake --port 9 AABBCCDDEEFF 10.0.0.50
"""


def _setup_logging(level: str, *, color: bool | None) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=build_console(color=color, stderr=True), show_path=False)],
        force=True,
    )


@app.command(epilog=_WAKE_EPILOG)
def wake(
    mac: str = typer.Argument(
        ...,
        metavar="MAC_ADDRESS",
        help="Target MAC address: 12 hex chars, no separators, any case (e.g. AABBCCDDEEFF).",
        show_default=False,
    ),
    ip: str = typer.Argument(
        ...,
        metavar="IP_ADDRESS",
        help="Target device IPv4 address on the local network.",
        show_default=False,
    ),
    port: Optional[str] = typer.Option(
        None,
        "--port",
        "-p",
        help="UDP port to send the packet to (default: WOL_DEFAULT_PORT or 9).",
        show_default=False,
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Send timeout in seconds (default: WOL_SEND_TIMEOUT_SECONDS or 1.0).",
        show_default=False,
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the result as JSON to this file.",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Send a Wake-on-LAN magic packet to MAC_ADDRESS via IP_ADDRESS."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(
            build_console(color=False if no_color else None, stderr=True),
            WakeError(
                f"Invalid configuration: {format_settings_error(exc)}",
                "Check the WOL_* environment variables and .env files",
            ),
        )
        raise typer.Exit(code=1) from exc

    color = False if no_color else settings.color
    _setup_logging("DEBUG" if verbose else settings.log_level, color=color)

    if timeout is not None and (not math.isfinite(timeout) or timeout <= 0):
        raise typer.BadParameter("timeout must be a finite number greater than 0", param_hint="--timeout")

    console = build_console(color=color)
    err_console = build_console(color=color, stderr=True)

    request = WakeRequest(
        mac=mac,
        ip=ip,
        port=port if port is not None else str(settings.default_port),
        timeout=timeout,
    )
    try:
        result = run_wake(request, settings=settings)
    except WakeError as exc:
        print_error(err_console, exc)
        raise typer.Exit(code=exc.exit_code) from exc

    if output is not None:
        export_result_json(result=result, output_path=output)

    if json_output:
        typer.echo(result_to_json(result))
    else:
        print_success(console, result)


def run() -> None:
    """Console entry point; every failure exits 1, usage errors included."""

    try:
        app()
    except SystemExit as exc:
        if exc.code == USAGE_ERROR_EXIT_CODE:
            raise SystemExit(1) from None
        raise
