"""Rich UI components for the CLI.

Keeps command logic apart from visual details. Every function receives the
`Console` to draw on, so colour handling is decided once by whoever builds
the console.
"""

from __future__ import annotations

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.errors import WakeError
from core.domain.models import WakeResult

CHECK_MARK = "✔"
CROSS_MARK = "✖"


def build_console(*, color: bool | None = None, stderr: bool = False) -> Console:
    """Create a console; ``color=None`` leaves terminal detection to Rich."""

    return Console(
        stderr=stderr,
        force_terminal=True if color else None,
        no_color=color is False,
        highlight=False,
    )


def print_success(console: Console, result: WakeResult) -> None:
    """Print the human readable report for a sent packet."""

    console.print()
    console.print(
        Text.assemble(
            (CHECK_MARK, "green"),
            " ",
            ("Magic packet sent successfully!", "bold green"),
        )
    )
    console.print()
    console.print(Text.assemble("  ", ("MAC Address:", "dim"), " ", (result.mac_display, "bold")))
    console.print(Text.assemble("  ", ("Destination:", "dim"), " ", (str(result.endpoint), "bold")))
    console.print()


def print_error(console: Console, error: WakeError) -> None:
    """Print ``✖ Error: <message>`` followed by the indented hint, if any."""

    console.print(
        Text.assemble(
            (CROSS_MARK, "red"),
            " ",
            ("Error:", "red"),
            " ",
            error.message,
        )
    )
    if error.hint:
        console.print(Text.assemble("  ", error.hint))


def build_doctor_table() -> Table:
    """Empty table for `wol doctor` results."""

    table = Table(title="wol doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def format_settings_error(exc: ValidationError) -> str:
    """One-line summary of the first invalid setting, e.g. ``default_port: ...``."""

    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"])
    summary = f"{field}: {error['msg']}" if field else error["msg"]
    if exc.error_count() > 1:
        summary += f" (+{exc.error_count() - 1} more)"
    return summary
