"""Error taxonomy for the wake flow.

Validation errors (`InvalidMacError`, `InvalidIpError`, `InvalidPortError`)
are raised before any network action and always fail the same way for the
same input. `SendFailedError` wraps the transport error that stopped the
datagram from leaving. The CLI maps every `WakeError` to a message, an
optional hint and an exit code.
"""

from __future__ import annotations


class WakeError(Exception):
    """Base class for every failure the core reports to its caller."""

    kind = "WakeError"
    exit_code = 1

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message} ({self.hint})"
        return self.message


class InvalidMacError(WakeError, ValueError):
    kind = "InvalidMac"


class InvalidIpError(WakeError, ValueError):
    kind = "InvalidIp"


class InvalidPortError(WakeError, ValueError):
    kind = "InvalidPort"


class SendFailedError(WakeError):
    """The datagram could not be handed to the network stack."""

    kind = "SendFailed"

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        *,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, hint)
        self.cause = cause
