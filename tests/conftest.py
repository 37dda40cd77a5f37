"""Shared fixtures: isolated settings environment and a recording transport."""

import os

import pytest

from core.domain.models import IPv4Endpoint


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run every test away from real WOL_* variables and project .env files."""

    for key in list(os.environ):
        if key.upper().startswith("WOL_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


class RecordingTransport:
    """Transport double that records calls instead of touching the network."""

    def __init__(self, error: Exception | None = None):
        self.calls: list[tuple[bytes, IPv4Endpoint, float]] = []
        self.error = error

    def send(self, payload: bytes, endpoint: IPv4Endpoint, timeout: float) -> int:
        self.calls.append((payload, endpoint, timeout))
        if self.error is not None:
            raise self.error
        return len(payload)


@pytest.fixture
def transport():
    return RecordingTransport()
