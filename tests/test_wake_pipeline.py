"""Tests for the wake pipeline: end-to-end flow with a recording transport."""

from ipaddress import IPv4Address

import pytest

from conftest import RecordingTransport
from core.config import AppSettings
from core.domain.errors import InvalidIpError, InvalidMacError, InvalidPortError, SendFailedError
from core.services.wake_pipeline import WakeRequest, resolve_target, wake


class TestSuccessfulWake:
    def test_end_to_end(self, transport):
        result = wake(WakeRequest(mac="AABBCCDDEEFF", ip="192.168.1.100", port="9"), transport=transport)

        assert len(transport.calls) == 1
        payload, endpoint, timeout = transport.calls[0]
        assert payload == bytes.fromhex("FFFFFFFFFFFF" + "AABBCCDDEEFF" * 16)
        assert endpoint.host == IPv4Address("192.168.1.100")
        assert endpoint.port == 9
        assert timeout == 1.0

        assert result.mac_display == "AA:BB:CC:DD:EE:FF"
        assert str(result.endpoint) == "192.168.1.100:9"
        assert result.bytes_sent == 102

    def test_default_port_is_nine(self, transport):
        wake(WakeRequest(mac="aabbccddeeff", ip="10.0.0.50"), transport=transport)
        assert transport.calls[0][1].port == 9

    def test_request_timeout_wins(self, transport):
        settings = AppSettings(send_timeout_seconds=3.0)
        wake(
            WakeRequest(mac="aabbccddeeff", ip="10.0.0.50", timeout=0.25),
            transport=transport,
            settings=settings,
        )
        assert transport.calls[0][2] == 0.25

    def test_settings_timeout(self, transport):
        settings = AppSettings(send_timeout_seconds=2.5)
        wake(WakeRequest(mac="aabbccddeeff", ip="10.0.0.50"), transport=transport, settings=settings)
        assert transport.calls[0][2] == 2.5


class TestValidationStopsBeforeSend:
    def test_short_mac(self, transport):
        with pytest.raises(InvalidMacError):
            wake(WakeRequest(mac="AABBCCDDEEF", ip="192.168.1.100"), transport=transport)
        assert transport.calls == []

    def test_bad_ip(self, transport):
        with pytest.raises(InvalidIpError):
            wake(WakeRequest(mac="AABBCCDDEEFF", ip="192.168.1.999"), transport=transport)
        assert transport.calls == []

    def test_bad_port(self, transport):
        with pytest.raises(InvalidPortError):
            wake(WakeRequest(mac="AABBCCDDEEFF", ip="192.168.1.100", port="70000"), transport=transport)
        assert transport.calls == []

    def test_mac_checked_before_ip_and_port(self):
        with pytest.raises(InvalidMacError):
            resolve_target(WakeRequest(mac="bad", ip="bad", port="bad"))

    def test_ip_checked_before_port(self):
        with pytest.raises(InvalidIpError):
            resolve_target(WakeRequest(mac="AABBCCDDEEFF", ip="bad", port="bad"))


class TestSendFailure:
    def test_propagates_send_failed(self):
        error = SendFailedError("Failed to send magic packet to 10.0.0.50:9: unreachable")
        transport = RecordingTransport(error=error)

        with pytest.raises(SendFailedError) as excinfo:
            wake(WakeRequest(mac="AABBCCDDEEFF", ip="10.0.0.50"), transport=transport)
        assert excinfo.value is error
        assert len(transport.calls) == 1
