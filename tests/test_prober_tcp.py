"""Unit tests for TcpProber and address resolution."""

import socket

import pytest

from tcping import prober_tcp
from tcping.prober_tcp import UNKNOWN_ADDRESS, TcpProber, resolve_address


class TestResolveAddress:
    """Test display address resolution."""

    def test_literal_ipv4_resolves_to_itself(self):
        assert resolve_address("127.0.0.1") == "127.0.0.1"

    def test_resolution_failure_returns_sentinel(self, monkeypatch):
        def broken_getaddrinfo(*args, **kwargs):
            raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

        monkeypatch.setattr(prober_tcp.socket, "getaddrinfo", broken_getaddrinfo)

        assert resolve_address("no-such-host.invalid") == UNKNOWN_ADDRESS

    def test_empty_result_returns_sentinel(self, monkeypatch):
        monkeypatch.setattr(prober_tcp.socket, "getaddrinfo", lambda *a, **kw: [])

        assert resolve_address("example.ru") == UNKNOWN_ADDRESS

    def test_first_address_is_used(self, monkeypatch):
        infos = [
            (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("93.184.216.34", 0)),
            (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("93.184.216.35", 0)),
        ]
        monkeypatch.setattr(prober_tcp.socket, "getaddrinfo", lambda *a, **kw: infos)

        assert resolve_address("example.ru") == "93.184.216.34"

    def test_ipv6_sockaddr(self, monkeypatch):
        infos = [(socket.AF_INET6, socket.SOCK_STREAM, 6, "", ("2001:db8::1", 0, 0, 0))]
        monkeypatch.setattr(prober_tcp.socket, "getaddrinfo", lambda *a, **kw: infos)

        assert resolve_address("example.ru") == "2001:db8::1"

    def test_sentinel_text(self):
        assert UNKNOWN_ADDRESS == "неизвестный адрес"


class TestTcpProber:
    """Test connect attempts against loopback sockets."""

    def test_default_timeout(self):
        prober = TcpProber()

        assert prober.timeout_ms == 5000
        assert prober.timeout_seconds == 5.0

    @pytest.mark.parametrize("timeout_ms", [0, -1])
    def test_non_positive_timeout_rejected(self, timeout_ms):
        with pytest.raises(ValueError, match="timeout_ms must be positive"):
            TcpProber(timeout_ms=timeout_ms)

    def test_probe_listening_port_succeeds(self, listening_port):
        prober = TcpProber(timeout_ms=2000)

        assert prober.probe("127.0.0.1", listening_port) is True

    def test_probe_closed_port_fails(self, closed_port):
        prober = TcpProber(timeout_ms=2000)

        assert prober.probe("127.0.0.1", closed_port) is False

    def test_probe_timeout_is_failure(self, monkeypatch):
        def slow_connect(address, timeout=None):
            raise TimeoutError("timed out")

        monkeypatch.setattr(prober_tcp.socket, "create_connection", slow_connect)

        assert TcpProber(timeout_ms=100).probe("192.0.2.1", 80) is False

    def test_probe_passes_host_and_timeout(self, monkeypatch):
        seen = {}

        class FakeConnection:
            def __enter__(self):
                return self

            def __exit__(self, *exc):
                seen["closed"] = True
                return False

        def fake_connect(address, timeout=None):
            seen["address"] = address
            seen["timeout"] = timeout
            return FakeConnection()

        monkeypatch.setattr(prober_tcp.socket, "create_connection", fake_connect)

        assert TcpProber(timeout_ms=1500).probe("example.ru", 443) is True
        assert seen == {"address": ("example.ru", 443), "timeout": 1.5, "closed": True}

    def test_probe_unresolvable_host_fails(self, monkeypatch):
        def broken_connect(address, timeout=None):
            raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

        monkeypatch.setattr(prober_tcp.socket, "create_connection", broken_connect)

        assert TcpProber().probe("no-such-host.invalid", 80) is False

    def test_probe_bad_idna_host_fails(self, monkeypatch):
        def broken_connect(address, timeout=None):
            raise UnicodeError("label empty or too long")

        monkeypatch.setattr(prober_tcp.socket, "create_connection", broken_connect)

        assert TcpProber().probe("a..b", 80) is False

    def test_resolve_delegates(self):
        assert TcpProber().resolve("127.0.0.1") == "127.0.0.1"
