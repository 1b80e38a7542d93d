import socket
from typing import Any, List, Optional

import pytest


def ip4_info(host: str, port: int = 0):
    return (socket.AF_INET, socket.SOCK_STREAM, socket.IPPROTO_TCP, "", (host, port))


def ip6_info(host: str, port: int = 0, flowinfo: int = 0, scope_id: int = 0):
    return (socket.AF_INET6, socket.SOCK_STREAM, socket.IPPROTO_TCP, "", (host, port, flowinfo, scope_id))


class FakeResolver:
    """Stands in for socket.getaddrinfo, answering every query from a fixed table."""

    def __init__(self):
        self.results: List[Any] = []
        self.by_host = {}
        self.error: Optional[socket.gaierror] = None
        self.calls: List[tuple] = []

    def __call__(self, host, port, family=0, type=0, proto=0, flags=0):
        self.calls.append((host, port, family, type, proto, flags))
        if self.error is not None:
            raise self.error
        if host in self.by_host:
            return list(self.by_host[host])
        return list(self.results)


@pytest.fixture
def fake_resolver(monkeypatch):
    resolver = FakeResolver()
    monkeypatch.setattr(socket, "getaddrinfo", resolver)
    return resolver


def loopback6_available() -> bool:
    if not socket.has_ipv6:
        return False
    try:
        with socket.socket(socket.AF_INET6, socket.SOCK_STREAM) as s:
            s.bind(("::1", 0))
    except OSError:
        return False
    return True


requires_ip6 = pytest.mark.skipif(not loopback6_available(), reason="IPv6 loopback not available")

