import socket

import pytest

from addrkit.core.codec import format_sockaddr, from_sockaddr, to_sockaddr
from addrkit.core.errors import UnsupportedFamily
from addrkit.core.models import IPv4Address, IPv6Address


def test_format_ip4():
    assert format_sockaddr(IPv4Address(host="127.0.0.1", port=8080)) == "[127.0.0.1]:8080"


def test_format_ip6():
    assert format_sockaddr(IPv6Address(host="::1", port=443)) == "[::1]:443"


def test_format_ip6_is_compressed():
    address = IPv6Address(host="2001:0db8:0000:0000:0000:0000:0000:0001", port=80)
    assert format_sockaddr(address) == "[2001:db8::1]:80"


def test_format_is_idempotent():
    address = IPv6Address(host="fe80::1", port=9000, scope_id=3)
    assert format_sockaddr(address) == format_sockaddr(address)


def test_format_rejects_other_values():
    with pytest.raises(UnsupportedFamily):
        format_sockaddr(("127.0.0.1", 80))


def test_from_sockaddr():
    address = from_sockaddr(socket.AF_INET, ("192.0.2.10", 5000))
    assert address == IPv4Address(host="192.0.2.10", port=5000)

    address = from_sockaddr(socket.AF_INET6, ("fe80::1%lo", 5000, 0, 1))
    assert address == IPv6Address(host="fe80::1", port=5000, flowinfo=0, scope_id=1)


def test_from_sockaddr_unsupported_family():
    with pytest.raises(UnsupportedFamily):
        from_sockaddr(socket.AF_UNIX, ("/tmp/socket",))


def test_to_sockaddr():
    assert to_sockaddr(IPv4Address(host="127.0.0.1", port=80)) == ("127.0.0.1", 80)
    assert to_sockaddr(IPv6Address(host="::1", port=80, scope_id=2)) == ("::1", 80, 0, 2)
    with pytest.raises(UnsupportedFamily):
        to_sockaddr(object())
