# addrkit/core/codec.py
"""
Conversions between addrkit address models and the values the socket
module works with: the (family, sockaddr) pairs returned by getaddrinfo(),
the tuples bind() accepts, and the "[ip]:port" display form.
"""
import socket
from typing import Any, Tuple

from .errors import UnsupportedFamily
from .models import Address, IPv4Address, IPv6Address


def format_sockaddr(address: Address) -> str:
    """Printable representation of an address, e.g. `[127.0.0.1]:8080` or `[::1]:443`."""
    if not isinstance(address, (IPv4Address, IPv6Address)):
        raise UnsupportedFamily(f"IPv4 or IPv6 expected, got {type(address).__name__}")
    ip = socket.inet_ntop(address.pf_code, address.packed)
    return f"[{ip}]:{address.port}"


def from_sockaddr(family: int, sockaddr: Tuple[Any, ...]) -> Address:
    if family == socket.AF_INET:
        host, port = sockaddr[:2]
        return IPv4Address(host=host, port=port)
    if family == socket.AF_INET6:
        host, port, flowinfo, scope_id = sockaddr[:4]
        return IPv6Address(host=host, port=port, flowinfo=flowinfo, scope_id=scope_id)
    raise UnsupportedFamily(f"Not IPv4 and not IPv6: address family {family}")


def to_sockaddr(address: Address) -> Tuple[Any, ...]:
    """The address tuple socket.bind()/connect() expect for the address's family."""
    if isinstance(address, IPv4Address):
        return (address.host, address.port)
    if isinstance(address, IPv6Address):
        return (address.host, address.port, address.flowinfo, address.scope_id)
    raise UnsupportedFamily(f"IPv4 or IPv6 expected, got {type(address).__name__}")
