"""
addrkit: resolve, bind-check and display the local addresses a network
tool listens on or binds its outgoing connections to.
"""
from .core import (
    Address,
    AddressError,
    AddressList,
    IPv4Address,
    IPv6Address,
    IndexOutOfRange,
    NotBindable,
    ResolutionFailure,
    ResolutionQuery,
    UnsupportedFamily,
    format_sockaddr,
    from_sockaddr,
    to_sockaddr,
)
from .validate import is_bindable
from .resolve import (
    AddressConfig,
    FailurePolicy,
    load_config,
    resolve_config,
    resolve_listen_addresses,
    resolve_source_ip,
    resolve_source_ips,
)

__version__ = "0.1.0"

__all__ = [
    "Address",
    "AddressConfig",
    "AddressError",
    "AddressList",
    "FailurePolicy",
    "IPv4Address",
    "IPv6Address",
    "IndexOutOfRange",
    "NotBindable",
    "ResolutionFailure",
    "ResolutionQuery",
    "UnsupportedFamily",
    "format_sockaddr",
    "from_sockaddr",
    "is_bindable",
    "load_config",
    "resolve_config",
    "resolve_listen_addresses",
    "resolve_source_ip",
    "resolve_source_ips",
    "to_sockaddr",
]
