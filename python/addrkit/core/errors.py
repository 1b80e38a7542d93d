# addrkit/core/errors.py
from typing import Any, Optional


class AddressError(Exception):
    """Base class for every error raised by addrkit."""


class ResolutionFailure(AddressError):
    """
    The system resolver (getaddrinfo) refused the query.
    `code` is the EAI_* status when the resolver reported one.
    """

    def __init__(self, diagnostic: str, code: Optional[int] = None, query: Any = None):
        super().__init__(f"getaddrinfo: {diagnostic}")
        self.diagnostic = diagnostic
        self.code = code
        self.query = query


class NotBindable(AddressError):
    """A candidate address failed the bind probe."""

    def __init__(self, address: Any, reason: str):
        # Imported lazily, codec imports the models which import this module
        from .codec import format_sockaddr
        super().__init__(f"{format_sockaddr(address)} is not local: {reason}")
        self.address = address
        self.reason = reason


class UnsupportedFamily(AddressError, TypeError):
    """Something other than an IPv4 or IPv6 address reached addrkit."""


class IndexOutOfRange(AddressError, IndexError):
    """AddressList was indexed beyond its bounds."""
