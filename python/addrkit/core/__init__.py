from .errors import AddressError, IndexOutOfRange, NotBindable, ResolutionFailure, UnsupportedFamily
from .models import Address, AddressList, IPv4Address, IPv6Address, ResolutionQuery
from .codec import format_sockaddr, from_sockaddr, to_sockaddr

__all__ = [
    "Address",
    "AddressError",
    "AddressList",
    "IPv4Address",
    "IPv6Address",
    "IndexOutOfRange",
    "NotBindable",
    "ResolutionFailure",
    "ResolutionQuery",
    "UnsupportedFamily",
    "format_sockaddr",
    "from_sockaddr",
    "to_sockaddr",
]
