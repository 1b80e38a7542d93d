# addrkit/resolve/base.py
import enum
import logging
import socket
from typing import Any, Iterator, Optional

from addrkit.core.codec import from_sockaddr
from addrkit.core.errors import ResolutionFailure
from addrkit.core.models import Address, AddressList, ResolutionQuery
from addrkit.core.plugin import BasePlugin

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1


class FailurePolicy(str, enum.Enum):
    """What a resolver does when getaddrinfo() fails."""
    EXIT = "exit"    # log the diagnostic and terminate the process
    RAISE = "raise"  # raise ResolutionFailure to the caller

    def __str__(self) -> str:
        return self.value


def system_resolve(query: ResolutionQuery) -> Iterator[Address]:
    """
    Run getaddrinfo() for the query and yield each result as an address,
    in the order the resolver returned them. There is no timeout: a hung
    resolver blocks the caller.
    """
    try:
        infos = socket.getaddrinfo(
            query.host,
            query.service,
            query.family,
            query.socktype,
            query.protocol,
            query.flags,
        )
    except socket.gaierror as e:
        raise ResolutionFailure(e.strerror or str(e), code=e.errno, query=query) from e
    except UnicodeError as e:
        # IDNA encoding of an unusable host name
        raise ResolutionFailure(str(e), query=query) from e

    logger.debug(f"getaddrinfo({query.describe()}) returned {len(infos)} result(s)")
    for family, _socktype, _proto, _canonname, sockaddr in infos:
        yield from_sockaddr(family, sockaddr)


class ResolverPlugin(BasePlugin):
    """Fill an address list from the system resolver."""

    # Label printed before each address in the startup banner
    banner: Optional[str] = None

    def resolve(self, *args: Any, **kwargs: Any) -> AddressList:
        raise NotImplementedError
