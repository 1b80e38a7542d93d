# addrkit/resolve/listen.py
import logging
from typing import Any, Union

from addrkit.core.codec import format_sockaddr
from addrkit.core.errors import ResolutionFailure
from addrkit.core.models import AddressList, ResolutionQuery
from addrkit.core.registry import addrkit

from .base import EXIT_FAILURE, FailurePolicy, ResolverPlugin, system_resolve

logger = logging.getLogger(__name__)


def listen_query(port: int) -> ResolutionQuery:
    if not 0 <= port <= 65535:
        raise ValueError(f"Listen port must be between 0 and 65535, got {port}")
    return ResolutionQuery(
        host=None,
        service=str(port),
        passive=True,
        numeric_service=True,
        address_config=True,
    )


def resolve_listen_addresses(
    port: int,
    on_failure: Union[FailurePolicy, str] = FailurePolicy.EXIT,
) -> AddressList:
    """
    Given a port, detect which addresses we can listen on, using this port.

    A resolver failure leaves nothing to listen on. With FailurePolicy.EXIT
    (the default) the diagnostic is logged and the process exits with status
    1; with FailurePolicy.RAISE the ResolutionFailure goes to the caller.
    """
    policy = FailurePolicy(on_failure)
    query = listen_query(port)
    addresses = AddressList(name=f"listen:{port}")

    try:
        for address in system_resolve(query):
            addresses.append(address)
    except ResolutionFailure as e:
        logger.critical(str(e))
        if policy is FailurePolicy.EXIT:
            raise SystemExit(EXIT_FAILURE) from e
        raise

    for address in addresses.addresses:
        logger.debug(f"Listen on: {format_sockaddr(address)}")

    return addresses


@addrkit(kind="resolve", name="listen")
class ListenResolver(ResolverPlugin):
    """Wildcard listen addresses for a port, one per configured address family."""

    description = "Detect the addresses to listen on for a port."
    banner = "Listen on: "

    def __init__(self, on_failure: FailurePolicy = FailurePolicy.EXIT, **kwargs: Any):
        super().__init__(**kwargs)
        self.on_failure = FailurePolicy(on_failure)

    def resolve(self, port: int) -> AddressList:
        return resolve_listen_addresses(port, on_failure=self.on_failure)

    def run(self, port: int, **kwargs: Any) -> AddressList:
        """Resolve the listen addresses for a port."""
        addresses = self.resolve(port)
        self._logger.debug(f"{addresses.count()} listen address(es) for port {port}")
        return addresses
