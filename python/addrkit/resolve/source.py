# addrkit/resolve/source.py
import logging
from typing import Any, Iterable, List, Optional

from addrkit.core.errors import ResolutionFailure
from addrkit.core.models import AddressList, ResolutionQuery
from addrkit.core.registry import addrkit
from addrkit.validate.bind import check_bindable

from .base import ResolverPlugin, system_resolve

logger = logging.getLogger(__name__)


def source_query(host: str) -> ResolutionQuery:
    # No service: only the address part matters for a source bind.
    return ResolutionQuery(
        host=host,
        service=None,
        passive=True,
        numeric_service=False,
        address_config=True,
    )


def resolve_source_ip(host: str, addresses: Optional[AddressList] = None) -> AddressList:
    """
    Resolve `host` as a source IP and append every result to `addresses`,
    checking after each append that the address is bindable locally.

    Stops at the first address that is not bindable and raises NotBindable.
    Whatever was appended before that stays in `addresses`; callers must
    discard the list on any exception rather than use a partial result.
    Raises ResolutionFailure, with nothing appended, if the lookup fails.
    """
    if addresses is None:
        addresses = AddressList(name=f"source:{host}")

    try:
        candidates = list(system_resolve(source_query(host)))
    except ResolutionFailure as e:
        logger.error(str(e))
        raise

    for candidate in candidates:
        addresses.append(candidate)
        check_bindable(addresses.at(addresses.count() - 1))

    return addresses


def resolve_source_ips(hosts: Iterable[str], addresses: Optional[AddressList] = None) -> AddressList:
    """Resolve several source arguments into one list, in argument order."""
    if addresses is None:
        addresses = AddressList(name="source")
    for host in hosts:
        resolve_source_ip(host, addresses)
    return addresses


@addrkit(kind="resolve", name="source")
class SourceIPResolver(ResolverPlugin):
    """Resolve source addresses for outgoing connections, keeping only locally bindable ones."""

    description = "Resolve and bind-check source IP addresses."
    banner = "Source IP: "

    def resolve(self, host: str, addresses: Optional[AddressList] = None) -> AddressList:
        return resolve_source_ip(host, addresses)

    def run(self, host: List[str], **kwargs: Any) -> AddressList:
        """Resolve one or more source hosts into a single list."""
        addresses = resolve_source_ips(host)
        self._logger.info(f"{addresses.count()} source address(es) usable")
        return addresses
