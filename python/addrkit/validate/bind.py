# addrkit/validate/bind.py
import logging
import socket
from typing import Any, Optional

from pydantic import BaseModel

from addrkit.core.codec import format_sockaddr, to_sockaddr
from addrkit.core.errors import NotBindable, ResolutionFailure
from addrkit.core.models import Address, ResolutionQuery
from addrkit.core.plugin import BasePlugin
from addrkit.core.registry import addrkit

logger = logging.getLogger(__name__)


def probe_bind(address: Address) -> Optional[str]:
    """
    Bind a throwaway TCP socket to `address` and close it again.
    Returns None on success, otherwise the system's error text.
    """
    try:
        with socket.socket(address.pf_code, socket.SOCK_STREAM, socket.IPPROTO_TCP) as probe:
            probe.bind(to_sockaddr(address))
    except OSError as e:
        return e.strerror or str(e)
    return None


def check_bindable(address: Address) -> None:
    """Raise NotBindable, after logging the reason, if the address cannot be bound here."""
    reason = probe_bind(address)
    if reason is not None:
        logger.warning(f"{format_sockaddr(address)} is not local: {reason}")
        raise NotBindable(address, reason)


def is_bindable(address: Address) -> bool:
    """Check whether we can bind to the address on this host."""
    try:
        check_bindable(address)
    except NotBindable:
        return False
    return True


class BindReport(BaseModel):
    address: str
    bindable: bool
    reason: Optional[str] = None


@addrkit(kind="validate", name="bind")
class BindValidator(BasePlugin):
    """Test whether an address can be bound on this host without listening on it."""

    description = "Bind-probe an IPv4 or IPv6 address."

    def literal(self, address: str, port: int = 0) -> Address:
        """
        Parse a numeric address the way the socket layer does, so a zone
        such as "fe80::1%eth0" ends up as the IPv6 scope_id.
        """
        from addrkit.resolve.base import system_resolve  # resolve imports this module

        if not 0 <= port <= 65535:
            raise ValueError(f"Port must be between 0 and 65535, got {port}")
        query = ResolutionQuery(
            host=address,
            service=str(port),
            passive=False,
            numeric_host=True,
            numeric_service=True,
            address_config=False,
        )
        try:
            return next(iter(system_resolve(query)))
        except ResolutionFailure as e:
            raise ValueError(f"Not a numeric IPv4 or IPv6 address: {address!r} ({e.diagnostic})") from e
        except StopIteration:
            raise ValueError(f"No address for {address!r}") from None

    def run(self, address: str, port: int = 0, **kwargs: Any) -> BindReport:
        """Probe a single literal address."""
        candidate = self.literal(address, port)
        reason = probe_bind(candidate)
        shown = format_sockaddr(candidate)
        if reason is None:
            self._logger.info(f"{shown} is bindable")
        else:
            self._logger.warning(f"{shown} is not local: {reason}")
        return BindReport(address=shown, bindable=reason is None, reason=reason)
