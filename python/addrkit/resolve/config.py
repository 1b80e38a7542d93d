# addrkit/resolve/config.py
import logging
import pathlib
from typing import Any, List, Union

from pydantic import BaseModel, Field, field_validator

from addrkit.core.models import AddressList
from addrkit.core.registry import addrkit

from .base import FailurePolicy, ResolverPlugin
from .listen import resolve_listen_addresses
from .source import resolve_source_ips

logger = logging.getLogger(__name__)


class AddressConfig(BaseModel):
    """
    The address part of a tool's configuration: which ports to listen on,
    which local addresses outgoing connections may be bound to, and what
    happens when listen addresses cannot be resolved.
    """
    listen_ports: List[int] = Field(default_factory=list)
    source_ips: List[str] = Field(default_factory=list)
    listen_failure: FailurePolicy = FailurePolicy.EXIT

    @field_validator("listen_ports")
    @classmethod
    def ports_must_be_valid(cls, v: List[int]) -> List[int]:
        for port in v:
            if not 0 <= port <= 65535:
                raise ValueError(f"Port must be between 0 and 65535, got {port}")
        return v


class ResolvedAddresses(BaseModel):
    listen: AddressList = Field(default_factory=lambda: AddressList(name="listen"))
    source: AddressList = Field(default_factory=lambda: AddressList(name="source"))


def load_config(path: Union[str, pathlib.Path]) -> AddressConfig:
    path = pathlib.Path(path)
    logger.debug(f"Loading address configuration from {path}")
    return AddressConfig.model_validate_json(path.read_text())


def resolve_config(config: AddressConfig) -> ResolvedAddresses:
    """Resolve every listen port and source address the configuration names."""
    resolved = ResolvedAddresses()
    for port in config.listen_ports:
        for address in resolve_listen_addresses(port, on_failure=config.listen_failure).addresses:
            resolved.listen.append(address)
    if config.source_ips:
        resolve_source_ips(config.source_ips, resolved.source)
    return resolved


@addrkit(kind="resolve", name="config")
class ConfigResolver(ResolverPlugin):
    """Resolve all addresses named in a JSON configuration file."""

    description = "Resolve listen and source addresses from a JSON config file."

    def resolve(self, config: AddressConfig) -> ResolvedAddresses:
        return resolve_config(config)

    def run(self, config_file: pathlib.Path, **kwargs: Any) -> ResolvedAddresses:
        """Load a config file and resolve everything it names."""
        resolved = self.resolve(load_config(config_file))
        self._logger.info(
            f"Resolved {resolved.listen.count()} listen and "
            f"{resolved.source.count()} source address(es) from {config_file}"
        )
        return resolved
