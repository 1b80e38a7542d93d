from .base import FailurePolicy, ResolverPlugin, system_resolve
from .listen import ListenResolver, resolve_listen_addresses
from .source import SourceIPResolver, resolve_source_ip, resolve_source_ips
from .config import AddressConfig, ConfigResolver, ResolvedAddresses, load_config, resolve_config

__all__ = [
    "AddressConfig",
    "ConfigResolver",
    "FailurePolicy",
    "ListenResolver",
    "ResolvedAddresses",
    "ResolverPlugin",
    "SourceIPResolver",
    "load_config",
    "resolve_config",
    "resolve_listen_addresses",
    "resolve_source_ip",
    "resolve_source_ips",
    "system_resolve",
]
