# addrkit/core/models.py
import ipaddress
import socket
from typing import IO, Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import IndexOutOfRange, UnsupportedFamily


class IPv4Address(BaseModel):
    """An IPv4 endpoint: dotted-quad host and port."""
    model_config = ConfigDict(frozen=True)

    family: Literal["ip4"] = "ip4"
    host: str
    port: int = Field(default=0, ge=0, le=65535)

    @field_validator("host")
    @classmethod
    def host_must_be_ip4(cls, v: str) -> str:
        return str(ipaddress.IPv4Address(v))

    @property
    def pf_code(self) -> int:
        return socket.AF_INET

    @property
    def ip(self) -> ipaddress.IPv4Address:
        return ipaddress.IPv4Address(self.host)

    @property
    def packed(self) -> bytes:
        return self.ip.packed


class IPv6Address(BaseModel):
    """
    An IPv6 endpoint. `flowinfo` and `scope_id` are kept as the resolver
    returned them so the address can be handed back to bind() unchanged.
    A textual zone ("fe80::1%eth0") is dropped from `host`; the numeric
    `scope_id` is what the socket layer uses.
    """
    model_config = ConfigDict(frozen=True)

    family: Literal["ip6"] = "ip6"
    host: str
    port: int = Field(default=0, ge=0, le=65535)
    flowinfo: int = Field(default=0, ge=0, le=0xFFFFF)  # 20-bit flow label
    scope_id: int = Field(default=0, ge=0, le=0xFFFFFFFF)

    @field_validator("host")
    @classmethod
    def host_must_be_ip6(cls, v: str) -> str:
        return ipaddress.IPv6Address(v.partition("%")[0]).compressed

    @property
    def pf_code(self) -> int:
        return socket.AF_INET6

    @property
    def ip(self) -> ipaddress.IPv6Address:
        return ipaddress.IPv6Address(self.host)

    @property
    def packed(self) -> bytes:
        return self.ip.packed


# The family tag selects the variant; there is no untagged address.
Address = Annotated[Union[IPv4Address, IPv6Address], Field(discriminator="family")]

ADDRESS_TYPES: Tuple[type, ...] = (IPv4Address, IPv6Address)


class AddressList(BaseModel):
    """
    An ordered collection of IPv4 and IPv6 addresses, filled during a
    single resolution pass and handed to whoever binds or listens on them.
    """
    name: Optional[str] = None
    addresses: List[Address] = Field(default_factory=list)

    def append(self, address: Address) -> None:
        if not isinstance(address, ADDRESS_TYPES):
            raise UnsupportedFamily(
                f"Expected an IPv4 or IPv6 address, got {type(address).__name__}"
            )
        self.addresses.append(address)

    def count(self) -> int:
        return len(self.addresses)

    def __len__(self) -> int:
        return len(self.addresses)

    def at(self, index: int) -> Address:
        if index < 0 or index >= len(self.addresses):
            raise IndexOutOfRange(
                f"Address index {index} out of range for a list of {len(self.addresses)}"
            )
        return self.addresses[index]

    def format_all(self, prefix: str = "", separator: str = ", ", suffix: str = "") -> str:
        """
        Join the display form of every address. The prefix and suffix only
        appear when the list is not empty.
        """
        from .codec import format_sockaddr

        if not self.addresses:
            return ""
        return prefix + separator.join(format_sockaddr(a) for a in self.addresses) + suffix

    def write(self, stream: IO[str], prefix: str = "", separator: str = ", ", suffix: str = "") -> None:
        stream.write(self.format_all(prefix, separator, suffix))
        stream.flush()


class ResolutionQuery(BaseModel):
    """Arguments for one getaddrinfo() call."""
    host: Optional[str] = None  # None asks for the wildcard address
    service: Optional[str] = None
    family: int = socket.AF_UNSPEC
    socktype: int = socket.SOCK_STREAM
    protocol: int = socket.IPPROTO_TCP
    passive: bool = True
    numeric_service: bool = False
    numeric_host: bool = False
    address_config: bool = True

    @property
    def flags(self) -> int:
        flags = 0
        if self.passive:
            flags |= socket.AI_PASSIVE
        if self.numeric_service:
            flags |= socket.AI_NUMERICSERV
        if self.numeric_host:
            flags |= socket.AI_NUMERICHOST
        if self.address_config:
            flags |= socket.AI_ADDRCONFIG
        return flags

    def describe(self) -> str:
        return f"{self.host or '*'}:{self.service or '-'}"
