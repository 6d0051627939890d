"""IPv4 endpoint addresses."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass

_MAX_ADDRESS = 0xFFFFFFFF
_MAX_PORT = 0xFFFF


@dataclass(frozen=True)
class Address:
    """An IPv4 address held as a 32-bit integer, with a port."""

    address: int = 0
    port: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.address <= _MAX_ADDRESS:
            raise ValueError(f"address out of range: {self.address}")
        if not 0 <= self.port <= _MAX_PORT:
            raise ValueError(f"port out of range: {self.port}")

    @classmethod
    def from_octets(cls, a: int, b: int, c: int, d: int, port: int) -> Address:
        """Build an address from its four dotted octets."""
        for octet in (a, b, c, d):
            if not 0 <= octet <= 0xFF:
                raise ValueError(f"octet out of range: {octet}")
        return cls((a << 24) | (b << 16) | (c << 8) | d, port)

    @classmethod
    def from_sockaddr(cls, sockaddr: tuple) -> Address:
        """Build an address from a ``(host, port)`` pair as sockets return it."""
        host, port = sockaddr[0], sockaddr[1]
        return cls(int(ipaddress.IPv4Address(host)), port)

    @property
    def a(self) -> int:
        return (self.address >> 24) & 0xFF

    @property
    def b(self) -> int:
        return (self.address >> 16) & 0xFF

    @property
    def c(self) -> int:
        return (self.address >> 8) & 0xFF

    @property
    def d(self) -> int:
        return self.address & 0xFF

    def to_sockaddr(self) -> tuple[str, int]:
        """The ``(host, port)`` pair that sockets accept."""
        return str(ipaddress.IPv4Address(self.address)), self.port

    def __str__(self) -> str:
        return f"{self.a}.{self.b}.{self.c}.{self.d}:{self.port}"