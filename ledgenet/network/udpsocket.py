"""A non-blocking UDP socket bound to a local port."""

from __future__ import annotations

import socket

from ledgenet.network.address import Address


class UdpSocket:
    """Non-blocking IPv4 datagram socket."""

    def __init__(self) -> None:
        self._sock: socket.socket | None = None

    def __enter__(self) -> UdpSocket:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._sock is not None

    @property
    def port(self) -> int | None:
        """The local port the socket is bound to, or None when closed."""
        if self._sock is None:
            return None
        return self._sock.getsockname()[1]

    def open(self, port: int) -> bool:
        """Bind to *port* on every interface; False if already open or binding fails."""
        if self.is_open:
            return False
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
        except OSError:
            return False
        try:
            sock.bind(("", port))
            sock.setblocking(False)
        except OSError:
            sock.close()
            return False
        self._sock = sock
        return True

    def close(self) -> None:
        """Close the socket if it is open."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def send(self, destination: Address, data: bytes) -> bool:
        """Send one datagram; True if every byte went out."""
        if self._sock is None:
            return False
        try:
            sent = self._sock.sendto(data, destination.to_sockaddr())
        except OSError:
            return False
        return sent == len(data)

    def receive(self, size: int) -> tuple[bytes, Address] | None:
        """Return one pending datagram and its sender, or None if nothing is waiting."""
        if self._sock is None:
            return None
        try:
            data, sockaddr = self._sock.recvfrom(size)
        except OSError:
            return None
        return data, Address.from_sockaddr(sockaddr)