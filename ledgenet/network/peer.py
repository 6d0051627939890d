"""Common ground of client and server: sending, receiving and dispatching packets."""

from __future__ import annotations

from typing import Callable, Protocol

from ledgenet.network.address import Address
from ledgenet.network.codec import MalformedPacketError, build_packet, read_packet
from ledgenet.network.packets import (
    BasePacket,
    ConnectPacket,
    DisconnectPacket,
    PacketFamily,
    PlayerPacket,
    TerrainPacket,
    action_to_string,
    family_to_string,
)
from ledgenet.network.udpsocket import UdpSocket
from ledgenet.util.log import Logger, LogLevel

MAX_PACKET_SIZE = 1024


class DatagramSocket(Protocol):
    is_open: bool

    def open(self, port: int) -> bool: ...

    def close(self) -> None: ...

    def send(self, destination: Address, data: bytes) -> bool: ...

    def receive(self, size: int) -> tuple[bytes, Address] | None: ...


class NetworkPeer:
    """Sends and receives packets over a datagram socket.

    Subclasses override the ``handle_*`` methods; each returns whether the
    packet was handled. By default a packet is logged as unhandled.
    """

    def __init__(self, socket: DatagramSocket | None = None) -> None:
        self.socket: DatagramSocket = socket if socket is not None else UdpSocket()
        self.log = Logger.instance().get_log(type(self).__name__)

    def close(self) -> None:
        """Close the socket if it is open."""
        if self.socket.is_open:
            self.socket.close()

    def receive_packet(self) -> tuple[BasePacket, Address] | None:
        """Return the next decodable packet and its sender, or None when none is waiting."""
        while True:
            item = self.socket.receive(MAX_PACKET_SIZE)
            if item is None:
                return None
            data, sender = item
            if not data:
                return None
            try:
                return read_packet(data), sender
            except MalformedPacketError:
                continue

    def send_packet(self, packet: BasePacket, destination: Address) -> bool:
        """Encode and send *packet*; True if it all went out."""
        return self.socket.send(destination, build_packet(packet))

    def dispatch(self, packet: BasePacket, sender: Address) -> bool:
        """Pass *packet* to the handler for its family."""
        handlers: dict[int, Callable[[BasePacket, Address], bool]] = {
            PacketFamily.CONNECT: self.handle_connect,
            PacketFamily.DISCONNECT: self.handle_disconnect,
            PacketFamily.TERRAIN: self.handle_terrain,
            PacketFamily.PLAYER: self.handle_player,
        }
        handler = handlers.get(packet.family, self.handle_base)
        return handler(packet, sender)

    def handle_base(self, packet: BasePacket, sender: Address) -> bool:
        """Log *packet* as one nobody knows what to do with; not handled."""
        message = (
            "Got packet with I don't know what to do with: "
            f"{family_to_string(packet.family)} {action_to_string(packet.action)}\n"
        )
        self.log.log_message(message, LogLevel.WARN)
        return False

    def handle_connect(self, packet: ConnectPacket, sender: Address) -> bool:
        """Handle a connect packet; unhandled unless overridden."""
        return self.handle_base(packet, sender)

    def handle_disconnect(self, packet: DisconnectPacket, sender: Address) -> bool:
        """Handle a disconnect packet; unhandled unless overridden."""
        return self.handle_base(packet, sender)

    def handle_terrain(self, packet: TerrainPacket, sender: Address) -> bool:
        """Handle a terrain packet; unhandled unless overridden."""
        return self.handle_base(packet, sender)

    def handle_player(self, packet: PlayerPacket, sender: Address) -> bool:
        """Handle a player packet; unhandled unless overridden."""
        return self.handle_base(packet, sender)