"""The client side of a connection to a game server."""

from __future__ import annotations

from ledgenet.network.address import Address
from ledgenet.network.packets import (
    BasePacket,
    ConnectPacket,
    DisconnectPacket,
    PacketAction,
    PlayerPacket,
    TerrainPacket,
    action_to_string,
    family_to_string,
)
from ledgenet.network.peer import DatagramSocket, NetworkPeer
from ledgenet.util.log import Logger, LogLevel


class Client(NetworkPeer):
    """Connects to one server and handles the packets it sends."""

    def __init__(self, socket: DatagramSocket | None = None) -> None:
        super().__init__(socket)
        self.server_address = Address()
        self.is_connected = False
        self.connection_id = 0
        self.log = Logger.instance().get_log("Client")

    def init(self, port: int) -> bool:
        """Open the socket on *port*; False if it was already open or cannot bind."""
        if self.socket.is_open:
            return False
        return self.socket.open(port) and self.socket.is_open

    def connect(self, server_address: Address) -> None:
        """Ask *server_address* for a connection unless already connected."""
        if not self.is_connected:
            self.server_address = server_address
            self.send_packet(ConnectPacket(0, PacketAction.REQUEST), server_address)

    def disconnect(self) -> None:
        """Tell the server the connection is over."""
        if self.is_connected:
            self.send_packet(
                DisconnectPacket(self.connection_id, PacketAction.REQUEST),
                self.server_address,
            )
            self.is_connected = False

    def tick(self) -> None:
        """Handle every waiting packet that came from the server."""
        while (received := self.receive_packet()) is not None:
            packet, sender = received
            if sender == self.server_address:
                self.dispatch(packet, sender)

    def handle_base(self, packet: BasePacket, sender: Address) -> bool:
        self.log.log_message(
            "Got packet with I don't know what to do with: "
            f"{family_to_string(packet.family)} {action_to_string(packet.action)}\n",
            LogLevel.WARN,
        )
        return False

    def handle_connect(self, packet: ConnectPacket, sender: Address) -> bool:
        if packet.action == PacketAction.ACCEPT:
            self.connection_id = packet.assigned_id
            self.is_connected = True
            self.log.log_message("Established connection with server\n", LogLevel.INFO)
            return True
        if packet.action == PacketAction.DECLINE:
            self.log.log_message("Connection was refused from server\n", LogLevel.INFO)
            return True
        return False

    def handle_disconnect(self, packet: DisconnectPacket, sender: Address) -> bool:
        return False

    def handle_terrain(self, packet: TerrainPacket, sender: Address) -> bool:
        return False

    def handle_player(self, packet: PlayerPacket, sender: Address) -> bool:
        return False