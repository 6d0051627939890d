"""The server side: accepting connections and tracking who is connected."""

from __future__ import annotations

from dataclasses import dataclass

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

MAX_CONNECTIONS_PER_ADDRESS = 3
_ID_MASK = 0xFFFFFFFF


@dataclass(frozen=True, eq=False)
class ClientConnection:
    """A connected client: the id it was given and where it talks from."""

    connection_id: int
    address: Address


class Server(NetworkPeer):
    """Accepts client connections and handles the packets they send."""

    def __init__(self, socket: DatagramSocket | None = None) -> None:
        super().__init__(socket)
        self.connection_id_counter = 1
        self.max_clients = 0
        self.connections: dict[int, ClientConnection] = {}
        self.connections_per_addr: dict[int, int] = {}
        self.log = Logger.instance().get_log("Server")

    def __enter__(self) -> Server:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def init(self, port: int, max_clients: int) -> bool:
        """Open the socket on *port*; False if it was already open or cannot bind."""
        if self.socket.is_open:
            return False
        if self.socket.open(port) and self.socket.is_open:
            self.max_clients = max_clients
            return True
        return False

    def tick(self) -> None:
        """Handle every waiting packet."""
        while (received := self.receive_packet()) is not None:
            packet, sender = received
            self.dispatch(packet, sender)

    def shutdown(self) -> None:
        """Close the socket and forget every connection."""
        if self.socket.is_open:
            self.socket.close()
            self.connections.clear()
            self.max_clients = 0

    def num_connections_on_addr(self, addr: int) -> int:
        """How many connections come from the IPv4 address *addr*."""
        return self.connections_per_addr.get(addr, 0)

    def has_connection(self, connection_id: int) -> bool:
        """Tell whether *connection_id* is in use."""
        return connection_id in self.connections

    def get_connection(self, connection_id: int) -> ClientConnection | None:
        """The connection with *connection_id*, if any."""
        return self.connections.get(connection_id)

    def get_connection_from_address(self, address: Address) -> ClientConnection | None:
        """The connection talking from *address*, if any."""
        return next(
            (conn for conn in self.connections.values() if conn.address == address),
            None,
        )

    def add_connection(self, connection_id: int, address: Address) -> None:
        """Record a connection; an id already in use is left alone."""
        if connection_id in self.connections:
            return
        self.connections[connection_id] = ClientConnection(connection_id, address)
        addr = address.address
        self.connections_per_addr[addr] = self.num_connections_on_addr(addr) + 1

    def remove_connection(self, connection_id: int) -> None:
        """Forget the connection with *connection_id*, if any."""
        connection = self.connections.pop(connection_id, None)
        if connection is None:
            return
        addr = connection.address.address
        count = self.num_connections_on_addr(addr)
        if count > 0:
            self.connections_per_addr[addr] = count - 1

    def client_connection_added(self, connection: ClientConnection) -> None:
        """Called after a client connects or reconnects."""

    def client_connection_removing(self, connection: ClientConnection) -> None:
        """Called before a client's connection is dropped."""

    def _next_connection_id(self) -> int:
        while True:
            connection_id = self.connection_id_counter
            self.connection_id_counter = (connection_id + 1) & _ID_MASK
            if connection_id != 0 and connection_id not in self.connections:
                return connection_id

    def handle_base(self, packet: BasePacket, sender: Address) -> bool:
        self.log.log_message(
            "Got packet with I don't know what to do with: "
            f"{family_to_string(packet.family)} {action_to_string(packet.action)}\n",
            LogLevel.WARN,
        )
        return False

    def handle_connect(self, packet: ConnectPacket, sender: Address) -> bool:
        if packet.action != PacketAction.REQUEST:
            return False

        if self.num_connections_on_addr(sender.address) >= MAX_CONNECTIONS_PER_ADDRESS:
            self.send_packet(ConnectPacket(0, PacketAction.DECLINE), sender)
            self.log.log_message(
                f"Refused client connection with address: {sender}\n", LogLevel.INFO
            )
            return True

        connection = self.get_connection_from_address(sender)
        if connection is None:
            connection_id = self._next_connection_id()
            self.add_connection(connection_id, sender)
            self.send_packet(
                ConnectPacket(0, PacketAction.ACCEPT, assigned_id=connection_id), sender
            )
            self.log.log_message(
                f"Client connected with address: {sender}\n", LogLevel.INFO
            )
            self.client_connection_added(self.connections[connection_id])
        else:
            self.send_packet(
                ConnectPacket(
                    0, PacketAction.ACCEPT, assigned_id=connection.connection_id
                ),
                sender,
            )
            self.log.log_message(
                f"Client reconnected with address: {sender}\n", LogLevel.INFO
            )
            self.client_connection_added(connection)
        return True

    def handle_disconnect(self, packet: DisconnectPacket, sender: Address) -> bool:
        if packet.action != PacketAction.REQUEST:
            return False

        connection = self.get_connection(packet.connection_id)
        if connection is not None and connection.address == sender:
            self.client_connection_removing(connection)
            self.remove_connection(connection.connection_id)
            self.send_packet(DisconnectPacket(0, PacketAction.ACCEPT), sender)
            self.log.log_message(
                f"Client disconnected with address: {sender}\n", LogLevel.INFO
            )
        return True

    def handle_terrain(self, packet: TerrainPacket, sender: Address) -> bool:
        return False

    def handle_player(self, packet: PlayerPacket, sender: Address) -> bool:
        return False