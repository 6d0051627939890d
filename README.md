# ledgenet

A small multiplayer side-scrolling platformer played over UDP. The server
runs the world simulation and sends the level layout to clients. Each
client draws the level and the other players with pygame and sends its own
player's position and velocity to the server. The server passes that state
on to everyone else.

## Installing

```
pip install .
```

## Playing

Start the server:

```
ledgenet-server [--port PORT]
```

It binds UDP port 50000 unless told otherwise and builds its built-in
level. It accepts at most three connections from one IPv4 address. It
refuses further connect requests from that address. Every 16 ms it handles
waiting packets, steps the world and writes its logs to standard output.

Then start one or more clients:

```
ledgenet-client [--host ADDRESS] [--port PORT] [--local-port PORT]
```

By default a client connects to the server at `127.0.0.1:50000`. It binds
the first local port it can, starting at `--local-port` (50000 by default)
and counting upwards. Once the server accepts it, the client asks for the
level and puts your player into the world.

Controls:

- Left / Right arrows: walk and turn
- Up arrow: jump. This works only when your vertical velocity is zero.
- Close the window to quit. A connected client tells the server that it
  is leaving.

If the server declines the connection, or tells the client to disconnect,
the client stops.

## Using the library

The game core works without a network or a display:

```python
from ledgenet.gamecore.datamodel import DataModel
from ledgenet.gamecore.actors import Player

model = DataModel()
model.init()
model.world.load_world()

player = Player(network_owner=1)
model.player_list.add_player(player)   # also adds the player to the world
model.world.update(1 / 60)
print(player.position, player.velocity)
```

The main modules:

- `ledgenet.gamecore.vector2`: `Vector2`, an immutable 2D vector.
- `ledgenet.gamecore.actors`: `Actor`, `Player` and `Direction`.
- `ledgenet.gamecore.terrain`: `Terrain`, `Platform`, `Wall` and
  `TerrainType`.
- `ledgenet.gamecore.world`: `World`, which handles gravity, movement and
  collisions with platforms and walls. It also has `segments_overlap`.
- `ledgenet.gamecore.playerlist` and `ledgenet.gamecore.datamodel`:
  `PlayerList` and `DataModel`, which holds the world and the players.
- `ledgenet.network.address`: `Address`, an IPv4 address with a port.
- `ledgenet.network.packets`: the packet classes (`ConnectPacket`,
  `DisconnectPacket`, `TerrainPacket`, `PlayerPacket`) and the
  `PacketFamily` and `PacketAction` enums.
- `ledgenet.network.codec`: `build_packet` and `read_packet`. Packets use
  network byte order. `read_packet` raises `MalformedPacketError` when the
  data is truncated.
- `ledgenet.network.udpsocket`: `UdpSocket`, a non-blocking UDP socket.
- `ledgenet.network.peer`, `ledgenet.network.client` and
  `ledgenet.network.server`: `NetworkPeer`, `Client` and `Server`. They are
  the base peers that `ledgenet.server.gameserver.GameServer` and
  `ledgenet.client.gameclient.GameClient` build on. To handle packets,
  override the `handle_connect`, `handle_disconnect`, `handle_terrain`,
  `handle_player` and `handle_base` methods.
- `ledgenet.util.log`, `ledgenet.util.timer` and `ledgenet.util.services`:
  buffered named logs (`Log`, `Logger`), a millisecond `Timer` and a
  service registry.

## What it does not do

- The level is built in (`World.load_world`). There is no level file
  format and no editor.
- The server enforces only the limit of three connections per address.
  The `max_clients` value given to `Server.init` is stored but not
  checked.
- Clients are not authenticated. Packets are not encrypted.
- Lost packets are not resent.
- There is no scoring, no game rules beyond movement and collision, and
  no persistent storage.

## Tests

```
pip install .[test]
pytest
```