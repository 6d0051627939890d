"""Command that starts the game client and connects to a server."""

from __future__ import annotations

import argparse
import ipaddress
import sys

import pygame

from ledgenet.client.gameclient import GameClient
from ledgenet.network.address import Address
from ledgenet.util.log import Logger, LogLevel

DEFAULT_SERVER_HOST = "127.0.0.1"
DEFAULT_SERVER_PORT = 50000
DEFAULT_LOCAL_PORT = 50000
_MAX_PORT = 0xFFFF


def _port(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a port number: {text}") from None
    if not 0 <= value <= _MAX_PORT:
        raise argparse.ArgumentTypeError(f"port out of range: {value}")
    return value


def _host(text: str) -> int:
    try:
        return int(ipaddress.IPv4Address(text))
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an IPv4 address: {text}") from None


def main(argv: list[str] | None = None) -> int:
    """Open a client, connect and play; return the process exit status."""
    parser = argparse.ArgumentParser(description="Play on a game server.")
    parser.add_argument("--host", type=_host, default=DEFAULT_SERVER_HOST, help="server IPv4 address")
    parser.add_argument("--port", type=_port, default=DEFAULT_SERVER_PORT, help="server UDP port")
    parser.add_argument(
        "--local-port", type=_port, default=DEFAULT_LOCAL_PORT, help="first local UDP port to try"
    )
    args = parser.parse_args(argv)

    server_address = Address(args.host, args.port)
    logger = Logger.instance()
    log = logger.get_log("Main")

    try:
        pygame.init()
        pygame.display.init()
    except pygame.error:
        log.log_message("Failed to initialize pygame!\n", LogLevel.FATAL)
        logger.write_all(sys.stderr)
        pygame.quit()
        return 1

    try:
        client = GameClient()
        local_port = args.local_port
        while not client.init(local_port):
            local_port += 1
            if local_port > _MAX_PORT:
                log.log_message("Unable to open a client port!\n", LogLevel.FATAL)
                logger.write_all(sys.stderr)
                return 1
            log.log_message(f"Trying on port: {local_port}\n", LogLevel.INFO)

        log.log_message(f"Created client on port: {local_port}\n", LogLevel.INFO)
        log.write(sys.stdout)

        try:
            client.connect(server_address)
            client.run()
        except Exception:
            log.log_message("An error happened. Not sure what.\n", LogLevel.FATAL)
            log.write(sys.stderr)
            if client.is_connected:
                client.disconnect()

        logger.write_all(sys.stdout)
        client.close()
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())