"""Command that starts a game server."""

from __future__ import annotations

import argparse
import sys

from ledgenet.server.gameserver import GameServer
from ledgenet.util.log import Logger, LogLevel

DEFAULT_PORT = 50000
MAX_CLIENTS = 20


def _port(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a port number: {text}") from None
    if not 0 <= value <= 0xFFFF:
        raise argparse.ArgumentTypeError(f"port out of range: {value}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Bind the server and run it; return the process exit status."""
    parser = argparse.ArgumentParser(description="Run a game server.")
    parser.add_argument("--port", type=_port, default=DEFAULT_PORT, help="UDP port to bind")
    args = parser.parse_args(argv)

    logger = Logger.instance()
    log = logger.get_log("Main")
    out = sys.stdout

    server = GameServer()
    if not server.init(args.port, MAX_CLIENTS):
        log.log_message(f"Unable to bind to port: {args.port}!\n", LogLevel.FATAL)
        logger.write_all(out)
        return 1

    log.log_message(f"Successfully bound to port: {args.port}!\n", LogLevel.INFO)
    log.write(out)

    try:
        server.run()
    except (Exception, KeyboardInterrupt):
        pass
    finally:
        logger.write_all(out)
        server.shutdown()

    return 0


if __name__ == "__main__":
    sys.exit(main())