"""Command that joins a match and plays the client side."""

from __future__ import annotations

import socket
import sys

from .game import PLAYER_NAMES, Game

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


def connect(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> tuple[int, int]:
    """Connect to a server, play the client side of a match and return both won counts."""
    with socket.create_connection((host, port)) as sock:
        print("Conectado al servidor en localhost ")
        return Game(PLAYER_NAMES).play_client(sock)


def main(argv=None) -> int:
    """Run the client command; an optional argument gives the port."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        print("Uso: cartared-client [puerto]")
        return 1
    port = DEFAULT_PORT
    if args:
        try:
            port = int(args[0])
        except ValueError:
            print(f"Puerto no válido: {args[0]}", file=sys.stderr)
            return 1
        if not 0 < port <= 65535:
            print(f"Puerto no válido: {args[0]}", file=sys.stderr)
            return 1
    try:
        connect(DEFAULT_HOST, port)
    except OSError as exc:
        print(f"Connect failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())