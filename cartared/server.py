"""Command that hosts a match and plays the server side."""

from __future__ import annotations

import socket
import sys

from .game import PLAYER_NAMES, Game

DEFAULT_HOST = "127.0.0.1"


def serve(port: int, host: str = DEFAULT_HOST) -> tuple[int, int]:
    """Wait for one client on host:port, play a match and return both won counts."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.bind((host, port))
        listener.listen(1)
        print(f"Esperando cliente en localhost en el puerto: {port} ")
        conn, _ = listener.accept()
        with conn:
            print("Cliente conectado en localhost. ")
            return Game(PLAYER_NAMES).play_server(conn)


def main(argv=None) -> int:
    """Run the server command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Uso: cartared-server <puerto>")
        return 1
    try:
        port = int(args[0])
    except ValueError:
        print(f"Puerto no válido: {args[0]}", file=sys.stderr)
        return 1
    if not 0 <= port <= 65535:
        print(f"Puerto no válido: {args[0]}", file=sys.stderr)
        return 1
    try:
        serve(port)
    except OSError as exc:
        print(f"Error de red: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())