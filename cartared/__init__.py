"""Two-player card game played between a server and a client over TCP."""

__version__ = "0.1.0"
__all__ = ["cards", "player", "game", "server", "client"]