"""Match logic and the socket protocol between server and client."""

from __future__ import annotations

import random
import struct
from enum import Enum
from typing import Callable, Optional

from .cards import Card, Color, full_deck
from .player import Player

PLAYER_NAMES = ("Servidor", "Cliente")

_INT = struct.Struct("<i")


class RoundResult(Enum):
    """Outcome of a round, with its wire text."""

    CLIENT_WINS = "CLIENTE_GANA"
    TIE = "EMPATE"
    SERVER_WINS = "SERVIDOR_GANA"


_RESULT_TEXT = {
    RoundResult.CLIENT_WINS: "Resultado: Cliente gana la ronda",
    RoundResult.TIE: "Resultado: Empate en la ronda",
    RoundResult.SERVER_WINS: "Resultado: Servidor gana la ronda",
}


def round_winner(server_card: Card, client_card: Card) -> RoundResult:
    """Decide a round: the client wins only with a higher card of the same colour."""
    if server_card.color == client_card.color:
        if client_card.value > server_card.value:
            return RoundResult.CLIENT_WINS
        if client_card.value == server_card.value:
            return RoundResult.TIE
    return RoundResult.SERVER_WINS


def _recv_exact(sock, size: int) -> bytes:
    data = bytearray()
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            raise ConnectionError("connection closed by peer")
        data.extend(chunk)
    return bytes(data)


def send_int(sock, value: int) -> None:
    """Send a 32-bit little-endian signed integer."""
    sock.sendall(_INT.pack(value))


def recv_int(sock) -> int:
    """Receive a 32-bit little-endian signed integer."""
    return _INT.unpack(_recv_exact(sock, _INT.size))[0]


def send_card(sock, card: Card) -> None:
    """Send a card as its colour then its value."""
    send_int(sock, int(card.color))
    send_int(sock, card.value)


def recv_card(sock) -> Card:
    """Receive a card sent by send_card."""
    color = recv_int(sock)
    value = recv_int(sock)
    return Card(Color(color), value)


def send_result(sock, result: RoundResult) -> None:
    """Send a round result as NUL-terminated text."""
    sock.sendall(result.value.encode("ascii") + b"\0")


def recv_result(sock) -> RoundResult:
    """Receive a round result; unknown text counts as a tie."""
    data = bytearray()
    while True:
        byte = _recv_exact(sock, 1)
        if byte == b"\0":
            break
        data.extend(byte)
    try:
        return RoundResult(data.decode("ascii", errors="replace"))
    except ValueError:
        return RoundResult.TIE


class Game:
    """A two-player match: player 0 is the server, player 1 the client."""

    def __init__(
        self,
        names,
        input_fn: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], object]] = None,
    ) -> None:
        names = list(names)
        if len(names) != 2:
            raise ValueError("Se requieren exactamente 2 nombres de jugador")
        self.players = [Player(names[0], local=True), Player(names[1], local=False)]
        self._input = input_fn
        self._out = output if output is not None else print

    def deal(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle a full deck and deal it alternately, starting with the server."""
        deck = full_deck()
        (rng or random.Random()).shuffle(deck)
        turn = 0
        while deck:
            self.players[turn].add_card(deck.pop())
            turn = (turn + 1) % len(self.players)

    def resolve_round(self, server_card: Card, client_card: Card, sock) -> RoundResult:
        """Score a round, award the cards and tell the client the result."""
        self._out("")
        self._out(f"[ Ronda ] Servidor jugo {server_card} | Cliente jugo {client_card}")
        result = round_winner(server_card, client_card)
        self._out(_RESULT_TEXT[result])
        if result is RoundResult.CLIENT_WINS:
            winner = self.players[1]
        elif result is RoundResult.SERVER_WINS:
            winner = self.players[0]
        else:
            winner = None
        if winner is not None:
            winner.add_won_card(server_card)
            winner.add_won_card(client_card)
        send_result(sock, result)
        return result

    def _show_hand(self, player: Player, title: str) -> None:
        self._out(f" MANO ({title}) ")
        for index, card in enumerate(player.hand):
            self._out(f"[{index}] {card}")

    def _choose(self, player: Player, prompt: str) -> int:
        ask = self._input or input
        while True:
            try:
                index = int(ask(prompt).strip())
            except ValueError:
                continue
            if 0 <= index < player.hand_size():
                return index

    def _report(self, server_won: int, client_won: int) -> tuple[int, int]:
        self._out("")
        self._out("=== Fin de la partida ===")
        self._out(f"Servidor cartas ganadas: {server_won}")
        self._out(f"Cliente cartas ganadas: {client_won}")
        if server_won > client_won:
            self._out("¡Servidor gana la partida!")
        elif server_won < client_won:
            self._out("¡Cliente gana la partida!")
        else:
            self._out("La partida termina en empate.")
        return server_won, client_won

    def play_server(self, sock, rng: Optional[random.Random] = None) -> tuple[int, int]:
        """Deal, send the client its hand and play rounds; return both won counts."""
        self.deal(rng)
        server, client = self.players
        send_int(sock, client.hand_size())
        for card in client.hand:
            send_card(sock, card)

        while server.hand_size() > 0 and client.hand_size() > 0:
            self._out("")
            self._show_hand(server, "SERVIDOR")
            index = self._choose(server, "Servidor, elige indice de carta: ")
            server_card = server.remove_card(index)
            send_card(sock, server_card)
            self._out(f"-> Servidor juega: {server_card}")
            try:
                client_card = recv_card(sock)
            except ConnectionError:
                break
            self._out(f"-> Cliente juega: {client_card}")
            self.resolve_round(server_card, client_card, sock)

        return self._report(server.won_count(), client.won_count())

    def play_client(self, sock) -> tuple[int, int]:
        """Receive a hand and play rounds against the server; return both won counts."""
        client = self.players[1]
        client.clear_hand()
        for _ in range(recv_int(sock)):
            client.add_card(recv_card(sock))

        server_won = client_won = 0
        while client.hand_size() > 0:
            try:
                server_card = recv_card(sock)
            except ConnectionError:
                break
            self._out("")
            self._out(f"-> Servidor juega: {server_card}")
            self._show_hand(client, "CLIENTE")
            index = self._choose(client, "Cliente, elige indice de carta: ")
            client_card = client.remove_card(index)
            send_card(sock, client_card)
            self._out(f"-> Cliente juega: {client_card}")
            try:
                result = recv_result(sock)
            except ConnectionError:
                break
            self._out(_RESULT_TEXT[result])
            if result is RoundResult.CLIENT_WINS:
                client_won += 2
            elif result is RoundResult.SERVER_WINS:
                server_won += 2

        return self._report(server_won, client_won)