import random
import socket
import threading

import pytest

from cartared.cards import Card, Color, full_deck
from cartared.game import (
    Game,
    RoundResult,
    recv_card,
    recv_int,
    recv_result,
    round_winner,
    send_card,
    send_int,
    send_result,
)


@pytest.fixture
def pair():
    a, b = socket.socketpair()
    yield a, b
    a.close()
    b.close()


def _always_zero(prompt=""):
    return "0"


@pytest.mark.parametrize(
    "server, client, expected",
    [
        (Card(Color.ROJO, 3), Card(Color.ROJO, 7), RoundResult.CLIENT_WINS),
        (Card(Color.ROJO, 3), Card(Color.ROJO, 3), RoundResult.TIE),
        (Card(Color.ROJO, 7), Card(Color.ROJO, 3), RoundResult.SERVER_WINS),
        (Card(Color.AMARILLO, 1), Card(Color.NEGRO, 9), RoundResult.SERVER_WINS),
        (Card(Color.AZUL, 4), Card(Color.ROJO, 4), RoundResult.SERVER_WINS),
    ],
)
def test_round_winner(server, client, expected):
    assert round_winner(server, client) is expected


def test_game_requires_two_names():
    with pytest.raises(ValueError):
        Game(["Servidor"])
    with pytest.raises(ValueError):
        Game(["a", "b", "c"])


def test_players_roles():
    game = Game(["Servidor", "Cliente"])
    assert [p.name for p in game.players] == ["Servidor", "Cliente"]
    assert [p.local for p in game.players] == [True, False]


@pytest.mark.parametrize(
    "raw, expected",
    [
        (b"\x05\x00\x00\x00", 5),
        (b"\xff\xff\xff\xff", -1),
        (b"\x00\x01\x00\x00", 256),
    ],
)
def test_int_wire_format(pair, raw, expected):
    a, b = pair
    a.sendall(raw)
    assert recv_int(b) == expected


@pytest.mark.parametrize("value", [0, 1, -1, 2**31 - 1, -(2**31)])
def test_int_round_trip(pair, value):
    a, b = pair
    send_int(a, value)
    assert recv_int(b) == value


def test_card_round_trip(pair):
    a, b = pair
    for card in full_deck():
        send_card(a, card)
        assert recv_card(b) == card


@pytest.mark.parametrize(
    "raw, expected",
    [
        (b"EMPATE\x00", RoundResult.TIE),
        (b"CLIENTE_GANA\x00", RoundResult.CLIENT_WINS),
        (b"SERVIDOR_GANA\x00", RoundResult.SERVER_WINS),
    ],
)
def test_result_wire_format(pair, raw, expected):
    a, b = pair
    a.sendall(raw)
    assert recv_result(b) is expected


@pytest.mark.parametrize("result", list(RoundResult))
def test_result_round_trip(pair, result):
    a, b = pair
    send_result(a, result)
    assert recv_result(b) is result


def test_unknown_result_counts_as_tie(pair):
    a, b = pair
    a.sendall(b"OTRA_COSA\0")
    assert recv_result(b) is RoundResult.TIE


def test_recv_on_closed_connection(pair):
    a, b = pair
    a.sendall(b"\x01\x00")
    a.shutdown(socket.SHUT_WR)
    with pytest.raises(ConnectionError):
        recv_int(b)


def test_deal_splits_whole_deck():
    game = Game(["Servidor", "Cliente"])
    game.deal(random.Random(7))
    server, client = game.players
    assert server.hand_size() == client.hand_size() == len(full_deck()) // 2
    assert set(server.hand) | set(client.hand) == set(full_deck())


def test_deal_is_reproducible_with_seed():
    first = Game(["Servidor", "Cliente"])
    second = Game(["Servidor", "Cliente"])
    first.deal(random.Random(42))
    second.deal(random.Random(42))
    assert first.players[0].hand == second.players[0].hand
    assert first.players[1].hand == second.players[1].hand


def test_resolve_round_client_wins(pair):
    a, b = pair
    lines = []
    game = Game(["Servidor", "Cliente"], output=lines.append)
    result = game.resolve_round(Card(Color.ROJO, 3), Card(Color.ROJO, 7), a)
    assert result is RoundResult.CLIENT_WINS
    assert game.players[1].won == [Card(Color.ROJO, 3), Card(Color.ROJO, 7)]
    assert game.players[0].won_count() == 0
    assert recv_result(b) is RoundResult.CLIENT_WINS
    assert "Resultado: Cliente gana la ronda" in lines


def test_resolve_round_tie_awards_nothing(pair):
    a, b = pair
    game = Game(["Servidor", "Cliente"], output=lambda line: None)
    result = game.resolve_round(Card(Color.AZUL, 2), Card(Color.AZUL, 2), a)
    assert result is RoundResult.TIE
    assert game.players[0].won_count() == game.players[1].won_count() == 0
    assert recv_result(b) is RoundResult.TIE


def test_play_client_with_scripted_server(pair):
    server_end, client_end = pair
    hand = [Card(Color.ROJO, 5)]
    server_card = Card(Color.ROJO, 3)
    send_int(server_end, len(hand))
    for card in hand:
        send_card(server_end, card)
    send_card(server_end, server_card)
    send_result(server_end, RoundResult.CLIENT_WINS)

    answers = iter(["x", "5", "-1", "0"])
    lines = []
    game = Game(["Servidor", "Cliente"], input_fn=lambda prompt: next(answers), output=lines.append)
    score = game.play_client(client_end)

    assert score == (0, 2)
    assert next(answers, None) is None
    assert recv_card(server_end) == hand[0]
    assert "¡Cliente gana la partida!" in lines


def test_play_server_stops_when_client_disconnects(pair):
    server_end, client_end = pair
    client_end.shutdown(socket.SHUT_WR)
    lines = []
    game = Game(["Servidor", "Cliente"], input_fn=_always_zero, output=lines.append)
    score = game.play_server(server_end, random.Random(3))
    assert score == (0, 0)
    assert recv_int(client_end) == len(full_deck()) // 2
    assert "La partida termina en empate." in lines


def test_full_match_both_sides_agree(pair):
    server_end, client_end = pair
    server_game = Game(["Servidor", "Cliente"], input_fn=_always_zero, output=lambda line: None)
    client_game = Game(["Servidor", "Cliente"], input_fn=_always_zero, output=lambda line: None)
    outcome = {}

    def run_server():
        outcome["server"] = server_game.play_server(server_end, random.Random(11))

    thread = threading.Thread(target=run_server, daemon=True)
    thread.start()
    client_score = client_game.play_client(client_end)
    thread.join(timeout=10)

    assert outcome["server"] == client_score
    server_won, client_won = client_score
    assert server_won % 2 == 0 and client_won % 2 == 0
    assert server_won + client_won <= len(full_deck())
    assert server_game.players[0].hand_size() == 0
    assert client_game.players[1].hand_size() == 0