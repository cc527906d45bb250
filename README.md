# cartared

A two-player card game played in the terminal over a TCP connection. One
player runs the server, the other runs the client.

## The game

The deck holds 40 cards: four colours (Amarillo, Azul, Rojo, Negro), each
with the values 0 to 9. The server shuffles the deck and deals every card in
turn, so each player gets 20. The client's hand is sent to it over the
connection.

Each round the server picks a card first. The client sees that card and then
picks one of its own.

- Same colour and a higher value: the client wins the round.
- Same colour and the same value: the round is a draw.
- Anything else: the server wins the round.

The winner of a round collects both cards. When the hands run out, the player
with more won cards wins the match; equal counts make it a draw.

## Installing

```
pip install .
```

## Playing

Start the server, giving it the TCP number to listen on. It listens on
`127.0.0.1` and waits for one client:

```
cartared-server 8080
```

From a second terminal, start the client. With no argument it connects to
`127.0.0.1:8080`; an optional argument gives a different number:

```
cartared-client
cartared-client 9000
```

On your turn the game lists your hand with an index beside each card. Type the
index of the card to play; anything that is not a valid index is asked for
again. Both commands print the won-card counts and the winner at the end.

## Using the library

- `cartared.cards`: `Color`, `Card` (ordered by colour, then value) and
  `full_deck()`.
- `cartared.player`: `Player`, holding a hand and the cards won.
- `cartared.game`: `Game` (`deal`, `resolve_round`, `play_server`,
  `play_client`), `RoundResult`, `round_winner()`, and the wire functions
  `send_int`, `recv_int`, `send_card`, `recv_card`, `send_result`,
  `recv_result`.
- `cartared.server.serve(port, host)` and `cartared.client.connect(host, port)`
  open the connection and play one match, returning both won counts.

```python
from cartared.cards import Card, Color
from cartared.game import round_winner

print(round_winner(Card(Color.ROJO, 3), Card(Color.ROJO, 7)))
# RoundResult.CLIENT_WINS
```

## Limits

The commands only use `127.0.0.1`; playing across machines needs `serve()` and
`connect()` called with another host. The server plays a single match with a
single client and then exits. There is no computer opponent and no saved
history of matches.

## Running the tests

```
pip install .[test]
pytest
```