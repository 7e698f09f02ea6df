# salvo

A library for two-player Battleship on a 10×10 board. Each fleet is a
Carrier (5), Battleship (4), Cruiser (3), Submarine (3) and Destroyer (2),
placed at random. Player 1 always shoots first, and players take turns until
one fleet has been sunk.

## Installing

```
pip install .
```

## Modules

- `salvo.ship` – `Ship` and `CellCoordinate`: a ship's cells and the hits it
  has taken.
- `salvo.player` – `Player`: a player's own board, tracking board and fleet,
  with ship placement (`place_ship`, `place_ships_randomly`), shots
  (`receive_attack`, `process_attack_result`) and board strings
  (`own_board_string`, `tracking_board_string`, `set_own_board_from_string`).
  Cells are `~` water, `S` ship, `X` hit, `O` miss and `?` not yet targeted.
- `salvo.game` – `BattleshipGame`, `GameTurn` and `GameMode`: the turn
  rules. `make_attack` returns `False` for a refused move and explains it in
  `last_action_message`.
- `salvo.computer` – `ComputerPlayer`: picks its own shots, trying the cells
  around a hit first (`strategize_after_hit`) and otherwise firing at random
  (`make_strategic_move`).
- `salvo.view` – `own_cell_style`, `tracking_cell_style`, `render_board` and
  `render_boards`: text rendering of boards and the colour and label each
  cell state is shown with.
- `salvo.protocol` – the line-based messages (`CONNECT_REQUEST`, `WELCOME`,
  `READY`, `ATTACK`, `GAME_UPDATE`, `DISCONNECT`): `parse_message`,
  `GameUpdate.encode`, `decode_game_update` and the `encode_*` helpers.
- `salvo.statuslog` – `StatusLog`: time-stamped status messages, newest
  first, keeping at most 20 lines.
- `salvo.session` – `Session` and `Role`: one side of a match. The host keeps
  the authoritative `BattleshipGame`; the client mirrors the `GAME_UPDATE`
  lines it receives. `handle`, `press_ready` and `attack` each return the
  lines to send to the other side.

## Example

Playing a game directly:

```python
from salvo.game import BattleshipGame

game = BattleshipGame()
game.start_new_game("Alice", "Bob")
game.make_attack(0, 0)
print(game.last_action_message)
print(game.is_game_over(), game.winner_string())
```

Two sessions talking to each other in memory:

```python
from salvo.protocol import encode_connect_request
from salvo.session import Role, Session

host = Session(Role.HOST, "Alice")
client = Session(Role.CLIENT, "Bob")
host.connected = client.connected = True

for line in host.handle(encode_connect_request("Bob")):
    client.handle(line)
for line in client.press_ready():
    host.handle(line)
for line in host.press_ready():
    client.handle(line)

print(host.my_turn, client.my_turn)   # True False
for line in host.attack(4, 4):
    client.handle(line)
print(client.status)
```

## What this package does not do

It has no network layer and no command to run: it does not open sockets,
listen for or connect to the other player, or provide a terminal or graphical
interface. Carrying the protocol lines between two `Session` objects, and
setting `Session.connected` once a link is up, is left to the caller.

## Running the tests

```
pip install .[test]
pytest
```