"""The line-based messages exchanged between the hosting and the joining player."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .game import GameTurn

CONNECT_REQUEST = "CONNECT_REQUEST"
WELCOME = "WELCOME"
READY = "READY"
ATTACK = "ATTACK"
GAME_UPDATE = "GAME_UPDATE"
DISCONNECT = "DISCONNECT"
SERVER_SHUTDOWN = "SERVER_SHUTDOWN"

SPACE_TOKEN = "_SPACE_"
NO_WINNER = "N/A"

_TURN_LABELS = {
    GameTurn.PLAYER1: "P1_TURN",
    GameTurn.PLAYER2: "P2_TURN",
    GameTurn.GAME_OVER_P1_WINS: "P1_WINS",
    GameTurn.GAME_OVER_P2_WINS: "P2_WINS",
    GameTurn.SETUP: "SETUP",
}


class ProtocolError(ValueError):
    """A message that cannot be understood."""


def _escape(text: str) -> str:
    return text.replace(" ", SPACE_TOKEN)


def _unescape(text: str) -> str:
    return text.replace(SPACE_TOKEN, " ")


@dataclass(frozen=True)
class Message:
    """A received line split into its command word and the words after it."""

    command: str
    args: tuple[str, ...] = ()

    @property
    def parts(self) -> tuple[str, ...]:
        """The command followed by its arguments, as they arrived."""
        return (self.command, *self.args)


@dataclass(frozen=True)
class GameUpdate:
    """The full game state the host sends after every change."""

    turn_id: int
    p1_board: str
    p2_board: str
    last_action: str
    game_over: bool
    winner: str = ""

    def encode(self) -> str:
        """The update as one protocol line, without its line ending."""
        winner = _escape(self.winner) if self.winner else NO_WINNER
        return " ".join(
            (
                GAME_UPDATE,
                str(self.turn_id),
                self.p1_board,
                self.p2_board,
                _escape(self.last_action),
                str(bool(self.game_over)),
                winner,
            )
        )


def _parse_bool(text: str) -> bool:
    value = text.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ProtocolError(f"not a boolean: {text!r}")


def decode_game_update(parts: Sequence[str]) -> GameUpdate:
    """Build a GameUpdate from the words of a GAME_UPDATE line, command included.

    Raises ProtocolError when words are missing or malformed.
    """
    if len(parts) < 6:
        raise ProtocolError(f"GAME_UPDATE needs at least 6 parts, got {len(parts)}")
    try:
        turn_id = int(parts[1])
    except ValueError as exc:
        raise ProtocolError(f"bad turn id: {parts[1]!r}") from exc
    game_over = _parse_bool(parts[5])
    winner = ""
    if len(parts) > 6 and parts[6] != NO_WINNER:
        winner = _unescape(parts[6])
    for extra in parts[7:]:
        winner = f"{winner} {_unescape(extra)}"
    return GameUpdate(
        turn_id=turn_id,
        p1_board=parts[2],
        p2_board=parts[3],
        last_action=_unescape(parts[4]),
        game_over=game_over,
        winner=winner,
    )


def parse_message(line: str) -> Message:
    """Split a received line into a Message; the line ending is dropped."""
    words = line.rstrip("\r\n").split(" ")
    return Message(words[0], tuple(words[1:]))


def encode_connect_request(name: str) -> str:
    """The joining player's greeting, carrying its name."""
    return f"{CONNECT_REQUEST} {name}"


def encode_welcome(host_name: str, client_name: str, player_id: int) -> str:
    """The host's answer, naming both players and the joiner's player number."""
    return f"{WELCOME} {host_name} {client_name} {player_id}"


def encode_ready() -> str:
    """The joining player's signal that it is ready to start."""
    return READY


def encode_attack(row: int, col: int) -> str:
    """A shot fired by the joining player at (row, col)."""
    return f"{ATTACK} {row} {col}"


def encode_disconnect() -> str:
    """Notice that the sender is leaving."""
    return DISCONNECT


def game_turn_label(turn: object) -> str:
    """A short label for a turn state, for logs."""
    label = _TURN_LABELS.get(turn) if isinstance(turn, GameTurn) else None
    if label is None:
        value = turn.value if isinstance(turn, GameTurn) else turn
        return f"UnknownTurn ({value})"
    return label