"""The state of one side of a networked game, driven by protocol lines and user actions."""

from __future__ import annotations

import enum
import random
from typing import Optional

from .game import BattleshipGame, GameTurn
from .player import BOARD_SIZE
from .protocol import (
    ATTACK,
    CONNECT_REQUEST,
    DISCONNECT,
    GAME_UPDATE,
    READY,
    SERVER_SHUTDOWN,
    WELCOME,
    GameUpdate,
    ProtocolError,
    decode_game_update,
    encode_attack,
    encode_ready,
    encode_welcome,
    parse_message,
)
from .statuslog import StatusLog

_PLACEHOLDER_OPPONENT = "Opponent"
_TEMPORARY_OPPONENT = "Player2_Tmp"


class Role(enum.Enum):
    """Which side of the connection this session plays."""

    NONE = "none"
    HOST = "host"
    CLIENT = "client"


_DEFAULT_NAMES = {Role.HOST: "Host", Role.CLIENT: "Client", Role.NONE: "Player"}
_READY_NAMES = {Role.HOST: "HostPlayer", Role.CLIENT: "ClientPlayer", Role.NONE: "ClientPlayer"}
_PLAYER_IDS = {Role.HOST: 1, Role.CLIENT: 2, Role.NONE: 0}


def _blank(text: Optional[str]) -> bool:
    return not text or not text.strip()


class Session:
    """One player's view of a game played over a connection.

    The host keeps the authoritative game and sends a GAME_UPDATE after every
    change; the client only mirrors what it is sent. Every method that reacts
    to input returns the lines to send to the other side.
    """

    def __init__(
        self,
        role: Role,
        name: str = "",
        rng: Optional[random.Random] = None,
        status: Optional[StatusLog] = None,
    ) -> None:
        self.role = Role(role)
        self.name = _DEFAULT_NAMES[self.role] if _blank(name) else name
        self.rng = rng
        self.status = status if status is not None else StatusLog()
        self.connected = False
        self._clear_state()

    def _clear_state(self) -> None:
        self.opponent_name = _PLACEHOLDER_OPPONENT
        self.player_id = _PLAYER_IDS[self.role]
        self.game: Optional[BattleshipGame] = None
        self.game_active = False
        self.my_turn = False
        self.client_sent_ready = False
        self.host_ready = False
        self.own_board: Optional[str] = None
        self.target_board: Optional[str] = None
        self.game_over = False
        self.winner = ""
        self.game_over_notice: Optional[str] = None

    @property
    def is_host(self) -> bool:
        return self.role is Role.HOST

    @property
    def ready_available(self) -> bool:
        """Whether pressing Ready would still do something."""
        if not self.connected or self.game_active:
            return False
        if self.is_host:
            return not (self.host_ready and self.client_sent_ready)
        return not self.client_sent_ready

    @property
    def attack_enabled(self) -> bool:
        """Whether this side may fire now."""
        return self.game_active and self.my_turn

    def log(self, message: str) -> None:
        self.status.log(message)

    def reset(self) -> None:
        """Drop the game, the connection state and the role."""
        self.role = Role.NONE
        self.connected = False
        self._clear_state()
        self.log("Game reset. Host or Join, then Ready up.")

    def _new_game(self, p1_name: str, p2_name: str) -> BattleshipGame:
        if self.game is None:
            self.game = BattleshipGame(self.rng)
        self.game.start_new_game(p1_name, p2_name)
        return self.game

    def _effective_opponent(self) -> str:
        if _blank(self.opponent_name) or self.opponent_name == _PLACEHOLDER_OPPONENT:
            return _TEMPORARY_OPPONENT
        return self.opponent_name

    def _initial_update(self) -> GameUpdate:
        game = self.game
        return GameUpdate(
            turn_id=1,
            p1_board=game.player1.own_board_string(),
            p2_board=game.player2.own_board_string(),
            last_action=game.last_action_message,
            game_over=False,
        )

    def _state_update(self) -> GameUpdate:
        game = self.game
        over = game.is_game_over()
        turn = game.current_turn
        if over:
            turn_id = {GameTurn.GAME_OVER_P1_WINS: 1, GameTurn.GAME_OVER_P2_WINS: 2}.get(turn, 0)
        else:
            turn_id = 1 if turn is GameTurn.PLAYER1 else 2
        return GameUpdate(
            turn_id=turn_id,
            p1_board=game.player1.own_board_string(),
            p2_board=game.player2.own_board_string(),
            last_action=game.last_action_message,
            game_over=over,
            winner=game.winner_string() if over else "",
        )

    def _broadcast(self, update: GameUpdate) -> list[str]:
        self._apply_update(update)
        return [update.encode()]

    def _redraw(self, update: GameUpdate) -> None:
        if self.is_host and self.game is not None and self.game.player1 is not None:
            self.own_board = self.game.player1.own_board_string()
            self.target_board = self.game.player1.tracking_board_string()
            return
        if self.is_host:
            return
        if not update.p1_board or not update.p2_board:
            self.log("CLIENT: Null/empty board strings for RedrawBoardsFromServerData.")
            return
        cells = BOARD_SIZE * BOARD_SIZE
        if len(update.p1_board) != cells or len(update.p2_board) != cells:
            self.log("CLIENT: Invalid board string length for Redraw.")
            return
        self.own_board = update.p2_board
        self.target_board = update.p1_board

    def _apply_update(self, update: GameUpdate) -> None:
        self.game_active = not update.game_over
        self.my_turn = update.turn_id == self.player_id and self.game_active
        self._redraw(update)
        self.status.replace(update.last_action)
        if update.game_over:
            side = "Host" if self.is_host else "Client"
            self.game_over = True
            self.winner = update.winner
            self.game_over_notice = f"Game Over! {update.winner}"
            self.log(f"Side ({side}): Game Over! {update.winner}")

    def handle(self, line: str) -> list[str]:
        """React to one line received from the other side."""
        message = parse_message(line)
        command, args = message.command, message.args

        if command == CONNECT_REQUEST and self.is_host and args:
            self.opponent_name = " ".join(args)
            if _blank(self.opponent_name):
                self.opponent_name = "ClientPlayer"
            self.log(
                f"Host: Received CONNECT_REQUEST from '{self.opponent_name}'. Sending WELCOME."
            )
            self._new_game("Host" if _blank(self.name) else self.name, self.opponent_name)
            return [encode_welcome(self.name, self.opponent_name, 2)]

        if command == WELCOME and not self.is_host and len(args) > 2:
            try:
                player_id = int(args[2])
            except ValueError as exc:
                raise ProtocolError(f"bad player id: {args[2]!r}") from exc
            self.opponent_name = args[0]
            self.player_id = player_id
            self.log(f"Client: Welcome from Host '{self.opponent_name}'. I am Player {player_id}.")
            return []

        if command == READY and self.is_host:
            self.client_sent_ready = True
            self.log("Host: Client sent READY.")
            if not self.host_ready:
                return []
            self.game_active = True
            self.my_turn = True
            self._new_game(self.name, self._effective_opponent())
            self.log("HOST: Both players ready. Sending initial GAME_UPDATE.")
            return self._broadcast(self._initial_update())

        if command == ATTACK and self.is_host and len(args) == 2:
            if self.game is None or not self.game_active:
                self.log("HOST: Received ATTACK but game not active/ready.")
                return []
            try:
                row, col = int(args[0]), int(args[1])
            except ValueError as exc:
                raise ProtocolError(f"bad attack coordinates: {args!r}") from exc
            self.game.make_attack(row, col)
            return self._broadcast(self._state_update())

        if command == GAME_UPDATE and len(message.parts) >= 6:
            try:
                update = decode_game_update(message.parts)
            except ProtocolError as exc:
                self.log(f"Error processing GAME_UPDATE: {exc}. Msg: {line}")
                return []
            self._apply_update(update)
            return []

        if command in (DISCONNECT, SERVER_SHUTDOWN):
            self.log(f"Received {command}. Disconnecting.")
            self.log(f"Disconnection event ({command}). Scheduling UI reset.")
            self.reset()
        return []

    def press_ready(self) -> list[str]:
        """Declare this side ready to start."""
        if not self.connected:
            self.log("Not connected. Host or Join first.")
            return []
        if _blank(self.name):
            self.name = _READY_NAMES[self.role]

        if not self.is_host:
            self.client_sent_ready = True
            self.log("Client: Sent READY to Host. Waiting for GAME_UPDATE to start game.")
            return [encode_ready()]

        self.host_ready = True
        self.log(f"Host ({self.name}) is Ready.")
        if self.game is None:
            self._new_game(self.name, self._effective_opponent())
        elif self.game.player1 is not None:
            self.game.player1.name = self.name

        if not self.client_sent_ready:
            self.log("Host ready, waiting for Client to send READY signal.")
            return []

        self.game_active = True
        self.my_turn = True
        if self.game.player1 is None or self.game.player2 is None:
            self._new_game(self.name, self.opponent_name)
        else:
            self.game.player1.name = self.name
            self.game.player2.name = self.opponent_name
        self.log("HOST: Both players ready. Sending initial GAME_UPDATE.")
        return self._broadcast(self._initial_update())

    def attack(self, row: int, col: int) -> list[str]:
        """Fire at (row, col) on the opponent's board."""
        if not (self.game_active and self.my_turn):
            self.log("Cannot attack: Not your turn or game not active.")
            return []
        if self.is_host:
            if self.game is None:
                self.log("HOST: No game logic on attack!")
                return []
            self.game.make_attack(row, col)
            return self._broadcast(self._state_update())
        self.my_turn = False
        return [encode_attack(row, col)]