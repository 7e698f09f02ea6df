"""Turn-based rules for a two-player game of Battleship."""

from __future__ import annotations

import enum
import random
from typing import Optional

from .player import BOARD_SIZE, HIDDEN, HIT, MISS, Player

DEFAULT_FLEET: tuple[tuple[str, int], ...] = (
    ("Carrier", 5),
    ("Battleship", 4),
    ("Cruiser", 3),
    ("Submarine", 3),
    ("Destroyer", 2),
)


class GameMode(enum.Enum):
    """The ways a game can be played."""

    PLAYER_VS_PLAYER = "pvp"


class GameTurn(enum.Enum):
    """Whose move it is, or how the game ended."""

    PLAYER1 = "player1"
    PLAYER2 = "player2"
    GAME_OVER_P1_WINS = "p1_wins"
    GAME_OVER_P2_WINS = "p2_wins"
    SETUP = "setup"


class BattleshipGame:
    """Holds both players and referees the exchange of shots between them."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.player1: Optional[Player] = None
        self.player2: Optional[Player] = None
        self.active_mode = GameMode.PLAYER_VS_PLAYER
        self.current_turn = GameTurn.SETUP
        self.fleet = list(DEFAULT_FLEET)
        self.last_action_message = "Game not started. Waiting for PvP setup."

    def start_new_game(
        self,
        p1_name: str = "",
        p2_name: str = "",
        mode: GameMode = GameMode.PLAYER_VS_PLAYER,
    ) -> None:
        """Create both players, place their fleets at random and give player 1 the first move."""
        self.active_mode = GameMode(mode)
        self.player1 = Player(p1_name or "Player 1")
        self.player2 = Player(p2_name or "Player 2")
        for player in (self.player1, self.player2):
            for name, size in self.fleet:
                player.add_ship_definition(name, size)
            player.reset()
            player.place_ships_randomly(self.rng)
        self.current_turn = GameTurn.PLAYER1
        self.last_action_message = f"{self.player1.name}'s turn to attack."

    def make_attack(self, row: int, col: int) -> bool:
        """Fire the current player's shot at (row, col).

        Returns True when the shot was taken; otherwise the move is refused,
        the turn does not change and last_action_message says why.
        """
        if self.is_game_over():
            self.last_action_message = f"Game is over. {self.winner_string()}"
            return False

        if self.current_turn is GameTurn.PLAYER1:
            attacker, defender, next_turn = self.player1, self.player2, GameTurn.PLAYER2
        elif self.current_turn is GameTurn.PLAYER2:
            attacker, defender, next_turn = self.player2, self.player1, GameTurn.PLAYER1
        else:
            self.last_action_message = "Invalid game state or not a player's turn for attack."
            return False
        if attacker is None or defender is None:
            self.last_action_message = "Attacker or defender is missing."
            return False

        on_board = 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE
        if not on_board or attacker.tracking_cell(row, col) != HIDDEN:
            self.last_action_message = (
                f"{attacker.name} made an invalid move at ({row},{col}). "
                "Cell already targeted or out of bounds. Try again."
            )
            return False

        result = defender.receive_attack(row, col)
        attacker.process_attack_result(row, col, result)

        detail = ""
        if result == HIT:
            outcome = "HIT"
            for ship in defender.ships:
                covers = any((cell.row, cell.col) == (row, col) for cell in ship.cells)
                if covers and ship.is_sunk():
                    outcome = "SUNK"
                    whose = "your" if defender is self.player1 else "their"
                    detail = f" Sunk {whose} {ship.name}!"
                    break
        elif result == MISS:
            outcome = "MISS"
        else:
            self.last_action_message = (
                f"{attacker.name} made an invalid move at ({row},{col}). "
                "Cell already targeted or invalid state. Try again."
            )
            return False

        message = f"{attacker.name} attacked ({row},{col}): {outcome}!{detail}"
        if self.player1.is_defeated():
            self.current_turn = GameTurn.GAME_OVER_P2_WINS
            message += " " + self.winner_string()
        elif self.player2.is_defeated():
            self.current_turn = GameTurn.GAME_OVER_P1_WINS
            message += " " + self.winner_string()
        else:
            self.current_turn = next_turn
            upcoming = self.player1 if next_turn is GameTurn.PLAYER1 else self.player2
            message += f" Now {upcoming.name}'s turn."
        self.last_action_message = message
        return True

    def is_game_over(self) -> bool:
        """True when a side has won, or when the players have not been created."""
        if self.player1 is None or self.player2 is None:
            return True
        return (
            self.current_turn in (GameTurn.GAME_OVER_P1_WINS, GameTurn.GAME_OVER_P2_WINS)
            or self.player1.is_defeated()
            or self.player2.is_defeated()
        )

    def winner_string(self) -> str:
        """A sentence naming the winner, or a plain game-over notice."""
        p1, p2 = self.player1, self.player2
        if self.current_turn is GameTurn.GAME_OVER_P1_WINS and p1 is not None:
            return f"{p1.name} wins!"
        if self.current_turn is GameTurn.GAME_OVER_P2_WINS and p2 is not None:
            return f"{p2.name} wins!"
        if p1 is not None and p1.is_defeated() and p2 is not None:
            return f"{p2.name} wins!"
        if p2 is not None and p2.is_defeated() and p1 is not None:
            return f"{p1.name} wins!"
        return "Game Over!"

    def player_by_id(self, player_id: int) -> Optional[Player]:
        """Player 1 or player 2 by number; None for any other number."""
        return {1: self.player1, 2: self.player2}.get(player_id)