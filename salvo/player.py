"""A player's own board, tracking board and fleet."""

from __future__ import annotations

import random
from typing import Optional

from .ship import Ship

BOARD_SIZE = 10
WATER = "~"
SHIP = "S"
HIT = "X"
MISS = "O"
HIDDEN = "?"
SUNK = "S"
OUT_OF_BOUNDS = " "

_PLACEMENT_ATTEMPTS = 200


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Player:
    """A participant holding a fleet, its own board and a board of shots fired."""

    def __init__(self, name: str = "Player") -> None:
        self.name = name
        self.ships: list[Ship] = []
        self._own: list[list[str]] = []
        self._tracking: list[list[str]] = []
        self.initialize_boards()

    def initialize_boards(self) -> None:
        """Fill the own board with water and the tracking board with unknowns."""
        self._own = [[WATER] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._tracking = [[HIDDEN] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def add_ship_definition(self, name: str, size: int) -> None:
        """Add an unplaced ship to the fleet."""
        self.ships.append(Ship(name, size))

    def place_ship(self, ship_index: int, row: int, col: int, horizontal: bool) -> bool:
        """Place the ship at ship_index starting at (row, col).

        Returns False when the ship would leave the board or overlap another.
        Raises IndexError for an unknown ship index.
        """
        if not 0 <= ship_index < len(self.ships):
            raise IndexError(f"no ship at index {ship_index}")
        ship = self.ships[ship_index]
        ship.clear_cells()

        if not _on_board(row, col):
            return False
        if horizontal:
            if col + ship.size > BOARD_SIZE:
                return False
            positions = [(row, col + offset) for offset in range(ship.size)]
        else:
            if row + ship.size > BOARD_SIZE:
                return False
            positions = [(row + offset, col) for offset in range(ship.size)]

        if any(self._own[r][c] != WATER for r, c in positions):
            return False

        for r, c in positions:
            self._own[r][c] = SHIP
            ship.add_cell(r, c)
        return True

    def place_ships_randomly(self, rng: Optional[random.Random] = None) -> None:
        """Place every ship at random; a ship that finds no room stays unplaced."""
        rng = rng if rng is not None else random.Random()
        for index, ship in enumerate(self.ships):
            ship.clear_cells()
            for _ in range(_PLACEMENT_ATTEMPTS):
                row = rng.randrange(BOARD_SIZE)
                col = rng.randrange(BOARD_SIZE)
                horizontal = rng.randrange(2) == 0
                if self.place_ship(index, row, col, horizontal):
                    break

    def own_cell(self, row: int, col: int) -> str:
        """The own-board cell, or a blank for coordinates off the board."""
        return self._own[row][col] if _on_board(row, col) else OUT_OF_BOUNDS

    def tracking_cell(self, row: int, col: int) -> str:
        """The tracking-board cell, or a blank for coordinates off the board."""
        return self._tracking[row][col] if _on_board(row, col) else OUT_OF_BOUNDS

    def receive_attack(self, row: int, col: int) -> str:
        """Apply an incoming shot and return the resulting cell state.

        A fresh shot yields HIT or MISS; a repeated shot returns the cell as it
        stands; a shot off the board returns a blank.
        """
        if not _on_board(row, col):
            return OUT_OF_BOUNDS
        cell = self._own[row][col]
        if cell == SHIP:
            self._own[row][col] = HIT
            any(ship.attempt_hit(row, col) for ship in self.ships)
            return HIT
        if cell == WATER:
            self._own[row][col] = MISS
            return MISS
        return cell

    def process_attack_result(self, row: int, col: int, result: str) -> bool:
        """Record the outcome of a shot this player fired.

        Returns False for a cell off the board, one already targeted, or an
        unknown result.
        """
        if not _on_board(row, col) or self._tracking[row][col] != HIDDEN:
            return False
        if result in (HIT, SUNK):
            self._tracking[row][col] = HIT
        elif result == MISS:
            self._tracking[row][col] = MISS
        else:
            return False
        return True

    def is_defeated(self) -> bool:
        """True when every ship is sunk, or when there are no ships at all."""
        return all(ship.is_sunk() for ship in self.ships)

    def reset(self) -> None:
        """Clear both boards and replace the fleet with fresh, unplaced ships."""
        self.initialize_boards()
        self.ships = [Ship(ship.name, ship.size) for ship in self.ships]

    def own_board_string(self) -> str:
        """The own board, row by row, as one string."""
        return "".join("".join(row) for row in self._own)

    def tracking_board_string(self) -> str:
        """The tracking board, row by row, as one string."""
        return "".join("".join(row) for row in self._tracking)

    def set_own_board_from_string(self, board: str) -> None:
        """Replace the own board with a row-by-row string of cell states.

        Ship cells that the new state shows as hit are marked hit on the ships.
        Raises ValueError when the string does not cover the board exactly.
        """
        if len(board) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(
                f"board string must have {BOARD_SIZE * BOARD_SIZE} cells, got {len(board)}"
            )
        for index, state in enumerate(board):
            row, col = divmod(index, BOARD_SIZE)
            if self._own[row][col] == SHIP and state == HIT:
                for ship in self.ships:
                    ship.attempt_hit(row, col)
            self._own[row][col] = state

    def set_tracking_cell(self, row: int, col: int, value: str) -> None:
        """Set one tracking-board cell; coordinates off the board are ignored."""
        if _on_board(row, col):
            self._tracking[row][col] = value