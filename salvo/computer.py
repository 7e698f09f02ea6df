"""A computer opponent that hunts around its hits."""

from __future__ import annotations

import random
from collections import deque
from typing import Optional

from .player import BOARD_SIZE, HIDDEN, HIT, MISS, Player

_NEIGHBOUR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_RANDOM_ATTEMPTS = BOARD_SIZE * BOARD_SIZE * 2


class ComputerPlayer(Player):
    """A player that picks its own shots: follow-ups after hits, otherwise random."""

    def __init__(self, name: str = "Computer", rng: Optional[random.Random] = None) -> None:
        super().__init__(name)
        self.rng = rng if rng is not None else random.Random()
        self.target_queue: deque[tuple[int, int]] = deque()
        self.attempted: set[tuple[int, int]] = set()

    def strategize_after_hit(self, row: int, col: int, opponent: Player) -> None:
        """Queue the untried cells next to a hit at (row, col)."""
        for dr, dc in _NEIGHBOUR_OFFSETS:
            r, c = row + dr, col + dc
            if (
                0 <= r < BOARD_SIZE
                and 0 <= c < BOARD_SIZE
                and self.tracking_cell(r, c) == HIDDEN
                and (r, c) not in self.attempted
            ):
                self.target_queue.append((r, c))

    def make_strategic_move(self, opponent: Player) -> Optional[tuple[int, int]]:
        """Choose the next cell to fire at, or None when no cell could be found."""

        def open_cell(target: tuple[int, int]) -> bool:
            return (
                target not in self.attempted
                and opponent.own_cell(*target) not in (HIT, MISS)
            )

        while self.target_queue:
            target = self.target_queue.popleft()
            if open_cell(target):
                self.attempted.add(target)
                return target

        for _ in range(_RANDOM_ATTEMPTS):
            target = (self.rng.randrange(BOARD_SIZE), self.rng.randrange(BOARD_SIZE))
            if open_cell(target):
                self.attempted.add(target)
                return target
        return None

    def reset_computer_logic(self) -> None:
        """Forget queued follow-ups and every shot already chosen."""
        self.target_queue.clear()
        self.attempted.clear()