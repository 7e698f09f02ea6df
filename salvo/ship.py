"""Ships and the board cells they occupy."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CellCoordinate:
    """One board cell covered by a ship, and whether it has been hit."""

    row: int
    col: int
    is_hit: bool = False


@dataclass
class Ship:
    """A named ship of fixed size that tracks its cells and the hits it took."""

    name: str
    size: int
    cells: list[CellCoordinate] = field(default_factory=list)
    hits_taken: int = 0

    def add_cell(self, row: int, col: int) -> None:
        """Record a cell of the ship; cells beyond the ship's size are ignored."""
        if len(self.cells) < self.size:
            self.cells.append(CellCoordinate(row, col))

    def attempt_hit(self, row: int, col: int) -> bool:
        """Mark the cell at (row, col) as hit.

        Returns True only for a new hit on an unsunk ship.
        """
        if self.is_sunk():
            return False
        for cell in self.cells:
            if (cell.row, cell.col) == (row, col):
                if cell.is_hit:
                    return False
                cell.is_hit = True
                self.hits_taken += 1
                return True
        return False

    def is_sunk(self) -> bool:
        """A ship is sunk once it has taken as many hits as its size."""
        if self.size <= 0:
            return True
        return self.hits_taken >= self.size

    def clear_cells(self) -> None:
        """Forget the ship's position and any hits."""
        self.cells.clear()
        self.hits_taken = 0

    def reset(self) -> None:
        """Return the ship to its unplaced, unhit state."""
        self.clear_cells()