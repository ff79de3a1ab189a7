from __future__ import annotations

from typing import Tuple

import numpy as np


Coordinate = Tuple[int, int]  # (row, col)


class GameGrid:
    """Discrete 2D grid of settled and falling cells.

    The grid uses 0 for empty cells and 1..7 for filled cells; the value is
    the cell's color tag. `invisible_rows` extra rows sit above the visible
    playfield so tall pieces can spawn partly off-screen.
    """

    def __init__(self, width: int, height: int, invisible_rows: int = 2) -> None:
        self.width = int(width)
        self.height = int(height)
        self.invisible_rows = int(invisible_rows)
        self.board_height = self.height + self.invisible_rows
        self.grid = np.zeros((self.board_height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def in_bounds(self, coord: Coordinate) -> bool:
        row, col = coord
        return 0 <= row < self.board_height and 0 <= col < self.width

    def cell_at(self, coord: Coordinate) -> int:
        assert self.in_bounds(coord), f"cell {coord} outside {self.board_height}x{self.width}"
        row, col = coord
        return int(self.grid[row, col])

    def set_cell(self, coord: Coordinate, value: int) -> None:
        assert self.in_bounds(coord), f"cell {coord} outside {self.board_height}x{self.width}"
        row, col = coord
        self.grid[row, col] = value

    def is_empty(self, coord: Coordinate) -> bool:
        return self.cell_at(coord) == 0

    def clear_row(self, row: int) -> None:
        self.grid[row, :] = 0

    def copy_row(self, src: int, dst: int) -> None:
        self.grid[dst, :] = self.grid[src, :]

    def is_row_full(self, row: int) -> bool:
        return bool(np.all(self.grid[row] != 0))

    def is_row_empty(self, row: int) -> bool:
        return not np.any(self.grid[row])

    def count_occupied(self) -> int:
        return int(np.count_nonzero(self.grid))

    def visible_state(self) -> np.ndarray:
        """Copy of the player-facing rows (buffer rows excluded)."""
        return self.grid[self.invisible_rows :].copy()

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
