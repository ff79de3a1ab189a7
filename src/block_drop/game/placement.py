from __future__ import annotations

from typing import Iterable

from .errors import IllegalCommitError
from .grid import Coordinate, GameGrid
from .pieces import Piece


class PlacementEngine:
    """Collision checks and the only code path that writes piece cells.

    The live piece is always drawn on the grid. Legality queries erase it,
    test the candidate cells against the settled geometry and then redraw
    it, so a piece never collides with its own footprint.
    """

    def __init__(self, grid: GameGrid) -> None:
        self.grid = grid

    def _cells_free(self, cells: Iterable[Coordinate]) -> bool:
        for cell in cells:
            if not self.grid.in_bounds(cell):
                return False
            if not self.grid.is_empty(cell):
                return False
        return True

    def _paint(self, piece: Piece, value: int) -> None:
        for cell in piece.cells():
            self.grid.set_cell(cell, value)

    def erase(self, piece: Piece) -> None:
        self._paint(piece, 0)

    def stamp(self, piece: Piece) -> None:
        self._paint(piece, piece.color)

    def fits(self, piece: Piece) -> bool:
        """Check a piece that is not drawn yet, e.g. a fresh spawn."""
        return self._cells_free(piece.cells())

    def can_place(self, piece: Piece, row_delta: int, col_delta: int) -> bool:
        self.erase(piece)
        try:
            return self._cells_free(piece.cells_at(row_delta, col_delta))
        finally:
            self.stamp(piece)

    def can_rotate(self, piece: Piece, rotation_delta: int) -> bool:
        self.erase(piece)
        try:
            return self._cells_free(piece.rotated_cells(rotation_delta))
        finally:
            self.stamp(piece)

    def _move(self, piece: Piece, row_delta: int, col_delta: int) -> None:
        self.erase(piece)
        piece.row += row_delta
        piece.col += col_delta
        self.stamp(piece)

    def _rotate(self, piece: Piece, rotation_delta: int) -> None:
        self.erase(piece)
        piece.rotation = piece.rotated_index(rotation_delta)
        self.stamp(piece)

    def commit_move(self, piece: Piece, row_delta: int, col_delta: int) -> None:
        if not self.can_place(piece, row_delta, col_delta):
            raise IllegalCommitError(f"cannot move {piece} by ({row_delta}, {col_delta})")
        self._move(piece, row_delta, col_delta)

    def commit_rotate(self, piece: Piece, rotation_delta: int) -> None:
        if not self.can_rotate(piece, rotation_delta):
            raise IllegalCommitError(f"cannot rotate {piece} by {rotation_delta}")
        self._rotate(piece, rotation_delta)

    def try_move(self, piece: Piece, row_delta: int, col_delta: int) -> bool:
        if not self.can_place(piece, row_delta, col_delta):
            return False
        self._move(piece, row_delta, col_delta)
        return True

    def try_rotate(self, piece: Piece, rotation_delta: int) -> bool:
        if not self.can_rotate(piece, rotation_delta):
            return False
        self._rotate(piece, rotation_delta)
        return True
