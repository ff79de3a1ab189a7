from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from .grid import GameGrid
from .pieces import Piece


logger = logging.getLogger(__name__)


@dataclass
class LineClearResult:
    rows: List[int] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.rows)


class LineClearer:
    """Removes full rows after a landing and compacts the grid in place."""

    def __init__(self, grid: GameGrid) -> None:
        self.grid = grid

    def full_rows_under(self, piece: Piece) -> List[int]:
        # Only rows touched by the landed piece can have become full.
        ext = piece.extent()
        top = max(piece.row + ext.row_min, 0)
        bottom = min(piece.row + ext.row_max, self.grid.board_height - 1)
        return [row for row in range(bottom, top - 1, -1) if self.grid.is_row_full(row)]

    def clear_after_landing(self, piece: Piece) -> LineClearResult:
        rows = self.full_rows_under(piece)
        if not rows:
            return LineClearResult()
        self.compact(rows)
        logger.debug("cleared rows %s", sorted(rows))
        return LineClearResult(rows=sorted(rows))

    def compact(self, rows: List[int]) -> None:
        """Drop every row above the removed ones down by gravity.

        Walking upward from the lowest removed row, each row takes the
        nearest row above it that is neither removed nor already used as
        a source. Rows with no source left become empty.
        """
        removed = set(rows)
        consumed = [False] * self.grid.board_height
        for dst in range(max(removed), 0, -1):
            src = dst - 1
            while src >= 0 and (src in removed or consumed[src]):
                src -= 1
            if src >= 0:
                self.grid.copy_row(src, dst)
                consumed[src] = True
            else:
                self.grid.clear_row(dst)
        self.grid.clear_row(0)
