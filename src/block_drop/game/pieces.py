from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .grid import Coordinate
from .shapes import Extent, Shape, TetrominoType, get_extent, get_offsets, normalize_rotation


@dataclass
class Piece:
    """The falling piece: shape, rotation state, anchor and color tag.

    A piece never owns board cells. Its absolute cells are the anchor plus
    every offset of the current rotation state.
    """

    kind: TetrominoType
    rotation: int = 0
    row: int = 0
    col: int = 0
    color: int = 1

    def __post_init__(self) -> None:
        self.kind = TetrominoType(self.kind)
        self.rotation = normalize_rotation(self.kind, self.rotation)

    @property
    def anchor(self) -> Coordinate:
        return self.row, self.col

    def offsets(self) -> Shape:
        return get_offsets(self.kind, self.rotation)

    def rotated_index(self, delta: int) -> int:
        return normalize_rotation(self.kind, self.rotation + delta)

    def cells_at(self, row_delta: int = 0, col_delta: int = 0) -> List[Coordinate]:
        row = self.row + row_delta
        col = self.col + col_delta
        return [(row + dr, col + dc) for dr, dc in self.offsets()]

    def cells(self) -> List[Coordinate]:
        return self.cells_at(0, 0)

    def rotated_cells(self, delta: int) -> List[Coordinate]:
        offsets = get_offsets(self.kind, self.rotated_index(delta))
        return [(self.row + dr, self.col + dc) for dr, dc in offsets]

    def extent(self) -> Extent:
        return get_extent(self.kind, self.rotation)
