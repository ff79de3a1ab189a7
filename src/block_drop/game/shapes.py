from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Sequence, Tuple


Offset = Tuple[int, int]  # (row, col), row grows downward
Shape = Tuple[Offset, ...]


class TetrominoType(IntEnum):
    I = 0
    O = 1
    J = 2
    L = 3
    S = 4
    Z = 5
    T = 6


def rotate_offsets_cw(offsets: Sequence[Offset]) -> Shape:
    """Rotate clockwise about the pivot: (row, col) -> (col, -row)."""
    return tuple((c, -r) for r, c in offsets)


def rotate_offsets_ccw(offsets: Sequence[Offset]) -> Shape:
    return tuple((-c, r) for r, c in offsets)


# Right-handed Nintendo rotation system. Each entry lists the rotation
# states in clockwise order; I, S and Z only have two states, O has one.
ROTATIONS: Dict[TetrominoType, Tuple[Shape, ...]] = {
    TetrominoType.I: (
        ((0, -2), (0, -1), (0, 0), (0, 1)),
        ((-2, 0), (-1, 0), (0, 0), (1, 0)),
    ),
    TetrominoType.O: (
        ((0, 0), (0, 1), (1, 0), (1, 1)),
    ),
    TetrominoType.J: (
        ((1, 1), (0, 1), (0, 0), (0, -1)),
        ((1, -1), (1, 0), (0, 0), (-1, 0)),
        ((-1, -1), (0, -1), (0, 0), (0, 1)),
        ((-1, 1), (-1, 0), (0, 0), (1, 0)),
    ),
    TetrominoType.L: (
        ((1, -1), (0, -1), (0, 0), (0, 1)),
        ((-1, -1), (-1, 0), (0, 0), (1, 0)),
        ((-1, 1), (0, 1), (0, 0), (0, -1)),
        ((1, 1), (1, 0), (0, 0), (-1, 0)),
    ),
    TetrominoType.S: (
        ((-1, 0), (0, 0), (0, 1), (1, 1)),
        ((0, 1), (0, 0), (1, 0), (1, -1)),
    ),
    TetrominoType.Z: (
        ((-1, 1), (0, 1), (0, 0), (1, 0)),
        ((1, 1), (1, 0), (0, 0), (0, -1)),
    ),
    TetrominoType.T: (
        ((0, 0), (-1, 0), (0, -1), (0, 1)),
        ((0, 0), (-1, 0), (1, 0), (0, 1)),
        ((0, 0), (0, -1), (1, 0), (0, 1)),
        ((0, 0), (0, -1), (1, 0), (-1, 0)),
    ),
}

NUM_SHAPES = len(TetrominoType)


@dataclass(frozen=True)
class Extent:
    row_min: int
    row_max: int
    col_min: int
    col_max: int

    @property
    def height(self) -> int:
        return self.row_max - self.row_min + 1

    @property
    def width(self) -> int:
        return self.col_max - self.col_min + 1


def rotation_count(kind: TetrominoType) -> int:
    return len(ROTATIONS[TetrominoType(kind)])


def normalize_rotation(kind: TetrominoType, rotation: int) -> int:
    # Python's modulo is already non-negative for a positive divisor
    return rotation % rotation_count(kind)


def get_offsets(kind: TetrominoType, rotation: int = 0) -> Shape:
    """Offsets of `kind` at `rotation`; the index wraps cyclically."""
    states = ROTATIONS[TetrominoType(kind)]
    return states[rotation % len(states)]


def get_extent(kind: TetrominoType, rotation: int = 0) -> Extent:
    offsets = get_offsets(kind, rotation)
    rows = [r for r, _ in offsets]
    cols = [c for _, c in offsets]
    return Extent(min(rows), max(rows), min(cols), max(cols))
