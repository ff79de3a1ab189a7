"""NES-style piece randomizer."""

from __future__ import annotations

import random
from typing import Optional

from .shapes import NUM_SHAPES, TetrominoType


class ShapeRandomizer:
    """Draws piece types, rerolling once to make repeats less likely.

    The first draw covers one extra sentinel value. When it lands on the
    sentinel or repeats the previous type, a second uniform draw over the
    real types is taken as final.
    """

    def __init__(self, rng: random.Random, avoid_repeat: bool = True, n_shapes: int = NUM_SHAPES) -> None:
        self.rng = rng
        self.avoid_repeat = avoid_repeat
        self.n_shapes = n_shapes
        self.prev_index: Optional[int] = None

    def reset(self) -> None:
        self.prev_index = None

    def next_index(self) -> int:
        if not self.avoid_repeat:
            cand = self.rng.randrange(self.n_shapes)
        else:
            cand = self.rng.randint(0, self.n_shapes)
            if cand == self.n_shapes or cand == self.prev_index:
                cand = self.rng.randrange(self.n_shapes)
        self.prev_index = cand
        return cand

    def next_type(self) -> TetrominoType:
        return TetrominoType(self.next_index())
