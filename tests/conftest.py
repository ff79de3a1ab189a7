from __future__ import annotations

import random
from typing import Iterable, List

import pytest

from block_drop.game import BlockDropGame, GameConfig, GameGrid, PlacementEngine


class ScriptedRandom(random.Random):
    """random.Random that hands out a fixed list of integers."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(0)
        self.values: List[int] = list(values)

    def randint(self, a: int, b: int) -> int:
        value = self.values.pop(0)
        assert a <= value <= b
        return value

    def randrange(self, start: int, stop=None, step: int = 1) -> int:
        if stop is None:
            start, stop = 0, start
        value = self.values.pop(0)
        assert start <= value < stop
        return value


def clear_board(game: BlockDropGame) -> None:
    """Remove every cell, including the live piece, so a test can stage a board."""
    game.grid.reset()
    game.current_piece = None


def fill_row(grid: GameGrid, row: int, cols: Iterable[int], value: int = 1) -> None:
    for col in cols:
        grid.grid[row, col] = value


@pytest.fixture
def grid() -> GameGrid:
    return GameGrid(width=10, height=20, invisible_rows=2)


@pytest.fixture
def engine(grid: GameGrid) -> PlacementEngine:
    return PlacementEngine(grid)


@pytest.fixture
def make_game():
    def _make(**overrides) -> BlockDropGame:
        overrides.setdefault("random_seed", 1234)
        return BlockDropGame(GameConfig(**overrides))

    return _make


@pytest.fixture
def game(make_game) -> BlockDropGame:
    return make_game()
