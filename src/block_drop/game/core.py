from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

import numpy as np

from .errors import ConfigurationError
from .grid import GameGrid
from .lines import LineClearer
from .pieces import Piece
from .placement import PlacementEngine
from .randomizer import ShapeRandomizer
from .rules import ScoringRules
from .shapes import TetrominoType, get_extent, rotation_count


logger = logging.getLogger(__name__)


class Command(IntEnum):
    ROTATE_CW = 0
    ROTATE_CCW = 1
    SHIFT_LEFT = 2
    SHIFT_RIGHT = 3
    SOFT_DROP = 4
    HARD_DROP = 5
    QUIT = 6


class GameStatus(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    invisible_rows: int = 2
    ticks_per_second: int = 100
    seconds_per_gravity_step: float = 0.5
    hard_drop_spawns_immediately: bool = True
    avoid_repeat: bool = True
    random_seed: Optional[int] = None
    max_color: int = 7

    @property
    def gravity_ticks(self) -> int:
        return int(math.floor(self.ticks_per_second * self.seconds_per_gravity_step))

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"board must be positive, got {self.height}x{self.width}")
        if self.invisible_rows < 0:
            raise ConfigurationError(f"invisible_rows must be >= 0, got {self.invisible_rows}")
        if self.ticks_per_second <= 0:
            raise ConfigurationError(f"ticks_per_second must be positive, got {self.ticks_per_second}")
        if self.gravity_ticks <= 0:
            raise ConfigurationError(
                f"{self.ticks_per_second} ticks/s * {self.seconds_per_gravity_step} s "
                "gives no whole tick per gravity step"
            )
        if not 1 <= self.max_color <= 7:
            raise ConfigurationError(f"max_color must be in 1..7, got {self.max_color}")


def spawn_window(config: GameConfig, kind: TetrominoType, rotation: int) -> Tuple[int, int, int]:
    """Return (anchor_row, min_col, max_col) for spawning `kind` at `rotation`.

    The anchor row puts the shape's topmost cell on the first visible row.
    """
    ext = get_extent(kind, rotation)
    col_lo = -ext.col_min
    col_hi = config.width - ext.col_max - 1
    row = config.invisible_rows - ext.row_min
    if col_lo > col_hi or row + ext.row_max >= config.height + config.invisible_rows:
        raise ConfigurationError(
            f"{config.height}x{config.width} board is too small for {kind.name} in rotation {rotation}"
        )
    return row, col_lo, col_hi


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view handed to the presentation layer."""

    grid: np.ndarray
    score: int
    game_over: bool
    lines_cleared_total: int

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    @property
    def width(self) -> int:
        return int(self.grid.shape[1])


class BlockDropGame:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.config.validate()
        for kind in TetrominoType:
            for rotation in range(rotation_count(kind)):
                spawn_window(self.config, kind, rotation)
        self.rules = rules or ScoringRules()
        self.rng = rng or random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height, self.config.invisible_rows)
        self.placement = PlacementEngine(self.grid)
        self.line_clearer = LineClearer(self.grid)
        self.randomizer = ShapeRandomizer(self.rng, avoid_repeat=self.config.avoid_repeat)
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_spawned = 0
        self.ticks = 0
        self.tick_count = 0
        self.status = GameStatus.RUNNING
        self.current_piece: Optional[Piece] = None
        self.reset()

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def reset(self) -> None:
        self.grid.reset()
        self.randomizer.reset()
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_spawned = 0
        self.ticks = 0
        self.tick_count = 0
        self.status = GameStatus.RUNNING
        self.current_piece = None
        self.spawn_piece()

    def _random_piece(self) -> Piece:
        kind = self.randomizer.next_type()
        rotation = self.rng.randrange(rotation_count(kind))
        color = self.rng.randint(1, self.config.max_color)
        row, col_lo, col_hi = spawn_window(self.config, kind, rotation)
        return Piece(kind=kind, rotation=rotation, row=row, col=self.rng.randint(col_lo, col_hi), color=color)

    def spawn_piece(self, piece: Optional[Piece] = None) -> GameStatus:
        """Put a new live piece on the board.

        A random piece is drawn unless one is given. If its cells overlap
        settled geometry the board is left untouched and the game ends.
        """
        if self.game_over:
            return self.status
        if piece is None:
            piece = self._random_piece()
        self.current_piece = piece
        if not self.placement.fits(piece):
            self.status = GameStatus.GAME_OVER
            logger.info("game over: spawn of %s blocked, score %d", piece.kind.name, self.score)
            return self.status
        self.placement.stamp(piece)
        self.pieces_spawned += 1
        logger.debug("spawned %s rot=%d at %s", piece.kind.name, piece.rotation, piece.anchor)
        return self.status

    def _land(self) -> GameStatus:
        assert self.current_piece is not None
        logger.debug("landed %s at %s", self.current_piece.kind.name, self.current_piece.anchor)
        result = self.line_clearer.clear_after_landing(self.current_piece)
        if result.count:
            self.score += self.rules.score_for_lines(result.count)
            self.lines_cleared_total += result.count
            logger.info("cleared %d line(s), score %d", result.count, self.score)
        return self.spawn_piece()

    def step_gravity(self) -> GameStatus:
        """Move the piece one row down, landing it when blocked."""
        self.tick_count = 0
        if self.game_over or self.current_piece is None:
            return self.status
        if self.placement.try_move(self.current_piece, 1, 0):
            return self.status
        return self._land()

    def tick(self) -> GameStatus:
        if self.game_over:
            return self.status
        self.ticks += 1
        self.tick_count += 1
        if self.tick_count >= self.config.gravity_ticks:
            return self.step_gravity()
        return self.status

    def rotate(self, ccw: bool = False) -> bool:
        if self.game_over or self.current_piece is None:
            return False
        return self.placement.try_rotate(self.current_piece, -1 if ccw else 1)

    def shift(self, col_delta: int) -> bool:
        if self.game_over or self.current_piece is None:
            return False
        return self.placement.try_move(self.current_piece, 0, col_delta)

    def soft_drop(self) -> bool:
        if self.game_over or self.current_piece is None:
            return False
        return self.placement.try_move(self.current_piece, 1, 0)

    def hard_drop(self) -> bool:
        if self.game_over or self.current_piece is None:
            return False
        while self.placement.try_move(self.current_piece, 1, 0):
            pass
        self.tick_count = 0
        if self.config.hard_drop_spawns_immediately:
            self._land()
        return True

    def apply(self, command: Command) -> bool:
        """Apply one player command; False means it was rejected or ignored."""
        if self.game_over:
            return False
        if command == Command.ROTATE_CW:
            return self.rotate(ccw=False)
        if command == Command.ROTATE_CCW:
            return self.rotate(ccw=True)
        if command == Command.SHIFT_LEFT:
            return self.shift(-1)
        if command == Command.SHIFT_RIGHT:
            return self.shift(1)
        if command == Command.SOFT_DROP:
            return self.soft_drop()
        if command == Command.HARD_DROP:
            return self.hard_drop()
        # QUIT is handled by whoever drives the loop
        return False

    def get_state(self) -> np.ndarray:
        return self.grid.visible_state()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            grid=self.grid.visible_state(),
            score=self.score,
            game_over=self.game_over,
            lines_cleared_total=self.lines_cleared_total,
        )

    def get_stats(self) -> dict:
        return {
            "score": self.score,
            "lines_cleared": self.lines_cleared_total,
            "pieces_spawned": self.pieces_spawned,
            "ticks": self.ticks,
            "game_over": self.game_over,
        }
