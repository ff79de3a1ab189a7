"""Game module for Block Drop.

Exports the core game engine and supporting classes:
- GameGrid: Grid representation with invisible spawn rows
- Piece: Falling tetromino with anchor, rotation and color
- TetrominoType: Enum of available piece types
- PlacementEngine: Collision checks and piece commits
- LineClearer: Full-row removal and compaction
- ScoringRules: Simple scoring configuration and helpers
- BlockDropGame: Tick/command state machine
- run_loop: Fixed-rate driver for a game
"""

from .errors import BlockDropError, ConfigurationError, IllegalCommitError
from .grid import GameGrid
from .shapes import TetrominoType, Extent, get_offsets, get_extent, rotation_count
from .pieces import Piece
from .placement import PlacementEngine
from .lines import LineClearer, LineClearResult
from .rules import ScoringRules
from .randomizer import ShapeRandomizer
from .core import BlockDropGame, Command, GameConfig, GameSnapshot, GameStatus, spawn_window
from .loop import LoopResult, run_loop

__all__ = [
    "BlockDropError",
    "ConfigurationError",
    "IllegalCommitError",
    "GameGrid",
    "TetrominoType",
    "Extent",
    "get_offsets",
    "get_extent",
    "rotation_count",
    "Piece",
    "PlacementEngine",
    "LineClearer",
    "LineClearResult",
    "ScoringRules",
    "ShapeRandomizer",
    "BlockDropGame",
    "Command",
    "GameConfig",
    "GameSnapshot",
    "GameStatus",
    "spawn_window",
    "LoopResult",
    "run_loop",
]
