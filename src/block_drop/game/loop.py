from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .core import BlockDropGame, Command, GameStatus


logger = logging.getLogger(__name__)


@dataclass
class LoopResult:
    status: GameStatus
    ticks: int
    quit: bool


def run_loop(
    game: BlockDropGame,
    poll_command: Callable[[], Optional[Command]],
    sleep: Callable[[float], None] = time.sleep,
    on_frame: Optional[Callable[[BlockDropGame], None]] = None,
    max_ticks: Optional[int] = None,
) -> LoopResult:
    """Drive `game` at its configured tick rate until game over or quit.

    `poll_command` must not block; it returns the pending command or None.
    A polled command is applied before the next tick looks at gravity.
    """
    interval = 1.0 / game.config.ticks_per_second
    ticks = 0
    while not game.game_over:
        if max_ticks is not None and ticks >= max_ticks:
            break
        sleep(interval)
        game.tick()
        ticks += 1
        command = poll_command()
        if command == Command.QUIT:
            logger.info("quit after %d ticks, score %d", ticks, game.score)
            return LoopResult(game.status, ticks, True)
        if command is not None:
            game.apply(command)
        if on_frame is not None:
            on_frame(game)
    return LoopResult(game.status, ticks, False)
