from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional

import pygame

from block_drop.game import BlockDropGame, Command, GameConfig, run_loop
from .renderer import Renderer


logger = logging.getLogger(__name__)


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_w: Command.ROTATE_CW,
    pygame.K_UP: Command.ROTATE_CW,
    pygame.K_z: Command.ROTATE_CCW,
    pygame.K_a: Command.SHIFT_LEFT,
    pygame.K_LEFT: Command.SHIFT_LEFT,
    pygame.K_d: Command.SHIFT_RIGHT,
    pygame.K_RIGHT: Command.SHIFT_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_s: Command.HARD_DROP,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_q: Command.QUIT,
    pygame.K_ESCAPE: Command.QUIT,
}


class KeyboardCommands:
    """Non-blocking command source fed from the pygame event queue."""

    def __init__(self) -> None:
        self.pending: List[Command] = []

    def __call__(self) -> Optional[Command]:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.pending.append(Command.QUIT)
            elif event.type == pygame.KEYDOWN:
                command = KEY_TO_COMMAND.get(event.key)
                if command is not None:
                    self.pending.append(command)
        if self.pending:
            return self.pending.pop(0)
        return None


def wait_for_key() -> None:
    while True:
        event = pygame.event.wait()
        if event.type in (pygame.KEYDOWN, pygame.QUIT):
            return


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Block Drop with the keyboard")
    p.add_argument("--height", type=int, default=20)
    p.add_argument("--width", type=int, default=10)
    p.add_argument("--tps", type=int, default=100, help="ticks per second")
    p.add_argument("--gravity", type=float, default=0.5, help="seconds per gravity step")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--log-level", default="WARNING")
    return p


def run(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[block_drop] %(asctime)s - %(message)s")

    config = GameConfig(
        width=args.width,
        height=args.height,
        ticks_per_second=args.tps,
        seconds_per_gravity_step=args.gravity,
        random_seed=args.seed,
    )
    game = BlockDropGame(config)

    pygame.init()
    try:
        clock = pygame.time.Clock()
        renderer = Renderer(cell_size=args.cell_size)
        screen = pygame.display.set_mode(renderer.window_size(config.height, config.width))
        pygame.display.set_caption("Block Drop")

        def draw(g: BlockDropGame) -> None:
            renderer.draw(screen, g.snapshot())

        draw(game)
        result = run_loop(
            game,
            KeyboardCommands(),
            sleep=lambda _interval: clock.tick(config.ticks_per_second),
            on_frame=draw,
        )
        if result.quit:
            return
        draw(game)
        logger.info("final stats: %s", game.get_stats())
        wait_for_key()
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
