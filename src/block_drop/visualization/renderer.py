from __future__ import annotations

from typing import Dict, Tuple

import pygame

from block_drop.game import GameSnapshot


def _color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (20, 20, 26),
        1: (0, 240, 240),
        2: (240, 240, 0),
        3: (160, 0, 240),
        4: (0, 240, 0),
        5: (240, 0, 0),
        6: (0, 0, 240),
        7: (240, 160, 0),
    }
    return palette.get(abs(v), (200, 200, 200))


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, status_height: int = 30) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.status_height = status_height
        self._fonts: Dict[int, pygame.font.Font] = {}

    def window_size(self, height: int, width: int) -> Tuple[int, int]:
        return (
            width * self.cell_size + self.margin * 2,
            height * self.cell_size + self.margin * 2 + self.status_height,
        )

    def _grid_surface(self, snapshot: GameSnapshot) -> pygame.Surface:
        h, w = snapshot.height, snapshot.width
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                color = _color_for_value(int(snapshot.grid[y, x]))
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color, rect)
        return surf

    def _text(self, screen: pygame.Surface, text: str, center: Tuple[int, int], size: int = 28) -> None:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont(None, size)
        label = self._fonts[size].render(text, True, (255, 255, 255))
        screen.blit(label, label.get_rect(center=center))

    def draw(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(snapshot), (self.margin, self.margin))
        board_bottom = self.margin + snapshot.height * self.cell_size
        self._text(screen, f"score: {snapshot.score}", (screen.get_width() // 2, board_bottom + self.status_height // 2 + 4))
        if snapshot.game_over:
            self._text(screen, "GAME OVER", (screen.get_width() // 2, screen.get_height() // 2), size=48)
        pygame.display.flip()
