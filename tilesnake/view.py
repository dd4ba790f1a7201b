"""
view.py — View layer.

Draws one frame from a GameSnapshot: the board as square tiles, the head in
its own colour, and a HUD strip under the board with the status line.
Knows nothing about input or game rules.

Public API:
    GameView(screen, tile)   — bind to a pygame surface
    view.draw(snapshot)      — paint the frame onto the surface
    view.render(snapshot)    — draw, then flip the display
"""

import pygame

from .config import (
    TILE, HUD_H,
    EMPTY_COL, FOOD_COL, HEAD_COL, BODY_COL,
    HUD_BG, HUD_TEXT, WIN_COL, CRASH_COL,
)
from .model import GameSnapshot, GameStatus


def window_size(grid_w: int, grid_h: int, tile: int = TILE) -> tuple[int, int]:
    """Pixel size of a window that fits the board plus the HUD strip."""
    return grid_w * tile, grid_h * tile + HUD_H


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a GameSnapshot."""

    def __init__(self, screen: pygame.Surface, tile: int = TILE):
        if tile < 1:
            raise ValueError(f"tile size must be >= 1 px, got {tile}")
        self.screen = screen
        self.tile = tile
        self._init_fonts()

    # ── Main entry ───────────────────────────────────────────────
    def render(self, snap: GameSnapshot) -> None:
        self.draw(snap)
        pygame.display.flip()

    def draw(self, snap: GameSnapshot) -> None:
        board_h = snap.height * self.tile
        self.screen.fill(EMPTY_COL, (0, 0, snap.width * self.tile, board_h))

        if snap.food is not None:
            self._draw_tile(snap.food, FOOD_COL)
        for i, pos in enumerate(snap.snake):
            self._draw_tile(pos, HEAD_COL if i == 0 else BODY_COL)

        self._draw_hud(snap, board_h)

    def tile_rect(self, pos: tuple[int, int]) -> pygame.Rect:
        x, y = pos
        return pygame.Rect(x * self.tile, y * self.tile, self.tile, self.tile)

    # ── Tiles ────────────────────────────────────────────────────
    def _draw_tile(self, pos: tuple[int, int], color: tuple) -> None:
        pygame.draw.rect(self.screen, color, self.tile_rect(pos))

    # ── HUD ──────────────────────────────────────────────────────
    def _draw_hud(self, snap: GameSnapshot, top: int) -> None:
        width = self.screen.get_width()
        pygame.draw.rect(self.screen, HUD_BG, (0, top, width, HUD_H))

        if snap.status is GameStatus.WON:
            color = WIN_COL
        elif snap.status is GameStatus.COLLIDED:
            color = CRASH_COL
        else:
            color = HUD_TEXT

        text = self.font.render(snap.status_text(), True, color)
        self.screen.blit(text, text.get_rect(midleft=(8, top + HUD_H // 2)))

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self.font = pygame.font.SysFont("courier", 15, bold=True)
        except Exception:
            self.font = pygame.font.Font(None, 18)
