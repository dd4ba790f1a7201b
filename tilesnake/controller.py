"""
controller.py — pygame front end for the tick engine.

Reads keyboard events and turns them into GameModel.enqueue()/reset() calls,
asks the TickScheduler how many ticks the last frame covered, runs that many
advance() steps and hands a fresh snapshot to the GameView.

Keys:
  - Arrows / WASD  queue a direction
  - R              restart
  - Q / Escape     quit
"""

import logging

import pygame

from .config import FPS, TILE, TICK_DELAY_MS
from .model import Direction, GameModel
from .scheduler import TickScheduler
from .view import GameView, window_size

logger = logging.getLogger(__name__)

DIRECTION_KEYS = {
    pygame.K_UP:    Direction.UP,
    pygame.K_w:     Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_s:     Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_a:     Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d:     Direction.RIGHT,
}
RESET_KEYS = (pygame.K_r,)
QUIT_KEYS = (pygame.K_q, pygame.K_ESCAPE)


class GameController:
    """
    Opens the window, maps keys onto the model and paces advance() calls.
    The model and the view only meet here, through snapshot().
    """

    def __init__(
        self,
        model: GameModel | None = None,
        tile: int = TILE,
        tick_delay_ms: int = TICK_DELAY_MS,
    ):
        self.model = model if model is not None else GameModel()
        self.scheduler = TickScheduler(tick_delay_ms)
        pygame.init()
        self.screen = pygame.display.set_mode(
            window_size(self.model.width, self.model.height, tile)
        )
        pygame.display.set_caption("Snake")
        self.clock = pygame.time.Clock()
        self.view = GameView(self.screen, tile)
        self.running = False

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        logger.info(
            "Starting %dx%d game, one tick every %.3f s",
            self.model.width, self.model.height, self.scheduler.interval,
        )
        self.running = True
        try:
            while self.running:
                dt = self.clock.tick(FPS) / 1000.0
                self._handle_events()
                if not self.running:
                    break
                self.step(dt)
                self.view.render(self.model.snapshot())
        finally:
            pygame.quit()

    def step(self, dt: float) -> int:
        """Advance the model by however many ticks fit into `dt` seconds."""
        ticks = self.scheduler.feed(dt)
        for _ in range(ticks):
            self.model.advance()
        return ticks

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

    def handle_key(self, key: int) -> None:
        if key in QUIT_KEYS:
            self._quit()
        elif key in RESET_KEYS:
            self.model.reset()
            self.scheduler.reset()
        elif key in DIRECTION_KEYS:
            self.model.enqueue(DIRECTION_KEYS[key])

    # ── Utilities ─────────────────────────────────────────────────
    def _quit(self) -> None:
        logger.info("Quit requested at score %d", self.model.score)
        self.running = False
