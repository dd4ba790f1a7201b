"""
Tests for tilesnake.controller - key handling and tick driving.
Runs on SDL's dummy video driver (see conftest.py).
"""

import pygame
import pytest

from tilesnake.controller import GameController
from tilesnake.model import Direction, GameStatus


@pytest.fixture
def controller(make_model):
    ctrl = GameController(make_model(), tile=8, tick_delay_ms=250)
    yield ctrl
    pygame.quit()


class TestKeyHandling:
    """Tests for translating keys into model commands."""

    @pytest.mark.parametrize("key, direction", [
        (pygame.K_UP, Direction.UP),
        (pygame.K_w, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_s, Direction.DOWN),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_a, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
        (pygame.K_d, Direction.RIGHT),
    ])
    def test_direction_keys(self, controller, key, direction):
        """Arrow keys and WASD queue the matching direction."""
        controller.handle_key(key)
        assert list(controller.model.queue) == [direction]

    def test_arrow_and_letter_collapse(self, controller):
        """UP then W queue a single UP."""
        controller.handle_key(pygame.K_UP)
        controller.handle_key(pygame.K_w)
        assert list(controller.model.queue) == [Direction.UP]

    def test_reset_key(self, controller):
        """R restarts the game."""
        controller.model.load_state([(2, 2), (1, 2)], food=(8, 8), direction=Direction.RIGHT, score=2)
        controller.handle_key(pygame.K_r)
        assert controller.model.status is GameStatus.IDLE
        assert list(controller.model.snake) == [(5, 5)]
        assert controller.model.score == 0

    @pytest.mark.parametrize("key", [pygame.K_q, pygame.K_ESCAPE])
    def test_quit_keys(self, controller, key):
        """Q and Escape stop the loop."""
        controller.running = True
        controller.handle_key(key)
        assert controller.running is False

    def test_unmapped_key_ignored(self, controller):
        """Other keys change nothing."""
        before = controller.model.snapshot()
        controller.handle_key(pygame.K_x)
        assert controller.model.snapshot() == before
        assert len(controller.model.queue) == 0


class TestLoop:
    """Tests for tick driving and the main loop."""

    def test_step_advances_on_schedule(self, controller):
        """The model moves once per elapsed tick interval."""
        controller.model.load_state([(5, 5)], food=(0, 0))
        controller.handle_key(pygame.K_RIGHT)
        assert controller.step(0.125) == 0
        assert controller.model.head == (5, 5)
        assert controller.step(0.125) == 1
        assert controller.model.head == (6, 5)

    def test_render_frame(self, controller):
        """A frame renders to the window without error."""
        controller.view.render(controller.model.snapshot())

    def test_run_stops_on_window_close(self, controller):
        """A QUIT event ends run()."""
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        controller.run()
        assert controller.running is False
        assert not pygame.display.get_init()

    def test_run_shuts_display_on_error(self, controller, monkeypatch):
        """pygame is shut down even when a tick raises."""
        def explode(dt):
            raise RuntimeError("tick failed")

        monkeypatch.setattr(controller, "step", explode)
        with pytest.raises(RuntimeError):
            controller.run()
        assert not pygame.display.get_init()
