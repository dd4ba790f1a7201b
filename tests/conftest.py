"""
Shared fixtures. pygame is pointed at SDL's dummy drivers so view and
controller tests run without a display or sound card.
"""

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from tilesnake.model import GameModel


@pytest.fixture
def make_model():
    """Factory for models with a seeded rng so food placement repeats."""
    def _make(width=10, height=10, max_score=30, growth_rate=5, auto_reset=True, seed=1234):
        return GameModel(
            width=width,
            height=height,
            max_score=max_score,
            growth_rate=growth_rate,
            auto_reset=auto_reset,
            rng=random.Random(seed),
        )
    return _make
