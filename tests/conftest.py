import os
import sys
import random

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so ripplesnake.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from ripplesnake.config import AppConfig

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((320, 320), pg.SRCALPHA)

@pytest.fixture
def cfg():
    # 10x10, start body (5,5) (4,5) (3,5) heading right
    return AppConfig(grid_w=10, grid_h=10, seed=7, tick_ms=100, render_cell=32)

@pytest.fixture
def rules_factory(cfg):
    from ripplesnake.core.snake_rules import Rules
    def make(food=(0, 0), **overrides):
        # food is pinned away from the start row unless a test wants otherwise
        r = Rules(cfg.with_(**overrides) if overrides else cfg, rng=random.Random(7))
        if food is not None:
            r.food = food
        return r
    return make

@pytest.fixture
def game_factory(cfg):
    from ripplesnake.core.game import SnakeGame
    def make(sink=None, food=(0, 0), **overrides):
        g = SnakeGame(cfg.with_(**overrides) if overrides else cfg, sink=sink, rng=random.Random(7))
        if food is not None:
            g.rules.food = food
        return g
    return make
