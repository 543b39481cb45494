# ripplesnake/core/food.py  (pure, no pygame)
from __future__ import annotations
import random
from typing import Collection, Optional
from .interfaces import Cell

def place_food(
    grid_w: int,
    grid_h: int,
    avoid: Collection[Cell],
    rng: random.Random,
    max_attempts: int = 64,
) -> Optional[Cell]:
    """Uniform random free cell, or None if the snake fills the board.

    Rejection-samples first, then falls back to a full scan of free cells
    once ``max_attempts`` draws have all collided.
    """
    occ = avoid if isinstance(avoid, (set, frozenset)) else set(avoid)
    if len(occ) >= grid_w * grid_h:
        return None

    for _ in range(max_attempts):
        cell = (rng.randrange(grid_w), rng.randrange(grid_h))
        if cell not in occ:
            return cell

    free = [(x, y) for y in range(grid_h) for x in range(grid_w) if (x, y) not in occ]
    if not free:
        return None
    return rng.choice(free)
