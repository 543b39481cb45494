# ripplesnake/core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
import logging
import random
from typing import List, Optional
from ripplesnake.config import AppConfig
from .food import place_food
from .input_buffer import HeadingBuffer
from .interfaces import Cell, Heading, Phase, Snapshot
from .lifecycle import Lifecycle

logger = logging.getLogger(__name__)

def initial_layout(cfg: AppConfig) -> List[Cell]:
    """Start body centred on the grid, trailing away from the start heading."""
    heading = Heading.from_name(cfg.start_heading)
    dx, dy = heading.offset if heading is not Heading.NONE else Heading.RIGHT.offset
    cx, cy = cfg.grid_w // 2, cfg.grid_h // 2
    return [(cx - i * dx, cy - i * dy) for i in range(cfg.start_len)]

class Rules:
    """Canonical grid state. One call to :meth:`tick` is one discrete move."""
    def __init__(
        self,
        cfg: AppConfig,
        rng: Optional[random.Random] = None,
        lifecycle: Optional[Lifecycle] = None,
        heading: Optional[HeadingBuffer] = None,
    ):
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.initial_heading = Heading.from_name(cfg.start_heading)
        self.lifecycle = lifecycle if lifecycle is not None else Lifecycle(
            post_reset=Phase(cfg.post_reset_phase),
            start=Phase.PAUSED if cfg.start_paused else Phase.RUNNING,
        )
        self.heading = heading if heading is not None else HeadingBuffer(self.initial_heading)
        self._reset_state()

    def _reset_state(self):
        self.snake: List[Cell] = initial_layout(self.cfg)
        self.heading.clear(self.initial_heading)
        self.score = 0
        self.tick_count = 0
        self.ate = False
        self.food: Optional[Cell] = None
        self.food_stale = False
        self.relocate_food()

    # ---- external commands (fire-and-forget) ----
    @property
    def phase(self) -> Phase:
        return self.lifecycle.phase

    def request_direction(self, heading: Heading) -> None:
        if not self.lifecycle.accepts_input:
            return
        self.heading.request(heading)

    def toggle_pause(self) -> None:
        self.lifecycle.toggle_pause()

    def start(self) -> None:
        self.lifecycle.start()

    # ---- tick ----
    def tick(self) -> Snapshot:
        self.ate = False
        if not self.lifecycle.ticks_enabled:
            return self.snapshot()

        heading = self.heading.commit()
        if heading is Heading.NONE:
            return self.snapshot()

        hx, hy = self.snake[0]
        dx, dy = heading.offset
        new_head = self._edge(hx + dx, hy + dy)
        self.tick_count += 1

        # collisions: canonical segments stay at the pre-death layout
        if new_head is None:
            self._die("wall")
            return self.snapshot()
        if new_head in self.snake:
            self._die("self")
            return self.snapshot()

        self.snake.insert(0, new_head)
        if new_head == self.food:
            self.score += 1
            self.ate = True
            # relocation is a follow-up step, see relocate_food()
            self.food_stale = True
            logger.debug("ate at %s, length %d", new_head, len(self.snake))
        else:
            self.snake.pop()
        return self.snapshot()

    def _edge(self, x: int, y: int) -> Optional[Cell]:
        w, h = self.cfg.grid_w, self.cfg.grid_h
        if self.cfg.edge_policy == "wrap":
            return (x % w, y % h)
        if not (0 <= x < w and 0 <= y < h):
            return None
        return (x, y)

    def _die(self, reason: str) -> None:
        logger.info("snake died (%s) at length %d, score %d", reason, len(self.snake), self.score)
        self.lifecycle.die(reason)

    # ---- follow-ups ----
    def relocate_food(self) -> None:
        self.food = place_food(
            self.cfg.grid_w, self.cfg.grid_h, set(self.snake), self.rng,
            max_attempts=self.cfg.food_max_attempts,
        )
        self.food_stale = False
        if self.food is None:
            logger.info("board full, no free cell for food")

    def reset(self) -> Snapshot:
        """Dying -> Resetting -> post-reset phase. No-op in any other phase."""
        if not self.lifecycle.begin_reset():
            return self.snapshot()
        self._reset_state()
        self.lifecycle.finish_reset()
        logger.info("reset to initial layout, now %s", self.phase.value)
        return self.snapshot()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=None if self.food_stale else self.food,
            heading=self.heading.committed,
            phase=self.lifecycle.phase,
            score=self.score,
            tick_count=self.tick_count,
            reason=self.lifecycle.reason,
            ate=self.ate,
            grid_w=self.cfg.grid_w,
            grid_h=self.cfg.grid_h,
        )
