# ripplesnake/core/game.py
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np
from ripplesnake.config import AppConfig
from .interfaces import Heading, Phase, PositionSink, Snapshot
from .interpolation import Interpolator
from .publisher import EatTrigger, HeadPublisher
from .scheduler import Scheduler, TimerHandle
from .snake_rules import Rules

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Frame:
    """Everything a render consumer needs for one display frame."""
    snapshot: Snapshot
    segments: np.ndarray              # (n, 2) interpolated, grid units
    head_px: Optional[Tuple[float, float]]
    eat: bool                         # one-shot, true on the first frame after eating

class SnakeGame:
    """Composes the rules, timers and render-side layers into one session.

    Two time bases share one loop: the scheduler fires ticks (and the
    post-death reset) from :meth:`frame`, then the frame samples the
    interpolation. Ticks hand the render side a Snapshot, nothing else.
    """
    def __init__(self, cfg: AppConfig, sink: Optional[PositionSink] = None,
                 rng: Optional[random.Random] = None):
        self.cfg = cfg
        self.rules = Rules(cfg, rng=rng)
        self.interp = Interpolator(cfg.tick_ms, snap_segments=cfg.edge_policy == "wrap")
        self.publisher = HeadPublisher(sink, cfg.render_cell)
        self.eat = EatTrigger()
        self.scheduler = Scheduler(max_catch_up=cfg.max_catch_up)
        self._tick_timer: Optional[TimerHandle] = None
        self._reset_timer: Optional[TimerHandle] = None
        self._snap = self.rules.snapshot()
        self._closers = []
        self._now = 0.0
        self.opened = False

    # ---- registration lifecycle ----
    def open(self, now_ms: float) -> "SnakeGame":
        if self.opened:
            return self
        self._now = float(now_ms)
        self._snap = self.rules.snapshot()
        self.interp.reset_to(self._snap, now_ms)
        self._tick_timer = self.scheduler.every(self.cfg.tick_ms, self.on_tick, now_ms, name="tick")
        self._closers.append(self.rules.lifecycle.add_listener(self._on_phase))
        self.opened = True
        logger.debug("session opened: %dx%d grid, tick %dms",
                     self.cfg.grid_w, self.cfg.grid_h, self.cfg.tick_ms)
        return self

    def add_closer(self, fn) -> None:
        """Register a teardown callback (e.g. detaching a key listener)."""
        self._closers.append(fn)

    def close(self) -> None:
        if not self.opened and not self._closers:
            return
        self.opened = False
        self._tick_timer = None
        self._reset_timer = None
        self.scheduler.cancel_all()
        closers, self._closers = self._closers, []
        errors = []
        for fn in reversed(closers):
            try:
                fn()
            except Exception as e:
                logger.exception("closer %r failed", fn)
                errors.append(e)
        logger.debug("session closed")
        if errors:
            raise errors[0]

    def __enter__(self) -> "SnakeGame":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---- external commands ----
    def request_direction(self, heading: Heading) -> None:
        self.rules.request_direction(heading)

    def toggle_pause(self) -> None:
        self.rules.toggle_pause()

    def start(self) -> None:
        self.rules.start()

    @property
    def phase(self) -> Phase:
        return self.rules.phase

    @property
    def snapshot(self) -> Snapshot:
        return self._snap

    # ---- timer callbacks ----
    def on_tick(self, now_ms: float) -> None:
        was_running = self.rules.phase is Phase.RUNNING
        snap = self.rules.tick()
        if self.rules.food_stale:
            self.rules.relocate_food()
            snap = self.rules.snapshot()
        if snap.ate:
            self.eat.fire()
        if was_running:
            self.interp.on_tick(snap, now_ms)
        self._snap = snap

    def _on_phase(self, old: Phase, new: Phase) -> None:
        if new is Phase.DYING:
            # delay runs from the frame that ran the fatal tick, not its deadline
            self._arm_reset(self._now)

    def _arm_reset(self, now_ms: float) -> None:
        if self._reset_timer is not None:
            self._reset_timer.cancel()
        self._reset_timer = self.scheduler.after(
            self.cfg.reset_delay_ms, self._on_reset_due, now_ms, name="reset")

    def _on_reset_due(self, now_ms: float) -> None:
        self._reset_timer = None
        snap = self.rules.reset()
        self.interp.reset_to(snap, self._now)
        self._snap = snap

    # ---- display frame ----
    def frame(self, now_ms: float) -> Frame:
        self._now = float(now_ms)
        self.scheduler.run_due(now_ms)
        self._snap = self.rules.snapshot()
        if self.rules.phase is not Phase.RUNNING:
            # frozen while paused/dying: show the last committed cells
            segments = self.interp.sample(self.interp.last_tick_ms + self.interp.tick_ms)
        else:
            segments = self.interp.sample(now_ms)
        head_px = self.publisher.publish(segments)
        return Frame(snapshot=self._snap, segments=segments, head_px=head_px,
                     eat=self.eat.consume())
