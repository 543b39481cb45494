# ripplesnake/core/interpolation.py
from __future__ import annotations
from typing import Optional
import numpy as np
from .interfaces import Snapshot

def _as_array(snake) -> np.ndarray:
    return np.asarray(snake, dtype=np.float32).reshape(-1, 2)

class Interpolator:
    """Blends the two most recent tick snapshots for smooth drawing.

    Render-side only: it reads snapshots and never touches canonical state.
    Arrays are (n_segments, 2) in grid units, head first.
    """
    def __init__(self, tick_ms: float, snap_segments: bool = False):
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")
        self.tick_ms = float(tick_ms)
        # wrap mode: segments crossing the edge jump a whole board width
        self.snap_segments = snap_segments
        self.previous: Optional[np.ndarray] = None
        self.current: Optional[np.ndarray] = None
        self.last_tick_ms = 0.0

    def reset_to(self, snap: Snapshot, now_ms: float) -> None:
        self.current = _as_array(snap.snake)
        self.previous = self.current.copy()
        self.last_tick_ms = float(now_ms)

    def on_tick(self, snap: Snapshot, now_ms: float) -> None:
        if self.current is None:
            self.reset_to(snap, now_ms)
            return
        self.previous = self.current
        self.current = _as_array(snap.snake)
        self.last_tick_ms = float(now_ms)

    def alpha(self, now_ms: float) -> float:
        t = (float(now_ms) - self.last_tick_ms) / self.tick_ms
        return float(min(1.0, max(0.0, t)))

    def sample(self, now_ms: float) -> np.ndarray:
        if self.current is None or self.previous is None:
            return np.zeros((0, 2), dtype=np.float32)
        cur = self.current
        prev = self._aligned_previous(cur)

        # head jumped more than one cell: reset or death snap, show raw state
        if np.any(np.abs(cur[0] - prev[0]) > 1.0):
            return cur.copy()

        out = prev + (cur - prev) * self.alpha(now_ms)
        if self.snap_segments:
            jumped = np.any(np.abs(cur - prev) > 1.0, axis=1)
            out[jumped] = cur[jumped]
        return out

    def _aligned_previous(self, cur: np.ndarray) -> np.ndarray:
        prev = self.previous
        n, m = len(cur), len(prev)
        if m == n:
            return prev
        if m > n:
            return prev[:n]
        # growth: the new tail segment holds still at the old tail
        pad = np.repeat(prev[-1:], n - m, axis=0)
        return np.concatenate([prev, pad], axis=0)
