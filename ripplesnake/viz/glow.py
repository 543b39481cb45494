# ripplesnake/viz/glow.py
from __future__ import annotations
import math
from typing import Optional
import pygame as pg
from ripplesnake.core.publisher import PositionChannel
import ripplesnake.viz.renderer_colors as theme

class GlowConsumer:
    """Stand-in for the ripple shader: reads the head signal at its own pace.

    Only ever calls ``channel.latest()``. The eat pulse timer is latched here;
    the game just hands over a one-shot trigger.
    """
    def __init__(self, channel: PositionChannel, radius_px: float, pulse_ms: int = 400):
        self.channel = channel
        self.radius = radius_px
        self.pulse_ms = pulse_ms
        self._pulse_start: Optional[float] = None

    def on_eat(self, now_ms: float) -> None:
        self._pulse_start = now_ms

    def pulse(self, now_ms: float) -> float:
        """0..1 strength of the eat pulse, decaying linearly."""
        if self._pulse_start is None:
            return 0.0
        t = (now_ms - self._pulse_start) / self.pulse_ms
        if t >= 1.0:
            self._pulse_start = None
            return 0.0
        return 1.0 - max(0.0, t)

    def draw(self, surf: pg.Surface, now_ms: float) -> None:
        pos = self.channel.latest()
        if pos is None:
            return
        p = self.pulse(now_ms)
        wobble = 0.08 * math.sin(now_ms / 180.0)
        r = int(self.radius * (1.0 + wobble + 1.5 * p))
        if r <= 0:
            return
        layer = pg.Surface((2 * r, 2 * r), pg.SRCALPHA)
        for i in range(4, 0, -1):
            alpha = int((40 + 80 * p) * (5 - i) / 4)
            pg.draw.circle(layer, (*theme.GLOW, alpha), (r, r), int(r * i / 4))
        surf.blit(layer, (int(pos[0]) - r, int(pos[1]) - r))
