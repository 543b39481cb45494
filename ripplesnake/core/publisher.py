# ripplesnake/core/publisher.py
from __future__ import annotations
from typing import Callable, List, Optional, Tuple
import numpy as np
from .interfaces import PositionSink

Point = Tuple[float, float]

def cell_to_pixel(coord, cell_px: float):
    """Grid coordinate (scalar or array) to the pixel centre of that cell."""
    return coord * cell_px + cell_px / 2.0

class PositionChannel:
    """One-slot, latest-value channel for the head position.

    Writers overwrite, readers see whatever was written last; no queue and
    no back-pressure. Owned by whoever composes the game and the consumer.
    """
    def __init__(self):
        self._value: Optional[Point] = None
        self._subs: List[Callable[[float, float], None]] = []

    def publish(self, x: float, y: float) -> None:
        self._value = (float(x), float(y))
        for cb in list(self._subs):
            cb(self._value[0], self._value[1])

    def latest(self) -> Optional[Point]:
        return self._value

    def subscribe(self, cb: Callable[[float, float], None]) -> Callable[[], None]:
        self._subs.append(cb)
        def unsubscribe() -> None:
            if cb in self._subs:
                self._subs.remove(cb)
        return unsubscribe

class EatTrigger:
    """Edge-triggered one-shot: each fire() is consumed exactly once."""
    def __init__(self):
        self._armed = False

    def fire(self) -> None:
        self._armed = True

    def consume(self) -> bool:
        armed, self._armed = self._armed, False
        return armed

class HeadPublisher:
    """Converts the interpolated head to pixels and pushes it to a sink."""
    def __init__(self, sink: Optional[PositionSink], cell_px: int):
        self.sink = sink
        self.cell_px = cell_px
        self.last: Optional[Point] = None

    def publish(self, segments: np.ndarray) -> Optional[Point]:
        if len(segments) == 0:
            return None
        px = cell_to_pixel(segments[0], self.cell_px)
        self.last = (float(px[0]), float(px[1]))
        if self.sink is not None:
            self.sink(*self.last)
        return self.last
