# ripplesnake/core/scheduler.py
from __future__ import annotations
import heapq
import itertools
import logging
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

class TimerHandle:
    def __init__(self, sched: "Scheduler", fn: Callable[[float], None],
                 due_ms: float, interval_ms: Optional[float], name: str):
        self._sched = sched
        self.fn = fn
        self.due_ms = due_ms
        self.interval_ms = interval_ms
        self.name = name
        self.cancelled = False

    @property
    def periodic(self) -> bool:
        return self.interval_ms is not None

    def cancel(self) -> None:
        if not self.cancelled:
            self.cancelled = True
            self._sched._forget(self)

class Scheduler:
    """Cooperative timers driven by the host loop via :meth:`run_due`.

    Single-threaded: callbacks run inside run_due(), one after another, so a
    reader on the same loop never sees a half-applied tick. Callbacks receive
    the time they were due, not the time they ran.
    """
    def __init__(self, max_catch_up: int = 5):
        self.max_catch_up = max_catch_up
        self._heap: List[Tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()
        self._live: set[TimerHandle] = set()

    def every(self, interval_ms: float, fn: Callable[[float], None], now_ms: float,
              name: str = "periodic") -> TimerHandle:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        return self._add(TimerHandle(self, fn, now_ms + interval_ms, float(interval_ms), name))

    def after(self, delay_ms: float, fn: Callable[[float], None], now_ms: float,
              name: str = "oneshot") -> TimerHandle:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        return self._add(TimerHandle(self, fn, now_ms + delay_ms, None, name))

    def run_due(self, now_ms: float) -> int:
        fired = 0
        while self._heap and self._heap[0][0] <= now_ms:
            due, _, h = heapq.heappop(self._heap)
            if h.cancelled or due != h.due_ms:
                continue
            if h.periodic:
                h.due_ms = due + h.interval_ms
                # too far behind: drop the backlog instead of a burst of ticks
                if now_ms - h.due_ms >= h.interval_ms * self.max_catch_up:
                    logger.debug("timer %s behind by %.0fms, resyncing", h.name, now_ms - due)
                    h.due_ms = now_ms + h.interval_ms
                heapq.heappush(self._heap, (h.due_ms, next(self._seq), h))
            else:
                self._live.discard(h)
                h.cancelled = True
            h.fn(due)
            fired += 1
        return fired

    def cancel_all(self) -> None:
        for h in list(self._live):
            h.cancel()
        self._heap.clear()

    def pending(self) -> int:
        return len(self._live)

    def _add(self, h: TimerHandle) -> TimerHandle:
        self._live.add(h)
        heapq.heappush(self._heap, (h.due_ms, next(self._seq), h))
        return h

    def _forget(self, h: TimerHandle) -> None:
        self._live.discard(h)
