# ripplesnake/core/lifecycle.py
from __future__ import annotations
import logging
from typing import Callable, List, Optional
from .interfaces import Phase

logger = logging.getLogger(__name__)

PhaseListener = Callable[[Phase, Phase], None]

class Lifecycle:
    """Paused / Running / Dying / Resetting super-states.

    Invalid transitions are silent no-ops so external commands are always
    safe to call.
    """
    def __init__(self, post_reset: Phase = Phase.RUNNING, start: Phase = Phase.PAUSED):
        if post_reset not in (Phase.RUNNING, Phase.PAUSED):
            raise ValueError(f"post_reset must be RUNNING or PAUSED, got {post_reset}")
        self.post_reset = post_reset
        self.phase = start
        self.reason: Optional[str] = None
        self._listeners: List[PhaseListener] = []

    @property
    def ticks_enabled(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def accepts_input(self) -> bool:
        return self.phase is Phase.RUNNING

    def add_listener(self, cb: PhaseListener) -> Callable[[], None]:
        self._listeners.append(cb)
        def remove() -> None:
            if cb in self._listeners:
                self._listeners.remove(cb)
        return remove

    def start(self) -> None:
        if self.phase is Phase.PAUSED:
            self._go(Phase.RUNNING)

    def toggle_pause(self) -> None:
        if self.phase is Phase.RUNNING:
            self._go(Phase.PAUSED)
        elif self.phase is Phase.PAUSED:
            self._go(Phase.RUNNING)

    def die(self, reason: str) -> None:
        if self.phase is Phase.RUNNING:
            self.reason = reason
            self._go(Phase.DYING)

    def begin_reset(self) -> bool:
        if self.phase is not Phase.DYING:
            return False
        self._go(Phase.RESETTING)
        return True

    def finish_reset(self) -> None:
        if self.phase is Phase.RESETTING:
            self.reason = None
            self._go(self.post_reset)

    def _go(self, new: Phase) -> None:
        old, self.phase = self.phase, new
        logger.debug("phase %s -> %s", old.value, new.value)
        for cb in list(self._listeners):
            cb(old, new)
