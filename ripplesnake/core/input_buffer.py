# ripplesnake/core/input_buffer.py
from __future__ import annotations
import logging
from .interfaces import Heading

logger = logging.getLogger(__name__)

class HeadingBuffer:
    """Single pending-direction slot with a reversal guard.

    Writers: input handlers write ``pending``; the tick writes ``committed``.
    No queue: a newer valid request replaces an unconsumed one.
    """
    def __init__(self, initial: Heading = Heading.RIGHT):
        self.committed = initial
        self.pending = initial

    def request(self, heading: Heading) -> bool:
        if heading is Heading.NONE:
            return False
        # guard is against the last committed heading; pending may already differ
        if self.committed is not Heading.NONE and heading is self.committed.reverse:
            logger.debug("dropped reversal %s (committed %s)", heading.name, self.committed.name)
            return False
        self.pending = heading
        return True

    def commit(self) -> Heading:
        self.committed = self.pending
        return self.committed

    def clear(self, initial: Heading) -> None:
        self.committed = initial
        self.pending = initial
