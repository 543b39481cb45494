# ripplesnake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Optional, Callable

Cell = Tuple[int, int]
PositionSink = Callable[[float, float], None]

class Heading(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    NONE = (0, 0)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value

    @property
    def reverse(self) -> "Heading":
        dx, dy = self.value
        return Heading((-dx, -dy))

    @classmethod
    def from_name(cls, name: str) -> "Heading":
        return cls[name.upper()]

class Phase(Enum):
    PAUSED = "paused"
    RUNNING = "running"
    DYING = "dying"
    RESETTING = "resetting"

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head first
    food: Optional[Cell]
    heading: Heading
    phase: Phase
    score: int
    tick_count: int
    reason: str | None        # "wall" / "self" while dying
    ate: bool                 # grew on the tick that produced this snapshot
    grid_w: int
    grid_h: int

    @property
    def head(self) -> Cell:
        return self.snake[0]
