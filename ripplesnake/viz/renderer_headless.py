# ripplesnake/viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional
from ripplesnake.config import AppConfig
from ripplesnake.core.game import Frame

class HeadlessRenderer:
    """Renderer that draws nothing; keeps the last frame for inspection."""
    def __init__(self, keep: int = 0):
        self.keep = keep
        self.frames: List[Frame] = []
        self.last: Optional[Frame] = None
        self.cfg: Optional[AppConfig] = None

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg

    def draw(self, frame: Frame, overlay=None) -> None:
        self.last = frame
        if self.keep:
            self.frames.append(frame)
            del self.frames[:-self.keep]

    def tick(self, fps: int) -> None:
        pass

    def close(self) -> None:
        pass
