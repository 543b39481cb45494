# ripplesnake/viz/renderer_pygame.py
from __future__ import annotations
from typing import Callable, Optional
import pygame as pg
from ripplesnake.config import AppConfig
from ripplesnake.core.game import Frame
from ripplesnake.core.interfaces import Heading, Phase
import ripplesnake.viz.renderer_colors as theme

class PygameRenderer:
    def __init__(self):
        self.cell = 24
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._grid_w = 0
        self._grid_h = 0
        self._font: Optional[pg.font.Font] = None

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg

        self._grid_w, self._grid_h = cfg.grid_w, cfg.grid_h
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((self._grid_w * self.cell, self._grid_h * self.cell))
        self.clock = pg.time.Clock()
        self._font = pg.font.SysFont(None, 22)
        self._auto_flip = True

    def attach_surface(self, cfg: AppConfig, surface: pg.Surface) -> None:
        """Draw into a caller-owned surface; the caller flips and paces."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self._grid_w, self._grid_h = cfg.grid_w, cfg.grid_h
        self.cell = cfg.render_cell
        self.surf = surface
        self.clock = None
        self._font = pg.font.SysFont(None, 22)
        self._auto_flip = False

    def draw(self, frame: Frame, overlay: Optional[Callable[[pg.Surface], None]] = None) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell
        s = frame.snapshot

        surf.fill(theme.BG)
        if self.cfg.render_grid_lines:
            self._draw_grid(surf)

        if s.food is not None:
            fx, fy = s.food
            pg.draw.rect(surf, theme.FOOD, pg.Rect(fx * c + 1, fy * c + 1, c - 2, c - 2))

        # tail first so the head is painted on top
        for i in range(len(frame.segments) - 1, -1, -1):
            x, y = (float(v) for v in frame.segments[i])
            col = theme.HEAD if i == 0 else theme.BODY
            pg.draw.rect(surf, col, pg.Rect(round(x * c) + 1, round(y * c) + 1, c - 2, c - 2))
        if len(frame.segments):
            self._draw_eyes(surf, frame.segments[0], s.heading)

        if overlay is not None:
            overlay(surf)

        if s.phase in (Phase.PAUSED, Phase.DYING):
            self._draw_banner(surf, "PAUSED" if s.phase is Phase.PAUSED else "GAME OVER")

        if self.cfg.render_show_hud:
            txt = self._font.render(
                f"Score: {s.score}   Len: {len(s.snake)}   {s.phase.value}", True, theme.TEXT
            )
            surf.blit(txt, (6, 4))

        if self._auto_flip:
            pg.display.flip()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None

    # internals
    def _draw_grid(self, surf: pg.Surface) -> None:
        c = self.cell
        for x in range(1, self._grid_w):
            pg.draw.line(surf, theme.GRID, (x * c, 0), (x * c, self._grid_h * c))
        for y in range(1, self._grid_h):
            pg.draw.line(surf, theme.GRID, (0, y * c), (self._grid_w * c, y * c))

    def _draw_eyes(self, surf: pg.Surface, head, heading: Heading) -> None:
        c = self.cell
        cx, cy = float(head[0]) * c + c / 2, float(head[1]) * c + c / 2
        dx, dy = heading.offset if heading is not Heading.NONE else (1, 0)
        # eyes sit forward of centre, spread across the heading
        fwd, side = c * 0.2, c * 0.2
        for sgn in (-1, 1):
            ex = cx + dx * fwd - dy * side * sgn
            ey = cy + dy * fwd + dx * side * sgn
            pg.draw.circle(surf, theme.EYE, (round(ex), round(ey)), max(1, c // 10))

    def _draw_banner(self, surf: pg.Surface, text: str) -> None:
        dim = pg.Surface(surf.get_size(), pg.SRCALPHA)
        dim.fill(theme.DIM)
        surf.blit(dim, (0, 0))
        label = self._font.render(text, True, theme.TEXT)
        surf.blit(label, label.get_rect(center=(surf.get_width() // 2, surf.get_height() // 2)))
