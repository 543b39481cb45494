# ripplesnake/config.py
from dataclasses import dataclass, replace
from typing import Optional, Literal

EdgePolicy = Literal["wall", "wrap"]
PostResetPhase = Literal["running", "paused"]

@dataclass(frozen=True, slots=True)
class AppConfig:
    # grid
    grid_w: int = 20
    grid_h: int = 15
    seed: Optional[int] = None

    # gameplay
    tick_ms: int = 120
    start_len: int = 3
    start_heading: str = "right"
    start_paused: bool = False
    edge_policy: EdgePolicy = "wall"
    reset_delay_ms: int = 1000
    post_reset_phase: PostResetPhase = "running"
    food_max_attempts: int = 64

    # scheduler
    max_catch_up: int = 5

    # render
    fps: int = 60
    render_cell: int = 32
    render_title: str = "Snake"
    render_grid_lines: bool = False
    render_show_hud: bool = True
    render_glow: bool = True
    eat_pulse_ms: int = 400

    def __post_init__(self):
        if self.grid_w <= 0 or self.grid_h <= 0:
            raise ValueError(f"grid dimensions must be positive, got {self.grid_w}x{self.grid_h}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.render_cell <= 0:
            raise ValueError(f"render_cell must be positive, got {self.render_cell}")
        if self.start_len < 1:
            raise ValueError(f"start_len must be >= 1, got {self.start_len}")
        if self.start_heading not in ("up", "down", "left", "right", "none"):
            raise ValueError(f"unknown start_heading {self.start_heading!r}")
        # body trails behind the centre cell, away from the start heading
        room = {
            "right": self.grid_w // 2 + 1, "none": self.grid_w // 2 + 1,
            "left": self.grid_w - self.grid_w // 2,
            "down": self.grid_h // 2 + 1,
            "up": self.grid_h - self.grid_h // 2,
        }[self.start_heading]
        if self.start_len > room:
            raise ValueError(
                f"start_len {self.start_len} does not fit a {self.grid_w}x{self.grid_h} grid "
                f"heading {self.start_heading}"
            )
        if self.edge_policy not in ("wall", "wrap"):
            raise ValueError(f"unknown edge_policy {self.edge_policy!r}")
        if self.post_reset_phase not in ("running", "paused"):
            raise ValueError(f"unknown post_reset_phase {self.post_reset_phase!r}")
        if self.reset_delay_ms < 0:
            raise ValueError(f"reset_delay_ms must be >= 0, got {self.reset_delay_ms}")
        if self.food_max_attempts < 1:
            raise ValueError(f"food_max_attempts must be >= 1, got {self.food_max_attempts}")
        if self.max_catch_up < 1:
            raise ValueError(f"max_catch_up must be >= 1, got {self.max_catch_up}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
