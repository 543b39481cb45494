# ripplesnake/runners/run_headless.py
from __future__ import annotations
import logging
from typing import Any, Dict, Optional
from ripplesnake.config import AppConfig
from ripplesnake.core.game import SnakeGame
from ripplesnake.core.interfaces import Heading, Phase, Snapshot
from ripplesnake.core.publisher import PositionChannel
from ripplesnake.viz.renderer_headless import HeadlessRenderer

logger = logging.getLogger(__name__)

TURNS = (Heading.UP, Heading.RIGHT, Heading.DOWN, Heading.LEFT)

def _safe(snap: Snapshot, h: Heading, wrap: bool) -> bool:
    hx, hy = snap.head
    dx, dy = h.offset
    x, y = hx + dx, hy + dy
    if wrap:
        x, y = x % snap.grid_w, y % snap.grid_h
    elif not (0 <= x < snap.grid_w and 0 <= y < snap.grid_h):
        return False
    return (x, y) not in snap.snake

def autopilot(snap: Snapshot, wrap: bool = False) -> Optional[Heading]:
    """Greedy: step toward food, skipping moves that die immediately."""
    if snap.food is None:
        return None
    hx, hy = snap.head
    fx, fy = snap.food
    prefs = []
    if fx != hx:
        prefs.append(Heading.RIGHT if fx > hx else Heading.LEFT)
    if fy != hy:
        prefs.append(Heading.DOWN if fy > hy else Heading.UP)
    prefs += [h for h in TURNS if h not in prefs]
    for h in prefs:
        if h is snap.heading.reverse:
            continue
        if _safe(snap, h, wrap):
            return h
    return None

def main(cfg: AppConfig, seconds: float = 30.0, use_autopilot: bool = True) -> Dict[str, Any]:
    """Run the game on a virtual clock with no window. Returns a summary."""
    channel = PositionChannel()
    rend = HeadlessRenderer()
    rend.open(cfg)
    frame_ms = 1000.0 / cfg.fps
    now = 0.0
    stats = {"frames": 0, "moves": 0, "deaths": 0, "eaten": 0, "best_score": 0, "published": 0}
    wrap = cfg.edge_policy == "wrap"

    def _count(x, y):
        stats["published"] += 1

    try:
        with SnakeGame(cfg, sink=channel.publish) as game:
            game.open(now)
            # nobody is there to press space in a headless run
            game.start()
            game.add_closer(channel.subscribe(_count))
            last_tick = game.snapshot.tick_count
            while now < seconds * 1000.0:
                now += frame_ms
                phase_before = game.phase
                frame = game.frame(now)
                snap = frame.snapshot
                if snap.tick_count != last_tick:
                    # tick_count restarts at 0 after a reset
                    stats["moves"] += max(0, snap.tick_count - last_tick)
                    last_tick = snap.tick_count
                if phase_before is Phase.RUNNING and snap.phase is Phase.DYING:
                    stats["deaths"] += 1
                stats["eaten"] += int(frame.eat)
                stats["best_score"] = max(stats["best_score"], snap.score)
                stats["frames"] += 1
                if use_autopilot and snap.phase is Phase.RUNNING:
                    h = autopilot(snap, wrap)
                    if h is not None:
                        game.request_direction(h)
                rend.draw(frame)
            stats["last_head_px"] = channel.latest()
    finally:
        rend.close()
    logger.info("headless run: %s", stats)
    return stats
