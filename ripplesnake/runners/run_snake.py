# ripplesnake/runners/run_snake.py
import logging
import pygame as pg
from ripplesnake.config import AppConfig
from ripplesnake.core.game import SnakeGame
from ripplesnake.core.publisher import PositionChannel
from ripplesnake.viz.glow import GlowConsumer
from ripplesnake.viz.keyboard import Keyboard
from ripplesnake.viz.renderer_pygame import PygameRenderer

logger = logging.getLogger(__name__)

def main(cfg: AppConfig) -> None:
    """Human play: arrow keys steer, space/P pauses, Esc quits."""
    channel = PositionChannel()
    glow = GlowConsumer(channel, cfg.render_cell * 0.9, cfg.eat_pulse_ms) if cfg.render_glow else None

    rend = PygameRenderer()
    rend.open(cfg)
    kbd = Keyboard()
    try:
        with SnakeGame(cfg, sink=channel.publish) as game:
            game.open(pg.time.get_ticks())
            game.add_closer(kbd.attach(game))
            best = 0
            while True:
                if kbd.poll() == "quit":
                    break
                now = pg.time.get_ticks()
                frame = game.frame(now)
                best = max(best, frame.snapshot.score)
                if glow is not None and frame.eat:
                    glow.on_eat(now)
                overlay = (lambda surf: glow.draw(surf, now)) if glow is not None else None
                rend.draw(frame, overlay=overlay)
                rend.tick(cfg.fps)
            logger.info("quit, best score %d", best)
    finally:
        rend.close()
