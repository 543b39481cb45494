# ripplesnake/viz/keyboard.py
import pygame as pg
from ripplesnake.core.interfaces import Heading

ARROWS = {
    pg.K_UP: Heading.UP,
    pg.K_DOWN: Heading.DOWN,
    pg.K_LEFT: Heading.LEFT,
    pg.K_RIGHT: Heading.RIGHT,
}
PAUSE_KEYS = (pg.K_SPACE, pg.K_p)

class Keyboard:
    """Routes pygame key events to the game's two commands.

    attach() registers the listener and returns a detach callable; while
    detached, poll() still reports quit but drops key input.
    """
    def __init__(self):
        self._game = None

    def attach(self, game):
        self._game = game
        def detach():
            self._game = None
        return detach

    @property
    def attached(self) -> bool:
        return self._game is not None

    def handle(self, e) -> bool:
        """Dispatch one event. Returns False when the user asked to quit."""
        if e.type == pg.QUIT:
            return False
        if e.type == pg.KEYDOWN:
            if e.key == pg.K_ESCAPE:
                return False
            if self._game is None:
                return True
            if e.key in ARROWS:
                self._game.request_direction(ARROWS[e.key])
            elif e.key in PAUSE_KEYS:
                self._game.toggle_pause()
        return True

    def poll(self):
        for e in pg.event.get():
            if not self.handle(e):
                return "quit"
        return None
