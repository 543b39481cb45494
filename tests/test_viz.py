import numpy as np
import pygame as pg
from ripplesnake.core.game import Frame
from ripplesnake.core.interfaces import Heading, Phase, Snapshot
from ripplesnake.core.publisher import PositionChannel
from ripplesnake.viz.glow import GlowConsumer
from ripplesnake.viz.keyboard import Keyboard
from ripplesnake.viz.renderer_headless import HeadlessRenderer
from ripplesnake.viz.renderer_pygame import PygameRenderer
import ripplesnake.viz.renderer_colors as theme

def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

def _frame(phase=Phase.RUNNING):
    s = Snapshot(snake=((5, 5), (4, 5), (3, 5)), food=(1, 1), heading=Heading.RIGHT, phase=phase,
                 score=0, tick_count=0, reason=None, ate=False, grid_w=10, grid_h=10)
    return Frame(snapshot=s, segments=np.array(s.snake, dtype=np.float32), head_px=None, eat=False)

class _Recorder:
    def __init__(self):
        self.calls = []
    def request_direction(self, h):
        self.calls.append(h)
    def toggle_pause(self):
        self.calls.append("pause")

def test_renderer_draws_cells(cfg, screen):
    ren = PygameRenderer()
    ren.attach_surface(cfg, screen)
    ren.draw(_frame())
    assert _rgb(screen.get_at((5 * 32 + 16, 5 * 32 + 16))) == _rgb(theme.HEAD)
    assert _rgb(screen.get_at((4 * 32 + 16, 5 * 32 + 16))) == _rgb(theme.BODY)
    assert _rgb(screen.get_at((1 * 32 + 16, 1 * 32 + 16))) == _rgb(theme.FOOD)

def test_renderer_dims_when_paused(cfg, screen):
    ren = PygameRenderer()
    ren.attach_surface(cfg, screen)
    ren.draw(_frame(Phase.PAUSED))
    assert _rgb(screen.get_at((1 * 32 + 16, 1 * 32 + 16))) != _rgb(theme.FOOD)

def test_renderer_runs_overlay(cfg, screen):
    ren = PygameRenderer()
    ren.attach_surface(cfg, screen)
    hit = []
    ren.draw(_frame(), overlay=hit.append)
    assert hit == [screen]

def test_keyboard_routes_arrows_and_pause():
    kbd = Keyboard()
    game = _Recorder()
    detach = kbd.attach(game)
    assert kbd.handle(pg.event.Event(pg.KEYDOWN, key=pg.K_UP))
    assert kbd.handle(pg.event.Event(pg.KEYDOWN, key=pg.K_SPACE))
    assert game.calls == [Heading.UP, "pause"]
    detach()
    assert not kbd.attached
    kbd.handle(pg.event.Event(pg.KEYDOWN, key=pg.K_LEFT))
    assert game.calls == [Heading.UP, "pause"]

def test_keyboard_quit_events():
    kbd = Keyboard()
    assert kbd.handle(pg.event.Event(pg.QUIT)) is False
    assert kbd.handle(pg.event.Event(pg.KEYDOWN, key=pg.K_ESCAPE)) is False

def test_glow_reads_latest_position(screen):
    ch = PositionChannel()
    glow = GlowConsumer(ch, radius_px=20)
    screen.fill((0, 0, 0, 255))
    glow.draw(screen, now_ms=0)
    assert _rgb(screen.get_at((100, 100))) == (0, 0, 0)
    ch.publish(100, 100)
    glow.draw(screen, now_ms=0)
    assert _rgb(screen.get_at((100, 100))) != (0, 0, 0)

def test_glow_pulse_latches_and_decays():
    glow = GlowConsumer(PositionChannel(), radius_px=10, pulse_ms=400)
    assert glow.pulse(0) == 0.0
    glow.on_eat(1000)
    assert glow.pulse(1200) == 0.5
    assert glow.pulse(1400) == 0.0
    assert glow.pulse(1300) == 0.0

def test_headless_renderer_keeps_recent_frames():
    ren = HeadlessRenderer(keep=2)
    for _ in range(3):
        ren.draw(_frame())
    assert len(ren.frames) == 2
    assert ren.last is ren.frames[-1]
