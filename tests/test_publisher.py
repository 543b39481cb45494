import numpy as np
from ripplesnake.core.publisher import EatTrigger, HeadPublisher, PositionChannel, cell_to_pixel

def test_cell_to_pixel_is_cell_centre():
    assert cell_to_pixel(0, 32) == 16.0
    assert cell_to_pixel(3, 32) == 112.0
    assert cell_to_pixel(2.5, 20) == 60.0

def test_channel_keeps_latest_only():
    ch = PositionChannel()
    assert ch.latest() is None
    for i in range(5):
        ch.publish(i, i * 2)
    assert ch.latest() == (4.0, 8.0)

def test_channel_subscribers():
    ch = PositionChannel()
    got = []
    unsub = ch.subscribe(lambda x, y: got.append((x, y)))
    ch.publish(1, 2)
    unsub()
    ch.publish(3, 4)
    assert got == [(1.0, 2.0)]

def test_eat_trigger_is_edge_triggered():
    t = EatTrigger()
    assert t.consume() is False
    t.fire()
    t.fire()
    assert t.consume() is True
    assert t.consume() is False

def test_head_publisher_pushes_pixels():
    got = []
    pub = HeadPublisher(lambda x, y: got.append((x, y)), cell_px=10)
    assert pub.publish(np.array([[2.5, 4.0], [1.5, 4.0]])) == (30.0, 45.0)
    assert got == [(30.0, 45.0)]
    assert pub.publish(np.zeros((0, 2))) is None
    assert len(got) == 1
