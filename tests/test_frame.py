import logging

from cords.core.frame import FrameClock, FrameState


def test_first_tick_has_zero_dt():
    clock = FrameClock()
    frame = clock.tick(12.5)
    assert frame.frame_id == 1
    assert frame.dt == 0.0
    assert frame.t == 0.0


def test_dt_and_total_time():
    clock = FrameClock()
    clock.tick(1.0)
    frame = clock.tick(1.25)
    assert frame.dt == 0.25
    assert frame.t == 0.25
    assert frame.frame_id == 2


def test_backwards_timestamp_is_clamped():
    clock = FrameClock()
    clock.tick(2.0)
    frame = clock.tick(1.5)
    assert frame.dt == 0.0
    frame = clock.tick(2.5)
    assert frame.dt == 0.5


def test_hitch_is_logged(caplog):
    clock = FrameClock(hitch_threshold=0.25)
    clock.tick(0.0)
    with caplog.at_level(logging.WARNING, logger="cords.core.frame"):
        frame = clock.tick(1.0)
    assert frame.dt == 1.0
    assert "took 1000 ms (skipped frames)" in caplog.text


def test_dt_ms():
    assert FrameState(frame_id=1, dt=0.25, t=0.25).dt_ms == 250.0
