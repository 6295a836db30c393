import pytest
from cords.core.easing import EasingKind
from cords.core.timeline import Tween, DelaySequence, Ticker


def test_tween_linear_progress():
    tween = Tween(0.0, 100.0, 400)
    assert tween.value == 0.0
    tween.advance(0.1)
    assert tween.value == pytest.approx(25.0)
    assert tween.finished == False


def test_tween_pins_to_target():
    tween = Tween(-20.0, 100.0, 500)
    tween.advance(10.0)
    assert tween.value == 100.0
    assert tween.finished == True

    # Terminal: further frames change nothing
    tween.advance(1.0)
    assert tween.value == 100.0


def test_tween_ignores_negative_dt():
    tween = Tween(0.0, 1.0, 1000)
    tween.advance(0.5)
    before = tween.value
    tween.advance(-3.0)
    assert tween.value == before
    tween.advance(0.5)
    assert tween.finished


def test_tween_zero_duration_is_finished():
    tween = Tween(0.0, 1.0, 0)
    assert tween.finished
    assert tween.value == 1.0


def test_tween_non_decreasing():
    tween = Tween(0.0, 100.0, 1000, EasingKind.FAST_OUT_LINEAR_IN)
    last = tween.value
    for _ in range(80):
        value = tween.advance(0.016)
        assert value >= last
        assert value <= 100.0
        last = value


def test_delay_sequence_fires_in_order():
    fired = []
    seq = DelaySequence([
        (700, lambda: fired.append("title"), "title"),
        (500, lambda: fired.append("logo"), "logo"),
        (2500, lambda: fired.append("loaded"), "loaded"),
    ])

    seq.advance(0.5)
    assert fired == []
    seq.advance(0.25)
    assert fired == ["title"]

    # 50 ms past the title carries into the logo delay
    seq.advance(0.25)
    assert fired == ["title"]
    seq.advance(0.2)
    assert fired == ["title", "logo"]

    seq.advance(2.5)
    assert fired == ["title", "logo", "loaded"]
    assert seq.done


def test_delay_sequence_one_step_per_frame():
    fired = []
    seq = DelaySequence([
        (100, lambda: fired.append(1), ""),
        (100, lambda: fired.append(2), ""),
    ])
    seq.advance(10.0)
    assert fired == [1]
    assert seq.fired == 1

    # Carried time is capped at one delay: one late step, then done
    seq.advance(0.0)
    assert fired == [1, 2]
    assert seq.done


def test_delay_sequence_cancel():
    fired = []
    seq = DelaySequence().then(100, lambda: fired.append(1)).then(100, lambda: fired.append(2))
    seq.advance(0.125)
    seq.cancel()
    seq.advance(1.0)
    assert fired == [1]
    assert seq.cancelled
    assert seq.done


def test_delay_sequence_rejects_negative_delay():
    with pytest.raises(ValueError):
        DelaySequence().then(-1, lambda: None)


def test_ticker_max_ticks():
    ticks = []
    ticker = Ticker(1000, ticks.append, max_ticks=3)
    for _ in range(10):
        ticker.advance(1.0)
    assert ticks == [1, 2, 3]
    assert ticker.active == False


def test_ticker_cancel():
    ticks = []
    ticker = Ticker(400, ticks.append)
    ticker.advance(0.5)
    ticker.cancel()
    ticker.advance(0.5)
    assert ticks == [1]


def test_ticker_rejects_bad_interval():
    with pytest.raises(ValueError):
        Ticker(0, lambda tick: None)


def test_ticker_keeps_schedule_at_60hz():
    ticks = []
    ticker = Ticker(1000, ticks.append)
    fired_on = []
    for frame in range(1, 301):
        ticker.advance(1 / 60)
        if len(ticks) > len(fired_on):
            fired_on.append(frame)
    assert fired_on == [60, 120, 180, 240, 300]


def test_ticker_carries_overshoot():
    ticks = []
    ticker = Ticker(1000, ticks.append)
    for _ in range(63):
        ticker.advance(0.016)
    assert ticks == [1]          # 1008 ms

    for _ in range(62):
        ticker.advance(0.016)
    assert ticks == [1, 2]       # 2000 ms, not 2016


def test_ticker_hitch_fires_one_late_tick():
    ticks = []
    ticker = Ticker(400, ticks.append)
    ticker.advance(5.0)
    assert ticks == [1]
    ticker.advance(0.0)
    assert ticks == [1, 2]
    ticker.advance(0.0)
    assert ticks == [1, 2]
