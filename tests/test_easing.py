import pytest
from cords.core.easing import EasingKind, CubicBezier, ease, clamp


ALL_KINDS = list(EasingKind)


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_endpoints(kind):
    assert ease(0.0, kind) == 0.0
    assert ease(1.0, kind) == 1.0


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_monotonic(kind):
    values = [ease(i / 1000.0, kind) for i in range(1001)]
    for a, b in zip(values, values[1:]):
        assert b >= a
    assert all(0.0 <= v <= 1.0 for v in values)


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_out_of_range_is_clamped(kind):
    assert ease(-0.5, kind) == 0.0
    assert ease(1.5, kind) == 1.0


def test_linear_is_identity():
    for t in [0.1, 0.25, 0.5, 0.9]:
        assert ease(t, EasingKind.LINEAR) == t


def test_ease_out_is_ahead_of_linear():
    assert ease(0.5, EasingKind.EASE_OUT) == pytest.approx(0.875)


def test_fast_out_linear_in_starts_slow():
    # Control points (0.4, 0) / (1, 1): lags behind linear through the middle
    mid = ease(0.5, EasingKind.FAST_OUT_LINEAR_IN)
    assert 0.25 < mid < 0.4
    assert ease(0.05, EasingKind.FAST_OUT_LINEAR_IN) < 0.05


def test_bezier_matches_curve():
    curve = CubicBezier(0.4, 0.0, 1.0, 1.0)
    s = 0.38
    x = 3 * 0.4 * (1 - s) ** 2 * s + 3 * 1.0 * (1 - s) * s ** 2 + s ** 3
    y = 3 * 1.0 * (1 - s) * s ** 2 + s ** 3
    assert curve(x) == pytest.approx(y, abs=1e-9)


def test_bezier_rejects_non_monotonic_x():
    with pytest.raises(ValueError):
        CubicBezier(1.5, 0.0, 0.2, 1.0)


def test_scalar_helpers():
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-1.0, 0.0, 1.0) == 0.0
