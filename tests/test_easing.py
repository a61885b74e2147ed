import pytest

from maths2.easing import (
    ease_back_in,
    ease_back_inout,
    ease_back_out,
    ease_bounce_in,
    ease_bounce_inout,
    ease_bounce_out,
    ease_cubic_in,
    ease_cubic_inout,
    ease_cubic_out,
    ease_quad_in,
    ease_quad_inout,
    ease_quad_out,
    lerp,
    smoothstep,
    step,
)

SAMPLES = [0.0, 0.1, 0.2, 0.33, 0.4, 0.45, 0.5, 0.6, 0.75, 0.9, 1.0]


def test_easing_start_at_zero():
    assert ease_quad_in(0.0) == pytest.approx(0.0, abs=1e-9)
    assert ease_quad_out(0.0) == pytest.approx(0.0, abs=1e-9)
    assert ease_quad_inout(0.0) == pytest.approx(0.0, abs=1e-9)
    assert ease_cubic_in(0.0) == pytest.approx(0.0, abs=1e-9)
    assert ease_cubic_out(0.0) == pytest.approx(0.0, abs=1e-9)
    assert ease_cubic_inout(0.0) == pytest.approx(0.0, abs=1e-9)
    assert ease_back_in(0.0) == pytest.approx(0.0, abs=1e-9)
    assert ease_back_out(0.0) == pytest.approx(0.0, abs=1e-9)
    assert ease_back_inout(0.0) == pytest.approx(0.0, abs=1e-9)
    assert ease_bounce_in(0.0) == pytest.approx(0.0, abs=1e-9)
    assert ease_bounce_out(0.0) == pytest.approx(0.0, abs=1e-9)
    assert ease_bounce_inout(0.0) == pytest.approx(0.0, abs=1e-9)


def test_easing_end_at_one():
    assert ease_quad_in(1.0) == pytest.approx(1.0, abs=1e-4)
    assert ease_quad_out(1.0) == pytest.approx(1.0, abs=1e-4)
    assert ease_quad_inout(1.0) == pytest.approx(1.0, abs=1e-4)
    assert ease_cubic_in(1.0) == pytest.approx(1.0, abs=1e-4)
    assert ease_cubic_out(1.0) == pytest.approx(1.0, abs=1e-4)
    assert ease_cubic_inout(1.0) == pytest.approx(1.0, abs=1e-4)
    assert ease_back_in(1.0) == pytest.approx(1.0, abs=1e-4)
    assert ease_back_out(1.0) == pytest.approx(1.0, abs=1e-4)
    assert ease_back_inout(1.0) == pytest.approx(1.0, abs=1e-4)
    assert ease_bounce_in(1.0) == pytest.approx(1.0, abs=1e-4)
    assert ease_bounce_out(1.0) == pytest.approx(1.0, abs=1e-4)
    assert ease_bounce_inout(1.0) == pytest.approx(1.0, abs=1e-4)


@pytest.mark.parametrize("ease", [ease_quad_inout, ease_cubic_inout, ease_back_inout, ease_bounce_inout])
def test_inout_passes_through_midpoint(ease):
    assert ease(0.5) == pytest.approx(0.5, abs=1e-6)


@pytest.mark.parametrize("t", SAMPLES)
def test_out_mirrors_in(t):
    assert ease_quad_out(t) == pytest.approx(1.0 - ease_quad_in(1.0 - t), abs=1e-9)
    assert ease_cubic_out(t) == pytest.approx(1.0 - ease_cubic_in(1.0 - t), abs=1e-9)
    assert ease_back_out(t) == pytest.approx(1.0 - ease_back_in(1.0 - t), abs=1e-9)
    assert ease_bounce_out(t) == pytest.approx(1.0 - ease_bounce_in(1.0 - t), abs=1e-9)


@pytest.mark.parametrize("t", [0.0, 0.1, 0.2, 0.3, 0.45])
def test_inout_first_half_is_scaled_in(t):
    assert ease_quad_inout(t) == pytest.approx(0.5 * ease_quad_in(2.0 * t), abs=1e-9)
    assert ease_cubic_inout(t) == pytest.approx(0.5 * ease_cubic_in(2.0 * t), abs=1e-9)
    assert ease_bounce_inout(t) == pytest.approx(0.5 * ease_bounce_in(2.0 * t), abs=1e-9)


@pytest.mark.parametrize("t", [0.1, 0.2, 0.3])
def test_back_in_overshoots_below_zero(t):
    assert ease_back_in(t) < 0.0
    assert ease_back_out(1.0 - t) > 1.0


@pytest.mark.parametrize("ease", [ease_quad_in, ease_quad_out, ease_cubic_in, ease_cubic_out])
def test_polynomial_easings_are_monotonic(ease):
    values = [ease(t) for t in SAMPLES]
    assert values == sorted(values)


def test_bounce_out_is_continuous_at_first_break():
    edge = 1.0 / 2.75
    assert ease_bounce_out(edge) == pytest.approx(ease_bounce_out(edge - 1e-9), abs=1e-6)


@pytest.mark.parametrize("t", SAMPLES)
def test_bounce_stays_in_unit_range(t):
    for ease in (ease_bounce_in, ease_bounce_out, ease_bounce_inout):
        assert -1e-9 <= ease(t) <= 1.0 + 1e-9


def test_lerp_endpoints_and_midpoint():
    assert lerp(2.0, 6.0, 0.0) == 2.0
    assert lerp(2.0, 6.0, 1.0) == 6.0
    assert lerp(2.0, 6.0, 0.5) == pytest.approx((2.0 + 6.0) / 2)


def test_lerp_extrapolates():
    assert lerp(0.0, 10.0, 2.0) == pytest.approx(20.0)


def test_step():
    assert step(0.5, 0.4) == 0.0
    assert step(0.5, 0.5) == 1.0
    assert step(0.5, 0.9) == 1.0


def test_smoothstep_bounds():
    assert smoothstep(1.0, 3.0, 0.0) == 0.0
    assert smoothstep(1.0, 3.0, 1.0) == 0.0
    assert smoothstep(1.0, 3.0, 3.0) == 1.0
    assert smoothstep(1.0, 3.0, 5.0) == 1.0


def test_smoothstep_midpoint_and_monotonic():
    assert smoothstep(1.0, 3.0, 2.0) == pytest.approx(0.5)
    values = [smoothstep(0.0, 1.0, t) for t in SAMPLES]
    assert values == sorted(values)


@pytest.mark.parametrize("t", [0.1, 0.25, 0.4])
def test_smoothstep_is_symmetric(t):
    assert smoothstep(0.0, 1.0, t) + smoothstep(0.0, 1.0, 1.0 - t) == pytest.approx(1.0)