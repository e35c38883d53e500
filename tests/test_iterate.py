"""Tests for the escape-time iterator, normalizer and iteration heuristic."""

import math

import pytest

from fractalgen.complex import Complex
from fractalgen.iterate import (
    MIN_ITER_JULIA,
    MIN_ITER_MANDELBROT,
    EscapeResult,
    Mode,
    Variant,
    _step_polar,
    auto_iterations,
    escape_time,
)
from fractalgen.normalize import normalize

R2 = float(1 << 16) ** 2
ORIGIN = Complex(0.0, 0.0)


def _reference(point, julia, n, max_iter, radius2, mode, variant):
    """Straightforward orbit using the Complex value type, no periodicity shortcut."""
    if mode == Mode.JULIA:
        z, c = point, julia
    else:
        z, c = ORIGIN, point
    za = z.abs2()
    for i in range(max_iter):
        if variant == Variant.BURNING_SHIP:
            z = Complex(abs(z.re), -abs(z.im))
        elif variant == Variant.TRICORN:
            z = z.conjugate()
        za = z.abs2()
        if za > radius2:
            return EscapeResult(i, za)
        z = z.quad(n, c)
    return EscapeResult(max_iter, za)


class TestEscapeTime:
    @pytest.mark.parametrize("max_iter", [1, 2, 50, 1000])
    def test_origin_is_bound(self, max_iter):
        result = escape_time(ORIGIN, ORIGIN, 2, max_iter, R2)
        assert result.iterations == max_iter

    @pytest.mark.parametrize("period", [0, 20])
    def test_main_cardioid_is_bound(self, period):
        result = escape_time(Complex(-0.1, 0.1), ORIGIN, 2, 200, R2, period=period)
        assert result.iterations == 200

    @pytest.mark.parametrize("radius2,expected", [(16.0, 2), (65536.0, 4)])
    def test_two_escapes_at_fixed_iteration(self, radius2, expected):
        result = escape_time(Complex(2.0, 0.0), ORIGIN, 2, 100, radius2)
        assert result.iterations == expected
        assert result.magnitude2 > radius2

    def test_julia_mode_starts_from_point(self):
        outside = escape_time(Complex(3.0, 0.0), ORIGIN, 2, 50, 4.0, Mode.JULIA)
        assert outside.iterations == 0
        assert outside.magnitude2 == 9.0
        inside = escape_time(Complex(0.5, 0.0), ORIGIN, 2, 50, 4.0, Mode.JULIA)
        assert inside.iterations == 50

    def test_point_outside_escapes_before_cap(self):
        result = escape_time(Complex(-1.8333, 1.3333), ORIGIN, 2, 50, 65536.0)
        assert result.iterations == 5

    @pytest.mark.parametrize("variant", list(Variant))
    @pytest.mark.parametrize("exponent", [2, 3, 5])
    @pytest.mark.parametrize("mode", list(Mode))
    def test_matches_reference_orbit(self, variant, exponent, mode):
        julia = Complex(-0.4, 0.6)
        for re in (-1.7, -0.9, -0.2, 0.3):
            for im in (-0.8, 0.05, 0.45, 1.1):
                p = Complex(re, im)
                got = escape_time(p, julia, exponent, 80, 1e4, mode, variant, period=0)
                want = _reference(p, julia, exponent, 80, 1e4, mode, variant)
                assert got == want, (p, got, want)

    def test_tricorn_equals_standard_on_real_axis(self):
        for re in (-2.1, -1.5, 0.1, 0.4):
            p = Complex(re, 0.0)
            assert escape_time(p, ORIGIN, 2, 100, R2, variant=Variant.TRICORN) == \
                escape_time(p, ORIGIN, 2, 100, R2)

    def test_burning_ship_differs_off_axis(self):
        p = Complex(0.2, 0.5)
        standard = escape_time(p, ORIGIN, 2, 100, R2, period=0)
        ship = escape_time(p, ORIGIN, 2, 100, R2, variant=Variant.BURNING_SHIP, period=0)
        assert standard != ship

    def test_periodicity_shortcut_only_marks_bound_points(self):
        for re in (-1.9, -1.2, -0.75, 0.25, 0.3):
            p = Complex(re, 0.01)
            fast = escape_time(p, ORIGIN, 2, 500, R2, period=20)
            slow = escape_time(p, ORIGIN, 2, 500, R2, period=0)
            if slow.iterations < 500:
                assert fast.iterations in (slow.iterations, 500)
            else:
                assert fast.iterations == 500

    def test_polar_step_matches_algebraic_square(self):
        for zre, zim in ((0.3, -0.7), (-1.2, 0.4), (2.5, 1.5)):
            c = Complex(0.1, -0.2)
            pre, pim = _step_polar(zre, zim, 2, c.re, c.im)
            alg = Complex(zre, zim).sqr().add(c)
            assert pre == pytest.approx(alg.re, rel=1e-12, abs=1e-12)
            assert pim == pytest.approx(alg.im, rel=1e-12, abs=1e-12)


class TestNormalize:
    def test_bailout_at_radius_gives_integer(self):
        radius = 256.0
        assert normalize(EscapeResult(7, radius * radius), radius, 2) == pytest.approx(7.0)

    def test_consecutive_counts_differ_by_one(self):
        radius = float(1 << 16)
        mag = radius * radius * 3.7
        a = normalize(EscapeResult(10, mag), radius, 2)
        b = normalize(EscapeResult(11, mag), radius, 2)
        assert b - a == pytest.approx(1.0)

    def test_larger_magnitude_lowers_value(self):
        radius = 256.0
        near = normalize(EscapeResult(12, radius * radius * 1.01), radius, 3)
        far = normalize(EscapeResult(12, radius ** 3), radius, 3)
        assert far < near

    def test_degenerate_radius_gives_nan(self):
        assert math.isnan(normalize(EscapeResult(3, 10.0), 1.0, 2))


class TestAutoIterations:
    def test_floors_per_mode(self):
        assert auto_iterations(0.75, Mode.MANDELBROT) == MIN_ITER_MANDELBROT
        assert auto_iterations(0.75, Mode.JULIA) == MIN_ITER_JULIA

    def test_grows_with_zoom(self):
        assert auto_iterations(1e14, Mode.MANDELBROT) == 8059
        assert auto_iterations(1e6, Mode.MANDELBROT) > auto_iterations(1e3, Mode.MANDELBROT)
