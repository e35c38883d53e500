"""Tests for the complex value type and the pixel-to-plane mapping."""

import dataclasses
import math

import pytest

from fractalgen.complex import Complex, cart, powi
from fractalgen.mapping import pixel_to_complex


class TestComplex:
    def test_sqr(self):
        assert Complex(1.0, 2.0).sqr() == Complex(-3.0, 4.0)

    def test_pow_special_cases(self):
        z = Complex(0.3, -0.7)
        assert z.pow(0) == Complex(1.0, 0.0)
        assert z.pow(1) is z
        assert z.pow(2) == z.sqr()

    def test_pow_polar_matches_repeated_multiplication(self):
        z = Complex(0.6, 0.4)
        z3 = z.pow(3)
        expected = complex(0.6, 0.4) ** 3
        assert z3.re == pytest.approx(expected.real, rel=1e-12)
        assert z3.im == pytest.approx(expected.imag, rel=1e-12)

    def test_quad(self):
        assert Complex(1.0, 1.0).quad(2, Complex(0.5, -2.0)) == Complex(0.5, 0.0)

    def test_conjugate_and_abs(self):
        z = Complex(3.0, 4.0)
        assert z.conjugate() == Complex(3.0, -4.0)
        assert z.abs2() == 25.0
        assert z.abs() == 5.0

    def test_rotate_quarter_turn(self):
        z = Complex(1.0, 0.0).rotate(math.pi / 2)
        assert z.re == pytest.approx(0.0, abs=1e-15)
        assert z.im == pytest.approx(1.0)

    def test_cart_inverts_polar(self):
        z = Complex(-1.25, 0.5)
        back = cart(*z.polar())
        assert back.re == pytest.approx(z.re)
        assert back.im == pytest.approx(z.im)

    def test_immutable(self):
        z = Complex(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            z.re = 5.0  # type: ignore[misc]

    def test_to_string(self):
        assert Complex(-0.5, 0.0).to_string(3) == "-5.000e-01 + 0.000e+00i"

    @pytest.mark.parametrize("base,n", [(2.0, 0), (2.0, 1), (1.5, 5), (0.9, 7), (3.0, 10)])
    def test_powi(self, base, n):
        assert powi(base, n) == pytest.approx(base ** n)


class TestPixelToComplex:
    @pytest.mark.parametrize("zoom", [0.5, 0.75, 3.0, 1e6])
    def test_center_maps_to_offset(self, zoom):
        p = pixel_to_complex(640, 480, 320, 240, Complex(0.0, 0.0), zoom)
        assert p.re == pytest.approx(0.0, abs=1e-15)
        assert p.im == pytest.approx(0.0, abs=1e-15)

    def test_center_maps_to_pan_offset(self):
        p = pixel_to_complex(300, 200, 150, 100, Complex(-0.5, 0.25), 2.0)
        assert p == Complex(-0.5, 0.25)

    def test_aspect_and_orientation(self):
        # right edge of a 2:1 canvas reaches twice as far as the top edge
        right = pixel_to_complex(4, 2, 4, 1, Complex(0.0, 0.0), 1.0)
        top = pixel_to_complex(4, 2, 2, 0, Complex(0.0, 0.0), 1.0)
        assert right == Complex(2.0, 0.0)
        assert top == Complex(0.0, 1.0)

    def test_zoom_scales_span(self):
        p1 = pixel_to_complex(100, 100, 100, 50, Complex(0.0, 0.0), 1.0)
        p2 = pixel_to_complex(100, 100, 100, 50, Complex(0.0, 0.0), 4.0)
        assert p2.re == pytest.approx(p1.re / 4)

    def test_swap_axes_transposes(self):
        plain = pixel_to_complex(4, 6, 1, 5, Complex(0.0, 0.0), 1.0)
        swapped = pixel_to_complex(6, 4, 5, 1, Complex(0.0, 0.0), 1.0, swap_axes=True)
        assert swapped == plain
