from __future__ import annotations

import enum
import math
from typing import NamedTuple, Tuple

from fractalgen.complex import Complex, powi

MIN_ITER_MANDELBROT = 100
MIN_ITER_JULIA = 200
DEFAULT_PERIOD = 20


class Mode(enum.IntEnum):
    MANDELBROT = 0
    JULIA = 1

    @property
    def label(self) -> str:
        return self.name.title()


class Variant(enum.IntEnum):
    STANDARD = 0
    BURNING_SHIP = 1
    TRICORN = 2

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


class EscapeResult(NamedTuple):
    iterations: int
    # |z|**2 at the last bailout test
    magnitude2: float


def _step_polar(zre: float, zim: float, n: int, cre: float, cim: float) -> Tuple[float, float]:
    r = powi(math.sqrt(zre * zre + zim * zim), n)
    theta = n * math.atan2(zim, zre)
    return r * math.cos(theta) + cre, r * math.sin(theta) + cim


def escape_time(
    point: Complex,
    julia: Complex,
    exponent: int,
    max_iter: int,
    radius2: float,
    mode: Mode = Mode.MANDELBROT,
    variant: Variant = Variant.STANDARD,
    period: int = DEFAULT_PERIOD,
) -> EscapeResult:
    """Iterate z -> z**exponent + c for one plane point.

    Returns the iteration at which |z|**2 first exceeded radius2, or max_iter when
    the orbit stayed bounded. With period > 0 the orbit is sampled every `period`
    iterations and an exact repeat of the sample is taken as a bound orbit.
    """
    if mode == Mode.JULIA:
        cre, cim = julia.re, julia.im
        zre, zim = point.re, point.im
    else:
        cre, cim = point.re, point.im
        zre, zim = 0.0, 0.0

    burning_ship = variant == Variant.BURNING_SHIP
    tricorn = variant == Variant.TRICORN
    lastre = 0.0
    lastim = 0.0
    per = 0
    za = zre * zre + zim * zim

    i = 0
    while i < max_iter:
        if burning_ship:
            zre = abs(zre)
            zim = -abs(zim)
        elif tricorn:
            zim = -zim

        zre2 = zre * zre
        zim2 = zim * zim
        za = zre2 + zim2
        if za > radius2:
            break

        if exponent == 2:
            zim = 2.0 * zre * zim + cim
            zre = zre2 - zim2 + cre
        else:
            zre, zim = _step_polar(zre, zim, exponent, cre, cim)

        if period:
            if zre == lastre and zim == lastim:
                i = max_iter
                break
            per += 1
            if per >= period:
                per = 0
                lastre = zre
                lastim = zim
        i += 1

    return EscapeResult(i, za)


def auto_iterations(zoom: float, mode: Mode) -> int:
    """Iteration cap that grows with the log of the zoom level, floored per mode."""
    floor_iter = MIN_ITER_JULIA if mode == Mode.JULIA else MIN_ITER_MANDELBROT
    return max(floor_iter, int(abs(500 * math.log(1 / math.sqrt(zoom)))))
