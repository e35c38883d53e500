"""Colour themes.

A theme is either a procedural rule computed straight from the escape data, or a
lookup into one of the registered gradients. The registry grows as gradients are
added and never drops or reorders entries, so a theme index stays valid for the
whole session.
"""

from __future__ import annotations

import enum
import math
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from fractalgen.color.colorutils import (
    BLACK,
    RGB,
    RGBA,
    WHITE,
    Interpolation,
    hsv_to_rgb,
    lookup_color,
    make_gradient,
)
from fractalgen.color.palettes import BLUE_BROWN_16, CET_16, RAINBOW_256, TROPICAL_16
from fractalgen.iterate import EscapeResult
from fractalgen.normalize import normalize
from fractalgen.util.logging_setup import get_logger

SATURATION = 0.75
BANDS = (0, 32, 96, 192)


class ProceduralRule(enum.Enum):
    BASIC_HUE = "basic_hue"
    NORMALIZED_HUE = "normalized_hue"
    SQRT_HUE = "sqrt_hue"
    SIN_SQRT_HUE = "sin_sqrt_hue"
    BANDED_RGB = "banded_rgb"
    GRAYSCALE = "grayscale"
    TWO_COLOR = "two_color"


@dataclass(frozen=True)
class Procedural:
    rule: ProceduralRule


@dataclass(frozen=True)
class GradientIndexed:
    gradient_id: int
    interpolate: bool = True


ThemeKind = Union[Procedural, GradientIndexed]


def _basic_hue(i: int, ni: Optional[float], max_iter: int, shift: float) -> RGBA:
    return hsv_to_rgb(((i / max_iter) + shift / 100) % 1, SATURATION, 1.0)


def _normalized_hue(i: int, ni: Optional[float], max_iter: int, shift: float) -> RGBA:
    return hsv_to_rgb(((ni / max_iter) + shift / 100) % 1, SATURATION, 1.0)


def _sqrt_hue(i: int, ni: Optional[float], max_iter: int, shift: float) -> RGBA:
    return hsv_to_rgb(((ni / math.sqrt(max_iter)) + shift / 100) % 1, SATURATION, 1.0)


def _sin_sqrt_hue(i: int, ni: Optional[float], max_iter: int, shift: float) -> RGBA:
    steps = 1 + shift / 100
    h = 1 - math.sin(ni / math.sqrt(max_iter) * steps + 1) / 2
    return hsv_to_rgb(h, SATURATION, 1.0)


def _banded_rgb(i: int, ni: Optional[float], max_iter: int, shift: float) -> RGBA:
    return (BANDS[(i // 4) % 4], BANDS[i % 4], BANDS[(i // 16) % 4], 255)


def _grayscale(i: int, ni: Optional[float], max_iter: int, shift: float) -> RGBA:
    v = int(((256 * i / max_iter) + shift) % 255)
    return (v, v, v, 255)


def _two_color(i: int, ni: Optional[float], max_iter: int, shift: float) -> RGBA:
    hue = shift / 100
    if i >= max_iter:
        hue += 0.5
    return hsv_to_rgb(hue % 1, SATURATION, 1.0)


_RULES: Dict[ProceduralRule, Callable[[int, Optional[float], int, float], RGBA]] = {
    ProceduralRule.BASIC_HUE: _basic_hue,
    ProceduralRule.NORMALIZED_HUE: _normalized_hue,
    ProceduralRule.SQRT_HUE: _sqrt_hue,
    ProceduralRule.SIN_SQRT_HUE: _sin_sqrt_hue,
    ProceduralRule.BANDED_RGB: _banded_rgb,
    ProceduralRule.GRAYSCALE: _grayscale,
    ProceduralRule.TWO_COLOR: _two_color,
}

_SMOOTH_RULES = frozenset({ProceduralRule.NORMALIZED_HUE, ProceduralRule.SQRT_HUE, ProceduralRule.SIN_SQRT_HUE})


@dataclass(frozen=True)
class Theme:
    name: str
    kind: ThemeKind
    gradient: Optional[Tuple[RGB, ...]] = None

    def color(self, result: EscapeResult, max_iter: int, shift: float, radius: float, exponent: int) -> RGBA:
        """Colour one pixel. Arithmetic faults give white rather than an exception."""
        i = result.iterations
        kind = self.kind
        if i >= max_iter and not (isinstance(kind, Procedural) and kind.rule == ProceduralRule.TWO_COLOR):
            return BLACK

        if isinstance(kind, GradientIndexed):
            return lookup_color(normalize(result, radius, exponent), self.gradient, shift, kind.interpolate)

        ni = None
        if kind.rule in _SMOOTH_RULES:
            ni = normalize(result, radius, exponent)
        try:
            return _RULES[kind.rule](i, ni, max_iter, shift)
        except (ValueError, OverflowError, ZeroDivisionError) as e:
            get_logger().warning("Theme %s failed i=%s ni=%s: %s", self.name, i, ni, e)
            return WHITE


class ThemeRegistry:
    """Session-scoped, append-only collection of gradients and themes."""

    def __init__(self, *, defaults: bool = True) -> None:
        self._lock = threading.Lock()
        self._gradients: List[Tuple[RGB, ...]] = []
        self._themes: List[Theme] = []
        if defaults:
            self._install_defaults()

    def _install_defaults(self) -> None:
        self.add_gradient("Blue/Brown Cyclic 16", BLUE_BROWN_16, 16, Interpolation.LINEAR)
        self.add_gradient("Tropical Cyclic 256", TROPICAL_16, 256, Interpolation.LINEAR)
        self.add_gradient("CET Cyclic 256", CET_16, 256, Interpolation.LINEAR)
        self.add_gradient("Rainbow Cyclic 256", RAINBOW_256, 256, Interpolation.LINEAR)
        for name, rule in (
            ("Basic Hue", ProceduralRule.BASIC_HUE),
            ("Normalized Hue", ProceduralRule.NORMALIZED_HUE),
            ("Sqrt Maxiter Hue", ProceduralRule.SQRT_HUE),
            ("Sin Sqrt Maxiter Hue", ProceduralRule.SIN_SQRT_HUE),
            ("Banded RGB", ProceduralRule.BANDED_RGB),
            ("Grayscale", ProceduralRule.GRAYSCALE),
            ("Two Color", ProceduralRule.TWO_COLOR),
        ):
            self.add_procedural(name, rule)

    def add_procedural(self, name: str, rule: ProceduralRule) -> int:
        with self._lock:
            self._themes.append(Theme(name, Procedural(rule)))
            return len(self._themes) - 1

    def add_gradient(
        self,
        name: str,
        palette: Sequence[Sequence[int]],
        levels: int = 256,
        mode: Interpolation = Interpolation.LINEAR,
        *,
        shift: float = 0,
        interpolate: bool = True,
    ) -> int:
        """Build a gradient from `palette`, register it as a new theme and return the theme index."""
        gradient = make_gradient(palette, levels, mode, shift)
        with self._lock:
            self._gradients.append(gradient)
            gid = len(self._gradients) - 1
            self._themes.append(Theme(name, GradientIndexed(gid, interpolate), gradient))
            index = len(self._themes) - 1
        get_logger().info("Registered gradient theme %s (#%s) levels=%s", name, index, len(gradient))
        return index

    def get(self, index: int) -> Theme:
        with self._lock:
            if not 0 <= index < len(self._themes):
                raise IndexError(f"No theme #{index} (have {len(self._themes)})")
            return self._themes[index]

    def gradient(self, gradient_id: int) -> Tuple[RGB, ...]:
        with self._lock:
            return self._gradients[gradient_id]

    def names(self) -> List[str]:
        with self._lock:
            return [t.name for t in self._themes]

    def __len__(self) -> int:
        with self._lock:
            return len(self._themes)
