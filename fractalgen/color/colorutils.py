"""Colour conversion, gradient construction and gradient lookup."""

from __future__ import annotations

import enum
import math
import re
from typing import Sequence, Tuple

from fractalgen.util.logging_setup import get_logger

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

WHITE: RGBA = (255, 255, 255, 255)
BLACK: RGBA = (0, 0, 0, 255)
GRADIENT_LEVELS = (16, 32, 64, 128, 256, 512)

_HEX_RE = re.compile(r"^([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)


class Interpolation(enum.Enum):
    NONE = "none"
    LINEAR = "linear"


def interpolate(col1: Sequence[int], col2: Sequence[int], t: float) -> RGB:
    """Blend col1 towards col2 by the fractional part of t."""
    f = t - math.floor(t)
    return (
        int(math.floor((col2[0] - col1[0]) * f + col1[0])),
        int(math.floor((col2[1] - col1[1]) * f + col1[1])),
        int(math.floor((col2[2] - col1[2]) * f + col1[2])),
    )


def hsv_to_rgb(h: float, s: float, v: float) -> RGBA:
    """HSV in 0..1 to RGBA in 0..255."""
    v = int(v * 255)
    if s == 0.0:
        return (v, v, v, 255)
    i = int(h * 6.0)
    f = (h * 6.0) - i
    p = int(v * (1.0 - s))
    q = int(v * (1.0 - s * f))
    t = int(v * (1.0 - s * (1.0 - f)))
    i %= 6
    if i == 0:
        return (v, t, p, 255)
    if i == 1:
        return (q, v, p, 255)
    if i == 2:
        return (p, v, t, 255)
    if i == 3:
        return (p, q, v, 255)
    if i == 4:
        return (t, p, v, 255)
    return (v, p, q, 255)


def make_gradient(
    palette: Sequence[Sequence[int]],
    levels: int,
    mode: Interpolation = Interpolation.LINEAR,
    shift: float = 0,
) -> Tuple[RGB, ...]:
    """Expand a palette of key colours into a cyclic gradient of `levels` entries.

    Each key colour spans levels/len(palette) entries, either held flat or blended
    into the next key colour. `shift` offsets the walk in key-colour units. A
    palette with at least `levels` entries is returned as is.
    """
    if not palette:
        raise ValueError("palette must contain at least one colour")
    if levels < 1:
        raise ValueError(f"levels must be >= 1, got {levels}")
    clen = len(palette)
    if clen >= levels:
        return tuple(tuple(int(c) for c in col[:3]) for col in palette)

    step = clen / levels
    gradient = []
    for i in range(levels):
        pos = i * step + shift
        cidx = int(math.floor(pos))
        col1 = palette[cidx % clen]
        if mode == Interpolation.NONE:
            gradient.append((int(col1[0]), int(col1[1]), int(col1[2])))
        else:
            col2 = palette[(cidx + 1) % clen]
            gradient.append(interpolate(col1, col2, pos))
    return tuple(gradient)


def lookup_color(
    ni: float,
    gradient: Sequence[Sequence[int]],
    shift: float = 0,
    interp: bool = True,
) -> RGBA:
    """Colour for normalized iteration count `ni` from a cyclic gradient.

    Malformed input (e.g. a NaN count) yields white and a logged warning rather
    than an exception.
    """
    try:
        n = len(gradient)
        sh = math.ceil(shift * n / 100)
        base = math.floor(ni) + sh
        col1 = gradient[base % n]
        if not interp:
            return (int(col1[0]), int(col1[1]), int(col1[2]), 255)
        col2 = gradient[(base + 1) % n]
        r, g, b = interpolate(col1, col2, ni)
        return (r, g, b, 255)
    except (ValueError, OverflowError, TypeError, IndexError, ZeroDivisionError) as e:
        get_logger().warning("Gradient lookup failed ni=%s shift=%s: %s", ni, shift, e)
        return WHITE


def hex_to_rgb(value: str) -> RGB:
    """'#rrggbb', 'rrggbb' or '#rgb' to an (r, g, b) triple."""
    hexstr = value.strip().replace("#", "")
    if len(hexstr) == 3:
        hexstr = "".join(ch * 2 for ch in hexstr)
    m = _HEX_RE.match(hexstr)
    if not m:
        raise ValueError(f"Invalid hex colour: {value!r}")
    return (int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    for v in (r, g, b):
        if not 0 <= v <= 255:
            raise ValueError(f"Colour channel out of range: {v}")
    return f"#{r:02x}{g:02x}{b:02x}"
