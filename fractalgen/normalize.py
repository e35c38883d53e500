from __future__ import annotations

import math

from fractalgen.iterate import EscapeResult


def normalize(result: EscapeResult, radius: float, exponent: int) -> float:
    """Continuous escape count for an escaped point.

    nu = log(log|z|**2 / log(radius)) / log(exponent); returns iterations + 1 - nu.
    Only meaningful for escaped points. Degenerate radius/exponent combinations
    produce NaN instead of raising so the colour lookup can substitute its
    sentinel.
    """
    try:
        lzn = math.log(result.magnitude2)
        nu = math.log(lzn / math.log(radius)) / math.log(exponent)
    except (ValueError, ZeroDivisionError):
        return math.nan
    return result.iterations + 1 - nu
