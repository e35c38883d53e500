from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Optional

from fractalgen.complex import Complex
from fractalgen.iterate import DEFAULT_PERIOD, Mode, Variant, auto_iterations

MAX_ZOOM = 1e15
MAX_EXPONENT = 7
DEFAULT_OFFSET = {Mode.MANDELBROT: Complex(-0.5, 0.0), Mode.JULIA: Complex(0.0, 0.0)}


@dataclass(frozen=True)
class RenderParameters:
    """Per-frame render settings supplied by the caller.

    max_iter=None derives the iteration cap from the zoom level. Helpers return
    new instances; complex fields are immutable values and never shared mutably.
    """

    mode: Mode = Mode.MANDELBROT
    variant: Variant = Variant.STANDARD
    exponent: int = 2
    offset: Complex = Complex(-0.5, 0.0)
    julia: Complex = Complex(0.0, 0.0)
    zoom: float = 0.75
    radius: float = float(1 << 16)
    max_iter: Optional[int] = None
    swap_axes: bool = False
    theme: int = 0
    shift: float = 0.0
    period: int = DEFAULT_PERIOD
    radius2: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", Mode(self.mode))
        object.__setattr__(self, "variant", Variant(self.variant))
        if isinstance(self.exponent, bool) or not isinstance(self.exponent, int) or self.exponent < 2:
            raise ValueError(f"exponent must be an integer >= 2, got {self.exponent!r}")
        if not math.isfinite(self.zoom) or self.zoom <= 0:
            raise ValueError(f"zoom must be finite and > 0, got {self.zoom!r}")
        if not math.isfinite(self.radius) or self.radius <= 0:
            raise ValueError(f"radius must be finite and > 0, got {self.radius!r}")
        if self.max_iter is not None and int(self.max_iter) < 1:
            raise ValueError(f"max_iter must be >= 1, got {self.max_iter!r}")
        if not 0 <= self.shift <= 100:
            raise ValueError(f"shift must be within 0..100, got {self.shift!r}")
        if self.period < 0:
            raise ValueError(f"period must be >= 0, got {self.period!r}")
        if self.theme < 0:
            raise ValueError(f"theme must be >= 0, got {self.theme!r}")
        object.__setattr__(self, "radius2", self.radius * self.radius)

    def resolved_max_iter(self) -> int:
        if self.max_iter is None:
            return auto_iterations(self.zoom, self.mode)
        return int(self.max_iter)

    def zoomed(self, factor: float) -> RenderParameters:
        return replace(self, zoom=min(self.zoom * factor, MAX_ZOOM))

    def recentered(self, point: Complex) -> RenderParameters:
        return replace(self, offset=point)

    def toggled_mode(self, point: Optional[Complex] = None) -> RenderParameters:
        """Switch Mandelbrot <-> Julia; the clicked point becomes the Julia constant."""
        if self.mode == Mode.MANDELBROT:
            julia = point if point is not None else self.julia
            return replace(self, mode=Mode.JULIA, julia=julia, offset=DEFAULT_OFFSET[Mode.JULIA])
        return replace(self, mode=Mode.MANDELBROT, offset=DEFAULT_OFFSET[Mode.MANDELBROT])

    def next_variant(self) -> RenderParameters:
        return replace(self, variant=Variant((self.variant + 1) % len(Variant)))

    def next_exponent(self) -> RenderParameters:
        exponent = 2 if self.exponent >= MAX_EXPONENT else self.exponent + 1
        return replace(self, exponent=exponent)

    def spun(self, angle: float) -> RenderParameters:
        return replace(self, julia=self.julia.rotate(angle))

    def shifted(self, delta: float) -> RenderParameters:
        return replace(self, shift=(self.shift + delta) % 100)
