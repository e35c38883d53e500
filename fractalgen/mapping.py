from __future__ import annotations

from fractalgen.complex import Complex


def pixel_to_complex(
    width: int,
    height: int,
    x: float,
    y: float,
    offset: Complex,
    zoom: float,
    swap_axes: bool = False,
) -> Complex:
    """Map pixel (x, y) on a width x height canvas to the complex plane.

    The vertical span is 2/zoom; the horizontal span is scaled by width/height so
    pixels stay square. With swap_axes the canvas is transposed before mapping.
    """
    if swap_axes:
        x, y = y, x
        width, height = height, width
    re = offset.re + (width / height) * (x - width / 2) / (zoom * width / 2)
    im = offset.im - (y - height / 2) / (zoom * height / 2)
    return Complex(re, im)
