from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
from PIL import Image

from fractalgen.color.themes import Theme, ThemeRegistry
from fractalgen.iterate import escape_time
from fractalgen.mapping import pixel_to_complex
from fractalgen.params import RenderParameters
from fractalgen.util.logging_setup import get_logger, logging_initialiser

_G: Dict[str, Any] = {}


class RenderCancelled(Exception):
    """Raised when a render is superseded before it completes."""


@dataclass(frozen=True)
class RenderResult:
    pixels: np.ndarray  # (height, width, 4) uint8 RGBA
    iterations: np.ndarray  # (height, width) int32
    max_iter: int
    duration_ms: float

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def tobytes(self) -> bytes:
        """Row-major RGBA buffer; pixel (x, y) starts at byte (y * width + x) * 4."""
        return self.pixels.tobytes()


def _render_rows(
    y0: int,
    y1: int,
    width: int,
    height: int,
    params: RenderParameters,
    theme: Theme,
    max_iter: int,
    cancel: Optional[threading.Event] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    band = np.zeros((y1 - y0, width, 4), dtype=np.uint8)
    iters = np.zeros((y1 - y0, width), dtype=np.int32)
    offset, zoom, swap = params.offset, params.zoom, params.swap_axes
    julia, exponent, radius2 = params.julia, params.exponent, params.radius2
    mode, variant, period = params.mode, params.variant, params.period
    radius, shift = params.radius, params.shift

    for yi, y in enumerate(range(y0, y1)):
        if cancel is not None and cancel.is_set():
            raise RenderCancelled(f"Render cancelled at row {y}")
        row = band[yi]
        for x in range(width):
            point = pixel_to_complex(width, height, x, y, offset, zoom, swap)
            result = escape_time(point, julia, exponent, max_iter, radius2, mode, variant, period)
            iters[yi, x] = result.iterations
            row[x] = theme.color(result, max_iter, shift, radius, exponent)
    return band, iters


def render_image(
    width: int,
    height: int,
    params: RenderParameters,
    theme: Theme,
    *,
    cancel: Optional[threading.Event] = None,
) -> RenderResult:
    """Render one frame on the calling thread into a fresh buffer."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas must be positive, got {width}x{height}")
    start = time.perf_counter()
    max_iter = params.resolved_max_iter()
    pixels, iters = _render_rows(0, height, width, height, params, theme, max_iter, cancel)
    duration_ms = (time.perf_counter() - start) * 1000.0
    get_logger().debug("Rendered %sx%s iter=%s in %.1fms", width, height, max_iter, duration_ms)
    return RenderResult(pixels, iters, max_iter, duration_ms)


def _init_worker(width, height, params, theme, max_iter, log_queue, log_level):
    _G["width"] = width
    _G["height"] = height
    _G["params"] = params
    _G["theme"] = theme
    _G["max_iter"] = max_iter
    if log_queue is not None:
        logging_initialiser(log_queue, log_level)


def _render_band(y0_y1: Tuple[int, int]):
    y0, y1 = y0_y1
    band, iters = _render_rows(
        y0, y1, _G["width"], _G["height"], _G["params"], _G["theme"], _G["max_iter"]
    )
    return y0, band, iters


def render_parallel(
    width: int,
    height: int,
    params: RenderParameters,
    theme: Theme,
    *,
    workers: Optional[int] = None,
    band_height: int = 32,
    cancel: Optional[threading.Event] = None,
    log_queue=None,
    log_level: int = logging.INFO,
) -> RenderResult:
    """Render one frame with row bands spread over a process pool.

    Bands write disjoint rows of a fresh buffer, so results are copied in as they
    arrive. A set `cancel` event abandons outstanding bands.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas must be positive, got {width}x{height}")
    logger = get_logger()
    start = time.perf_counter()
    max_iter = params.resolved_max_iter()

    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    iters = np.zeros((height, width), dtype=np.int32)

    bands: List[Tuple[int, int]] = []
    y = 0
    while y < height:
        y1 = min(height, y + band_height)
        bands.append((y, y1))
        y = y1

    logger.info("Parallel render start %sx%s iter=%s bands=%s", width, height, max_iter, len(bands))
    pool = ProcessPoolExecutor(
        max_workers=workers,
        initializer=_init_worker,
        initargs=(width, height, params, theme, max_iter, log_queue, log_level),
    )
    try:
        for y0, band, band_iters in pool.map(_render_band, bands):
            if cancel is not None and cancel.is_set():
                raise RenderCancelled(f"Render cancelled after row {y0}")
            pixels[y0:y0 + band.shape[0]] = band
            iters[y0:y0 + band.shape[0]] = band_iters
    finally:
        pool.shutdown(wait=True, cancel_futures=True)

    duration_ms = (time.perf_counter() - start) * 1000.0
    logger.info("Parallel render done in %.1fms", duration_ms)
    return RenderResult(pixels, iters, max_iter, duration_ms)


class Renderer:
    """Session render context.

    Owns the theme registry. A new request cancels the one in flight, and only
    the newest completed frame is published to `latest`.
    """

    def __init__(
        self,
        registry: Optional[ThemeRegistry] = None,
        *,
        workers: int = 1,
        log_queue=None,
        log_level: int = logging.INFO,
    ) -> None:
        self.registry = registry if registry is not None else ThemeRegistry()
        self.workers = workers
        self.log_queue = log_queue
        self.log_level = log_level
        self.latest: Optional[RenderResult] = None
        self._lock = threading.Lock()
        self._generation = 0
        self._cancel: Optional[threading.Event] = None

    def cancel(self) -> None:
        with self._lock:
            if self._cancel is not None:
                self._cancel.set()

    def render(self, width: int, height: int, params: RenderParameters) -> RenderResult:
        cancel = threading.Event()
        with self._lock:
            if self._cancel is not None:
                self._cancel.set()
            self._cancel = cancel
            self._generation += 1
            generation = self._generation

        theme = self.registry.get(params.theme)
        if self.workers > 1:
            result = render_parallel(
                width, height, params, theme, workers=self.workers, cancel=cancel,
                log_queue=self.log_queue, log_level=self.log_level,
            )
        else:
            result = render_image(width, height, params, theme, cancel=cancel)

        with self._lock:
            if generation != self._generation or cancel.is_set():
                raise RenderCancelled("Render superseded by a newer request")
            self.latest = result
            self._cancel = None
        return result

    def status(self, params: RenderParameters) -> Dict[str, str]:
        if self.latest is None:
            raise RuntimeError("No frame rendered yet.")
        return status_summary(params, self.latest, self.registry.get(params.theme).name)


def status_summary(params: RenderParameters, result: RenderResult, theme_name: str) -> Dict[str, str]:
    """Key/value summary of a rendered frame for display."""
    return {
        "offset": params.offset.to_string(6),
        "julia": params.julia.to_string(6),
        "zoom": f"{params.zoom:.3e}",
        "exponent": str(params.exponent),
        "iterations": str(result.max_iter),
        "mode": params.mode.label,
        "variant": params.variant.label,
        "theme": f"{theme_name}+{params.shift:g}",
        "size": f"{result.width}x{result.height}",
        "duration": f"{result.duration_ms:.0f}ms",
    }


def to_image(result: RenderResult) -> Image.Image:
    return Image.fromarray(result.pixels)
