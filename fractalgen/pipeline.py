from __future__ import annotations

import os
from typing import Any, Dict, Iterator, List, Optional

from tqdm import tqdm

from fractalgen.color.themes import ThemeRegistry
from fractalgen.iterate import Mode
from fractalgen.params import MAX_ZOOM, RenderParameters
from fractalgen.render import Renderer, to_image
from fractalgen.util.logging_setup import get_logger


def zoom_sequence(params: RenderParameters, zoom_inc: float, frames: int) -> Iterator[RenderParameters]:
    """Successive frames zooming in by `zoom_inc`; stops once zoom reaches MAX_ZOOM."""
    current = params
    for _ in range(frames):
        yield current
        if current.zoom >= MAX_ZOOM:
            return
        current = current.zoomed(zoom_inc)


def spin_sequence(params: RenderParameters, spin_inc: float, frames: int) -> Iterator[RenderParameters]:
    """Successive frames rotating the Julia constant by spin_inc/100 radians."""
    if params.mode != Mode.JULIA:
        raise ValueError("Julia spin requires Julia mode.")
    current = params
    for _ in range(frames):
        yield current
        current = current.spun(spin_inc / 100)


def _save_frame(renderer: Renderer, frames_dir: str, frame_index: int) -> str:
    path = os.path.join(frames_dir, f"frame_{frame_index:06d}.png")
    to_image(renderer.latest).save(path, format="PNG", optimize=True)
    return path


def render_sequence(
    *,
    sequence: Iterator[RenderParameters],
    width: int,
    height: int,
    frames_dir: str,
    registry: ThemeRegistry,
    workers: int = 1,
    total: Optional[int] = None,
    log_queue=None,
) -> Dict[str, Any]:
    """Render each parameter set and write numbered PNG frames into frames_dir."""
    logger = get_logger()
    os.makedirs(frames_dir, exist_ok=True)
    renderer = Renderer(registry, workers=workers, log_queue=log_queue, log_level=logger.getEffectiveLevel())

    paths: List[str] = []
    for i, params in enumerate(tqdm(sequence, total=total, desc="frames", unit="frame")):
        result = renderer.render(width, height, params)
        path = _save_frame(renderer, frames_dir, i)
        paths.append(path)
        logger.info("Saved frame %s -> %s (zoom=%.3e iter=%s %.0fms)",
                    i, path, params.zoom, result.max_iter, result.duration_ms)

    logger.info("Sequence complete frames_dir=%s frames=%s", frames_dir, len(paths))
    return {"frames_dir": frames_dir, "frames": len(paths), "width": width, "height": height}
