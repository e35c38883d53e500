import json
import math
from typing import Any, Dict, List, Optional

from fractalgen.color.colorutils import Interpolation, hex_to_rgb
from fractalgen.color.themes import ThemeRegistry
from fractalgen.complex import Complex
from fractalgen.iterate import DEFAULT_PERIOD, Mode, Variant
from fractalgen.params import RenderParameters

DEFAULTS: Dict[str, Any] = {
    "width": 600,
    "height": 400,
    "mode": "mandelbrot",
    "variant": "standard",
    "exponent": 2,
    "offset": [-0.5, 0.0],
    "julia": [0.0, 0.0],
    "zoom": 0.75,
    "radius": float(1 << 16),
    "max_iter": None,
    "swap_axes": False,
    "theme": 0,
    "shift": 0,
    "period": DEFAULT_PERIOD,
    "frames_dir": "frames",
    "output_video": "fractal.mp4",
    "fps": 30,
    "zoom_inc": 1.5,
    "spin_inc": 1.0,
    "workers": 1,
    "gradients": [],
}


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    if not config_path:
        return dict(DEFAULTS)
    with open(config_path, "r", encoding="utf-8") as f:
        cfg = json.load(f)
    if not isinstance(cfg, dict):
        raise ValueError("Config JSON must be an object.")
    out = dict(DEFAULTS)
    out.update(cfg)
    return out


def _enum_value(enum_cls, value: Any, key: str):
    if isinstance(value, str):
        try:
            return enum_cls[value.strip().upper().replace(" ", "_").replace("-", "_")]
        except KeyError:
            raise ValueError(f"Unknown {key}: {value!r}") from None
    try:
        return enum_cls(int(value))
    except (TypeError, ValueError):
        raise ValueError(f"Unknown {key}: {value!r}") from None


def _integer(value: Any, key: str) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be an integer, got {value!r}") from None


def _point(value: Any, key: str) -> List[float]:
    if not (isinstance(value, (list, tuple)) and len(value) == 2):
        raise ValueError(f"{key} must be [re, im].")
    re, im = float(value[0]), float(value[1])
    if not (math.isfinite(re) and math.isfinite(im)):
        raise ValueError(f"{key} must be finite.")
    return [re, im]


def _gradient_spec(entry: Any) -> Dict[str, Any]:
    if not isinstance(entry, dict) or "palette" not in entry:
        raise ValueError("gradients entries must be objects with a palette.")
    palette = [hex_to_rgb(c) if isinstance(c, str) else tuple(int(v) for v in c) for c in entry["palette"]]
    if not palette:
        raise ValueError("gradient palette must not be empty.")
    interpolate = bool(entry.get("interpolate", True))
    mode = Interpolation.LINEAR if interpolate else Interpolation.NONE
    return {
        "name": str(entry.get("name", "Custom")),
        "palette": palette,
        "levels": int(entry.get("levels", 256)),
        "mode": mode,
        "interpolate": interpolate,
    }


def normalise_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    width = int(cfg["width"])
    height = int(cfg["height"])
    if width <= 0 or height <= 0:
        raise ValueError("width/height must be positive.")

    out = dict(cfg)
    out["width"] = width
    out["height"] = height
    out["mode"] = _enum_value(Mode, cfg["mode"], "mode")
    out["variant"] = _enum_value(Variant, cfg["variant"], "variant")
    out["exponent"] = _integer(cfg["exponent"], "exponent")
    out["offset"] = _point(cfg["offset"], "offset")
    out["julia"] = _point(cfg["julia"], "julia")
    out["zoom"] = float(cfg["zoom"])
    out["radius"] = float(cfg["radius"])
    out["max_iter"] = None if cfg.get("max_iter") is None else _integer(cfg["max_iter"], "max_iter")
    out["swap_axes"] = bool(cfg.get("swap_axes", False))
    out["theme"] = int(cfg.get("theme", 0))
    out["shift"] = float(cfg.get("shift", 0))
    out["period"] = _integer(cfg.get("period", DEFAULT_PERIOD), "period")
    out["frames_dir"] = str(cfg.get("frames_dir", "frames"))
    out["output_video"] = str(cfg.get("output_video", "fractal.mp4"))
    out["fps"] = int(cfg.get("fps", 30))
    out["zoom_inc"] = float(cfg.get("zoom_inc", 1.5))
    out["spin_inc"] = float(cfg.get("spin_inc", 1.0))
    out["workers"] = max(1, int(cfg.get("workers", 1)))
    out["gradients"] = [_gradient_spec(g) for g in cfg.get("gradients", [])]
    if out["zoom_inc"] <= 0:
        raise ValueError("zoom_inc must be > 0.")
    return out


def params_from_config(cfg: Dict[str, Any]) -> RenderParameters:
    """Build validated render parameters from a normalised config."""
    return RenderParameters(
        mode=cfg["mode"],
        variant=cfg["variant"],
        exponent=cfg["exponent"],
        offset=Complex(*cfg["offset"]),
        julia=Complex(*cfg["julia"]),
        zoom=cfg["zoom"],
        radius=cfg["radius"],
        max_iter=cfg["max_iter"],
        swap_axes=cfg["swap_axes"],
        theme=cfg["theme"],
        shift=cfg["shift"],
        period=cfg["period"],
    )


def registry_from_config(cfg: Dict[str, Any]) -> ThemeRegistry:
    """Default themes plus any user gradients from the config, in order."""
    registry = ThemeRegistry()
    for g in cfg.get("gradients", []):
        registry.add_gradient(g["name"], g["palette"], g["levels"], g["mode"], interpolate=g["interpolate"])
    return registry
