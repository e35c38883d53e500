from __future__ import annotations

import argparse
from typing import Optional

from fractalgen.color.colorutils import GRADIENT_LEVELS, Interpolation, hex_to_rgb, make_gradient, rgb_to_hex
from fractalgen.config import load_config, normalise_config, params_from_config, registry_from_config
from fractalgen.pipeline import render_sequence, spin_sequence, zoom_sequence
from fractalgen.render import Renderer, RenderCancelled, to_image
from fractalgen.util.logging_setup import LEVELS, get_logger, level_from_name, log_session
from fractalgen.video.opencv_writer import encode_with_opencv


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="fractalgen", description="Escape-time fractal renderer (Mandelbrot/Julia).")
    p.add_argument("--config", type=str, default=None, help="Path to config JSON. If omitted, uses defaults.")
    p.add_argument("--log-level", type=str, default="INFO", choices=list(LEVELS), help="Log level.")
    p.add_argument("--log-file", type=str, default="", help="Rotating log file path. Empty disables file logging.")
    sub = p.add_subparsers(dest="cmd", required=True)

    r = sub.add_parser("render", help="Render a single frame to PNG.")
    r.add_argument("--output", type=str, default="fractal.png", help="Output PNG path.")
    r.add_argument("--theme", type=int, default=None, help="Theme index (overrides config).")
    r.add_argument("--shift", type=float, default=None, help="Colour shift 0-100 (overrides config).")

    a = sub.add_parser("animate", help="Render a zoom or Julia-spin frame sequence.")
    a.add_argument("--kind", type=str, default="zoom", choices=["zoom", "spin"], help="Animation kind.")
    a.add_argument("--frames", type=int, default=60, help="Number of frames.")
    a.add_argument("--frames-dir", type=str, default=None, help="Override frames_dir from config.")

    e = sub.add_parser("encode", help="Encode frames into an MP4 video using OpenCV.")
    e.add_argument("--input-dir", type=str, default=None, help="Frames directory (defaults to config.frames_dir).")
    e.add_argument("--output", type=str, default=None, help="Output MP4 file (defaults to config.output_video).")
    e.add_argument("--fps", type=int, default=None, help="Frames per second (defaults to config.fps).")

    g = sub.add_parser("gradient", help="Expand a palette of hex colours into a gradient.")
    g.add_argument("palette", nargs="+", help="Key colours, e.g. '#421e0f' '#19071a'.")
    g.add_argument("--levels", type=int, default=256, choices=list(GRADIENT_LEVELS), help="Gradient length.")
    g.add_argument("--stepped", action="store_true", help="Hold each key colour instead of blending.")
    g.add_argument("--shift", type=float, default=0, help="Cyclic shift in key-colour units.")

    return p


def _cmd_render(args, cfg, queue, log_level) -> int:
    logger = get_logger()
    if args.theme is not None:
        cfg["theme"] = args.theme
    if args.shift is not None:
        cfg["shift"] = args.shift
    params = params_from_config(cfg)
    renderer = Renderer(registry_from_config(cfg), workers=cfg["workers"], log_queue=queue, log_level=log_level)
    result = renderer.render(cfg["width"], cfg["height"], params)
    to_image(result).save(args.output, format="PNG")
    logger.info("Frame written: %s", args.output)
    for key, value in renderer.status(params).items():
        print(f"{key}: {value}")
    return 0


def _cmd_animate(args, cfg, queue) -> int:
    params = params_from_config(cfg)
    if args.kind == "spin":
        sequence = spin_sequence(params, cfg["spin_inc"], args.frames)
    else:
        sequence = zoom_sequence(params, cfg["zoom_inc"], args.frames)
    render_sequence(
        sequence=sequence,
        width=cfg["width"],
        height=cfg["height"],
        frames_dir=args.frames_dir or cfg["frames_dir"],
        registry=registry_from_config(cfg),
        workers=cfg["workers"],
        total=args.frames,
        log_queue=queue,
    )
    return 0


def _cmd_encode(args, cfg) -> int:
    encode_with_opencv(
        input_dir=args.input_dir or cfg["frames_dir"],
        output_file=args.output or cfg["output_video"],
        fps=args.fps or cfg["fps"],
    )
    return 0


def _cmd_gradient(args) -> int:
    palette = [hex_to_rgb(c) for c in args.palette]
    mode = Interpolation.NONE if args.stepped else Interpolation.LINEAR
    for col in make_gradient(palette, args.levels, mode, args.shift):
        print(rgb_to_hex(*col))
    return 0


def main(argv: Optional[list] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    log_level = level_from_name(args.log_level)
    log_file = args.log_file.strip() or None
    logger = get_logger()

    with log_session(level=log_level, log_file=log_file) as queue:
        try:
            if args.cmd == "gradient":
                return _cmd_gradient(args)
            cfg = normalise_config(load_config(args.config))
            if args.cmd == "render":
                return _cmd_render(args, cfg, queue, log_level)
            if args.cmd == "animate":
                return _cmd_animate(args, cfg, queue)
            if args.cmd == "encode":
                return _cmd_encode(args, cfg)
            raise RuntimeError("Unknown command.")
        except ValueError as e:
            logger.error("Invalid configuration: %s", e)
            return 2
        except RenderCancelled as e:
            logger.warning("%s", e)
            return 1


if __name__ == "__main__":
    raise SystemExit(main())
