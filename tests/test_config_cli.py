"""Tests for JSON config handling and the command line entry point."""

import json
import logging

import pytest
from PIL import Image

from fractalgen import cli
from fractalgen.color.colorutils import Interpolation
from fractalgen.config import (
    DEFAULTS,
    load_config,
    normalise_config,
    params_from_config,
    registry_from_config,
)
from fractalgen.iterate import Mode, Variant
from fractalgen.params import RenderParameters
from fractalgen.util.logging_setup import get_logger


@pytest.fixture(autouse=True)
def _restore_logger():
    yield
    logger = get_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def _write_config(tmp_path, **values):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(values), encoding="utf-8")
    return str(path)


class TestConfig:
    def test_defaults(self):
        cfg = normalise_config(load_config(None))
        assert cfg["mode"] is Mode.MANDELBROT
        assert cfg["variant"] is Variant.STANDARD
        assert cfg["workers"] == 1
        assert params_from_config(cfg) == RenderParameters()

    def test_file_overrides_defaults(self, tmp_path):
        cfg = load_config(_write_config(tmp_path, zoom=3.0, mode="julia"))
        assert cfg["zoom"] == 3.0
        assert cfg["width"] == DEFAULTS["width"]

    def test_non_object_rejected(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(str(path))

    @pytest.mark.parametrize("value,expected", [
        ("burning ship", Variant.BURNING_SHIP),
        ("Burning-Ship", Variant.BURNING_SHIP),
        ("tricorn", Variant.TRICORN),
        (0, Variant.STANDARD),
    ])
    def test_variant_names(self, value, expected):
        cfg = normalise_config(dict(DEFAULTS, variant=value))
        assert cfg["variant"] is expected

    @pytest.mark.parametrize("override", [
        {"mode": "spiral"},
        {"offset": [1.0]},
        {"julia": "0,0"},
        {"width": 0},
        {"zoom_inc": 0},
        {"exponent": 2.9},
        {"exponent": "2.5"},
        {"exponent": True},
        {"max_iter": 10.5},
        {"gradients": [{"name": "x"}]},
        {"gradients": [{"palette": ["#zzzzzz"]}]},
    ])
    def test_invalid(self, override):
        with pytest.raises(ValueError):
            normalise_config(dict(DEFAULTS, **override))

    def test_integral_float_exponent_accepted(self):
        assert normalise_config(dict(DEFAULTS, exponent=3.0))["exponent"] == 3

    def test_workers_clamped(self):
        assert normalise_config(dict(DEFAULTS, workers=0))["workers"] == 1

    def test_gradients(self):
        cfg = normalise_config(dict(DEFAULTS, gradients=[
            {"name": "Ember", "palette": ["#000000", [255, 128, 0]], "levels": 32, "interpolate": False},
        ]))
        spec = cfg["gradients"][0]
        assert spec["palette"] == [(0, 0, 0), (255, 128, 0)]
        assert spec["mode"] is Interpolation.NONE
        registry = registry_from_config(cfg)
        assert len(registry) == 12
        assert registry.names()[-1] == "Ember"
        assert len(registry.get(11).gradient) == 32
        assert registry.get(11).kind.interpolate is False
        assert registry.get(0).kind.interpolate is True


class TestCli:
    def test_gradient(self, capsys):
        assert cli.main(["gradient", "#000000", "#ffffff", "--levels", "16"]) == 0
        lines = capsys.readouterr().out.split()
        assert len(lines) == 16
        assert lines[0] == "#000000"

    def test_render(self, tmp_path, capsys):
        config = _write_config(tmp_path, width=8, height=6, max_iter=30)
        output = tmp_path / "frame.png"
        assert cli.main(["--config", config, "render", "--output", str(output), "--theme", "4"]) == 0
        with Image.open(output) as img:
            assert img.size == (8, 6)
        out = capsys.readouterr().out
        assert "size: 8x6" in out
        assert "theme: Basic Hue+0" in out

    def test_invalid_config_exit_code(self, tmp_path):
        config = _write_config(tmp_path, zoom=-1.0)
        assert cli.main(["--config", config, "render", "--output", str(tmp_path / "x.png")]) == 2

    def test_spin_requires_julia(self, tmp_path):
        config = _write_config(tmp_path, width=4, height=4, max_iter=10)
        argv = ["--config", config, "animate", "--kind", "spin", "--frames", "2",
                "--frames-dir", str(tmp_path / "frames")]
        assert cli.main(argv) == 2

    def test_zoom_animation(self, tmp_path):
        config = _write_config(tmp_path, width=4, height=4, max_iter=10)
        frames_dir = tmp_path / "frames"
        argv = ["--config", config, "animate", "--frames", "2", "--frames-dir", str(frames_dir)]
        assert cli.main(argv) == 0
        assert len(list(frames_dir.glob("*.png"))) == 2
