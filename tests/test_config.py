"""Argument parsing helpers and render configuration."""

import pytest

from mandelbrot.config import (
    RenderConfig,
    default_render_config,
    get_config_by_index,
    load_render_configs,
    parse_complex,
    parse_image_size,
    parse_pair,
)
from mandelbrot.plane import Complex


def test_parse_pair():
    assert parse_pair("", ",") is None
    assert parse_pair("10", ",") is None
    assert parse_pair("10,", ",") is None
    assert parse_pair(",10", ",") is None
    assert parse_pair("10,20", ",") == (10, 20)
    assert parse_pair("10,20x", ",") is None


@pytest.mark.parametrize("text", [" 10,20", "10 ,20", "1_0,20", "1,2,3", "10,2.5"])
def test_parse_pair_rejects_partial_numbers(text):
    assert parse_pair(text, ",") is None


def test_parse_pair_with_float_kind():
    assert parse_pair("0.5x-2", "x", float) == (0.5, -2.0)


def test_parse_complex():
    assert parse_complex("1.25,-0.0625") == Complex(1.25, -0.0625)
    assert parse_complex(",1.0") is None
    assert parse_complex("-1,0.20") == Complex(-1.0, 0.2)


def test_parse_image_size():
    assert parse_image_size("1000x750") == (1000, 750)
    assert parse_image_size("1000X750") is None
    assert parse_image_size("1000x") is None


@pytest.mark.parametrize(
    "overrides",
    [{"width": 0}, {"height": 0}, {"workers": 0}, {"max_iterations": 256}, {"max_iterations": -1}],
)
def test_render_config_validation(overrides):
    with pytest.raises(ValueError):
        default_render_config(**overrides)


def test_default_render_config_overrides():
    config = default_render_config(image_size="20x10", top_left="-2,1", bottom_right=[1, -1])
    assert config.bounds == (20, 10)
    assert config.top_left == Complex(-2.0, 1.0)
    assert config.bottom_right == Complex(1.0, -1.0)
    assert config.workers == 8
    assert config.max_iterations == 255
    assert isinstance(config, RenderConfig)


def test_load_render_configs(tmp_path):
    path = tmp_path / "batch.yaml"
    path.write_text(
        """
defaults:
  max_iterations: 100
renders:
  - output: "out/{run_name}.png"
    image_size: 40x30
    top_left: "-2.0,1.25"
    bottom_right: "0.75,-1.25"
    sweep:
      workers: [1, 4]
  - output: single.png
    image_size: {width: 8, height: 6}
    top_left: [-1.0, 1.0]
    bottom_right: [1.0, -1.0]
    max_iterations: 255
"""
    )

    configs = load_render_configs(path)
    assert [c.workers for c in configs] == [1, 4, 8]
    assert configs[0].max_iterations == 100
    assert configs[0].output == f"out/{configs[0].run_name}.png"
    assert configs[0].output != configs[1].output
    assert configs[2].output == "single.png"
    assert configs[2].bounds == (8, 6)
    assert configs[2].max_iterations == 255
    assert get_config_by_index(path, 1).workers == 4


def test_load_render_configs_errors(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text(
        """
renders:
  - output: a.png
    image_size: 40by30
    top_left: "-2.0,1.25"
    bottom_right: "0.75,-1.25"
"""
    )
    with pytest.raises(ValueError, match="40by30"):
        load_render_configs(path)

    empty = tmp_path / "empty.yaml"
    empty.write_text("renders: []\n")
    assert load_render_configs(empty) == []
    with pytest.raises(ValueError):
        get_config_by_index(empty, 0)


def test_iteration_limit_keeps_escaped_pixels_nonzero():
    assert default_render_config(max_iterations=255).max_iterations == 255
    with pytest.raises(ValueError, match=r"\[0, 255\]"):
        default_render_config(max_iterations=256)
