"""Escape-time evaluation and single-band rendering."""

import numpy as np
import pytest

from mandelbrot import baseline
from mandelbrot.computation import allocate_image, escape_time, render
from mandelbrot.plane import Complex


@pytest.mark.parametrize("c", [Complex(0.0, 0.0), Complex(2.0, 2.0), Complex(10.0, -10.0)])
def test_zero_limit_is_bounded(c):
    assert escape_time(c, 0) is None


@pytest.mark.parametrize("limit", [1, 10, 255])
def test_origin_is_bounded(limit):
    assert escape_time(Complex(0.0, 0.0), limit) is None


@pytest.mark.parametrize(
    "c, expected",
    [
        (Complex(2.0, 2.0), 0),
        (Complex(1.0, 0.0), 2),
        (Complex(-1.0, 0.0), None),
        (Complex(0.25, 0.0), None),
        (Complex(-2.0, 0.0), None),
    ],
)
def test_escape_time(c, expected):
    assert escape_time(c, 255) == expected


def test_escape_time_matches_baseline():
    for re in np.linspace(-2.0, 0.75, 23):
        for im in np.linspace(-1.25, 1.25, 17):
            c = Complex(float(re), float(im))
            assert escape_time(c, 255) == baseline.escape_time(c, 255), c


def test_render_rejects_mismatched_buffer():
    pixels = np.zeros(10, dtype=np.uint8)
    with pytest.raises(ValueError):
        render(pixels, (4, 3), Complex(-1.0, 1.0), Complex(1.0, -1.0))


@pytest.mark.parametrize(
    "point, expected",
    [
        (Complex(0.0, 0.0), 0),
        (Complex(2.0, 2.0), 255),
        (Complex(1.0, 0.0), 253),
    ],
)
def test_render_single_pixel(point, expected):
    pixels = allocate_image((1, 1))
    render(pixels, (1, 1), point, Complex(point.re + 1.0, point.im - 1.0))
    assert pixels[0] == expected


def test_render_with_zero_limit_is_black():
    pixels = np.full(12, 7, dtype=np.uint8)
    render(pixels, (4, 3), Complex(-2.0, 1.5), Complex(1.0, -1.5), limit=0)
    assert not pixels.any()


@pytest.mark.parametrize(
    "bounds, top_left, bottom_right",
    [
        ((24, 18), Complex(-2.0, 1.25), Complex(0.75, -1.25)),
        ((16, 16), Complex(-1.2, 0.35), Complex(-1.0, 0.20)),
        ((9, 31), Complex(-0.75, 0.25), Complex(-0.7, 0.05)),
    ],
    ids=["full", "seahorse", "tall"],
)
def test_render_matches_baseline(bounds, top_left, bottom_right):
    pixels = allocate_image(bounds)
    render(pixels, bounds, top_left, bottom_right)
    expected = baseline.compute_mandelbrot(bounds, top_left, bottom_right)
    np.testing.assert_array_equal(pixels, expected)
