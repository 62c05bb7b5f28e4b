import numpy as np
import pytest

from fractview.fractal import BLACK, GOLD, GREY, Fractal, Key, Kind
from fractview.render import escape_color, render_pixels, to_rgb


def test_corner_escapes_immediately_with_gold():
    fractal = Fractal(Kind.MANDELBROT)
    assert escape_color(fractal, 0, 0) == GOLD


def test_centre_of_mandelbrot_is_black():
    fractal = Fractal(Kind.MANDELBROT)
    assert escape_color(fractal, fractal.width // 2, fractal.height // 2) == BLACK


def test_no_iterations_means_black():
    fractal = Fractal(Kind.MANDELBROT, width=10, height=10)
    fractal.press_key(Key.MINUS)
    fractal.press_key(Key.MINUS)
    assert escape_color(fractal, 0, 0) == BLACK
    assert (render_pixels(fractal) == BLACK).all()


def _small_views():
    mandelbrot = Fractal(Kind.MANDELBROT, width=30, height=24)
    julia = Fractal(Kind.JULIA, julia_x=-0.8, julia_y=0.156, width=24, height=30)
    moved = Fractal(Kind.MANDELBROT, width=20, height=20)
    moved.scroll(4)
    moved.scroll(4)
    moved.press_key(Key.LEFT)
    moved.press_key(Key.EQUAL)
    return [mandelbrot, julia, moved]


@pytest.mark.parametrize("fractal", _small_views())
def test_render_agrees_with_single_pixel_colour(fractal):
    pixels = render_pixels(fractal)
    assert pixels.shape == (fractal.height, fractal.width)
    for y in range(fractal.height):
        for x in range(fractal.width):
            assert pixels[y, x] == escape_color(fractal, x, y)


@pytest.mark.parametrize("fractal", _small_views())
def test_colours_are_black_or_between_grey_and_gold(fractal):
    pixels = render_pixels(fractal)
    shaded = pixels[pixels != BLACK]
    assert ((shaded > GREY) & (shaded <= GOLD)).all()


def test_render_has_both_inside_and_outside_points():
    pixels = render_pixels(Fractal(Kind.MANDELBROT, width=40, height=40))
    assert (pixels == BLACK).any()
    assert (pixels == GOLD).any()


def test_to_rgb_splits_channels():
    rgb = to_rgb(np.array([[GOLD, BLACK]], dtype=np.uint32))
    assert rgb.shape == (1, 2, 3)
    assert rgb.dtype == np.uint8
    assert rgb[0, 0].tolist() == [0xFF, 0xD9, 0x66]
    assert rgb[0, 1].tolist() == [0, 0, 0]


def test_to_rgb_round_trip():
    pixels = render_pixels(Fractal(Kind.MANDELBROT, width=16, height=12))
    rgb = to_rgb(pixels).astype(np.uint32)
    rebuilt = (rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2]
    assert np.array_equal(rebuilt, pixels)