"""Escape-time colouring of a fractal view into a pixel array."""

from __future__ import annotations

import numpy as np

from fractview.fractal import BLACK, GOLD, GREY, Fractal
from fractview.numbers import map_range


def _color(step: int, iterations: int) -> int:
    """Colour of a point that escaped at ``step``, shading from gold to grey."""
    return int(map_range(step, GOLD, GREY, iterations))


def _start_point(fractal: Fractal, x: float, y: float) -> complex:
    return complex(
        map_range(x, -2, 2, fractal.width) * fractal.zoom + fractal.shift_x,
        map_range(y, 2, -2, fractal.height) * fractal.zoom + fractal.shift_y,
    )


def escape_color(fractal: Fractal, x: int, y: int) -> int:
    """Return the 0xRRGGBB colour of pixel (``x``, ``y``) of ``fractal``.

    Points that stay bounded for every iteration are black.
    """
    z = _start_point(fractal, x, y)
    c = fractal.constant_for(z)
    for step in range(fractal.iterations):
        z = complex(z.real * z.real - z.imag * z.imag, 2 * z.imag * z.real) + c
        if z.real * z.real + z.imag * z.imag > fractal.escape_value:
            return _color(step, fractal.iterations)
    return BLACK


def render_pixels(fractal: Fractal) -> np.ndarray:
    """Return a (height, width) uint32 array of 0xRRGGBB colours for the view."""
    width, height = fractal.width, fractal.height
    xs = np.arange(width, dtype=np.float64)
    ys = np.arange(height, dtype=np.float64)
    real_axis = (4.0 * xs / width + -2.0) * fractal.zoom + fractal.shift_x
    imag_axis = (-4.0 * ys / height + 2.0) * fractal.zoom + fractal.shift_y

    zr = np.broadcast_to(real_axis[np.newaxis, :], (height, width)).ravel().copy()
    zi = np.broadcast_to(imag_axis[:, np.newaxis], (height, width)).ravel().copy()
    constant = fractal.constant_for(complex(0.0, 0.0))
    if constant == 0 and fractal.constant_for(complex(1.0, 0.0)) == 1:
        cr, ci = zr.copy(), zi.copy()
    else:
        cr = np.full_like(zr, constant.real)
        ci = np.full_like(zi, constant.imag)

    pixels = np.full(height * width, BLACK, dtype=np.uint32)
    index = np.arange(height * width)
    with np.errstate(over="ignore", invalid="ignore"):
        for step in range(fractal.iterations):
            if index.size == 0:
                break
            zr, zi = zr * zr - zi * zi + cr, 2 * zi * zr + ci
            escaped = zr * zr + zi * zi > fractal.escape_value
            if escaped.any():
                pixels[index[escaped]] = _color(step, fractal.iterations)
                keep = ~escaped
                index, zr, zi, cr, ci = (
                    index[keep], zr[keep], zi[keep], cr[keep], ci[keep]
                )
    return pixels.reshape(height, width)


def to_rgb(pixels: np.ndarray) -> np.ndarray:
    """Split 0xRRGGBB colours into an array with a trailing (r, g, b) axis of uint8."""
    values = np.asarray(pixels, dtype=np.uint32)
    channels = [(values >> 16) & 0xFF, (values >> 8) & 0xFF, values & 0xFF]
    return np.stack(channels, axis=-1).astype(np.uint8)