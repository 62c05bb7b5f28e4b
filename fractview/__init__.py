"""Interactive Mandelbrot and Julia set viewer, with small string, buffer and list helpers."""

__version__ = "0.1.0"