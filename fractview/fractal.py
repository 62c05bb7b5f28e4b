"""View state of a Mandelbrot or Julia fractal and its reaction to input."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

from fractview.numbers import map_range

WIDTH = 1000
HEIGHT = 1000

BLACK = 0x000000
WHITE = 0xFFFFFF
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF
MAGENTA = 0xFF00FF
LIME = 0xCCFF00
PURPLE = 0x660066
LIGHTPNK = 0xFFB6C1
ORCHID = 0xDABFD8
THISTLE = 0xD8BFD8
GOLDBROWN = 0xFFF8DC
GOLD = 0xFFD966
GREY = 0x808080

_PAN_STEP = 0.5
_ITERATION_STEP = 10
_ZOOM_IN = 0.95
_ZOOM_OUT = 1.05


class Kind(Enum):
    """Which fractal is drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


class Key(IntEnum):
    """Keys the viewer reacts to, by X11 keysym."""

    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54
    EQUAL = 0x003D
    MINUS = 0x002D
    KP_ADD = 0xFFAB
    KP_SUBTRACT = 0xFFAD


class Button(IntEnum):
    """Mouse buttons the viewer reacts to."""

    SCROLL_UP = 4
    SCROLL_DOWN = 5


@dataclass
class Fractal:
    """The parameters that decide what a rendered frame shows."""

    kind: Kind
    julia_x: float = 0.0
    julia_y: float = 0.0
    width: int = WIDTH
    height: int = HEIGHT
    escape_value: float = 4.0
    iterations: int = 20
    shift_x: float = 0.0
    shift_y: float = 0.0
    zoom: float = 1.0

    def __post_init__(self) -> None:
        self.kind = Kind(self.kind)

    def press_key(self, key: Union[Key, int]) -> bool:
        """Apply a key press.

        Arrows pan by half the current zoom, plus and minus change the
        iteration count by ten. Returns False when the key asks the viewer
        to close (Escape) and True when the view should be redrawn.
        """
        try:
            key = Key(key)
        except ValueError:
            return True
        if key is Key.ESCAPE:
            return False
        step = _PAN_STEP * self.zoom
        if key is Key.RIGHT:
            self.shift_x += step
        elif key is Key.LEFT:
            self.shift_x -= step
        elif key is Key.DOWN:
            self.shift_y -= step
        elif key is Key.UP:
            self.shift_y += step
        elif key in (Key.EQUAL, Key.KP_ADD):
            self.iterations += _ITERATION_STEP
        elif key in (Key.MINUS, Key.KP_SUBTRACT):
            self.iterations -= _ITERATION_STEP
        return True

    def scroll(self, button: Union[Button, int]) -> None:
        """Zoom in on scroll up and out on scroll down; other buttons do nothing."""
        if button == Button.SCROLL_UP:
            self.zoom *= _ZOOM_IN
        elif button == Button.SCROLL_DOWN:
            self.zoom *= _ZOOM_OUT

    def move_pointer(self, x: float, y: float) -> bool:
        """Set the Julia constant from the pointer position.

        Only a Julia view follows the pointer; returns True when the
        constant changed and the view should be redrawn.
        """
        if self.kind is not Kind.JULIA:
            return False
        self.julia_x = map_range(x, -2, 2, self.width) * self.zoom + self.shift_x
        self.julia_y = map_range(y, 2, -2, self.height) * self.zoom + self.shift_y
        return True

    def constant_for(self, z: complex) -> complex:
        """Return the constant added at each step for the starting point ``z``."""
        if self.kind is Kind.JULIA:
            return complex(self.julia_x, self.julia_y)
        return z