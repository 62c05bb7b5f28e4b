"""Command-line entry point and interactive window of the fractal viewer."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

import pygame

from fractview.fractal import Fractal, Key, Kind
from fractview.numbers import InvalidNumberError, parse_double
from fractview.render import render_pixels, to_rgb

USAGE = "Argument error, rerun with <mandelbrot> or <julia number number>"

_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_UP: Key.UP,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_EQUALS: Key.EQUAL,
    pygame.K_MINUS: Key.MINUS,
    pygame.K_KP_PLUS: Key.KP_ADD,
    pygame.K_KP_MINUS: Key.KP_SUBTRACT,
}


class UsageError(ValueError):
    """Raised when the command line names no known fractal."""


def parse_arguments(argv: Sequence[str]) -> Fractal:
    """Build the fractal described by the command-line arguments.

    Accepted forms are ``mandelbrot`` and ``julia <real> <imaginary>``.
    Raises UsageError for anything else and InvalidNumberError for a
    malformed Julia constant.
    """
    args = list(argv)
    if args == [Kind.MANDELBROT.value]:
        return Fractal(Kind.MANDELBROT)
    if len(args) == 3 and args[0] == Kind.JULIA.value:
        return Fractal(
            Kind.JULIA,
            julia_x=parse_double(args[1]),
            julia_y=parse_double(args[2]),
        )
    raise UsageError(USAGE)


def _draw(screen: pygame.Surface, fractal: Fractal) -> None:
    rgb = to_rgb(render_pixels(fractal))
    surface = pygame.surfarray.make_surface(rgb.swapaxes(0, 1))
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def _handle(event: pygame.event.Event, fractal: Fractal) -> Optional[bool]:
    """Apply one event; None means close, otherwise whether to redraw."""
    if event.type == pygame.QUIT:
        return None
    if event.type == pygame.KEYDOWN:
        key = _KEYS.get(event.key)
        if key is None:
            return True
        return True if fractal.press_key(key) else None
    if event.type == pygame.MOUSEBUTTONDOWN:
        fractal.scroll(event.button)
        return True
    if event.type == pygame.MOUSEMOTION:
        x, y = event.pos
        return fractal.move_pointer(x, y)
    return False


def run(fractal: Fractal) -> None:
    """Open a window showing ``fractal`` and react to input until it is closed."""
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((fractal.width, fractal.height))
        pygame.display.set_caption(fractal.kind.value)
        _draw(screen, fractal)
        while True:
            redraw = False
            for event in pygame.event.get():
                outcome = _handle(event, fractal)
                if outcome is None:
                    return
                redraw = redraw or outcome
            if redraw:
                _draw(screen, fractal)
            pygame.time.wait(10)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments, show the fractal and return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        fractal = parse_arguments(argv)
    except UsageError as error:
        print(error, file=sys.stderr)
        return 1
    except InvalidNumberError as error:
        print(error, file=sys.stderr)
        return 1
    try:
        run(fractal)
    except pygame.error as error:
        print(f"Display error: {error}", file=sys.stderr)
        return 1
    return 0