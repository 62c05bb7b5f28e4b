from unittest import mock

import pygame
import pytest

from fractview.app import UsageError, main, parse_arguments, run
from fractview.fractal import Fractal, Kind
from fractview.numbers import InvalidNumberError


@pytest.fixture(autouse=True)
def _headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def _event(kind, **attrs):
    return pygame.event.Event(kind, **attrs)


def _small(kind=Kind.MANDELBROT):
    return Fractal(kind, width=40, height=40)


def test_parse_mandelbrot_defaults():
    fractal = parse_arguments(["mandelbrot"])
    assert fractal.kind is Kind.MANDELBROT
    assert fractal.iterations == 20
    assert fractal.escape_value == 4
    assert fractal.zoom == 1.0
    assert (fractal.shift_x, fractal.shift_y) == (0.0, 0.0)


def test_parse_julia_constant():
    fractal = parse_arguments(["julia", "-0.8", "0.156"])
    assert fractal.kind is Kind.JULIA
    assert fractal.julia_x == pytest.approx(-0.8)
    assert fractal.julia_y == pytest.approx(0.156)


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["mandel"],
        ["Mandelbrot"],
        ["mandelbrot", "1"],
        ["julia"],
        ["julia", "1"],
        ["julia", "1", "2", "3"],
        ["mandelbrot", "1", "2"],
    ],
)
def test_parse_rejects_bad_usage(argv):
    with pytest.raises(UsageError):
        parse_arguments(argv)


def test_parse_rejects_bad_number():
    with pytest.raises(InvalidNumberError):
        parse_arguments(["julia", "1.2.3", "0"])


def test_main_usage_error(capsys):
    assert main(["nothing"]) == 1
    assert "Argument error" in capsys.readouterr().err


def test_main_invalid_number(capsys):
    assert main(["julia", "abc", "1"]) == 1
    assert "<julia> <number> <number>" in capsys.readouterr().err


def test_run_applies_keys_until_quit():
    fractal = _small()
    events = [[_event(pygame.KEYDOWN, key=pygame.K_RIGHT),
               _event(pygame.KEYDOWN, key=pygame.K_EQUALS),
               _event(pygame.QUIT)]]
    with mock.patch("pygame.event.get", side_effect=events):
        run(fractal)
    assert fractal.shift_x == pytest.approx(0.5)
    assert fractal.iterations == 30


def test_run_escape_stops_before_later_events():
    fractal = _small()
    events = [[_event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
               _event(pygame.KEYDOWN, key=pygame.K_UP)]]
    with mock.patch("pygame.event.get", side_effect=events):
        run(fractal)
    assert fractal.shift_y == 0.0


def test_run_scroll_zooms_across_batches():
    fractal = _small()
    events = [
        [_event(pygame.MOUSEBUTTONDOWN, button=4, pos=(0, 0))],
        [_event(pygame.MOUSEBUTTONDOWN, button=5, pos=(0, 0)),
         _event(pygame.QUIT)],
    ]
    with mock.patch("pygame.event.get", side_effect=events):
        run(fractal)
    assert fractal.zoom == pytest.approx(0.95 * 1.05)


def test_run_pointer_moves_julia_constant():
    fractal = _small(Kind.JULIA)
    events = [[_event(pygame.MOUSEMOTION, pos=(20, 20), rel=(0, 0), buttons=(0, 0, 0)),
               _event(pygame.QUIT)]]
    with mock.patch("pygame.event.get", side_effect=events):
        run(fractal)
    assert fractal.julia_x == pytest.approx(0.0)
    assert fractal.julia_y == pytest.approx(0.0)


def test_main_runs_and_returns_success():
    with mock.patch("pygame.event.get", side_effect=[[_event(pygame.QUIT)]]):
        assert main(["mandelbrot"]) == 0