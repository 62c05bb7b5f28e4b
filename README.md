# fractview

An interactive viewer for the Mandelbrot set and Julia sets, drawn in a
1000 × 1000 window with pygame and computed with numpy.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Usage

Show the Mandelbrot set:

```
fractview mandelbrot
```

Show a Julia set for the constant `c = x + yi`:

```
fractview julia -0.8 0.156
```

The two numbers take one optional sign, then ASCII digits with at most one
decimal point; exponents and spaces are rejected, and an empty digit part
counts as zero. Any other arguments, or a malformed number, print an error
message on standard error and exit with status 1. If no window can be
opened, a display error is printed and the status is also 1.

### Controls

| Input                          | Effect                                        |
|--------------------------------|-----------------------------------------------|
| Arrow keys                     | Pan the view by half the current zoom factor  |
| `=` / keypad `+`               | Add 10 iterations (more detail)               |
| `-` / keypad `-`               | Remove 10 iterations                          |
| Scroll wheel up / down         | Zoom in (× 0.95) / out (× 1.05)               |
| Mouse movement (Julia only)    | Set the Julia constant to the point under the cursor |
| `Escape` or closing the window | Quit                                          |

Moving the mouse over a Julia view replaces the constant given on the
command line with the point under the cursor.

Each view starts with 20 iterations, an escape threshold of 4 on the
squared magnitude, no shift and a zoom factor of 1. The visible area at
zoom 1 spans −2 to 2 on both axes. Points that stay bounded for every
iteration are black; escaping points get a colour interpolated linearly
between the packed values of gold (`0xFFD966`) and grey (`0x808080`)
according to the step at which they escaped.

## Library use

The drawing code works without opening a window:

```python
from fractview.fractal import Fractal, Kind
from fractview.render import escape_color, render_pixels, to_rgb

fractal = Fractal(Kind.JULIA, julia_x=-0.8, julia_y=0.156)
pixels = render_pixels(fractal)   # (height, width) uint32 array of 0xRRGGBB
rgb = to_rgb(pixels)              # (height, width, 3) uint8 array
corner = escape_color(fractal, 0, 0)
```

- `fractview.fractal` — `Fractal` holds the view state and applies input
  through `press_key`, `scroll` and `move_pointer`; `Kind`, `Key` and
  `Button` name fractal kinds, keys (by X11 keysym) and scroll buttons.
- `fractview.render` — `escape_color` for one pixel, `render_pixels` for a
  whole frame, `to_rgb` to split packed colours into channels.
- `fractview.numbers` — `parse_double` reads the numeric arguments and
  raises `InvalidNumberError` on malformed input; `map_range` performs the
  linear scaling that places pixels on the complex plane.
- `fractview.app` — `parse_arguments` builds a `Fractal` from command-line
  arguments (raising `UsageError`), `run` opens the window, and `main` is
  the `fractview` command.

### Helper modules

The package also ships small helpers with C-string and byte-buffer
semantics:

- `fractview.chars` — ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), `to_lower`, `to_upper`, `atoi`
  (wraps to a signed 32-bit integer) and `itoa`.
- `fractview.buffers` — `memset`, `zero`, `calloc`, `memchr`, `memcmp`,
  `memcpy` and `memmove` on `bytearray` buffers.
- `fractview.text` — `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`, and the
  bounded copies `strlcpy` and `strlcat`. A NUL character ends a string.
- `fractview.linkedlist` — `LinkedList` and `Node`, a singly linked list
  with `push_front`, `push_back`, `last`, `for_each`, `map` and `clear`.
- `fractview.output` — `put_char`, `put_str`, `put_endl` and `put_number`,
  writing to a text stream (standard output by default).

## Limitations

The viewer has no colour-scheme options, does not save images and does not
zoom towards the cursor: the scroll wheel always zooms about the centre of
the current view.