# fractol

An interactive viewer for the Mandelbrot set and Julia sets. It opens an
800×800 window and colours each pixel by how many iterations it takes for
the point to escape; points that do not escape within the iteration limit
are drawn white.

## Installing

```
pip install .
```

## Running

Show the Mandelbrot set:

```
fractol mandelbrot
```

Show a Julia set for the constant `c = <real> + <imag>i`:

```
fractol julia -0.8 0.156
```

Any other arguments print a short usage message to standard error and exit
with status 1.

## Controls

| Input              | Effect                                             |
|--------------------|----------------------------------------------------|
| Arrow keys         | Pan the view by half the current zoom              |
| `9`                | Add 10 iterations (more detail)                    |
| `8`                | Remove 10 iterations                               |
| Mouse wheel up     | Zoom in (zoom × 0.95)                              |
| Mouse wheel down   | Zoom out (zoom × 1.05)                             |
| Mouse movement     | In Julia mode, the constant follows the pointer    |
| `Esc` / close box  | Quit                                               |

Each mouse button press prints its position to standard output, as
`Mouse clicked at ( x , y )`.

## Using it as a library

The rendering model lives in `fractol.fractal.Fractal` and can be used
without a window:

```python
from fractol.fractal import Fractal

fractal = Fractal("julia", julia=complex(-0.8, 0.156))
pixels = fractal.render()          # (800, 800) uint32 array of 0xRRGGBB colours
color = fractal.pixel_color(400, 400)
point = fractal.to_complex(0, 0)   # (-2+2j) at the default view
```

A `Fractal` starts with 42 iterations, an escape value of 4, no shift and a
zoom of 1; `reset()` restores these. `handle_key(key)` takes a `Key` value
and returns `False` for Escape, `handle_mouse(button, x, y)` takes a
`MouseButton` value, and `track_mouse(x, y)` moves the Julia constant. Each
sets `needs_render` when the view changes.

`fractol.window.Viewer` wraps a `Fractal` in a pygame window; `run()` opens
it and processes events until it is closed. `color_to_rgb` splits a
0xRRGGBB colour into its components.

`fractol.calcs` holds the number parsing (`atodbl`), the coordinate mapping
(`map_range`), the complex helpers (`sum_complex`, `square_complex`) and the
window size and colour constants.

`fractol.cli` provides `parse_args`, which turns command-line arguments into
a `Fractal` or raises `UsageError`, and `main`, the command's entry point.

## Utilities

The `fractol.libft` package offers small helpers:

- `chars`: `atoi` and ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`).
- `memory`: byte-buffer operations (`memset`, `bzero`, `calloc`, `memchr`,
  `memcmp`, `memcpy`, `memmove`).
- `strings`: searching, comparing and size-bounded copying (`strchr`,
  `strrchr`, `strncmp`, `strnstr`, `substr`, `strjoin`, `strcat`, `strlcpy`,
  `strlcat`, `strtrim`, `strmapi`, `striteri`).
- `tokens`: `split` and the generator `tokenize`, both dropping empty pieces.
- `output`: `itoa` and writers to a stream (`putchar`, `putstr`, `putendl`,
  `putnbr`), standard output by default.
- `lists`: a singly linked `LinkedList` of `Node`s.

## Tests

```
pip install .[test]
pytest
```