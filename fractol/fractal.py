"""Fractal state, per-pixel escape-time colouring and input handling."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass

import numpy as np

from .calcs import (
    BLACK,
    HEIGHT,
    WHITE,
    WIDTH,
    map_range,
    square_complex,
    sum_complex,
)

DEFAULT_ESCAPE_VALUE = 4.0
DEFAULT_ITERATIONS = 42
ITERATION_STEP = 10
PAN_FACTOR = 0.5
ZOOM_IN = 0.95
ZOOM_OUT = 1.05


class Key(enum.IntEnum):
    """Keys the viewer reacts to, by their X11 keysym values."""

    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54
    EIGHT = 0x38
    NINE = 0x39


class MouseButton(enum.IntEnum):
    """Mouse buttons; the wheel reports as buttons 4 and 5."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5


def _escape_color(iteration: int) -> int:
    return int(map_range(iteration, BLACK, WHITE, 0))


@dataclass
class Fractal:
    """A Mandelbrot or Julia set together with its view parameters."""

    name: str
    julia: complex = 0j
    escape_value: float = DEFAULT_ESCAPE_VALUE
    iterations: int = DEFAULT_ITERATIONS
    shift_x: float = 0.0
    shift_y: float = 0.0
    zoom: float = 1.0
    needs_render: bool = False

    def reset(self) -> None:
        """Restore the default view; the Julia constant is kept."""
        self.escape_value = DEFAULT_ESCAPE_VALUE
        self.iterations = DEFAULT_ITERATIONS
        self.shift_x = 0.0
        self.shift_y = 0.0
        self.zoom = 1.0
        self.needs_render = False

    def is_julia(self) -> bool:
        """True when this is a Julia set."""
        return self.name.startswith("julia")

    def to_complex(self, x: float, y: float) -> complex:
        """The point of the complex plane shown at pixel ``(x, y)``."""
        return complex(
            map_range(float(x), -2, +2, 0) * self.zoom + self.shift_x,
            map_range(float(y), +2, -2, 0) * self.zoom + self.shift_y,
        )

    def pixel_color(self, x: int, y: int) -> int:
        """The 0xRRGGBB colour of pixel ``(x, y)``."""
        z = self.to_complex(x, y)
        c = self.julia if self.is_julia() else z
        for iteration in range(self.iterations):
            z = sum_complex(square_complex(z), c)
            if z.real * z.real + z.imag * z.imag > self.escape_value:
                return _escape_color(iteration)
        return WHITE

    def render(self) -> np.ndarray:
        """Colours of the whole view as a ``(HEIGHT, WIDTH)`` uint32 array."""
        xs = map_range(np.arange(WIDTH, dtype=np.float64), -2, +2, 0)
        ys = map_range(np.arange(HEIGHT, dtype=np.float64), +2, -2, 0)
        re = xs * self.zoom + self.shift_x
        im = ys * self.zoom + self.shift_y
        zx = np.broadcast_to(re[np.newaxis, :], (HEIGHT, WIDTH)).ravel().copy()
        zy = np.broadcast_to(im[:, np.newaxis], (HEIGHT, WIDTH)).ravel().copy()
        if self.is_julia():
            cx = np.full(zx.shape, self.julia.real)
            cy = np.full(zy.shape, self.julia.imag)
        else:
            cx = zx.copy()
            cy = zy.copy()

        colors = np.full(HEIGHT * WIDTH, WHITE, dtype=np.uint32)
        active = np.arange(HEIGHT * WIDTH)
        for iteration in range(self.iterations):
            if active.size == 0:
                break
            zx, zy = zx * zx - zy * zy + cx, 2 * zx * zy + cy
            escaped = zx * zx + zy * zy > self.escape_value
            if escaped.any():
                colors[active[escaped]] = _escape_color(iteration)
                keep = ~escaped
                active = active[keep]
                zx, zy, cx, cy = zx[keep], zy[keep], cx[keep], cy[keep]
        return colors.reshape(HEIGHT, WIDTH)

    def handle_key(self, key: int) -> bool:
        """Apply a key press. Returns False when the viewer should close."""
        if key == Key.ESCAPE:
            return False
        step = PAN_FACTOR * self.zoom
        if key == Key.RIGHT:
            self.shift_x += step
        elif key == Key.LEFT:
            self.shift_x -= step
        elif key == Key.DOWN:
            self.shift_y -= step
        elif key == Key.UP:
            self.shift_y += step
        elif key == Key.NINE:
            self.iterations += ITERATION_STEP
        elif key == Key.EIGHT:
            self.iterations -= ITERATION_STEP
        self.needs_render = True
        return True

    def handle_mouse(self, button: int, x: int, y: int) -> None:
        """Report a click and zoom on wheel movement."""
        sys.stdout.write(f"Mouse clicked at ( {x} , {y} )\n")
        if button == MouseButton.WHEEL_UP:
            self.zoom *= ZOOM_IN
        elif button == MouseButton.WHEEL_DOWN:
            self.zoom *= ZOOM_OUT
        self.needs_render = True

    def track_mouse(self, x: int, y: int) -> None:
        """For a Julia set, move its constant to the point under the pointer."""
        if self.is_julia():
            self.julia = self.to_complex(x, y)
            self.needs_render = True