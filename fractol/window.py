"""A pygame window that shows a fractal and forwards input to it."""

from __future__ import annotations

import os
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pygame

from .calcs import HEIGHT, WIDTH
from .fractal import Fractal, Key

FRAMES_PER_SECOND = 60

_KEYMAP = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_UP: Key.UP,
    pygame.K_9: Key.NINE,
    pygame.K_8: Key.EIGHT,
}


def color_to_rgb(color: int) -> tuple[int, int, int]:
    """Split a 0xRRGGBB colour into its red, green and blue components."""
    color = int(color)
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _rgb_array(pixels: np.ndarray) -> np.ndarray:
    """Turn ``(height, width)`` colours into a ``(width, height, 3)`` RGB array."""
    rgb = np.stack(
        [(pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF], axis=-1
    ).astype(np.uint8)
    return rgb.transpose(1, 0, 2)


class Viewer:
    """Shows a fractal in a window and reacts to keyboard and mouse input."""

    def __init__(self, fractal: Fractal) -> None:
        self.fractal = fractal
        self.screen: Optional[pygame.Surface] = None
        self.surface: Optional[pygame.Surface] = None
        self.pixels: Optional[np.ndarray] = None

    def draw(self) -> None:
        """Render the fractal and show it, if a window is open."""
        self.pixels = self.fractal.render()
        self.surface = pygame.surfarray.make_surface(_rgb_array(self.pixels))
        if self.screen is not None:
            self.screen.blit(self.surface, (0, 0))
            pygame.display.flip()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Dispatch one event. Returns False when the viewer should close."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            return self.fractal.handle_key(_KEYMAP.get(event.key, event.key))
        if event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            self.fractal.handle_mouse(event.button, x, y)
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            self.fractal.track_mouse(x, y)
        return True

    def render_if_needed(self) -> bool:
        """Redraw when the fractal asks for it; returns whether it did."""
        if not self.fractal.needs_render:
            return False
        self.draw()
        self.fractal.needs_render = False
        return True

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption(self.fractal.name)
            clock = pygame.time.Clock()
            self.draw()
            running = True
            while running:
                for event in pygame.event.get():
                    if not self.handle_event(event):
                        running = False
                        break
                if running:
                    self.render_if_needed()
                    clock.tick(FRAMES_PER_SECOND)
        finally:
            self.screen = None
            pygame.quit()