"""Interactive Mandelbrot and Julia set explorer."""

__version__ = "0.1.0"