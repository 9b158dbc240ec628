"""Command-line entry point."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .calcs import atodbl
from .fractal import Fractal

USAGE = (
    "Wrong command.\n"
    "./fractol mandelbrot\n"
    "or\n"
    "./fractol julia <value1> <value2>\n"
)


class UsageError(Exception):
    """The command-line arguments do not name a known fractal."""


def parse_args(argv: Sequence[str]) -> Fractal:
    """Build a fractal from the arguments that follow the program name."""
    args = list(argv)
    if len(args) == 1 and args[0] == "mandelbrot":
        return Fractal("mandelbrot")
    if len(args) == 3 and args[0] == "julia":
        return Fractal("julia", julia=complex(atodbl(args[1]), atodbl(args[2])))
    raise UsageError(USAGE)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments and show the fractal; returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        fractal = parse_args(argv)
    except UsageError as error:
        sys.stderr.write(str(error))
        return 1

    from .window import Viewer

    Viewer(fractal).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())