"""Command-line arguments, usage text and error messages."""

import re
from dataclasses import dataclass

from .config import BOUND_MAX, BOUND_MIN, FractalKind, fractal_kind

_DOUBLE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")
_USAGE = "./fractol [fractal type] [fractal constant]"
_RULE = "-" * 68 + "\n"


class UsageError(Exception):
    """The command line does not describe a fractal that can be drawn."""

    def __init__(self, title, message):
        super().__init__(f"{title} - {message}")
        self.title = title
        self.message = message


@dataclass(frozen=True)
class FractalSpec:
    """A validated request to draw a fractal."""

    name: str
    kind: FractalKind
    constant: complex = 0j


def is_double(text):
    """Return whether ``text`` is a plain decimal number."""
    return _DOUBLE.fullmatch(text) is not None


def _julia_part(args, index, part):
    error = UsageError("Invalid Julia", f"Invalid constant {part}.")
    if len(args) <= index or not is_double(args[index]):
        raise error
    value = float(args[index])
    if value > BOUND_MAX or value < BOUND_MIN:
        raise error
    return value


def parse_arguments(argv):
    """Validate the arguments that follow the program name.

    Returns a ``FractalSpec``; raises ``UsageError`` when the arguments
    are wrong.
    """
    args = list(argv)
    if not 1 <= len(args) <= 3:
        raise UsageError("Invalid Fractal", _USAGE)
    name = args[0]
    try:
        kind = fractal_kind(name)
    except ValueError:
        raise UsageError("Invalid Fractal", _USAGE) from None
    if kind is FractalKind.JULIA:
        real = _julia_part(args, 1, "real")
        imag = _julia_part(args, 2, "imaginary")
        return FractalSpec(name, kind, complex(real, imag))
    if len(args) > 1:
        title = "Invalid Mandelbrot" if kind is FractalKind.MANDELBROT else "Invalid Tricorn"
        raise UsageError(title, "Too many arguments.")
    return FractalSpec(name, kind)


def help_text():
    """Return the guide printed before an error message."""
    return "".join([
        "\t\t\t\033[0;36m== FRACTOL GUIDE ==\033[0m\n",
        _RULE,
        "\t\t\t  \033[0;33mArguments Guide:\033[0m\n\n",
        "./fractol mandelbrot\n",
        "./fractol tricorn\n",
        "./fractol julia X.XXXXX X.XXXXX\n",
        _RULE,
        "\t\t\t    \033[0;33mJulia tips:\033[0m\n\n",
        "(-0.835,   -0.2321)\t(0.285,  0.0)\t\t(0.285,    0.01)\n",
        "(-0.5239,  -0.69969)\t(0.45,   0.1428)\t(-0.70469, -0.5239)\n",
        "(-0.70176, -0.3842)\t(-0.312, 0.0)\n",
        "\n\033[0;32mAny range between 2 and -2, "
        "it's a fractal valid in Julia arguments\033[0m\n",
        _RULE,
    ])


def format_error(error):
    """Return the coloured one-line message for a ``UsageError``."""
    return f"\033[0;31m{error.title}\033[0m - {error.message}\n"