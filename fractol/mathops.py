"""Mapping from screen pixels to the complex plane and the iteration step."""

import numpy as np

from .config import BOUND_MAX, BOUND_MIN, HEIGHT, WIDTH, FractalKind

_MANDELBROT_SHIFT = WIDTH // 3 + 17
_DEFAULT_SHIFT = WIDTH // 4


def _make_complex(real, imag):
    if np.ndim(real) == 0 and np.ndim(imag) == 0:
        return complex(float(real), float(imag))
    real, imag = np.broadcast_arrays(np.asarray(real, dtype=float),
                                     np.asarray(imag, dtype=float))
    result = np.empty(real.shape, dtype=complex)
    result.real = real
    result.imag = imag
    return result


def scale(offset, low, high, size):
    """Map ``offset`` in ``[0, size]`` linearly onto ``[low, high]``."""
    return (high - low) * offset / size + low


def square(z, factor):
    """Return ``x*x - y*y + i*factor*x*y`` for ``z = x + i*y``.

    A factor of 2 squares ``z``; a factor of -2 squares its conjugate.
    Works on scalars and on numpy arrays.
    """
    x = np.real(z)
    y = np.imag(z)
    return _make_complex(x * x - y * y, factor * x * y)


def pixel_to_complex(kind, x, y, zoom, offset):
    """Return the point of the complex plane drawn at pixel ``(x, y)``."""
    shift = _MANDELBROT_SHIFT if kind is FractalKind.MANDELBROT else _DEFAULT_SHIFT
    offset = complex(offset)
    real = scale(np.subtract(x, shift), BOUND_MIN, BOUND_MAX, HEIGHT) * zoom + offset.real
    imag = scale(y, BOUND_MAX, BOUND_MIN, HEIGHT) * zoom + offset.imag
    return _make_complex(real, imag)


def starting_point(kind, x, y, zoom, offset, constant):
    """Return ``(z, c)`` for the pixel ``(x, y)``.

    For a Julia set ``c`` is the fixed ``constant``; for the other kinds it
    is the pixel's own point.
    """
    z = pixel_to_complex(kind, x, y, zoom, offset)
    if kind is not FractalKind.JULIA:
        return z, z
    if np.ndim(z) == 0:
        return z, complex(constant)
    return z, np.full_like(z, complex(constant))