"""Packing of RGBA pixels and the Bernstein polynomial palette."""

import math

import numpy as np

from .config import MAX_COLOR_DEFINITION

_INT32_LOW = -(2 ** 31) - 1
_INT32_HIGH = 2 ** 31


def _to_byte(value):
    """Truncate a number to an integer and keep its low eight bits."""
    value = float(value)
    if not math.isfinite(value) or not _INT32_LOW < value < _INT32_HIGH:
        return 0
    return int(value) & 0xFF


def pack_rgba(r, g, b, a):
    """Pack four channels into one 32-bit ``0xRRGGBBAA`` value.

    Each channel is truncated toward zero and only its low byte is kept.
    """
    return (_to_byte(r) << 24) | (_to_byte(g) << 16) | (_to_byte(b) << 8) | _to_byte(a)


def bernstein_color(iteration, alpha, shifts):
    """Return the packed colour for an escape ``iteration``.

    ``shifts`` holds the red, green and blue offsets added to the
    normalised iteration before the polynomials are evaluated.
    """
    if iteration < 0:
        raise ValueError("iteration must not be negative")
    r_shift, g_shift, b_shift = shifts
    base = 1.0 * iteration / MAX_COLOR_DEFINITION
    r = base + r_shift
    g = base + g_shift
    b = base + b_shift
    red = 255 * 9 * (1.0 - r) * (r * r * r)
    green = 255 * 15 * ((1.0 - g) * (1.0 - g)) * (g * g)
    blue = 255 * 8.5 * ((1.0 - b) * (1.0 - b) * (1.0 - b)) * b
    return pack_rgba(red, green, blue, alpha)


def bernstein_colors(iterations, alpha, shifts):
    """Return an array of packed colours, one for each iteration count."""
    counts = np.asarray(iterations, dtype=np.int64)
    if counts.size == 0:
        return np.zeros(counts.shape, dtype=np.uint32)
    if counts.min() < 0:
        raise ValueError("iteration must not be negative")
    palette = np.array(
        [bernstein_color(i, alpha, shifts) for i in range(int(counts.max()) + 1)],
        dtype=np.uint32,
    )
    return palette[counts]