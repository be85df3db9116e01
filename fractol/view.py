"""The navigable state of a fractal view: zoom, offset and colour shifts."""

from dataclasses import dataclass
from enum import Enum, auto

from .config import (
    COLOR_STEP,
    DEFAULT_SHIFTS,
    HEIGHT,
    PAN_DIVISOR,
    SPEED,
    WIDTH,
    ZOOM_INIT,
    ZOOM_MAX,
    ZOOM_OFFSET_FACTOR,
    FractalKind,
    initial_zoom,
)


class Action(Enum):
    """Something the user can ask the view to do."""

    PAN_RIGHT = auto()
    PAN_LEFT = auto()
    PAN_UP = auto()
    PAN_DOWN = auto()
    ZOOM_IN = auto()
    ZOOM_OUT = auto()
    SHIFT_ALL = auto()
    SHIFT_RED = auto()
    SHIFT_GREEN = auto()
    SHIFT_BLUE = auto()
    RESET = auto()
    RESET_BLACK = auto()


_PAN_DIRECTIONS = {
    Action.PAN_RIGHT: (1, 0),
    Action.PAN_LEFT: (-1, 0),
    Action.PAN_UP: (0, 1),
    Action.PAN_DOWN: (0, -1),
}

_SHIFT_CHANNELS = {
    Action.SHIFT_ALL: (1, 1, 1),
    Action.SHIFT_RED: (1, 0, 0),
    Action.SHIFT_GREEN: (0, 1, 0),
    Action.SHIFT_BLUE: (0, 0, 1),
}


@dataclass
class View:
    """Where the complex plane is looked at and how it is coloured."""

    kind: FractalKind
    constant: complex = 0j
    zoom_level: float = ZOOM_INIT
    offset: complex = 0j
    shifts: tuple = DEFAULT_SHIFTS

    @property
    def zoom_init(self):
        """The widest zoom this view allows, which is also where it starts."""
        return initial_zoom(self.kind)

    def reset(self):
        """Return zoom, offset and colour shifts to their starting values."""
        self.zoom_level = self.zoom_init
        self.offset = 0j
        self.shifts = DEFAULT_SHIFTS

    def zoom(self, zoom_in):
        """Zoom in or out by one step, never beyond the starting zoom."""
        if zoom_in and self.zoom_level > ZOOM_MAX:
            self.zoom_level -= self.zoom_level / SPEED * 2
        elif not zoom_in:
            self.zoom_level += self.zoom_level / SPEED * 2
        if self.zoom_level > self.zoom_init:
            self.zoom_level = self.zoom_init

    def zoom_toward(self, zoom_in, mouse_x, mouse_y):
        """Zoom one step and move the offset toward the mouse position."""
        self.zoom(zoom_in)
        dx = int((mouse_x - WIDTH // 2) / SPEED)
        dy = int((mouse_y - HEIGHT // 2) / SPEED)
        step = ZOOM_OFFSET_FACTOR * self.zoom_level
        if zoom_in:
            self.offset = complex(self.offset.real + step * dx, self.offset.imag - step * dy)
        elif self.zoom_level < self.zoom_init:
            self.offset = complex(self.offset.real - step * dx, self.offset.imag + step * dy)

    def pan(self, action):
        """Move the view one step in the direction named by ``action``."""
        try:
            dx, dy = _PAN_DIRECTIONS[action]
        except KeyError:
            raise ValueError(f"not a pan action: {action}") from None
        step = self.zoom_level / PAN_DIVISOR
        real, imag = self.offset.real, self.offset.imag
        if dx:
            real += dx * step
        if dy:
            imag += dy * step
        self.offset = complex(real, imag)

    def shift_colors(self, action):
        """Advance the colour channels named by ``action`` by one step."""
        try:
            channels = _SHIFT_CHANNELS[action]
        except KeyError:
            raise ValueError(f"not a colour action: {action}") from None
        self.shifts = tuple(
            shift + COLOR_STEP if selected else shift
            for shift, selected in zip(self.shifts, channels)
        )

    def apply(self, action):
        """Carry out ``action`` on the view."""
        if action in _PAN_DIRECTIONS:
            self.pan(action)
        elif action in _SHIFT_CHANNELS:
            self.shift_colors(action)
        elif action is Action.ZOOM_IN:
            self.zoom(True)
        elif action is Action.ZOOM_OUT:
            self.zoom(False)
        elif action is Action.RESET:
            self.reset()
        elif action is Action.RESET_BLACK:
            self.reset()
            self.shifts = (0.0, 0.0, 0.0)
        else:
            raise ValueError(f"unknown action: {action!r}")


def create_view(spec):
    """Return a view at its starting position for a ``FractalSpec``."""
    view = View(kind=spec.kind, constant=spec.constant)
    view.reset()
    return view