"""The interactive window: event handling, frame scheduling and the entry point."""

import sys
import time
from pathlib import Path

import numpy as np
import pygame

from .config import HEIGHT, RENDER_DELAY, WIDTH, WINDOW_TITLE_PREFIX
from .parse import UsageError, format_error, help_text, parse_arguments
from .render import render_pixels
from .view import Action, create_view

ICON_PATH = Path("assets") / "42_icon.png"
FRAME_RATE = 60

_KEY_ACTIONS = {
    pygame.K_RIGHT: Action.PAN_RIGHT,
    pygame.K_LEFT: Action.PAN_LEFT,
    pygame.K_UP: Action.PAN_UP,
    pygame.K_DOWN: Action.PAN_DOWN,
    pygame.K_EQUALS: Action.ZOOM_IN,
    pygame.K_MINUS: Action.ZOOM_OUT,
    pygame.K_c: Action.SHIFT_ALL,
    pygame.K_r: Action.SHIFT_RED,
    pygame.K_g: Action.SHIFT_GREEN,
    pygame.K_b: Action.SHIFT_BLUE,
    pygame.K_1: Action.RESET,
    pygame.K_0: Action.RESET_BLACK,
}


def window_title(name):
    """Return the window title for the fractal called ``name``."""
    return WINDOW_TITLE_PREFIX + name


def action_for_key(key):
    """Return the ``Action`` bound to a pygame key code, or ``None``."""
    return _KEY_ACTIONS.get(key)


def _to_surface_array(pixels):
    """Turn packed ``0xRRGGBBAA`` rows into a ``(width, height, 3)`` RGB array."""
    rgb = np.stack(
        [(pixels >> 24) & 0xFF, (pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF],
        axis=-1,
    ).astype(np.uint8)
    return np.ascontiguousarray(rgb.transpose(1, 0, 2))


class FractolApp:
    """A fractal window that redraws after each accepted user action.

    While a frame is being drawn, and for a short delay after it, input
    other than Escape is ignored.
    """

    def __init__(self, view, title):
        self.view = view
        self.title = title
        self.width = WIDTH
        self.height = HEIGHT
        self.pixels = None
        self.running = True
        self.rendering = True
        self.delay = 0.0
        self._pending = True

    def _request_render(self):
        self.rendering = True
        self._pending = True

    def handle_key(self, key):
        """React to a key press; return the action carried out, if any."""
        if key == pygame.K_ESCAPE:
            self.running = False
            return None
        if self.rendering:
            return None
        action = action_for_key(key)
        if action is None:
            return None
        self.view.apply(action)
        self._request_render()
        return action

    def handle_scroll(self, dy, mouse_x, mouse_y):
        """Zoom toward the mouse on a wheel step; return whether it zoomed."""
        if self.rendering or dy == 0:
            return False
        self.view.zoom_toward(dy > 0, mouse_x, mouse_y)
        self._request_render()
        return True

    def tick(self, now):
        """Advance the frame schedule to time ``now``.

        Draws a pending frame and returns ``True`` when one was drawn;
        otherwise ends the input pause once ``now`` passes the delay.
        """
        if self._pending:
            self.pixels = render_pixels(self.view, self.width, self.height)
            self._pending = False
            self.rendering = True
            self.delay = now + RENDER_DELAY
            return True
        if self.rendering and now > self.delay:
            self.rendering = False
        return False

    def run(self):
        """Open the window and process events until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(self.title)
            if ICON_PATH.is_file():
                pygame.display.set_icon(pygame.image.load(str(ICON_PATH)))
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(event.key)
                    elif event.type == pygame.MOUSEWHEEL:
                        mouse_x, mouse_y = pygame.mouse.get_pos()
                        self.handle_scroll(event.y, mouse_x, mouse_y)
                if not self.running:
                    break
                if self.tick(time.monotonic()):
                    surface = pygame.surfarray.make_surface(_to_surface_array(self.pixels))
                    screen.blit(surface, (0, 0))
                pygame.display.flip()
                clock.tick(FRAME_RATE)
        finally:
            pygame.quit()


def main(argv=None):
    """Parse the command line and show the requested fractal."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        spec = parse_arguments(args)
    except UsageError as error:
        sys.stdout.write(help_text())
        sys.stderr.write(format_error(error))
        return 1
    FractolApp(create_view(spec), window_title(spec.name)).run()
    return 0