# fractol

An interactive fractal explorer for the Mandelbrot set, Julia sets and the
Tricorn. It opens a 1920×995 pygame window, draws the fractal and lets you
zoom, pan and change the colours.

## Installation

```
pip install .
```

This installs the `fractol` command. You need a display, because the program
draws in a pygame window.

## Usage

```
fractol mandelbrot
fractol tricorn
fractol julia <real> <imaginary>
```

The fractal name is matched by its beginning, so `mandelbrot2` also selects
the Mandelbrot set. Mandelbrot and Tricorn take no further arguments.

Both Julia constants must be plain decimal numbers (an optional sign, digits
and an optional decimal point) between -2 and 2. Some values that give good
pictures:

| real     | imaginary |
|----------|-----------|
| -0.835   | -0.2321   |
| 0.285    | 0.0       |
| 0.285    | 0.01      |
| -0.5239  | -0.69969  |
| 0.45     | 0.1428    |
| -0.70469 | -0.5239   |
| -0.70176 | -0.3842   |
| -0.312   | 0.0       |

If the arguments are wrong, the program prints a short guide to standard
output and a coloured error message to standard error, then exits with
status 1.

The window title is `fract-ol | type of fractal - <name>`. If a file
`assets/42_icon.png` exists in the current directory, it is used as the
window icon.

## Controls

| Input           | Effect                                           |
|-----------------|--------------------------------------------------|
| Mouse wheel     | Zoom in or out toward the cursor                 |
| `=` / `-`       | Zoom in / zoom out                               |
| Arrow keys      | Pan the view                                     |
| `C`             | Shift all colour channels                        |
| `R`, `G`, `B`   | Shift the red, green or blue channel             |
| `1`             | Reset the view and the default palette           |
| `0`             | Reset the view with every colour shift set to 0  |
| `Esc`           | Close the window                                 |

After each redraw, input other than `Esc` is ignored for a short moment. You
can never zoom out further than the starting view.

## Using it from Python

The drawing code does not need a window:

```python
from fractol.parse import parse_arguments
from fractol.view import Action, create_view
from fractol.render import render_pixels

view = create_view(parse_arguments(["julia", "-0.835", "-0.2321"]))
view.apply(Action.ZOOM_IN)
pixels = render_pixels(view, 320, 200)  # (200, 320) array of 0xRRGGBBAA values
```

`fractol.render.escape_counts` returns the escape iteration of every pixel
instead of colours (at most 120 iterations), and `fractol.color.bernstein_color`
gives the palette colour for one iteration count.

## What it does not do

The window size is fixed, and there is no way to save a picture or to enter a
new fractal or constant without restarting the program.

## Running the tests

```
pip install .[test]
pytest
```