"""Interactive explorer for Mandelbrot, Julia and Tricorn fractals."""

__version__ = "1.0.0"

__all__ = ["__version__"]