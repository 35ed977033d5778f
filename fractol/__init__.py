"""Interactive Mandelbrot, Julia and Tricorn fractal explorer with a numpy renderer."""

__version__ = "0.1.0"
__all__ = ["__version__"]