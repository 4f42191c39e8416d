"""Transform point-defined functions, describe their plots and measure distances."""

__version__ = "0.1.0"

__all__ = ["__version__"]