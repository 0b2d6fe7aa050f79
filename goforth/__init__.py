"""A small engine for text adventure games, with a playable demo."""

__version__ = "0.1.0"
__all__ = ["__version__"]