"""A tile-based 2D puzzle game with map validation, XPM sprites and a pygame window."""

__version__ = "1.0.0"

__all__ = ["__version__"]