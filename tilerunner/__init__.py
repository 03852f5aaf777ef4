"""A tile-based side-scrolling platformer built on pygame."""

__version__ = "0.1.0"