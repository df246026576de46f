"""Binaural panning of mono sound sources for headphones, with a pygame demo player."""

__version__ = "0.1.0"
__all__ = ["__version__"]