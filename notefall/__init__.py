"""Notefall: draw platforms, let the balls play them."""

__version__ = "0.1.0"
