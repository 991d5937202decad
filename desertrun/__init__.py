"""A tile-based desert puzzle game with its own map checker and XPM reader."""

__version__ = "0.1.0"