"""Turn-based emoji exploration game for the terminal."""

__version__ = "0.1.0"
