"""untd — Unix timestamp to date converter."""

__version__ = "0.1.0"
