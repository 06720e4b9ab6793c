"""Chainable builders that render gnuplot command fragments."""

__version__ = "0.3.1"

__all__ = ["column", "draw", "options", "text", "tics", "title", "vec"]