"""Counting BMP image colours, drawing SVG pie charts and exchanging messages over TCP."""

__version__ = "0.1.0"