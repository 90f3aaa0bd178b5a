"""Logging, console output, arrays, boxed numbers, mutable strings, BMP images and CPU details."""

__version__ = "0.9.0"