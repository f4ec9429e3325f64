"""Colour counting of BMP images, SVG pie charts, and socket tools that exchange palettes and echo messages."""

__version__ = "0.1.0"