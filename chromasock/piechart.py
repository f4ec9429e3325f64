"""Drawing a colour palette as an SVG pie chart and showing it in a browser."""

from __future__ import annotations

import math
import os
import subprocess
from pathlib import Path
from typing import Iterable

SVG_FILE_PATH = "pie_chart.svg"
DEFAULT_BROWSER = "firefox"
NUM_COLORS = 10

_CENTER_X = 200.0
_CENTER_Y = 200.0
_RADIUS = 150.0
_START_ANGLE = -90.0


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle from degrees to radians."""
    return degrees * math.pi / 180.0


def render_pie_chart(colors: Iterable[str]) -> str:
    """Return an SVG document with one equal slice per colour.

    Every slice spans a tenth of the circle, starting at the top and going
    clockwise; at most ten colours are drawn.
    """
    parts = [
        '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n',
        '<svg width="400" height="400" xmlns="http://www.w3.org/2000/svg">\n',
        '  <rect width="100%" height="100%" fill="#ffffff" />\n',
    ]
    step = 360.0 / NUM_COLORS
    start_angle = _START_ANGLE
    for color in list(colors)[:NUM_COLORS]:
        end_angle = start_angle + step
        start_rad = degrees_to_radians(start_angle)
        end_rad = degrees_to_radians(end_angle)
        x1 = _CENTER_X + _RADIUS * math.cos(start_rad)
        y1 = _CENTER_Y + _RADIUS * math.sin(start_rad)
        x2 = _CENTER_X + _RADIUS * math.cos(end_rad)
        y2 = _CENTER_Y + _RADIUS * math.sin(end_rad)
        parts.append(
            f'  <path d="M{x1:.2f},{y1:.2f} A{_RADIUS:.2f},{_RADIUS:.2f} 0 0,1 '
            f'{x2:.2f},{y2:.2f} L{_CENTER_X:.2f},{_CENTER_Y:.2f} Z" fill="{color}" />\n'
        )
        start_angle = end_angle
    parts.append("</svg>\n")
    return "".join(parts)


def _palette_colors(data: str) -> list[str]:
    """Split a palette message into its colours, dropping the leading label."""
    tokens = [token for token in data.split(",") if token]
    return tokens[1:]


def write_pie_chart(data: str, path: str | os.PathLike[str] = SVG_FILE_PATH) -> list[str]:
    """Write the pie chart for a palette message to ``path``.

    The message is a comma separated list whose first field is a label;
    the remaining fields are the colours. Returns the colours found.
    """
    colors = _palette_colors(data)
    Path(path).write_text(render_pie_chart(colors), encoding="utf-8")
    return colors


def open_in_browser(
    path: str | os.PathLike[str] = SVG_FILE_PATH, browser: str = DEFAULT_BROWSER
) -> bool:
    """Open ``path`` with the given browser command; return whether it succeeded."""
    try:
        result = subprocess.run([browser, os.fspath(path)], check=False)
    except OSError:
        ok = False
    else:
        ok = result.returncode == 0
    if ok:
        print(f"SVG file opened in {browser}.")
    else:
        print("Failed to open the SVG file.")
    return ok