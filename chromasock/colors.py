"""Colour values and counting of distinct colours in pixel data."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class BitDepth(Enum):
    """Number of bits used to store one pixel."""

    BITS24 = 24
    BITS32 = 32


@dataclass(frozen=True)
class Color:
    """A single pixel colour; alpha is only meaningful for 32-bit pixels."""

    red: int
    green: int
    blue: int
    alpha: int = 0

    def hex(self) -> str:
        """Return the colour as an ``#rrggbb`` string."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


@dataclass
class ColorCount:
    """A distinct colour together with how many pixels have it."""

    color: Color
    count: int


def _key(color: Color, depth: BitDepth) -> tuple[int, ...]:
    if depth is BitDepth.BITS24:
        return (color.red, color.green, color.blue)
    return (color.red, color.green, color.blue, color.alpha)


def _check_depth(depth: object) -> BitDepth:
    if not isinstance(depth, BitDepth):
        raise ValueError(f"unknown bit depth: {depth!r}")
    return depth


def count_colors(colors: Iterable[Color], depth: BitDepth) -> list[ColorCount]:
    """Count distinct colours, keeping the order in which each first appears.

    24-bit colours are compared on red, green and blue only; 32-bit colours
    also compare alpha.
    """
    depth = _check_depth(depth)
    counts: dict[tuple[int, ...], ColorCount] = {}
    for color in colors:
        key = _key(color, depth)
        entry = counts.get(key)
        if entry is None:
            counts[key] = ColorCount(color, 1)
        else:
            entry.count += 1
    return list(counts.values())


def sort_counts(counts: Iterable[ColorCount]) -> list[ColorCount]:
    """Return the counts ordered from least to most frequent."""
    return sorted(counts, key=lambda entry: entry.count)


def format_colors(colors: Iterable[Color], depth: BitDepth) -> str:
    """Render colours one per line as hexadecimal components."""
    depth = _check_depth(depth)
    lines = []
    for c in colors:
        if depth is BitDepth.BITS24:
            lines.append(f"{c.red:5x} {c.green:5x} {c.blue:5x}\n")
        else:
            lines.append(f"{c.red:5x} {c.green:5x} {c.blue:5x} {c.alpha:5x}\n")
    return "".join(lines)


def format_counts(counts: Iterable[ColorCount], depth: BitDepth) -> str:
    """Render colour counts one per line: hexadecimal components, then the count."""
    depth = _check_depth(depth)
    lines = []
    for entry in counts:
        c = entry.color
        if depth is BitDepth.BITS24:
            lines.append(f"{c.red:5x} {c.green:5x} {c.blue:5x}: {entry.count:10d}\n")
        else:
            lines.append(
                f"{c.red:5x} {c.green:5x} {c.blue:5x} {c.alpha:5x}: {entry.count:10d}\n"
            )
    return "".join(lines)