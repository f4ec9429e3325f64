"""Small console exercises: a greeting, a triangle, a circle and a counter."""

from __future__ import annotations

import argparse

PI = 3.1416
MAX_ROWS = 10


def greeting() -> str:
    """Return the greeting text."""
    return "Bonjour CNAM !"


def triangle(rows: int = 5) -> str:
    """Draw a hollow right triangle of ``rows`` lines.

    Border cells are ``*``, inner cells ``#``; ``rows`` must be below ten.
    """
    if not 0 <= rows < MAX_ROWS:
        raise ValueError(f"rows must be between 0 and {MAX_ROWS - 1}, got {rows}")
    lines = []
    for i in range(1, rows + 1):
        cells = (
            "* " if j in (1, i) or i == rows else "# "
            for j in range(1, i + 1)
        )
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def circle_report(radius: float = 6) -> str:
    """Return the area and perimeter of a circle, as printed text."""
    area = PI * (radius * radius)
    perimeter = PI * (radius + radius)
    return f"L'air du cercle = {area:f}Le périmètre du cercle = {perimeter:f}"


def count_lines(limit: int = 1000) -> str:
    """Return the numbers from 0 up to ``limit`` (excluded), one per line."""
    return "".join(f"{i} \n" for i in range(limit))


def main(argv: list[str] | None = None) -> int:
    """Print the output of one exercise."""
    parser = argparse.ArgumentParser(description="Run a console exercise.")
    parser.add_argument(
        "exercise", choices=["bonjour", "boucles", "cercle", "conditions"]
    )
    args = parser.parse_args(argv)
    outputs = {
        "bonjour": greeting,
        "boucles": triangle,
        "cercle": circle_report,
        "conditions": count_lines,
    }
    print(outputs[args.exercise](), end="")
    return 0