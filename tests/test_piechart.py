import math
import re
import sys

import pytest

from chromasock.piechart import (
    NUM_COLORS,
    degrees_to_radians,
    open_in_browser,
    render_pie_chart,
    write_pie_chart,
)

_PATH_RE = re.compile(
    r'<path d="M([-\d.]+),([-\d.]+) A150\.00,150\.00 0 0,1 ([-\d.]+),([-\d.]+) '
    r'L200\.00,200\.00 Z" fill="([^"]*)" />'
)


def test_degrees_to_radians():
    assert degrees_to_radians(180.0) == pytest.approx(math.pi)
    assert degrees_to_radians(0.0) == 0.0
    assert degrees_to_radians(-90.0) == pytest.approx(-math.pi / 2)


def test_render_document_frame():
    svg = render_pie_chart([])
    assert svg.startswith('<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n')
    assert '<rect width="100%" height="100%" fill="#ffffff" />' in svg
    assert svg.endswith("</svg>\n")
    assert "<path" not in svg


def test_first_slice_starts_at_top():
    svg = render_pie_chart(["#ff0000"])
    match = _PATH_RE.search(svg)
    assert match is not None
    assert (match.group(1), match.group(2)) == ("200.00", "50.00")
    assert match.group(5) == "#ff0000"


def test_one_slice_per_colour_in_order():
    colors = ["#000001", "#000002", "#000003"]
    fills = [m.group(5) for m in _PATH_RE.finditer(render_pie_chart(colors))]
    assert fills == colors


def test_at_most_ten_slices():
    colors = [f"#0000{i:02x}" for i in range(12)]
    fills = [m.group(5) for m in _PATH_RE.finditer(render_pie_chart(colors))]
    assert len(fills) == NUM_COLORS
    assert fills == colors[:NUM_COLORS]


def test_slices_are_contiguous_and_on_circle():
    colors = [f"#1111{i:02x}" for i in range(NUM_COLORS)]
    matches = list(_PATH_RE.finditer(render_pie_chart(colors)))
    for prev, nxt in zip(matches, matches[1:]):
        assert (prev.group(3), prev.group(4)) == (nxt.group(1), nxt.group(2))
    for m in matches:
        x, y = float(m.group(1)), float(m.group(2))
        assert math.hypot(x - 200.0, y - 200.0) == pytest.approx(150.0, abs=0.02)
    # A full circle ends where it began.
    assert (matches[-1].group(3), matches[-1].group(4)) == (
        matches[0].group(1),
        matches[0].group(2),
    )


def test_write_pie_chart(tmp_path):
    target = tmp_path / "chart.svg"
    colors = write_pie_chart("couleurs: 2,#aabbcc,#112233", target)
    assert colors == ["#aabbcc", "#112233"]
    assert target.read_text(encoding="utf-8") == render_pie_chart(colors)


def test_write_pie_chart_label_only(tmp_path):
    target = tmp_path / "chart.svg"
    assert write_pie_chart("couleurs: 1", target) == []
    assert "<path" not in target.read_text(encoding="utf-8")


def test_open_in_browser_success(tmp_path, capsys):
    script = tmp_path / "ok.py"
    script.write_text("pass\n")
    assert open_in_browser(script, sys.executable) is True
    assert "opened" in capsys.readouterr().out


def test_open_in_browser_failure_exit_code(tmp_path, capsys):
    script = tmp_path / "bad.py"
    script.write_text("raise SystemExit(3)\n")
    assert open_in_browser(script, sys.executable) is False
    assert "Failed to open the SVG file." in capsys.readouterr().out


def test_open_in_browser_missing_command(tmp_path):
    assert open_in_browser(tmp_path / "x.svg", "no-such-browser-command-xyz") is False