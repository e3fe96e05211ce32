"""Drawing lists of colours as SVG pie charts."""

from __future__ import annotations

import math
import os
import subprocess
from pathlib import Path
from typing import Iterable

SVG_FILE_PATH = "pie_chart.svg"
DEFAULT_BROWSER = "firefox"
MAX_COLORS = 10

CENTER_X = 200.0
CENTER_Y = 200.0
RADIUS = 150.0
START_ANGLE = -90.0

_SLICE_ANGLE = 360.0 / MAX_COLORS

_PROLOGUE = (
    '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'
    '<svg width="400" height="400" xmlns="http://www.w3.org/2000/svg">\n'
    '  <rect width="100%" height="100%" fill="#ffffff" />\n'
)
_EPILOGUE = "</svg>\n"


def _point(angle: float) -> tuple[float, float]:
    rad = math.radians(angle)
    return CENTER_X + RADIUS * math.cos(rad), CENTER_Y + RADIUS * math.sin(rad)


def render_pie_chart(colors: Iterable[str]) -> str:
    """Return an SVG document with one equal slice per colour.

    Every slice spans a tenth of the circle, starting at the top and
    turning clockwise, so at most ten colours can be drawn.
    """
    fills = list(colors)
    if len(fills) > MAX_COLORS:
        raise ValueError(f"at most {MAX_COLORS} colours can be drawn, got {len(fills)}")

    parts = [_PROLOGUE]
    start = START_ANGLE
    for fill in fills:
        end = start + _SLICE_ANGLE
        x1, y1 = _point(start)
        x2, y2 = _point(end)
        parts.append(
            f'  <path d="M{x1:.2f},{y1:.2f} A{RADIUS:.2f},{RADIUS:.2f} 0 0,1 '
            f'{x2:.2f},{y2:.2f} L{CENTER_X:.2f},{CENTER_Y:.2f} Z" fill="{fill}" />\n'
        )
        start = end
    parts.append(_EPILOGUE)
    return "".join(parts)


def write_pie_chart(colors: Iterable[str], path: str | os.PathLike = SVG_FILE_PATH) -> Path:
    """Write the pie chart of ``colors`` to ``path`` and return the path."""
    document = render_pie_chart(colors)
    target = Path(path)
    target.write_text(document, encoding="utf-8")
    return target


def open_in_browser(path: str | os.PathLike = SVG_FILE_PATH, browser: str = DEFAULT_BROWSER) -> bool:
    """Open ``path`` with ``browser``; return whether the browser exited cleanly."""
    try:
        result = subprocess.run([browser, os.fspath(path)], check=False)
    except OSError:
        succeeded = False
    else:
        succeeded = result.returncode == 0

    if succeeded:
        print(f"SVG file opened in {browser}.")
    else:
        print("Failed to open the SVG file.")
    return succeeded