"""Colour values and counting of distinct colours."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class BitDepth(Enum):
    """Number of bits used to store one pixel."""

    BITS24 = 24
    BITS32 = 32

    @property
    def bytes_per_pixel(self) -> int:
        return self.value // 8


@dataclass(frozen=True)
class Color:
    """An RGB colour with an optional alpha channel."""

    red: int
    green: int
    blue: int
    alpha: int | None = None

    def hex(self) -> str:
        """Return the colour as an HTML ``#rrggbb`` string."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


@dataclass
class ColorCount:
    """A distinct colour and how many times it occurs."""

    color: Color
    count: int = 1


@dataclass
class ColorCounter:
    """Distinct colours of an image, with their counts."""

    bit_depth: BitDepth
    counts: list[ColorCount] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.counts)

    def __len__(self) -> int:
        return len(self.counts)

    def __iter__(self):
        return iter(self.counts)


def _key(color: Color, bit_depth: BitDepth) -> tuple:
    if bit_depth is BitDepth.BITS24:
        return (color.red, color.green, color.blue)
    return (color.red, color.green, color.blue, color.alpha or 0)


def count_colors(colors: Iterable[Color], bit_depth: BitDepth) -> ColorCounter:
    """Count the distinct colours, keeping the order in which they first appear.

    For 24-bit colours the alpha channel is ignored.
    """
    if not isinstance(bit_depth, BitDepth):
        raise ValueError(f"unknown bit count: {bit_depth!r}")

    entries: dict[tuple, ColorCount] = {}
    for color in colors:
        key = _key(color, bit_depth)
        entry = entries.get(key)
        if entry is None:
            stored = color if bit_depth is BitDepth.BITS32 else Color(*key)
            entries[key] = ColorCount(stored)
        else:
            entry.count += 1
    return ColorCounter(bit_depth, list(entries.values()))


def sort_counts(counter: ColorCounter) -> None:
    """Sort the counter in place, least frequent colour first."""
    counter.counts.sort(key=lambda entry: entry.count)


def format_colors(colors: Iterable[Color], bit_depth: BitDepth) -> str:
    """Return one line per colour with its channels in hexadecimal."""
    if not isinstance(bit_depth, BitDepth):
        return ""
    lines = []
    for c in colors:
        line = f"{c.red:5x} {c.green:5x} {c.blue:5x}"
        if bit_depth is BitDepth.BITS32:
            line += f" {c.alpha or 0:5x}"
        lines.append(line + "\n")
    return "".join(lines)


def format_counter(counter: ColorCounter) -> str:
    """Return one line per distinct colour with its channels and its count."""
    lines = []
    for entry in counter.counts:
        c = entry.color
        line = f"{c.red:5x} {c.green:5x} {c.blue:5x}"
        if counter.bit_depth is BitDepth.BITS32:
            line += f" {c.alpha or 0:5x}"
        lines.append(f"{line}: {entry.count:10d}\n")
    return "".join(lines)