"""Reading BMP images and counting their colours."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass

from couleurnet.colors import BitDepth, Color, ColorCounter, count_colors, sort_counts

BMP_SIGNATURE = 0x4D42

_HEADER = struct.Struct("<HIHHI")
_INFO_HEADER = struct.Struct("<IIIHHIIIIII")


class BmpError(Exception):
    """Raised when a file is not a BMP image that can be analysed."""


@dataclass(frozen=True)
class BmpHeader:
    """The file header of a BMP image."""

    type: int
    file_size: int
    reserved1: int
    reserved2: int
    offset: int

    SIZE = _HEADER.size


@dataclass(frozen=True)
class BmpInfoHeader:
    """The information header of a BMP image."""

    info_header_size: int
    width: int
    height: int
    planes: int
    bit_count: int
    compression: int
    image_size: int
    x_pixels_per_meter: int
    y_pixels_per_meter: int
    colors_used: int
    colors_important: int

    SIZE = _INFO_HEADER.size


def parse_header(data: bytes) -> BmpHeader:
    """Parse the 14-byte file header at the start of ``data``."""
    if len(data) < _HEADER.size:
        raise BmpError("file header is truncated")
    return BmpHeader(*_HEADER.unpack_from(data))


def parse_info_header(data: bytes) -> BmpInfoHeader:
    """Parse the 40-byte information header at the start of ``data``."""
    if len(data) < _INFO_HEADER.size:
        raise BmpError("information header is truncated")
    return BmpInfoHeader(*_INFO_HEADER.unpack_from(data))


def read_pixels(data: bytes, bit_depth: BitDepth) -> list[Color]:
    """Decode BGR or BGRA pixel bytes into colours; trailing bytes are ignored."""
    step = bit_depth.bytes_per_pixel
    usable = len(data) - len(data) % step
    if bit_depth is BitDepth.BITS32:
        return [
            Color(red=r, green=g, blue=b, alpha=a)
            for b, g, r, a in struct.iter_unpack("4B", data[:usable])
        ]
    return [
        Color(red=r, green=g, blue=b)
        for b, g, r in struct.iter_unpack("3B", data[:usable])
    ]


def analyse_bmp_image(path: str | os.PathLike) -> ColorCounter:
    """Count the colours of a 24- or 32-bit BMP image, least frequent first."""
    with open(path, "rb") as handle:
        header = parse_header(handle.read(_HEADER.size))
        if header.type != BMP_SIGNATURE:
            raise BmpError("not a BMP image")
        info = parse_info_header(handle.read(_INFO_HEADER.size))

        if info.bit_count == 32:
            bit_depth = BitDepth.BITS32
        elif info.bit_count == 24:
            bit_depth = BitDepth.BITS24
        else:
            raise BmpError(f"unsupported bit count: {info.bit_count}")

        handle.seek(header.offset)
        step = bit_depth.bytes_per_pixel
        expected = (info.image_size // step) * step
        # A short read leaves the remaining pixels zeroed.
        pixels = handle.read(expected).ljust(expected, b"\0")

    counter = count_colors(read_pixels(pixels, bit_depth), bit_depth)
    sort_counts(counter)
    return counter