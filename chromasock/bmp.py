"""Reading BMP files and counting the colours of their pixels."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import BinaryIO

from .colors import BitDepth, Color, ColorCount, count_colors, sort_counts

BMP_SIGNATURE = 0x4D42

_HEADER = struct.Struct("<HIHHI")
_INFO_HEADER = struct.Struct("<IIIHHIIIIII")


class BmpError(Exception):
    """Raised when a file is not a usable BMP image."""


@dataclass(frozen=True)
class BmpHeader:
    """The 14-byte file header of a BMP image."""

    signature: int
    file_size: int
    reserved1: int
    reserved2: int
    offset: int


@dataclass(frozen=True)
class BmpInfoHeader:
    """The 40-byte information header of a BMP image."""

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


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise BmpError(f"truncated {what}: expected {size} bytes, got {len(data)}")
    return data


def read_header(stream: BinaryIO) -> BmpHeader:
    """Read the file header from the current position of a binary stream."""
    return BmpHeader(*_HEADER.unpack(_read_exact(stream, _HEADER.size, "file header")))


def read_info_header(stream: BinaryIO) -> BmpInfoHeader:
    """Read the information header from the current position of a binary stream."""
    return BmpInfoHeader(
        *_INFO_HEADER.unpack(_read_exact(stream, _INFO_HEADER.size, "info header"))
    )


def _depth_for(bit_count: int) -> BitDepth:
    try:
        return BitDepth(bit_count)
    except ValueError:
        raise BmpError(f"unsupported bit count: {bit_count}") from None


def decode_pixels(data: bytes, bit_count: int) -> list[Color]:
    """Decode BGR (24-bit) or BGRA (32-bit) pixel bytes into colours.

    Trailing bytes that do not make up a whole pixel are ignored.
    """
    depth = _depth_for(bit_count)
    if depth is BitDepth.BITS32:
        return [Color(r, g, b, a) for b, g, r, a in struct.iter_unpack("4B", data[: len(data) // 4 * 4])]
    return [Color(r, g, b) for b, g, r in struct.iter_unpack("3B", data[: len(data) // 3 * 3])]


def analyse_bmp_image(path: str | os.PathLike[str]) -> list[ColorCount]:
    """Count the distinct colours of a BMP image, least frequent first."""
    with open(path, "rb") as stream:
        header = read_header(stream)
        if header.signature != BMP_SIGNATURE:
            raise BmpError("not a BMP image")
        info = read_info_header(stream)
        depth = _depth_for(info.bit_count)
        pixel_size = depth.value // 8
        stream.seek(header.offset)
        pixel_count = info.image_size // pixel_size
        wanted = pixel_count * pixel_size
        data = stream.read(info.image_size)[:wanted]
        data = data.ljust(wanted, b"\x00")
    return sort_counts(count_colors(decode_pixels(data, info.bit_count), depth))