from __future__ import annotations

import zlib
from typing import Callable

from .chunks import PNG_SIGNATURE, data_chunk, end_chunk, header_chunk, header_payload
from .types import BYTES_PER_PIXEL, Raster

Compressor = Callable[[bytes], bytes]


def scanline_length(width: int, height: int) -> int:
    """Return the expected raw buffer size for the given dimensions."""
    return height * (1 + BYTES_PER_PIXEL * width)


def encode_png(
    width: int,
    height: int,
    data: bytes,
    compress: Compressor = zlib.compress,
) -> bytes:
    """Build a complete PNG file from a filtered RGBA scanline buffer."""
    header_payload(width, height)
    expected = scanline_length(width, height)
    if len(data) != expected:
        raise ValueError(f"Scanline buffer has {len(data)} bytes, expected {expected}")
    try:
        compressed = compress(bytes(data))
    except Exception as exc:
        raise RuntimeError(f"Compression failed: {exc}") from exc
    out = bytearray()
    out += PNG_SIGNATURE
    out += header_chunk(width, height)
    out += data_chunk(compressed)
    out += end_chunk()
    return bytes(out)


def encode_png_from_raster(raster: Raster, compress: Compressor = zlib.compress) -> bytes:
    """Build a complete PNG file from a Raster helper object."""
    raster.validate()
    return encode_png(raster.width, raster.height, raster.data, compress)
