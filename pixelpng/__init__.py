"""Procedural icon rasterizer with a self-contained PNG encoder."""

from .png import crc32_value, encode_png, header_payload, make_chunk
from .rendering import in_rounded_rect, rasterize

__version__ = "0.1.0"

__all__ = [
    "crc32_value",
    "encode_png",
    "header_payload",
    "in_rounded_rect",
    "make_chunk",
    "rasterize",
]
