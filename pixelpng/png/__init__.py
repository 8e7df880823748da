from .checksum import crc32_value
from .chunks import (
    BIT_DEPTH,
    COLOR_TYPE_RGBA,
    PNG_SIGNATURE,
    data_chunk,
    end_chunk,
    header_chunk,
    header_payload,
    make_chunk,
)
from .encoding import encode_png, encode_png_from_raster, scanline_length
from .reader import Chunk, read_chunks, read_header
from .types import Raster

__all__ = [
    "BIT_DEPTH",
    "Chunk",
    "COLOR_TYPE_RGBA",
    "crc32_value",
    "data_chunk",
    "encode_png",
    "encode_png_from_raster",
    "end_chunk",
    "header_chunk",
    "header_payload",
    "make_chunk",
    "PNG_SIGNATURE",
    "Raster",
    "read_chunks",
    "read_header",
    "scanline_length",
]
