from __future__ import annotations

import struct

from .checksum import crc32_value

PNG_SIGNATURE = bytes([0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A])
BIT_DEPTH = 8
COLOR_TYPE_RGBA = 6
COMPRESSION_METHOD = 0
FILTER_METHOD = 0
INTERLACE_METHOD = 0
MAX_DIMENSION = 2**31 - 1
MAX_CHUNK_LENGTH = 2**31 - 1


def validate_tag(tag: bytes) -> None:
    """Reject chunk types that are not exactly four ASCII letters."""
    if len(tag) != 4:
        raise ValueError(f"Chunk type must be exactly 4 bytes, got {len(tag)}")
    if not all(0x41 <= c <= 0x5A or 0x61 <= c <= 0x7A for c in tag):
        raise ValueError(f"Chunk type must be ASCII letters: {tag!r}")


def make_chunk(tag: bytes, payload: bytes) -> bytes:
    """Wrap a payload in the PNG chunk format."""
    validate_tag(tag)
    if len(payload) > MAX_CHUNK_LENGTH:
        raise ValueError("Chunk payload too large")
    checksum = crc32_value(tag + payload)
    return struct.pack(">I", len(payload)) + tag + payload + struct.pack(">I", checksum)


def header_payload(width: int, height: int) -> bytes:
    """Build the 13-byte IHDR payload for 8-bit RGBA, non-interlaced."""
    if not 0 < width <= MAX_DIMENSION:
        raise ValueError(f"Width out of range: {width}")
    if not 0 < height <= MAX_DIMENSION:
        raise ValueError(f"Height out of range: {height}")
    return struct.pack(
        ">IIBBBBB",
        width,
        height,
        BIT_DEPTH,
        COLOR_TYPE_RGBA,
        COMPRESSION_METHOD,
        FILTER_METHOD,
        INTERLACE_METHOD,
    )


def header_chunk(width: int, height: int) -> bytes:
    return make_chunk(b"IHDR", header_payload(width, height))


def data_chunk(compressed: bytes) -> bytes:
    return make_chunk(b"IDAT", compressed)


def end_chunk() -> bytes:
    return make_chunk(b"IEND", b"")
