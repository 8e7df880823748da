from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import List, Tuple

from .checksum import crc32_value
from .chunks import PNG_SIGNATURE


@dataclass(frozen=True)
class Chunk:
    tag: bytes
    payload: bytes
    crc: int


def read_chunks(data: bytes) -> List[Chunk]:
    """Split a PNG byte string into chunks, checking framing and CRCs."""
    if data[:8] != PNG_SIGNATURE:
        raise ValueError("Missing PNG signature")
    chunks: List[Chunk] = []
    offset = 8
    while offset < len(data):
        if offset + 8 > len(data):
            raise ValueError(f"Truncated chunk header at offset {offset}")
        (length,) = struct.unpack(">I", data[offset : offset + 4])
        tag = data[offset + 4 : offset + 8]
        end = offset + 8 + length + 4
        if end > len(data):
            raise ValueError(f"Truncated {tag!r} chunk at offset {offset}")
        payload = data[offset + 8 : offset + 8 + length]
        (crc,) = struct.unpack(">I", data[end - 4 : end])
        if crc != crc32_value(tag + payload):
            raise ValueError(f"CRC mismatch in {tag!r} chunk")
        chunks.append(Chunk(tag, payload, crc))
        offset = end
        if tag == b"IEND":
            break
    if not chunks or chunks[-1].tag != b"IEND":
        raise ValueError("Missing IEND chunk")
    if offset != len(data):
        raise ValueError("Trailing data after IEND")
    return chunks


def read_header(data: bytes) -> Tuple[int, int, int, int]:
    """Return (width, height, bit_depth, color_type) from the IHDR chunk."""
    chunks = read_chunks(data)
    first = chunks[0]
    if first.tag != b"IHDR" or len(first.payload) != 13:
        raise ValueError("First chunk is not a valid IHDR")
    width, height, bit_depth, color_type = struct.unpack(">IIBB", first.payload[:10])
    return width, height, bit_depth, color_type
