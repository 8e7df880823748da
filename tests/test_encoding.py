import struct

import pytest

from pixelpng.png import (
    PNG_SIGNATURE,
    Raster,
    crc32_value,
    encode_png,
    encode_png_from_raster,
    read_chunks,
    read_header,
)
from pixelpng.rendering import rasterize

from .helpers import decode_rgba, inflate_idat


def test_solid_red_4x4(solid_red):
    data = encode_png(4, 4, rasterize(4, 4, solid_red))
    assert data[:8] == PNG_SIGNATURE
    assert read_header(data) == (4, 4, 8, 6)
    row = bytes([0] + [255, 0, 0, 255] * 4)
    assert inflate_idat(data) == row * 4


def test_chunk_order_and_crcs():
    data = encode_png(3, 2, rasterize(3, 2, lambda x, y: (x, y, 0, 255)))
    chunks = read_chunks(data)
    assert [c.tag for c in chunks] == [b"IHDR", b"IDAT", b"IEND"]
    assert chunks[-1].payload == b""
    for chunk in chunks:
        assert chunk.crc == crc32_value(chunk.tag + chunk.payload)
    (length,) = struct.unpack(">I", data[8:12])
    assert length == 13


def test_pillow_round_trip():
    def color_at(x, y):
        return (x * 40, y * 50, (x + y) * 10, 255 - x * 7)

    width, height = 6, 5
    data = encode_png(width, height, rasterize(width, height, color_at))
    size, mode, pixels = decode_rgba(data)
    assert size == (width, height)
    assert mode == "RGBA"
    assert pixels == [color_at(x, y) for y in range(height) for x in range(width)]


def test_custom_compressor_is_used():
    calls = []

    def compress(raw):
        calls.append(raw)
        return b"x\x9c" + b"\x03\x00" + b"\x00\x00\x00\x01"

    encode_png(1, 1, bytes([0, 0, 0, 0, 0]), compress)
    assert calls == [bytes([0, 0, 0, 0, 0])]


def test_compression_failure_raises_runtime_error():
    def broken(raw):
        raise MemoryError("out of memory")

    with pytest.raises(RuntimeError, match="Compression failed"):
        encode_png(1, 1, bytes(5), broken)


def test_buffer_length_mismatch():
    with pytest.raises(ValueError, match="expected 10"):
        encode_png(1, 2, bytes(9))


def test_non_positive_dimensions():
    with pytest.raises(ValueError):
        encode_png(0, 1, b"")


def test_from_raster_matches_direct(solid_red):
    raw = rasterize(2, 3, solid_red)
    raster = Raster(raw, 2)
    assert raster.height == 3
    assert raster.row(1) == bytes([0] + [255, 0, 0, 255] * 2)
    assert encode_png_from_raster(raster) == encode_png(2, 3, raw)


def test_raster_validation():
    with pytest.raises(ValueError):
        Raster(bytes(8), 2).validate()
    with pytest.raises(ValueError):
        Raster(b"", 1).validate()
    with pytest.raises(ValueError):
        Raster(bytes(5), 0).validate()


def test_raster_row_out_of_range(solid_red):
    raster = Raster(rasterize(2, 3, solid_red), 2)
    assert raster.row(2)[0] == 0
    for y in (-1, 3):
        with pytest.raises(IndexError):
            raster.row(y)
