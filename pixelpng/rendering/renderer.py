from __future__ import annotations

from typing import Callable, Sequence

from ..png.types import Raster

Pixel = Sequence[int]
ColorFunction = Callable[[int, int], Pixel]


def rasterize(width: int, height: int, color_at: ColorFunction) -> bytes:
    """Render a filtered RGBA scanline buffer by sampling ``color_at`` once per pixel."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Image size must be positive, got {width}x{height}")
    out = bytearray()
    for y in range(height):
        out.append(0)
        for x in range(width):
            pixel = color_at(x, y)
            if len(pixel) != 4:
                raise ValueError(f"Pixel at ({x}, {y}) must have 4 channels, got {len(pixel)}")
            for channel in pixel:
                if not isinstance(channel, int) or isinstance(channel, bool):
                    raise ValueError(f"Channel value {channel!r} at ({x}, {y}) is not an integer")
                if not 0 <= channel <= 255:
                    raise ValueError(f"Channel value {channel} at ({x}, {y}) outside 0-255")
            out.extend(pixel)
    return bytes(out)


def rasterize_to_raster(width: int, height: int, color_at: ColorFunction) -> Raster:
    return Raster(rasterize(width, height, color_at), width)
