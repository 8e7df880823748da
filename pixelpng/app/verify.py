from __future__ import annotations

from pathlib import Path

from PIL import Image

from ..png import BIT_DEPTH, COLOR_TYPE_RGBA, read_header


def verify_png(path: Path, width: int, height: int) -> None:
    """Check chunk framing, then decode the file with Pillow."""
    data = path.read_bytes()
    header = read_header(data)
    expected = (width, height, BIT_DEPTH, COLOR_TYPE_RGBA)
    if header != expected:
        raise RuntimeError(f"{path.name}: header {header} does not match {expected}")
    try:
        with Image.open(path) as img:
            img.load()
            size, mode = img.size, img.mode
    except Exception as exc:
        raise RuntimeError(f"{path.name}: decoder rejected file: {exc}") from exc
    if size != (width, height) or mode != "RGBA":
        raise RuntimeError(f"{path.name}: decoded as {mode} {size[0]}x{size[1]}")
