from __future__ import annotations

import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..designs import IconDesign, build_icon
from .verify import verify_png
from .writer import write_file_atomic

DEFAULT_COMPRESS_LEVEL = 9


@dataclass
class RenderSettings:
    compress_level: int = DEFAULT_COMPRESS_LEVEL
    verify: bool = False


class IconJobBuilder:
    def __init__(self, design: IconDesign, settings: Optional[RenderSettings] = None) -> None:
        self.design = design
        self.settings = settings or RenderSettings()

    def build(self, size: int) -> bytes:
        return build_icon(self.design, size, self._compress)

    def write(self, size: int, out_dir: Path) -> Path:
        """Render one size into ``out_dir`` and return the written path."""
        data = self.build(size)
        path = out_dir / self.design.filename_for(size)
        write_file_atomic(path, data)
        if self.settings.verify:
            verify_png(path, size, size)
        return path

    def _compress(self, data: bytes) -> bytes:
        return zlib.compress(data, self._level())

    def _level(self) -> int:
        level = self.settings.compress_level
        if not 0 <= level <= 9:
            raise ValueError(f"Compression level must be 0-9, got {level}")
        return level
