from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "designs.json"

Color = Tuple[int, int, int, int]

PALETTE_FIELDS = (
    "bg_top",
    "bg_bottom",
    "outer_ring",
    "card_stroke",
    "bar_primary",
    "bar_secondary",
    "pill",
    "pill_secondary",
)


@dataclass(frozen=True)
class IconDesign:
    name: str
    sizes: Tuple[int, ...]
    filename: str
    small_max: int
    bg_top: Color
    bg_bottom: Color
    outer_ring: Color
    card_stroke: Color
    bar_primary: Color
    bar_secondary: Color
    pill: Color
    pill_secondary: Color

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "IconDesign":
        values = dict(raw)
        values["sizes"] = tuple(int(size) for size in values["sizes"])
        for key in PALETTE_FIELDS:
            color = tuple(int(channel) for channel in values[key])
            if len(color) != 4 or not all(0 <= channel <= 255 for channel in color):
                raise ValueError(f"Design '{values.get('name')}': {key} must be 4 values in 0-255")
            values[key] = color
        return cls(**values)

    def is_small(self, size: int) -> bool:
        return size <= self.small_max

    def filename_for(self, size: int) -> str:
        return self.filename.format(size=size)


class DesignRegistry:
    def __init__(self, designs: Iterable[IconDesign]) -> None:
        self._designs = list(designs)

    @classmethod
    def load(cls, path: Path = DATA_PATH) -> "DesignRegistry":
        raw = json.loads(path.read_text(encoding="utf-8"))
        return cls(IconDesign.from_dict(item) for item in raw)

    @property
    def designs(self) -> List[IconDesign]:
        return list(self._designs)

    @property
    def names(self) -> List[str]:
        return [design.name for design in self._designs]

    def get(self, name: str) -> Optional[IconDesign]:
        for design in self._designs:
            if design.name == name:
                return design
        return None

    def require(self, name: str) -> IconDesign:
        design = self.get(name)
        if not design:
            raise RuntimeError(f"Unknown icon design '{name}' (see --list-designs)")
        return design
