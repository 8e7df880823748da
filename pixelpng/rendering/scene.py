from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence, Tuple, Union

from .renderer import rasterize
from .shapes import Shape, contains

Color = Tuple[int, int, int, int]

TRANSPARENT: Color = (0, 0, 0, 0)


def mix(a: int, b: int, t: float) -> int:
    """Linearly interpolate between two channel values, rounding half up."""
    return int(math.floor(a + (b - a) * t + 0.5))


@dataclass(frozen=True)
class Solid:
    color: Color


@dataclass(frozen=True)
class VerticalGradient:
    top: Color
    bottom: Color
    height: int

    def color_at(self, y: int) -> Color:
        t = y / max(1, self.height - 1)
        return (
            mix(self.top[0], self.bottom[0], t),
            mix(self.top[1], self.bottom[1], t),
            mix(self.top[2], self.bottom[2], t),
            mix(self.top[3], self.bottom[3], t),
        )


Background = Union[Solid, VerticalGradient]


@dataclass(frozen=True)
class Layer:
    """A shape painted with one color.

    With ``outside=True`` the layer matches every point not covered by the
    shape, which is how masks around a card are expressed.
    """

    shape: Shape
    color: Color
    outside: bool = False

    def matches(self, x: int, y: int) -> bool:
        return contains(self.shape, x, y) != self.outside


@dataclass(frozen=True)
class Scene:
    """Ordered layers, top layer first, over a background fill."""

    width: int
    height: int
    layers: Sequence[Layer] = field(default_factory=tuple)
    background: Background = Solid(TRANSPARENT)

    def color_at(self, x: int, y: int) -> Color:
        for layer in self.layers:
            if layer.matches(x, y):
                return layer.color
        return background_color(self.background, y)


def background_color(background: Background, y: int) -> Color:
    if isinstance(background, VerticalGradient):
        return background.color_at(y)
    if isinstance(background, Solid):
        return background.color
    raise TypeError(f"Unsupported background: {type(background).__name__}")


def render_scene(scene: Scene) -> bytes:
    """Return the filtered scanline buffer for a scene."""
    return rasterize(scene.width, scene.height, scene.color_at)
