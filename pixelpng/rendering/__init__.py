from .renderer import ColorFunction, rasterize, rasterize_to_raster
from .scene import (
    TRANSPARENT,
    Layer,
    Scene,
    Solid,
    VerticalGradient,
    background_color,
    mix,
    render_scene,
)
from .shapes import Rect, RoundedRect, Shape, contains, in_rect, in_rounded_rect

__all__ = [
    "background_color",
    "ColorFunction",
    "contains",
    "in_rect",
    "in_rounded_rect",
    "Layer",
    "mix",
    "rasterize",
    "rasterize_to_raster",
    "Rect",
    "render_scene",
    "RoundedRect",
    "Scene",
    "Shape",
    "Solid",
    "TRANSPARENT",
    "VerticalGradient",
]
