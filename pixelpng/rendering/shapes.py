from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Rect:
    left: int
    top: int
    width: int
    height: int


@dataclass(frozen=True)
class RoundedRect:
    left: int
    top: int
    width: int
    height: int
    radius: int


Shape = Union[Rect, RoundedRect]


def in_rect(x: int, y: int, left: int, top: int, width: int, height: int) -> bool:
    """Return True if (x, y) lies in the half-open box at (left, top)."""
    return left <= x < left + width and top <= y < top + height


def in_rounded_rect(
    x: int, y: int, left: int, top: int, width: int, height: int, radius: int
) -> bool:
    """Return True if (x, y) lies inside a rounded rectangle.

    Corners are hard-edged circular arcs of ``radius`` pixels. A radius larger
    than half the shorter side is accepted; the arc centers are then clamped
    to stay inside the rectangle.
    """
    if radius < 0:
        raise ValueError(f"Radius must not be negative: {radius}")
    right = left + width
    bottom = top + height
    if x < left or x >= right or y < top or y >= bottom:
        return False

    inner_left = left + radius
    inner_right = right - radius
    inner_top = top + radius
    inner_bottom = bottom - radius

    if inner_left <= x < inner_right:
        return True
    if inner_top <= y < inner_bottom:
        return True

    cx = inner_left if x < inner_left else inner_right - 1
    cy = inner_top if y < inner_top else inner_bottom - 1
    cx = max(left, min(right - 1, cx))
    cy = max(top, min(bottom - 1, cy))
    dx = x - cx
    dy = y - cy
    return dx * dx + dy * dy <= radius * radius


def contains(shape: Shape, x: int, y: int) -> bool:
    """Dispatch a membership test over the supported shape types."""
    if isinstance(shape, RoundedRect):
        return in_rounded_rect(x, y, shape.left, shape.top, shape.width, shape.height, shape.radius)
    if isinstance(shape, Rect):
        return in_rect(x, y, shape.left, shape.top, shape.width, shape.height)
    raise TypeError(f"Unsupported shape: {type(shape).__name__}")
