from __future__ import annotations

import math
import zlib

from ..png import encode_png
from ..png.encoding import Compressor
from ..rendering import TRANSPARENT, Layer, RoundedRect, Scene, VerticalGradient, render_scene
from .models import IconDesign


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def build_icon_scene(design: IconDesign, size: int) -> Scene:
    """Lay out the card, bars and pills of a square icon."""
    if size <= 0:
        raise ValueError(f"Icon size must be positive, got {size}")
    small = design.is_small(size)

    pad = max(1, round_half_up(size * 0.08))
    card_size = size - pad * 2
    card_radius = max(2, round_half_up(card_size * (0.2 if small else 0.24)))

    bar_height = max(2, round_half_up(size * (0.16 if small else 0.11)))
    bar_radius = max(1, round_half_up(bar_height / 2))
    bar1_width = round_half_up(size * (0.46 if small else 0.5))
    bar2_width = round_half_up(size * (0.58 if small else 0.62))
    bar1_y = round_half_up(size * (0.33 if small else 0.36))
    bar2_y = round_half_up(size * (0.56 if small else 0.53))
    bar_offset_x = round_half_up(size * (0.06 if small else 0.08))
    bar1_x = round_half_up((size - bar1_width) / 2) + bar_offset_x
    bar2_x = round_half_up((size - bar2_width) / 2) + bar_offset_x

    pill_size = max(2, round_half_up(size * (0.14 if small else 0.12)))
    pill_radius = max(1, round_half_up(pill_size / 2))
    pill_x = round_half_up(size * (0.17 if small else 0.2))

    inner_size = max(1, card_size - 2)
    inner_radius = max(1, card_radius - 1)

    card = RoundedRect(pad, pad, card_size, card_size, card_radius)
    inner_card = RoundedRect(pad + 1, pad + 1, inner_size, inner_size, inner_radius)

    layers = [
        Layer(card, TRANSPARENT, outside=True),
        Layer(inner_card, design.outer_ring, outside=True),
        # Same shape as the ring layer above, so card_stroke never shows; kept as in the artwork.
        Layer(inner_card, design.card_stroke, outside=True),
        Layer(RoundedRect(bar1_x, bar1_y, bar1_width, bar_height, bar_radius), design.bar_primary),
        Layer(RoundedRect(bar2_x, bar2_y, bar2_width, bar_height, bar_radius), design.bar_secondary),
        Layer(RoundedRect(pill_x, bar1_y, pill_size, pill_size, pill_radius), design.pill),
    ]
    if not small:
        layers.append(
            Layer(RoundedRect(pill_x, bar2_y, pill_size, pill_size, pill_radius), design.pill_secondary)
        )
    background = VerticalGradient(design.bg_top, design.bg_bottom, size)
    return Scene(size, size, tuple(layers), background)


def build_icon(design: IconDesign, size: int, compress: Compressor = zlib.compress) -> bytes:
    """Render and encode one icon size to PNG bytes."""
    scene = build_icon_scene(design, size)
    return encode_png(size, size, render_scene(scene), compress)
