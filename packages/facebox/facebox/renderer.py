"""Square face box renderer."""
from __future__ import annotations

from typing import TYPE_CHECKING

from facebox.easing import divide_scale, ease
from facebox.surface import Style
from facebox.types import PaletteIndexError

if TYPE_CHECKING:
    from facebox.config import FaceBoxConfig
    from facebox.surface import DrawingSurface


def draw_square_face_box(
    surface: DrawingSurface,
    config: FaceBoxConfig,
    color_index: int,
    scale: float,
) -> None:
    """Draw one face box at progress ``scale`` in palette color ``color_index``.

    Sub-fractions of the eased progress drive the parts in order: the square
    slides up into the center, the eye-line slides in from the left along the
    square's top edge, the eyes grow, and finally the eyes spread apart.
    """
    if not 0 <= color_index < len(config.colors):
        raise PaletteIndexError(color_index, len(config.colors))

    w, h = surface.size
    dim = min(w, h)
    size = dim / config.size_factor
    eye_r = dim / config.eye_factor
    color = config.colors[color_index]

    eased = ease(scale)
    f0, f1, f2, f3 = (divide_scale(eased, k, config.parts) for k in range(4))

    fill = Style(color)
    stroke = Style(color, line_width=dim / config.stroke_factor, line_cap="round")
    eye = Style(config.back_color) if config.eyes_as_cutouts else fill

    surface.save()
    try:
        surface.translate(w / 2, h / 2)

        dy = (h / 2 + size) * (1 - f0)
        surface.rect(-size / 2, -size / 2 + dy, size, size, fill)

        dx = -(w / 2 + size) * (1 - f1)
        top = -size / 2
        surface.line((-size / 2 + dx, top), (size / 2 + dx, top), stroke)

        spread = (size / 2) * f3
        for sign in (-1, 1):
            surface.circle((sign * spread, top), eye_r * f2, eye)
    finally:
        surface.restore()
