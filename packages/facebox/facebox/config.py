"""Face box configuration dataclass and presets."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

DEFAULT_COLORS: tuple[str, ...] = (
    "#f44336",
    "#673AB7",
    "#64DD17",
    "#FFD600",
    "#01579B",
)


@dataclass(frozen=True)
class FaceBoxConfig:
    """Immutable configuration for the face box sequence.

    Attributes:
        colors: Ordered palette. Its length fixes the number of nodes.
        parts: Number of animated sub-parts (at least 4); sets sub-fraction granularity.
        step_scale: Progress per tick before division by ``parts``.
        period_ms: Tick period of the driver in milliseconds.
        stroke_factor: Line width is ``min(w, h) / stroke_factor``.
        size_factor: Square side is ``min(w, h) / size_factor``.
        eye_factor: Eye radius is ``min(w, h) / eye_factor``.
        back_color: Background color, also used for cut-out eyes.
        eyes_as_cutouts: Draw eyes in ``back_color`` instead of the palette color.
    """

    colors: tuple[str, ...] = DEFAULT_COLORS
    parts: int = 4
    step_scale: float = 0.02
    period_ms: int = 20
    stroke_factor: float = 90.0
    size_factor: float = 6.9
    eye_factor: float = 15.9
    back_color: str = "#BDBDBD"
    eyes_as_cutouts: bool = False

    def __post_init__(self) -> None:
        # Lists are accepted for convenience but stored as a tuple.
        object.__setattr__(self, "colors", tuple(self.colors))
        if not self.colors:
            raise ValueError("colors must contain at least one entry")
        # the renderer reads four sub-fractions
        if self.parts < 4:
            raise ValueError("parts must be at least 4")
        if self.step_scale <= 0:
            raise ValueError("step_scale must be positive")
        if self.period_ms <= 0:
            raise ValueError("period_ms must be positive")
        for name in ("stroke_factor", "size_factor", "eye_factor"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

    @property
    def step(self) -> float:
        """Progress added per tick."""
        return self.step_scale / self.parts

    def with_overrides(self, **changes: Any) -> FaceBoxConfig:
        return dataclasses.replace(self, **changes)


FOUR_PART = FaceBoxConfig()
FIVE_PART = FaceBoxConfig(parts=5, eyes_as_cutouts=True)

PRESETS: dict[int, FaceBoxConfig] = {
    4: FOUR_PART,
    5: FIVE_PART,
}
