"""Progress math: sub-fraction windows and easing for the face box parts."""
from __future__ import annotations

import math


def clamped_linear(scale: float, i: int, n: int) -> float:
    """Window of part ``i`` of ``n``, bounded to ``[0, 1/n]``.

    The value stays at 0 until ``scale`` passes ``i/n`` and saturates once it
    would pass ``(i+1)/n``.
    """
    if n <= 0:
        raise ValueError("n must be positive")
    return min(1.0 / n, max(0.0, scale - i / n))


def divide_scale(scale: float, i: int, n: int) -> float:
    """``clamped_linear`` normalized into ``[0, 1]``."""
    return clamped_linear(scale, i, n) * n


def ease(t: float) -> float:
    # 0 at both ends, 1 at the midpoint: grow then shrink.
    return math.sin(t * math.pi)
