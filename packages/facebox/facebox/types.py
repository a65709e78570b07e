"""Shared types and exceptions for the face box animation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float


class PaletteIndexError(IndexError):
    """Raised when a color index falls outside the configured palette."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"color index {index} out of range for palette of {size}")


class SurfaceStateError(Exception):
    """Raised on an unbalanced save/restore on a drawing surface."""


Tick = Callable[[TickContext], None]
Callback = Callable[[], None]
