"""Drawing-surface contract and a headless recording implementation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from facebox.types import SurfaceStateError

Point = tuple[float, float]

LINE_CAPS = ("butt", "round")


@dataclass(frozen=True)
class Style:
    """Stroke/fill settings passed explicitly with every primitive."""

    color: str
    line_width: float = 1.0
    line_cap: str = "butt"

    def __post_init__(self) -> None:
        if self.line_cap not in LINE_CAPS:
            raise ValueError(f"line_cap must be one of {LINE_CAPS}, got {self.line_cap!r}")


class DrawingSurface(Protocol):
    """Primitive operations a face box needs from a 2D canvas."""

    @property
    def size(self) -> tuple[int, int]: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def fill(self, color: str) -> None: ...

    def line(self, start: Point, end: Point, style: Style) -> None: ...

    def circle(self, center: Point, radius: float, style: Style) -> None: ...

    def rect(self, x: float, y: float, w: float, h: float, style: Style) -> None: ...


@dataclass(frozen=True)
class DrawCall:
    op: str
    args: tuple[Any, ...]
    style: Style | None = None


@dataclass
class RecordingSurface:
    """Headless surface that records primitives in absolute coordinates.

    Translations are applied to recorded coordinates, so a call drawn at
    ``(0, 0)`` after ``translate(50, 40)`` is recorded at ``(50, 40)``.
    """

    width: int = 400
    height: int = 400
    calls: list[DrawCall] = field(default_factory=list)
    _offset: Point = field(default=(0.0, 0.0), init=False, repr=False)
    _stack: list[Point] = field(default_factory=list, init=False, repr=False)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def depth(self) -> int:
        return len(self._stack)

    def save(self) -> None:
        self._stack.append(self._offset)

    def restore(self) -> None:
        if not self._stack:
            raise SurfaceStateError("restore() without matching save()")
        self._offset = self._stack.pop()

    def translate(self, dx: float, dy: float) -> None:
        ox, oy = self._offset
        self._offset = (ox + dx, oy + dy)

    def fill(self, color: str) -> None:
        self.calls.append(DrawCall("fill", (color,)))

    def line(self, start: Point, end: Point, style: Style) -> None:
        self.calls.append(DrawCall("line", (self._abs(start), self._abs(end)), style))

    def circle(self, center: Point, radius: float, style: Style) -> None:
        self.calls.append(DrawCall("circle", (self._abs(center), radius), style))

    def rect(self, x: float, y: float, w: float, h: float, style: Style) -> None:
        ax, ay = self._abs((x, y))
        self.calls.append(DrawCall("rect", (ax, ay, w, h), style))

    def ops(self) -> list[str]:
        return [call.op for call in self.calls]

    def clear(self) -> None:
        self.calls.clear()

    def _abs(self, point: Point) -> Point:
        return (point[0] + self._offset[0], point[1] + self._offset[1])
