"""pygame adapter for the face box drawing-surface contract."""
from __future__ import annotations

import pygame

from facebox.surface import Point, Style


class PygameSurface:
    """Wraps a pygame.Surface with a translation stack and hex-color styles."""

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._offset: Point = (0.0, 0.0)
        self._stack: list[Point] = []

    @property
    def size(self) -> tuple[int, int]:
        return self._surface.get_size()

    def save(self) -> None:
        self._stack.append(self._offset)

    def restore(self) -> None:
        self._offset = self._stack.pop()

    def translate(self, dx: float, dy: float) -> None:
        self._offset = (self._offset[0] + dx, self._offset[1] + dy)

    def fill(self, color: str) -> None:
        self._surface.fill(pygame.Color(color))

    def line(self, start: Point, end: Point, style: Style) -> None:
        color = pygame.Color(style.color)
        width = max(1, round(style.line_width))
        a = self._abs(start)
        b = self._abs(end)
        pygame.draw.line(self._surface, color, a, b, width)
        # pygame has no line caps; round caps are end discs.
        if style.line_cap == "round" and width > 2:
            for p in (a, b):
                pygame.draw.circle(self._surface, color, p, width / 2)

    def circle(self, center: Point, radius: float, style: Style) -> None:
        if radius <= 0:
            return
        pygame.draw.circle(self._surface, pygame.Color(style.color), self._abs(center), radius)

    def rect(self, x: float, y: float, w: float, h: float, style: Style) -> None:
        ax, ay = self._abs((x, y))
        pygame.draw.rect(self._surface, pygame.Color(style.color), pygame.Rect(ax, ay, w, h))

    def _abs(self, point: Point) -> Point:
        return (point[0] + self._offset[0], point[1] + self._offset[1])
