"""Scene items: the function polyline and the coordinate grid."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

Point = tuple[float, float]
Rect = tuple[float, float, float, float]
Line = tuple[Point, Point]

_DEFAULT_GRID_RECT: Rect = (-400.0, -400.0, 800.0, 600.0)
_GRID_SPACING = 10


def _format_number(value: float) -> str:
    return f"{value:g}"


def _ticks(start: float, end: float) -> list[float]:
    ticks = []
    value = math.floor(start / _GRID_SPACING) * _GRID_SPACING
    while value <= end:
        ticks.append(float(value))
        value += _GRID_SPACING
    return ticks


@dataclass
class FunctionGraph:
    """A polyline through the data points, scaled by ``scale``."""

    points: list[Point] = field(default_factory=list)
    scale: float = 1.0

    def bounding_rect(self) -> Rect:
        return (-10000.0, -10000.0, 20000.0, 20000.0)

    def path(self) -> list[Point]:
        """Vertices of the drawn path: the move-to point, then each line-to."""
        if not self.points:
            return []
        scaled = [(x * self.scale, y * self.scale) for x, y in self.points]
        return [scaled[0], *scaled]


@dataclass
class Grid:
    """A grid with axes and tick labels covering the scene rectangle."""

    scene_rect: Rect | None = None
    step: float | None = None
    width: float | None = None
    height: float | None = None

    def bounding_rect(self) -> Rect:
        return self.scene_rect if self.scene_rect is not None else _DEFAULT_GRID_RECT

    def lines(self) -> list[Line]:
        """Vertical grid lines followed by horizontal ones."""
        if self.scene_rect is None:
            return []
        left, top, w, h = self.scene_rect
        right, bottom = left + w, top + h
        vertical = [((x, top), (x, bottom)) for x in _ticks(left, right)]
        horizontal = [((left, y), (right, y)) for y in _ticks(top, bottom)]
        return vertical + horizontal

    def axis_lines(self) -> list[Line]:
        if self.scene_rect is None:
            return []
        left, top, w, h = self.scene_rect
        return [((0.0, top), (0.0, top + h)), ((left, 0.0), (left + w, 0.0))]

    def labels(self) -> list[tuple[Point, str]]:
        """Tick labels in the flipped text coordinate system, skipping zero."""
        if self.scene_rect is None:
            return []
        left, top, w, h = self.scene_rect
        result = [
            ((x + 2, -2.0), _format_number(x))
            for x in _ticks(left, left + w)
            if x != 0
        ]
        result += [
            ((2.0, -y - 2), _format_number(y))
            for y in _ticks(top, top + h)
            if y != 0
        ]
        return result

    def set_step(self, step: float) -> None:
        self.step = step

    def set_size(self, width: float, height: float) -> None:
        self.width = width
        self.height = height