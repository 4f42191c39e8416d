"""Interactive state of the graph view: zoom, hover, measurement and undo."""

from __future__ import annotations

import math
from typing import Callable, Iterable

from visualmath.graphics import FunctionGraph, Grid
from visualmath.operations import Operation, Point, transform

PointListener = Callable[[float, float], None]


class GraphView:
    """Plots a function over a grid and handles user interaction."""

    SCENE_RECT = (-400.0, -300.0, 800.0, 600.0)
    SCALE_FACTOR = 1.2
    MIN_SCALE = 0.1
    MAX_SCALE = 10.0
    HOVER_OFFSET = (3.0, -10.0)

    def __init__(
        self,
        on_point1_selected: PointListener | None = None,
        on_point2_selected: PointListener | None = None,
    ) -> None:
        self.on_point1_selected = on_point1_selected
        self.on_point2_selected = on_point2_selected
        self.grid = Grid(self.SCENE_RECT)
        self.function_graph: FunctionGraph | None = None
        self.function_data: list[Point] = []
        self.current_scale = 1.0
        self.hover_text: str | None = None
        self.hover_position: Point | None = None
        self.measuring = False
        self.first_point: Point | None = None
        self._on_distance: Callable[[str], None] | None = None
        self._undo_stack: list[list[Point]] = []

    @property
    def hover_visible(self) -> bool:
        return self.hover_text is not None

    def set_function_data(self, points: Iterable[Point]) -> None:
        """Replace the plotted points and rebuild the scene."""
        self.function_data = list(points)
        self.grid = Grid(self.SCENE_RECT)
        self.function_graph = FunctionGraph(self.function_data, 1.0)
        self.hover_text = None
        self.hover_position = None

    def zoom_in(self) -> bool:
        if self.current_scale < self.MAX_SCALE:
            self.current_scale *= self.SCALE_FACTOR
            return True
        return False

    def zoom_out(self) -> bool:
        if self.current_scale > self.MIN_SCALE:
            self.current_scale /= self.SCALE_FACTOR
            return True
        return False

    def wheel(self, delta: float) -> bool:
        """Zoom by the sign of a wheel delta; returns whether the scale changed."""
        if delta > 0:
            return self.zoom_in()
        if delta < 0:
            return self.zoom_out()
        return False

    def key_press(self, key: str) -> bool:
        """Handle ``+``/``=``/``-``; returns False for keys left to the caller."""
        if key in ("+", "="):
            self.zoom_in()
            return True
        if key == "-":
            self.zoom_out()
            return True
        return False

    def hover(self, x: float, y: float) -> str | None:
        """Show the nearest data point if it lies close to the scene position."""
        closest: Point | None = None
        min_dist = math.inf
        for p in self.function_data:
            dist = math.hypot(x - p[0], y - p[1])
            if dist < min_dist:
                min_dist = dist
                closest = p
        if closest is not None and min_dist < 5.0 / self.current_scale:
            self.hover_text = f"x: {closest[0]:.2f}\ny: {closest[1]:.2f}"
            self.hover_position = (
                closest[0] + self.HOVER_OFFSET[0],
                closest[1] + self.HOVER_OFFSET[1],
            )
        else:
            self.hover_text = None
            self.hover_position = None
        return self.hover_text

    def start_distance_measurement(self, callback: Callable[[str], None]) -> None:
        self.measuring = True
        self.first_point = None
        self._on_distance = callback

    def click(self, x: float, y: float) -> float | None:
        """Record a measurement click; returns the distance after the second one."""
        if not self.measuring:
            return None
        if self.first_point is None:
            self.first_point = (x, y)
            if self.on_point1_selected:
                self.on_point1_selected(x, y)
            return None
        x1, y1 = self.first_point
        self.first_point = None
        self.measuring = False
        if self.on_point2_selected:
            self.on_point2_selected(x, y)
        distance = math.sqrt((x - x1) ** 2 + (y - y1) ** 2)
        if self._on_distance:
            self._on_distance(f"Расстояние: {distance:.4f}")
        return distance

    def apply_operation(self, operation: Operation | str, value: float) -> bool:
        """Transform the plotted data; unknown operations and empty data do nothing."""
        if not self.function_data:
            return False
        try:
            new_data = transform(self.function_data, operation, value)
        except ValueError:
            return False
        self._undo_stack.append(self.function_data)
        self.set_function_data(new_data)
        return True

    def undo(self) -> bool:
        if not self._undo_stack:
            return False
        self.set_function_data(self._undo_stack.pop())
        return True