"""Point parsing and the geometric operations applied to a plotted function."""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Iterable

Point = tuple[float, float]

_NUMBER = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf|nan)",
    re.IGNORECASE,
)


class Operation(Enum):
    """Operations offered to the user, keyed by their displayed label."""

    SHIFT_UP = "Сдвинуть вверх"
    SHIFT_DOWN = "Сдвинуть вниз"
    SHIFT_LEFT = "Сдвинуть влево"
    SHIFT_RIGHT = "Сдвинуть вправо"
    STRETCH_Y = "Растянуть по Y"
    SQUEEZE_Y = "Сжать по Y"
    STRETCH_X = "Растянуть по X"
    SQUEEZE_X = "Сжать по X"
    REFLECT_X = "Отразить по оси X"
    REFLECT_Y = "Отразить по оси Y"
    SWAP_XY = "Инвертировать X и Y"


_TRANSFORMS: dict[Operation, Callable[[float, float, float], Point]] = {
    Operation.SHIFT_UP: lambda x, y, v: (x, y + v),
    Operation.SHIFT_DOWN: lambda x, y, v: (x, y - v),
    Operation.SHIFT_LEFT: lambda x, y, v: (x - v, y),
    Operation.SHIFT_RIGHT: lambda x, y, v: (x + v, y),
    Operation.STRETCH_Y: lambda x, y, v: (x, y * v),
    Operation.SQUEEZE_Y: lambda x, y, v: (x, y * v),
    Operation.STRETCH_X: lambda x, y, v: (x * v, y),
    Operation.SQUEEZE_X: lambda x, y, v: (x * v, y),
    Operation.REFLECT_X: lambda x, y, v: (x, -y),
    Operation.REFLECT_Y: lambda x, y, v: (-x, y),
    Operation.SWAP_XY: lambda x, y, v: (y, x),
}


def _to_double(text: str) -> float | None:
    stripped = text.strip()
    if _NUMBER.fullmatch(stripped):
        return float(stripped)
    return None


def parse_points(text: str) -> list[Point]:
    """Parse ``"x1,y1; x2,y2; ..."`` into points, skipping malformed pairs."""
    points: list[Point] = []
    for pair in filter(None, text.split(";")):
        coords = pair.strip().split(",")
        if len(coords) != 2:
            continue
        x, y = (_to_double(c) for c in coords)
        if x is not None and y is not None:
            points.append((x, y))
    return points


def default_value(label: str) -> float:
    """Value used for an operation when the user gives none."""
    if "Сдвинуть" in label:
        return 10.0
    if "Растянуть" in label:
        return 1.5
    if "Сжать" in label:
        return 0.75
    return 0.0


def transform(
    points: Iterable[Point], operation: Operation | str, value: float
) -> list[Point]:
    """Return the points with ``operation`` applied; unknown labels raise ValueError."""
    func = _TRANSFORMS[Operation(operation)]
    return [func(x, y, value) for x, y in points]