"""Application window state and the command-line entry point."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence

from visualmath.graph import GraphView
from visualmath.operations import Operation, Point, default_value, parse_points

PLACEHOLDER_OPERATION = "Выберите операцию"
OPERATION_LABELS: tuple[str, ...] = (
    PLACEHOLDER_OPERATION,
    *(op.value for op in Operation),
)


def format_point(x: float, y: float) -> str:
    """Text shown for a selected measurement point."""
    return f"X: {x:g}, Y: {y:g}"


def _parse_value(text: str) -> float | None:
    stripped = text.strip()
    if not stripped or "_" in stripped:
        return None
    try:
        value = float(stripped)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _format_points(points: Sequence[Point]) -> str:
    return "; ".join(f"{x:g},{y:g}" for x, y in points)


class MainWindow:
    """The window's fields and actions, wired to a graph view."""

    def __init__(self) -> None:
        self.input_text = ""
        self.operation_text = PLACEHOLDER_OPERATION
        self.operation_value_text = ""
        self.point1_text = ""
        self.point2_text = ""
        self.result_text = ""
        self.graph = GraphView(
            on_point1_selected=self._show_point1,
            on_point2_selected=self._show_point2,
        )

    def _show_point1(self, x: float, y: float) -> None:
        self.point1_text = format_point(x, y)

    def _show_point2(self, x: float, y: float) -> None:
        self.point2_text = format_point(x, y)

    def _show_result(self, text: str) -> None:
        self.result_text = text

    def plot(self) -> list[Point]:
        """Parse the input field and plot the points it holds."""
        self.reset_additional_fields()
        points = parse_points(self.input_text)
        self.graph.set_function_data(points)
        return points

    def start_distance(self) -> None:
        """Begin a two-click distance measurement on the graph."""
        self.reset_additional_fields()
        self.graph.start_distance_measurement(self._show_result)

    def apply_selected_operation(self) -> bool:
        """Apply the chosen operation, using its default value if none is given."""
        self.reset_additional_fields()
        value = _parse_value(self.operation_value_text)
        if value is None:
            value = default_value(self.operation_text)
        return self.graph.apply_operation(self.operation_text, value)

    def undo(self) -> bool:
        return self.graph.undo()

    def reset_additional_fields(self) -> None:
        self.point1_text = ""
        self.point2_text = ""
        self.result_text = ""


def _operation_arg(text: str) -> tuple[str, str]:
    label, sep, value = text.partition("=")
    label = label.strip()
    if label not in OPERATION_LABELS[1:]:
        raise argparse.ArgumentTypeError(f"unknown operation: {label!r}")
    return label, value if sep else ""


def main(argv: Sequence[str] | None = None) -> int:
    """Plot points, apply operations and measure distances from the command line."""
    parser = argparse.ArgumentParser(
        prog="visualmath",
        description="Transform a set of points (format: x1,y1; x2,y2; ...).",
    )
    parser.add_argument("points", help="points as 'x1,y1; x2,y2; ...'")
    parser.add_argument(
        "-a",
        "--apply",
        action="append",
        default=[],
        type=_operation_arg,
        metavar="OPERATION[=VALUE]",
        help="operation to apply; may be repeated",
    )
    parser.add_argument(
        "-u", "--undo", type=int, default=0, help="number of operations to undo"
    )
    parser.add_argument(
        "-m",
        "--measure",
        nargs=4,
        type=float,
        metavar=("X1", "Y1", "X2", "Y2"),
        help="measure the distance between two points",
    )
    args = parser.parse_args(argv)

    window = MainWindow()
    window.input_text = args.points
    window.plot()
    for label, value in args.apply:
        window.operation_text = label
        window.operation_value_text = value
        window.apply_selected_operation()
    for _ in range(args.undo):
        if not window.undo():
            break

    print(_format_points(window.graph.function_data))

    if args.measure:
        x1, y1, x2, y2 = args.measure
        window.start_distance()
        window.graph.click(x1, y1)
        window.graph.click(x2, y2)
        print(window.point1_text)
        print(window.point2_text)
        print(window.result_text)
    return 0