# visualmath

A small toolkit for functions given as a list of points. It parses points,
shifts, stretches, compresses and mirrors them or swaps their axes, keeps
an undo history, finds the data point nearest to a position, measures the
distance between two points of the plane, and describes the grid and the
polyline that make up a plot.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
visualmath "0,0; 1,1; 2,4; 3,9"
```

parses the points and prints them back in the same `x,y; x,y` form.
Pairs that are not two numbers separated by a comma are ignored.

Options:

- `-a`, `--apply OPERATION[=VALUE]` applies an operation; it may be given
  several times and the operations run in order. The operation is one of
  the labels of `visualmath.operations.Operation`:
  `Сдвинуть вверх`, `Сдвинуть вниз`, `Сдвинуть влево`, `Сдвинуть вправо`,
  `Растянуть по Y`, `Сжать по Y`, `Растянуть по X`, `Сжать по X`,
  `Отразить по оси X`, `Отразить по оси Y`, `Инвертировать X и Y`.
  Any other label is rejected. When the value is missing or is not a
  finite number, shifts use `10`, stretches `1.5` and compressions `0.75`.
- `-u`, `--undo N` undoes the last `N` operations (stops early when the
  history is empty).
- `-m`, `--measure X1 Y1 X2 Y2` measures the distance between two points
  and prints the two points and the result, for example
  `X: 0, Y: 0`, `X: 3, Y: 4`, `Расстояние: 5.0000`.

Example:

```
visualmath "0,0; 1,1; 2,4" -a "Сдвинуть вверх"
```

prints `0,10; 1,11; 2,14`.

## Using the library

```python
from visualmath.operations import Operation, parse_points, transform, default_value

points = parse_points("0,0; 1,1; 2,4; 3,9")
moved = transform(points, Operation.SHIFT_RIGHT, 2.0)
```

`transform(points, operation, value)` takes an `Operation` or its label and
returns a new list of points; an unknown label raises `ValueError`.
`default_value(label)` gives the value used when none is entered.

`visualmath.graph.GraphView` keeps the state of a plot: the current points
(`set_function_data`), the zoom level (`zoom_in`, `zoom_out`, `wheel`,
`key_press` for `+`, `=` and `-`, limited between 0.1 and 10), the nearest
data point to a position (`hover`), two-click distance measurement
(`start_distance_measurement`, `click`), transformations (`apply_operation`,
which returns `False` for empty data or an unknown operation) and an undo
history (`undo`).

`visualmath.app.MainWindow` holds the text of the input fields and wires
them to a `GraphView`: `plot`, `start_distance`, `apply_selected_operation`,
`undo` and `reset_additional_fields`. `format_point(x, y)` gives the text
shown for a selected point.

`visualmath.graphics` describes what a plot is made of: `FunctionGraph.path()`
gives the vertices of the polyline, and `Grid` gives the grid lines
(`lines`), the two axes (`axis_lines`) and the coordinate labels (`labels`)
for its rectangle, one every 10 units.

`visualmath.model.FunctionModel` is a plain holder for a list of values.

## What it does not do

There is no graphical window and nothing is drawn on screen: the package
computes the geometry of a plot and the state of the interaction, and the
`visualmath` command works on text only.