import pytest

from visualmath.operations import Operation, default_value, parse_points, transform

POINTS = [(1.0, 2.0), (-3.0, 4.5), (0.0, -1.0)]


def test_parse_simple_pairs():
    assert parse_points("1,2; 3,4") == [(1.0, 2.0), (3.0, 4.0)]


def test_parse_skips_malformed_pairs():
    assert parse_points("abc,1;1,2,3;5,6;7") == [(5.0, 6.0)]


def test_parse_tolerates_whitespace_and_empty_parts():
    assert parse_points(" 1 , 2 ;; ;-0.5,1e2;") == [(1.0, 2.0), (-0.5, 100.0)]


def test_parse_empty_text():
    assert parse_points("") == []


def test_parse_rejects_underscores():
    assert parse_points("1_0,2") == []


@pytest.mark.parametrize(
    "label, expected",
    [
        ("Сдвинуть вверх", 10.0),
        ("Сдвинуть влево", 10.0),
        ("Растянуть по X", 1.5),
        ("Сжать по Y", 0.75),
        ("Отразить по оси X", 0.0),
        ("Выберите операцию", 0.0),
    ],
)
def test_default_value(label, expected):
    assert default_value(label) == expected


def test_operation_from_label():
    assert Operation("Сдвинуть вверх") is Operation.SHIFT_UP


@pytest.mark.parametrize(
    "forward, back",
    [
        (Operation.SHIFT_UP, Operation.SHIFT_DOWN),
        (Operation.SHIFT_LEFT, Operation.SHIFT_RIGHT),
    ],
)
def test_shifts_are_inverse(forward, back):
    moved = transform(POINTS, forward, 7.0)
    assert moved != POINTS
    assert transform(moved, back, 7.0) == POINTS


def test_shift_up_changes_only_y():
    moved = transform(POINTS, Operation.SHIFT_UP, 3.0)
    assert [x for x, _ in moved] == [x for x, _ in POINTS]
    assert all(ny - y == pytest.approx(3.0) for (_, ny), (_, y) in zip(moved, POINTS))


def test_stretch_and_squeeze_y_multiply():
    stretched = transform(POINTS, Operation.STRETCH_Y, 2.0)
    assert transform(stretched, Operation.SQUEEZE_Y, 0.5) == POINTS


def test_stretch_and_squeeze_x_multiply():
    stretched = transform(POINTS, Operation.STRETCH_X, 4.0)
    assert [y for _, y in stretched] == [y for _, y in POINTS]
    assert transform(stretched, Operation.SQUEEZE_X, 0.25) == POINTS


def test_reflections():
    assert transform([(1.0, 2.0)], Operation.REFLECT_X, 0.0) == [(1.0, -2.0)]
    assert transform([(1.0, 2.0)], Operation.REFLECT_Y, 0.0) == [(-1.0, 2.0)]


@pytest.mark.parametrize("op", [Operation.REFLECT_X, Operation.REFLECT_Y, Operation.SWAP_XY])
def test_involutions(op):
    assert transform(transform(POINTS, op, 0.0), op, 0.0) == POINTS


def test_swap():
    assert transform([(1.0, 2.0)], Operation.SWAP_XY, 0.0) == [(2.0, 1.0)]


def test_accepts_label_strings():
    assert transform(POINTS, "Сдвинуть вверх", 1.0) == transform(
        POINTS, Operation.SHIFT_UP, 1.0
    )


def test_unknown_operation_raises():
    with pytest.raises(ValueError):
        transform(POINTS, "Выберите операцию", 1.0)