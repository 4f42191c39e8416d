from visualmath.model import FunctionModel


def test_default_is_empty():
    assert FunctionModel().data == []


def test_keeps_values_in_order():
    model = FunctionModel([3.0, 1.0, 2.0])
    assert model.data == [3.0, 1.0, 2.0]


def test_stores_a_copy_of_the_input():
    values = [1.0, 2.0]
    model = FunctionModel(values)
    values.append(3.0)
    assert model.data == [1.0, 2.0]


def test_instances_do_not_share_storage():
    first = FunctionModel()
    second = FunctionModel()
    first.data.append(1.0)
    assert second.data == []


def test_equality_follows_data():
    assert FunctionModel([1.0]) == FunctionModel([1.0])
    assert FunctionModel([1.0]) != FunctionModel([2.0])