import functools

from rowalgebra.model import Row
from rowalgebra.utils.inspect import get_qualname


def module_function(value):
    return value


def test_function():
    assert get_qualname(module_function) == f"{__name__}.module_function"


def test_bound_method():
    row = Row({"a": 1})
    assert get_qualname(row.lookup) == "rowalgebra.model.row.Row.lookup"


def test_class():
    assert get_qualname(Row) == "rowalgebra.model.row.Row"


def test_instance():
    assert get_qualname(functools.partial(module_function)) == "functools.partial"


def test_lambda():
    assert get_qualname(lambda v: v).endswith("<lambda>")
