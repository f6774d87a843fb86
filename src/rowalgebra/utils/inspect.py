"""Provide insights about Python objects."""

import inspect
from typing import Any


def get_qualname(obj: Any) -> str:
    """Get the qualified name of the given object.

    Used to name the predicates and combining functions
    provided to the operators when reporting about them.

    For functions or methods, this will return
    something like `module.class.method` or
    `module.function`. Objects whose module can't
    be detected (like functions typed in an interactive
    session) only get their own name.

    >>> class TestClass:
    ...   def method(self, arg):
    ...     pass
    >>> get_qualname(TestClass.method)
    'rowalgebra.utils.inspect.TestClass.method'
    >>> get_qualname(len)
    'builtins.len'
    """
    module = inspect.getmodule(obj)
    prefix = f"{module.__name__}." if module is not None else ""
    if inspect.ismethod(obj):
        class_name = obj.__self__.__class__.__name__
        return f"{prefix}{class_name}.{obj.__name__}"
    elif inspect.isfunction(obj) or inspect.isbuiltin(obj) or inspect.isclass(obj):
        return f"{prefix}{obj.__qualname__}"
    elif inspect.ismodule(obj):
        return obj.__name__
    return f"{prefix}{obj.__class__.__qualname__}"
