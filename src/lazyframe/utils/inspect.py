"""Provide insights about Python objects."""

import inspect
from typing import Any


def get_qualname(obj: Any) -> str:
    """Get the qualified name of the given object.

    Used to describe the transform functions of a pipeline.

    For functions or methods, this will return
    something like `module.class.method` or
    `module.function`. Builtins are reported with
    their ``builtins`` module.

    >>> class TestClass:
    ...   def method(self, arg):
    ...     pass
    >>> get_qualname(TestClass.method)
    'lazyframe.utils.inspect.TestClass.method'
    >>> get_qualname(tuple)
    'builtins.tuple'
    """
    module = inspect.getmodule(obj)
    module_name = module.__name__ if module is not None else "<unknown>"
    if inspect.ismethod(obj) or inspect.isfunction(obj):
        if hasattr(obj, "__self__") and obj.__self__:
            class_name = obj.__self__.__class__.__name__
            return f"{module_name}.{class_name}.{obj.__name__}"
        return f"{module_name}.{obj.__qualname__}"
    elif inspect.isclass(obj) or inspect.isbuiltin(obj):
        return f"{module_name}.{obj.__qualname__}"
    return f"{module_name}.{obj.__class__.__name__}"
