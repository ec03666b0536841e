import functools

from lazyframe.utils.inspect import get_qualname


def module_function(value):
    return value


class Transformer:
    def method(self, value):
        return value


def test_function():
    """Test the name of a plain function."""
    assert get_qualname(module_function).endswith("test_inspect.module_function")


def test_bound_method():
    """Test the name of a bound method."""
    assert get_qualname(Transformer().method).endswith("test_inspect.Transformer.method")


def test_builtins():
    """Test the name of builtin functions."""
    assert get_qualname(str) == "builtins.str"
    assert get_qualname(len) == "builtins.len"


def test_callable_instance():
    """Test the name of a callable object."""
    assert get_qualname(functools.partial(module_function)) == "functools.partial"
