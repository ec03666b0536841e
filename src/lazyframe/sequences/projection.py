"""Sequences that transform the elements of another sequence.

A common request is to compute new values from
existing ones, like the ``select`` of a Series.

This module implements the basic projection capabilities.
"""

from collections.abc import Callable, Iterator
from typing import Any

from .. import utils
from .base import InvalidArgumentError, RestartableSequence


class ProjectionSequence(RestartableSequence):
    """Apply a transform function to each element.

    The transform is invoked lazily, once per element
    in each pass, only when the element is requested.

    >>> from lazyframe.sequences import MaterializedSequence
    >>> seq = ProjectionSequence(MaterializedSequence([1, 2, 3]), lambda v: v * 10)
    >>> list(seq)
    [10, 20, 30]
    """

    def __init__(
        self, upstream: RestartableSequence, transform: Callable[[Any], Any]
    ) -> None:
        """
        :param upstream: The sequence emitting the elements to transform.
        :param transform: Function receiving an element and returning the new one.
        """
        if not callable(transform):
            raise InvalidArgumentError(
                f"Expected a callable transform, got {type(transform).__name__}"
            )

        self.upstream = upstream
        self.transform = transform
        self.bounded = upstream.bounded

    def __str__(self) -> str:
        transform_qualname = utils.inspect.get_qualname(self.transform)
        return f"ProjectionSequence({transform_qualname}, {self.upstream})"

    def __iter__(self) -> Iterator[Any]:
        """Start a pass on the upstream and emit the transformed elements."""
        transform = self.transform
        for element in self.upstream:
            yield transform(element)
