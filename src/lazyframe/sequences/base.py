"""Base classes and interfaces for lazy sequences

This module defines the base components that are
necessary to describe a lazy pipeline and run it.
"""

import abc
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

import pyarrow as pa


class InvalidArgumentError(ValueError):
    """Exception raised when an operation receives an invalid argument.

    It is always raised by the call that received the bad input,
    never later while the lazy pipeline is being evaluated.
    """


class RestartableSequence(abc.ABC):
    """A sequence that can be iterated any number of times.

    Each call to ``iter()`` starts a new **pass** over the
    elements of the sequence. Passes are independent from
    each other: consuming one pass never affects another one,
    even if they are in progress at the same time.

    A sequence is only a descriptor of how to produce its
    elements, building it performs no work at all.
    Sequences are usually chained together to form a pipeline::

        MaterializedSequence -> ProjectionSequence(fn) -> SkipSequence(2)

    That would be a pipeline where the last step discards the first
    two elements of each pass, and the ``MaterializedSequence`` is
    the source of the data.

    The base ``RestartableSequence`` class does nothing
    and purely acts as the interface that all sequences
    must implement.

    For example a sequence that forwards the elements of another
    one after printing them can be implemented as::

        class DebugSequence(RestartableSequence):
            def __init__(self, upstream):
                self.upstream = upstream
                self.bounded = upstream.bounded

            def __iter__(self):
                for element in self.upstream:
                    print(element)
                    yield element

            def __str__(self):
                return f"DebugSequence({self.upstream})"

    Implementing ``__iter__`` as a generator guarantees that
    every pass gets its own cursor state.
    """

    #: Whether a pass over the sequence is guaranteed to end.
    bounded: bool = True

    @abc.abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Start a new pass over the elements of the sequence.

        Usually this happens by starting a pass on the upstream
        sequences, transforming their elements somehow, and
        yielding them back to the consumer.
        """
        ...

    @abc.abstractmethod
    def __str__(self) -> str:
        """Human readable representation of the sequence."""
        ...

    def __repr__(self) -> str:
        return f"<{self}>"


def as_sequence(source: Any, field_name: str) -> RestartableSequence:
    """Convert ``source`` into a :class:`RestartableSequence`.

    Sequences are returned as they are, concrete collections
    are wrapped into a ``MaterializedSequence``.

    One-shot iterators like generators are refused, as they
    could only provide a single pass over their elements.

    >>> as_sequence([1, 2, 3], "values")
    <MaterializedSequence(items=3)>
    >>> as_sequence(42, "values")
    Traceback (most recent call last):
      ...
    lazyframe.sequences.base.InvalidArgumentError: Expected 'values' to be a sequence of values, got int
    """
    # Local import, sources depend on this module.
    from .sources import MaterializedSequence

    if isinstance(source, RestartableSequence):
        return source
    if isinstance(source, (pa.Array, pa.ChunkedArray)):
        return MaterializedSequence(source.to_pylist())
    if isinstance(source, (str, bytes)):
        raise InvalidArgumentError(
            f"Expected '{field_name}' to be a sequence of values, got {type(source).__name__}"
        )
    if isinstance(source, Sequence):
        return MaterializedSequence(source)
    if isinstance(source, Iterator):
        raise InvalidArgumentError(
            f"Expected '{field_name}' to be a sequence of values, "
            f"got a one-shot {type(source).__name__}, wrap it in a list"
        )
    if isinstance(source, Iterable):
        return MaterializedSequence(list(source))
    raise InvalidArgumentError(
        f"Expected '{field_name}' to be a sequence of values, got {type(source).__name__}"
    )


def materialize(sequence: RestartableSequence, field_name: str) -> list[Any]:
    """Drain a full pass of the sequence into a list.

    Unbounded sequences are refused, draining them would never end.
    """
    if not sequence.bounded:
        raise InvalidArgumentError(
            f"Unable to materialize '{field_name}', {sequence} is unbounded"
        )
    return list(sequence)
