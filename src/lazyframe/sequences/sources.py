"""Sequences that provide data

The source sequences are the leafs of every pipeline,
they produce the elements that the other sequences
will transform.

They are used to do things like replaying a list
of values or generating the default index.
"""

import itertools
from collections.abc import Iterator, Sequence
from typing import Any

from .base import RestartableSequence


class CountingSequence(RestartableSequence):
    """Count upward from zero, forever.

    This is the default index of Series and DataFrames.
    As it never ends it must always be paired with a bounded
    sequence through a :class:`lazyframe.sequences.PairZipSequence`
    which will stop as soon as the other sequence ends.

    >>> list(itertools.islice(CountingSequence(), 4))
    [0, 1, 2, 3]
    """

    bounded = False

    def __str__(self) -> str:
        return "CountingSequence()"

    def __iter__(self) -> Iterator[int]:
        """Emit 0, 1, 2, ... each pass starting again from 0."""
        return itertools.count()


class MaterializedSequence(RestartableSequence):
    """Replay a concrete, in-memory, sequence of values.

    Given a list (or any other Python sequence) allow
    to use its values in a pipeline. The data is not copied,
    so mutating the list will affect the passes started after it.

    >>> seq = MaterializedSequence([10, 20, 30])
    >>> list(seq), list(seq)
    ([10, 20, 30], [10, 20, 30])
    """

    def __init__(self, items: Sequence[Any]) -> None:
        """
        :param items: The values the sequence will replay.
        """
        self.items = items

    def __str__(self) -> str:
        return f"MaterializedSequence(items={len(self.items)})"

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        """Emit the values from the first one."""
        yield from self.items
