"""Support skipping data in a pipeline.

Implements sequences whose purpose is to slice the data
emitted by another sequence, discarding the elements that
are not part of the selected slice of data.
"""

import itertools
from collections.abc import Iterator
from typing import Any

from .base import InvalidArgumentError, RestartableSequence


class SkipSequence(RestartableSequence):
    """Discard the first elements of each pass.

    For example if ``count=2`` only elements from
    the third one onward are emitted::

        0: skip because < count
        1: skip because < count
        2: emit
        3: emit

    When the upstream has fewer elements than ``count``
    the pass is simply empty.

    >>> from lazyframe.sequences import MaterializedSequence
    >>> list(SkipSequence(MaterializedSequence([10, 20, 30]), 2))
    [30]
    >>> list(SkipSequence(MaterializedSequence([10, 20, 30]), 5))
    []
    """

    def __init__(self, upstream: RestartableSequence, count: int) -> None:
        """
        :param upstream: the sequence from which to consume the elements.
        :param count: How many elements to discard, must not be negative.
        """
        if not isinstance(count, int) or isinstance(count, bool):
            raise InvalidArgumentError(
                f"Expected an integer number of elements to skip, got {type(count).__name__}"
            )
        if count < 0:
            raise InvalidArgumentError(
                f"Number of elements to skip can't be negative, got {count}"
            )

        self.upstream = upstream
        self.count = count
        self.bounded = upstream.bounded

    def __str__(self) -> str:
        return f"SkipSequence({self.count}, {self.upstream})"

    def __iter__(self) -> Iterator[Any]:
        """Consume and discard ``count`` elements, then emit the rest."""
        yield from itertools.islice(self.upstream, self.count, None)
