"""Sequences that pick one slot out of tuples.

When a Series is created from its ``(index, value)`` pairs,
the index and the values are derived from them
by extracting the first and the second slot of each pair::

    pairs:  (a, 1) (b, 2) (c, 3)
    slot 0: a b c
    slot 1: 1 2 3
"""

from collections.abc import Iterator
from typing import Any

from .base import InvalidArgumentError, RestartableSequence


class ElementExtractSequence(RestartableSequence):
    """Emit one slot of each tuple of the upstream sequence.

    The upstream is expected to emit tuples that all
    have the same number of elements, the ``arity``.

    >>> from lazyframe.sequences import MaterializedSequence
    >>> pairs = MaterializedSequence([("a", 1), ("b", 2)])
    >>> list(ElementExtractSequence(pairs, 0)), list(ElementExtractSequence(pairs, 1))
    (['a', 'b'], [1, 2])
    """

    def __init__(
        self,
        upstream: RestartableSequence,
        slot: int,
        arity: int = 2,
        field_name: str = "elements",
    ) -> None:
        """
        :param upstream: The sequence emitting the tuples.
        :param slot: Which element of each tuple to emit, first is 0.
        :param arity: How many elements each tuple has.
        :param field_name: How to refer to the tuples when one of them is malformed.
        """
        if not isinstance(slot, int) or not 0 <= slot < arity:
            raise InvalidArgumentError(
                f"Slot {slot!r} is out of range for tuples of {arity} elements"
            )

        self.upstream = upstream
        self.slot = slot
        self.arity = arity
        self.field_name = field_name
        self.bounded = upstream.bounded

    def __str__(self) -> str:
        return f"ElementExtractSequence({self.slot}, {self.upstream})"

    def __iter__(self) -> Iterator[Any]:
        """Start a pass on the upstream and emit the slot of each tuple.

        Tuples too short to contain the slot are reported
        as soon as the pass reaches them.
        """
        slot = self.slot
        for element in self.upstream:
            try:
                value = element[slot]
            except (IndexError, TypeError) as err:
                raise InvalidArgumentError(
                    f"Expected '{self.field_name}' to contain tuples of {self.arity} elements, got {element!r}"
                ) from err
            yield value
