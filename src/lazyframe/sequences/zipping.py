"""Sequences that combine other sequences.

Series keep their index and their values as two
separate sequences that need to advance together.
Zipping them produces the ``(index, value)`` pairs.

The same approach works for any number of
parallel sequences, like the columns of a table.
"""

from collections.abc import Iterator

from .base import InvalidArgumentError, RestartableSequence


class PairZipSequence(RestartableSequence):
    """Advance multiple sequences together and emit tuples.

    Each element of the pass is a tuple with one element
    from each of the upstream sequences.

    The pass ends as soon as any of the upstream sequences ends,
    so the number of emitted tuples is the length of the shortest
    upstream sequence. This is what allows to pair an unbounded
    sequence like :class:`lazyframe.sequences.CountingSequence`
    with a bounded one::

        index:  0 1 2 3 4 5 ...
        values: a b c
        pairs:  (0, a) (1, b) (2, c)

    >>> from lazyframe.sequences import CountingSequence, MaterializedSequence
    >>> list(PairZipSequence(CountingSequence(), MaterializedSequence(["a", "b"])))
    [(0, 'a'), (1, 'b')]
    """

    def __init__(self, *sequences: RestartableSequence) -> None:
        """
        :param sequences: The sequences to advance together.
        """
        if not sequences:
            raise InvalidArgumentError("PairZipSequence requires at least one sequence")

        self.sequences = sequences
        self.bounded = any(seq.bounded for seq in sequences)

    def __str__(self) -> str:
        return f"PairZipSequence({', '.join(map(str, self.sequences))})"

    def __iter__(self) -> Iterator[tuple]:
        """Start a pass on each upstream and emit their elements as tuples.

        ``zip`` stops at the first exhausted iterator
        without consuming further elements of the following ones.
        """
        yield from zip(*self.sequences)
