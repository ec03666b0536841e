"""The lazyframe sequences

The sequences are the building blocks of the lazy
evaluation pipelines used by Series and DataFrames.

Every sequence is a :class:`RestartableSequence`,
which means it can be iterated any number of times
and each iteration (a **pass**) starts again from the
first element, without being affected by previous passes.

Sequences only describe how data has to be produced,
no work is done until a pass is started and each element
is computed only when the consumer asks for it.

This allows to easily build pipelines like::

    (elements)-->Sequence1--(elements)-->Sequence2--(elements)-->...

Building a pipeline requires to combine the sequences that we want
to be evaluated starting with one or more source sequences as the
leafs of the pipeline:

>>> from lazyframe.sequences import CountingSequence, MaterializedSequence
>>> from lazyframe.sequences import PairZipSequence, ProjectionSequence, SkipSequence
>>> values = ProjectionSequence(MaterializedSequence([1, 2, 3, 4]), lambda v: v * 2)
>>> pairs = SkipSequence(PairZipSequence(CountingSequence(), values), 1)
>>> for pair in pairs:
...     print(pair)
(1, 4)
(2, 6)
(3, 8)
>>> list(pairs)
[(1, 4), (2, 6), (3, 8)]
"""

from .base import InvalidArgumentError, RestartableSequence, as_sequence, materialize
from .extraction import ElementExtractSequence
from .pagination import SkipSequence
from .projection import ProjectionSequence
from .sources import CountingSequence, MaterializedSequence
from .zipping import PairZipSequence

__all__ = (
    "RestartableSequence",
    "InvalidArgumentError",
    "as_sequence",
    "materialize",
    "CountingSequence",
    "MaterializedSequence",
    "PairZipSequence",
    "ProjectionSequence",
    "SkipSequence",
    "ElementExtractSequence",
)
