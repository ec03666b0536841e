"""Series of indexed values.

A Series is an ordered sequence of values where each
value is associated to a key of the **index**.
By default the index counts the values starting from 0,
but any sequence of keys can be used as the index.

Internally a Series is made of three lazy sequences
(see :mod:`lazyframe.sequences`) that are kept in sync:

* the index
* the values
* the ``(index, value)`` pairs

A Series can be created providing any of them, the missing
ones will be derived from those that were provided::

    Series([10, 20, 30])                            # values only
    Series({"values": [1, 2], "index": ["a", "b"]})  # values and index
    Series({"pairs": [("a", 1), ("b", 2)]})          # pairs only

Transformations like :meth:`Series.skip` and :meth:`Series.select`
compose new sequences on top of the existing ones,
no value is computed until the Series is iterated or
turned into a list.

When the same Series is going to be read multiple times,
:meth:`Series.bake` allows to compute its content once
and keep it in memory.
"""

from .index import Index
from .series import Series, SeriesConfig

__all__ = ("Series", "SeriesConfig", "Index")
