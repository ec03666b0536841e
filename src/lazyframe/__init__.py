"""lazyframe

Indexed, lazily evaluated, Series and DataFrames.

A Series is an ordered collection of values paired one-to-one
with an ordered collection of index keys. Transformations over it
(selecting new values, skipping values, changing the index)
are never applied eagerly, they are composed as a chain of
lazy sequences that are evaluated only when the data is read.

The library is constituted by multiple components, each isolated within its own
package and each self documented in literate programming style.

The primary components are:

* The Sequences, the lazy building blocks every pipeline is made of.
* The Series, which pairs an index with the values.
* The DataFrame, which extends the Series to rows of data with named columns.

>>> from lazyframe import Series
>>> Series([1, 2, 3]).select(lambda v: v * 10).skip(1).to_pairs()
[(1, 20), (2, 30)]
"""

from . import dataframe, sequences, series
from .dataframe import DataFrame, DataFrameConfig
from .sequences import InvalidArgumentError
from .series import Index, Series, SeriesConfig

__all__ = (
    "dataframe",
    "sequences",
    "series",
    "DataFrame",
    "DataFrameConfig",
    "Index",
    "InvalidArgumentError",
    "Series",
    "SeriesConfig",
)
