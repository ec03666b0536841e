"""The index of Series and DataFrames."""
from .series import Series


class Index(Series):
    """The keys that index the values of a Series or a DataFrame.

    The index is itself a Series whose values are the keys,
    it has no storage of its own and lazily reads them from
    the Series it was created from.

    >>> Series({"values": [1, 2], "index": ["a", "b"]}).get_index().to_array()
    ['a', 'b']
    """
