"""Dataframe library built on top of lazyframe sequences.

A dataframe library is a tool designed to handle and manipulate structured data,
typically in the form of tables (i.e., rows and columns).
It allows users to load data from various sources (like CSV files),
explore it, apply transformations, and analyze it.

The lazyframe :class:`DataFrame` is a :class:`lazyframe.series.Series`
whose values are the rows of the table, it adds the names of the
columns and the capability to exchange data with Apache Arrow::

    df = DataFrame.open_csv("shops.csv")
    df.skip(10).select(lambda row: {**row, "City": row["City"].upper()}).to_arrow()

Like a Series, a dataframe is lazy: the rows are
produced by a pipeline of sequences that is evaluated
only when the rows are requested.
"""

from .dataframe import DataFrame, DataFrameConfig

__all__ = ("DataFrame", "DataFrameConfig")
