"""The DataFrame object itself."""
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Self

import pyarrow as pa
import pyarrow.csv

from ..sequences import (
    InvalidArgumentError,
    MaterializedSequence,
    as_sequence,
    materialize,
)
from ..series import Series, SeriesConfig
from ..utils import tabulate


@dataclass(frozen=True)
class DataFrameConfig(SeriesConfig):
    """Describes the content of a new DataFrame.

    Same as :class:`lazyframe.series.SeriesConfig`,
    the values are the rows of the DataFrame.
    """

    #: The names of the columns, in order.
    column_names: Any = None


class DataFrame(Series):
    """Data structure that handles data in rows and columns.

    The DataFrame object allows to represent rows of data,
    each one associated to a key of the index,
    and perform transformations over them.

    Like :class:`lazyframe.series.Series`, the DataFrame
    object is lazy, which means that any transformation will be
    applied only when the rows are requested and no data is kept
    in memory until that moment (unless it already was, or
    :meth:`bake` is invoked).

    >>> df = DataFrame({
    ...     "values": [{"animal": "Flamingo", "legs": 2}, {"animal": "Horse", "legs": 4}],
    ...     "column_names": ["animal", "legs"],
    ... })
    >>> print(df.with_index(["a", "b"]))
    index | animal   | legs
    ----- | -------- | ----
    a     | Flamingo | 2
    b     | Horse    | 4
    """

    config_class = DataFrameConfig

    def __init__(self, config: Any = None) -> None:
        """
        :param config: What the DataFrame should contain, accepts anything
                       :class:`lazyframe.series.Series` accepts plus
                       a :class:`pyarrow.Table` or :class:`pyarrow.RecordBatch`.
        """
        if isinstance(config, (pa.Table, pa.RecordBatch)):
            config = self._config_from_arrow(config)
        super().__init__(config)

    @staticmethod
    def _config_from_arrow(table: pa.Table | pa.RecordBatch) -> DataFrameConfig:
        # Arrow data is already in memory, so the frame starts baked.
        rows = table.to_pylist()
        index = list(range(len(rows)))
        return DataFrameConfig(
            values=MaterializedSequence(rows),
            index=MaterializedSequence(index),
            pairs=MaterializedSequence(list(zip(index, rows))),
            column_names=table.column_names,
            baked=True,
        )

    @classmethod
    def open_csv(cls, filename: str) -> Self:
        """Open a CSV file and create a DataFrame out of its data.

        :param filename: The path to a local CSV file.
        """
        return cls(pa.csv.read_csv(filename))

    def _init_from_series(self, other: Series) -> None:
        super()._init_from_series(other)
        self._column_names = list(getattr(other, "_column_names", []))

    def _init_from_config(self, config: SeriesConfig) -> None:
        column_names = getattr(config, "column_names", None)
        if column_names is not None:
            column_names = materialize(
                as_sequence(column_names, "column_names"), "column_names"
            )
            for name in column_names:
                if not isinstance(name, str):
                    raise InvalidArgumentError(
                        f"Expected 'column_names' to contain strings, got {type(name).__name__}"
                    )
        super()._init_from_config(config)
        self._column_names = list(column_names or [])

    def _derive(self, **config: Any) -> Self:
        return super()._derive(column_names=self._column_names, **config)

    def get_column_names(self) -> list[str]:
        """Get the names of the columns in the dataframe."""
        return list(self._column_names)

    def to_arrow(self) -> pa.Table:
        """Collect all the rows and return a pyarrow.Table

        Rows that are dicts are mapped to the columns by name,
        any other row is expected to be a sequence with
        one value for each column, in the same order.
        When no column names are known, they are inferred
        from the keys of dict rows.
        """
        rows = self.to_array()
        columns = self._column_names or _infer_column_names(rows)
        if rows and not columns:
            raise InvalidArgumentError(
                "Unable to convert the dataframe to arrow, it has no column names"
            )

        arrays = [
            pa.array([_cell(row, position, name) for row in rows])
            for position, name in enumerate(columns)
        ]
        return pa.Table.from_arrays(arrays, names=columns)

    def to_string(self) -> str:
        """Format the dataframe for display as a text table.

        This forces lazy evaluation to complete.
        """
        columns = self._column_names or ["value"]
        rows = [
            [index] + _cells(row, self._column_names)
            for index, row in self.to_pairs()
        ]
        return tabulate.tabulate(["index"] + columns, rows)


def _infer_column_names(rows: list[Any]) -> list[str]:
    names = {}
    for row in rows:
        if isinstance(row, Mapping):
            names.update(dict.fromkeys(row))
    return list(names)


def _cell(row: Any, position: int, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    if isinstance(row, Sequence) and not isinstance(row, str):
        return row[position] if position < len(row) else None
    raise InvalidArgumentError(
        f"Expected dataframe rows to be dicts or sequences, got {type(row).__name__}"
    )


def _cells(row: Any, column_names: list[str]) -> list[Any]:
    if not column_names:
        return [row]
    if isinstance(row, Mapping):
        return [row.get(name) for name in column_names]
    if isinstance(row, Sequence) and not isinstance(row, str):
        return list(row)
    return [row]
