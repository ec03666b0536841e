"""Format tabular data into a text table for print.

the `tabulate` function takes a list of column names and a list of rows
and formats them into a text table.
It will truncate long strings, format floats to 2 decimal places, and limit the number of rows to display.
The function is used to display the content of Series and DataFrames.

Example:

    >>> columns = ["Product", "Quantity", "Price"]
    >>> rows = [["Videogame", 8, 66.5], ["Laptop", 8, 38.72], ["Laptop", 7, 77.46]]
    >>> print(tabulate(columns, rows))
    Product   | Quantity | Price
    --------- | -------- | -----
    Videogame | 8        | 66.50
    Laptop    | 8        | 38.72
    Laptop    | 7        | 77.46
"""

from collections.abc import Sequence
from typing import Any


def tabulate(columns: list[str], rows: Sequence[Sequence[Any]], max_rows: int = 20) -> str:
    """Format rows of values into a text table.

    Will produce a string like::

        Product   | Quantity | Price | Total
        --------- | -------- | ----- | ------
        Videogame | 8        | 66.50 | 532.00
        Laptop    | 8        | 38.72 | 309.76
        Laptop    | 7        | 77.46 | 542.22

    Only the first ``max_rows`` rows are shown,
    the number of omitted rows is reported at the end.
    """
    textrows = [[format_value(value) for value in row] for row in rows[:max_rows]]

    colsizes = compute_max_colsize(columns, textrows)
    header = [maketablerow(columns, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(columns), colsizes=colsizes, fillvalue="-")]
    body = [maketablerow(row, colsizes=colsizes) for row in textrows]

    table = "\n".join(header + separator + body)
    if len(rows) > max_rows:
        table += f"\n... and {len(rows) - max_rows} more rows"
    return table


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows if colidx < len(row)] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes.

    Rows shorter than the header are padded with empty cells,
    values exceeding the header are dropped.
    """
    cells = list(cols[: len(colsizes)]) + [""] * (len(colsizes) - len(cols))
    return " | ".join(
        [cell.ljust(colsizes[idx], fillvalue) for idx, cell in enumerate(cells)]
    )


def format_value(v: Any) -> str:
    """Format a value to be printed in the table.

    This function will format floats to 2 decimal places,
    and truncate long strings.
    """
    if isinstance(v, float):
        return f"{v:.2f}"
    elif isinstance(v, bool):
        return "true" if v else "false"

    v = str(v)
    if len(v) > 30:
        v = v[:27] + "..."
    return v
