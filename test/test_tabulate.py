from lazyframe.utils.tabulate import format_value, tabulate


def test_tabulate():
    """Test formatting rows into a table."""
    table = tabulate(["name", "n"], [["a", 1], ["bbb", 22]])
    assert table == (
        "name | n \n"
        "---- | --\n"
        "a    | 1 \n"
        "bbb  | 22"
    )


def test_tabulate_max_rows():
    """Test only the first rows are shown."""
    table = tabulate(["n"], [[i] for i in range(5)], max_rows=2)
    assert table.splitlines() == ["n", "-", "0", "1", "... and 3 more rows"]


def test_tabulate_no_rows():
    """Test formatting a table without rows."""
    assert tabulate(["a", "b"], []) == "a | b\n- | -"


def test_format_value():
    """Test formatting single values."""
    assert format_value(1.0) == "1.00"
    assert format_value(True) == "true"
    assert format_value(None) == "None"
    assert format_value("x" * 40) == "x" * 27 + "..."
