from lazyframe import Index, Series


def test_index_of_index_counts():
    """Test the index of an index is a counting one."""
    index = Series({"values": [1, 2], "index": ["a", "b"]}).get_index()
    assert index.get_index().to_array() == [0, 1]


def test_index_is_restartable():
    """Test the index can be read more than once."""
    index = Series([1, 2, 3]).get_index()
    assert index.to_array() == [0, 1, 2]
    assert index.to_array() == [0, 1, 2]


def test_index_transformations_return_index():
    """Test transformations of an Index return an Index."""
    index = Series({"values": [1, 2, 3], "index": ["a", "b", "c"]}).get_index()
    skipped = index.skip(1)
    assert isinstance(skipped, Index)
    assert skipped.to_array() == ["b", "c"]


def test_index_of_skipped_series():
    """Test the index of a skipped series."""
    series = Series({"pairs": [("a", 1), ("b", 2), ("c", 3)]}).skip(2)
    assert series.get_index().to_array() == ["c"]
