import itertools

from lazyframe.sequences import CountingSequence, MaterializedSequence


def test_counting_sequence_starts_from_zero_each_pass():
    """Test each pass of a counting sequence starts from zero."""
    seq = CountingSequence()
    assert list(itertools.islice(seq, 3)) == [0, 1, 2]
    assert list(itertools.islice(seq, 5)) == [0, 1, 2, 3, 4]


def test_counting_sequence_is_unbounded():
    """Test the counting sequence is unbounded."""
    assert CountingSequence().bounded is False
    assert str(CountingSequence()) == "CountingSequence()"


def test_materialized_sequence_replays():
    """Test a materialized sequence can be read more than once."""
    seq = MaterializedSequence(["a", "b", "c"])
    assert list(seq) == ["a", "b", "c"]
    assert list(seq) == ["a", "b", "c"]
    assert len(seq) == 3
    assert seq.bounded is True


def test_materialized_sequence_independent_passes():
    """Test passes over a materialized sequence are independent."""
    seq = MaterializedSequence([1, 2, 3])
    first = iter(seq)
    second = iter(seq)
    assert next(first) == 1
    assert next(first) == 2
    assert next(second) == 1
    assert list(first) == [3]
    assert list(second) == [2, 3]


def test_materialized_sequence_str():
    """Test the description of a materialized sequence."""
    assert str(MaterializedSequence(range(5))) == "MaterializedSequence(items=5)"
    assert repr(MaterializedSequence([])) == "<MaterializedSequence(items=0)>"
