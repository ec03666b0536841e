import pytest

from lazyframe.sequences import (
    CountingSequence,
    InvalidArgumentError,
    MaterializedSequence,
    ProjectionSequence,
)


def double(value):
    return value * 2


def test_projection_applies_transform():
    """Test the transform is applied to each element."""
    seq = ProjectionSequence(MaterializedSequence([1, 2, 3]), double)
    assert list(seq) == [2, 4, 6]
    assert list(seq) == [2, 4, 6]


def test_projection_is_lazy():
    """Test the transform is only applied when elements are requested."""
    calls = []

    def tracking(value):
        calls.append(value)
        return value

    seq = ProjectionSequence(MaterializedSequence([1, 2, 3]), tracking)
    assert calls == []

    passage = iter(seq)
    assert next(passage) == 1
    assert calls == [1]

    assert list(seq) == [1, 2, 3]
    assert calls == [1, 1, 2, 3]


def test_projection_of_empty_sequence():
    """Test projecting an empty sequence."""
    assert list(ProjectionSequence(MaterializedSequence([]), double)) == []


def test_projection_keeps_boundedness():
    """Test projecting preserves the boundedness of the upstream."""
    assert ProjectionSequence(CountingSequence(), double).bounded is False
    assert ProjectionSequence(MaterializedSequence([1]), double).bounded is True


def test_projection_requires_callable():
    """Test transforms that can't be called are refused."""
    with pytest.raises(InvalidArgumentError, match="callable"):
        ProjectionSequence(MaterializedSequence([1]), 5)


def test_projection_str():
    """Test the description of the projection."""
    seq = ProjectionSequence(MaterializedSequence([1, 2]), double)
    assert str(seq).startswith("ProjectionSequence(")
    assert "double" in str(seq)
    assert str(seq).endswith(", MaterializedSequence(items=2))")


def test_projection_errors_propagate():
    """Test errors of the transform propagate to the consumer."""
    seq = ProjectionSequence(MaterializedSequence([1, 0]), lambda v: 1 / v)
    with pytest.raises(ZeroDivisionError):
        list(seq)
