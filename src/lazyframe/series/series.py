"""The Series object itself."""
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Self

from ..sequences import (
    CountingSequence,
    ElementExtractSequence,
    InvalidArgumentError,
    MaterializedSequence,
    PairZipSequence,
    ProjectionSequence,
    RestartableSequence,
    SkipSequence,
    as_sequence,
    materialize,
)
from ..utils import tabulate
from ..utils.logging import get_logger

if TYPE_CHECKING:
    from .index import Index

log = get_logger(__name__)


@dataclass(frozen=True)
class SeriesConfig:
    """Describes the content of a new Series.

    All fields are optional, the missing ones are
    derived from those that were provided.
    """

    #: The values of the Series, a list or a :class:`RestartableSequence`.
    values: Any = None
    #: The index keys, defaults to counting from 0.
    index: Any = None
    #: The ``(index, value)`` pairs, used to derive index and values when they are missing.
    pairs: Any = None
    #: Whether the provided sequences are already concrete, in-memory, data.
    baked: bool = False


class Series:
    """Ordered values, each one associated with an index key.

    The Series object is lazy, any transformation
    returns a new Series that will compute its values only
    when they are requested, through iteration or one of the
    methods that force evaluation like :meth:`to_array`,
    :meth:`to_pairs` or :meth:`bake`.

    A Series is never modified, all transformations
    return a new Series and leave the original one untouched.

    >>> series = Series([10, 20, 30])
    >>> series.to_pairs()
    [(0, 10), (1, 20), (2, 30)]
    >>> series.skip(2).to_array()
    [30]
    >>> Series({"values": [1, 2, 3], "index": ["a", "b", "c"]}).to_pairs()
    [('a', 1), ('b', 2), ('c', 3)]
    >>> Series({"pairs": [("x", 1), ("y", 2)]}).get_index().to_array()
    ['x', 'y']
    """

    config_class = SeriesConfig

    def __init__(self, config: Any = None) -> None:
        """
        :param config: What the Series should contain, can be

                       * ``None`` for an empty Series.
                       * Another Series, whose content will be shared.
                       * A :class:`SeriesConfig` or a dict with the same keys.
                       * Any other collection, used as the values of the Series.
        """
        if config is None:
            self._init_from_config(self.config_class(values=[]))
        elif isinstance(config, Series):
            self._init_from_series(config)
        elif isinstance(config, SeriesConfig):
            self._init_from_config(config)
        elif isinstance(config, Mapping):
            self._init_from_config(self._parse_config(config))
        else:
            self._init_from_config(self.config_class(values=config))

    @classmethod
    def _parse_config(cls, config: Mapping[str, Any]) -> SeriesConfig:
        allowed = {f.name for f in fields(cls.config_class)}
        unknown = [key for key in config if key not in allowed]
        if unknown:
            raise InvalidArgumentError(
                f"Unknown {cls.__name__} configuration fields: {', '.join(map(str, unknown))}"
            )
        return cls.config_class(**config)

    def _init_from_series(self, other: "Series") -> None:
        self._index = other._index
        self._values = other._values
        self._pairs = other._pairs
        self._baked = other._baked

    def _init_from_config(self, config: SeriesConfig) -> None:
        # Validate all fields before deriving anything.
        values = as_sequence(config.values, "values") if config.values is not None else None
        index = as_sequence(config.index, "index") if config.index is not None else None
        pairs = None
        if config.pairs is not None:
            pairs = as_sequence(config.pairs, "pairs")
            if not isinstance(config.pairs, RestartableSequence):
                # Concrete pairs might be lists, make them tuples like zipped ones.
                pairs = ProjectionSequence(pairs, tuple)

        if index is None:
            if pairs is not None:
                index = ElementExtractSequence(pairs, 0, field_name="pairs")
            else:
                index = CountingSequence()

        if values is None:
            if pairs is not None:
                values = ElementExtractSequence(pairs, 1, field_name="pairs")
            else:
                values = MaterializedSequence([])

        if pairs is None:
            pairs = PairZipSequence(index, values)
            if index.bounded:
                # A finite index can be shorter than the values,
                # only the values paired with a key belong to the series.
                values = ElementExtractSequence(pairs, 1)

        self._index = index
        self._values = values
        self._pairs = pairs
        self._baked = bool(config.baked)

    def _derive(self, **config: Any) -> Self:
        """Build a new object of the same type with the given content."""
        return self.__class__(self.config_class(**config))

    def __iter__(self) -> Iterator[Any]:
        """Start a new pass over the values of the series."""
        return iter(self._values)

    def __str__(self) -> str:
        return self.to_string()

    @property
    def is_baked(self) -> bool:
        """If the content of the series is already concrete, in-memory, data."""
        return self._baked

    def get_index(self) -> "Index":
        """Get the index of the series.

        The index only contains the keys actually paired with a value,
        when the index is longer than the values, it's truncated.
        """
        from .index import Index

        return Index(ElementExtractSequence(self._pairs, 0))

    def to_array(self) -> list[Any]:
        """Extract values from the series as a list.

        This forces lazy evaluation to complete.
        """
        return materialize(self._values, "values")

    def to_pairs(self) -> list[tuple[Any, Any]]:
        """Retrieve the index and values from the series as a list of pairs.

        Each pair is ``(index, value)``.
        This forces lazy evaluation to complete.
        """
        return materialize(self._pairs, "pairs")

    def skip(self, count: int) -> Self:
        """Skip a number of values in the series.

        Skipping more values than the series contains
        results in an empty series.

        :param count: Number of values to skip, must not be negative.
        """
        return self._derive(
            values=SkipSequence(self._values, count),
            index=SkipSequence(self._index, count),
            pairs=SkipSequence(self._pairs, count),
        )

    def select(self, transform: Callable[[Any], Any]) -> Self:
        """Generate a new series by calling the transform function on each value.

        The new series preserves the index, the pairs
        are zipped again from the index and the new values.

        :param transform: Function that receives a value and returns the new one.
        """
        values = ProjectionSequence(self._values, transform)
        return self._derive(
            values=values,
            index=self._index,
            pairs=PairZipSequence(self._index, values),
        )

    def with_index(self, new_index: Any) -> Self:
        """Apply a new index to the series.

        When the new index and the values have different lengths,
        the series is truncated to the shortest of the two,
        values included.

        :param new_index: The keys of the new index.
        """
        index = as_sequence(new_index, "index")
        log.debug("index rebound", kind=type(self).__name__, index=str(index))
        return self._derive(values=self._values, index=index)

    def reset_index(self) -> Self:
        """Reset the index back to the default zero based counting index."""
        return self.with_index(CountingSequence())

    def bake(self) -> Self:
        """Force lazy evaluation to complete and keep the result in memory.

        The returned series is backed by concrete lists,
        so iterating it again won't evaluate the pipeline again.
        Baking an already baked series returns it as is.
        """
        if self._baked:
            return self

        pairs = materialize(self._pairs, "pairs")
        log.debug("baked", kind=type(self).__name__, rows=len(pairs))
        return self._derive(
            values=MaterializedSequence([pair[1] for pair in pairs]),
            index=MaterializedSequence([pair[0] for pair in pairs]),
            pairs=MaterializedSequence(pairs),
            baked=True,
        )

    def to_string(self) -> str:
        """Format the series for display as a text table.

        This forces lazy evaluation to complete.
        """
        rows = [list(pair) for pair in self.to_pairs()]
        return tabulate.tabulate(["index", "value"], rows)
