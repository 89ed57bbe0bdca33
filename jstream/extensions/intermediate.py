from __future__ import annotations
import typing
from ..comparator import Comparator, as_compare_function, natural_order
from ..exceptions import NullPointerException
from ..sources import (
    ClosingSource, DistinctSource, DropWhileSource, EmptySource, FilterSource, FlatMapSource,
    IteratorSource, LimitSource, MapSource, PeekSource, PullSource, SkipSource, SortedSource,
    TakeWhileSource
)
from ..types import *

if typing.TYPE_CHECKING:
    from ..stream import Stream


def _require_function(value: Any, name: str) -> None:
    if not callable(value):
        raise NullPointerException(f"{name} must be a function")


def _require_non_negative(value: int, name: str) -> None:
    if not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")


class _IntermediateOperations(Generic[T]):
    """lazy operations. each one returns a new stream and pulls nothing until a terminal operation runs"""

    def filter(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """keep the elements matching predicate"""
        _require_function(predicate, 'predicate')
        return self._chain(lambda source: FilterSource(source, predicate))

    def map(self: 'Stream[T]', mapper: Mapper[T, U]) -> 'Stream[U]':
        """project each element to a new form"""
        _require_function(mapper, 'mapper')
        return self._chain(lambda source: MapSource(source, mapper))

    def peek(self: 'Stream[T]', action: Consumer[T]) -> 'Stream[T]':
        """run action on each element as it passes, for side-effects such as debugging"""
        _require_function(action, 'action')
        return self._chain(lambda source: PeekSource(source, action))

    def flat_map(self: 'Stream[T]', mapper: Callable[[T], Union['Stream[U]', Iterable[U], None]]) -> 'Stream[U]':
        """
        replace each element with the contents of the stream (or iterable) mapper returns.
        a none result counts as empty; a returned stream is closed once drained.
        """
        from ..stream import Stream
        _require_function(mapper, 'mapper')

        def to_source(element: T) -> PullSource[U]:
            result = mapper(element)
            if result is None:
                return EmptySource()
            if isinstance(result, Stream):
                return ClosingSource(result._link(), result.close)
            return IteratorSource(result)

        return self._chain(lambda source: FlatMapSource(source, to_source))

    def distinct(self: 'Stream[T]') -> 'Stream[T]':
        """drop elements equal to one seen earlier, keeping the first occurrence"""
        return self._chain(lambda source: DistinctSource(source))

    def sorted(self: 'Stream[T]',
               comparator: Optional[Union[Comparator[T], CompareFunction[T]]] = None) -> 'Stream[T]':
        """
        sort by comparator, natural order by default. the sort is stable.
        nothing is buffered or compared until the first element is pulled.
        """
        compare = as_compare_function(comparator if comparator is not None else natural_order(), 'comparator')
        return self._chain(lambda source: SortedSource(source, compare))

    def limit(self: 'Stream[T]', max_size: int) -> 'Stream[T]':
        """truncate to at most max_size elements"""
        _require_non_negative(max_size, 'max_size')
        return self._chain(lambda source: LimitSource(source, max_size))

    def skip(self: 'Stream[T]', n: int) -> 'Stream[T]':
        """discard the first n elements"""
        _require_non_negative(n, 'n')
        return self._chain(lambda source: SkipSource(source, n))

    def take_while(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """the longest prefix whose elements all match predicate"""
        _require_function(predicate, 'predicate')
        return self._chain(lambda source: TakeWhileSource(source, predicate))

    def drop_while(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """everything after the longest prefix matching predicate"""
        _require_function(predicate, 'predicate')
        return self._chain(lambda source: DropWhileSource(source, predicate))
