from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..comparator import Comparator, as_compare_function, natural_order
from ..exceptions import NullPointerException
from ..optional import Optional as Maybe
from ..types import *

if typing.TYPE_CHECKING:
    from ..collectors import Collector
    from ..stream import Stream

_NO_IDENTITY = object()


def _require_function(value: Any, name: str) -> None:
    if not callable(value):
        raise NullPointerException(f"{name} must be a function")


class _TerminalOperations(Generic[T]):
    """eager operations. each one drives the pull chain once and consumes the stream"""

    def _drain(self: 'Stream[T]') -> List[T]:
        return list(self._link())

    def iterator(self: 'Stream[T]') -> Iterator[T]:
        """a python iterator over the remaining elements; consumes the stream"""
        return iter(self._link())

    def __iter__(self: 'Stream[T]') -> Iterator[T]:
        return self.iterator()

    def count(self: 'Stream[T]') -> int:
        """number of elements surviving the pipeline"""
        return sum(1 for _ in self._link())

    def for_each(self: 'Stream[T]', action: Consumer[T]) -> None:
        """run action once per element, in pull order"""
        _require_function(action, 'action')
        for item in self._link():
            action(item)

    def for_each_ordered(self: 'Stream[T]', action: Consumer[T]) -> None:
        """same as for_each; streams are sequential so encounter order is always kept"""
        self.for_each(action)

    def to_array(self: 'Stream[T]') -> List[T]:
        """materialize every element into a list"""
        return self._drain()

    def to_list(self: 'Stream[T]') -> List[T]:
        return self._drain()

    def reduce(self: 'Stream[T]', accumulator: BinaryOperator[T], identity: Any = _NO_IDENTITY) -> Any:
        """
        fold the elements with accumulator.
        without identity the result is an Optional, empty for an empty stream.
        with identity the fold starts from it and the plain result is returned.
        """
        _require_function(accumulator, 'accumulator')
        source = self._link()

        if identity is not _NO_IDENTITY:
            result = identity
            for item in source:
                result = accumulator(result, item)
            return result

        has_value, result = source.try_pull()
        if not has_value:
            return Maybe.empty()
        for item in source:
            result = accumulator(result, item)
        return Maybe.of(result)

    def min(self: 'Stream[T]', comparator: Optional[Union[Comparator[T], CompareFunction[T]]] = None) -> Maybe[T]:
        """the smallest element by comparator (natural order by default); the first one wins ties"""
        compare = as_compare_function(comparator if comparator is not None else natural_order(), 'comparator')
        return self.reduce(lambda a, b: a if compare(a, b) <= 0 else b)

    def max(self: 'Stream[T]', comparator: Optional[Union[Comparator[T], CompareFunction[T]]] = None) -> Maybe[T]:
        """the largest element by comparator (natural order by default); the first one wins ties"""
        compare = as_compare_function(comparator if comparator is not None else natural_order(), 'comparator')
        return self.reduce(lambda a, b: a if compare(a, b) >= 0 else b)

    def find_first(self: 'Stream[T]') -> Maybe[T]:
        """the first element, pulling nothing beyond it"""
        has_value, value = self._link().try_pull()
        return Maybe.of(value) if has_value else Maybe.empty()

    def find_any(self: 'Stream[T]') -> Maybe[T]:
        return self.find_first()

    def any_match(self: 'Stream[T]', predicate: Predicate[T]) -> bool:
        _require_function(predicate, 'predicate')
        return any(predicate(item) for item in self._link())

    def all_match(self: 'Stream[T]', predicate: Predicate[T]) -> bool:
        _require_function(predicate, 'predicate')
        return all(predicate(item) for item in self._link())

    def none_match(self: 'Stream[T]', predicate: Predicate[T]) -> bool:
        _require_function(predicate, 'predicate')
        return not any(predicate(item) for item in self._link())

    def collect(self: 'Stream[T]', collector: Union['Collector[T, Any, R]', Supplier[Any]],
                accumulator: Optional[Callable[[Any, T], Any]] = None) -> R:
        """
        mutable reduction.
        collect(collector) uses a Collector, see jstream.collectors.
        collect(supplier, accumulator) folds into supplier() and returns the container.
        """
        from ..collectors import Collector
        if accumulator is not None:
            collector = Collector(collector, accumulator)
        if not isinstance(collector, Collector):
            raise NullPointerException("collector must be a Collector")

        container = collector.supplier()
        for item in self._link():
            collector.accumulator(container, item)
        return collector.finish(container)


class TerminalAccessor(Generic[T]):
    """conversions to python, numpy and pandas containers, all of them terminal"""

    def __init__(self, stream_instance: 'Stream[T]'):
        self._stream = stream_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._stream._drain()

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._stream._link())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._stream._link())

    def dict(self, key_mapper: Mapper[T, K], value_mapper: Optional[Mapper[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary, later keys overwrite earlier ones"""
        _require_function(key_mapper, 'key_mapper')
        val_sel = value_mapper if value_mapper else lambda item: item
        return {key_mapper(item): val_sel(item) for item in self._stream._link()}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._stream._drain())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._stream._drain())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._stream._drain())
