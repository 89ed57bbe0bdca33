"""
collectors for Stream.collect, after java.util.stream.Collectors.

a collector is three functions: supplier() makes a fresh mutable container,
accumulator(container, element) folds one element into it and
finisher(container) turns the container into the result.

    from jstream import Stream, collectors
    Stream.of('a', 'bb', 'cc').collect(collectors.grouping_by(len))
    # {1: ['a'], 2: ['bb', 'cc']}
"""
from __future__ import annotations

from .comparator import Comparator, as_compare_function
from .exceptions import IllegalStateException, NullPointerException
from .optional import Optional as Maybe
from .types import *


def _require_function(value: Any, name: str) -> None:
    if not callable(value):
        raise NullPointerException(f"{name} must be a function")


class Collector(Generic[T, A, R]):
    """a mutable reduction: supplier, accumulator and an optional finisher"""

    def __init__(self, supplier: Supplier[A], accumulator: Callable[[A, T], Any],
                 finisher: Optional[Callable[[A], R]] = None):
        _require_function(supplier, 'supplier')
        _require_function(accumulator, 'accumulator')
        if finisher is not None:
            _require_function(finisher, 'finisher')
        self.supplier = supplier
        self.accumulator = accumulator
        self.finisher = finisher

    def finish(self, container: A) -> R:
        return self.finisher(container) if self.finisher is not None else container

    def __repr__(self) -> str:
        return f"Collector(supplier={self.supplier!r}, finisher={self.finisher!r})"


# --- containers ---

def to_list() -> Collector[T, List[T], List[T]]:
    return Collector(list, lambda acc, item: acc.append(item))


def to_set() -> Collector[T, Set[T], Set[T]]:
    return Collector(set, lambda acc, item: acc.add(item))


def to_dict(key_mapper: Mapper[T, K], value_mapper: Optional[Mapper[T, V]] = None,
            merge: Optional[BinaryOperator[V]] = None) -> Collector[T, Dict[K, V], Dict[K, V]]:
    """
    a dict of key_mapper(item) -> value_mapper(item).
    a repeated key is resolved with merge(old, new), or raises IllegalStateException without one.
    """
    _require_function(key_mapper, 'key_mapper')
    val_sel = value_mapper if value_mapper is not None else lambda item: item
    _require_function(val_sel, 'value_mapper')

    def accumulate(acc: Dict[K, V], item: T) -> None:
        key, value = key_mapper(item), val_sel(item)
        if key in acc:
            if merge is None:
                raise IllegalStateException(f"duplicate key {key!r} (attempted merging values {acc[key]!r} and {value!r})")
            value = merge(acc[key], value)
        acc[key] = value

    return Collector(dict, accumulate)


# --- reductions ---

def joining(separator: str = '', prefix: str = '', suffix: str = '') -> Collector[Any, List[str], str]:
    """concatenate the str() of every element"""
    return Collector(list, lambda acc, item: acc.append(str(item)),
                     lambda acc: f"{prefix}{separator.join(acc)}{suffix}")


def counting() -> Collector[Any, List[int], int]:
    def accumulate(acc: List[int], _: Any) -> None:
        acc[0] += 1

    return Collector(lambda: [0], accumulate, lambda acc: acc[0])


def summing(mapper: Mapper[T, Union[int, float]]) -> Collector[T, List[Union[int, float]], Union[int, float]]:
    _require_function(mapper, 'mapper')

    def accumulate(acc: List[Union[int, float]], item: T) -> None:
        acc[0] += mapper(item)

    return Collector(lambda: [0], accumulate, lambda acc: acc[0])


def averaging(mapper: Mapper[T, Union[int, float]]) -> Collector[T, List[Union[int, float]], float]:
    """arithmetic mean of mapper(item), 0.0 for no elements"""
    _require_function(mapper, 'mapper')

    def accumulate(acc: List[Union[int, float]], item: T) -> None:
        acc[0] += mapper(item)
        acc[1] += 1

    return Collector(lambda: [0, 0], accumulate, lambda acc: acc[0] / acc[1] if acc[1] else 0.0)


def reducing(identity: T, op: BinaryOperator[T]) -> Collector[T, List[T], T]:
    _require_function(op, 'op')

    def accumulate(acc: List[T], item: T) -> None:
        acc[0] = op(acc[0], item)

    return Collector(lambda: [identity], accumulate, lambda acc: acc[0])


def _extreme(comparator: Union[Comparator[T], CompareFunction[T]], keep_left: Callable[[Any], bool]) -> Collector[T, list, Maybe[T]]:
    compare = as_compare_function(comparator, 'comparator')

    def accumulate(acc: list, item: T) -> None:
        if not acc:
            acc.append(item)
        elif not keep_left(compare(acc[0], item)):
            acc[0] = item

    return Collector(list, accumulate, lambda acc: Maybe.of(acc[0]) if acc else Maybe.empty())


def min_by(comparator: Union[Comparator[T], CompareFunction[T]]) -> Collector[T, list, Maybe[T]]:
    return _extreme(comparator, lambda result: result <= 0)


def max_by(comparator: Union[Comparator[T], CompareFunction[T]]) -> Collector[T, list, Maybe[T]]:
    return _extreme(comparator, lambda result: result >= 0)


# --- adapters ---

def mapping(mapper: Mapper[T, U], downstream: Collector[U, A, R]) -> Collector[T, A, R]:
    """apply mapper before handing each element to downstream"""
    _require_function(mapper, 'mapper')
    return Collector(downstream.supplier,
                     lambda acc, item: downstream.accumulator(acc, mapper(item)),
                     downstream.finish)


def filtering(predicate: Predicate[T], downstream: Collector[T, A, R]) -> Collector[T, A, R]:
    """hand only the elements matching predicate to downstream"""
    _require_function(predicate, 'predicate')

    def accumulate(acc: A, item: T) -> None:
        if predicate(item):
            downstream.accumulator(acc, item)

    return Collector(downstream.supplier, accumulate, downstream.finish)


# --- grouping ---

def grouping_by(classifier: Mapper[T, K], downstream: Optional[Collector[T, Any, R]] = None) -> Collector[T, Dict[K, Any], Dict[K, R]]:
    """group elements by classifier(item), each group reduced by downstream (a list by default)"""
    _require_function(classifier, 'classifier')
    inner = downstream if downstream is not None else to_list()

    def accumulate(acc: Dict[K, Any], item: T) -> None:
        key = classifier(item)
        if key is None:
            raise NullPointerException("element cannot be mapped to a none key")
        if key not in acc:
            acc[key] = inner.supplier()
        inner.accumulator(acc[key], item)

    return Collector(dict, accumulate, lambda acc: {key: inner.finish(group) for key, group in acc.items()})


def partitioning_by(predicate: Predicate[T], downstream: Optional[Collector[T, Any, R]] = None) -> Collector[T, Dict[bool, Any], Dict[bool, R]]:
    """split elements into {True: ..., False: ...}; both keys are always present"""
    _require_function(predicate, 'predicate')
    inner = downstream if downstream is not None else to_list()

    def accumulate(acc: Dict[bool, Any], item: T) -> None:
        inner.accumulator(acc[bool(predicate(item))], item)

    return Collector(lambda: {True: inner.supplier(), False: inner.supplier()}, accumulate,
                     lambda acc: {key: inner.finish(group) for key, group in acc.items()})
