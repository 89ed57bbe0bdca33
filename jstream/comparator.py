from __future__ import annotations

import locale
from datetime import timedelta
from functools import cmp_to_key

from .exceptions import IncomparableError, NullPointerException, TypeMismatchError
from .typeguards import (
    BOOLEAN, DATE, DATETIME, NUMBER, STRING,
    is_comparable, is_none, is_present, is_same_type, is_string, primitive_kind
)
from .types import *

_ONE_MILLISECOND = timedelta(milliseconds=1)


class Comparator(Generic[T]):
    """
    an immutable total-order function over values of type T.

    compare(a, b) is negative when a sorts before b, zero when they are
    equivalent and positive when a sorts after b. every combinator returns a
    new comparator and leaves its operands untouched.

    comparators are not sort keys themselves, hand the key to the sort:
        sorted(people, key=comparing(lambda p: p.name).key)
        people.sort(key=cmp_to_key(cmp.compare))
    """

    __slots__ = ('_compare',)

    def __init__(self, compare: CompareFunction[T]):
        if not callable(compare):
            raise NullPointerException("compare must be a function")
        object.__setattr__(self, '_compare', compare)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"comparator is immutable, cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"comparator is immutable, cannot delete '{name}'")

    def compare(self, a: T, b: T) -> Union[int, float]:
        return self._compare(a, b)

    def __call__(self, a: T, b: T) -> Union[int, float]:
        return self._compare(a, b)

    @property
    def key(self) -> Callable[[T], Any]:
        """a key function for sorted(), list.sort(), min() and max()"""
        return cmp_to_key(self._compare)

    def reversed(self) -> 'Comparator[T]':
        """the same ordering with the operands swapped"""
        compare = self._compare
        return Comparator(lambda a, b: compare(b, a))

    def then_comparing(self, key_extractor_or_comparator: Union['Comparator[T]', KeyExtractor[T, Any]],
                       key_comparator: Optional[Union['Comparator[Any]', CompareFunction[Any]]] = None) -> 'Comparator[T]':
        """
        falls through to another ordering when this one reports a tie.
        accepts either a comparator, or a key extractor with an optional
        comparator for the extracted keys (natural order by default).
        """
        if isinstance(key_extractor_or_comparator, Comparator):
            if key_comparator is not None:
                raise TypeError("key_comparator only applies when a key extractor is given")
            tie_breaker = key_extractor_or_comparator
        else:
            tie_breaker = comparing(key_extractor_or_comparator, key_comparator)

        first, second = self._compare, tie_breaker._compare

        def chained(a: T, b: T) -> Union[int, float]:
            result = first(a, b)
            if result != 0:
                return result
            return second(a, b)

        return Comparator(chained)

    def __repr__(self) -> str:
        return f"Comparator({getattr(self._compare, '__qualname__', self._compare)!r})"

    # --- factories ---

    @staticmethod
    def natural_order() -> 'Comparator[Any]':
        return natural_order()

    @staticmethod
    def reverse_order() -> 'Comparator[Any]':
        return reverse_order()

    @staticmethod
    def comparing(key_extractor: KeyExtractor[T, Any],
                  key_comparator: Optional[Union['Comparator[Any]', CompareFunction[Any]]] = None) -> 'Comparator[T]':
        return comparing(key_extractor, key_comparator)

    @staticmethod
    def null_first(comparator: 'Comparator[T]') -> 'Comparator[Optional[T]]':
        return null_first(comparator)

    @staticmethod
    def null_last(comparator: 'Comparator[T]') -> 'Comparator[Optional[T]]':
        return null_last(comparator)


def as_compare_function(comparator: Union[Comparator[Any], CompareFunction[Any]], name: str) -> CompareFunction[Any]:
    if isinstance(comparator, Comparator):
        return comparator.compare
    if not callable(comparator):
        raise NullPointerException(f"{name} must be a comparator or a function")
    return comparator


def _natural_compare(a: Any, b: Any) -> Union[int, float]:
    if is_none(a) or is_none(b):
        raise NullPointerException("cannot compare none in natural order")

    if not is_same_type(a, b) or not is_same_type(b, a):
        raise TypeMismatchError(
            f"cannot compare objects of different types: {type(a).__name__} and {type(b).__name__}")

    kind = primitive_kind(a)
    if kind == STRING:
        collated = locale.strcoll(a, b)
        return (collated > 0) - (collated < 0)
    if kind == NUMBER:
        # sign only, fixed-width numpy integers overflow when subtracted
        return int(a > b) - int(a < b)
    if kind == BOOLEAN:
        # true sorts before false
        return int(b) - int(a)
    if kind in (DATETIME, DATE):
        try:
            return (a - b) / _ONE_MILLISECOND
        except TypeError as e:
            # naive vs aware datetimes
            raise TypeMismatchError(f"cannot compare {a!r} and {b!r}: {e}") from e
    if is_comparable(a) and is_comparable(b):
        return a.compare_to(b)

    raise IncomparableError(f"objects of type {type(a).__name__} must be comparable by natural order")


_NATURAL_ORDER = Comparator(_natural_compare)
_REVERSE_ORDER = _NATURAL_ORDER.reversed()


def natural_order() -> Comparator[Any]:
    """strings, numbers, booleans, dates and anything with a compare_to method"""
    return _NATURAL_ORDER


def reverse_order() -> Comparator[Any]:
    return _REVERSE_ORDER


def comparing(key_extractor: KeyExtractor[T, Any],
              key_comparator: Optional[Union[Comparator[Any], CompareFunction[Any]]] = None) -> Comparator[T]:
    """compares the keys extracted from both operands, in natural order unless key_comparator is given"""
    if not callable(key_extractor):
        raise NullPointerException("key_extractor must be a function")
    compare_keys = as_compare_function(key_comparator, 'key_comparator') if key_comparator is not None \
        else _natural_compare
    return Comparator(lambda a, b: compare_keys(key_extractor(a), key_extractor(b)))


def null_first(comparator: Union[Comparator[T], CompareFunction[T]]) -> Comparator[Optional[T]]:
    """none sorts before every other value, two nones are equal"""
    if comparator is None:
        raise NullPointerException("comparator must not be none")
    compare = as_compare_function(comparator, 'comparator')

    def nulls_first(a: Optional[T], b: Optional[T]) -> Union[int, float]:
        if is_present(a) and is_present(b): return compare(a, b)
        if is_none(a) and is_none(b): return 0
        return -1 if is_none(a) else 1

    return Comparator(nulls_first)


def null_last(comparator: Union[Comparator[T], CompareFunction[T]]) -> Comparator[Optional[T]]:
    """none sorts after every other value, two nones are equal"""
    if comparator is None:
        raise NullPointerException("comparator must not be none")
    compare = as_compare_function(comparator, 'comparator')

    def nulls_last(a: Optional[T], b: Optional[T]) -> Union[int, float]:
        if is_present(a) and is_present(b): return compare(a, b)
        if is_none(a) and is_none(b): return 0
        return 1 if is_none(a) else -1

    return Comparator(nulls_last)


def _case_insensitive_compare(a: str, b: str) -> int:
    if is_none(a) or is_none(b):
        raise NullPointerException("cannot compare none strings")
    if not is_string(a) or not is_string(b):
        raise TypeMismatchError("both arguments must be a string")

    folded_a, folded_b = a.casefold(), b.casefold()
    if folded_a == folded_b: return 0
    return -1 if folded_a < folded_b else 1


# orders strings lexicographically ignoring case. not locale sensitive,
# use natural_order() for collation under the current LC_COLLATE.
CASE_INSENSITIVE_ORDER: Comparator[str] = Comparator(_case_insensitive_compare)
