from __future__ import annotations

import typing
from typing import Any, Callable, Generic, Optional as _Maybe

from .equality import is_equal
from .exceptions import NoSuchElementException, NullPointerException
from .typeguards import is_function, is_map, is_none, is_primitive, is_set
from .types import T, U

if typing.TYPE_CHECKING:
    from .stream import Stream


def _require_function(value: Any, name: str) -> None:
    if not is_function(value):
        raise NullPointerException(f"{name} must be a function")


class Optional(Generic[T]):
    """
    a container which may or may not hold a non-none value.
    used as the result of operations that may legitimately produce nothing,
    e.g. Stream.min(), Stream.find_first() or Stream.reduce() without identity.
    """

    __slots__ = ('_value',)

    _EMPTY: 'Optional[Any]'

    def __init__(self, value: _Maybe[T] = None):
        # use Optional.of / Optional.of_nullable / Optional.empty instead
        self._value = value

    # --- factories ---

    @staticmethod
    def empty() -> 'Optional[Any]':
        return Optional._EMPTY

    @staticmethod
    def of(value: T) -> 'Optional[T]':
        """an optional holding value, which must not be none"""
        if is_none(value):
            raise NullPointerException("value must not be none")
        return Optional(value)

    @staticmethod
    def of_nullable(value: _Maybe[T]) -> 'Optional[T]':
        """an optional holding value, or the empty optional when value is none"""
        return Optional.empty() if is_none(value) else Optional(value)

    # --- queries ---

    def is_present(self) -> bool: return self._value is not None

    def is_empty(self) -> bool: return self._value is None

    def get(self) -> T:
        if self._value is None:
            raise NoSuchElementException("no value present")
        return self._value

    # --- transformations ---

    def filter(self, predicate: Callable[[T], bool]) -> 'Optional[T]':
        _require_function(predicate, 'predicate')
        if self.is_empty() or not predicate(self._value):
            return Optional.empty()
        return self

    def map(self, mapper: Callable[[T], U]) -> 'Optional[U]':
        """applies mapper to the value; a none result gives the empty optional"""
        if self.is_empty():
            return Optional.empty()
        _require_function(mapper, 'mapper')
        return Optional.of_nullable(mapper(self._value))

    def flat_map(self, mapper: Callable[[T], 'Optional[U]']) -> 'Optional[U]':
        if self.is_empty():
            return Optional.empty()
        _require_function(mapper, 'mapper')
        result = mapper(self._value)
        if not isinstance(result, Optional):
            raise NullPointerException("mapper must return an Optional")
        return result

    def or_(self, supplier: Callable[[], 'Optional[T]']) -> 'Optional[T]':
        """this optional when a value is present, otherwise the one produced by supplier"""
        if self.is_present():
            return self
        _require_function(supplier, 'supplier')
        result = supplier()
        if not isinstance(result, Optional):
            raise NullPointerException("supplier must return an Optional")
        return result

    # --- consumers ---

    def if_present(self, action: Callable[[T], Any]) -> None:
        if self.is_empty():
            return
        _require_function(action, 'action')
        action(self._value)

    def if_present_or_else(self, action: Callable[[T], Any], empty_action: Callable[[], Any]) -> None:
        if self.is_present():
            _require_function(action, 'action')
            action(self._value)
        else:
            _require_function(empty_action, 'empty_action')
            empty_action()

    # --- fallbacks ---

    def or_else(self, other: T) -> T:
        # only absence is replaced, falsy values such as 0, '' or False are kept
        return other if self._value is None else self._value

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        if self.is_present():
            return self._value
        _require_function(supplier, 'supplier')
        return supplier()

    def or_else_throw(self, exception_supplier: _Maybe[Callable[[], BaseException]] = None) -> T:
        """the value, or raise the supplied exception (NoSuchElementException by default)"""
        if self.is_present():
            return self._value
        if exception_supplier is None:
            raise NoSuchElementException("no value present")
        _require_function(exception_supplier, 'exception_supplier')
        raise exception_supplier()

    # --- conversions ---

    def stream(self) -> 'Stream[T]':
        """a stream of the value, or an empty stream"""
        from .stream import Stream
        return Stream.of(self._value) if self.is_present() else Stream.empty()

    # --- dunder ---

    def equals(self, other: Any) -> bool:
        """equal to another optional when both are empty or both values are structurally equal"""
        if not isinstance(other, Optional):
            return False
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()
        return is_equal(self._value, other._value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # equal optionals must hash alike under structural equality, which
        # ignores the concrete container type
        value = self._value
        if is_primitive(value):
            return hash(value)
        if is_map(value):
            return hash(('map', frozenset(value.keys())))
        if is_set(value):
            return hash(frozenset(value))
        return hash(Optional)

    def __str__(self) -> str:
        return f"Optional[{self._value}]" if self.is_present() else "Optional.empty"

    def __repr__(self) -> str:
        return f"Optional[{self._value!r}]" if self.is_present() else "Optional.empty"


Optional._EMPTY = Optional()
