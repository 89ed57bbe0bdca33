from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Protocol, runtime_checkable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
A = TypeVar('A')
R = TypeVar('R')

Predicate = Callable[[T], bool]
Mapper = Callable[[T], U]
KeyExtractor = Callable[[T], K]
Consumer = Callable[[T], Any]
Supplier = Callable[[], T]
UnaryOperator = Callable[[T], T]
BinaryOperator = Callable[[T, T], T]
Accumulator = Callable[[U, T], U]
CompareFunction = Callable[[T, T], Union[int, float]]


@runtime_checkable
class Comparable(Protocol):
    """
    imposes a natural ordering on the objects of a class.
    compare_to returns a negative number, zero, or a positive number as this
    object is less than, equal to, or greater than the other one.
    """

    def compare_to(self, other: Any) -> int: ...


class SummaryStatistics:
    """count, sum, min, max and average of a numeric stream"""

    def __init__(self, count: int, total: float, minimum: Optional[float],
                 maximum: Optional[float], average: float):
        self.count = count
        self.sum = total
        self.min = minimum
        self.max = maximum
        self.average = average

    @property
    def is_empty(self) -> bool: return self.count == 0

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SummaryStatistics):
            return NotImplemented
        return (self.count, self.sum, self.min, self.max, self.average) == \
            (other.count, other.sum, other.min, other.max, other.average)

    def __hash__(self) -> int:
        return hash((self.count, self.sum, self.min, self.max, self.average))

    def __repr__(self) -> str:
        return (f"SummaryStatistics(count={self.count}, sum={self.sum}, min={self.min}, "
                f"max={self.max}, average={self.average})")
