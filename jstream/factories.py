import typing
from .types import *

if typing.TYPE_CHECKING:
    from .stream import Stream


def of(*elements: T) -> 'Stream[T]':
    """create a stream of the given elements, a single list stays one element"""
    from .stream import Stream
    return Stream.of(*elements)


def of_array(elements: Iterable[T]) -> 'Stream[T]':
    """create a stream from the elements of an iterable"""
    from .stream import Stream
    return Stream.of_array(elements)


def of_nullable(element: Optional[T]) -> 'Stream[T]':
    """create a stream of one element, or an empty one for none"""
    from .stream import Stream
    return Stream.of_nullable(element)


def empty() -> 'Stream[Any]':
    """create empty stream"""
    from .stream import Stream
    return Stream.empty()


def concat(first: 'Stream[T]', second: 'Stream[T]') -> 'Stream[T]':
    """lazily chain two streams"""
    from .stream import Stream
    return Stream.concat(first, second)


def generate(supplier: Supplier[T]) -> 'Stream[T]':
    """endless stream of supplier() results, bound it with limit() or take_while()"""
    from .stream import Stream
    return Stream.generate(supplier)


def iterate(seed: T, has_next_or_next: Callable[[T], Any],
            next_fn: Optional[UnaryOperator[T]] = None) -> 'Stream[T]':
    """seed, next_fn(seed), ... optionally stopping at the first element failing has_next"""
    from .stream import Stream
    return Stream.iterate(seed, has_next_or_next, next_fn)


def from_range(start: int, count: int) -> 'Stream[int]':
    """create stream of count consecutive integers starting at start"""
    from .stream import Stream
    return Stream.of_array(range(start, start + count))


# --- aliases ---
stream = of_array
S = of_array
