from __future__ import annotations

import logging

from .exceptions import IllegalStateException, NullPointerException
from .sources import (
    ConcatSource, EmptySource, GenerateSource, IterateSource, IteratorSource, PullSource
)
from .types import *

# --- operations ---
from .extensions.intermediate import _IntermediateOperations
from .extensions.terminal import _TerminalOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor
from .extensions.stats import StatsAccessor

logger = logging.getLogger(__name__)


# --- base stream implementation ---

class _BaseStream(Generic[T]):
    def __init__(self, source: PullSource[T], close_handlers: Optional[List[Callable[[], Any]]] = None,
                 ordered: bool = True):
        """init with the pull source this stream exclusively owns"""
        self._source = source
        # shared by every stage of one pipeline
        self._close_handlers = close_handlers if close_handlers is not None else []
        self._ordered = ordered
        self._linked = False

    def _link(self) -> PullSource[T]:
        """hand the source to the next stage or terminal operation, at most once"""
        if self._linked:
            raise IllegalStateException("stream has already been operated upon or closed")
        self._linked = True
        return self._source

    def _chain(self, stage: Callable[[PullSource[T]], PullSource[U]], ordered: Optional[bool] = None) -> 'Stream[U]':
        """wrap the source in a new lazy stage and return the stream owning it"""
        return Stream(stage(self._link()), self._close_handlers,
                      self._ordered if ordered is None else ordered)

    # --- base stream contract ---

    def is_parallel(self) -> bool:
        return False

    def is_ordered(self) -> bool:
        return self._ordered

    def sequential(self) -> 'Stream[T]':
        """streams are always sequential"""
        return self

    def parallel(self) -> 'Stream[T]':
        raise NotImplementedError("parallel streams are not supported")

    def unordered(self) -> 'Stream[T]':
        """drops the encounter order guarantee"""
        return self._chain(lambda source: source, ordered=False)

    def on_close(self, close_handler: Callable[[], Any]) -> 'Stream[T]':
        """registers a handler run by close(); handlers run in registration order"""
        if not callable(close_handler):
            raise NullPointerException("close_handler must be a function")
        if self._linked:
            raise IllegalStateException("stream has already been operated upon or closed")
        self._close_handlers.append(close_handler)
        return self

    def close(self) -> None:
        """
        runs the close handlers of the pipeline once. every handler runs even if
        an earlier one fails; the first failure is raised afterwards.
        """
        self._linked = True
        handlers = list(self._close_handlers)
        self._close_handlers.clear()
        logger.debug(f"closing stream, running {len(handlers)} close handler(s)")

        first_error: Optional[Exception] = None
        for handler in handlers:
            try:
                handler()
            except Exception as e:
                if first_error is None:
                    first_error = e
                else:
                    logger.warning(f"close handler failed after an earlier failure: {e}", exc_info=True)
        if first_error is not None:
            raise first_error

    def __enter__(self) -> 'Stream[T]':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self.close()
        return False


# --- main stream class ---

class Stream(
    _BaseStream[T],
    _IntermediateOperations[T],
    _TerminalOperations[T]
):
    """a lazy, single-use sequence inspired by java.util.stream.Stream"""

    def __init__(self, source: PullSource[T], close_handlers: Optional[List[Callable[[], Any]]] = None,
                 ordered: bool = True):
        super().__init__(source, close_handlers, ordered)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
        self.stats = StatsAccessor(self)

    def __repr__(self) -> str:
        state = 'consumed' if self._linked else 'pending'
        return f"Stream({type(self._source).__name__}, {state})"

    # --- factories ---

    @staticmethod
    def of(*elements: T) -> 'Stream[T]':
        """
        a stream of the given elements. a single list argument is one element,
        it is not unpacked; use of_array for that.
        """
        return Stream(IteratorSource(elements))

    @staticmethod
    def of_array(elements: Iterable[T]) -> 'Stream[T]':
        """a stream of the elements of an iterable"""
        if elements is None:
            raise NullPointerException("elements must not be none")
        return Stream(IteratorSource(elements))

    @staticmethod
    def of_nullable(element: Optional[T]) -> 'Stream[T]':
        """a stream of one element, or an empty stream when element is none"""
        return Stream.empty() if element is None else Stream.of(element)

    @staticmethod
    def empty() -> 'Stream[Any]':
        return Stream(EmptySource())

    @staticmethod
    def concat(first: 'Stream[T]', second: 'Stream[T]') -> 'Stream[T]':
        """all elements of first followed by all elements of second; closing it closes both"""
        if not isinstance(first, Stream) or not isinstance(second, Stream):
            raise NullPointerException("concat requires two streams")
        source = ConcatSource(first._link(), second._link())
        return Stream(source, [first.close, second.close], first._ordered and second._ordered)

    @staticmethod
    def generate(supplier: Supplier[T]) -> 'Stream[T]':
        """an endless, unordered stream of supplier() results"""
        if not callable(supplier):
            raise NullPointerException("supplier must be a function")
        return Stream(GenerateSource(supplier), ordered=False)

    @staticmethod
    def iterate(seed: T, has_next_or_next: Callable[[T], Any],
                next_fn: Optional[UnaryOperator[T]] = None) -> 'Stream[T]':
        """
        iterate(seed, next_fn): seed, next_fn(seed), ... without end.
        iterate(seed, has_next, next_fn): the same, stopping at the first element failing has_next.
        """
        if next_fn is None:
            has_next, next_fn = None, has_next_or_next
        else:
            has_next = has_next_or_next
            if not callable(has_next):
                raise NullPointerException("has_next must be a function")
        if not callable(next_fn):
            raise NullPointerException("next_fn must be a function")
        return Stream(IterateSource(seed, next_fn, has_next))
