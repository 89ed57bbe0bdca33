"""
pull sources: the lazy building blocks of a stream pipeline.

a source produces one element per try_pull() call as a (has_value, value)
pair and reports (False, None) once exhausted, forever after. every stage
wraps its upstream and pulls from it only when it is itself pulled, so
building a pipeline never touches an element.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import cmp_to_key

from .types import *

logger = logging.getLogger(__name__)

Step = Tuple[bool, Any]

_DONE: Step = (False, None)


class PullSource(ABC, Generic[T]):
    """base class for every pipeline stage"""

    def __init__(self):
        self._exhausted = False

    @abstractmethod
    def _advance(self) -> Step:
        """produce the next (True, value) pair, or (False, None) when there is nothing left"""
        pass

    def try_pull(self) -> Step:
        if self._exhausted:
            return _DONE
        step = self._advance()
        if not step[0]:
            self._exhausted = True
        return step

    @property
    def exhausted(self) -> bool: return self._exhausted

    def __iter__(self) -> Iterator[T]:
        while True:
            has_value, value = self.try_pull()
            if not has_value:
                return
            yield value


# --- leaf sources ---

class IteratorSource(PullSource[T]):
    """pulls from a python iterable, which is only iterated on the first pull"""

    def __init__(self, iterable: Iterable[T]):
        super().__init__()
        self._iterable = iterable
        self._iterator: Optional[Iterator[T]] = None

    def _advance(self) -> Step:
        if self._iterator is None:
            self._iterator = iter(self._iterable)
        for value in self._iterator:
            return True, value
        return _DONE


class EmptySource(PullSource[Any]):
    def _advance(self) -> Step:
        return _DONE


class GenerateSource(PullSource[T]):
    """an endless source calling supplier once per pull"""

    def __init__(self, supplier: Supplier[T]):
        super().__init__()
        self._supplier = supplier

    def _advance(self) -> Step:
        return True, self._supplier()


class IterateSource(PullSource[T]):
    """seed, next_fn(seed), next_fn(next_fn(seed)), ... while has_next holds"""

    def __init__(self, seed: T, next_fn: UnaryOperator[T], has_next: Optional[Predicate[T]] = None):
        super().__init__()
        self._current = seed
        self._next_fn = next_fn
        self._has_next = has_next
        self._started = False

    def _advance(self) -> Step:
        if self._started:
            self._current = self._next_fn(self._current)
        self._started = True
        if self._has_next is not None and not self._has_next(self._current):
            return _DONE
        return True, self._current


class ConcatSource(PullSource[T]):
    """drains first, then second"""

    def __init__(self, first: PullSource[T], second: PullSource[T]):
        super().__init__()
        self._first = first
        self._second = second

    def _advance(self) -> Step:
        step = self._first.try_pull()
        if step[0]:
            return step
        return self._second.try_pull()


# --- stages ---

class _Stage(PullSource[T]):
    def __init__(self, upstream: PullSource[Any]):
        super().__init__()
        self._upstream = upstream


class FilterSource(_Stage[T]):
    def __init__(self, upstream: PullSource[T], predicate: Predicate[T]):
        super().__init__(upstream)
        self._predicate = predicate

    def _advance(self) -> Step:
        while True:
            step = self._upstream.try_pull()
            if not step[0] or self._predicate(step[1]):
                return step


class MapSource(_Stage[U]):
    def __init__(self, upstream: PullSource[T], mapper: Mapper[T, U]):
        super().__init__(upstream)
        self._mapper = mapper

    def _advance(self) -> Step:
        has_value, value = self._upstream.try_pull()
        if not has_value:
            return _DONE
        return True, self._mapper(value)


class PeekSource(_Stage[T]):
    def __init__(self, upstream: PullSource[T], action: Consumer[T]):
        super().__init__(upstream)
        self._action = action

    def _advance(self) -> Step:
        step = self._upstream.try_pull()
        if step[0]:
            self._action(step[1])
        return step


class FlatMapSource(_Stage[U]):
    """mapper returns a pull source per element; each is drained before the next element is pulled"""

    def __init__(self, upstream: PullSource[T], mapper: Callable[[T], PullSource[U]]):
        super().__init__(upstream)
        self._mapper = mapper
        self._current: Optional[PullSource[U]] = None

    def _advance(self) -> Step:
        while True:
            if self._current is not None:
                step = self._current.try_pull()
                if step[0]:
                    return step
                self._current = None
            has_value, value = self._upstream.try_pull()
            if not has_value:
                return _DONE
            self._current = self._mapper(value)


class DistinctSource(_Stage[T]):
    """drops elements equal to one already seen; unhashable elements fall back to a linear scan"""

    def __init__(self, upstream: PullSource[T]):
        super().__init__(upstream)
        self._seen_hashable: Set[Any] = set()
        self._seen_other: List[Any] = []

    def _is_new(self, value: Any) -> bool:
        try:
            if value in self._seen_hashable:
                return False
            self._seen_hashable.add(value)
            return True
        except TypeError:
            if value in self._seen_other:
                return False
            self._seen_other.append(value)
            return True

    def _advance(self) -> Step:
        while True:
            step = self._upstream.try_pull()
            if not step[0] or self._is_new(step[1]):
                return step


class SortedSource(_Stage[T]):
    """buffers the whole upstream on the first pull, then replays it in sorted order"""

    def __init__(self, upstream: PullSource[T], compare: CompareFunction[T]):
        super().__init__(upstream)
        self._compare = compare
        self._buffer: Optional[Iterator[T]] = None

    def _advance(self) -> Step:
        if self._buffer is None:
            items = list(self._upstream)
            logger.debug(f"sorting {len(items)} buffered elements")
            # list.sort is stable, ties keep their encounter order
            items.sort(key=cmp_to_key(self._compare))
            self._buffer = iter(items)
        for value in self._buffer:
            return True, value
        return _DONE


class LimitSource(_Stage[T]):
    def __init__(self, upstream: PullSource[T], max_size: int):
        super().__init__(upstream)
        self._remaining = max_size

    def _advance(self) -> Step:
        if self._remaining <= 0:
            return _DONE
        self._remaining -= 1
        return self._upstream.try_pull()


class SkipSource(_Stage[T]):
    def __init__(self, upstream: PullSource[T], n: int):
        super().__init__(upstream)
        self._to_skip = n

    def _advance(self) -> Step:
        while self._to_skip > 0:
            self._to_skip -= 1
            if not self._upstream.try_pull()[0]:
                return _DONE
        return self._upstream.try_pull()


class TakeWhileSource(_Stage[T]):
    def __init__(self, upstream: PullSource[T], predicate: Predicate[T]):
        super().__init__(upstream)
        self._predicate = predicate

    def _advance(self) -> Step:
        step = self._upstream.try_pull()
        if not step[0] or not self._predicate(step[1]):
            return _DONE
        return step


class DropWhileSource(_Stage[T]):
    def __init__(self, upstream: PullSource[T], predicate: Predicate[T]):
        super().__init__(upstream)
        self._predicate = predicate
        self._dropping = True

    def _advance(self) -> Step:
        while self._dropping:
            step = self._upstream.try_pull()
            if not step[0]:
                return _DONE
            if not self._predicate(step[1]):
                self._dropping = False
                return step
        return self._upstream.try_pull()


class ClosingSource(_Stage[T]):
    """passes upstream through and calls on_exhausted once it runs dry"""

    def __init__(self, upstream: PullSource[T], on_exhausted: Callable[[], Any]):
        super().__init__(upstream)
        self._on_exhausted = on_exhausted

    def _advance(self) -> Step:
        step = self._upstream.try_pull()
        if not step[0]:
            self._on_exhausted()
        return step
