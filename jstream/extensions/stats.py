from __future__ import annotations
import typing
import numpy as np
from ..exceptions import NullPointerException
from ..optional import Optional as Maybe
from ..typeguards import is_number
from ..types import *

if typing.TYPE_CHECKING:
    from ..stream import Stream


def _native(value: Any) -> Any:
    """unwrap numpy scalars into python numbers"""
    return value.item() if hasattr(value, 'item') else value


class StatsAccessor(Generic[T]):
    """numeric reductions. every method is terminal and consumes the stream"""

    def __init__(self, stream_instance: 'Stream[T]'):
        self._stream = stream_instance

    def _get_values(self, mapper: Optional[Mapper[T, Union[int, float]]] = None) -> np.ndarray:
        """helper to extract numeric values for statistical operations."""
        if mapper is not None and not callable(mapper):
            raise NullPointerException("mapper must be a function")
        data = self._stream._drain()
        values = [mapper(x) for x in data] if mapper else data
        if not all(is_number(x) for x in values):
            raise TypeError("sequence contains non-numeric types for statistical operation.")
        return np.asarray(values)

    def sum(self, mapper: Optional[Mapper[T, Union[int, float]]] = None) -> Union[int, float]:
        """calc sum, zero for an empty stream"""
        values = self._get_values(mapper)
        if values.size == 0: return 0
        return _native(np.sum(values))

    def average(self, mapper: Optional[Mapper[T, Union[int, float]]] = None) -> Maybe[float]:
        """calc arithmetic mean, empty for an empty stream"""
        values = self._get_values(mapper)
        if values.size == 0: return Maybe.empty()
        return Maybe.of(float(np.mean(values)))

    def summary(self, mapper: Optional[Mapper[T, Union[int, float]]] = None) -> SummaryStatistics:
        """count, sum, min, max and average of the drained stream"""
        values = self._get_values(mapper)
        if values.size == 0:
            return SummaryStatistics(0, 0, None, None, 0.0)
        return SummaryStatistics(
            count=int(values.size),
            total=_native(np.sum(values)),
            minimum=_native(np.min(values)),
            maximum=_native(np.max(values)),
            average=float(np.mean(values)),
        )
