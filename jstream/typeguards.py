import numbers
from collections.abc import Mapping, Set as AbstractSet
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

import numpy as np

# --- primitive kinds ---

STRING = 'string'
NUMBER = 'number'
BOOLEAN = 'boolean'
DATETIME = 'datetime'
DATE = 'date'


def is_none(value: Any) -> bool:
    return value is None


def is_present(value: Any) -> bool:
    return value is not None


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def is_number(value: Any) -> bool:
    """real numbers, numpy scalars included; booleans are not numbers here"""
    return isinstance(value, (numbers.Real, Decimal)) and not is_boolean(value)


def is_date(value: Any) -> bool:
    return isinstance(value, date)


def is_function(value: Any) -> bool:
    return callable(value)


def is_map(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_set(value: Any) -> bool:
    return isinstance(value, AbstractSet)


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_comparable(value: Any) -> bool:
    """true if the value orders itself through a compare_to method"""
    return value is not None and callable(getattr(value, 'compare_to', None))


def primitive_kind(value: Any) -> Optional[str]:
    """classify a value into one of the primitive kinds, or none"""
    if is_string(value): return STRING
    if is_boolean(value): return BOOLEAN
    if is_number(value): return NUMBER
    # datetime is a subclass of date, so it has to be checked first
    if isinstance(value, datetime): return DATETIME
    if is_date(value): return DATE
    return None


def is_primitive(value: Any) -> bool:
    return value is None or primitive_kind(value) is not None


def is_same_class(value: Any, other: Any) -> bool:
    return type(value) is type(other)


def is_same_type(value: Any, other: Any) -> bool:
    """same class, related comparable classes, or the same primitive kind (e.g. int and float)"""
    if is_same_class(value, other):
        return True
    if is_comparable(value) and is_comparable(other):
        # a comparable subclass still compares against its base
        return isinstance(value, type(other)) or isinstance(other, type(value))
    kind = primitive_kind(value)
    return kind is not None and kind == primitive_kind(other)
