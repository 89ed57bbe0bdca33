from typing import Any, Optional, Set, Tuple

from .typeguards import is_date, is_function, is_map, is_sequence, is_set


def is_equal(a: Any, b: Any) -> bool:
    """
    recursive structural equality.

    - dates compare by value
    - mappings need the same keys and recursively equal values, key order is ignored
    - sets compare with ==
    - lists and tuples need the same type, length and recursively equal items
    - functions are equal when identical, or when they share code, defaults and closure values
    - plain objects need the same class and recursively equal attributes
    - everything else falls back to ==
    """
    return _is_equal(a, b, set())


def _is_equal(a: Any, b: Any, seen: Set[Tuple[int, int]]) -> bool:
    if a is b:
        return True

    if is_date(a) and is_date(b):
        return type(a) is type(b) and a == b

    if is_function(a) and is_function(b) and hasattr(a, '__code__') and hasattr(b, '__code__'):
        return _functions_equal(a, b)

    if is_set(a) and is_set(b):
        return a == b

    # containers can reference themselves, so track the pairs already on the stack
    pair = (id(a), id(b))
    if pair in seen:
        return True

    if is_map(a) and is_map(b):
        if a.keys() != b.keys():
            return False
        seen.add(pair)
        try:
            return all(_is_equal(a[key], b[key], seen) for key in a)
        finally:
            seen.discard(pair)

    if is_sequence(a) and is_sequence(b):
        if type(a) is not type(b) or len(a) != len(b):
            return False
        seen.add(pair)
        try:
            return all(_is_equal(x, y, seen) for x, y in zip(a, b))
        finally:
            seen.discard(pair)

    attrs_a, attrs_b = _attributes(a), _attributes(b)
    if attrs_a is not None and attrs_b is not None and type(a) is type(b):
        if type(a).__eq__ is not object.__eq__:
            return a == b
        seen.add(pair)
        try:
            return _is_equal(attrs_a, attrs_b, seen)
        finally:
            seen.discard(pair)

    return a == b


def _attributes(value: Any) -> Optional[dict]:
    try:
        return vars(value)
    except TypeError:
        return None


def _functions_equal(a: Any, b: Any) -> bool:
    if a.__code__ is not b.__code__ and a.__code__ != b.__code__:
        return False
    if a.__defaults__ != b.__defaults__:
        return False
    closure_a = tuple(cell.cell_contents for cell in a.__closure__ or ())
    closure_b = tuple(cell.cell_contents for cell in b.__closure__ or ())
    return closure_a == closure_b
