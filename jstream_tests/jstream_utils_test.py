import suite
import numpy as np
from datetime import date, datetime
from decimal import Decimal
from jstream import (
    is_equal, Comparable, JStreamError, NullPointerException, NoSuchElementException,
    TypeMismatchError, IncomparableError, IllegalStateException
)
from jstream import typeguards as tg

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class Tagged:
    def __init__(self, tag):
        self.tag = tag

    def __eq__(self, other):
        return isinstance(other, Tagged) and self.tag.lower() == other.tag.lower()

    __hash__ = None


class Version:
    def __init__(self, n):
        self.n = n

    def compare_to(self, other):
        return self.n - other.n


# is_equal tests

@test("is_equal on primitives and dates")
def test_equal_primitives():
    assert_that(is_equal(1, 1) and is_equal('a', 'a'), "same primitives")
    assert_that(is_equal(1, 1.0), "numbers compare by value")
    assert_that(not is_equal('1', 1), "string and number differ")
    assert_that(is_equal(date(2024, 1, 2), date(2024, 1, 2)), "equal dates")
    assert_that(not is_equal(date(2024, 1, 2), datetime(2024, 1, 2)), "date and datetime differ")
    assert_that(is_equal(None, None) and not is_equal(None, 0), "none only equals none")


@test("is_equal on nested containers")
def test_equal_containers():
    assert_that(is_equal({'a': [1, {'b': 2}]}, {'a': [1, {'b': 2}]}), "nested structures")
    assert_that(is_equal({'a': 1, 'b': 2}, {'b': 2, 'a': 1}), "key order is ignored")
    assert_that(not is_equal({'a': 1}, {'a': 1, 'b': 2}), "different keys")
    assert_that(not is_equal([1, 2], (1, 2)), "list and tuple differ")
    assert_that(not is_equal([1, 2], [1, 2, 3]), "different lengths")
    assert_that(is_equal({1, 2}, {2, 1}), "sets compare by membership")


@test("is_equal on plain objects and custom equality")
def test_equal_objects():
    assert_that(is_equal(Point(1, [2]), Point(1, [2])), "attributes compared recursively")
    assert_that(not is_equal(Point(1, 2), Point(1, 3)), "different attributes")
    assert_that(is_equal(Tagged('A'), Tagged('a')), "a custom __eq__ is respected")


@test("is_equal on functions")
def test_equal_functions():
    def make(n):
        return lambda x: x + n

    assert_that(is_equal(len, len), "identical functions")
    assert_that(is_equal(make(1), make(1)), "same code and closure")
    assert_that(not is_equal(make(1), make(2)), "different closure values")


@test("is_equal survives self-referencing structures")
def test_equal_cycles():
    a, b = [1], [1]
    a.append(a)
    b.append(b)
    assert_that(is_equal(a, b), "cyclic lists")
    d1, d2 = {'k': 1}, {'k': 1}
    d1['self'] = d1
    d2['self'] = d2
    assert_that(is_equal(d1, d2), "cyclic dicts")


# type guard tests

@test("primitive guards")
def test_primitive_guards():
    assert_that(tg.is_string('x') and not tg.is_string(1), "is_string")
    assert_that(tg.is_number(1) and tg.is_number(1.5) and tg.is_number(Decimal('2')), "is_number")
    assert_that(not tg.is_number(True), "booleans are not numbers")
    assert_that(tg.is_number(np.int32(3)) and tg.is_boolean(np.bool_(True)), "numpy scalars")
    assert_that(tg.is_date(date.today()) and tg.is_date(datetime.now()), "is_date")
    assert_that(tg.is_none(None) and tg.is_present(0), "none checks")


@test("primitive_kind separates datetimes from dates")
def test_primitive_kind():
    assert_that(tg.primitive_kind(datetime(2020, 1, 1)) == tg.DATETIME, "datetime kind")
    assert_that(tg.primitive_kind(date(2020, 1, 1)) == tg.DATE, "date kind")
    assert_that(tg.primitive_kind(False) == tg.BOOLEAN, "boolean kind")
    assert_that(tg.primitive_kind([]) is None, "lists have no primitive kind")
    assert_that(tg.is_primitive(None) and not tg.is_primitive({}), "is_primitive")


@test("container and callable guards")
def test_container_guards():
    assert_that(tg.is_map({}) and not tg.is_map([]), "is_map")
    assert_that(tg.is_set(frozenset()) and tg.is_set(set()), "is_set")
    assert_that(tg.is_sequence([]) and tg.is_sequence(()) and not tg.is_sequence('ab'), "is_sequence")
    assert_that(tg.is_function(len) and not tg.is_function(3), "is_function")


@test("same type checks")
def test_same_type():
    assert_that(tg.is_same_type(1, 2.5), "int and float share the number kind")
    assert_that(not tg.is_same_type(1, '1'), "number and string differ")
    assert_that(tg.is_same_class(Point(0, 0), Point(1, 1)), "same class")
    assert_that(not tg.is_same_type(Point(0, 0), Version(0)), "different plain classes")


class PatchVersion(Version):
    pass


@test("related comparable classes count as the same type")
def test_same_type_comparable_subclass():
    assert_that(tg.is_same_type(PatchVersion(1), Version(1)), "subclass vs base")
    assert_that(tg.is_same_type(Version(1), PatchVersion(1)), "base vs subclass")
    assert_that(tg.is_same_type(Decimal('1'), 1.0), "decimal and float share the number kind")


@test("comparable detection")
def test_comparable():
    assert_that(tg.is_comparable(Version(1)), "compare_to method")
    assert_that(not tg.is_comparable(Point(1, 2)), "no compare_to method")
    assert_that(isinstance(Version(1), Comparable), "runtime protocol check")


# exception hierarchy tests

@test("errors share a base class and a builtin counterpart")
def test_exception_hierarchy():
    for error_type in (NullPointerException, NoSuchElementException, TypeMismatchError,
                       IncomparableError, IllegalStateException):
        assert_that(issubclass(error_type, JStreamError), f"{error_type.__name__} should be a JStreamError")
    assert_that(issubclass(NullPointerException, ValueError), "null pointer is a value error")
    assert_that(issubclass(NoSuchElementException, LookupError), "no such element is a lookup error")
    assert_that(issubclass(TypeMismatchError, TypeError), "type mismatch is a type error")
    assert_that(issubclass(IncomparableError, TypeError), "incomparable is a type error")
    assert_that(issubclass(IllegalStateException, RuntimeError), "illegal state is a runtime error")


if __name__ == "__main__":
    suite.main(title="jstream utilities test suite")
