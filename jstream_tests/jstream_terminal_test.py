import suite
import numpy as np
import pandas as pd
from dgen import from_schema
from jstream import (
    Stream, Optional, Collector, collectors, comparing, reverse_order, NullPointerException, IllegalStateException
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

people_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 10_000}),
    'name': 'first_name',
    'age': ('pyint', {'min_value': 18, 'max_value': 90}),
    'city': {'_gen': 'choice', 'from': ['oslo', 'lima', 'pune']},
}


# counting and iteration tests

@test("count, to_array and to_list")
def test_materialize():
    assert_that(Stream.of(1, 2, 3).count() == 3, "count")
    assert_that(Stream.of(1, 2, 3).to_array() == [1, 2, 3], "to_array")
    assert_that(Stream.of('a').to_list() == ['a'], "to_list")


@test("for_each and for_each_ordered visit every element in order")
def test_for_each():
    seen = []
    Stream.of(3, 1, 2).for_each(seen.append)
    Stream.of(4, 5).for_each_ordered(seen.append)
    assert_that(seen == [3, 1, 2, 4, 5], f"unexpected visit order: {seen}")
    assert_raises(NullPointerException, lambda: Stream.of(1).for_each(None), "for_each needs a function")


@test("iterator yields the remaining elements")
def test_iterator():
    it = Stream.of(1, 2).iterator()
    assert_that(next(it) == 1 and next(it) == 2, "elements in order")
    assert_raises(StopIteration, lambda: next(it), "then stops")


# reduce() tests

@test("reduce without identity returns an optional")
def test_reduce_optional():
    result = Stream.of(1, 2, 3, 4).reduce(lambda a, b: a + b)
    assert_that(isinstance(result, Optional), "should return an optional")
    assert_that(result.get() == 10, "sum expected")
    assert_that(Stream.empty().reduce(lambda a, b: a + b).is_empty(), "empty stream gives empty optional")
    assert_that(Stream.of('x').reduce(lambda a, b: a + b).get() == 'x', "a single element is the result")


@test("reduce with identity returns the plain value")
def test_reduce_identity():
    assert_that(Stream.of(1, 2, 3).reduce(lambda a, b: a + b, 10) == 16, "folded from identity")
    assert_that(Stream.empty().reduce(lambda a, b: a + b, 0) == 0, "empty gives identity")
    assert_that(Stream.of('a', 'b').reduce(lambda acc, s: acc + [s], []) == ['a', 'b'], "identity of another type")


# min() / max() tests

@test("min and max use natural order by default")
def test_min_max_default():
    assert_that(Stream.of(3, 1, 2).min().get() == 1, "min")
    assert_that(Stream.of(3, 1, 2).max().get() == 3, "max")
    assert_that(Stream.empty().min().is_empty(), "min of empty")
    assert_that(Stream.of('pear', 'apple').max().get() == 'pear', "max of strings")


@test("min and max accept comparators and keep the first of equal elements")
def test_min_max_comparator():
    items = [{'k': 1, 'tag': 'a'}, {'k': 0, 'tag': 'b'}, {'k': 0, 'tag': 'c'}, {'k': 1, 'tag': 'd'}]
    by_k = comparing(lambda d: d['k'])
    assert_that(Stream.of_array(items).min(by_k).get()['tag'] == 'b', "first minimum wins")
    assert_that(Stream.of_array(items).max(by_k).get()['tag'] == 'a', "first maximum wins")
    assert_that(Stream.of(1, 5, 3).min(reverse_order()).get() == 5, "reversed comparator")


@test("min and max over generated records")
def test_min_max_generated():
    records = from_schema(people_schema, seed=7).records(25)
    youngest = Stream.of_array(records).min(comparing(lambda p: p['age'])).get()
    oldest = Stream.of_array(records).max(comparing(lambda p: p['age'])).get()
    assert_that(youngest['age'] == min(r['age'] for r in records), "youngest age")
    assert_that(oldest['age'] == max(r['age'] for r in records), "oldest age")


# find and match tests

@test("find_first and find_any")
def test_find():
    assert_that(Stream.of(7, 8).find_first().get() == 7, "first element")
    assert_that(Stream.empty().find_first().is_empty(), "empty stream")
    assert_that(Stream.of(7, 8).find_any().get() == 7, "find_any on a sequential stream")


@test("find_first pulls exactly one element")
def test_find_first_short_circuit():
    pulled = []
    result = Stream.iterate(1, lambda x: x + 1).peek(pulled.append).filter(lambda x: x > 3).find_first()
    assert_that(result.get() == 4, "first element above three")
    assert_that(pulled == [1, 2, 3, 4], f"nothing beyond the match should be pulled: {pulled}")


@test("match operations short circuit on infinite streams")
def test_matches():
    assert_that(Stream.iterate(0, lambda x: x + 1).any_match(lambda x: x == 100), "any_match finds the element")
    assert_that(not Stream.iterate(0, lambda x: x + 1).all_match(lambda x: x < 5), "all_match stops on a failure")
    assert_that(not Stream.iterate(0, lambda x: x + 1).none_match(lambda x: x == 3), "none_match stops on a match")


@test("match operations on empty streams")
def test_matches_empty():
    assert_that(not Stream.empty().any_match(lambda x: True), "any_match of empty is false")
    assert_that(Stream.empty().all_match(lambda x: False), "all_match of empty is true")
    assert_that(Stream.empty().none_match(lambda x: True), "none_match of empty is true")


# collect() tests

@test("collect with a supplier and an accumulator")
def test_collect_supplier():
    result = Stream.of(1, 2, 2).collect(set, lambda acc, x: acc.add(x))
    assert_that(result == {1, 2}, f"unexpected container: {result}")


@test("collect with a collector")
def test_collect_collector():
    assert_that(Stream.of(1, 2).collect(collectors.to_list()) == [1, 2], "to_list collector")
    custom = Collector(lambda: [0], lambda acc, x: acc.__setitem__(0, acc[0] + x), lambda acc: acc[0] * 2)
    assert_that(Stream.of(1, 2, 3).collect(custom) == 12, "custom collector with finisher")
    assert_raises(NullPointerException, lambda: Stream.of(1).collect(list), "a bare supplier is not a collector")


@test("terminal operations consume the stream")
def test_terminal_consumes():
    stream = Stream.of(1, 2)
    stream.find_first()
    assert_raises(IllegalStateException, stream.count, "stream consumed by find_first")


# to accessor tests

@test("to converts to python containers")
def test_to_python():
    assert_that(Stream.of(1, 2).to.list() == [1, 2], "list")
    assert_that(Stream.of(1, 2).to.tuple() == (1, 2), "tuple")
    assert_that(Stream.of(1, 1, 2).to.set() == {1, 2}, "set")
    result = Stream.of('a', 'bb').to.dict(lambda s: s, len)
    assert_that(result == {'a': 1, 'bb': 2}, f"dict: {result}")
    assert_that(Stream.of('a').to.dict(str.upper) == {'A': 'a'}, "dict values default to the element")


@test("to converts to numpy and pandas")
def test_to_numpy_pandas():
    arr = Stream.of(1, 2, 3).map(lambda x: x * 2).to.array()
    assert_that(isinstance(arr, np.ndarray), "numpy array expected")
    assert_that(np.array_equal(arr, np.array([2, 4, 6])), "array contents")

    series = Stream.of(1.5, 2.5).to.pandas()
    assert_that(isinstance(series, pd.Series), "pandas series expected")
    assert_that(series.tolist() == [1.5, 2.5], "series contents")


@test("to.df builds a dataframe from generated records")
def test_to_df():
    frame = from_schema(people_schema, seed=3).take(10).filter(lambda p: p['age'] >= 18).to.df()
    assert_that(isinstance(frame, pd.DataFrame), "dataframe expected")
    assert_that(len(frame) == 10, "every record is a row")
    assert_that(list(frame.columns) == ['id', 'name', 'age', 'city'], f"columns: {list(frame.columns)}")
    assert_that(set(frame['city']) <= {'oslo', 'lima', 'pune'}, "choice values respected")


if __name__ == "__main__":
    suite.main(title="jstream terminal operations test suite")
