import numpy as np
import pandas as pd
import suite
from seqops import P, empty, range_closed, configure, NullArgumentError
from seqops import config

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

names = ['John', 'Alice', 'Bob', 'Emily']


# --- collection conversions ---

@test("list returns a copy of the evaluated data")
def test_to_list_copy():
    pipeline = P([1, 2, 3])
    first = pipeline.to.list()
    first.append(99)
    assert_that(pipeline.to.list() == [1, 2, 3], "mutating a result should not leak into the pipeline")


@test("set and dict conversions")
def test_set_dict():
    assert_that(P([1, 1, 2]).to.set() == {1, 2}, "set should drop duplicates")
    by_initial = P(names).to.dict(lambda n: n[0], len)
    assert_that(by_initial == {'J': 4, 'A': 5, 'B': 3, 'E': 5}, f"dict failed: {by_initial}")
    identity = P(names).to.dict(str.lower)
    assert_that(identity['bob'] == 'Bob', "value_selector defaults to the item")


@test("numpy and pandas conversions")
def test_array_and_pandas():
    arr = range_closed(1, 5).to.array()
    assert_that(isinstance(arr, np.ndarray) and arr.tolist() == [1, 2, 3, 4, 5], "array failed")

    series = P(names).to.pandas()
    assert_that(isinstance(series, pd.Series) and series.tolist() == names, "series failed")

    frame = P([{'city': 'Goa', 'pop': 1}, {'city': 'Pune', 'pop': 2}]).to.df()
    assert_that(isinstance(frame, pd.DataFrame) and list(frame.columns) == ['city', 'pop'], "dataframe failed")
    assert_that(frame['pop'].sum() == 3, "dataframe should hold the values")


# --- predicates and counting ---

@test("count with and without predicate")
def test_count():
    assert_that(P(names).to.count() == 4, "should count all")
    assert_that(P(names).to.count(lambda n: len(n) > 3) == 3, "should count matches")
    assert_that(len(P(names)) == 4, "len() should count too")
    assert_that(empty().to.count() == 0, "empty count is 0")


@test("any, all and none")
def test_any_all_none():
    assert_that(P(names).to.any(), "non-empty has any")
    assert_that(not empty().to.any(), "empty has none")
    assert_that(P(names).to.all(lambda n: n[0].isupper()), "all names are capitalised")
    assert_that(P(names).to.none(lambda n: n == 'Zed'), "no Zed")
    assert_that(not P(names).to.none(lambda n: n == 'Bob'), "there is a Bob")


@test("first and find_first return optionals")
def test_first():
    assert_that(P(names).to.first().get() == 'John', "first element")
    assert_that(P(names).to.first(lambda n: n.startswith('E')).get() == 'Emily', "first match")
    assert_that(P(names).to.find_first(lambda n: n == 'Zed').is_empty(), "no match is absent")
    assert_that(empty().to.first().is_empty(), "empty first is absent")


# --- reduction ---

@test("reduce folds left to right")
def test_reduce():
    assert_that(empty().to.reduce(lambda a, b: a + b).is_empty(), "reduce of empty is absent")
    assert_that(P([42]).to.reduce(lambda a, b: a + b).get() == 42, "single element is returned as-is")
    assert_that(P([3, 2, 2, 3, 7, 3, 5]).to.reduce(lambda a, b: a + b).get() == 25, "sum by reduce")
    order = P(['a', 'b', 'c']).to.reduce(lambda acc, x: f"({acc}{x})").get()
    assert_that(order == "((ab)c)", f"reduce should be a left fold: {order}")


@test("reduce rejects a None result")
def test_reduce_none_result():
    assert_raises(NullArgumentError, lambda: P([1, 2]).to.reduce(lambda a, b: None))


@test("fold always returns a plain value")
def test_fold():
    assert_that(empty().to.fold(0, lambda a, b: a + b) == 0, "fold of empty returns the seed")
    assert_that(P([1, 2, 3]).to.fold(10, lambda a, b: a + b) == 16, "fold adds to the seed")
    assert_that(P(['a', 'b']).to.fold([], lambda acc, x: acc + [x.upper()]) == ['A', 'B'],
                "seed may have a different type than the elements")


# --- joining ---

@test("join uses the default delimiter")
def test_join_default():
    assert_that(P(["Hello", "World", "!"]).to.join() == "Hello, World, !", "default delimiter is ', '")


@test("join with delimiter, prefix and suffix")
def test_join_options():
    assert_that(P(names).to.join("|", "[", "]") == "[John|Alice|Bob|Emily]", "prefix and suffix wrap")
    assert_that(empty().to.join("-", "<", ">") == "<>", "empty gives prefix + suffix")
    assert_that(P([1, 2, 3]).to.join("+") == "1+2+3", "non-strings are converted")


@test("join and lines follow the configured settings")
def test_join_lines_settings():
    try:
        configure(join_delimiter=" / ", line_terminator="\r\n")
        assert_that(P(['a', 'b']).to.join() == "a / b", "configured delimiter should be used")
        assert_that(P(['a', 'b']).to.lines() == "a\r\nb\r\n", "configured terminator should be used")
    finally:
        config.reset()
    assert_that(P(['random', 'test']).to.lines() == "random\ntest\n", "default terminator is \\n")
    assert_that(empty().to.lines() == "", "no lines for an empty sequence")


# --- side effects ---

@test("for_each runs eagerly and returns the pipeline")
def test_for_each():
    seen = []
    pipeline = P(names)
    returned = pipeline.util.for_each(seen.append)
    assert_that(seen == names, "action should see every element in order")
    assert_that(returned is pipeline, "for_each returns the same enumerable")

    indexed = []
    P(['x', 'y']).util.for_each_indexed(lambda i, item: indexed.append((i, item)))
    assert_that(indexed == [(0, 'x'), (1, 'y')], "indexed action gets (index, item)")


if __name__ == "__main__":
    suite.run(title="seqops terminal operations test suite")
