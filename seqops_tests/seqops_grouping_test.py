import numpy as np
import suite
from datagen import from_schema
from seqops import P, from_range, empty, PartitionResult

# --- setup ---
test = suite.test
assert_that = suite.assert_that

# --- test data & schemas ---
fruits = ["Apple", "Banana", "Cherry", "Date", "Apple", "Banana"]
object_schema = {
    'name': 'word',
    'category': {'_provider': 'choice', 'from': ['a', 'b', 'c']},
    'is_active': {'_provider': 'choice', 'from': [True, False]},
}


# --- group_by ---

@test("group_by buckets fruits by length")
def test_group_by_length():
    grouped = P(fruits).group.group_by(len)
    assert_that(grouped == {5: ["Apple", "Apple"], 6: ["Banana", "Cherry", "Banana"], 4: ["Date"]},
                f"unexpected grouping: {grouped}")
    assert_that(list(grouped.keys()) == [5, 6, 4], "keys should follow first occurrence")


@test("group_by correctly groups generated records")
def test_group_by_core():
    data = from_schema(object_schema, seed=42).take(50)
    grouped = data.group.group_by(lambda x: x['category'])

    assert_that(isinstance(grouped, dict), "group_by should return a dictionary")
    assert_that(sum(len(items) for items in grouped.values()) == 50, "every record lands in one bucket")
    for cat, items in grouped.items():
        assert_that(all(item['category'] == cat for item in items),
                    f"all items in group '{cat}' must have that category")


@test("group_by handles edge cases")
def test_group_by_edges():
    assert_that(empty().group.group_by(lambda x: x) == {}, "group_by on empty enumerable should be an empty dict")

    grouped_single = P(['a', 'b', 'c']).group.group_by(lambda x: 'same_key')
    assert_that(grouped_single == {'same_key': ['a', 'b', 'c']}, "all items should be in the single group")

    grouped_unique = from_range(0, 5).group.group_by(lambda x: x)
    assert_that(len(grouped_unique) == 5 and grouped_unique[3] == [3], "each group should contain one item")


@test("group_by with a downstream reducer")
def test_group_by_downstream():
    by_first_letter = P(fruits).group.group_by(lambda f: f[0], downstream=lambda items: sorted(set(items)))
    assert_that(by_first_letter == {'A': ['Apple'], 'B': ['Banana'], 'C': ['Cherry'], 'D': ['Date']},
                f"downstream should reduce each bucket: {by_first_letter}")


@test("counting_by counts occurrences of each fruit")
def test_counting_by():
    counts = P(fruits).group.counting_by(lambda fruit: fruit)
    assert_that(counts == {"Apple": 2, "Banana": 2, "Cherry": 1, "Date": 1}, f"wrong counts: {counts}")


@test("mapping projects then collects")
def test_mapping():
    assert_that(P(fruits).group.mapping(len) == [5, 6, 6, 4, 5, 6], "should collect lengths in order")
    assert_that(P(fruits).group.mapping(len, downstream=set) == {4, 5, 6}, "downstream should receive the list")


# --- partition ---

@test("partition splits fruits by even length")
def test_partition_fruits():
    result = P(fruits).group.partition(lambda fruit: len(fruit) % 2 == 0)
    assert_that(isinstance(result, PartitionResult), "should return a PartitionResult")
    assert_that(result[True] == ["Banana", "Cherry", "Date", "Banana"], f"even bucket wrong: {result}")
    assert_that(result[False] == ["Apple", "Apple"], f"odd bucket wrong: {result}")


@test("partition result unpacks and keeps both buckets")
def test_partition_unpack():
    evens, odds = from_range(0, 10).group.partition(lambda x: x % 2 == 0)
    assert_that(evens == [0, 2, 4, 6, 8] and odds == [1, 3, 5, 7, 9], "should unpack as (true, false)")

    nothing = empty().group.partition(lambda x: True)
    assert_that(nothing.matched == [] and nothing.unmatched == [], "both buckets exist even when empty")


@test("partition result indexes with numpy bools")
def test_partition_numpy_keys():
    result = P(fruits).group.partition(lambda fruit: len(fruit) % 2 == 0)
    assert_that(result[np.True_] == result.matched, "np.True_ should select the matched bucket")
    assert_that(result[np.False_] == result.unmatched, "np.False_ should select the unmatched bucket")
    suite.assert_raises(KeyError, lambda: result["yes"])


@test("partition sizes add up to the source size")
def test_partition_sizes():
    data = from_schema(object_schema, seed=5).take(40)
    result = data.group.partition(lambda x: x['is_active'])
    assert_that(len(result.matched) + len(result.unmatched) == 40, "no record should be lost")
    assert_that(all(x['is_active'] for x in result.matched), "true bucket holds active records only")


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="seqops grouping test suite")
