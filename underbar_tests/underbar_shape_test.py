import suite
from underbar import zip, flatten, intersection, difference

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal


# zip() tests

@test("zip pads shorter sequences with None")
def test_zip_padding():
    result = zip(['a', 'b', 'c', 'd'], [1, 2, 3])
    assert_equal(result, [('a', 1), ('b', 2), ('c', 3), ('d', None)], "should pad the tail")


@test("zip is as long as the first sequence")
def test_zip_truncates():
    assert_equal(zip([1, 2], ['a', 'b', 'c'], [True]), [(1, 'a', True), (2, 'b', None)],
                 "longer sequences are cut, shorter are padded")
    assert_equal(zip([], [1, 2]), [], "empty primary gives empty result")


@test("zip with a single sequence wraps each element")
def test_zip_single():
    assert_equal(zip([1, 2]), [(1,), (2,)], "one-element tuples")


# flatten() tests

@test("flatten removes every level of nesting")
def test_flatten_deep():
    assert_equal(flatten([1, [2, [3, [4]], 5]]), [1, 2, 3, 4, 5], "should be flat")


@test("flatten keeps strings and mappings whole")
def test_flatten_atoms():
    assert_equal(flatten(['ab', ('cd', ['ef']), {'k': 1}]), ['ab', 'cd', 'ef', {'k': 1}],
                 "strings and dicts are not expanded")


@test("flatten appends into a supplied accumulator")
def test_flatten_accumulator():
    acc = [0]
    result = flatten([[1], [[2]]], acc)
    assert_that(result is acc, "should return the accumulator")
    assert_equal(acc, [0, 1, 2], "should append after existing items")


@test("flatten handles empty nesting")
def test_flatten_empty():
    assert_equal(flatten([[], [[]], []]), [], "nothing to collect")


# intersection() tests

@test("intersection keeps shared elements in first-sequence order")
def test_intersection_basic():
    assert_equal(intersection([1, 2, 3], [2, 3, 4]), [2, 3], "should keep 2 and 3")
    assert_equal(intersection([3, 2, 1], [1, 2]), [2, 1], "order follows the first sequence")


@test("intersection across several sequences checks every one")
def test_intersection_many():
    result = intersection([1, 2, 3, 4, 5], [5, 4, 3, 2], [2, 3, 5, 9], [5, 2])
    assert_equal(result, [2, 5], "only 2 and 5 are everywhere")


@test("intersection does not skip adjacent removals or mutate the input")
def test_intersection_no_mutation():
    primary = [1, 1, 2, 7, 7, 3]
    result = intersection(primary, [2, 3], [3, 2, 8])
    assert_equal(result, [2, 3], "adjacent misses must all be dropped")
    assert_equal(primary, [1, 1, 2, 7, 7, 3], "primary is left untouched")


@test("intersection uses strict equality and supports unhashable values")
def test_intersection_strict():
    assert_equal(intersection([1, '1', True], [1]), [1], "no cross-type matches")
    assert_equal(intersection([[1], [2]], [[2]]), [[2]], "lists compare by value")


@test("intersection and difference never match nan")
def test_set_ops_nan():
    nan = float('nan')
    assert_equal(intersection([nan, 1.5], [nan, 1.5]), [1.5], "nan is not shared")
    result = difference([nan, 1.5], [nan])
    assert_equal(len(result), 2, "nan is never removed")
    assert_that(result[0] is nan, "nan stays in place")


# difference() tests

@test("difference keeps elements absent from the others")
def test_difference_basic():
    assert_equal(difference([1, 2, 3], [2, 3, 4]), [1], "only 1 is unique")


@test("difference removes anything found in any other sequence")
def test_difference_many():
    primary = [1, 2, 3, 4, 5]
    assert_equal(difference(primary, [5, 2, 10], [4]), [1, 3], "2, 4 and 5 are removed")
    assert_equal(primary, [1, 2, 3, 4, 5], "primary is left untouched")


@test("difference with nothing to subtract copies the input")
def test_difference_identity():
    primary = ['a', 'b']
    result = difference(primary)
    assert_equal(result, primary, "same elements")
    assert_that(result is not primary, "but a new list")


if __name__ == "__main__":
    suite.main(title="underbar set and shape operators test suite")
