import itertools
import suite
from dgen import from_schema
from combinq import (
    combinations, make_combination_enumerator, choose, configured,
    Phase, InvalidParameterError, StaleViewError
)

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# --- test data & helpers ---
six = list(range(6))
letters = ['a', 'b', 'c', 'd', 'e']

record_schema = {
    'id': {'_qen_provider': 'counter', 'start': 100},
    'name': 'first_name',
    'score': {'_qen_provider': 'integer', 'low': 0, 'high': 10}
}

# --- core functionality tests ---

@test("six choose three yields twenty views from [0,1,2] to [3,4,5]")
def test_combinations_six_choose_three():
    items = combinations(six, 3).to.list()
    assert_that(len(items) == 20, f"expected 20 combinations, got {len(items)}")
    assert_that(items[0] == (0, 1, 2), f"first combination should be (0, 1, 2), got {items[0]}")
    assert_that(items[-1] == (3, 4, 5), f"last combination should be (3, 4, 5), got {items[-1]}")


@test("combination counts match n choose k for every k")
def test_combinations_counts():
    for n in range(8):
        source = list(range(n))
        for k in range(n + 1):
            enumerator = combinations(source, k)
            items = enumerator.to.list()
            assert_that(len(items) == choose(n, k), f"C({n},{k}) should be {choose(n, k)}, got {len(items)}")
            assert_that(enumerator.expected_count() == len(items), "expected_count should agree with the run")
            assert_that(len(set(items)) == len(items), f"C({n},{k}) produced duplicates")
            assert_that(all(len(c) == k for c in items), "every view should have length k")
            assert_that(all(list(c) == sorted(set(c)) for c in items), "every view should be strictly increasing")


@test("combinations come out in lexicographic index order")
def test_combinations_order():
    for k in range(len(letters) + 1):
        produced = combinations(letters, k).to.list()
        expected = list(itertools.combinations(letters, k))
        assert_that(produced == expected, f"k={k} order differs from lexicographic order")


@test("k = 0 and k = n each yield exactly one view")
def test_combinations_degenerate_sizes():
    assert_that(combinations(six, 0).to.list() == [()], "k=0 should yield one empty view")
    assert_that(combinations(six, 6).to.list() == [tuple(six)], "k=n should yield the full sequence once")
    assert_that(combinations([], 0).to.list() == [()], "empty source with k=0 should yield one empty view")


# --- contract tests ---

@test("k outside 0..n is rejected at construction")
def test_combinations_invalid_k():
    assert_raises(InvalidParameterError, make_combination_enumerator, six, 7)
    assert_raises(InvalidParameterError, make_combination_enumerator, six, -1)
    # still a ValueError for callers that do not know the library
    assert_raises(ValueError, make_combination_enumerator, [], 1)


@test("an exhausted combination enumerator keeps returning None")
def test_combinations_stay_exhausted():
    enumerator = combinations(letters, 2)
    count = enumerator.to.count()
    assert_that(count == 10, f"C(5,2) should be 10, got {count}")
    assert_that(enumerator.phase is Phase.EXHAUSTED, "phase should be exhausted")
    for _ in range(3):
        assert_that(enumerator.advance() is None, "advance after exhaustion should return None")
    assert_that(list(enumerator) == [], "iterating again should yield nothing")


@test("reset replays the enumeration from the first combination")
def test_combinations_reset():
    enumerator = combinations(six, 2)
    first_pass = enumerator.to.list()
    enumerator.reset()
    assert_that(enumerator.phase is Phase.NOT_STARTED, "reset should go back to not started")
    assert_that(enumerator.to.list() == first_pass, "second pass should match the first")

    # reset in the middle of a pass
    enumerator.reset()
    enumerator.advance()
    enumerator.advance()
    enumerator.reset()
    assert_that(enumerator.advance() == [0, 1], "reset mid-pass should restart at [0, 1]")


@test("the buffer is reused, earlier views go stale")
def test_combinations_buffer_reuse():
    enumerator = combinations(six, 3)
    first = enumerator.advance()
    assert_that(first == [0, 1, 2], "first view should be [0, 1, 2]")
    second = enumerator.advance()
    assert_that(second == [0, 1, 3], "second view should be [0, 1, 3]")
    assert_that(not first.is_valid, "first view should be stale after advancing")
    assert_that(second.is_valid, "latest view should be valid")
    assert_raises(StaleViewError, lambda: first[0])
    assert_raises(StaleViewError, len, first)


@test("slot indices track the difference array")
def test_combinations_indices():
    enumerator = combinations(letters, 3)
    enumerator.advance()
    assert_that(enumerator.indices() == [0, 1, 2], "initial indices should be [0, 1, 2]")
    for _ in range(3):
        enumerator.advance()
    # (a b c) (a b d) (a b e) (a c d)
    assert_that(enumerator.indices() == [0, 2, 3], f"fourth combination should use [0, 2, 3], got {enumerator.indices()}")


@test("invariant checks hold across a full run")
def test_combinations_invariants():
    with configured(check_invariants=True):
        for k in range(len(letters) + 1):
            count = combinations(letters, k).to.count()
            assert_that(count == choose(len(letters), k), f"checked run for k={k} miscounted")


@test("combinations of generated records keep every record distinct")
def test_combinations_records():
    records = from_schema(record_schema, seed=42).take(7)
    ids = [r['id'] for r in records]
    assert_that(ids == list(range(100, 107)), "record ids should be sequential")

    seen = set()
    for view in combinations(records, 4):
        key = tuple(r['id'] for r in view)
        assert_that(key == tuple(sorted(key)), "records should keep source order")
        seen.add(key)
    assert_that(len(seen) == choose(7, 4), f"expected {choose(7, 4)} distinct record subsets, got {len(seen)}")


@test("non-sequence sources are materialized once")
def test_combinations_generator_source():
    items = combinations((x * x for x in range(4)), 2).to.list()
    assert_that(items == [(0, 1), (0, 4), (0, 9), (1, 4), (1, 9), (4, 9)], f"unexpected combinations {items}")


if __name__ == "__main__":
    suite.main(title="combinq combinations test")
