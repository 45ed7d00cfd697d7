import itertools
import logging
import suite
from dgen import from_schema
from combinq import product, make_product_enumerator, configured, Phase, OneShotSourceError

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# --- test data & helpers ---
outer = list(range(5))
inner = list(range(7))


class _Collector(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)

# --- core functionality tests ---

@test("five by seven yields 35 pairs in row-major order")
def test_product_five_by_seven():
    items = product(outer, inner).to.list()
    assert_that(len(items) == 35, f"expected 35 pairs, got {len(items)}")
    assert_that(items[0] == (outer[0], inner[0]), "first pair should be (outer[0], inner[0])")
    assert_that(items[7] == (outer[1], inner[0]), f"eighth pair should be (outer[1], inner[0]), got {items[7]}")
    assert_that(items == list(itertools.product(outer, inner)), "outer index should vary slowest")


@test("product counts are n * m")
def test_product_counts():
    for n in range(1, 5):
        for m in range(1, 5):
            enumerator = product(range(n), 'abcd'[:m])
            count = enumerator.to.count()
            assert_that(count == n * m, f"{n} x {m} should give {n * m}, got {count}")
            assert_that(enumerator.expected_count() == count, "expected_count should agree with the run")


@test("views are two slots: cached outer item and current inner item")
def test_product_view_shape():
    enumerator = product(['x', 'y'], [1, 2, 3])
    view = enumerator.advance()
    assert_that(len(view) == 2, "a product view should have two slots")
    assert_that(view[0] == 'x' and view[1] == 1, f"unexpected first view {view}")
    assert_that(view[:] == ('x', 1), "slicing should give a tuple copy")


@test("an infinite outer source is walked lazily")
def test_product_infinite_outer():
    enumerator = product(itertools.count(), ['a', 'b'])
    taken = [enumerator.advance().to_tuple() for _ in range(5)]
    assert_that(taken == [(0, 'a'), (0, 'b'), (1, 'a'), (1, 'b'), (2, 'a')], f"unexpected pairs {taken}")


@test("an empty inner source ends the product even with an infinite outer")
def test_product_empty_inner_guard():
    collector = _Collector()
    logger = logging.getLogger('combinq.extensions.product')
    logger.addHandler(collector)
    try:
        enumerator = product(itertools.count(), [])
        assert_that(enumerator.advance() is None, "empty inner should yield nothing")
        assert_that(enumerator.phase is Phase.EXHAUSTED, "product should be exhausted")
    finally:
        logger.removeHandler(collector)
    assert_that(any(r.levelno == logging.WARNING for r in collector.records), "the guard should log a warning")


@test("an empty outer source yields nothing")
def test_product_empty_outer():
    enumerator = product([], inner)
    assert_that(enumerator.to.list() == [], "empty outer should yield no pairs")
    assert_that(enumerator.advance() is None, "and keep returning None")


@test("a one-shot inner iterator is replayed for every outer item")
def test_product_one_shot_inner():
    items = product(range(3), (c for c in 'pq')).to.list()
    assert_that(items == [(0, 'p'), (0, 'q'), (1, 'p'), (1, 'q'), (2, 'p'), (2, 'q')], f"unexpected pairs {items}")


# --- contract tests ---

@test("reset replays a product over re-iterable sources")
def test_product_reset():
    enumerator = product(range(2), range(2))
    first_pass = enumerator.to.list()
    assert_that(enumerator.advance() is None, "exhausted product should stay exhausted")
    enumerator.reset()
    assert_that(enumerator.to.list() == first_pass, "reset should replay the same pairs")


@test("reset refuses a consumed one-shot outer source")
def test_product_reset_one_shot_outer():
    enumerator = make_product_enumerator(iter([1, 2]), ['a'])
    enumerator.advance()
    assert_raises(OneShotSourceError, enumerator.reset)
    assert_raises(TypeError, enumerator.expected_count)


@test("checked run over generated records pairs every customer with every product")
def test_product_records():
    customers = from_schema({'id': {'_qen_provider': 'counter'}, 'name': 'name'}, seed=11).take(3)
    skus = from_schema({'sku': {'_qen_provider': 'counter', 'start': 500},
                        'price': {'_qen_provider': 'integer', 'low': 1, 'high': 50}}, seed=12).take(4)
    with configured(check_invariants=True):
        pairs = [(c['id'], s['sku']) for c, s in product(customers, skus)]
    assert_that(len(pairs) == 12, f"expected 12 pairs, got {len(pairs)}")
    assert_that(pairs[0] == (0, 500) and pairs[4] == (1, 500), f"unexpected order {pairs[:5]}")


if __name__ == "__main__":
    suite.main(title="combinq product test")
