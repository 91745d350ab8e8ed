from exptrack.core.filters import AmountFilter, CategoryFilter
from exptrack.defaults import NO_FILTER_MESSAGE


def test_engine_registers_itself(store, engine):
    assert store.contains_listener(engine)
    assert store.number_of_listeners() == 1


def test_add_transaction(store, engine):
    assert engine.add_transaction(50, "food") is True
    txns = store.get_transactions()
    assert len(txns) == 1
    assert txns[0].amount == 50
    assert txns[0].category == "food"


def test_add_rejects_out_of_range_amount(store, engine):
    assert engine.add_transaction(1500, "food") is False
    assert engine.add_transaction(0, "food") is False
    assert store.get_transactions() == ()


def test_add_rejects_bad_category(store, engine):
    assert engine.add_transaction(10, "rent") is False
    assert engine.add_transaction(10, None) is False
    assert store.get_transactions() == ()


def test_updates_are_forwarded_to_view(engine, view):
    engine.add_transaction(10, "food")
    engine.add_transaction(20, "bills")
    assert len(view.updates) == 2


def test_category_then_amount_filter(store, engine):
    engine.add_transaction(50, "food")
    engine.add_transaction(50, "travel")

    engine.set_filter(CategoryFilter("food"))
    engine.apply_filter()
    assert store.get_matched_filter_indices() == [0]

    engine.set_filter(AmountFilter(50))
    engine.apply_filter()
    assert store.get_matched_filter_indices() == [0, 1]


def test_apply_without_filter_shows_message(store, engine, view):
    engine.add_transaction(50, "food")
    updates_before = len(view.updates)

    engine.apply_filter()

    assert view.messages == [NO_FILTER_MESSAGE]
    assert len(view.updates) == updates_before
    assert store.get_matched_filter_indices() == []


def test_set_filter_none_clears(engine, view):
    engine.set_filter(AmountFilter(10))
    engine.set_filter(None)
    assert engine.filter is None
    engine.apply_filter()
    assert view.messages == [NO_FILTER_MESSAGE]


def test_apply_with_no_matches(store, engine, view):
    engine.add_transaction(10, "food")
    engine.set_filter(CategoryFilter("bills"))
    engine.apply_filter()
    assert store.get_matched_filter_indices() == []
    assert view.updates[-1] == []


def test_apply_maps_duplicates_by_identity(store, engine):
    engine.add_transaction(10, "food")
    engine.add_transaction(10, "food")
    engine.add_transaction(30, "food")
    engine.set_filter(AmountFilter(10))
    engine.apply_filter()
    assert store.get_matched_filter_indices() == [0, 1]


def test_mutation_after_apply_clears_highlight(store, engine):
    engine.add_transaction(10, "food")
    engine.set_filter(CategoryFilter("food"))
    engine.apply_filter()
    engine.add_transaction(20, "food")
    assert store.get_matched_filter_indices() == []


def test_undo_transaction(store, engine):
    engine.add_transaction(10, "food")
    engine.add_transaction(20, "bills")
    first, second = store.get_transactions()

    assert engine.undo_transaction(0) is True
    assert store.get_transactions() == (second,)


def test_undo_out_of_range(store, engine):
    engine.add_transaction(10, "food")
    engine.add_transaction(20, "bills")
    before = store.get_transactions()

    assert engine.undo_transaction(5) is False
    assert engine.undo_transaction(2) is False
    assert engine.undo_transaction(-1) is False
    assert engine.undo_transaction("0") is False
    assert store.get_transactions() == before


def test_undo_removes_the_row_not_an_equal_twin(store, engine):
    engine.add_transaction(10, "food")
    engine.add_transaction(10, "food")
    first, second = store.get_transactions()

    engine.undo_transaction(1)

    remaining = store.get_transactions()
    assert len(remaining) == 1
    assert remaining[0] is first
