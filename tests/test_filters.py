import pytest

from exptrack.core.filters import AmountFilter, CategoryFilter, TransactionFilter
from exptrack.core.transaction import Transaction


def make_txns():
    return [
        Transaction(50, "food"),
        Transaction(20, "Travel"),
        Transaction(50, "FOOD"),
        Transaction(75.5, "bills"),
    ]


def test_filter_is_abstract():
    with pytest.raises(TypeError):
        TransactionFilter()


def test_amount_filter_keeps_exact_matches_in_order():
    txns = make_txns()
    result = AmountFilter(50).filter(txns)
    assert result == [txns[0], txns[2]]


def test_amount_filter_uses_exact_equality():
    txns = [Transaction(0.1 + 0.2, "food"), Transaction(0.3, "food")]
    assert AmountFilter(0.3).filter(txns) == [txns[1]]


@pytest.mark.parametrize("amount", [0, -5, 1000.5, None, "50"])
def test_amount_filter_rejects_invalid_threshold(amount):
    with pytest.raises(ValueError):
        AmountFilter(amount)


def test_category_filter_is_case_insensitive():
    txns = make_txns()
    assert CategoryFilter("Food").filter(txns) == [txns[0], txns[2]]
    assert CategoryFilter("travel").filter(txns) == [txns[1]]


@pytest.mark.parametrize("category", ["rent", "food2", "  ", None])
def test_category_filter_rejects_invalid_label(category):
    with pytest.raises(ValueError):
        CategoryFilter(category)


def test_filter_does_not_touch_input():
    txns = make_txns()
    before = list(txns)
    CategoryFilter("bills").filter(txns)
    assert txns == before


def test_filter_exposes_criterion():
    assert AmountFilter(20).amount == 20
    assert CategoryFilter("Bills").category == "Bills"
    assert CategoryFilter("Bills").describe() == "category == bills"
