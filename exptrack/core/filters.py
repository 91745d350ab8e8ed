from abc import ABC, abstractmethod
from typing import List, Sequence

from exptrack.core.transaction import Transaction
from exptrack.core.validation import is_valid_amount, is_valid_category


class TransactionFilter(ABC):
    """
    Selects a subsequence of transactions by one criterion.

    Implementations never modify their input and keep the relative order of
    the transactions they return.
    """

    @abstractmethod
    def filter(self, transactions: Sequence[Transaction]) -> List[Transaction]:
        pass

    @abstractmethod
    def describe(self) -> str:
        pass


class AmountFilter(TransactionFilter):
    def __init__(self, amount: float):
        # Filters can be built without going through the engine.
        if not is_valid_amount(amount):
            raise ValueError(f"Invalid amount filter: {amount!r}")
        self._amount = amount

    @property
    def amount(self) -> float:
        return self._amount

    def filter(self, transactions: Sequence[Transaction]) -> List[Transaction]:
        # Exact equality: 0.1 + 0.2 will not match a 0.3 filter.
        return [t for t in transactions if t.amount == self._amount]

    def describe(self) -> str:
        return f"amount == {self._amount}"

    def __repr__(self):
        return f"AmountFilter({self._amount!r})"


class CategoryFilter(TransactionFilter):
    def __init__(self, category: str):
        if not is_valid_category(category):
            raise ValueError(f"Invalid category filter: {category!r}")
        self._category = category

    @property
    def category(self) -> str:
        return self._category

    def filter(self, transactions: Sequence[Transaction]) -> List[Transaction]:
        wanted = self._category.lower()
        return [t for t in transactions if t.category.lower() == wanted]

    def describe(self) -> str:
        return f"category == {self._category.lower()}"

    def __repr__(self):
        return f"CategoryFilter({self._category!r})"
