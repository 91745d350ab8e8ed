import logging
from typing import Optional

from exptrack.core.filters import TransactionFilter
from exptrack.core.transaction import Transaction
from exptrack.core.validation import is_valid_amount, is_valid_category
from exptrack.core.view import TrackerView
from exptrack.defaults import NO_FILTER_MESSAGE
from exptrack.storage.base import StoreListener, TransactionStore

logger = logging.getLogger(__name__)


class TrackerEngine(StoreListener):
    """
    Validates user input, drives the store and keeps the active filter.

    The engine listens to its store and forwards every change to the view.
    Rejected user input is reported by returning False, never by raising.
    """

    def __init__(self, store: TransactionStore, view: TrackerView):
        self.store = store
        self.view = view
        self._filter: Optional[TransactionFilter] = None
        self.store.register(self)

    @property
    def filter(self) -> Optional[TransactionFilter]:
        return self._filter

    def set_filter(self, txn_filter: Optional[TransactionFilter]) -> None:
        self._filter = txn_filter
        logger.debug("Active filter: %r", txn_filter)

    def add_transaction(self, amount, category) -> bool:
        if not is_valid_amount(amount):
            logger.info("Rejected amount %r", amount)
            return False
        if not is_valid_category(category):
            logger.info("Rejected category %r", category)
            return False

        self.store.add(Transaction(amount, category))
        return True

    def apply_filter(self) -> None:
        if self._filter is None:
            logger.info("Apply requested with no filter selected")
            self.view.show_message(NO_FILTER_MESSAGE)
            return

        transactions = self.store.get_transactions()
        matched = self._filter.filter(transactions)

        # Filters work on plain sequences; map results back to row positions.
        row_indexes = []
        for txn in matched:
            row = _index_by_identity(transactions, txn)
            if row != -1:
                row_indexes.append(row)

        logger.info("%s matched %d of %d rows", self._filter.describe(), len(row_indexes), len(transactions))
        self.store.set_matched_filter_indices(row_indexes)

    def undo_transaction(self, row_index) -> bool:
        if isinstance(row_index, bool) or not isinstance(row_index, int):
            return False

        transactions = self.store.get_transactions()
        if not 0 <= row_index < len(transactions):
            logger.info("Undo rejected for row %r (%d rows)", row_index, len(transactions))
            return False

        # Remove by instance, not by position.
        self.store.remove(transactions[row_index])
        return True

    def update(self, store: TransactionStore) -> None:
        self.view.update(store)


def _index_by_identity(transactions, txn) -> int:
    for i, candidate in enumerate(transactions):
        if candidate is txn:
            return i
    return -1
