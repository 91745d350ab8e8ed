import logging
import threading
from typing import Callable, Dict, List, Sequence, Tuple

from exptrack.core.transaction import Transaction
from exptrack.storage.base import TransactionStore

logger = logging.getLogger(__name__)


class MemoryTransactionStore(TransactionStore):
    """
    Observable, in-memory ledger.

    Holds transactions in insertion order plus the row indices matched by the
    last applied filter. Every state change is followed by exactly one
    `update(store)` call per registered listener. Any add or remove clears the
    matched indices, since row positions shift.

    Listeners are objects with an `update(store)` method or plain callables.
    They must not mutate the store from inside their callback.
    """

    def __init__(self):
        self._transactions: List[Transaction] = []
        self._matched: List[int] = []
        # id(handle) -> (handle, callback); keeping the handle pins the id
        self._listeners: Dict[int, Tuple[object, Callable]] = {}
        # One lock covers mutation and the notification that follows it.
        self._lock = threading.RLock()

    # ---------- mutation ----------

    def add(self, txn: Transaction) -> None:
        if txn is None:
            raise ValueError("The new transaction must be non-null.")
        if not isinstance(txn, Transaction):
            raise ValueError(f"Expected a Transaction, got {type(txn).__name__}.")
        with self._lock:
            self._transactions.append(txn)
            self._matched.clear()
            logger.debug("Added %r (now %d rows)", txn, len(self._transactions))
            self._notify_all()

    def remove(self, txn: Transaction) -> None:
        with self._lock:
            for i, existing in enumerate(self._transactions):
                if existing is txn:
                    del self._transactions[i]
                    logger.debug("Removed row %d (now %d rows)", i, len(self._transactions))
                    break
            else:
                logger.debug("Remove ignored; transaction not in store")
            self._matched.clear()
            self._notify_all()

    def set_matched_filter_indices(self, indices: Sequence[int]) -> None:
        if indices is None:
            raise ValueError("The matched filter indices list must be non-null.")
        new_indices = list(indices)
        with self._lock:
            size = len(self._transactions)
            for index in new_indices:
                if isinstance(index, bool) or not isinstance(index, int):
                    raise ValueError(f"Matched filter index must be an integer, got {index!r}.")
                if index < 0 or index >= size:
                    raise ValueError(
                        "Each matched filter index must be between 0 (inclusive) "
                        f"and the number of transactions (exclusive); got {index} for {size} rows."
                    )
            self._matched = new_indices
            logger.debug("Matched filter indices set to %s", new_indices)
            self._notify_all()

    # ---------- queries ----------

    def get_transactions(self) -> Tuple[Transaction, ...]:
        with self._lock:
            return tuple(self._transactions)

    def get_matched_filter_indices(self) -> List[int]:
        with self._lock:
            return list(self._matched)

    def __len__(self):
        with self._lock:
            return len(self._transactions)

    # ---------- listeners ----------

    def register(self, listener) -> bool:
        callback = _callback_for(listener)
        if callback is None:
            return False
        with self._lock:
            if id(listener) in self._listeners:
                return False
            self._listeners[id(listener)] = (listener, callback)
            return True

    def unregister(self, listener) -> bool:
        if listener is None:
            return False
        with self._lock:
            return self._listeners.pop(id(listener), None) is not None

    def number_of_listeners(self) -> int:
        with self._lock:
            return len(self._listeners)

    def contains_listener(self, listener) -> bool:
        if listener is None:
            return False
        with self._lock:
            return id(listener) in self._listeners

    def _notify_all(self) -> None:
        # Snapshot: listeners (un)registered mid-pass take effect next time.
        callbacks = [callback for _, callback in self._listeners.values()]
        for callback in callbacks:
            callback(self)


def _callback_for(listener):
    if listener is None:
        return None
    update = getattr(listener, "update", None)
    if callable(update):
        return update
    if callable(listener):
        return listener
    return None
