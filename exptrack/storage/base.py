from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple
from exptrack.core.transaction import Transaction


class StoreListener(ABC):

    @abstractmethod
    def update(self, store: "TransactionStore") -> None:
        pass


class TransactionStore(ABC):

    @abstractmethod
    def add(self, txn: Transaction) -> None:
        pass

    @abstractmethod
    def remove(self, txn: Transaction) -> None:
        pass

    @abstractmethod
    def get_transactions(self) -> Tuple[Transaction, ...]:
        pass

    @abstractmethod
    def set_matched_filter_indices(self, indices: Sequence[int]) -> None:
        pass

    @abstractmethod
    def get_matched_filter_indices(self) -> List[int]:
        pass

    @abstractmethod
    def register(self, listener) -> bool:
        pass

    @abstractmethod
    def unregister(self, listener) -> bool:
        pass
