from dataclasses import dataclass, field
from datetime import datetime


# eq=False keeps identity semantics: two entries with the same amount and
# category are still different ledger rows.
@dataclass(frozen=True, eq=False)
class Transaction:
    amount: float
    category: str
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "amount": self.amount,
            "category": self.category,
            "timestamp": self.timestamp.isoformat(),
        }
