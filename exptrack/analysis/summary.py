from collections import defaultdict
from typing import Dict, Iterable, Tuple
from exptrack.core.transaction import Transaction


def total_cost(txns: Iterable[Transaction]) -> float:
    return sum(t.amount for t in txns)


def category_summary(txns: Iterable[Transaction]) -> Tuple[Dict[str, int], Dict[str, float]]:
    """
    Count and total per category.
    Categories are case-insensitive, so keys are lowercased.
    """
    counts = defaultdict(int)
    totals = defaultdict(float)

    for txn in txns:
        key = txn.category.lower()
        counts[key] += 1
        totals[key] += txn.amount

    return dict(counts), dict(totals)
