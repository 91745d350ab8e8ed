"""
Acceptance checks for raw ledger input.

These are the only place where amount and category rules are decided. The
engine's add path and both filter constructors call them independently.
"""

import math
import re
from decimal import Decimal
from numbers import Real

from exptrack.defaults import MAX_AMOUNT, MIN_AMOUNT, VALID_CATEGORIES

_LETTERS_ONLY = re.compile(r"[a-zA-Z]+")


def is_valid_amount(amount) -> bool:
    """True when MIN_AMOUNT < amount <= MAX_AMOUNT. Accepts real numbers and Decimal."""
    if isinstance(amount, Decimal):
        return not amount.is_nan() and MIN_AMOUNT < amount <= MAX_AMOUNT
    if isinstance(amount, bool) or not isinstance(amount, Real):
        return False
    if math.isnan(amount):
        return False
    return MIN_AMOUNT < amount <= MAX_AMOUNT


def is_valid_category(category) -> bool:
    """
    True for a letters-only label from VALID_CATEGORIES, any case.
    "Food" -> True, "food2" -> False, "  " -> False, None -> False
    """
    if not isinstance(category, str):
        return False
    if not category.strip():
        return False
    if not _LETTERS_ONLY.fullmatch(category):
        return False
    return category.lower() in VALID_CATEGORIES
