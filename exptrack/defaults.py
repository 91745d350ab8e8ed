"""
exptrack Default Values
=======================
Fixed acceptance rules for ledger input. Every component that accepts a raw
amount or category checks it against these values.

Usage:
    from exptrack.defaults import MAX_AMOUNT, VALID_CATEGORIES
"""

# ============================================================================
# AMOUNT BOUNDS
# ============================================================================
# Amounts must satisfy MIN_AMOUNT < amount <= MAX_AMOUNT
MIN_AMOUNT = 0
MAX_AMOUNT = 1000

# ============================================================================
# CATEGORY VOCABULARY
# ============================================================================
# Matched case-insensitively
VALID_CATEGORIES = ("food", "travel", "bills", "entertainment", "other")

# ============================================================================
# USER-FACING MESSAGES
# ============================================================================
NO_FILTER_MESSAGE = "No filter applied"


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_valid_categories():
    """Return a fresh list of accepted categories (to avoid mutation)."""
    return list(VALID_CATEGORIES)
