# exptrack/app/console.py

from exptrack import config
from exptrack.analysis.summary import total_cost
from exptrack.core.view import TrackerView


def fmt_amount_fixed(amount, width=12):
    currency = config.get("app.currency", "$")
    return f"{currency}{amount:,.2f}".rjust(width)


def render_table(transactions, matched):
    """Build the ledger table as a list of lines; matched rows are flagged."""
    marker = config.get("shell.highlight_marker", "*")
    matched = set(matched)

    lines = [
        f"{'':<2}{'#':<4} {'AMOUNT':>12}  {'CATEGORY':<14} DATE",
        "-" * 54,
    ]
    for i, t in enumerate(transactions):
        flag = marker if i in matched else ""
        lines.append(
            f"{flag:<2}{i:<4} {fmt_amount_fixed(t.amount)}  "
            f"{t.category:<14} {t.timestamp.strftime('%Y-%m-%d %H:%M')}"
        )
    lines.append("-" * 54)
    lines.append(f"{'':<2}{'Total':<4} {fmt_amount_fixed(total_cost(transactions))}")
    return lines


class ConsoleView(TrackerView):
    """Prints the ledger table after every store change."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.messages = []

    def update(self, store):
        if self.quiet:
            return
        self.show_table(store)

    def show_table(self, store):
        txns = store.get_transactions()
        if not txns:
            print("No transactions to display.")
            return
        print("\n".join(render_table(txns, store.get_matched_filter_indices())))

    def show_message(self, message: str):
        self.messages.append(message)
        print(f"ℹ {message}")
