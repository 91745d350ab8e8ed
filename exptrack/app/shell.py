# exptrack/app/shell.py

import logging

from exptrack import config
from exptrack.analysis.summary import category_summary, total_cost
from exptrack.core.filters import AmountFilter, CategoryFilter
from exptrack.defaults import MAX_AMOUNT, MIN_AMOUNT, get_valid_categories
from exptrack.report.printer import print_summary

logger = logging.getLogger(__name__)

HELP = """Commands:
  add AMOUNT CATEGORY     add a transaction (0 < amount <= 1000)
  undo ROW                remove the transaction in row ROW
  filter amount X         select an amount filter
  filter category NAME    select a category filter
  filter none             clear the selected filter
  apply                   highlight rows matching the selected filter
  list                    show the ledger
  summary                 totals by category
  help                    show this text
  quit | exit             leave
"""


def parse_amount(text):
    try:
        return float(text)
    except ValueError:
        return None


def parse_row(text):
    try:
        return int(text)
    except ValueError:
        return None


def cmd_add(engine, view, args):
    if len(args) != 2:
        print("✗ Usage: add AMOUNT CATEGORY")
        return
    amount = parse_amount(args[0])
    if amount is None or not engine.add_transaction(amount, args[1]):
        print(f"✗ Invalid input: amount must be {MIN_AMOUNT} < x <= {MAX_AMOUNT} and category one of "
              f"{', '.join(get_valid_categories())}.")


def cmd_undo(engine, view, args):
    row = parse_row(args[0]) if len(args) == 1 else None
    if row is None or not engine.undo_transaction(row):
        print("✗ Invalid row.")


def cmd_filter(engine, view, args):
    if len(args) == 1 and args[0] == "none":
        engine.set_filter(None)
        print("✓ Filter cleared.")
        return
    if len(args) != 2 or args[0] not in ("amount", "category"):
        print("✗ Usage: filter amount X | filter category NAME | filter none")
        return

    kind, value = args
    try:
        if kind == "amount":
            amount = parse_amount(value)
            if amount is None:
                raise ValueError(f"Invalid amount filter: {value!r}")
            txn_filter = AmountFilter(amount)
        else:
            txn_filter = CategoryFilter(value)
    except ValueError as e:
        print(f"✗ {e}")
        return

    engine.set_filter(txn_filter)
    print(f"✓ Filter set: {txn_filter.describe()}")


def cmd_apply(engine, view, args):
    engine.apply_filter()


def cmd_list(engine, view, args):
    view.show_table(engine.store)


def cmd_summary(engine, view, args):
    txns = engine.store.get_transactions()
    print(f"Total Transactions : {len(txns)}")
    print(f"Total Cost         : {total_cost(txns):,.2f}")
    _, totals = category_summary(txns)
    print_summary("Summary by Category", totals)


COMMANDS = {
    "add": cmd_add,
    "undo": cmd_undo,
    "filter": cmd_filter,
    "apply": cmd_apply,
    "list": cmd_list,
    "ls": cmd_list,
    "summary": cmd_summary,
    "sum": cmd_summary,
}


def _read_lines(prompt):
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def run(engine, view, lines=None):
    """
    Dispatch shell commands until quit/exit or end of input.
    `lines` replaces interactive input when given.
    """
    if lines is None:
        lines = _read_lines(config.get("shell.prompt", "> "))

    for line in lines:
        parts = line.strip().split()
        if not parts:
            continue

        name, args = parts[0].lower(), parts[1:]
        if name in ("quit", "exit"):
            break
        if name == "help":
            print(HELP)
            continue

        handler = COMMANDS.get(name)
        if handler is None:
            print(f"✗ Unknown command: {name} (try 'help')")
            continue

        logger.debug("shell command %s %s", name, args)
        handler(engine, view, args)
