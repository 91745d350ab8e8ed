import logging
from flask import Flask, jsonify, request

from exptrack.analysis.summary import category_summary, total_cost
from exptrack.core.engine import TrackerEngine
from exptrack.core.filters import AmountFilter, CategoryFilter
from exptrack.core.view import TrackerView
from exptrack.storage.memory_store import MemoryTransactionStore

logger = logging.getLogger(__name__)


class WebView(TrackerView):
    """Collects engine messages until the next response picks them up."""

    def __init__(self):
        self.messages = []
        self.revision = 0

    def update(self, store):
        self.revision += 1

    def show_message(self, message):
        self.messages.append(message)

    def drain_messages(self):
        messages, self.messages = self.messages, []
        return messages


def txn_rows(store):
    matched = set(store.get_matched_filter_indices())
    return [
        {"row": i, **t.to_dict(), "matched": i in matched}
        for i, t in enumerate(store.get_transactions())
    ]


def build_filter(data):
    kind = data.get("type")
    value = data.get("value")
    if kind is None:
        return None
    if kind == "amount":
        return AmountFilter(value)
    if kind == "category":
        return CategoryFilter(value)
    raise ValueError(f"Unknown filter type: {kind!r}")


def create_app(store=None):
    store = store if store is not None else MemoryTransactionStore()
    view = WebView()
    engine = TrackerEngine(store, view)

    app = Flask(__name__)
    app.config["ENGINE"] = engine
    app.config["VIEW"] = view

    @app.route("/api/transactions")
    def api_transactions():
        return jsonify(txn_rows(store))

    @app.route("/api/transactions", methods=["POST"])
    def api_add_transaction():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"ok": False, "error": "Expected a JSON object"}), 400
        if not engine.add_transaction(data.get("amount"), data.get("category")):
            return jsonify({"ok": False, "error": "Invalid amount or category"}), 400
        return jsonify({"ok": True, "revision": view.revision}), 201

    @app.route("/api/transactions/<int:row>", methods=["DELETE"])
    def api_undo_transaction(row):
        if not engine.undo_transaction(row):
            return jsonify({"ok": False, "error": f"No transaction in row {row}"}), 404
        return jsonify({"ok": True, "revision": view.revision})

    @app.route("/api/filter", methods=["POST"])
    def api_set_filter():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"ok": False, "error": "Expected a JSON object"}), 400
        try:
            txn_filter = build_filter(data)
        except ValueError as e:
            return jsonify({"ok": False, "error": str(e)}), 400

        engine.set_filter(txn_filter)
        return jsonify({
            "ok": True,
            "filter": txn_filter.describe() if txn_filter else None,
        })

    @app.route("/api/filter/apply", methods=["POST"])
    def api_apply_filter():
        view.drain_messages()
        try:
            engine.apply_filter()
        except ValueError as e:
            # Rows changed between the snapshot and the commit.
            logger.warning("Filter result discarded: %s", e)
            return jsonify({"ok": False, "error": str(e)}), 409
        return jsonify({
            "matched": store.get_matched_filter_indices(),
            "messages": view.drain_messages(),
        })

    @app.route("/api/summary")
    def api_summary():
        txns = store.get_transactions()
        counts, totals = category_summary(txns)
        return jsonify({
            "total_transactions": len(txns),
            "total": total_cost(txns),
            "by_category": {"counts": counts, "totals": totals},
        })

    return app


app = create_app()
