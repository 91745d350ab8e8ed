"""
Shared fixtures: a fresh store, a view that records what it is told, and an
engine wired to both.
"""

import pytest

from exptrack.core.engine import TrackerEngine
from exptrack.core.view import TrackerView
from exptrack.storage.memory_store import MemoryTransactionStore


class RecordingView(TrackerView):
    def __init__(self):
        self.updates = []
        self.messages = []

    def update(self, store):
        self.updates.append(store.get_matched_filter_indices())

    def show_message(self, message):
        self.messages.append(message)


@pytest.fixture
def store():
    return MemoryTransactionStore()


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def engine(store, view):
    return TrackerEngine(store, view)
