from abc import abstractmethod

from exptrack.storage.base import StoreListener


class TrackerView(StoreListener):
    """
    Presentation side of the engine.

    `update(store)` is called after every store change; implementations
    re-read whatever they show from the store. `show_message` surfaces an
    informational line to the user.
    """

    @abstractmethod
    def show_message(self, message: str) -> None:
        pass
