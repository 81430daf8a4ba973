"""Domain-layer error definitions."""

# ============================================================================
#                           General queue errors
# ============================================================================


class QueueError(Exception):
    """Base class for all ITEMQUEUE errors."""


# ============================================================================
#                         Pending queue errors
# ============================================================================


class ItemNotFoundError(QueueError, LookupError):
    """Raised when an item to remove is not in the pending queue.

    Attributes:
        item (str): The item that was not found.
    """

    def __init__(self, item: str) -> None:
        super().__init__(f"ItemNotFound: item '{item}' is not in the pending queue.")
        self.item = item


class ReentrantDrainError(QueueError):
    """Raised when a drain callback starts another drain on the same service.

    Attributes:
        item (str): The item whose callback attempted the nested drain.
    """

    def __init__(self, item: str) -> None:
        super().__init__(
            f"Cannot start a drain while the callback for item '{item}' is running."
        )
        self.item = item
