"""In-memory item queue with void-returning, effect-observable operations."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from itemqueue.domain.errors import ItemNotFoundError, ReentrantDrainError

if TYPE_CHECKING:
    from itemqueue.interfaces.scheduler import TaskScheduler

logger = logging.getLogger(__name__)

ItemCallback = Callable[[str], object]


class ItemQueueService:
    """An ordered queue of pending string items and a processed counter.

    Mutations (`add`, `remove`, `clear`) and drains (`drain_sync`,
    `drain_async`) return nothing; their results are observed through
    `pending_count`, `total_processed`, and the items handed to callbacks.

    Every drain works on a snapshot of the pending queue taken when it is
    invoked. The item loop of each drain runs under a lock held by the
    service, so two drains never interleave their processing regardless of
    how many threads the scheduler uses. A callback that starts another drain
    on the same service gets a `ReentrantDrainError`; drains started from
    other threads wait for the running one to finish.

    The deferred step of `drain_async` resets the pending queue to empty once
    its snapshot is processed. Items added between the snapshot and that reset
    are dropped without being processed (last writer wins).

    Args:
        scheduler: Runs the deferred step of `drain_async`.

    Note:
        The service is meant for a single owning thread. Only drain processing
        is serialized; `add`, `remove` and `clear` take no lock.
    """

    def __init__(self, scheduler: TaskScheduler) -> None:
        self._scheduler = scheduler
        self._pending: list[str] = []
        self._processed_total = 0
        self._drain_lock = threading.Lock()
        self._drain_owner: int | None = None
        self._current_item: str | None = None
        self._adds = 0  # total add() calls, used to spot adds made mid-drain

    # --- observations ---

    @property
    def pending_count(self) -> int:
        """Number of items waiting to be drained."""
        return len(self._pending)

    @property
    def total_processed(self) -> int:
        """Number of items handed to a drain callback over the service's life."""
        return self._processed_total

    @property
    def pending_items(self) -> tuple[str, ...]:
        """Snapshot of the pending items, oldest first."""
        return tuple(self._pending)

    # --- mutations ---

    def add(self, item: str) -> None:
        """Append `item` to the end of the pending queue."""
        self._pending.append(item)
        self._adds += 1
        logger.debug("Added item %r (pending=%d)", item, len(self._pending))

    def remove(self, item: str) -> None:
        """Remove the first pending occurrence of `item`.

        Args:
            item: The item to remove, matched by equality.

        Raises:
            ItemNotFoundError: If `item` is not pending. The queue is unchanged.
        """
        try:
            self._pending.remove(item)
        except ValueError as e:
            logger.debug("Cannot remove item %r: not pending", item)
            raise ItemNotFoundError(item) from e
        logger.debug("Removed item %r (pending=%d)", item, len(self._pending))

    def clear(self) -> None:
        """Empty the pending queue. The processed counter is not touched."""
        self._pending = []
        logger.debug("Cleared pending queue")

    # --- drains ---

    def drain_sync(self, on_item: ItemCallback) -> None:
        """Hand every pending item to `on_item`, in order, then drop them.

        Only the items pending at call time are processed. Items the callback
        adds stay pending afterwards.

        Args:
            on_item: Called once per item; its return value is ignored.

        Raises:
            ReentrantDrainError: If called from inside a drain callback.
            Exception: Whatever `on_item` raises. Items processed before the
                failure stay counted and the pending queue is left as it was.
        """
        snapshot = list(self._pending)
        adds_before = self._adds
        self._process(snapshot, on_item)
        # keep exactly the items added by callbacks, whatever else they removed
        kept = min(self._adds - adds_before, len(self._pending))
        self._pending = self._pending[len(self._pending) - kept :]

    def drain_async(self, on_item: ItemCallback) -> None:
        """Snapshot the pending queue now and drain it later on the scheduler.

        Returns at once. Until the deferred step runs, `pending_count` still
        reports the pre-drain value. When it runs, each snapshot item is
        handed to `on_item` in order and the pending queue is then emptied.

        Args:
            on_item: Called once per snapshot item; its return value is ignored.
        """
        snapshot = list(self._pending)

        def _deferred_drain() -> None:
            self._process(snapshot, on_item)
            self._pending = []

        logger.debug("Scheduling deferred drain of %d item(s)", len(snapshot))
        self._scheduler.submit(_deferred_drain)

    def _process(self, snapshot: list[str], on_item: ItemCallback) -> None:
        if self._drain_owner == threading.get_ident():
            raise ReentrantDrainError(self._current_item or "")
        with self._drain_lock:
            self._drain_owner = threading.get_ident()
            try:
                self._drain_items(snapshot, on_item)
            finally:
                self._drain_owner = None
                self._current_item = None

    def _drain_items(self, snapshot: list[str], on_item: ItemCallback) -> None:
        logger.debug("Draining %d item(s)", len(snapshot))
        for item in snapshot:
            self._current_item = item
            on_item(item)
            self._processed_total += 1
        logger.debug(
            "Drained %d item(s) (total processed=%d)",
            len(snapshot),
            self._processed_total,
        )
