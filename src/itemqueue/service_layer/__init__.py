"""Service layer for ITEMQUEUE.

Implements the item queue itself: pending items, the processed counter, and
the immediate and deferred drain operations.

Dependency rule: may import `itemqueue.domain` and `itemqueue.interfaces`,
but not `itemqueue.adapters` or `itemqueue.bootstrap`.
"""

from .item_queue_service import ItemCallback, ItemQueueService

__all__ = ["ItemCallback", "ItemQueueService"]
