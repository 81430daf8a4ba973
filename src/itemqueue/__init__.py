"""ITEMQUEUE

A small in-memory item queue whose mutating operations return nothing.
Callers observe its behavior through side effects: the pending count, the
processed counter, and the items handed to drain callbacks.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
