"""Adapters (infrastructure) for ITEMQUEUE.

Provide concrete implementations of the ports declared in
`itemqueue.interfaces`, such as task schedulers backed by a worker thread
or an asyncio event loop.

Dependency rule: may import `itemqueue.domain` and `itemqueue.interfaces`;
neither of those may import this package.
"""
