"""Domain layer for ITEMQUEUE.

Holds the error types shared by every other layer. This package is
technology-agnostic.

Dependency rule: do not import from `itemqueue.adapters`,
`itemqueue.service_layer` or `itemqueue.bootstrap`.
"""
