"""Bootstrap (composition root) for ITEMQUEUE.

Assembles the application at runtime: picks a scheduler adapter, wires it
into the item queue service, reads configuration, and optionally installs
console logging.

Import rules:
- This package may import: `itemqueue.adapters`, `itemqueue.service_layer`,
  `itemqueue.interfaces`, `itemqueue.domain`, and `itemqueue.config`.
- Inner layers must not import `itemqueue.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
