"""Built-in provider adapters.

Importing this package registers every built-in adapter into the default
adapter registry.
"""

from hybridauth.adapters.mock import MockAdapter

__all__ = [
    "MockAdapter",
]
