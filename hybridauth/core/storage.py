"""Abstract session storage interface.

Storage holds per-session, per-provider state (tokens, state parameters)
between requests. Adapters are ephemeral, so everything they need to
remember lives here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Storage(ABC):
    """Abstract session-scoped key-value storage.

    Implementations:
        - MemoryStorage: In-process dict, the default
        - DynamoDBStorage: DynamoDB table shared between processes
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under key, or default."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete key. Deleting a missing key is not an error."""

    @abstractmethod
    def delete_match(self, prefix: str) -> None:
        """Delete every key starting with prefix."""

    @abstractmethod
    def clear(self) -> None:
        """Delete every key of the session."""
