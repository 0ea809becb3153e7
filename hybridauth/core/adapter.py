"""Abstract provider adapter interface.

This module defines the interface that every identity provider adapter must
implement. The interface is protocol-agnostic - implementations can speak
OAuth1, OAuth2, OpenID Connect or anything else.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from hybridauth.core.http_client import HttpClient
from hybridauth.core.logger import Logger
from hybridauth.core.storage import Storage
from hybridauth.models import ResolvedProviderConfig


class ProviderAdapter(ABC):
    """Abstract adapter for one identity provider.

    Adapters are created on demand by the adapter registry and discarded
    after the call that created them. Anything that must survive between
    requests (tokens, state, nonces) goes to the storage collaborator,
    never onto the instance.

    Constructors may log but must not perform network I/O. All I/O happens
    inside authenticate(), is_connected() and disconnect().

    Implementations:
        - MockAdapter: In-memory adapter for development and tests
    """

    def __init__(
        self,
        config: ResolvedProviderConfig,
        http_client: HttpClient,
        storage: Storage,
        logger: Logger,
    ):
        self.config = config
        self.http_client = http_client
        self.storage = storage
        self.logger = logger

    @property
    def name(self) -> str:
        """Provider name as declared in the configuration."""
        return self.config.name

    @property
    def callback(self) -> Optional[str]:
        """Callback URL after global inheritance (may be None)."""
        return self.config.callback

    # ==================== Authentication ====================

    @abstractmethod
    def authenticate(self) -> None:
        """Authenticate the user with the provider.

        May redirect the user agent, exchange an authorization code for
        tokens, or do nothing when the session is already authenticated.

        Raises:
            Any provider specific error. These are propagated to the
            caller untouched.
        """

    @abstractmethod
    def is_connected(self) -> bool:
        """Return True if the current session holds a usable authorization."""

    @abstractmethod
    def disconnect(self) -> None:
        """Forget the stored authorization for this provider."""

    # ==================== Storage Helpers ====================

    def _storage_key(self, key: str) -> str:
        return f"{self.config.name.lower()}.{key}"

    def get_stored_data(self, key: str, default: Any = None) -> Any:
        """Read a value from this provider's storage namespace."""
        return self.storage.get(self._storage_key(key), default)

    def store_data(self, key: str, value: Any) -> None:
        """Write a value to this provider's storage namespace."""
        self.storage.set(self._storage_key(key), value)

    def delete_stored_data(self, key: str) -> None:
        """Delete a value from this provider's storage namespace."""
        self.storage.delete(self._storage_key(key))

    def clear_stored_data(self) -> None:
        """Delete every value in this provider's storage namespace."""
        self.storage.delete_match(self._storage_key(""))
