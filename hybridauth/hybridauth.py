"""Hybridauth: one entry point for every configured identity provider."""

from __future__ import annotations

from typing import Dict, List, Optional

import hybridauth.adapters  # noqa: F401  (registers built-in adapters)
from hybridauth.config import ConfigSource, normalize
from hybridauth.core.adapter import ProviderAdapter
from hybridauth.core.http_client import HttpClient
from hybridauth.core.logger import Logger
from hybridauth.core.storage import Storage
from hybridauth.http_clients import RequestsHttpClient
from hybridauth.logger import create_logger
from hybridauth.models import Collaborators, HybridauthConfig
from hybridauth.registry import AdapterRegistry, default_registry
from hybridauth.resolver import resolve
from hybridauth.storages import MemoryStorage


class Hybridauth:
    """Facade over every configured identity provider.

    Hybridauth resolves a provider name (case-insensitive) to its
    configuration, builds the matching adapter with the shared transport,
    storage and logger, and drives it. Adapters are never cached: every
    call builds a new one, and whatever must persist lives in storage.

    Args:
        config: Mapping, path to a JSON file, or HybridauthConfig.
        http_client: Transport lent to adapters. Defaults to a
            RequestsHttpClient built from `transport_options`.
        storage: Session storage lent to adapters. Defaults to a new
            MemoryStorage.
        logger: Logger lent to adapters. Defaults to a structlog logger
            honouring `debug_mode` and `debug_file`.
        registry: Adapter registry. Defaults to the library-wide registry.

    Raises:
        InvalidConfigError: If config cannot be normalized

    Examples:
        >>> hybridauth = Hybridauth({
        ...     "callback": "https://example.com/auth/callback",
        ...     "providers": {
        ...         "GitHub": {"enabled": True, "keys": {"id": "...", "secret": "..."}},
        ...     },
        ... })
        >>> adapter = hybridauth.authenticate("github")
        >>> hybridauth.get_connected_providers()
        ['github']
    """

    def __init__(
        self,
        config: ConfigSource,
        http_client: Optional[HttpClient] = None,
        storage: Optional[Storage] = None,
        logger: Optional[Logger] = None,
        registry: Optional[AdapterRegistry] = None,
    ):
        self._config = normalize(config)
        self._collaborators = Collaborators(
            http_client=http_client if http_client is not None else RequestsHttpClient(
                self._config.transport_options
            ),
            storage=storage if storage is not None else MemoryStorage(),
            logger=logger if logger is not None else create_logger(
                self._config.debug_mode, self._config.debug_file
            ),
        )
        self._registry = registry if registry is not None else default_registry

    @property
    def config(self) -> HybridauthConfig:
        return self._config

    @property
    def collaborators(self) -> Collaborators:
        return self._collaborators

    @property
    def registry(self) -> AdapterRegistry:
        return self._registry

    @property
    def providers(self) -> List[str]:
        """Configured provider names (lower-case), in table order."""
        return list(self._config.providers)

    # ==================== Single Provider ====================

    def authenticate(self, name: str) -> ProviderAdapter:
        """Authenticate with a provider and return its adapter.

        If the user is not authenticated yet, the adapter may redirect them
        to the provider. Errors from resolution or from the adapter are
        propagated unmodified.

        Args:
            name: Provider name (case-insensitive)

        Returns:
            The adapter, ready for further calls

        Raises:
            UnknownProviderError: If the provider is not configured or has
                no adapter
            ProviderDisabledError: If the provider is disabled
        """
        self._collaborators.logger.info("Hybridauth.authenticate", provider=name)

        adapter = self.get_adapter(name)
        adapter.authenticate()
        return adapter

    def get_adapter(self, name: str) -> ProviderAdapter:
        """Return a new adapter for a provider, without authenticating.

        Raises:
            UnknownProviderError: If the provider is not configured or has
                no adapter
            ProviderDisabledError: If the provider is disabled
        """
        resolved = resolve(self._config, name)
        return self._registry.create(name, resolved, self._collaborators)

    def is_connected_with(self, name: str) -> bool:
        """Return True if the user is connected with the provider."""
        return self.get_adapter(name).is_connected()

    # ==================== All Providers ====================

    def _enabled_providers(self) -> List[str]:
        # Disabled entries are never connected; aggregations skip them
        return [key for key, entry in self._config.providers.items() if entry.enabled]

    def get_connected_providers(self) -> List[str]:
        """Return the names of connected providers, in table order.

        Every probe builds its own adapter. A failing probe aborts the
        whole call.
        """
        return [name for name in self._enabled_providers() if self.is_connected_with(name)]

    def get_connected_adapters(self) -> Dict[str, ProviderAdapter]:
        """Return a new adapter for every connected provider, in table order.

        The returned adapter is not the instance used for the probe.
        """
        adapters: Dict[str, ProviderAdapter] = {}
        for name in self._enabled_providers():
            if self.is_connected_with(name):
                adapters[name] = self.get_adapter(name)
        return adapters

    def disconnect_all_adapters(self) -> None:
        """Disconnect every currently connected provider."""
        for name in self._enabled_providers():
            adapter = self.get_adapter(name)
            if adapter.is_connected():
                adapter.disconnect()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(providers={self.providers!r})"
