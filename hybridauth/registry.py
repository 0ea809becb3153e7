"""Adapter registry: maps provider names to adapter constructors."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, TypeVar

import structlog

from hybridauth.core.adapter import ProviderAdapter
from hybridauth.exceptions import UnknownProviderError
from hybridauth.models import Collaborators, ResolvedProviderConfig, provider_key
from hybridauth.resolver import canonical_name

log = structlog.get_logger()

AdapterConstructor = Callable[..., ProviderAdapter]
T = TypeVar("T")


class AdapterRegistry:
    """Registry of adapter constructors keyed by provider name.

    Names are case-insensitive. A constructor is any callable accepting
    (config, http_client, storage, logger) and returning a ProviderAdapter,
    usually the adapter class itself.

    Example:
        >>> registry = AdapterRegistry()
        >>> registry.register("github", GitHubAdapter)
        >>> adapter = registry.create("GitHub", resolved, collaborators)
    """

    def __init__(self, constructors: Optional[Dict[str, AdapterConstructor]] = None) -> None:
        self._constructors: Dict[str, AdapterConstructor] = {}
        for name, constructor in (constructors or {}).items():
            self.register(name, constructor)

    def register(self, name: str, constructor: AdapterConstructor) -> None:
        """Register (or replace) the constructor for a provider.

        Raises:
            TypeError: If constructor is not callable
            InvalidConfigError: If name is empty or contains a dot
        """
        if not callable(constructor):
            raise TypeError(f"Adapter constructor for '{name}' must be callable")
        key = provider_key(name)
        if key in self._constructors:
            log.debug("Replacing adapter constructor", provider=key)
        self._constructors[key] = constructor

    def unregister(self, name: str) -> None:
        """Remove a provider's constructor. Unknown names are ignored."""
        self._constructors.pop(canonical_name(name), None)

    def is_registered(self, name: str) -> bool:
        return isinstance(name, str) and name.lower() in self._constructors

    def names(self) -> List[str]:
        """Registered provider names, in registration order."""
        return list(self._constructors)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)

    def create(
        self,
        name: str,
        config: ResolvedProviderConfig,
        collaborators: Collaborators,
    ) -> ProviderAdapter:
        """Instantiate the adapter registered for name.

        Args:
            name: Provider name, any case
            config: Resolved provider configuration
            collaborators: Shared transport, storage and logger

        Returns:
            A new adapter instance

        Raises:
            UnknownProviderError: If no constructor is registered for name
        """
        constructor = self._constructors.get(canonical_name(name))
        if constructor is None:
            raise UnknownProviderError(name)

        return constructor(
            config,
            collaborators.http_client,
            collaborators.storage,
            collaborators.logger,
        )


default_registry = AdapterRegistry()


def register_adapter(
    name: str, registry: Optional[AdapterRegistry] = None
) -> Callable[[T], T]:
    """Class decorator registering an adapter under name.

    Registers into default_registry unless another registry is given.

    Example:
        >>> @register_adapter("github")
        ... class GitHubAdapter(ProviderAdapter):
        ...     ...
    """

    def decorator(cls: T) -> T:
        (registry or default_registry).register(name, cls)
        return cls

    return decorator
