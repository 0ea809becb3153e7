"""Provider configuration resolution.

Turns a provider name into the configuration its adapter is built with:
case-insensitive lookup, enablement check, and callback inheritance from
the global configuration.
"""

from __future__ import annotations

from typing import Any

from hybridauth.exceptions import ProviderDisabledError, UnknownProviderError
from hybridauth.models import HybridauthConfig, ResolvedProviderConfig


def canonical_name(name: Any) -> str:
    """Return the lookup form of a provider name.

    Raises:
        UnknownProviderError: If name is not a string
    """
    if not isinstance(name, str):
        raise UnknownProviderError(repr(name))
    return name.lower()


def resolve(config: HybridauthConfig, name: str) -> ResolvedProviderConfig:
    """Resolve the configuration for a provider.

    The provider's own callback wins; without one, the global callback is
    inherited. When neither is set the callback stays None and the adapter
    decides whether that is an error.

    Args:
        config: Normalized configuration
        name: Provider name, any case

    Returns:
        A fresh ResolvedProviderConfig

    Raises:
        UnknownProviderError: If no provider entry matches
        ProviderDisabledError: If the entry is not enabled
    """
    entry = config.providers.get(canonical_name(name))
    if entry is None:
        raise UnknownProviderError(name)

    if not entry.enabled:
        raise ProviderDisabledError(entry.name)

    callback = entry.callback
    if callback is None:
        callback = config.global_callback

    return ResolvedProviderConfig(
        name=entry.name,
        enabled=entry.enabled,
        callback=callback,
        credentials=entry.credentials,
    )
