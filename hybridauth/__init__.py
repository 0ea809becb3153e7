"""Hybridauth - one entry point for many third-party identity providers.

Hybridauth lets an application authenticate users against any number of
configured identity providers (OAuth1, OAuth2, OpenID Connect, ...) through
a single facade.

Features:
- Provider table with case-insensitive names and global callback inheritance
- Explicit adapter registry for provider implementations
- Connection state across all configured providers
- Pluggable transport, session storage and logger collaborators
"""

from hybridauth.adapters import MockAdapter
from hybridauth.config import load_config, normalize
from hybridauth.core import HttpClient, Logger, ProviderAdapter, Storage
from hybridauth.exceptions import (
    HttpClientError,
    HybridauthError,
    InvalidConfigError,
    ProviderDisabledError,
    StorageError,
    UnknownProviderError,
)
from hybridauth.http_clients import RequestsHttpClient
from hybridauth.hybridauth import Hybridauth
from hybridauth.logger import create_logger
from hybridauth.models import (
    Collaborators,
    DebugMode,
    HybridauthConfig,
    ProviderConfig,
    ResolvedProviderConfig,
)
from hybridauth.registry import AdapterRegistry, default_registry, register_adapter
from hybridauth.resolver import canonical_name, resolve
from hybridauth.storages import DynamoDBStorage, MemoryStorage

__version__ = "3.0.0"

__all__ = [
    # Entry point
    "Hybridauth",
    # Configuration
    "load_config",
    "normalize",
    "resolve",
    "canonical_name",
    # Registry
    "AdapterRegistry",
    "default_registry",
    "register_adapter",
    # Core interfaces
    "HttpClient",
    "Logger",
    "ProviderAdapter",
    "Storage",
    # Models
    "Collaborators",
    "DebugMode",
    "HybridauthConfig",
    "ProviderConfig",
    "ResolvedProviderConfig",
    # Exceptions
    "HybridauthError",
    "InvalidConfigError",
    "UnknownProviderError",
    "ProviderDisabledError",
    "HttpClientError",
    "StorageError",
    # Collaborators
    "RequestsHttpClient",
    "MemoryStorage",
    "DynamoDBStorage",
    "create_logger",
    # Adapters
    "MockAdapter",
]
