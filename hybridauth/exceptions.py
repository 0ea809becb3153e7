"""Hybridauth exceptions.

All exceptions inherit from HybridauthError for easy catching.
Errors raised by provider adapters are not wrapped and reach the caller as is.
"""

from __future__ import annotations

from typing import Optional


class HybridauthError(Exception):
    """Base exception for Hybridauth errors."""

    def __init__(self, message: str, code: str):
        self.message = message
        self.code = code
        super().__init__(message)


# ==================== Configuration Errors ====================


class InvalidConfigError(HybridauthError):
    """Raised when the configuration is malformed or cannot be loaded."""

    def __init__(self, message: str = "Invalid Hybridauth configuration"):
        super().__init__(message=message, code="INVALID_CONFIG")


# ==================== Provider Errors ====================


class UnknownProviderError(HybridauthError):
    """Raised when no provider entry or adapter matches the requested name."""

    def __init__(self, provider: str):
        super().__init__(
            message=f"Unknown provider '{provider}'",
            code="UNKNOWN_PROVIDER",
        )
        self.provider = provider


class ProviderDisabledError(HybridauthError):
    """Raised when the provider entry exists but is not enabled."""

    def __init__(self, provider: str):
        super().__init__(
            message=f"Provider '{provider}' is disabled",
            code="PROVIDER_DISABLED",
        )
        self.provider = provider


# ==================== Collaborator Errors ====================


class HttpClientError(HybridauthError):
    """Raised when the default HTTP transport fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message=message, code="HTTP_CLIENT_ERROR")
        self.status_code = status_code


class StorageError(HybridauthError):
    """Raised when a storage backend operation fails."""

    def __init__(self, message: str, operation: str):
        super().__init__(message=message, code="STORAGE_ERROR")
        self.operation = operation
