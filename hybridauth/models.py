"""Hybridauth models - immutable configuration structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from hybridauth.exceptions import InvalidConfigError

if TYPE_CHECKING:
    from hybridauth.core import HttpClient, Logger, Storage


def _frozen_mapping(value: Optional[Mapping[str, Any]] = None) -> Mapping[str, Any]:
    return MappingProxyType(dict(value or {}))


def provider_key(name: Any) -> str:
    """Return the canonical (lower-case) table key for a provider name.

    Dots are reserved: adapters namespace their storage as "{key}.".

    Raises:
        InvalidConfigError: If name is not a non-empty string or contains a dot
    """
    if not isinstance(name, str) or not name:
        raise InvalidConfigError(f"Invalid provider name: {name!r}")
    if "." in name:
        raise InvalidConfigError(f"Provider name '{name}' must not contain '.'")
    return name.lower()


class DebugMode(str, Enum):
    """Verbosity of the default logger."""

    NONE = "none"
    ERROR = "error"
    INFO = "info"
    DEBUG = "debug"

    # Aliases
    SIMPLE = "info"
    VERBOSE = "debug"

    @classmethod
    def parse(cls, value: Union["DebugMode", str, bool, None]) -> "DebugMode":
        """Coerce a user-supplied debug mode.

        Accepts a member, its value or name (any case), or a bool where
        False means NONE and True means DEBUG.

        Raises:
            InvalidConfigError: If the value is not a recognised mode
        """
        if isinstance(value, cls):
            return value
        if value is None or value is False:
            return cls.NONE
        if value is True:
            return cls.DEBUG
        if isinstance(value, str):
            key = value.strip()
            try:
                return cls(key.lower())
            except ValueError:
                member = cls.__members__.get(key.upper())
                if member is not None:
                    return member
        raise InvalidConfigError(f"Unknown debug_mode: {value!r}")


@dataclass(frozen=True)
class ProviderConfig:
    """A provider entry from the configuration table.

    Everything besides `enabled` and `callback` (keys, scope, ...) is kept
    in `credentials` and handed to the adapter untouched.
    """

    name: str  # As declared by the user
    enabled: bool = False
    callback: Optional[str] = None
    credentials: Mapping[str, Any] = field(default_factory=_frozen_mapping)

    def __post_init__(self) -> None:
        object.__setattr__(self, "credentials", _frozen_mapping(self.credentials))


@dataclass(frozen=True)
class ResolvedProviderConfig:
    """Provider configuration after global callback inheritance.

    Built fresh on every resolution and passed verbatim to the adapter.
    """

    name: str
    enabled: bool
    callback: Optional[str]
    credentials: Mapping[str, Any] = field(default_factory=_frozen_mapping)

    def get(self, key: str, default: Any = None) -> Any:
        """Read an adapter option from the credentials map."""
        return self.credentials.get(key, default)


@dataclass(frozen=True)
class HybridauthConfig:
    """Normalized Hybridauth configuration.

    `providers` is keyed by canonical (lower-case) provider name and keeps
    declaration order.
    """

    debug_mode: DebugMode = DebugMode.NONE
    debug_file: str = ""
    transport_options: Mapping[str, Any] = field(default_factory=_frozen_mapping)
    global_callback: Optional[str] = None
    providers: Mapping[str, ProviderConfig] = field(default_factory=_frozen_mapping)

    def __post_init__(self) -> None:
        table: dict = {}
        for name, entry in (self.providers or {}).items():
            if not isinstance(entry, ProviderConfig):
                raise InvalidConfigError(f"Settings for provider '{name}' must be a ProviderConfig")
            key = provider_key(name)
            if key in table:
                raise InvalidConfigError(
                    f"Provider '{name}' collides with '{table[key].name}' "
                    "(names are case-insensitive)"
                )
            table[key] = entry
        object.__setattr__(self, "providers", MappingProxyType(table))
        object.__setattr__(self, "transport_options", _frozen_mapping(self.transport_options))


@dataclass(frozen=True)
class Collaborators:
    """Shared references lent to every adapter instance."""

    http_client: HttpClient
    storage: Storage
    logger: Logger
