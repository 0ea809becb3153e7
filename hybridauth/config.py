"""Configuration loading and normalization.

Turns whatever the application hands to Hybridauth (a mapping, a path to a
JSON file, or an already normalized HybridauthConfig) into an immutable
HybridauthConfig with defaults applied.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import structlog

from hybridauth.exceptions import InvalidConfigError
from hybridauth.models import DebugMode, HybridauthConfig, ProviderConfig, provider_key

log = structlog.get_logger()

ConfigSource = Union[HybridauthConfig, Mapping[str, Any], str, "os.PathLike[str]"]

DEFAULTS: Dict[str, Any] = {
    "debug_mode": DebugMode.NONE,
    "debug_file": "",
    "transport_options": None,
    "providers": None,
}


def load_config(path: Union[str, "os.PathLike[str]"]) -> Dict[str, Any]:
    """Load a raw configuration from a JSON file.

    Args:
        path: Path to a JSON file whose top level is an object

    Returns:
        The decoded configuration mapping

    Raises:
        InvalidConfigError: If the file is missing, unreadable, not JSON,
            or not a JSON object
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise InvalidConfigError(f"Hybridauth config does not exist on the given path: {path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise InvalidConfigError(f"Cannot read Hybridauth config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidConfigError(f"Hybridauth config {path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise InvalidConfigError(f"Hybridauth config {path} must contain a JSON object")

    log.debug("Loaded Hybridauth config", path=str(config_path))
    return raw


def normalize(raw: ConfigSource) -> HybridauthConfig:
    """Build an immutable HybridauthConfig from user input.

    Defaults are applied for absent debug_mode, debug_file,
    transport_options and providers; values the user supplied are kept.
    Provider keys are lower-cased once here so lookups are case-insensitive.
    `global_callback` is accepted as an alias of `callback`, and
    `curl_options` of `transport_options`.
    Enablement and callbacks are left to the resolver.

    Args:
        raw: HybridauthConfig, mapping, or path to a JSON file

    Returns:
        Normalized HybridauthConfig

    Raises:
        InvalidConfigError: If raw is not a usable configuration
    """
    if isinstance(raw, HybridauthConfig):
        return raw

    if isinstance(raw, (str, os.PathLike)):
        raw = load_config(raw)
    elif not isinstance(raw, Mapping):
        raise InvalidConfigError(
            f"Hybridauth config must be a mapping or a path, got {type(raw).__name__}"
        )

    settings = {**DEFAULTS, **raw}
    # Legacy name for the transport options
    if raw.get("transport_options") is None and raw.get("curl_options") is not None:
        settings["transport_options"] = raw["curl_options"]

    transport_options = settings["transport_options"]
    if transport_options is None:
        transport_options = {}
    if not isinstance(transport_options, Mapping):
        raise InvalidConfigError("transport_options must be a mapping")

    debug_file = settings["debug_file"] or ""
    if not isinstance(debug_file, (str, os.PathLike)):
        raise InvalidConfigError("debug_file must be a path")

    global_callback = settings.get("callback")
    if global_callback is None:
        global_callback = settings.get("global_callback")
    if global_callback is not None and not isinstance(global_callback, str):
        raise InvalidConfigError("callback must be a URL string")

    config = HybridauthConfig(
        debug_mode=DebugMode.parse(settings["debug_mode"]),
        debug_file=os.fspath(debug_file),
        transport_options=copy.deepcopy(dict(transport_options)),
        global_callback=global_callback,
        providers=_normalize_providers(settings["providers"]),
    )
    log.debug(
        "Normalized Hybridauth config",
        providers=list(config.providers),
        debug_mode=config.debug_mode.value,
    )
    return config


def _normalize_providers(providers: Any) -> Dict[str, ProviderConfig]:
    if providers is None:
        providers = {}
    if not isinstance(providers, Mapping):
        raise InvalidConfigError("providers must be a mapping of provider name to settings")

    # Keyed by declared name; HybridauthConfig canonicalizes and rejects collisions
    table: Dict[str, ProviderConfig] = {}
    for name, entry in providers.items():
        provider_key(name)
        if not isinstance(entry, Mapping):
            raise InvalidConfigError(f"Settings for provider '{name}' must be a mapping")

        callback = entry.get("callback")
        if callback is not None and not isinstance(callback, str):
            raise InvalidConfigError(f"callback for provider '{name}' must be a URL string")

        credentials = {
            option: copy.deepcopy(value)
            for option, value in entry.items()
            if option not in ("enabled", "callback")
        }
        table[name] = ProviderConfig(
            name=name,
            enabled=bool(entry.get("enabled", False)),
            callback=callback,
            credentials=credentials,
        )

    return table
