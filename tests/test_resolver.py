"""Tests for provider configuration resolution."""

import pytest

from hybridauth.config import normalize
from hybridauth.exceptions import ProviderDisabledError, UnknownProviderError
from hybridauth.models import HybridauthConfig, ProviderConfig
from hybridauth.resolver import canonical_name, resolve


@pytest.fixture
def config():
    return normalize(
        {
            "callback": "http://cb",
            "providers": {
                "Google": {"enabled": True, "callback": "http://google", "keys": {"id": "g"}},
                "Twitter": {"enabled": True},
                "Facebook": {"enabled": False},
            },
        }
    )


def test_canonical_name():
    """Test canonical names are lower-case."""
    assert canonical_name("GitHub") == "github"


def test_canonical_name_rejects_non_string():
    """Test a non-string provider name is unknown."""
    with pytest.raises(UnknownProviderError):
        canonical_name(None)


@pytest.mark.parametrize("name", ["google", "Google", "GOOGLE", "gOoGlE"])
def test_resolve_is_case_insensitive(config, name):
    """Test lookup ignores case."""
    assert resolve(config, name) == resolve(config, "google")


def test_resolve_keeps_declared_name(config):
    """Test the resolved name is the one the user declared."""
    assert resolve(config, "google").name == "Google"


def test_resolve_provider_callback_wins(config):
    """Test the provider's own callback takes precedence."""
    assert resolve(config, "google").callback == "http://google"


def test_resolve_inherits_global_callback(config):
    """Test a provider without callback inherits the global one."""
    assert resolve(config, "twitter").callback == "http://cb"


def test_resolve_without_any_callback():
    """Test callback stays None when neither level sets it."""
    config = normalize({"providers": {"twitter": {"enabled": True}}})
    assert resolve(config, "twitter").callback is None


def test_resolve_passes_credentials(config):
    """Test credentials reach the resolved config."""
    resolved = resolve(config, "google")
    assert resolved.enabled is True
    assert resolved.get("keys") == {"id": "g"}


def test_resolve_unknown_provider(config):
    """Test an unknown name raises UnknownProviderError."""
    with pytest.raises(UnknownProviderError) as exc_info:
        resolve(config, "doesnotexist")

    assert exc_info.value.provider == "doesnotexist"


def test_resolve_disabled_provider(config):
    """Test a disabled entry raises ProviderDisabledError."""
    with pytest.raises(ProviderDisabledError) as exc_info:
        resolve(config, "FACEBOOK")

    assert exc_info.value.provider == "Facebook"


def test_resolve_does_not_mutate_config(config):
    """Test resolution leaves the configuration untouched."""
    resolve(config, "twitter")

    assert config.providers["twitter"].callback is None


def test_resolve_returns_fresh_instances(config):
    """Test every resolution builds a new object."""
    first = resolve(config, "twitter")
    second = resolve(config, "twitter")

    assert first == second
    assert first is not second


@pytest.mark.parametrize("name", ["Google", "google", "GOOGLE"])
def test_resolve_directly_built_config(name):
    """Test lookups are case-insensitive for configs built without normalize."""
    config = HybridauthConfig(
        global_callback="http://cb",
        providers={"Google": ProviderConfig(name="Google", enabled=True)},
    )

    resolved = resolve(config, name)

    assert resolved == resolve(config, "google")
    assert resolved.name == "Google"
    assert resolved.callback == "http://cb"
