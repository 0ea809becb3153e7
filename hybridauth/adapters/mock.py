"""Mock provider adapter for local development without a real provider.

Implements the ProviderAdapter interface on top of the storage collaborator
only. No network access, no redirects.
"""

import secrets
import time

from hybridauth.core.adapter import ProviderAdapter
from hybridauth.registry import register_adapter

# Lifetime of the fake access token, in seconds
MOCK_TOKEN_TTL = 3600


@register_adapter("mock")
class MockAdapter(ProviderAdapter):
    """
    Mock adapter for local development and tests.

    authenticate() issues a fake token pair and stores it in the session,
    is_connected() checks for it, and disconnect() wipes the provider's
    session namespace. The optional `keys.id` setting is echoed back in the
    stored token data so tests can tell providers apart.

    Example config:
        {"providers": {"mock": {"enabled": True, "keys": {"id": "dev"}}}}
    """

    def authenticate(self) -> None:
        self.logger.info("MockAdapter.authenticate", provider=self.name)

        if self.is_connected():
            return

        keys = self.config.get("keys") or {}
        self.store_data(
            "access_token",
            {
                "access_token": f"mock-{secrets.token_hex(16)}",
                "refresh_token": f"mock-{secrets.token_hex(16)}",
                "token_type": "Bearer",
                "expires_at": int(time.time()) + MOCK_TOKEN_TTL,
                "client_id": keys.get("id"),
                "callback": self.callback,
            },
        )

    def is_connected(self) -> bool:
        return self.get_stored_data("access_token") is not None

    def disconnect(self) -> None:
        self.logger.debug("MockAdapter.disconnect", provider=self.name)
        self.clear_stored_data()
