"""HTTP transport implementations."""

from hybridauth.http_clients.requests_client import RequestsHttpClient

__all__ = [
    "RequestsHttpClient",
]
