"""Core abstractions for the Hybridauth provider framework."""

from hybridauth.core.adapter import ProviderAdapter
from hybridauth.core.http_client import HttpClient
from hybridauth.core.logger import Logger
from hybridauth.core.storage import Storage

__all__ = [
    "HttpClient",
    "Logger",
    "ProviderAdapter",
    "Storage",
]
