"""Abstract HTTP transport interface.

Adapters receive the transport at construction and use it for every
outbound request. The orchestration layer only passes it through.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class HttpClient(ABC):
    """Abstract interface for outbound HTTP(S) requests.

    Implementations:
        - RequestsHttpClient: requests.Session based transport
    """

    @abstractmethod
    def request(
        self,
        url: str,
        method: str = "GET",
        parameters: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        multipart: bool = False,
    ) -> Any:
        """Send a request and return the response.

        Args:
            url: Absolute URL
            method: HTTP method
            parameters: Query string for GET/DELETE, body otherwise
            headers: Extra request headers
            multipart: Send the body as multipart/form-data

        Returns:
            The transport's response object

        Raises:
            HttpClientError: If the request could not be completed
        """
