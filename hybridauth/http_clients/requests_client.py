"""HTTP transport built on requests."""

from __future__ import annotations

from typing import Any, Mapping, Optional

import requests
import structlog

from hybridauth.core.http_client import HttpClient
from hybridauth.exceptions import HttpClientError

log = structlog.get_logger()

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "Hybridauth (+https://hybridauth.github.io)"


class RequestsHttpClient(HttpClient):
    """
    Default transport handed to adapters.

    Recognised options (the `transport_options` config table):
        timeout: Request timeout in seconds (default: 10.0)
        verify: TLS verification flag or CA bundle path
        proxies: requests-style proxies mapping
        headers: Headers sent with every request
        user_agent: User-Agent header value

    The underlying requests.Session is created on first use, so building
    the client never touches the network.

    Example:
        client = RequestsHttpClient({"timeout": 5})
        response = client.request("https://api.example.com/me", headers={...})
    """

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        session: Optional[requests.Session] = None,
    ):
        options = dict(options or {})
        self._timeout = options.get("timeout", DEFAULT_TIMEOUT)
        self._verify = options.get("verify", True)
        self._proxies = dict(options.get("proxies") or {})
        self._headers = {"User-Agent": options.get("user_agent", DEFAULT_USER_AGENT)}
        self._headers.update(options.get("headers") or {})
        self._session = session

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def request(
        self,
        url: str,
        method: str = "GET",
        parameters: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        multipart: bool = False,
    ) -> requests.Response:
        """Send a request and return the requests.Response.

        GET and DELETE send `parameters` as query string. Other methods
        send them as multipart files, JSON (when the Content-Type header is
        JSON) or a form-encoded body.

        Raises:
            HttpClientError: On connection errors and 4xx/5xx responses
        """
        method = method.upper()
        request_headers = {**self._headers, **(headers or {})}
        kwargs: dict = {
            "headers": request_headers,
            "timeout": self._timeout,
            "verify": self._verify,
        }
        if self._proxies:
            kwargs["proxies"] = self._proxies

        if method in ("GET", "DELETE"):
            kwargs["params"] = parameters
        elif multipart:
            kwargs["files"] = parameters
        elif "json" in request_headers.get("Content-Type", "").lower():
            kwargs["json"] = parameters
        else:
            kwargs["data"] = parameters

        log.debug("HTTP request", method=method, url=url)

        try:
            response = self.session.request(method, url, **kwargs)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            log.error("HTTP request returned error", method=method, url=url, status_code=status)
            raise HttpClientError(
                f"{method} {url} failed: HTTP {status}", status_code=status
            ) from e
        except requests.RequestException as e:
            log.error("HTTP request failed", method=method, url=url, error=str(e))
            raise HttpClientError(f"{method} {url} failed: {e}") from e

        log.debug("HTTP response", method=method, url=url, status_code=response.status_code)
        return response
