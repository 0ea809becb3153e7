"""Logger capability consumed by the orchestrator and the adapters."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    """Leveled, structured logger.

    A structlog bound logger satisfies this protocol, so does any object
    exposing the three methods below.
    """

    def info(self, event: str, **kwargs: Any) -> Any: ...

    def error(self, event: str, **kwargs: Any) -> Any: ...

    def debug(self, event: str, **kwargs: Any) -> Any: ...
