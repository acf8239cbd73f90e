"""Protocols for dependency injection.

The clients depend on these structural interfaces rather than on
concrete classes, so tests and callers can substitute their own
configuration objects and HTTP transports.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigProvider(Protocol):
    """Anything that can configure a client."""

    space_id: str
    environment: str | None

    def get_base_url(self) -> str: ...

    def get_access_token(self) -> str: ...

    @property
    def timeout(self) -> float: ...

    @property
    def max_connections(self) -> int: ...

    @property
    def verify_ssl(self) -> bool: ...


@runtime_checkable
class HTTPClient(Protocol):
    """Synchronous HTTP transport (httpx.Client compatible)."""

    def request(self, method: str, url: str, **kwargs: Any) -> Any: ...

    def close(self) -> None: ...


@runtime_checkable
class AsyncHTTPClient(Protocol):
    """Asynchronous HTTP transport (httpx.AsyncClient compatible)."""

    async def request(self, method: str, url: str, **kwargs: Any) -> Any: ...

    async def aclose(self) -> None: ...
