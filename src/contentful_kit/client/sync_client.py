"""Synchronous client for the Content Delivery API.

This module provides blocking I/O operations for scripts and
applications that fetch one resource at a time.
"""

import logging
from pathlib import Path
from typing import Any

import httpx

from ..exceptions import ConnectionError as ContentfulConnectionError
from ..exceptions import TimeoutError as ContentfulTimeoutError
from ..exceptions import TransportError
from ..models.query import DeliveryQuery
from ..models.resources import (
    Asset,
    Assets,
    ContentType,
    ContentTypes,
    Entries,
    Entry,
    File,
    Space,
)
from ..operations.assets import resolve_asset_url
from ..protocols import ConfigProvider, HTTPClient
from .base import BaseClient

logger = logging.getLogger(__name__)


class SyncClient(BaseClient):
    """Synchronous Content Delivery API client.

    Example:
        ```python
        from contentful_kit import SyncClient

        with SyncClient("b4c0n73n7fu1", "cfexampleapi") as client:
            space = client.get_space()
            print(space.name, [locale.code for locale in space.locales])

            cat = client.get_entry("nyancat")
            print(cat.fields["name"])
        ```
    """

    def __init__(
        self,
        access_token: str | None = None,
        space_id: str | None = None,
        *,
        config: ConfigProvider | None = None,
        http_client: HTTPClient | None = None,
    ) -> None:
        """Initialize the synchronous client.

        No network activity happens here.

        Args:
            access_token: Delivery API access token
            space_id: Space identifier
            config: Full configuration, as an alternative to token and space
            http_client: HTTP client (defaults to httpx.Client with pooling)
        """
        super().__init__(access_token, space_id, config=config)

        self._client: HTTPClient | httpx.Client = (
            http_client or self._create_default_http_client()
        )
        self._owns_client = http_client is None

    def _create_default_http_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            limits=httpx.Limits(
                max_connections=self.config.max_connections,
                max_keepalive_connections=self.config.max_connections,
            ),
        )

    def __enter__(self) -> "SyncClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client and release connections.

        An injected client is left open for its owner to close.
        """
        if self._owns_client:
            self._client.close()
        logger.info("Closed synchronous Contentful client")

    # Transport

    def _send(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> bytes:
        """Perform one GET request and return the raw body.

        Raises:
            APIError: If the status is not 200 OK
            TransportError: If the request cannot be built or sent
        """
        logger.debug(f"GET {url} params={params}")

        kwargs: dict[str, Any] = {"params": params, "headers": headers}
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            response = self._client.request("GET", url, **kwargs)
        except httpx.ConnectError as e:
            raise ContentfulConnectionError(f"Failed to connect to {url}: {e}") from e
        except httpx.TimeoutException as e:
            raise ContentfulTimeoutError(f"Request to {url} timed out: {e}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"GET {url} failed: {e}") from e
        except UnicodeEncodeError as e:
            raise TransportError(f"GET {url} could not be built: {e}") from e

        logger.debug(f"Response: {response.status_code}")
        self._check_response(response, url)
        return response.content

    def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> bytes:
        """Perform an authenticated GET and return the raw response body.

        Args:
            url: Fully qualified URL
            params: URL query parameters
            timeout: Per-call timeout in seconds

        Returns:
            Response body bytes
        """
        return self._send(url, params=params, headers=self._get_headers(), timeout=timeout)

    # Resources

    def get_space(self, *, timeout: float | None = None) -> Space:
        """Fetch the configured space with its locales."""
        return self._decode(self.get(self._space_url(), timeout=timeout), Space)

    def get_content_types(
        self, query: DeliveryQuery | None = None, *, timeout: float | None = None
    ) -> ContentTypes:
        """Fetch one page of content types.

        Args:
            query: Optional paging/order/filter parameters
            timeout: Per-call timeout in seconds
        """
        body = self.get(
            self._resource_url("content_types"),
            params=self._query_params(query),
            timeout=timeout,
        )
        return self._decode(body, ContentTypes)

    def get_content_type(
        self, content_type_id: str, *, timeout: float | None = None
    ) -> ContentType:
        """Fetch a single content type.

        Raises:
            NotFoundError: If the content type does not exist
        """
        body = self.get(
            self._resource_url("content_types", content_type_id), timeout=timeout
        )
        return self._decode(body, ContentType)

    def get_entries(
        self, query: DeliveryQuery | None = None, *, timeout: float | None = None
    ) -> Entries:
        """Fetch one page of entries.

        Examples:
            >>> from contentful_kit import DeliveryQuery
            >>> page = client.get_entries(DeliveryQuery().content_type("cat").paginate(limit=10))
            >>> page.total
            3
        """
        body = self.get(
            self._resource_url("entries"), params=self._query_params(query), timeout=timeout
        )
        return self._decode(body, Entries)

    def get_entry(self, entry_id: str, *, timeout: float | None = None) -> Entry:
        """Fetch a single entry. Its fields are returned undecoded."""
        body = self.get(self._resource_url("entries", entry_id), timeout=timeout)
        return self._decode(body, Entry)

    def get_assets(
        self, query: DeliveryQuery | None = None, *, timeout: float | None = None
    ) -> Assets:
        """Fetch one page of assets."""
        body = self.get(
            self._resource_url("assets"), params=self._query_params(query), timeout=timeout
        )
        return self._decode(body, Assets)

    def get_asset(self, asset_id: str, *, timeout: float | None = None) -> Asset:
        """Fetch a single asset."""
        body = self.get(self._resource_url("assets", asset_id), timeout=timeout)
        return self._decode(body, Asset)

    # Files

    def download_file(
        self,
        source: Asset | File | str,
        save_path: str | Path | None = None,
        *,
        timeout: float | None = None,
    ) -> bytes:
        """Download the binary behind an asset.

        Asset CDN URLs are public, so no Authorization header is sent.

        Args:
            source: Asset, File descriptor or file URL
            save_path: Optional path to write the content to
            timeout: Per-call timeout in seconds

        Returns:
            File content as bytes

        Examples:
            >>> asset = client.get_asset("nyancat")
            >>> content = client.download_file(asset, save_path="nyancat.png")
        """
        url = resolve_asset_url(source)
        content = self._send(url, timeout=timeout)

        if save_path:
            Path(save_path).write_bytes(content)
            logger.info(f"Downloaded {len(content)} bytes to {save_path}")

        return content
