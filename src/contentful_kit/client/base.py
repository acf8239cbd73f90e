"""Base client for the Content Delivery API.

This module holds everything the sync and async clients share:
endpoint URL construction, authentication headers, status checking and
decoding of response bodies into resource models.
"""

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from ..exceptions import (
    AccessDeniedError,
    APIError,
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    NotFoundError,
    RateLimitError,
    ServerError,
)
from ..models.config import ContentfulConfig
from ..models.query import DeliveryQuery
from ..protocols import ConfigProvider

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseClient:
    """Shared logic for SyncClient and AsyncClient.

    Holds only immutable configuration; nothing is cached between calls.

    Not intended to be used directly - use SyncClient or AsyncClient instead.
    """

    def __init__(
        self,
        access_token: str | None = None,
        space_id: str | None = None,
        *,
        config: ConfigProvider | None = None,
    ) -> None:
        """Initialize the base client.

        Args:
            access_token: Delivery API access token
            space_id: Space identifier
            config: Full configuration, as an alternative to token and space

        Raises:
            ConfigurationError: If both or neither of config and
                token/space are given, or the values are invalid
        """
        if config is None:
            if not access_token or not space_id:
                raise ConfigurationError(
                    "Either config or both access_token and space_id are required"
                )
            # Explicit credentials target the default host; CONTENTFUL_* variables
            # only apply through ConfigFactory.
            defaults = {
                name: field.default
                for name, field in ContentfulConfig.model_fields.items()
                if not field.is_required()
            }
            try:
                config = ContentfulConfig(
                    _env_file=None,  # type: ignore[call-arg]
                    **defaults,
                    access_token=access_token,
                    space_id=space_id,
                )
            except ValidationError as e:
                raise ConfigurationError(f"Invalid configuration: {e}") from e
        elif access_token is not None or space_id is not None:
            raise ConfigurationError("Pass either config or access_token/space_id, not both")

        self.config = config
        self.base_url = config.get_base_url()
        self.space_id = config.space_id

        logger.info(f"Initialized Contentful client for space {self.space_id} at {self.base_url}")

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.get_access_token()}",
            "Accept": "application/json",
        }

    # Endpoint URLs

    def _space_url(self) -> str:
        url = f"{self.base_url}/spaces/{quote(self.space_id, safe='')}"
        if self.config.environment:
            url = f"{url}/environments/{quote(self.config.environment, safe='')}"
        return url

    def _resource_url(self, resource: str, resource_id: str | None = None) -> str:
        """Build the URL of a collection or of one item inside it.

        Args:
            resource: Collection path segment (``content_types``, ``entries``, ``assets``)
            resource_id: Optional item id

        Raises:
            ValueError: If resource_id is given but empty
        """
        url = f"{self._space_url()}/{resource}"
        if resource_id is None:
            return url
        if not resource_id:
            raise ValueError(f"{resource} id cannot be empty")
        return f"{url}/{quote(resource_id, safe='')}"

    @staticmethod
    def _query_params(query: DeliveryQuery | None) -> dict[str, Any] | None:
        if query is None:
            return None
        return query.to_query_params() or None

    # Response handling

    def _check_response(self, response: httpx.Response, url: str) -> None:
        """Raise the matching APIError unless the status is 200 OK.

        The body is never read here.
        """
        status_code = response.status_code
        if status_code == 200:
            return

        status = f"{status_code} {response.reason_phrase}".strip()
        message = f"{status}: GET {url}"

        if status_code == 401:
            raise AuthenticationError(message, status_code, status=status, url=url)
        elif status_code == 403:
            raise AccessDeniedError(message, status_code, status=status, url=url)
        elif status_code == 404:
            raise NotFoundError(message, status_code, status=status, url=url)
        elif status_code == 429:
            raise RateLimitError(
                message,
                status_code,
                status=status,
                url=url,
                retry_after=self._parse_retry_after(response),
            )
        elif 500 <= status_code < 600:
            raise ServerError(message, status_code, status=status, url=url)
        else:
            raise APIError(message, status_code, status=status, url=url)

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> float | None:
        header = response.headers.get("X-Contentful-RateLimit-Reset") or response.headers.get(
            "Retry-After"
        )
        if header is None:
            return None
        try:
            return float(header)
        except ValueError:
            return None

    def _decode(self, body: bytes, model: type[ModelT]) -> ModelT:
        """Decode a JSON body into a resource model.

        Decoding is strict: a quoted number or a numeric flag is a type
        mismatch rather than a value to coerce.

        Raises:
            DecodeError: If the body is not valid JSON or does not match
                the model
        """
        try:
            return model.model_validate_json(body, strict=True)
        except ValidationError as e:
            logger.debug(f"Failed to decode {model.__name__}: {e}")
            raise DecodeError(
                f"Could not decode response as {model.__name__}: {e}",
                model=model.__name__,
                details={"errors": e.errors(include_url=False)},
            ) from e
