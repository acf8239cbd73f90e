"""contentful-kit: A typed Python client for the Contentful Content Delivery API.

This package provides read-only access to a Contentful space:
- Synchronous and asynchronous clients
- Space, content type, entry and asset fetchers
- Immutable Pydantic models decoded from the API's JSON
- Query builder for paging, ordering and filtering collections
- Configuration from arguments, environment variables or .env files
"""

from .__version__ import __version__
from .client import AsyncClient, SyncClient
from .config_provider import ConfigFactory, create_config, load_config
from .exceptions import (
    AccessDeniedError,
    APIError,
    AuthenticationError,
    ConfigurationError,
    ContentfulError,
    DecodeError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
)
from .models import (
    Asset,
    Assets,
    ContentfulConfig,
    ContentType,
    ContentTypeField,
    ContentTypes,
    DeliveryQuery,
    Entries,
    Entry,
    File,
    Locale,
    Space,
    SystemProperties,
)
from .operations import build_asset_url
from .protocols import AsyncHTTPClient, ConfigProvider, HTTPClient

__all__ = [
    "__version__",
    # Clients
    "SyncClient",
    "AsyncClient",
    # Configuration
    "ContentfulConfig",
    "ConfigFactory",
    "load_config",
    "create_config",
    # Query
    "DeliveryQuery",
    # Resources
    "SystemProperties",
    "Locale",
    "Space",
    "ContentTypeField",
    "ContentType",
    "ContentTypes",
    "Entry",
    "Entries",
    "File",
    "Asset",
    "Assets",
    # Utilities
    "build_asset_url",
    # Protocols (for dependency injection)
    "ConfigProvider",
    "HTTPClient",
    "AsyncHTTPClient",
    # Exceptions
    "ContentfulError",
    "ConfigurationError",
    "TransportError",
    "APIError",
    "AuthenticationError",
    "AccessDeniedError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "DecodeError",
]
