"""Client classes for the Content Delivery API."""

from .async_client import AsyncClient
from .base import BaseClient
from .sync_client import SyncClient

__all__ = ["BaseClient", "SyncClient", "AsyncClient"]
