"""Data models for contentful-kit."""

from .config import DEFAULT_BASE_URL, ContentfulConfig
from .query import DeliveryQuery
from .resources import (
    Asset,
    AssetFields,
    Assets,
    Collection,
    ContentType,
    ContentTypeField,
    ContentTypes,
    Entries,
    Entry,
    FieldItemType,
    File,
    Locale,
    Space,
    SystemProperties,
)

__all__ = [
    # Configuration
    "ContentfulConfig",
    "DEFAULT_BASE_URL",
    # Query
    "DeliveryQuery",
    # Resources
    "SystemProperties",
    "Locale",
    "Space",
    "FieldItemType",
    "ContentTypeField",
    "ContentType",
    "Entry",
    "File",
    "AssetFields",
    "Asset",
    "Collection",
    "ContentTypes",
    "Entries",
    "Assets",
]
