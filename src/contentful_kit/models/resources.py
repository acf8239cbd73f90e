"""Delivery API resource models.

Pydantic models for the JSON documents returned by the Content Delivery
API. All models are frozen, accept the API's camelCase keys and ignore
keys they do not know about.

Payloads whose shape depends on a space's own content model (entry
fields, file details, links in ``sys``) are kept as plain JSON values.
"""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

_model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class SystemProperties(BaseModel):
    """Metadata the CMS attaches to every resource (``sys``)."""

    model_config = _model_config

    space: Any = None
    type: str = ""
    id: str = ""
    content_type: Any = Field(None, alias="contentType")
    revision: int = 0
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


class Locale(BaseModel):
    """A language variant configured for a space."""

    model_config = _model_config

    code: str = ""
    name: str = ""
    default: bool = False


class Space(BaseModel):
    """Top-level container of content types, entries and assets."""

    model_config = _model_config

    sys: SystemProperties = Field(default_factory=SystemProperties)
    name: str = ""
    locales: list[Locale] = Field(default_factory=list)

    @property
    def default_locale(self) -> Locale | None:
        """Return the locale flagged as default, if any."""
        for locale in self.locales:
            if locale.default:
                return locale
        return None


class FieldItemType(BaseModel):
    """Element type of an array field."""

    model_config = _model_config

    type: str = ""


class ContentTypeField(BaseModel):
    """A single field definition of a content type.

    Attributes:
        id: Field identifier used as key in entry fields
        name: Display name
        type: Type tag (Symbol, Text, Integer, Link, Array, ...)
        link_type: Kind of resource a Link field points to (Entry, Asset)
        items: Element type for Array fields
        required: Whether entries must provide a value
        localized: Whether the value varies per locale
    """

    model_config = _model_config

    id: str = ""
    name: str = ""
    type: str = ""
    link_type: str = Field("", alias="linkType")
    items: FieldItemType = Field(default_factory=FieldItemType)
    required: bool = False
    localized: bool = False


class ContentType(BaseModel):
    """Schema describing the shape of entries of one type."""

    model_config = _model_config

    sys: SystemProperties = Field(default_factory=SystemProperties)
    name: str = ""
    description: str = ""
    fields: list[ContentTypeField] = Field(default_factory=list)

    def get_field(self, field_id: str) -> ContentTypeField | None:
        """Look up a field definition by id.

        Args:
            field_id: Field identifier

        Returns:
            The field definition or None if the content type has no such field
        """
        for field in self.fields:
            if field.id == field_id:
                return field
        return None


class Entry(BaseModel):
    """A piece of content. ``fields`` is passed through undecoded."""

    model_config = _model_config

    sys: SystemProperties = Field(default_factory=SystemProperties)
    fields: Any = None


class File(BaseModel):
    """Binary file descriptor of an asset."""

    model_config = _model_config

    file_name: str = Field("", alias="fileName")
    content_type: str = Field("", alias="contentType")
    url: str = ""
    details: Any = None


class AssetFields(BaseModel):
    """Title and file of an asset."""

    model_config = _model_config

    title: str = ""
    file: File = Field(default_factory=File)


class Asset(BaseModel):
    """A binary resource (image, document, ...) with metadata."""

    model_config = _model_config

    sys: SystemProperties = Field(default_factory=SystemProperties)
    fields: AssetFields = Field(default_factory=AssetFields)

    @property
    def title(self) -> str:
        """Asset title (``fields.title``)."""
        return self.fields.title

    @property
    def file(self) -> File:
        """File descriptor (``fields.file``)."""
        return self.fields.file


T = TypeVar("T")


class Collection(BaseModel, Generic[T]):
    """One page of a collection endpoint.

    The client never follows pages itself; pass ``skip``/``limit``
    through a DeliveryQuery to request the next one.
    """

    model_config = _model_config

    sys: SystemProperties = Field(default_factory=SystemProperties)
    total: int = 0
    skip: int = 0
    limit: int = 0
    items: list[T] = Field(default_factory=list)

    @property
    def has_more(self) -> bool:
        """Whether items exist beyond this page."""
        return self.skip + len(self.items) < self.total


class ContentTypes(Collection[ContentType]):
    """Page of content types."""


class Entries(Collection[Entry]):
    """Page of entries."""


class Assets(Collection[Asset]):
    """Page of assets."""
