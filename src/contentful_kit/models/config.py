"""Configuration models for contentful-kit.

Settings can be passed explicitly or loaded from ``CONTENTFUL_*``
environment variables and ``.env`` files through pydantic-settings.
"""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://cdn.contentful.com"


class ContentfulConfig(BaseSettings):
    """Configuration for a Content Delivery API client.

    Example:
        >>> config = ContentfulConfig(space_id="cfexampleapi", access_token="b4c0n73n7fu1")
        >>> config.get_base_url()
        'https://cdn.contentful.com'
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTENTFUL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    space_id: str = Field(..., min_length=1, description="Space identifier")
    access_token: SecretStr = Field(..., description="Delivery API access token")
    base_url: str = Field(DEFAULT_BASE_URL, description="API host, without /spaces")
    environment: str | None = Field(
        None, description="Environment id; the space's master environment when unset"
    )
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    max_connections: int = Field(10, gt=0, description="Connection pool size")
    verify_ssl: bool = Field(True, description="Verify TLS certificates")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize the base URL so path segments can be appended."""
        return value.rstrip("/")

    @field_validator("access_token")
    @classmethod
    def reject_blank_token(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("access_token cannot be empty")
        return value

    def get_base_url(self) -> str:
        return self.base_url

    def get_access_token(self) -> str:
        """Return the raw access token."""
        return self.access_token.get_secret_value()

