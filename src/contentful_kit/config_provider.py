"""Configuration factory for contentful-kit.

Builds ContentfulConfig instances from explicit values, dictionaries,
environment variables or ``.env`` files, turning validation failures
into ConfigurationError.

Example:
    >>> from contentful_kit import ConfigFactory
    >>> config = ConfigFactory.from_env(search_paths=[".env.local", ".env"])
    >>> config = ConfigFactory.create(space_id="cfexampleapi", access_token="token")
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .exceptions import ConfigurationError
from .models.config import ContentfulConfig

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_PATHS = [".env", ".env.local", "~/.config/contentful/.env"]


class ConfigFactory:
    """Factory methods for creating ContentfulConfig instances."""

    @staticmethod
    def create(space_id: str, access_token: str, **kwargs: Any) -> ContentfulConfig:
        """Create a configuration from explicit values.

        Args:
            space_id: Space identifier
            access_token: Delivery API access token
            **kwargs: Any other ContentfulConfig field

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If a value is invalid
        """
        return ConfigFactory.from_dict(
            {"space_id": space_id, "access_token": access_token, **kwargs}
        )

    @staticmethod
    def from_dict(data: dict[str, Any]) -> ContentfulConfig:
        """Create a configuration from a dictionary (no ``.env`` lookup)."""
        try:
            return ContentfulConfig(_env_file=None, **data)  # type: ignore[call-arg]
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def from_environment_only() -> ContentfulConfig:
        """Create a configuration from ``CONTENTFUL_*`` environment variables only."""
        try:
            return ContentfulConfig(_env_file=None)  # type: ignore[call-arg]
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def from_env_file(env_file: str | Path, required: bool = False) -> ContentfulConfig:
        """Create a configuration from a specific ``.env`` file.

        Environment variables take precedence over values in the file.

        Args:
            env_file: Path to the ``.env`` file
            required: Raise if the file does not exist instead of falling
                back to environment variables

        Raises:
            ConfigurationError: If the file is required but missing, or the
                resulting configuration is invalid
        """
        path = Path(env_file).expanduser()

        if not path.is_file():
            if required:
                raise ConfigurationError(f".env file not found: {path}")
            logger.debug(f".env file {path} not found, using environment variables")
            return ConfigFactory.from_environment_only()

        try:
            return ContentfulConfig(_env_file=path)  # type: ignore[call-arg]
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e

    @staticmethod
    def from_env(
        search_paths: list[str | Path] | None = None, required: bool = False
    ) -> ContentfulConfig:
        """Create a configuration from the first ``.env`` file found.

        Args:
            search_paths: Candidate files in priority order
                (defaults to DEFAULT_SEARCH_PATHS)
            required: Raise if none of the candidates exists

        Raises:
            ConfigurationError: If no file is found and one is required, or
                the configuration is invalid
        """
        paths = search_paths if search_paths is not None else DEFAULT_SEARCH_PATHS

        for candidate in paths:
            path = Path(candidate).expanduser()
            if path.is_file():
                logger.info(f"Loading configuration from {path}")
                return ConfigFactory.from_env_file(path, required=True)

        if required:
            raise ConfigurationError(
                f"No .env file found in search paths: {[str(p) for p in paths]}"
            )

        return ConfigFactory.from_environment_only()

    @staticmethod
    def merge(
        *configs: ContentfulConfig, base: ContentfulConfig | None = None
    ) -> ContentfulConfig:
        """Merge configurations; explicitly set values of later configs win.

        Raises:
            ValueError: If no configuration is given
        """
        layers = [base, *configs] if base is not None else list(configs)
        if not layers:
            raise ValueError("At least one config must be provided")

        merged: dict[str, Any] = layers[0].model_dump()
        for config in layers[1:]:
            merged.update(config.model_dump(include=config.model_fields_set))

        return ConfigFactory.from_dict(merged)


def load_config(env_file: str | Path | None = None, required: bool = False) -> ContentfulConfig:
    """Load configuration from a ``.env`` file or the default search paths."""
    if env_file is not None:
        return ConfigFactory.from_env_file(env_file, required=required)
    return ConfigFactory.from_env(required=required)


def create_config(space_id: str, access_token: str, **kwargs: Any) -> ContentfulConfig:
    """Shorthand for ConfigFactory.create."""
    return ConfigFactory.create(space_id=space_id, access_token=access_token, **kwargs)
