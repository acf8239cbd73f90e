"""Version information for contentful-kit."""

__version__ = "0.1.0"
