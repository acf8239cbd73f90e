"""Helpers shared by the sync and async clients."""

from .assets import build_asset_url, resolve_asset_url

__all__ = ["build_asset_url", "resolve_asset_url"]
