#!/usr/bin/env python3
"""Browse a Contentful Space

A small example that prints a space's locales and content model, then
pages through its entries and downloads the first asset.

Usage:
    1. Update SPACE_ID and ACCESS_TOKEN below (defaults to the public example space)
    2. Run: python browse_space.py

Environment Variables (optional):
    CONTENTFUL_SPACE_ID: Override SPACE_ID
    CONTENTFUL_ACCESS_TOKEN: Override ACCESS_TOKEN
"""

import os
from pathlib import Path

from contentful_kit import DeliveryQuery, SyncClient
from contentful_kit.exceptions import ContentfulError

# ============================================================================
# CONFIGURATION - Update these values or use environment variables
# ============================================================================

SPACE_ID = os.getenv("CONTENTFUL_SPACE_ID", "cfexampleapi")
ACCESS_TOKEN = os.getenv("CONTENTFUL_ACCESS_TOKEN", "b4c0n73n7fu1")

PAGE_SIZE = 5
DOWNLOAD_DIR = Path("./downloads")

# ============================================================================


def print_content_model(client: SyncClient) -> None:
    """Print every content type with its fields."""
    content_types = client.get_content_types()
    print(f"\n{content_types.total} content types:")

    for content_type in content_types.items:
        print(f"  {content_type.name} ({content_type.sys.id})")
        for field in content_type.fields:
            kind = field.type
            if field.link_type:
                kind = f"{kind} -> {field.link_type}"
            elif field.items.type:
                kind = f"{kind} of {field.items.type}"
            flags = "required" if field.required else ""
            print(f"    - {field.id}: {kind} {flags}".rstrip())


def print_entries(client: SyncClient) -> None:
    """Page through all entries, PAGE_SIZE at a time."""
    skip = 0
    while True:
        page = client.get_entries(
            DeliveryQuery().order_by("sys.createdAt").paginate(skip=skip, limit=PAGE_SIZE)
        )
        for entry in page.items:
            content_type = entry.sys.content_type["sys"]["id"] if entry.sys.content_type else "?"
            print(f"  [{content_type}] {entry.sys.id} (rev {entry.sys.revision})")

        skip += len(page.items)
        if not page.items or skip >= page.total:
            break


def main() -> None:
    """Print a summary of the configured space."""
    print("Browsing Contentful space")
    print("=" * 60)

    try:
        with SyncClient(ACCESS_TOKEN, SPACE_ID) as client:
            space = client.get_space()
            print(f"Space: {space.name} ({space.sys.id})")
            print(f"Locales: {', '.join(locale.code for locale in space.locales)}")

            print_content_model(client)

            print("\nEntries:")
            print_entries(client)

            assets = client.get_assets(DeliveryQuery().paginate(limit=1))
            if assets.items:
                asset = assets.items[0]
                DOWNLOAD_DIR.mkdir(exist_ok=True)
                target = DOWNLOAD_DIR / (asset.file.file_name or asset.sys.id)
                content = client.download_file(asset, save_path=target)
                print(f"\nDownloaded {asset.title!r}: {len(content)} bytes to {target}")
    except ContentfulError as e:
        print(f"Request failed: {e}")


if __name__ == "__main__":
    main()
