"""Asset file URL utilities.

The Delivery API returns file URLs without a scheme
(``//images.ctfassets.net/...``). These helpers turn them into
absolute URLs the HTTP client can fetch.
"""

from urllib.parse import urlparse

from contentful_kit.models.resources import Asset, File


def build_asset_url(url: str, scheme: str = "https") -> str:
    """Make an asset file URL absolute.

    Args:
        url: File URL as returned by the API (protocol-relative or absolute)
        scheme: Scheme to use for protocol-relative URLs

    Returns:
        Absolute URL

    Raises:
        ValueError: If the URL is empty or has no host

    Example:
        >>> build_asset_url("//images.ctfassets.net/abc/cat.jpg")
        'https://images.ctfassets.net/abc/cat.jpg'
    """
    if not url:
        raise ValueError("Asset URL cannot be empty")

    if url.startswith("//"):
        url = f"{scheme}:{url}"

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Not an absolute asset URL: {url}")

    return url


def resolve_asset_url(source: Asset | File | str) -> str:
    """Get the absolute download URL of an asset, a file descriptor or a raw URL."""
    if isinstance(source, Asset):
        url = source.file.url
    elif isinstance(source, File):
        url = source.url
    else:
        url = source
    return build_asset_url(url)
