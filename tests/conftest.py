"""Pytest configuration and shared fixtures."""

import os

import pytest

from contentful_kit import ContentfulConfig

SPACE_ID = "cfexampleapi"
ACCESS_TOKEN = "b4c0n73n7fu1"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add the --e2e option."""
    parser.addoption(
        "--e2e",
        action="store_true",
        default=False,
        help="Run end-to-end tests against the live Delivery API",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the e2e marker."""
    config.addinivalue_line("markers", "e2e: marks test as e2e (requires network access)")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip e2e tests unless explicitly enabled."""
    run_e2e = config.getoption("--e2e") or os.environ.get("RUN_E2E_TESTS", "").lower() == "true"

    if not run_e2e:
        skip_e2e = pytest.mark.skip(
            reason="E2E tests disabled. Use --e2e flag or RUN_E2E_TESTS=true"
        )
        for item in items:
            if "e2e" in item.keywords:
                item.add_marker(skip_e2e)


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Keep CONTENTFUL_* variables and stray .env files out of the tests."""
    for key in list(os.environ):
        if key.startswith("CONTENTFUL_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def contentful_config() -> ContentfulConfig:
    """Create a test configuration for the example space."""
    return ContentfulConfig(space_id=SPACE_ID, access_token=ACCESS_TOKEN)


def _sys(resource_type: str, resource_id: str, **extra) -> dict:
    return {
        "space": {"sys": {"type": "Link", "linkType": "Space", "id": SPACE_ID}},
        "type": resource_type,
        "id": resource_id,
        "revision": 5,
        "createdAt": "2013-06-27T22:46:19.513Z",
        "updatedAt": "2013-09-04T09:19:39.027Z",
        **extra,
    }


@pytest.fixture
def space_response() -> dict:
    """Space document with two locales."""
    return {
        "sys": {"type": "Space", "id": SPACE_ID},
        "name": "Contentful Example API",
        "locales": [
            {"code": "en-US", "default": True, "name": "English"},
            {"code": "tlh", "default": False, "name": "Klingon"},
        ],
    }


@pytest.fixture
def content_type_response() -> dict:
    """The "cat" content type."""
    return {
        "sys": _sys("ContentType", "cat"),
        "name": "Cat",
        "description": "Meow.",
        "displayField": "name",
        "fields": [
            {"id": "name", "name": "Name", "type": "Text", "required": True, "localized": True},
            {
                "id": "likes",
                "name": "Likes",
                "type": "Array",
                "items": {"type": "Symbol"},
                "required": False,
                "localized": False,
            },
            {
                "id": "bestFriend",
                "name": "Best Friend",
                "type": "Link",
                "linkType": "Entry",
                "required": False,
                "localized": False,
            },
            {"id": "lives", "name": "Lives left", "type": "Integer"},
        ],
    }


@pytest.fixture
def content_types_response(content_type_response: dict) -> dict:
    """Collection with the "cat" content type."""
    return {
        "sys": {"type": "Array"},
        "total": 1,
        "skip": 0,
        "limit": 100,
        "items": [content_type_response],
    }


def make_entry(entry_id: str, name: str) -> dict:
    """Build an entry document of the "cat" content type."""
    return {
        "sys": _sys(
            "Entry",
            entry_id,
            contentType={"sys": {"type": "Link", "linkType": "ContentType", "id": "cat"}},
            locale="en-US",
        ),
        "fields": {
            "name": name,
            "likes": ["rainbows", "fish"],
            "bestFriend": {"sys": {"type": "Link", "linkType": "Entry", "id": "happycat"}},
            "lives": 1337,
        },
    }


@pytest.fixture
def entry_factory():
    """Factory for entry documents with a given id and name."""
    return make_entry


@pytest.fixture
def entry_response() -> dict:
    """The "nyancat" entry."""
    return make_entry("nyancat", "Nyan Cat")


@pytest.fixture
def entries_response() -> dict:
    """Collection with two entries."""
    return {
        "sys": {"type": "Array"},
        "total": 3,
        "skip": 0,
        "limit": 2,
        "items": [make_entry("nyancat", "Nyan Cat"), make_entry("happycat", "Happy Cat")],
    }


@pytest.fixture
def asset_response() -> dict:
    """The "nyancat" asset."""
    return {
        "sys": _sys("Asset", "nyancat", locale="en-US"),
        "fields": {
            "title": "Nyan Cat",
            "file": {
                "fileName": "Nyan_cat_250px_frame.png",
                "contentType": "image/png",
                "details": {"image": {"width": 250, "height": 250}, "size": 12273},
                "url": "//images.ctfassets.net/cfexampleapi/4gp6taAwW4CmSgumq2ekUm/nyan_cat.png",
            },
        },
    }


@pytest.fixture
def assets_response(asset_response: dict) -> dict:
    """Collection with one asset."""
    return {
        "sys": {"type": "Array"},
        "total": 1,
        "skip": 0,
        "limit": 100,
        "items": [asset_response],
    }
