"""Shared pytest fixtures for Jekyll Studio tests."""

from pathlib import Path

import pytest

from jekyll_studio.core.ir import SiteDocument, load_site_document


def _snapshot(root: Path) -> dict[str, str | None]:
    """Map every path under root to its text content (None for directories)."""
    return {
        str(path.relative_to(root)): None if path.is_dir() else path.read_text(encoding="utf-8")
        for path in sorted(root.rglob("*"))
    }


@pytest.fixture
def snapshot_tree():
    """Return a function capturing a directory tree for equality checks."""
    return _snapshot


@pytest.fixture
def minimal_payload() -> dict:
    """One layout, one post, CSS-only assets."""
    return {
        "name": "coffee-blog",
        "title": "Coffee Blog",
        "description": "Notes from behind the counter.",
        "layouts": [{"name": "default", "content": "<html>{{ content }}</html>"}],
        "posts": [
            {
                "title": "My First Post",
                "date": "2024-03-01",
                "content": "---\nlayout: default\n---\nHello!",
            }
        ],
        "assets": {"css": "body { color: brown; }"},
    }


@pytest.fixture
def minimal_document(minimal_payload: dict) -> SiteDocument:
    return load_site_document(minimal_payload)


@pytest.fixture
def full_document() -> SiteDocument:
    """A document using every category."""
    return load_site_document(
        {
            "name": "shop",
            "title": "The Shop",
            "description": "We sell things.",
            "config": {
                "title": "The Shop",
                "plugins": ["jekyll-feed", "jekyll-seo-tag"],
                "collections": {"products": {"output": True}},
            },
            "layouts": [
                {"name": "default", "content": "<html>{{ content }}</html>"},
                {"name": "post.html", "content": "<article>{{ content }}</article>"},
            ],
            "includes": [{"name": "header", "content": "<header>Shop</header>"}],
            "posts": [
                {"title": "Grand Opening!", "date": "2024-01-15", "content": "We are open."},
                {"title": "Winter Sale", "date": "2024-02-01", "content": "Everything 10% off."},
            ],
            "pages": [
                {"name": "about", "content": "<h1>About</h1>"},
                {"name": "contact.md", "content": "# Contact"},
            ],
            "collections": {
                "products": [
                    {"name": "mug", "content": "---\nprice: 12\n---\nA mug."},
                    {"name": "poster.html", "content": "<p>A poster.</p>"},
                ]
            },
            "assets": {"css": "body {}", "js": "console.log('hi');"},
        }
    )
