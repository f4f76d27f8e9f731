"""
Filename derivation for generated site files.

Turns titles and logical names into the conventional Jekyll filenames:
slugs for posts, extension inference for layouts, pages and collection
items.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .errors import InvalidEntryError

HTML_ONLY = (".html",)
MARKUP = (".html", ".md")

_UNSAFE_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_FORBIDDEN_CHARS = ("/", "\\", "\x00")


def slugify(text: str) -> str:
    """
    Convert arbitrary title text to a filesystem-safe slug.

    Args:
        text: Title text

    Returns:
        Lowercase slug, possibly empty

    Examples:
        "Hello, World!" -> "hello-world"
        "  My First   Post " -> "my-first-post"
        "!!!" -> ""
    """
    text = _UNSAFE_CHARS.sub("", text.lower())
    return _WHITESPACE.sub("-", text.strip())


def with_extension(name: str, allowed: Iterable[str], default: str) -> str:
    """
    Append ``default`` unless ``name`` already ends with an allowed extension.

    The check is case-sensitive: "About.HTML" gets ".html" appended.

    Examples:
        with_extension("about", (".html", ".md"), ".html") -> "about.html"
        with_extension("about.md", (".html", ".md"), ".html") -> "about.md"
    """
    if name.endswith(tuple(allowed)):
        return name
    return f"{name}{default}"


def post_filename(date: str, title: str) -> str:
    """
    Build the canonical ``_posts`` filename for a post.

    Used both for bulk site creation and for adding a single post, so the
    two paths always agree.

    Raises:
        InvalidEntryError: If the title slugifies to nothing or the date is
            empty or contains a path separator or NUL
    """
    slug = slugify(title)
    if not slug:
        raise InvalidEntryError(f"Post title {title!r} does not produce a usable filename")
    if not date.strip() or any(char in date for char in _FORBIDDEN_CHARS):
        raise InvalidEntryError(f"Post date {date!r} cannot be used in a filename")
    return f"{date}-{slug}.md"


def check_entry_name(name: str, kind: str) -> str:
    """
    Validate a logical entry name before it becomes part of a path.

    Names are used as-is (not slugified) but must stay inside their
    category directory.

    Args:
        name: Logical name from the site document
        kind: Category label for error messages (e.g. "layout")

    Returns:
        The name, unchanged

    Raises:
        InvalidEntryError: If the name is blank, a dot-name, or contains
            a path separator or NUL
    """
    if not name.strip():
        raise InvalidEntryError(f"Empty {kind} name")
    if name in (".", "..") or any(char in name for char in _FORBIDDEN_CHARS):
        raise InvalidEntryError(f"Invalid {kind} name {name!r}")
    return name
