"""Tests for filename derivation."""

import re

import pytest

from jekyll_studio.core.errors import InvalidEntryError
from jekyll_studio.core.naming import (
    HTML_ONLY,
    MARKUP,
    check_entry_name,
    post_filename,
    slugify,
    with_extension,
)


class TestSlugify:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Hello, World!", "hello-world"),
            ("My First Post", "my-first-post"),
            ("  Leading and trailing  ", "leading-and-trailing"),
            ("Tabs\tand\nnewlines", "tabs-and-newlines"),
            ("Already-hyphenated title", "already-hyphenated-title"),
            ("Café Ünïcode", "caf-ncode"),
            ("2024 Roadmap", "2024-roadmap"),
        ],
    )
    def test_examples(self, text: str, expected: str) -> None:
        assert slugify(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["Hello, World!", "  What's   new?  ", "Q&A: Part 2", "Price: $10 (today)", "A  B   C"],
    )
    def test_output_is_lowercase_digits_and_hyphens(self, text: str) -> None:
        slug = slugify(text)
        assert re.fullmatch(r"[a-z0-9-]+", slug)
        assert not slug.startswith("-")
        assert not slug.endswith("-")
        assert "--" not in slug

    @pytest.mark.parametrize("text", ["", "   ", "!!!", "???  ..."])
    def test_empty_results(self, text: str) -> None:
        assert slugify(text) == ""


class TestWithExtension:
    def test_appends_default(self) -> None:
        assert with_extension("about", MARKUP, ".html") == "about.html"

    def test_keeps_allowed_extension(self) -> None:
        assert with_extension("about.md", MARKUP, ".html") == "about.md"
        assert with_extension("about.html", MARKUP, ".md") == "about.html"

    def test_markdown_not_allowed_for_layouts(self) -> None:
        assert with_extension("default.md", HTML_ONLY, ".html") == "default.md.html"

    def test_case_sensitive(self) -> None:
        assert with_extension("About.HTML", MARKUP, ".html") == "About.HTML.html"

    def test_collection_default(self) -> None:
        assert with_extension("mug", MARKUP, ".md") == "mug.md"


class TestPostFilename:
    def test_canonical_name(self) -> None:
        assert post_filename("2024-03-01", "My First Post") == "2024-03-01-my-first-post.md"

    def test_idempotent(self) -> None:
        first = post_filename("2024-03-01", "My First Post")
        assert post_filename("2024-03-01", "My First Post") == first

    def test_malformed_date_is_opaque(self) -> None:
        assert post_filename("2024-13-45", "Odd Date") == "2024-13-45-odd-date.md"

    @pytest.mark.parametrize("title", ["", "   ", "!!!"])
    def test_unusable_title(self, title: str) -> None:
        with pytest.raises(InvalidEntryError):
            post_filename("2024-03-01", title)

    @pytest.mark.parametrize("date", ["", "2024/03/01", "..\\2024", "2024\x0003"])
    def test_unusable_date(self, date: str) -> None:
        with pytest.raises(InvalidEntryError):
            post_filename(date, "Title")


class TestCheckEntryName:
    def test_plain_name_passes(self) -> None:
        assert check_entry_name("default", "layout") == "default"

    @pytest.mark.parametrize("name", ["", "  ", ".", "..", "a/b", "..\\evil", "a\x00b"])
    def test_rejected(self, name: str) -> None:
        with pytest.raises(InvalidEntryError, match="layout"):
            check_entry_name(name, "layout")
