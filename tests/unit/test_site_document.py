"""Tests for site structure document validation."""

import json
from pathlib import Path

import pytest

from jekyll_studio.core.errors import DocumentValidationError
from jekyll_studio.core.ir import (
    DEFAULT_SITE_NAME,
    SiteDocument,
    load_site_document,
    load_site_document_file,
)


class TestLoadSiteDocument:
    def test_empty_document_is_valid(self) -> None:
        document = load_site_document({})
        assert document.layouts is None
        assert document.posts is None
        assert document.assets is None
        assert document.directory_name == DEFAULT_SITE_NAME

    def test_name_is_used_for_directory(self, minimal_document: SiteDocument) -> None:
        assert minimal_document.directory_name == "coffee-blog"

    def test_entries_are_typed(self, minimal_document: SiteDocument) -> None:
        assert minimal_document.layouts is not None
        assert minimal_document.layouts[0].name == "default"
        assert minimal_document.posts is not None
        assert minimal_document.posts[0].date == "2024-03-01"

    def test_collections_keep_keys(self, full_document: SiteDocument) -> None:
        assert full_document.collections is not None
        assert list(full_document.collections) == ["products"]
        assert [item.name for item in full_document.collections["products"]] == [
            "mug",
            "poster.html",
        ]

    def test_content_defaults_to_empty(self) -> None:
        document = load_site_document({"pages": [{"name": "about"}]})
        assert document.pages is not None
        assert document.pages[0].content == ""

    def test_unknown_keys_are_ignored(self) -> None:
        document = load_site_document({"name": "x", "generatedBy": "model"})
        assert document.name == "x"

    def test_missing_required_field(self) -> None:
        with pytest.raises(DocumentValidationError, match=r"posts\.0\.date"):
            load_site_document({"posts": [{"title": "No date"}]})

    def test_wrong_type(self) -> None:
        with pytest.raises(DocumentValidationError, match="layouts"):
            load_site_document({"layouts": {"name": "default"}})

    def test_not_a_mapping(self) -> None:
        with pytest.raises(DocumentValidationError, match="must be an object"):
            load_site_document(["not", "a", "dict"])  # type: ignore[arg-type]


class TestAssetsPresence:
    def test_js_absent(self) -> None:
        document = load_site_document({"assets": {"css": "a {}"}})
        assert document.assets is not None
        assert document.assets.has_css
        assert not document.assets.has_js

    @pytest.mark.parametrize("value", [None, ""])
    def test_js_present_but_empty(self, value: str | None) -> None:
        document = load_site_document({"assets": {"js": value}})
        assert document.assets is not None
        assert document.assets.has_js
        assert not document.assets.has_css


class TestLoadSiteDocumentFile:
    def test_json(self, tmp_path: Path, minimal_payload: dict) -> None:
        path = tmp_path / "site.json"
        path.write_text(json.dumps(minimal_payload))
        assert load_site_document_file(path).name == "coffee-blog"

    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "site.yaml"
        path.write_text(
            "name: yaml-site\n"
            "pages:\n"
            "  - name: about\n"
            "    content: '# About'\n"
        )
        document = load_site_document_file(path)
        assert document.name == "yaml-site"
        assert document.pages is not None
        assert document.pages[0].content == "# About"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentValidationError, match="Cannot read"):
            load_site_document_file(tmp_path / "missing.yaml")

    def test_bad_json(self, tmp_path: Path) -> None:
        path = tmp_path / "site.json"
        path.write_text("{not json")
        with pytest.raises(DocumentValidationError, match="Cannot parse"):
            load_site_document_file(path)

    def test_empty_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "site.yml"
        path.write_text("")
        with pytest.raises(DocumentValidationError, match="must be an object"):
            load_site_document_file(path)

    def test_unquoted_yaml_date(self, tmp_path: Path) -> None:
        path = tmp_path / "site.yaml"
        path.write_text(
            "posts:\n"
            "  - title: Opening Day\n"
            "    date: 2024-03-01\n"
        )
        document = load_site_document_file(path)
        assert document.posts is not None
        assert document.posts[0].date == "2024-03-01"
