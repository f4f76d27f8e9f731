"""
Site structure document types.

A SiteDocument is the abstract description of a Jekyll site returned by the
AI backend (or loaded from a local file). It is validated once, here, and
then handed to the materializer as a typed value:
- Scaffold metadata (name, title, description)
- Jekyll configuration (_config.yml)
- Layouts, includes, posts, pages and named collections
- CSS and JavaScript assets
"""

from __future__ import annotations

import datetime
import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..errors import DocumentValidationError

DEFAULT_SITE_NAME = "jekyll-site"


class NamedEntry(BaseModel):
    """
    A named file in a category (layout, include, page, collection item).

    Attributes:
        name: Logical file name, with or without extension
        content: File body, written verbatim
    """

    name: str
    content: str = ""

    model_config = ConfigDict(frozen=True)


class PostEntry(BaseModel):
    """
    A blog post.

    Attributes:
        title: Post title, slugified into the filename
        date: Publication date as YYYY-MM-DD (not checked as a calendar date)
        content: Post body including front matter, written verbatim
    """

    title: str
    date: str
    content: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator("date", mode="before")
    @classmethod
    def _date_as_text(cls, value: Any) -> Any:
        # YAML loads unquoted dates as date objects
        if isinstance(value, datetime.date):
            return value.isoformat()
        return value


class AssetsSpec(BaseModel):
    """
    Static assets.

    ``js`` is tracked by presence: a ``js`` key with an empty value still
    produces a script file with placeholder content.
    """

    css: str | None = None
    js: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def has_css(self) -> bool:
        return self.css is not None

    @property
    def has_js(self) -> bool:
        return "js" in self.model_fields_set


class SiteDocument(BaseModel):
    """
    Complete description of a site to materialize.

    Every category is optional; an absent category is skipped.
    """

    name: str | None = None
    title: str | None = None
    description: str | None = None
    config: dict[str, Any] | None = None
    layouts: list[NamedEntry] | None = None
    includes: list[NamedEntry] | None = None
    posts: list[PostEntry] | None = None
    pages: list[NamedEntry] | None = None
    collections: dict[str, list[NamedEntry]] | None = None
    assets: AssetsSpec | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def directory_name(self) -> str:
        """Suggested directory name for the site."""
        return self.name or DEFAULT_SITE_NAME


def _summarize(error: ValidationError) -> str:
    """Collapse pydantic errors into one readable line per problem."""
    lines = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        lines.append(f"{location}: {item['msg']}")
    return "; ".join(lines)


def load_site_document(payload: Mapping[str, Any]) -> SiteDocument:
    """
    Validate a raw payload into a SiteDocument.

    Args:
        payload: Decoded JSON/YAML mapping

    Returns:
        Validated SiteDocument

    Raises:
        DocumentValidationError: If the payload is not a mapping or any
            field is missing or has the wrong type
    """
    if not isinstance(payload, Mapping):
        raise DocumentValidationError(
            f"Site structure must be an object, got {type(payload).__name__}"
        )
    try:
        return SiteDocument.model_validate(dict(payload))
    except ValidationError as e:
        raise DocumentValidationError(f"Invalid site structure: {_summarize(e)}") from e


def load_site_document_file(path: Path) -> SiteDocument:
    """
    Load a SiteDocument from a JSON or YAML file.

    Files ending in ``.json`` are parsed as JSON; everything else as YAML.

    Raises:
        DocumentValidationError: If the file cannot be read or parsed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentValidationError(f"Cannot read {path}: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            payload = json.loads(text)
        else:
            payload = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentValidationError(f"Cannot parse {path}: {e}") from e

    return load_site_document(payload)
