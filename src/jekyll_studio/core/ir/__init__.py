"""
Typed intermediate representation for Jekyll Studio.
"""

from __future__ import annotations

from .site import (
    DEFAULT_SITE_NAME,
    AssetsSpec,
    NamedEntry,
    PostEntry,
    SiteDocument,
    load_site_document,
    load_site_document_file,
)

__all__ = [
    "DEFAULT_SITE_NAME",
    "AssetsSpec",
    "NamedEntry",
    "PostEntry",
    "SiteDocument",
    "load_site_document",
    "load_site_document_file",
]
