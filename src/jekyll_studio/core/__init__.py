"""
Core site generation: document schema, naming rules, materialization.
"""

from __future__ import annotations

from .conflict import ConflictDecision, clear_target, prepare_target, resolve_conflict
from .errors import (
    BackendError,
    BuildError,
    ConfigError,
    ConflictAbortedError,
    DirectoryCreationError,
    DocumentValidationError,
    InvalidEntryError,
    JekyllStudioError,
    MaterializationError,
    SiteNotFoundError,
    WriteError,
)
from .materializer import (
    MaterializationResult,
    SiteMaterializer,
    add_post,
    materialize,
    materialize_sync,
)
from .naming import post_filename, slugify, with_extension

__all__ = [
    # Errors
    "JekyllStudioError",
    "MaterializationError",
    "InvalidEntryError",
    "DirectoryCreationError",
    "WriteError",
    "SiteNotFoundError",
    "ConflictAbortedError",
    "DocumentValidationError",
    "BackendError",
    "BuildError",
    "ConfigError",
    # Naming
    "slugify",
    "with_extension",
    "post_filename",
    # Materialization
    "MaterializationResult",
    "SiteMaterializer",
    "materialize",
    "materialize_sync",
    "add_post",
    # Conflicts
    "ConflictDecision",
    "resolve_conflict",
    "clear_target",
    "prepare_target",
]
