"""
Jekyll Studio - AI-designed Jekyll sites, materialized on disk.

Takes a site structure document (from the AI backend or a local file) and
writes it out as a conventional Jekyll project.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    BackendError,
    ConflictAbortedError,
    InvalidEntryError,
    JekyllStudioError,
    MaterializationError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "JekyllStudioError",
    "MaterializationError",
    "InvalidEntryError",
    "ConflictAbortedError",
    "BackendError",
]
