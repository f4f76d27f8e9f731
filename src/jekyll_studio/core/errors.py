"""
Error types for Jekyll Studio site generation.
"""

from __future__ import annotations

from pathlib import Path


class JekyllStudioError(Exception):
    """Base exception for all Jekyll Studio errors."""

    def __init__(self, message: str, context: str | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message


class MaterializationError(JekyllStudioError):
    """
    Raised when a site tree cannot be written to disk.

    The tree is left in whatever state it was in when the failure
    happened; nothing is rolled back.

    Attributes:
        path: Filesystem path the failure relates to, if any
        cause: Underlying exception, if any
    """

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        cause: BaseException | None = None,
    ):
        self.path = path
        self.cause = cause
        super().__init__(message, context=str(path) if path is not None else None)


class InvalidEntryError(MaterializationError):
    """
    Raised when a named entry cannot be turned into a filename.

    Examples:
    - Post title that slugifies to an empty string
    - Layout name containing a path separator
    - Two entries in one category mapping to the same file
    """

    pass


class DirectoryCreationError(MaterializationError):
    """Raised when a required directory cannot be created."""

    pass


class WriteError(MaterializationError):
    """Raised when a single file write fails."""

    pass


class SiteNotFoundError(MaterializationError):
    """Raised when an operation targets a site directory that does not exist."""

    pass


class ConflictAbortedError(JekyllStudioError):
    """
    Raised when the user declines to overwrite an existing target.

    This is an outcome, not a failure: nothing was touched on disk.
    """

    pass


class DocumentValidationError(JekyllStudioError):
    """Raised when a site structure document does not match the schema."""

    pass


class BackendError(JekyllStudioError):
    """
    Raised when the AI backend cannot produce a usable response.

    Examples:
    - Connection refused or timed out
    - Non-2xx status code
    - Body is not JSON
    """

    pass


class BuildError(JekyllStudioError):
    """Raised when the Jekyll build/serve subprocess fails."""

    pass


class ConfigError(JekyllStudioError):
    """Raised when the configuration file or environment is invalid."""

    pass
