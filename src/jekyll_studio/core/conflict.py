"""
Handling of pre-existing site directories.

Whether an existing directory may be replaced is never decided here: the
answer comes from a confirmation callback (an interactive prompt in the
CLI, a fixed answer in tests or with ``--yes``).
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .errors import ConflictAbortedError, MaterializationError

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[Path], bool]


@dataclass(frozen=True)
class ConflictDecision:
    """
    Outcome of checking a target directory.

    Attributes:
        proceed: Whether materialization may go ahead
        must_delete_first: Whether the existing tree has to be removed first
    """

    proceed: bool
    must_delete_first: bool = False


def resolve_conflict(root: Path, confirm: ConfirmCallback) -> ConflictDecision:
    """
    Decide what to do about ``root``.

    ``confirm`` is only called when ``root`` already exists. This function
    never touches the filesystem beyond the existence check.
    """
    if not root.exists():
        return ConflictDecision(proceed=True, must_delete_first=False)

    if confirm(root):
        return ConflictDecision(proceed=True, must_delete_first=True)

    logger.info("Overwrite of %s declined", root)
    return ConflictDecision(proceed=False)


def clear_target(root: Path) -> None:
    """
    Recursively remove an existing site directory.

    Raises:
        MaterializationError: If the tree cannot be removed
    """
    logger.info("Removing existing directory %s", root)
    try:
        if root.is_dir() and not root.is_symlink():
            shutil.rmtree(root)
        else:
            root.unlink()
    except OSError as e:
        raise MaterializationError(f"Cannot remove existing target: {e}", path=root, cause=e) from e


def prepare_target(root: Path, confirm: ConfirmCallback) -> ConflictDecision:
    """
    Resolve a conflict and act on the decision.

    Returns:
        The decision that was applied

    Raises:
        ConflictAbortedError: If the user declined; nothing was changed
        MaterializationError: If the existing tree could not be removed
    """
    decision = resolve_conflict(root, confirm)
    if not decision.proceed:
        raise ConflictAbortedError(f"Directory already exists: {root}")
    if decision.must_delete_first:
        clear_target(root)
    return decision
