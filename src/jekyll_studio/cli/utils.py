"""
Jekyll Studio CLI Utilities.

Shared helpers used across CLI modules.
"""

from __future__ import annotations

import logging
import platform
from dataclasses import dataclass
from pathlib import Path

import typer

from jekyll_studio._version import get_version
from jekyll_studio.cli_ui import print_info
from jekyll_studio.core.config import StudioConfig
from jekyll_studio.core.updates import UpdateChecker, fetch_latest_version

logger = logging.getLogger(__name__)

UPDATE_STATE_FILE = "update-check.json"


@dataclass
class CliState:
    """Per-invocation state shared between the callback and commands."""

    config: StudioConfig
    verbose: bool = False


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"Jekyll Studio {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Configure root logging once for the CLI process."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def get_config(ctx: typer.Context) -> StudioConfig:
    """Return the config loaded by the main callback."""
    state = ctx.find_root().obj
    if isinstance(state, CliState):
        return state.config
    return StudioConfig()


def confirm_overwrite(path: Path) -> bool:
    """Ask before replacing an existing directory. Defaults to No."""
    return typer.confirm(f"Directory '{path}' already exists. Overwrite it?", default=False)


def notify_updates(config: StudioConfig) -> None:
    """Print a hint when a newer release is available (checked at most daily)."""
    if not config.check_updates:
        return
    checker = UpdateChecker(
        state_path=config.state_dir / UPDATE_STATE_FILE,
        current_version=get_version(),
        fetch_latest=fetch_latest_version,
    )
    latest = checker.check()
    if latest:
        print_info(f"Jekyll Studio {latest} is available. Upgrade with: pip install -U jekyll-studio")
