"""
Jekyll Studio CLI application.

Creates the Typer app and registers every command module.
"""

from __future__ import annotations

from pathlib import Path

import typer

from jekyll_studio.cli.build import build_site_command, serve_site_command
from jekyll_studio.cli.site import add_post_command, create_command, scaffold_command
from jekyll_studio.cli.utils import (
    CliState,
    configure_logging,
    notify_updates,
    version_callback,
)
from jekyll_studio.cli_ui import print_error
from jekyll_studio.core.config import load_config
from jekyll_studio.core.errors import ConfigError

app = typer.Typer(
    help="""Jekyll Studio – manage Jekyll sites with the power of AI

Commands:
  • create, scaffold: write a new site (from a prompt or a local document)
  • add-post: generate a post into an existing site
  • build, serve: run Jekyll via Docker or a local Ruby toolchain
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    config_path: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help="Path to jekyll-studio.toml"
    ),
) -> None:
    """Jekyll Studio CLI main callback for global options."""
    configure_logging(verbose)
    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    ctx.obj = CliState(config=config, verbose=verbose)
    notify_updates(config)


app.command(name="create")(create_command)
app.command(name="scaffold")(scaffold_command)
app.command(name="add-post")(add_post_command)
app.command(name="build")(build_site_command)
app.command(name="serve")(serve_site_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)
