"""
Build and serve commands for the Jekyll Studio CLI.
"""

from __future__ import annotations

from pathlib import Path

import typer

from jekyll_studio.cli.utils import get_config
from jekyll_studio.cli_ui import print_error, print_info, print_success
from jekyll_studio.core.builder import run_build, run_serve
from jekyll_studio.core.config import StudioConfig
from jekyll_studio.core.errors import BuildError


def run_builder(
    site_dir: Path,
    config: StudioConfig,
    *,
    serve: bool,
    mode: str | None = None,
    port: int | None = None,
) -> None:
    """Run a build or serve, exiting with code 1 on failure."""
    mode = mode or config.builder
    try:
        if serve:
            print_info(f"Serving {site_dir} on http://localhost:{port or config.port} ({mode})")
            run_serve(site_dir, mode, image=config.docker_image, port=port or config.port)
        else:
            print_info(f"Building {site_dir} ({mode})")
            run_build(site_dir, mode, image=config.docker_image)
            print_success(f"Site built into {site_dir / '_site'}")
    except BuildError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def build_site_command(
    ctx: typer.Context,
    site_dir: Path = typer.Option(  # noqa: B008
        Path("."), "--site-dir", "-s", help="Site root directory"
    ),
    builder: str | None = typer.Option(
        None, "--builder", "-b", help="'docker' or 'local' (default: from config)"
    ),
) -> None:
    """
    Build a Jekyll site into _site/.
    """
    run_builder(site_dir, get_config(ctx), serve=False, mode=builder)


def serve_site_command(
    ctx: typer.Context,
    site_dir: Path = typer.Option(  # noqa: B008
        Path("."), "--site-dir", "-s", help="Site root directory"
    ),
    builder: str | None = typer.Option(
        None, "--builder", "-b", help="'docker' or 'local' (default: from config)"
    ),
    port: int | None = typer.Option(None, "--port", help="Port to serve on (default: 4000)"),
) -> None:
    """
    Serve a Jekyll site locally with live reload.
    """
    run_builder(site_dir, get_config(ctx), serve=True, mode=builder, port=port)
