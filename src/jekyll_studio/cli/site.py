"""
Site commands for the Jekyll Studio CLI.

- create: Design a site with the AI backend and write it to disk
- scaffold: Write a site from a local JSON/YAML structure document
- add-post: Generate one post and add it to an existing site
"""

from __future__ import annotations

from pathlib import Path

import typer

from jekyll_studio.cli.build import run_builder
from jekyll_studio.cli.utils import confirm_overwrite, get_config
from jekyll_studio.cli_ui import (
    console,
    print_error,
    print_next_steps,
    print_site_tree,
    print_success,
    print_warning,
)
from jekyll_studio.core.conflict import prepare_target
from jekyll_studio.core.config import StudioConfig
from jekyll_studio.core.errors import (
    BackendError,
    ConflictAbortedError,
    DocumentValidationError,
    InvalidEntryError,
    MaterializationError,
)
from jekyll_studio.core.ir import SiteDocument, load_site_document_file
from jekyll_studio.core.materializer import add_post, materialize_sync
from jekyll_studio.core.naming import check_entry_name, slugify
from jekyll_studio.llm import SiteBackendClient


def _site_dir(output_dir: Path, name: str | None, document: SiteDocument) -> Path:
    """Resolve the site directory, refusing names that leave the output directory."""
    try:
        return output_dir / check_entry_name(name or document.directory_name, "site")
    except InvalidEntryError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _write_site(site_dir: Path, document: SiteDocument, yes: bool) -> None:
    """Clear or keep the target per user choice, then materialize."""
    confirm = (lambda _path: True) if yes else confirm_overwrite
    try:
        prepare_target(site_dir, confirm)
        result = materialize_sync(site_dir, document)
    except ConflictAbortedError:
        print_warning(f"Aborted. '{site_dir}' was left untouched.")
        raise typer.Exit(code=0)
    except MaterializationError as e:
        print_error(f"Failed to write site: {e}")
        if site_dir.exists():
            print_warning(f"'{site_dir}' may be partially written.")
        raise typer.Exit(code=1)

    print_success(f"Site '{site_dir.name}' created ({result.file_count} files)")
    print_site_tree(result)


def _finish(site_dir: Path, config: StudioConfig, build: bool, serve: bool) -> None:
    if serve:
        run_builder(site_dir, config, serve=True)
    elif build:
        run_builder(site_dir, config, serve=False)
    else:
        print_next_steps(site_dir)


def create_command(
    ctx: typer.Context,
    prompt: str = typer.Argument(
        ..., help='A description of the site you want (e.g. "a blog for a coffee shop")'
    ),
    name: str | None = typer.Option(
        None, "--name", "-n", help="Directory name for the site (default: suggested by the AI)"
    ),
    output_dir: Path = typer.Option(  # noqa: B008
        Path("."), "--output-dir", "-o", help="Parent directory for the site"
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Overwrite an existing directory without asking"
    ),
    build: bool = typer.Option(False, "--build", help="Build the site after creating it"),
    serve: bool = typer.Option(False, "--serve", help="Serve the site after creating it"),
) -> None:
    """
    Create a new Jekyll site from an AI prompt.
    """
    config = get_config(ctx)

    try:
        with SiteBackendClient(config.api_base_url, timeout=config.timeout) as client:
            with console.status("Communicating with the AI to design your site..."):
                document = client.generate_site(prompt, name)
    except BackendError as e:
        print_error(f"Failed to create site: {e}")
        raise typer.Exit(code=1)

    site_dir = _site_dir(output_dir, name, document)
    _write_site(site_dir, document, yes)
    _finish(site_dir, config, build, serve)


def scaffold_command(
    ctx: typer.Context,
    document_file: Path = typer.Argument(  # noqa: B008
        ..., help="Site structure document (.json, .yaml or .yml)"
    ),
    name: str | None = typer.Option(
        None, "--name", "-n", help="Directory name for the site (default: from the document)"
    ),
    output_dir: Path = typer.Option(  # noqa: B008
        Path("."), "--output-dir", "-o", help="Parent directory for the site"
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Overwrite an existing directory without asking"
    ),
    build: bool = typer.Option(False, "--build", help="Build the site after creating it"),
    serve: bool = typer.Option(False, "--serve", help="Serve the site after creating it"),
) -> None:
    """
    Create a Jekyll site from a local site structure document.
    """
    config = get_config(ctx)

    try:
        document = load_site_document_file(document_file)
    except DocumentValidationError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    site_dir = _site_dir(output_dir, name, document)
    _write_site(site_dir, document, yes)
    _finish(site_dir, config, build, serve)


def add_post_command(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Title of the new post"),
    site_dir: Path = typer.Option(  # noqa: B008
        Path("."), "--site-dir", "-s", help="Site root directory"
    ),
    date: str | None = typer.Option(
        None, "--date", "-d", help="Post date as YYYY-MM-DD (default: today)"
    ),
    prompt: str | None = typer.Option(
        None, "--prompt", "-p", help="Extra instructions for the AI"
    ),
    overwrite: bool = typer.Option(
        False, "--overwrite", help="Replace a post with the same filename"
    ),
) -> None:
    """
    Generate a blog post with AI and add it to _posts/.
    """
    config = get_config(ctx)

    if not slugify(title):
        print_error(f"Post title {title!r} does not produce a usable filename")
        raise typer.Exit(code=1)

    try:
        with SiteBackendClient(config.api_base_url, timeout=config.timeout) as client:
            with console.status(f"Writing '{title}'..."):
                content = client.generate_post(title, prompt)
        path = add_post(site_dir, title, content, date, overwrite=overwrite)
    except (BackendError, MaterializationError) as e:
        print_error(f"Failed to add post: {e}")
        raise typer.Exit(code=1)

    print_success(f"Added post {path}")
