"""
Site tree materialization.

Turns a validated SiteDocument into a Jekyll directory tree:
- Scaffold files (Gemfile, .gitignore, README.md)
- _config.yml
- _layouts/, _includes/, _posts/
- Root-level pages
- One _<name>/ directory per collection
- assets/ with css/, js/ and images/

Categories are written one after another. Files inside a category are
written concurrently on the event loop, with the blocking writes pushed to
worker threads. A failure stops at the category it happened in; earlier
categories stay on disk.
"""

from __future__ import annotations

import asyncio
import datetime
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .errors import (
    DirectoryCreationError,
    InvalidEntryError,
    MaterializationError,
    SiteNotFoundError,
    WriteError,
)
from .ir import AssetsSpec, NamedEntry, PostEntry, SiteDocument
from .naming import HTML_ONLY, MARKUP, check_entry_name, post_filename, with_extension
from .scaffold import render_scaffold

logger = logging.getLogger(__name__)

CONFIG_FILE = "_config.yml"
LAYOUTS_DIR = "_layouts"
INCLUDES_DIR = "_includes"
POSTS_DIR = "_posts"
ASSETS_DIR = "assets"
STYLESHEET = "style.css"
SCRIPT = "script.js"
IMAGES_MARKER = ".gitkeep"
SCRIPT_PLACEHOLDER = "// Add your JavaScript here\n"


@dataclass
class MaterializationResult:
    """
    Record of what a materialization wrote.

    Attributes:
        root: Site root directory
        files_created: Every file written, grouped by category in write order
        directories_created: Every directory ensured, in order
    """

    root: Path
    files_created: list[Path] = field(default_factory=list)
    directories_created: list[Path] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.files_created)

    def add_file(self, path: Path) -> None:
        """Record a file that was written."""
        self.files_created.append(path)

    def add_directory(self, path: Path) -> None:
        """Record a directory that was ensured."""
        self.directories_created.append(path)


def ensure_dir(path: Path) -> None:
    """
    Ensure a directory exists, creating parents as needed.

    Raises:
        DirectoryCreationError: If the filesystem refuses
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as e:
        raise DirectoryCreationError(f"Cannot create directory: {e}", path=path, cause=e) from e


def write_file(path: Path, content: str) -> None:
    """
    Write a text file. The parent directory must already exist.

    Raises:
        WriteError: If the write fails
    """
    try:
        path.write_text(content, encoding="utf-8")
    except (OSError, ValueError) as e:
        raise WriteError(f"Cannot write file: {e}", path=path, cause=e) from e


def _plan_entries(
    entries: Iterable[NamedEntry],
    directory: Path,
    kind: str,
    allowed: tuple[str, ...],
    default: str,
) -> dict[Path, str]:
    """Derive target paths for named entries, rejecting bad or duplicate names."""
    plan: dict[Path, str] = {}
    for entry in entries:
        filename = with_extension(check_entry_name(entry.name, kind), allowed, default)
        path = directory / filename
        if path in plan:
            raise InvalidEntryError(f"Duplicate {kind} file {filename!r}", path=path)
        plan[path] = entry.content
    return plan


def _plan_posts(posts: Iterable[PostEntry], directory: Path) -> dict[Path, str]:
    plan: dict[Path, str] = {}
    for post in posts:
        path = directory / post_filename(post.date, post.title)
        if path in plan:
            raise InvalidEntryError(f"Duplicate post file {path.name!r}", path=path)
        plan[path] = post.content
    return plan


class SiteMaterializer:
    """
    Writes a SiteDocument to disk under a root directory.

    The root is created if missing. Existing files are overwritten; clearing
    a previous tree is the caller's job (see ``core.conflict``).

    Example:
        materializer = SiteMaterializer(Path("my-blog"))
        result = await materializer.materialize(document)
        print(f"{result.file_count} files written")
    """

    def __init__(self, root: Path):
        """
        Initialize materializer.

        Args:
            root: Site root directory
        """
        self.root = root

    async def materialize(self, document: SiteDocument) -> MaterializationResult:
        """
        Write every category of the document.

        Returns:
            MaterializationResult listing files and directories

        Raises:
            MaterializationError: On the first failure; earlier categories
                remain on disk
        """
        result = MaterializationResult(root=self.root)
        logger.info("Materializing site into %s", self.root)

        self._ensure_dir(self.root, result)
        scaffold = render_scaffold(document.title, document.description)
        await self._write_files(
            {self.root / name: body for name, body in scaffold.items()}, result
        )

        if document.config is not None:
            self._write_config(document.config, result)

        if document.layouts is not None:
            await self._write_category(
                document.layouts, self.root / LAYOUTS_DIR, "layout", HTML_ONLY, ".html", result
            )
        if document.includes is not None:
            await self._write_category(
                document.includes, self.root / INCLUDES_DIR, "include", HTML_ONLY, ".html", result
            )
        if document.posts is not None:
            posts_dir = self.root / POSTS_DIR
            plan = _plan_posts(document.posts, posts_dir)
            self._ensure_dir(posts_dir, result)
            await self._write_files(plan, result)
        if document.pages is not None:
            plan = _plan_entries(document.pages, self.root, "page", MARKUP, ".html")
            await self._write_files(plan, result)
        if document.collections is not None:
            await self._write_collections(document.collections, result)
        if document.assets is not None:
            await self._write_assets(document.assets, result)

        logger.info("Wrote %d files under %s", result.file_count, self.root)
        return result

    async def _write_category(
        self,
        entries: list[NamedEntry],
        directory: Path,
        kind: str,
        allowed: tuple[str, ...],
        default: str,
        result: MaterializationResult,
    ) -> None:
        plan = _plan_entries(entries, directory, kind, allowed, default)
        self._ensure_dir(directory, result)
        await self._write_files(plan, result)
        logger.debug("Wrote %d %s files", len(plan), kind)

    async def _write_collections(
        self, collections: Mapping[str, list[NamedEntry]], result: MaterializationResult
    ) -> None:
        for key, items in collections.items():
            check_entry_name(key, "collection")
            await self._write_category(items, self.root / f"_{key}", key, MARKUP, ".md", result)

    async def _write_assets(self, assets: AssetsSpec, result: MaterializationResult) -> None:
        assets_dir = self.root / ASSETS_DIR
        self._ensure_dir(assets_dir, result)

        if assets.has_css:
            self._ensure_dir(assets_dir / "css", result)
            await self._write_files({assets_dir / "css" / STYLESHEET: assets.css or ""}, result)

        if assets.has_js:
            self._ensure_dir(assets_dir / "js", result)
            await self._write_files(
                {assets_dir / "js" / SCRIPT: assets.js or SCRIPT_PLACEHOLDER}, result
            )

        # images/ exists even when no image content is supplied
        self._ensure_dir(assets_dir / "images", result)
        await self._write_files({assets_dir / "images" / IMAGES_MARKER: ""}, result)

    def _write_config(self, config: Mapping[str, object], result: MaterializationResult) -> None:
        path = self.root / CONFIG_FILE
        try:
            text = yaml.safe_dump(
                dict(config), default_flow_style=False, sort_keys=False, allow_unicode=True
            )
        except yaml.YAMLError as e:
            raise MaterializationError(f"Cannot serialize config: {e}", path=path, cause=e) from e
        write_file(path, text)
        result.add_file(path)

    def _ensure_dir(self, path: Path, result: MaterializationResult) -> None:
        ensure_dir(path)
        result.add_directory(path)

    async def _write_files(self, files: Mapping[Path, str], result: MaterializationResult) -> None:
        """
        Write independent files concurrently.

        Waits for every write to finish before reporting the first failure,
        so no write from this batch is still running when the caller moves on.
        """
        paths = list(files)
        outcomes = await asyncio.gather(
            *(asyncio.to_thread(write_file, path, files[path]) for path in paths),
            return_exceptions=True,
        )
        for path, outcome in zip(paths, outcomes, strict=True):
            if isinstance(outcome, BaseException):
                raise outcome
            logger.debug("Wrote %s", path)
            result.add_file(path)


async def materialize(root: Path, document: SiteDocument) -> MaterializationResult:
    """Materialize ``document`` under ``root``. See SiteMaterializer.materialize."""
    return await SiteMaterializer(root).materialize(document)


def materialize_sync(root: Path, document: SiteDocument) -> MaterializationResult:
    """Blocking wrapper around ``materialize`` for synchronous callers."""
    return asyncio.run(materialize(root, document))


def add_post(
    site_root: Path,
    title: str,
    content: str,
    date: str | None = None,
    *,
    today: Callable[[], datetime.date] = datetime.date.today,
    overwrite: bool = False,
) -> Path:
    """
    Add a single post to an existing site.

    Uses the same filename rule as bulk site creation.

    Args:
        site_root: Existing site directory
        title: Post title
        content: Post body, written verbatim
        date: YYYY-MM-DD date; defaults to ``today()``
        today: Clock used when ``date`` is omitted
        overwrite: Replace an existing post with the same filename

    Returns:
        Path of the written post

    Raises:
        SiteNotFoundError: If ``site_root`` is not a directory
        InvalidEntryError: If the title or date cannot form a filename
        WriteError: If the post exists and ``overwrite`` is False, or the
            write fails
    """
    if not site_root.is_dir():
        raise SiteNotFoundError("Site directory not found", path=site_root)

    if date is None:
        date = today().isoformat()
    filename = post_filename(date, title)

    posts_dir = site_root / POSTS_DIR
    ensure_dir(posts_dir)
    path = posts_dir / filename
    if path.exists() and not overwrite:
        raise WriteError(
            "Post already exists", path=path, cause=FileExistsError(str(path))
        )

    write_file(path, content)
    logger.info("Added post %s", path)
    return path
