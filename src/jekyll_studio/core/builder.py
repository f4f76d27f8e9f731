"""
Jekyll build and serve commands.

Sites are built either inside the official Jekyll Docker image or with a
local Ruby/Bundler toolchain.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .errors import BuildError

logger = logging.getLogger(__name__)

DOCKER = "docker"
LOCAL = "local"
CONTAINER_SITE_DIR = "/srv/jekyll"
CONTAINER_PORT = 4000


def build_command(
    site_dir: Path,
    mode: str = DOCKER,
    *,
    image: str = "jekyll/jekyll:4",
    port: int = CONTAINER_PORT,
    serve: bool = False,
) -> list[str]:
    """
    Build the argv for a Jekyll build or serve run.

    Args:
        site_dir: Site root
        mode: "docker" or "local"
        image: Docker image (docker mode only)
        port: Host port for serve
        serve: Run ``jekyll serve`` instead of ``jekyll build``

    Returns:
        Command argument list

    Raises:
        BuildError: For an unknown mode
    """
    action = "serve" if serve else "build"

    if mode == DOCKER:
        cmd = ["docker", "run", "--rm", "-v", f"{site_dir.resolve()}:{CONTAINER_SITE_DIR}"]
        if serve:
            cmd += ["-p", f"{port}:{CONTAINER_PORT}"]
        cmd += [image, "jekyll", action]
        if serve:
            cmd += ["--watch", "--host", "0.0.0.0"]
        return cmd

    if mode == LOCAL:
        cmd = ["bundle", "exec", "jekyll", action]
        if serve:
            cmd += ["--port", str(port)]
        return cmd

    raise BuildError(f"Unknown build mode '{mode}'. Use '{DOCKER}' or '{LOCAL}'")


def _run(cmd: list[str], site_dir: Path) -> None:
    if not site_dir.is_dir():
        raise BuildError(f"Site directory not found: {site_dir}")

    logger.info("Running %s", " ".join(cmd))
    try:
        subprocess.run(cmd, cwd=site_dir, check=True)
    except subprocess.CalledProcessError as e:
        raise BuildError(f"'{cmd[0]}' exited with status {e.returncode}") from e
    except FileNotFoundError as e:
        raise BuildError(f"'{cmd[0]}' not found. Is it installed and on PATH?") from e


def run_build(site_dir: Path, mode: str = DOCKER, *, image: str = "jekyll/jekyll:4") -> None:
    """Build the site into ``_site/``."""
    _run(build_command(site_dir, mode, image=image), site_dir)


def run_serve(
    site_dir: Path,
    mode: str = DOCKER,
    *,
    image: str = "jekyll/jekyll:4",
    port: int = CONTAINER_PORT,
) -> None:
    """Serve the site with live reload until interrupted."""
    _run(build_command(site_dir, mode, image=image, port=port, serve=True), site_dir)
