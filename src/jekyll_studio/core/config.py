"""
Jekyll Studio configuration.

Settings come from a ``jekyll-studio.toml`` file (``[studio]`` table) and
are then overridden by environment variables:

    [studio]
    api_base_url = "http://localhost:3000/api"
    timeout = 120
    builder = "docker"        # "docker" or "local"
    docker_image = "jekyll/jekyll:4"
    port = 4000
    check_updates = true

Environment overrides: JEKYLL_STUDIO_API_URL, JEKYLL_STUDIO_TIMEOUT,
JEKYLL_STUDIO_BUILDER, JEKYLL_STUDIO_CHECK_UPDATES.
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "jekyll-studio.toml"
USER_CONFIG_PATH = Path("~/.config/jekyll-studio/config.toml")

BUILDERS = ("docker", "local")

ENV_API_URL = "JEKYLL_STUDIO_API_URL"
ENV_TIMEOUT = "JEKYLL_STUDIO_TIMEOUT"
ENV_BUILDER = "JEKYLL_STUDIO_BUILDER"
ENV_CHECK_UPDATES = "JEKYLL_STUDIO_CHECK_UPDATES"


@dataclass(frozen=True)
class StudioConfig:
    """Runtime settings for the CLI and its collaborators."""

    api_base_url: str = "http://localhost:3000/api"
    timeout: float = 120.0
    builder: str = "docker"
    docker_image: str = "jekyll/jekyll:4"
    port: int = 4000
    check_updates: bool = True
    state_dir: Path = field(default_factory=lambda: Path("~/.jekyll-studio").expanduser())

    def __post_init__(self) -> None:
        if self.builder not in BUILDERS:
            raise ConfigError(
                f"Unknown builder '{self.builder}'. Expected one of: {', '.join(BUILDERS)}"
            )
        if self.timeout <= 0:
            raise ConfigError(f"Timeout must be positive, got {self.timeout}")


def find_config_file(cwd: Path | None = None) -> Path | None:
    """Locate the config file: project directory first, then the user config."""
    candidate = (cwd or Path.cwd()) / CONFIG_FILENAME
    if candidate.exists():
        return candidate
    user_config = USER_CONFIG_PATH.expanduser()
    if user_config.exists():
        return user_config
    return None


def _from_table(table: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(StudioConfig)}
    values: dict[str, Any] = {}
    for key, value in table.items():
        if key not in known:
            logger.warning("Ignoring unknown config key '%s'", key)
            continue
        values[key] = Path(value).expanduser() if key == "state_dir" else value
    return values


def _from_env(env: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    if env.get(ENV_API_URL):
        values["api_base_url"] = env[ENV_API_URL]
    if env.get(ENV_TIMEOUT):
        try:
            values["timeout"] = float(env[ENV_TIMEOUT])
        except ValueError as e:
            raise ConfigError(f"{ENV_TIMEOUT} must be a number, got {env[ENV_TIMEOUT]!r}") from e
    if env.get(ENV_BUILDER):
        values["builder"] = env[ENV_BUILDER]
    if env.get(ENV_CHECK_UPDATES):
        values["check_updates"] = env[ENV_CHECK_UPDATES].strip().lower() not in ("0", "false", "no")
    return values


def load_config(path: Path | None = None, env: Mapping[str, str] | None = None) -> StudioConfig:
    """
    Load configuration.

    Args:
        path: Explicit config file; when omitted, ``find_config_file`` is used
        env: Environment mapping (defaults to ``os.environ``)

    Returns:
        StudioConfig with file values and environment overrides applied

    Raises:
        ConfigError: If the file is missing, unparsable, or has bad values
    """
    env = os.environ if env is None else env
    config = StudioConfig()

    config_path = path or find_config_file()
    if config_path is not None:
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Config file not found: {config_path}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

        table = data.get("studio", {})
        if not isinstance(table, dict):
            raise ConfigError(f"[studio] in {config_path} must be a table")
        logger.debug("Loaded config from %s", config_path)
        try:
            config = replace(config, **_from_table(table))
        except TypeError as e:
            raise ConfigError(f"Invalid value in {config_path}: {e}") from e

    return replace(config, **_from_env(env))
