"""
Once-a-day check for a newer Jekyll Studio release.

The clock, the state file and the version lookup are all injected so the
check has no hidden global state.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

import httpx

logger = logging.getLogger(__name__)

PYPI_URL = "https://pypi.org/pypi/jekyll-studio/json"
CHECK_INTERVAL = timedelta(hours=24)


def fetch_latest_version(url: str = PYPI_URL, timeout: float = 3.0) -> str:
    """Return the latest published version from the PyPI JSON API."""
    response = httpx.get(url, timeout=timeout)
    response.raise_for_status()
    return str(response.json()["info"]["version"])


def _version_key(version: str) -> tuple[int, ...]:
    return tuple(int(part) for part in re.findall(r"\d+", version))


def is_newer(candidate: str, current: str) -> bool:
    """Compare dotted numeric versions ("1.10.0" > "1.9.2")."""
    return _version_key(candidate) > _version_key(current)


class UpdateChecker:
    """
    Rate-limited update check.

    Attributes:
        state_path: JSON file remembering the last check time
        current_version: Installed version
        fetch_latest: Callable returning the latest published version
        clock: Callable returning the current aware datetime
    """

    def __init__(
        self,
        state_path: Path,
        current_version: str,
        fetch_latest: Callable[[], str] = fetch_latest_version,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ):
        self.state_path = state_path
        self.current_version = current_version
        self.fetch_latest = fetch_latest
        self.clock = clock

    def _last_check(self) -> datetime | None:
        try:
            data = json.loads(self.state_path.read_text(encoding="utf-8"))
            last = datetime.fromisoformat(data["last_check"])
        except (OSError, ValueError, KeyError, TypeError):
            return None
        # Naive timestamps cannot be compared with the aware clock
        return last if last.tzinfo is not None else None

    def _record_check(self, when: datetime) -> None:
        try:
            self.state_path.parent.mkdir(parents=True, exist_ok=True)
            self.state_path.write_text(
                json.dumps({"last_check": when.isoformat()}), encoding="utf-8"
            )
        except OSError as e:
            logger.debug("Could not save update-check state: %s", e)

    def due(self) -> bool:
        """Whether enough time has passed since the last check."""
        last = self._last_check()
        return last is None or self.clock() - last >= CHECK_INTERVAL

    def check(self) -> str | None:
        """
        Look for a newer version if a check is due.

        Returns:
            The newer version, or None if up to date, not due, or the lookup
            failed
        """
        if not self.due():
            return None

        now = self.clock()
        try:
            latest = self.fetch_latest()
        except (httpx.HTTPError, KeyError, ValueError) as e:
            logger.debug("Update check failed: %s", e)
            return None
        finally:
            self._record_check(now)

        if is_newer(latest, self.current_version):
            return latest
        return None
