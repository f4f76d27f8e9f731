"""
HTTP client for the Jekyll Studio AI backend.

The backend turns a free-text prompt into a site structure document, or
writes the body of a single post. All transport and decoding problems are
reported as BackendError.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.errors import BackendError, DocumentValidationError
from ..core.ir import SiteDocument, load_site_document

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000/api"


class SiteBackendClient:
    """
    Client for the site-generation backend.

    Example:
        with SiteBackendClient("http://localhost:3000/api") as client:
            document = client.generate_site("a blog for a coffee shop")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 120.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize backend client.

        Args:
            base_url: API root, e.g. ``http://localhost:3000/api``
            timeout: Request timeout in seconds (generation is slow)
            transport: Optional httpx transport, used by tests
        """
        self.base_url = base_url.rstrip("/")
        self.client = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> SiteBackendClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        logger.debug("POST %s%s", self.base_url, path)
        try:
            response = self.client.post(path, json=payload)
        except httpx.HTTPError as e:
            raise BackendError(f"Cannot reach backend at {self.base_url}: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_error:
            detail = body.get("error") if isinstance(body, dict) else None
            raise BackendError(
                f"Error {response.status_code}: {detail or response.reason_phrase}"
            )
        if not isinstance(body, dict):
            raise BackendError("Backend returned a non-JSON or non-object response")
        return body

    def generate_site(self, prompt: str, name: str | None = None) -> SiteDocument:
        """
        Ask the backend to design a site.

        Args:
            prompt: Description of the site (e.g. "a blog for a coffee shop")
            name: Optional directory name suggestion

        Returns:
            Validated SiteDocument

        Raises:
            BackendError: On transport errors, error responses or a
                structure that fails validation
        """
        logger.info("Requesting site structure from backend")
        body = self._post("/sites/generate", {"prompt": prompt, "name": name})
        structure = body.get("structure", body)
        try:
            return load_site_document(structure)
        except DocumentValidationError as e:
            raise BackendError(f"Backend returned an invalid site structure: {e.message}") from e

    def generate_post(self, title: str, prompt: str | None = None) -> str:
        """
        Ask the backend to write one post.

        Returns:
            Post content (front matter and body)
        """
        logger.info("Requesting post content for %r", title)
        body = self._post("/posts/generate", {"title": title, "prompt": prompt})
        content = body.get("content")
        if not isinstance(content, str):
            raise BackendError("Backend response is missing 'content'")
        return content
