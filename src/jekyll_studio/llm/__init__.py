"""
AI backend integration for Jekyll Studio.
"""

from .client import DEFAULT_BASE_URL, SiteBackendClient

__all__ = ["DEFAULT_BASE_URL", "SiteBackendClient"]
