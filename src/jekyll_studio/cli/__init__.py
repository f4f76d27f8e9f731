"""
Jekyll Studio CLI Package.

- app.py: Typer application and global options
- site.py: create, scaffold and add-post commands
- build.py: build and serve commands
- utils.py: Shared utilities
"""

from jekyll_studio.cli.app import app, main
from jekyll_studio.cli.utils import version_callback

__all__ = [
    "app",
    "main",
    "version_callback",
]
