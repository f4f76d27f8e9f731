"""
Rich console output for the Jekyll Studio CLI.
"""

from pathlib import Path

from rich.console import Console
from rich.style import Style
from rich.text import Text
from rich.tree import Tree

from jekyll_studio.core.materializer import MaterializationResult

console = Console()

# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow"),
    "info": Style(color="cyan"),
    "muted": Style(color="bright_black"),
}


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(f"✓ {message}", style=STYLES["success"]))


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(Text(f"✗ {message}", style=STYLES["error"]))


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(Text(f"⚠ {message}", style=STYLES["warning"]))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(Text(f"ℹ {message}", style=STYLES["info"]))


def print_site_tree(result: MaterializationResult) -> None:
    """Print the written files as a tree rooted at the site directory."""
    tree = Tree(Text(f"{result.root}/", style=STYLES["title"]))
    branches: dict[Path, Tree] = {result.root: tree}

    for path in sorted(result.files_created):
        parent = result.root
        node = tree
        for part in path.relative_to(result.root).parent.parts:
            parent = parent / part
            if parent not in branches:
                branches[parent] = node.add(Text(f"{part}/", style=STYLES["info"]))
            node = branches[parent]
        node.add(Text(path.name))

    console.print(tree)


def print_next_steps(site_dir: Path) -> None:
    """Print how to build and serve a freshly created site."""
    console.print()
    console.print(Text("Next steps:", style=STYLES["title"]))
    console.print(f"  cd {site_dir}")
    console.print("  jekyll-studio serve")
    console.print(Text("  (or: bundle install && bundle exec jekyll serve)", style=STYLES["muted"]))
