"""
Boilerplate files written at the root of every generated site.
"""

from __future__ import annotations

DEFAULT_TITLE = "Jekyll Site"
DEFAULT_DESCRIPTION = "A static site generated with Jekyll Studio."

GEMFILE = "Gemfile"
GITIGNORE = ".gitignore"
README = "README.md"

SCAFFOLD_FILES = (GEMFILE, GITIGNORE, README)


def render_gemfile() -> str:
    """Generate the Gemfile pinning Jekyll and the bundled plugins."""
    return """source "https://rubygems.org"

gem "jekyll", "~> 4.3"
gem "webrick", "~> 1.8"

group :jekyll_plugins do
  gem "jekyll-feed", "~> 0.12"
  gem "jekyll-seo-tag", "~> 2.8"
  gem "jekyll-sitemap", "~> 1.4"
end
"""


def render_gitignore() -> str:
    """Generate .gitignore content for build output and local environment files."""
    return """# Jekyll
_site/
.sass-cache/
.jekyll-cache/
.jekyll-metadata

# Bundler
.bundle/
vendor/

# Environment
.env
.env.local

# OS
.DS_Store
Thumbs.db
"""


def render_readme(title: str | None = None, description: str | None = None) -> str:
    """Generate README.md with the site title, description and quick start."""
    title = title or DEFAULT_TITLE
    description = description or DEFAULT_DESCRIPTION

    return f"""# {title}

{description}

## Quick Start

1. Install dependencies: `bundle install`
2. Start the development server: `bundle exec jekyll serve`
3. Open http://localhost:4000 in your browser
"""


def render_scaffold(title: str | None = None, description: str | None = None) -> dict[str, str]:
    """Map each scaffold filename to its content."""
    return {
        GEMFILE: render_gemfile(),
        GITIGNORE: render_gitignore(),
        README: render_readme(title, description),
    }
