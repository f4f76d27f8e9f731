"""Allow ``python -m jekyll_studio``."""

from jekyll_studio.cli import main

if __name__ == "__main__":
    main()
