"""Configuration constants for docs-corpus."""

import os
from pathlib import Path

# Environment variable overriding the content directory.
ROOT_ENV_VAR = "DOCS_CORPUS_ROOT"

# Content directory candidates. First directory which exists is used.
CONTENT_DIRECTORIES: list[Path] = [
    Path("docs"),
    Path("content"),
    Path("."),
]

# File suffixes treated as documents.
CONTENT_SUFFIXES: tuple[str, ...] = (".md", ".mdx")

# Frontmatter delimiter line.
FRONTMATTER_DELIMITER = "---"


def resolve_content_directory() -> Path:
    """Return the content directory to load.

    ``$DOCS_CORPUS_ROOT`` wins when set. Otherwise the first existing entry of
    CONTENT_DIRECTORIES is used, falling back to the last one.
    """
    override = os.environ.get(ROOT_ENV_VAR)
    if override:
        return Path(override).expanduser()
    for candidate in CONTENT_DIRECTORIES:
        if candidate.is_dir():
            return candidate
    return CONTENT_DIRECTORIES[-1]
