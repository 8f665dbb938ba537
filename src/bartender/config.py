"""Local configuration for bartender."""

from __future__ import annotations

import os

DEFAULT_DOCS_DIR = "docs"
DEFAULT_OUTPUT_FILE = "sidebars.js"
DEFAULT_IGNORE_DIRS = "modular-content"
DEFAULT_EXTENSIONS = ".mdx"

INDEX_STEM = "index"


def split_csv(value: str) -> list[str]:
    """Split a comma-separated option into trimmed, non-empty names."""
    return [part.strip() for part in value.split(",") if part.strip()]


# Paths stay relative here; callers resolve them against their own cwd.
BARTENDER_DOCS_DIR = os.getenv("BARTENDER_DOCS_DIR", DEFAULT_DOCS_DIR)
BARTENDER_OUTPUT_FILE = os.getenv("BARTENDER_OUTPUT_FILE", DEFAULT_OUTPUT_FILE)
BARTENDER_IGNORE_DIRS = split_csv(os.getenv("BARTENDER_IGNORE_DIRS", DEFAULT_IGNORE_DIRS))
BARTENDER_EXTENSIONS = split_csv(os.getenv("BARTENDER_EXTENSIONS", DEFAULT_EXTENSIONS))
