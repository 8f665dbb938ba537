"""Read YAML front matter from content files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from bartender.exceptions import FrontmatterError

_DELIMITER = "---"


def parse_frontmatter(text: str) -> dict[str, Any]:
    """Parse the leading YAML block of a document.

    The block must open on the first line with ``---`` and close with the
    next ``---`` line. Documents without a block yield an empty mapping.

    Args:
        text: Full document text.

    Returns:
        The front matter as a mapping (possibly empty).

    Raises:
        FrontmatterError: If the block is unterminated, is not valid YAML,
            or does not contain a mapping.
    """
    lines = text.lstrip("\ufeff").splitlines()
    if not lines or lines[0].rstrip() != _DELIMITER:
        return {}

    for end, line in enumerate(lines[1:], start=1):
        if line.rstrip() == _DELIMITER:
            block = "\n".join(lines[1:end])
            break
    else:
        raise FrontmatterError("Front matter block is not terminated")

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        raise FrontmatterError(f"Invalid YAML in front matter: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontmatterError(f"Front matter must be a mapping, got {type(data).__name__}")
    return data


def read_frontmatter(path: Path) -> dict[str, Any]:
    """Read a file and return its front matter.

    Raises:
        FrontmatterError: If the file is not valid UTF-8 or its front
            matter cannot be parsed.
        OSError: If the file cannot be read.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise FrontmatterError(f"{path} is not valid UTF-8: {exc}") from exc
    return parse_frontmatter(text)
