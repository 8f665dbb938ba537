"""Doc identifier generation."""

from __future__ import annotations

import re
from pathlib import Path, PurePath
from typing import Iterable

_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9\-_./]")
_REPEATED_SLASHES = re.compile(r"/+")


def sanitize_file_name(name: str) -> str:
    """Strip characters Docusaurus does not accept in doc ids.

    Keeps ASCII letters, digits, ``-``, ``_``, ``.`` and ``/``, collapses
    repeated slashes and drops a leading slash. Distinct names that only
    differ in removed characters map to the same id; this is not detected.
    """
    name = _INVALID_CHARS.sub("", name)
    name = _REPEATED_SLASHES.sub("/", name)
    return re.sub(r"^/", "", name)


def generate_id(
    file_path: Path,
    docs_dir: Path,
    *,
    extensions: Iterable[str] = (".mdx",),
) -> str:
    """Build the sanitized doc id for a content file.

    Args:
        file_path: Path to the content file.
        docs_dir: Root docs directory ids are relative to.
        extensions: Content file extensions; a matching suffix is removed.

    Returns:
        The root-relative, extension-less, sanitized id.
    """
    try:
        relative = PurePath(file_path).relative_to(docs_dir).as_posix()
    except ValueError:
        # Outside the docs root: fall back to the full path.
        relative = PurePath(file_path).as_posix()

    for extension in extensions:
        if extension and relative.endswith(extension):
            relative = relative[: -len(extension)]
            break

    return sanitize_file_name(relative)
