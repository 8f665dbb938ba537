"""Sidebar generation for a Docusaurus docs directory."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from bartender.config import (
    BARTENDER_DOCS_DIR,
    BARTENDER_EXTENSIONS,
    BARTENDER_IGNORE_DIRS,
    BARTENDER_OUTPUT_FILE,
)
from bartender.exceptions import DocsDirNotFoundError
from bartender.output_formatter import write_sidebars
from bartender.schemas import SidebarMap
from bartender.walker import process_directory

logger = logging.getLogger(__name__)


@dataclass
class SidebarOptions:
    """Options for sidebar generation.

    Attributes:
        docs_dir: Root docs directory. Each sub-directory becomes a sidebar.
        output_file: Where ``generate_sidebars`` writes the sidebars module.
        ignore_dirs: Top-level directory names that get no sidebar.
        extensions: File extensions treated as content files.
    """

    docs_dir: Path = field(default_factory=lambda: Path(BARTENDER_DOCS_DIR))
    output_file: Path = field(default_factory=lambda: Path(BARTENDER_OUTPUT_FILE))
    ignore_dirs: list[str] = field(default_factory=lambda: list(BARTENDER_IGNORE_DIRS))
    extensions: list[str] = field(default_factory=lambda: list(BARTENDER_EXTENSIONS))


def generate_sidebars_object(options: SidebarOptions | None = None) -> SidebarMap:
    """Build one sidebar per top-level docs directory without writing it.

    Args:
        options: Generation options. Uses defaults if None.

    Returns:
        Mapping of top-level directory name to a one-element list holding
        that directory's category. Directories without content are left out.

    Raises:
        DocsDirNotFoundError: If the docs directory is missing or cannot be
            listed.
    """
    opts = options or SidebarOptions()
    docs_dir = Path(opts.docs_dir)
    ignored = set(opts.ignore_dirs)

    try:
        with os.scandir(docs_dir) as iterator:
            directories = [entry for entry in iterator if entry.is_dir(follow_symlinks=False)]
        top_level = sorted(directories, key=lambda entry: entry.name)
    except OSError as exc:
        raise DocsDirNotFoundError(f"Docs directory not found or unreadable at {docs_dir}: {exc}") from exc

    sidebar: SidebarMap = {}
    for entry in top_level:
        if entry.name in ignored:
            logger.debug("Ignoring top-level directory %s", entry.name)
            continue
        try:
            section = process_directory(Path(entry.path), docs_dir, extensions=opts.extensions)
        except OSError as exc:
            logger.warning("Skipping directory %s: %s", entry.path, exc)
            continue
        if section is not None:
            sidebar[entry.name] = [section]

    return sidebar


def generate_sidebars(options: SidebarOptions | None = None) -> SidebarMap:
    """Build the sidebars and write them to ``options.output_file``.

    Raises:
        DocsDirNotFoundError: If the docs directory is missing.
        OutputWriteError: If the output file cannot be written.
    """
    opts = options or SidebarOptions()
    sidebar = generate_sidebars_object(opts)
    write_sidebars(sidebar, Path(opts.output_file))
    logger.info("Sidebar generated successfully at %s", opts.output_file, extra={"sidebars": len(sidebar)})
    return sidebar
