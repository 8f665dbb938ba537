"""Walk a docs directory into a sidebar category tree."""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path
from typing import Any, Iterable, Union

from bartender.config import INDEX_STEM
from bartender.exceptions import FrontmatterError
from bartender.frontmatter import read_frontmatter
from bartender.identifiers import generate_id
from bartender.schemas import Category, DocRef, NavigationNode

logger = logging.getLogger(__name__)

Position = Union[int, float]


def process_directory(
    directory: Path,
    docs_dir: Path,
    *,
    extensions: Iterable[str] = (".mdx",),
) -> Category | None:
    """Build the sidebar category for a directory.

    Sub-directories become nested categories and content files become docs.
    An ``index`` content file describes the category itself: its ``title``
    and ``description`` front matter become the label and description, and
    the category links to it. Items with a ``sidebar_position`` come first in
    ascending order, followed by the rest in directory listing order.

    Args:
        directory: Directory to process.
        docs_dir: Root docs directory, used to compute doc ids.
        extensions: File extensions treated as content files.

    Returns:
        The category for the directory, or None if it holds no content.

    Raises:
        OSError: If ``directory`` itself cannot be listed. Failures below it
            are logged and skipped.
    """
    category, _ = _walk(Path(directory), Path(docs_dir), tuple(extensions))
    return category


def _walk(directory: Path, docs_dir: Path, extensions: tuple[str, ...]) -> tuple[Category | None, Position | None]:
    """Return the directory's category and the position its index requested."""
    with os.scandir(directory) as iterator:
        entries = sorted(iterator, key=lambda entry: entry.name)

    positioned: list[tuple[Position, NavigationNode]] = []
    unpositioned: list[NavigationNode] = []
    category: Category | None = None
    index_path: Path | None = None
    category_position: Position | None = None

    for entry in entries:
        entry_path = Path(entry.path)

        # Symlinked entries are skipped, matching the directory listing types.
        if entry.is_dir(follow_symlinks=False):
            try:
                sub_category, sub_position = _walk(entry_path, docs_dir, extensions)
            except OSError as exc:
                logger.warning("Skipping unreadable directory %s: %s", entry_path, exc)
                continue
            if sub_category is not None:
                _stage(sub_category, sub_position, positioned, unpositioned)
            continue

        if not entry.is_file(follow_symlinks=False):
            continue
        stem = _content_stem(entry.name, extensions)
        if stem is None:
            continue

        if stem == INDEX_STEM:
            try:
                frontmatter = read_frontmatter(entry_path)
            except (OSError, FrontmatterError) as exc:
                logger.warning("Error reading frontmatter for %s: %s", entry_path, exc)
                continue
            if index_path is not None:
                logger.warning(
                    "Multiple index files in %s: %s replaces %s", directory, entry_path.name, index_path.name
                )
            index_path = entry_path
            category = _category_from_index(entry_path, directory, docs_dir, frontmatter, extensions)
            category_position = _sidebar_position(frontmatter, entry_path)
            continue

        doc = DocRef(id=generate_id(entry_path, docs_dir, extensions=extensions))
        try:
            frontmatter = read_frontmatter(entry_path)
        except (OSError, FrontmatterError) as exc:
            logger.warning("Error reading frontmatter for %s: %s", entry_path, exc)
            continue
        _stage(doc, _sidebar_position(frontmatter, entry_path), positioned, unpositioned)

    # list.sort is stable, so equal positions keep listing order.
    positioned.sort(key=lambda pair: pair[0])
    items = [node for _, node in positioned] + unpositioned

    if category is not None:
        category.items = items
        return category, category_position
    if items:
        logger.warning("Missing index file in %s, creating category from its items.", directory)
        return Category(label=directory.name, items=items), None
    return None, None


def _stage(
    node: NavigationNode,
    position: Position | None,
    positioned: list[tuple[Position, NavigationNode]],
    unpositioned: list[NavigationNode],
) -> None:
    if position is None:
        unpositioned.append(node)
    else:
        positioned.append((position, node))


def _content_stem(name: str, extensions: tuple[str, ...]) -> str | None:
    """Return the file name without its content extension, or None."""
    for extension in extensions:
        if extension and name.endswith(extension) and len(name) > len(extension):
            return name[: -len(extension)]
    return None


def _category_from_index(
    index_path: Path,
    directory: Path,
    docs_dir: Path,
    frontmatter: dict[str, Any],
    extensions: tuple[str, ...],
) -> Category:
    """Build the category described by an index file.

    ``title`` and ``description`` must be scalars; numbers are written as
    text, and lists or mappings are ignored with a warning.
    """
    label = _text_field(frontmatter, "title", index_path) or directory.name
    category = Category(label=label, link=DocRef(id=generate_id(index_path, docs_dir, extensions=extensions)))
    description = _text_field(frontmatter, "description", index_path)
    if description:
        category.description = description.strip()
    return category


def _text_field(frontmatter: dict[str, Any], key: str, path: Path) -> str | None:
    value = frontmatter.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        logger.warning("Ignoring non-text %s %r in %s", key, value, path)
        return None
    return str(value)


def _sidebar_position(frontmatter: dict[str, Any], path: Path) -> Position | None:
    """Return the numeric ``sidebar_position``, or None if absent or invalid."""
    position = frontmatter.get("sidebar_position")
    if position is None:
        return None
    if isinstance(position, bool) or not isinstance(position, (int, float)) or math.isnan(position):
        logger.warning("Ignoring non-numeric sidebar_position %r in %s", position, path)
        return None
    return position
