"""Test setup for bartender."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def _frontmatter(**fields: object) -> str:
    if not fields:
        return "# Body\n"
    lines = ["---"]
    for key, value in fields.items():
        lines.append(f"{key}: {value}")
    lines.append("---")
    lines.append("")
    lines.append("# Body")
    return "\n".join(lines) + "\n"


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Empty docs root."""
    path = tmp_path / "docs"
    path.mkdir()
    return path


@pytest.fixture
def write_doc() -> Callable[..., Path]:
    """Write a content file, creating parent directories.

    Keyword arguments become front matter lines, written verbatim as YAML.
    """

    def _write(path: Path, **fields: object) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(_frontmatter(**fields), encoding="utf-8")
        return path

    return _write
