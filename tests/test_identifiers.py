"""Tests for doc id generation."""

from __future__ import annotations

from pathlib import Path

import pytest

from bartender.identifiers import generate_id, sanitize_file_name


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("guides/intro", "guides/intro"),
        ("a//b", "a/b"),
        ("/guides/intro", "guides/intro"),
        ("guides/my doc (v2)!", "guides/mydocv2"),
        ("guides/héllo", "guides/hllo"),
        ("api/v1.2/get_user-id", "api/v1.2/get_user-id"),
        ("a/ /b", "a/b"),
    ],
)
def test_sanitize_file_name(name: str, expected: str) -> None:
    assert sanitize_file_name(name) == expected


def test_sanitize_is_deterministic() -> None:
    assert sanitize_file_name("a b/c?d") == sanitize_file_name("a b/c?d")


class TestGenerateId:
    """Tests for generate_id function."""

    def test_relative_to_docs_dir(self, tmp_path: Path) -> None:
        """Ids are relative to the docs root without the extension."""
        docs = tmp_path / "docs"
        assert generate_id(docs / "guides" / "intro.mdx", docs) == "guides/intro"

    def test_index_file(self, tmp_path: Path) -> None:
        docs = tmp_path / "docs"
        assert generate_id(docs / "guides" / "index.mdx", docs) == "guides/index"

    def test_strips_only_matching_extension(self, tmp_path: Path) -> None:
        """Extensions that are not content extensions stay in the id."""
        docs = tmp_path / "docs"
        assert generate_id(docs / "notes.md", docs) == "notes.md"

    def test_custom_extensions(self, tmp_path: Path) -> None:
        docs = tmp_path / "docs"
        result = generate_id(docs / "a" / "b.md", docs, extensions=(".mdx", ".md"))
        assert result == "a/b"

    def test_sanitizes_relative_path(self, tmp_path: Path) -> None:
        docs = tmp_path / "docs"
        result = generate_id(docs / "Getting Started" / "First Steps!.mdx", docs)
        assert result == "GettingStarted/FirstSteps"
