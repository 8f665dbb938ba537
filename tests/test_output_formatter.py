"""Tests for sidebar output formatting."""

from __future__ import annotations

import json
from pathlib import Path

from bartender.output_formatter import (
    render_sidebars_module,
    sidebar_to_dict,
    write_sidebars,
)
from bartender.schemas import Category, DocRef


def _sample_sidebar() -> dict[str, list[Category]]:
    basics = Category(label="basics", items=[DocRef(id="guides/basics/setup")])
    guides = Category(
        label="Guides",
        link=DocRef(id="guides/index"),
        description="Learn the ropes",
        items=[DocRef(id="guides/intro"), basics],
    )
    return {"guides": [guides]}


def test_sidebar_to_dict_omits_absent_fields() -> None:
    assert sidebar_to_dict(_sample_sidebar()) == {
        "guides": [
            {
                "type": "category",
                "label": "Guides",
                "link": {"type": "doc", "id": "guides/index"},
                "description": "Learn the ropes",
                "items": [
                    {"type": "doc", "id": "guides/intro"},
                    {
                        "type": "category",
                        "label": "basics",
                        "items": [{"type": "doc", "id": "guides/basics/setup"}],
                    },
                ],
            }
        ]
    }


def test_category_keys_keep_sidebar_order() -> None:
    category = sidebar_to_dict(_sample_sidebar())["guides"][0]

    assert list(category) == ["type", "label", "link", "description", "items"]


def test_render_module_is_default_export() -> None:
    rendered = render_sidebars_module(_sample_sidebar())

    assert rendered.startswith("export default {\n  ")
    assert rendered.endswith("};")
    body = rendered[len("export default ") : -1]
    assert json.loads(body) == sidebar_to_dict(_sample_sidebar())


def test_render_keeps_non_ascii_labels() -> None:
    sidebar = {"guides": [Category(label="Guía", items=[DocRef(id="guides/a")])]}

    assert '"label": "Guía"' in render_sidebars_module(sidebar)


def test_render_empty_map() -> None:
    assert render_sidebars_module({}) == "export default {};"


def test_write_sidebars(tmp_path: Path) -> None:
    output_file = tmp_path / "sidebars.js"

    write_sidebars(_sample_sidebar(), output_file)

    assert output_file.read_text(encoding="utf-8") == render_sidebars_module(
        _sample_sidebar()
    )
