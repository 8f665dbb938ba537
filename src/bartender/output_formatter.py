"""Format a sidebar map as a Docusaurus sidebars module."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from bartender.exceptions import OutputWriteError
from bartender.schemas import SidebarMap


def sidebar_to_dict(sidebar: SidebarMap) -> dict[str, list[dict[str, Any]]]:
    """Dump the sidebar map to plain JSON-compatible data."""
    return {
        name: [node.model_dump(exclude_none=True) for node in nodes]
        for name, nodes in sidebar.items()
    }


def render_sidebars_module(sidebar: SidebarMap) -> str:
    """Render the sidebar map as an ES module with a default export."""
    body = json.dumps(sidebar_to_dict(sidebar), indent=2, ensure_ascii=False)
    return f"export default {body};"


def write_sidebars(sidebar: SidebarMap, output_file: Path) -> None:
    """Write the rendered sidebars module to ``output_file``.

    Raises:
        OutputWriteError: If the file cannot be written.
    """
    try:
        Path(output_file).write_text(render_sidebars_module(sidebar), encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"Failed to write {output_file}: {exc}") from exc
