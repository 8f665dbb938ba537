"""bartender: generate Docusaurus sidebars from a docs directory tree."""

from bartender.exceptions import (
    BartenderError,
    DocsDirNotFoundError,
    FrontmatterError,
    OutputWriteError,
)
from bartender.frontmatter import parse_frontmatter, read_frontmatter
from bartender.identifiers import generate_id, sanitize_file_name
from bartender.output_formatter import render_sidebars_module, sidebar_to_dict
from bartender.schemas import Category, DocRef, NavigationNode, SidebarMap
from bartender.sidebar import (
    SidebarOptions,
    generate_sidebars,
    generate_sidebars_object,
)
from bartender.walker import process_directory

__version__ = "0.1.0"

__all__ = [
    "BartenderError",
    "Category",
    "DocRef",
    "DocsDirNotFoundError",
    "FrontmatterError",
    "NavigationNode",
    "OutputWriteError",
    "SidebarMap",
    "SidebarOptions",
    "__version__",
    "generate_id",
    "generate_sidebars",
    "generate_sidebars_object",
    "parse_frontmatter",
    "process_directory",
    "read_frontmatter",
    "render_sidebars_module",
    "sanitize_file_name",
    "sidebar_to_dict",
]
