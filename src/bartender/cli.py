"""Command-line interface for bartender."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from bartender import __version__
from bartender.config import (
    BARTENDER_DOCS_DIR,
    BARTENDER_EXTENSIONS,
    BARTENDER_IGNORE_DIRS,
    BARTENDER_OUTPUT_FILE,
    split_csv,
)
from bartender.exceptions import BartenderError
from bartender.sidebar import SidebarOptions, generate_sidebars
from bartender.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docusaurus-bartender", description="Generate Docusaurus sidebars based on directory structure"
    )
    parser.add_argument("-d", "--docs", default=BARTENDER_DOCS_DIR, help="path to docs directory")
    parser.add_argument("-o", "--output", default=BARTENDER_OUTPUT_FILE, help="output file path")
    parser.add_argument(
        "-i", "--ignore", default=",".join(BARTENDER_IGNORE_DIRS), help="directories to ignore (comma-separated)"
    )
    parser.add_argument(
        "-e", "--extensions", default=",".join(BARTENDER_EXTENSIONS), help="content file extensions (comma-separated)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="show debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    cwd = Path.cwd()
    docs_dir = (cwd / args.docs).resolve()
    output_file = (cwd / args.output).resolve()

    if not docs_dir.is_dir():
        print(f"Error: Docs directory not found at {docs_dir}", file=sys.stderr)
        return 1

    options = SidebarOptions(
        docs_dir=docs_dir,
        output_file=output_file,
        ignore_dirs=split_csv(args.ignore),
        extensions=split_csv(args.extensions),
    )

    print("Bartender is mixing your sidebar...")
    try:
        generate_sidebars(options)
    except BartenderError as exc:
        logger.debug("Sidebar generation failed", exc_info=True)
        print(f"Error generating sidebar: {exc}", file=sys.stderr)
        return 1

    print(f"Sidebar successfully generated at {output_file}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
