"""Check a Markdown content tree for internal links that do not resolve.

Loads every document under the content root, validates each outbound link
against the loaded identifiers, and prints the unresolved ones. Exits 0 when
every link resolves, 1 when some do not, and 2 when the tree cannot be loaded.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from doclinks.find_orphans import find_orphans
from doclinks.load_config import load_config
from doclinks.load_documents import load_documents
from doclinks.load_error import LoadError
from doclinks.validate_links import validate_links

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNRESOLVED = 1
EXIT_LOAD_ERROR = 2


def run_check(args: argparse.Namespace) -> int:
    """Execute the load and validate phases and print the report."""
    try:
        config = _init_config(args)
        documents = load_documents(args.root, config)
    except LoadError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        for p in e.paths:
            print(f"  {p}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    report = validate_links(documents, config)

    if config.get("report_orphans"):
        for orphan in find_orphans(documents, config):
            logger.warning("No document links to %s", orphan)

    if args.format == "json":
        print(report.render_json())
    else:
        print(report.render_text())
        print(f"Checked {len(documents)} documents under: {args.root}")

    return EXIT_UNRESOLVED if report else EXIT_OK


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load configuration and apply command-line overrides."""
    config = load_config(args.config)
    if args.check_anchors:
        config["check_anchors"] = True
    if args.orphans:
        config["report_orphans"] = True
    return config


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the link check."""
    ap = argparse.ArgumentParser(
        prog="doclinks",
        description="Report internal Markdown links that do not resolve.",
    )
    ap.add_argument(
        "root",
        type=Path,
        help="Content root containing the documents (*.md)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format (default: text)",
    )
    ap.add_argument(
        "--check-anchors",
        action="store_true",
        help="Also report #fragments that match no heading in the target",
    )
    ap.add_argument(
        "--orphans",
        action="store_true",
        help="Warn about documents that no other document links to",
    )
    ap.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_check(args)


def app() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())


if __name__ == "__main__":
    raise SystemExit(main())
