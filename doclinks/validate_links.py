"""Logic for checking outbound links against the loaded documents."""

import logging
import posixpath
import re
from collections.abc import Iterable, Mapping
from fnmatch import fnmatch
from typing import Any
from urllib.parse import unquote

from doclinks.document import Document
from doclinks.link_report import LinkReport
from doclinks.load_config import with_defaults
from doclinks.resolve_link import find_document, resolve_link

logger = logging.getLogger(__name__)

# .png, .pdf, .tar; not .2 (v1.2) nor .2%20Notes
ASSET_SUFFIX_RE = re.compile(r"^\.[a-z][a-z0-9]*$")


def is_document_target(target: str, extensions: Iterable[str]) -> bool:
    """Check whether a target names a document rather than an asset (e.g. .png)."""
    path = target.partition("#")[0].partition("?")[0]
    ext = posixpath.splitext(posixpath.basename(path))[1].lower()
    if ext in {e.lower() for e in extensions}:
        return True
    return not ASSET_SUFFIX_RE.match(ext)


def is_ignored(target: str, patterns: Iterable[str]) -> bool:
    """Check a raw target against the configured ignore globs."""
    return any(fnmatch(target, p) for p in patterns)


def validate_links(
    documents: Mapping[str, Document],
    config: dict[str, Any] | None = None,
) -> LinkReport:
    """Report every outbound link that does not resolve to a known document.

    Unresolved targets that look like assets (``img/x.png``) are skipped.
    """
    cfg = with_defaults(config)
    extensions = cfg["extensions"]
    index_names = cfg["index_names"]
    check_anchors = bool(cfg["check_anchors"])

    report = LinkReport()
    for source_id in sorted(documents):
        for target in documents[source_id].links:
            if is_ignored(target, cfg["ignore"] or []):
                logger.debug("Ignoring %s in %s", target, source_id)
                continue
            link = resolve_link(source_id, target, extensions)
            found = find_document(link, documents, index_names)
            if found is None:
                if is_document_target(target, extensions):
                    report.add(source_id, link.candidates(index_names)[0])
                else:
                    logger.debug("Skipping asset %s in %s", target, source_id)
                continue
            if check_anchors and link.fragment:
                fragment = unquote(link.fragment)
                if fragment not in documents[found].anchors:
                    report.add(source_id, f"{found}#{fragment}")

    if report:
        logger.info(
            "%d unresolved links in %d documents", report.total, len(report)
        )
    return report
