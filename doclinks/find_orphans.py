"""Logic for finding documents that nothing links to."""

from collections.abc import Iterable, Mapping
from typing import Any

from doclinks.document import Document
from doclinks.load_config import with_defaults
from doclinks.resolve_link import find_document, resolve_link


def find_orphans(
    documents: Mapping[str, Document],
    config: dict[str, Any] | None = None,
    entry_points: Iterable[str] | None = None,
) -> list[str]:
    """Return identifiers with no inbound links from other documents."""
    cfg = with_defaults(config)
    extensions = cfg["extensions"]
    index_names = cfg["index_names"]
    roots = set(cfg["entry_points"] if entry_points is None else entry_points)

    linked: set[str] = set()
    for source_id, doc in documents.items():
        for target in doc.links:
            found = find_document(
                resolve_link(source_id, target, extensions), documents, index_names
            )
            if found and found != source_id:
                linked.add(found)

    return sorted(i for i in documents if i not in linked and i not in roots)
