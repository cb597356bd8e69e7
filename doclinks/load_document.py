"""Logic for loading a single document file."""

import logging
from pathlib import Path

from doclinks.document import Document
from doclinks.extract_anchors import extract_anchors
from doclinks.extract_links import extract_links
from doclinks.extract_title import extract_title
from doclinks.load_error import LoadError
from doclinks.split_front_matter import split_front_matter

logger = logging.getLogger(__name__)


def load_document(path: Path, identifier: str) -> Document:
    """Read a document file and extract its title, links and anchors."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read document ({e.__class__.__name__})"
        raise LoadError(msg, path) from e

    meta, body = split_front_matter(text, source=str(path))
    doc = Document(
        identifier=identifier,
        title=extract_title(body, fallback=path.stem, meta=meta),
        links=extract_links(body),
        path=path,
        anchors=extract_anchors(body),
    )
    logger.debug("Loaded %s (%d links)", identifier, len(doc.links))
    return doc
