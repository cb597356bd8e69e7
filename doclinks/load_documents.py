"""Logic for loading every document under a content root."""

import logging
import os
from pathlib import Path
from typing import Any

from doclinks.document import Document
from doclinks.identifier_for_path import flat_key, identifier_for_path
from doclinks.iter_document_files import iter_document_files
from doclinks.load_config import with_defaults
from doclinks.load_document import load_document
from doclinks.load_error import LoadError

logger = logging.getLogger(__name__)


def load_documents(
    root: Path | str,
    config: dict[str, Any] | None = None,
) -> dict[str, Document]:
    """Load all documents under root into a map of identifier to Document.

    Raises LoadError when the root is missing or unreadable, a directory or
    file cannot be read, or two files normalize to the same identifier (or flat key).
    """
    cfg = with_defaults(config)
    root = Path(root)
    if not root.exists():
        msg = "Content root does not exist"
        raise LoadError(msg, root)
    if not root.is_dir():
        msg = "Content root is not a directory"
        raise LoadError(msg, root)
    if not os.access(root, os.R_OK | os.X_OK):
        msg = "Content root is not readable"
        raise LoadError(msg, root)

    extensions = cfg["extensions"]
    files = iter_document_files(root, extensions, cfg["exclude"])

    documents: dict[str, Document] = {}
    claimed: dict[str, tuple[str, Path]] = {}  # flat key -> (identifier, path)
    for path in files:
        identifier = identifier_for_path(path.relative_to(root), extensions)
        key = flat_key(identifier)
        if key in claimed:
            other_id, other_path = claimed[key]
            if other_id == identifier:
                msg = f"Duplicate document identifier '{identifier}'"
            else:
                msg = f"Identifiers '{other_id}' and '{identifier}' collide as '{key}'"
            raise LoadError(msg, other_path, path)
        claimed[key] = (identifier, path)
        documents[identifier] = load_document(path, identifier)

    logger.info("Loaded %d documents from %s", len(documents), root)
    return documents
