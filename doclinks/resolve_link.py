"""Logic for resolving relative link targets to document identifiers."""

import posixpath
from collections.abc import Iterable, Mapping
from urllib.parse import unquote

from doclinks.identifier_for_path import slug_segment, strip_extension
from doclinks.resolved_link import ResolvedLink


def resolve_link(
    source_id: str,
    target: str,
    extensions: Iterable[str] = (".md",),
) -> ResolvedLink:
    """Resolve a link target written in source_id to a target identifier."""
    path, _, fragment = target.partition("#")
    path = unquote(path.partition("?")[0])
    if not path:
        # Pure #anchor: refers to the source document itself
        return ResolvedLink(source_id, fragment)

    is_directory = path.endswith("/")
    base = "" if path.startswith("/") else posixpath.dirname(source_id)
    joined = posixpath.normpath(posixpath.join(base, path.lstrip("/")))
    if joined == ".":
        return ResolvedLink("", fragment, is_directory=True)

    parts = joined.split("/")
    if not is_directory:
        parts[-1] = strip_extension(parts[-1], extensions)
    identifier = "/".join(slug_segment(p) for p in parts)
    return ResolvedLink(identifier, fragment, is_directory=is_directory)


def find_document(
    link: ResolvedLink,
    known: Mapping[str, object] | set[str],
    index_names: list[str],
) -> str | None:
    """Return the first known identifier satisfying the link, if any."""
    for candidate in link.candidates(index_names):
        if candidate in known:
            return candidate
    return None
