"""Utilities for deriving document identifiers from file paths."""

import re
from collections.abc import Iterable
from pathlib import PurePath

SEGMENT_UNSAFE_RE = re.compile(r"[^a-z0-9_]+")


def slug_segment(segment: str) -> str:
    """Normalize one path segment: lower case, unsafe runs become a hyphen."""
    if segment == "..":
        return segment
    slug = SEGMENT_UNSAFE_RE.sub("-", segment.lower()).strip("-")
    # Avoid pathological emptiness
    return slug or "unknown"


def strip_extension(name: str, extensions: Iterable[str]) -> str:
    """Remove a trailing document extension (case-insensitive) if present."""
    lowered = name.lower()
    for ext in extensions:
        if ext and lowered.endswith(ext.lower()) and len(name) > len(ext):
            return name[: -len(ext)]
    return name


def identifier_for_path(
    rel_path: PurePath | str,
    extensions: Iterable[str] = (".md",),
) -> str:
    """Derive the identifier for a document path relative to the content root."""
    # Principles/Dont Repeat.md -> principles/dont-repeat
    parts = [p for p in PurePath(rel_path).as_posix().split("/") if p]
    if not parts:
        return ""
    parts[-1] = strip_extension(parts[-1], extensions)
    return "/".join(slug_segment(p) for p in parts)


def flat_key(identifier: str) -> str:
    """Return the identifier as a flattening site generator would publish it."""
    return identifier.replace("/", "-")
