"""Data model for a loaded document."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Document:
    """A single text document from the content tree."""

    identifier: str  # path-derived slug, e.g. principles/dry
    title: str
    links: tuple[str, ...]  # outbound targets as written, in source order
    path: Path
    anchors: frozenset[str] = field(default_factory=frozenset)
