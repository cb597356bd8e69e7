"""Logic for collecting the heading anchors of a document."""

from doclinks.header_slug import header_slug
from doclinks.iter_headings import iter_headings


def extract_anchors(body: str) -> frozenset[str]:
    """Return heading slugs; repeated headings get -1, -2, ... suffixes."""
    seen: dict[str, int] = {}
    anchors: set[str] = set()
    for heading in iter_headings(body):
        slug = header_slug(heading)
        if slug in seen:
            seen[slug] += 1
            anchors.add(f"{slug}-{seen[slug]}")
        else:
            seen[slug] = 0
            anchors.add(slug)
    return frozenset(anchors)
