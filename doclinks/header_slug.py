"""Utility for generating slugs for Markdown headers."""

import re


def header_slug(s: str) -> str:
    """Generate a GitHub-ish anchor slug: lower, drop punctuation, hyphenate spaces."""
    s = s.strip().lower()
    s = re.sub(r"[^\w\- ]", "", s)
    s = s.replace(" ", "-")
    return s or "section"
