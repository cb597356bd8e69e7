"""Logic for extracting a document title."""

from typing import Any

from doclinks.iter_headings import iter_headings


def extract_title(body: str, fallback: str, meta: dict[str, Any] | None = None) -> str:
    """Return the front matter title, else the first heading, else the fallback."""
    title = (meta or {}).get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()
    return next(iter_headings(body), fallback)
