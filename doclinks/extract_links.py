"""Logic for scanning Markdown text for internal link targets."""

import re

from doclinks.mask_code import mask_code

# [text](target "title"), one level of nested brackets for linked images
INLINE_LINK_RE = re.compile(
    r"(!?)\[(?:[^\[\]]|\[[^\[\]]*\])*\]"
    r"\(\s*(<[^>\n]*>|[^)\s]+)(?:\s+(?:\"[^\"]*\"|'[^']*'|\([^)]*\)))?\s*\)",
)
# [id]: target, but not footnotes ([^1]: text)
REFERENCE_DEF_RE = re.compile(
    r"^ {0,3}\[(?!\^)[^\]]+\]:[ \t]*(<[^>\n]*>|\S+)", re.MULTILINE
)
SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")


def is_external(target: str) -> bool:
    """Check whether a target points outside the content tree."""
    return bool(SCHEME_RE.match(target)) or target.startswith("//")


def _clean_target(raw: str) -> str:
    raw = raw.strip()
    if raw.startswith("<") and raw.endswith(">"):
        raw = raw[1:-1].strip()
    return raw


def extract_links(body: str) -> tuple[str, ...]:
    """Return internal link targets in the order they appear."""
    text = mask_code(body)
    found: list[tuple[int, str]] = []
    for m in INLINE_LINK_RE.finditer(text):
        if m.group(1):
            continue  # image
        found.append((m.start(), _clean_target(m.group(2))))
    for m in REFERENCE_DEF_RE.finditer(text):
        found.append((m.start(), _clean_target(m.group(1))))
    found.sort(key=lambda pair: pair[0])
    return tuple(t for _, t in found if t and not is_external(t))
