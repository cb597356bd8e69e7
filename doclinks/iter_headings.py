"""Logic for iterating over the headings of a Markdown document."""

import re
from collections.abc import Iterator

from doclinks.mask_code import mask_code, unwrap_code_spans

ATX_HEADING_RE = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?(?:[ \t]+#+)?[ \t]*$")
SETEXT_UNDERLINE_RE = re.compile(r"^ {0,3}(=+|-+)[ \t]*$")


def iter_headings(text: str) -> Iterator[str]:
    """Yield heading texts (ATX and Setext) in document order, skipping code blocks.

    Inline code inside a heading keeps its text; only the backticks go.
    """
    lines = mask_code(text, inline=False).splitlines()
    prev = ""
    for line in lines:
        m = ATX_HEADING_RE.match(line)
        if m:
            heading = unwrap_code_spans(m.group(2) or "").strip()
            if heading:
                yield heading
            prev = ""
            continue
        if prev.strip() and SETEXT_UNDERLINE_RE.match(line):
            yield unwrap_code_spans(prev).strip()
            prev = ""
            continue
        prev = line
