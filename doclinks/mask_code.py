"""Utility for blanking out Markdown code so it is not scanned for syntax."""

import re

FENCE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")
INLINE_CODE_RE = re.compile(r"(`+)(.+?)\1")


def unwrap_code_spans(line: str) -> str:
    """Drop the backtick delimiters of inline code spans, keeping their text."""
    return INLINE_CODE_RE.sub(r"\2", line)


def mask_code(text: str, *, inline: bool = True) -> str:
    """Blank fenced code blocks (and inline code spans), keeping line count."""
    out: list[str] = []
    fence: str | None = None
    for line in text.splitlines():
        m = FENCE_RE.match(line)
        if fence is None:
            if m:
                fence = m.group(1)
                out.append("")
                continue
            out.append(INLINE_CODE_RE.sub("", line) if inline else line)
        else:
            # A closing fence uses the same character and is at least as long
            if m and m.group(1)[0] == fence[0] and len(m.group(1)) >= len(fence):
                if not line.strip().lstrip(fence[0]):
                    fence = None
            out.append("")
    return "\n".join(out)
