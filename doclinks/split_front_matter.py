"""Logic for separating YAML front matter from a Markdown body."""

import logging
from typing import Any

import yaml

logger = logging.getLogger(__name__)

FRONT_MATTER_DELIM = "---"
FRONT_MATTER_END = {"---", "..."}


def split_front_matter(text: str, source: str = "<text>") -> tuple[dict[str, Any], str]:
    """Split a leading YAML front matter block from the document body.

    Returns the parsed mapping (empty when there is no block, or when it does
    not parse to a mapping) and the remaining body text.
    """
    text = text.lstrip("\ufeff")
    lines = text.splitlines()
    if not lines or lines[0].rstrip() != FRONT_MATTER_DELIM:
        return {}, text

    for i, line in enumerate(lines[1:], start=1):
        if line.rstrip() in FRONT_MATTER_END:
            raw = "\n".join(lines[1:i])
            body = "\n".join(lines[i + 1 :])
            break
    else:
        # Unterminated: treat the whole thing as body
        return {}, text

    try:
        meta = yaml.safe_load(raw)
    except yaml.YAMLError:
        logger.warning("Ignoring malformed front matter in %s", source)
        return {}, body
    if not isinstance(meta, dict):
        return {}, body
    return meta, body
