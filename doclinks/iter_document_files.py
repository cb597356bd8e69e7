"""Logic for discovering document files under a content root."""

import os
from collections.abc import Iterable
from fnmatch import fnmatch
from pathlib import Path

from doclinks.load_error import LoadError


def is_excluded(rel_path: Path, exclude: Iterable[str]) -> bool:
    """Check a relative path against exclusion globs.

    Patterns without a slash are matched against every path component, so
    ``.*`` hides dot-directories anywhere in the tree. Patterns with a slash
    are matched against the whole POSIX path.
    """
    posix = rel_path.as_posix()
    for pattern in exclude:
        if "/" in pattern:
            if fnmatch(posix, pattern):
                return True
        elif any(fnmatch(part, pattern) for part in rel_path.parts):
            return True
    return False


def _raise_unreadable(err: OSError) -> None:
    msg = "Cannot read directory"
    raise LoadError(msg, Path(err.filename or "")) from err


def iter_document_files(
    root: Path,
    extensions: Iterable[str],
    exclude: Iterable[str] = (),
) -> list[Path]:
    """Return all document files under root in a stable order.

    Raises LoadError when a directory in the tree cannot be listed.
    """
    exts = {e.lower() for e in extensions}
    patterns = list(exclude)
    found = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_unreadable):
        rel_dir = Path(dirpath).relative_to(root)
        # Excluded directories are not descended into
        dirnames[:] = [d for d in dirnames if not is_excluded(rel_dir / d, patterns)]
        for name in filenames:
            rel = rel_dir / name
            if rel.suffix.lower() not in exts or is_excluded(rel, patterns):
                continue
            found.append(root / rel)
    return sorted(found, key=lambda p: p.relative_to(root).as_posix())
