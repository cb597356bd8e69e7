"""Report of unresolved internal links, grouped by source document."""

import json
from collections.abc import Iterator, Mapping


class LinkReport(Mapping[str, set[str]]):
    """Maps a source identifier to the set of targets that did not resolve."""

    def __init__(self) -> None:
        """Start with an empty report."""
        self.unresolved: dict[str, set[str]] = {}

    def add(self, source: str, target: str) -> None:
        """Record one unresolved target for a source document."""
        self.unresolved.setdefault(source, set()).add(target)

    def __getitem__(self, source: str) -> set[str]:
        return self.unresolved[source]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.unresolved))

    def __len__(self) -> int:
        return len(self.unresolved)

    @property
    def total(self) -> int:
        """Number of (source, target) pairs in the report."""
        return sum(len(targets) for targets in self.unresolved.values())

    def as_dict(self) -> dict[str, list[str]]:
        """Return a JSON-friendly copy with sorted sources and targets."""
        return {src: sorted(self.unresolved[src]) for src in self}

    def render_text(self) -> str:
        """Render a human-readable listing, one broken link per line."""
        if not self:
            return "No unresolved links."
        lines = ["Unresolved links:", ""]
        for src, targets in self.as_dict().items():
            lines.extend(f"- {src} -> {t}" for t in targets)
        lines.extend(["", f"Total: {self.total}"])
        return "\n".join(lines)

    def render_json(self) -> str:
        """Render the report as a JSON object."""
        return json.dumps(self.as_dict(), indent=2, sort_keys=True)
