"""Data model for an outbound link resolved against the content root."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedLink:
    """Represents where a link target points inside the content tree."""

    identifier: str  # slug of the target path, "" for the content root
    fragment: str = ""
    is_directory: bool = False

    def candidates(self, index_names: list[str]) -> list[str]:
        """Identifiers that satisfy this link, most specific first."""
        prefix = f"{self.identifier}/" if self.identifier else ""
        index_ids = [f"{prefix}{name}" for name in index_names]
        if self.is_directory or not self.identifier:
            return index_ids
        return [self.identifier, *index_ids]
