"""Exception raised when a content tree cannot be loaded."""

from pathlib import Path


class LoadError(Exception):
    """Fatal problem while loading documents or configuration."""

    def __init__(self, message: str, *paths: Path) -> None:
        """Store the message together with the offending path(s)."""
        self.message = message
        self.paths = tuple(Path(p) for p in paths)
        if self.paths:
            message = f"{message}: {', '.join(str(p) for p in self.paths)}"
        super().__init__(message)
