from pathlib import Path
from typing import Any


class BlogmarkError(Exception):
    """Base exception for errors reported to the command line user."""

    exit_code: int = 1

    def __init__(self, message: str):
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"detail": str(self)}


class SourceNotFoundError(BlogmarkError):
    """Raised when the markdown source file does not exist."""

    def __init__(self, path: Path, *, message: str | None = None):
        super().__init__(message or f"Markdown source {str(path)!r} not found")
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        return {"detail": str(self), "path": str(self.path)}
