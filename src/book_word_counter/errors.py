from __future__ import annotations

from pathlib import Path


class WordCountIOError(OSError):
    """Raised when a document or report cannot be read or written."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class DocumentReadError(WordCountIOError):
    """Raised when a document cannot be opened, decoded or parsed."""


class ReportWriteError(WordCountIOError):
    """Raised when a report or export destination cannot be written."""
