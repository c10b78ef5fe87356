from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from .epub import iter_epub_lines
from .errors import DocumentReadError

LOGGER = logging.getLogger(__name__)

# File types that can be turned into a line stream.
SUPPORTED_DOCUMENT_EXTENSIONS = {".txt", ".epub"}


def iter_document_lines(path: str | Path) -> Iterator[str]:
    """
    Stream the lines of a document without loading it whole.

    ``.epub`` archives are unpacked chapter by chapter; any other file is
    read as UTF-8 text with undecodable bytes replaced.
    """
    document = Path(path)
    if document.suffix.lower() == ".epub":
        yield from iter_epub_lines(document)
        return

    LOGGER.debug("Opening text document %s", document)
    try:
        with document.open("r", encoding="utf-8", errors="replace") as handle:
            yield from handle
    except OSError as exc:
        raise DocumentReadError(
            f"Unable to read document {document}: {exc.strerror or exc}", document
        ) from exc
