from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable

from .errors import DocumentReadError, ReportWriteError, WordCountIOError
from .sources import iter_document_lines
from .tokenization import is_token, tokenize_line

LOGGER = logging.getLogger(__name__)

REPORT_HEADER = "Total words counted: {total}"
REPORT_LINE = "{word}: {count}"


class FrequencyTable:
    """
    Word -> occurrence count mapping for a single document.

    The table only grows: ingestion adds tokens and nothing removes them.
    It is not thread-safe; build one table per document and rebuild it on
    reload instead of sharing it between concurrent readers and writers.
    """

    def __init__(self) -> None:
        self._counts: Dict[str, int] = {}
        self._total = 0

    @classmethod
    def from_file(cls, path: str | Path) -> FrequencyTable:
        """Build a fresh table from every line of the document at ``path``."""
        table = cls()
        table.ingest_file(path)
        return table

    def __len__(self) -> int:
        return len(self._counts)

    def ingest_line(self, line: str | None) -> None:
        """Count every token in ``line``; empty or ``None`` input is a no-op."""
        counts = self._counts
        for token in tokenize_line(line):
            counts[token] = counts.get(token, 0) + 1
            self._total += 1

    def ingest_source(self, lines: Iterable[str | None]) -> None:
        """
        Count tokens from a stream of lines, one line at a time.

        Read failures surface as DocumentReadError. Lines consumed before the
        failure stay counted.
        """
        before = self._total
        try:
            for line in lines:
                self.ingest_line(line)
        except WordCountIOError:
            raise
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentReadError(f"Unable to read document: {exc}") from exc
        LOGGER.info(
            "Ingested %d tokens (%d distinct words in table).",
            self._total - before,
            len(self._counts),
        )

    def ingest_file(self, path: str | Path) -> None:
        """Count tokens from the ``.txt`` or ``.epub`` document at ``path``."""
        LOGGER.info("Counting words in %s", path)
        self.ingest_source(iter_document_lines(path))

    def count(self, word: str | None) -> int:
        """Return how often ``word`` was seen, matching case-insensitively."""
        if not word:
            return 0
        normalized = word.lower()
        if not is_token(normalized):
            return 0
        return self._counts.get(normalized, 0)

    def total_tokens(self) -> int:
        """Return the number of tokens accepted across all ingestion calls."""
        return self._total

    def vocabulary_size(self) -> int:
        return len(self._counts)

    def all_entries(self) -> Dict[str, int]:
        """Return a copy of the word counts that callers may modify freely."""
        return dict(self._counts)

    def save_results(self, path: str | Path) -> Path:
        """Write the total and every word count, alphabetically, to ``path``."""
        destination = Path(path)
        try:
            with destination.open("w", encoding="utf-8", newline="\n") as handle:
                handle.write(REPORT_HEADER.format(total=self._total) + "\n")
                for word in sorted(self._counts):
                    handle.write(
                        REPORT_LINE.format(word=word, count=self._counts[word]) + "\n"
                    )
        except OSError as exc:
            raise ReportWriteError(
                f"Unable to write results to {destination}: {exc.strerror or exc}",
                destination,
            ) from exc
        LOGGER.info("Saved %d word counts to %s", len(self._counts), destination)
        return destination
