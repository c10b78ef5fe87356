from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable

from .errors import ReportWriteError
from .models import RankedEntry

LOGGER = logging.getLogger(__name__)

CSV_HEADER = ("Word", "Count")


def write_csv(entries: Iterable[RankedEntry], path: str | Path) -> int:
    """Write ``Word,Count`` rows in the given order; return the row count."""
    destination = Path(path)
    rows = 0
    try:
        with destination.open("w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(CSV_HEADER)
            for entry in entries:
                writer.writerow((entry.word, entry.count))
                rows += 1
    except OSError as exc:
        raise ReportWriteError(
            f"Unable to write CSV to {destination}: {exc.strerror or exc}",
            destination,
        ) from exc
    LOGGER.info("Exported %d rows to %s", rows, destination)
    return rows
