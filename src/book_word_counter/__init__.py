"""
book_word_counter package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import WordCounterConfig, config_from_dict, config_from_yaml, load_config
from .errors import DocumentReadError, ReportWriteError, WordCountIOError
from .frequency_table import FrequencyTable
from .models import RankedEntry, SortMode
from .ranking import DEFAULT_STOP_WORDS, rank_entries, search_entries, top_n
from .tokenization import tokenize_line

__all__ = [
    "DEFAULT_STOP_WORDS",
    "DocumentReadError",
    "FrequencyTable",
    "RankedEntry",
    "ReportWriteError",
    "SortMode",
    "WordCountIOError",
    "WordCounterConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "rank_entries",
    "search_entries",
    "tokenize_line",
    "top_n",
]

__version__ = "0.1.0"
