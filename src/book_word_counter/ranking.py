from __future__ import annotations

from typing import Collection, List, Mapping, Sequence

from .models import RankedEntry, SortMode

# Common English words hidden when stop-word removal is requested.
DEFAULT_STOP_WORDS = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "been", "being", "but", "by",
        "do", "did", "does", "for", "from", "had", "has", "have", "he", "her",
        "him", "his", "i", "if", "in", "into", "is", "it", "it's", "me", "my",
        "no", "not", "of", "on", "or", "so", "such", "that", "the", "their",
        "them", "then", "there", "these", "they", "this", "to", "was", "we",
        "were", "what", "when", "where", "which", "who", "will", "with",
        "would", "you", "your",
    }
)


def rank_entries(
    entries: Mapping[str, int],
    stop_words: Collection[str] | None = None,
    sort_mode: SortMode | str = SortMode.FREQUENCY,
) -> List[RankedEntry]:
    """
    Order word counts for display or export.

    Words in ``stop_words`` are dropped before sorting. Frequency order is
    descending by count; equal counts keep the mapping's iteration order.
    """
    mode = SortMode.parse(sort_mode)
    excluded = stop_words or ()
    ranked = [
        RankedEntry(word=word, count=int(count))
        for word, count in entries.items()
        if word not in excluded
    ]
    if mode is SortMode.ALPHABETICAL:
        ranked.sort(key=lambda entry: entry.word)
    else:
        ranked.sort(key=lambda entry: entry.count, reverse=True)
    return ranked


def top_n(ranked: Sequence[RankedEntry], n: int) -> List[RankedEntry]:
    """Return the first ``n`` entries of an already ranked sequence."""
    if n <= 0:
        return []
    return list(ranked[:n])


def search_entries(ranked: Sequence[RankedEntry], query: str | None) -> List[RankedEntry]:
    """Keep entries whose word contains ``query``, ignoring case."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(ranked)
    return [entry for entry in ranked if needle in entry.word]
