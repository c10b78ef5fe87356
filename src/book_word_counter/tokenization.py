from __future__ import annotations

import re
import string
from typing import List

# Everything outside [a-z'] separates tokens, digits and hyphens included.
SEPARATOR_RE = re.compile(r"[^a-z']")
APOSTROPHE_FRAGMENT_RE = re.compile(r"'[a-z]")
MIN_TOKEN_LENGTH = 2

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def tokenize_line(line: str | None) -> List[str]:
    """Split a line of text into normalized word tokens."""
    if not line:
        return []
    lowered = line.translate(_ASCII_LOWER)
    candidates = SEPARATOR_RE.sub(" ", lowered).split()
    return [candidate for candidate in candidates if _keep(candidate)]


def is_token(text: str) -> bool:
    """Return True when ``text`` is something the tokenizer could emit."""
    if not text or SEPARATOR_RE.search(text):
        return False
    return _keep(text)


def _keep(candidate: str) -> bool:
    if len(candidate) < MIN_TOKEN_LENGTH:
        return False
    # A bare contraction suffix such as 's left over from a split.
    return APOSTROPHE_FRAGMENT_RE.fullmatch(candidate) is None
