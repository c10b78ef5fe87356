from __future__ import annotations

import logging
from typing import Any, List
from urllib.parse import quote

import requests

from .config import DictionarySettings

LOGGER = logging.getLogger(__name__)

ERROR_PREFIX = "Error fetching definition: "


class DictionaryLookupError(RuntimeError):
    """Raised when the dictionary service answers with an unusable payload."""


class DictionaryClient:
    """Looks words up in the Free Dictionary API and formats the definitions."""

    def __init__(
        self,
        settings: DictionarySettings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._settings = settings or DictionarySettings()
        self._session = session or requests.Session()

    def lookup(self, word: str) -> str:
        """
        Return readable definitions for ``word``.

        Network and payload failures come back as a message starting with
        ``ERROR_PREFIX`` instead of raising, so callers can show it as-is.
        """
        try:
            payload = self.fetch(word)
            return format_definitions(payload)
        except (requests.RequestException, ValueError, DictionaryLookupError) as exc:
            LOGGER.warning("Definition lookup for %r failed: %s", word, exc)
            return f"{ERROR_PREFIX}{exc}"

    def fetch(self, word: str) -> Any:
        """Return the decoded JSON response for ``word``."""
        url = self._settings.base_url.rstrip("/") + "/" + quote(word.strip().lower())
        LOGGER.debug("Requesting definition from %s", url)
        response = self._session.get(url, timeout=self._settings.request_timeout)
        response.raise_for_status()
        return response.json()


def format_definitions(payload: Any) -> str:
    """Render the first entry of a dictionary response as plain text."""
    if not isinstance(payload, list) or not payload:
        raise DictionaryLookupError("response did not contain any entries")
    first = payload[0]
    meanings = first.get("meanings") if isinstance(first, dict) else None
    if not isinstance(meanings, list):
        raise DictionaryLookupError("entry has no meanings")

    lines: List[str] = []
    for meaning in meanings:
        if not isinstance(meaning, dict):
            raise DictionaryLookupError("meaning is not an object")
        part_of_speech = meaning.get("partOfSpeech", "")
        definitions = meaning.get("definitions", [])
        if not isinstance(definitions, list):
            raise DictionaryLookupError("meaning has no definition list")
        for definition in definitions:
            if not isinstance(definition, dict):
                raise DictionaryLookupError("definition is not an object")
            lines.append(f"{part_of_speech}: {definition.get('definition', '')}")
            if "example" in definition:
                lines.append(f"Example: {definition['example']}")
            lines.append("")
    return "\n".join(lines) + ("\n" if lines else "")
