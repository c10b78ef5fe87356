from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, FrozenSet, List, Mapping, MutableMapping

import yaml

from .ranking import DEFAULT_STOP_WORDS


@dataclass(slots=True)
class DictionarySettings:
    """Configuration block for the definition lookup service."""

    base_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en/"
    request_timeout: float = 10.0


@dataclass(slots=True)
class WordCounterConfig:
    """Configuration options for counting, ranking and reporting."""

    output_dir: str = "output"
    report_prefix: str = "WordCountResults-"
    sort_mode: str = "frequency"
    remove_stop_words: bool = False
    stop_words: List[str] | None = None
    top_n: int | None = None
    dictionary: DictionarySettings = field(default_factory=DictionarySettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def effective_stop_words(self) -> FrozenSet[str]:
        """Stop words to exclude, or an empty set when removal is off."""
        if not self.remove_stop_words:
            return frozenset()
        if self.stop_words is None:
            return DEFAULT_STOP_WORDS
        return frozenset(word.lower() for word in self.stop_words)

    def report_path(self, document: str | Path) -> Path:
        """Where the report for ``document`` is written."""
        return Path(self.output_dir) / f"{self.report_prefix}{Path(document).stem}.txt"


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(WordCounterConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "dictionary" in data:
        dictionary_value = data["dictionary"]
        if isinstance(dictionary_value, DictionarySettings):
            kwargs["dictionary"] = dictionary_value
        elif isinstance(dictionary_value, Mapping):
            kwargs["dictionary"] = _build_dictionary_settings(dictionary_value)
        else:
            kwargs.pop("dictionary")
    return kwargs


def _build_dictionary_settings(data: Mapping[str, Any]) -> DictionarySettings:
    allowed = {field.name for field in fields(DictionarySettings)}
    filtered = {key: data[key] for key in data if key in allowed}
    return DictionarySettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> WordCounterConfig:
    """Build a WordCounterConfig from a dictionary-like input."""
    if data is None:
        return WordCounterConfig()
    return WordCounterConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> WordCounterConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> WordCounterConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return WordCounterConfig()
    return config_from_yaml(path)
