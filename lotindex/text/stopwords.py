"""Language-specific stopword removal for index text.

Responsibilities:
- Define the stopword provider protocol consumed by `TextNormalizer`.
- Provide the bundled provider, optionally extended from a YAML word list.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Protocol

from loguru import logger
import yaml

from ..parsing import normalize_optional_string
from .stopword_lists import STOPWORDS


class StopWordFilter(Protocol):
    """Protocol for stopword providers."""

    def filter(self, text: str, language: str) -> str:
        """Return `text` without the stopwords of `language`."""


class BuiltinStopWords:
    """Remove whitespace-delimited stopwords using bundled per-language sets."""

    def __init__(self, extra: Mapping[str, Iterable[str]] | None = None) -> None:
        """Merge the bundled sets with optional extra words per language."""

        merged: dict[str, frozenset[str]] = dict(STOPWORDS)
        for language, words in (extra or {}).items():
            code = language.strip().lower()
            additions = frozenset(word.strip().lower() for word in words if word.strip())
            merged[code] = merged.get(code, frozenset()) | additions
        self._stopwords: Mapping[str, frozenset[str]] = MappingProxyType(merged)
        self._warned_languages: set[str] = set()

    def words_for(self, language: str) -> frozenset[str]:
        """Return the stopword set for `language`, empty when unsupported."""

        return self._stopwords.get(language.strip().lower(), frozenset())

    def filter(self, text: str, language: str) -> str:
        """Drop tokens of `text` that are stopwords of `language`."""

        words = self.words_for(language)
        if not words:
            self._warn_unsupported(language)
            return text
        return " ".join(token for token in text.split() if token.lower() not in words)

    def _warn_unsupported(self, language: str) -> None:
        """Log one warning per unsupported language code."""

        if language in self._warned_languages:
            return
        self._warned_languages.add(language)
        logger.warning(f"No stopwords available for index language `{language}`.")

    @classmethod
    def from_yaml(cls, path: Path) -> BuiltinStopWords:
        """Create a provider extended with words from a `language: [words]` YAML file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        return cls(extra=_parse_stopword_payload(payload, path))


def _parse_stopword_payload(payload: Any, path: Path) -> dict[str, list[str]]:
    """Validate a stopword YAML payload and return normalized word lists."""

    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ValueError(f"Stopword file `{path}` must contain a top-level mapping/object.")

    parsed: dict[str, list[str]] = {}
    for raw_language, raw_words in payload.items():
        language = normalize_optional_string(raw_language)
        if language is None:
            raise ValueError(f"Stopword file `{path}` contains a blank language code.")
        if raw_words is None:
            parsed[language] = []
            continue
        if isinstance(raw_words, str) or not isinstance(raw_words, list):
            raise ValueError(
                f"Stopword file `{path}` field `{language}` must be a list of words."
            )
        words = [normalize_optional_string(word) for word in raw_words]
        parsed[language] = [word for word in words if word is not None]
    return parsed
