"""Search-index text normalization pipeline.

Responsibilities:
- Canonicalize listing text for the full-text index and for keyword queries.
- Expose lot number, item number and token helpers through one facade.

Key types:
- `TextNormalizer`: the `filter` pipeline plus extraction/token entry points.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .accents import AccentFolder
from .entities import EntityDecoder, HtmlEntityDecoder
from .extraction import ExtractionResult, PatternExtractor, SeparatorConfig
from .stopwords import BuiltinStopWords, StopWordFilter
from .tags import TagStripper
from .tokenizer import (
    filter_by_min_length,
    filter_to_unique_sorted_text,
    split_to_unique_tokens,
)

if TYPE_CHECKING:
    from ..config import IndexConfig


_JOINER_RE = re.compile(r"[_-]")
_SEPARATOR_BEFORE_DIGIT_RE = re.compile(r"[,.](?=\d)")
_SEPARATOR_RUN_RE = re.compile(r"[\s,.]+")
_WHITESPACE_RE = re.compile(r"\s+")


def _keep_letters_digits_and_separators(text: str) -> str:
    """Replace every character except letters, decimal digits, `,` and `.` with a space."""

    return "".join(
        character
        if character.isalpha() or character.isdecimal() or character in ",."
        else " "
        for character in text
    )


class TextNormalizer:
    """Normalize listing text into canonical index text.

    Collaborators are injected so the pipeline has no hidden global state:
    lot number separators, the stopword provider with its language, the
    character reference decoder and the accent folder.
    """

    def __init__(
        self,
        separators: SeparatorConfig | None = None,
        *,
        index_language: str = "",
        stopwords: StopWordFilter | None = None,
        entity_decoder: EntityDecoder | None = None,
        accent_folder: AccentFolder | None = None,
        tag_stripper: TagStripper | None = None,
    ) -> None:
        self.separators = separators or SeparatorConfig()
        self.index_language = index_language
        self.stopwords: StopWordFilter = stopwords or BuiltinStopWords()
        self.entity_decoder: EntityDecoder = entity_decoder or HtmlEntityDecoder()
        self.accent_folder = accent_folder or AccentFolder()
        self.tag_stripper = tag_stripper or TagStripper()
        self.extractor = PatternExtractor(self.separators)

    @classmethod
    def from_config(
        cls, config: IndexConfig, stopwords: StopWordFilter | None = None
    ) -> TextNormalizer:
        """Build a normalizer wired from `IndexConfig` values."""

        if stopwords is None and config.stopwords_path is not None:
            stopwords = BuiltinStopWords.from_yaml(config.stopwords_path)
        return cls(
            config.separators,
            index_language=config.index_language,
            stopwords=stopwords,
        )

    def filter(self, text: str) -> str:
        """Fold accents, drop tags, decode references and canonicalize punctuation and case."""

        text = self.accent_folder.fold(text)
        text = self.tag_stripper.strip_tags(text)
        # WYSIWYG content may have been saved with references such as `&auml;`
        text = self.entity_decoder.decode(text)
        # second fold on purpose: decoded letters must not survive to a re-filter
        text = self.accent_folder.fold(text)
        # hyphenated and underscored words are searchable as one word
        text = _JOINER_RE.sub("", text)
        text = _keep_letters_digits_and_separators(text)
        # 1,234.50 -> 123450
        text = _SEPARATOR_BEFORE_DIGIT_RE.sub("", text)
        text = _SEPARATOR_RUN_RE.sub(" ", text)
        text = text.lower()
        if self.index_language:
            text = self.stopwords.filter(text, self.index_language)
        text = _WHITESPACE_RE.sub(" ", text)
        return text.strip()

    def extract_lot_numbers(self, text: str) -> ExtractionResult:
        """Return possible lot numbers and the remaining text."""

        return self.extractor.extract_lot_numbers(text)

    def extract_item_numbers(self, text: str) -> frozenset[str]:
        """Return possible item numbers."""

        return self.extractor.extract_item_numbers(text)

    def split_to_unique_tokens(self, text: str) -> list[str]:
        """Return unique lowercase tokens in first occurrence order."""

        return split_to_unique_tokens(text)

    def filter_to_unique_sorted_text(self, text: str) -> str:
        """Return unique tokens sorted and joined by single spaces."""

        return filter_to_unique_sorted_text(text)

    def filter_by_min_length(self, text: str, min_length: int) -> str:
        """Drop whitespace-delimited chunks shorter than `min_length`."""

        return filter_by_min_length(text, min_length)
