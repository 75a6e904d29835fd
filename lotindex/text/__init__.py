"""Text normalization components for the search index.

This package provides accent folding, tag stripping, character reference
decoding, identifier extraction, tokenization and stopword removal, composed by
`TextNormalizer`.
"""

from .accents import TRANSLITERATION_TABLE, AccentFolder
from .entities import EntityDecoder, HtmlEntityDecoder
from .extraction import ExtractionResult, PatternExtractor, SeparatorConfig
from .normalizer import TextNormalizer
from .stopwords import BuiltinStopWords, StopWordFilter
from .tags import TagStripper
from .tokenizer import (
    filter_by_min_length,
    filter_to_unique_sorted_text,
    split_to_unique_tokens,
)

__all__ = [
    "TRANSLITERATION_TABLE",
    "AccentFolder",
    "BuiltinStopWords",
    "EntityDecoder",
    "ExtractionResult",
    "HtmlEntityDecoder",
    "PatternExtractor",
    "SeparatorConfig",
    "StopWordFilter",
    "TagStripper",
    "TextNormalizer",
    "filter_by_min_length",
    "filter_to_unique_sorted_text",
    "split_to_unique_tokens",
]
