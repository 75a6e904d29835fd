"""Top-level package for Lotindex.

This package normalizes auction listing text for a full-text search index:
lot and item number extraction plus canonical, stopword-filtered token text.
The main entry point is `TextNormalizer`.
"""

from .config import ConfigLoader, IndexConfig
from .indexing import IndexDocument, SearchQuery, build_index_document, build_search_query
from .text import ExtractionResult, SeparatorConfig, TextNormalizer

__all__ = [
    "ConfigLoader",
    "ExtractionResult",
    "IndexConfig",
    "IndexDocument",
    "SearchQuery",
    "SeparatorConfig",
    "TextNormalizer",
    "build_index_document",
    "build_search_query",
    "__version__",
]

__version__ = "0.1.0"
