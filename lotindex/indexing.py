"""Index document and search query preparation.

Responsibilities:
- Turn listing text into the values stored in the full-text index.
- Turn raw keyword search input into lot numbers plus query terms.

Key types:
- `IndexDocument`: identifiers and canonical token text for one listing.
- `SearchQuery`: identifiers and terms for one keyword search.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from .text.normalizer import TextNormalizer


@dataclass(frozen=True, slots=True)
class IndexDocument:
    """Values written to the search index for one listing text.

    Attributes:
        lot_numbers: Lot numbers found in the text, sorted.
        item_numbers: Item numbers found in the text, sorted.
        content: Unique sorted canonical tokens, space separated.
    """

    lot_numbers: tuple[str, ...]
    item_numbers: tuple[str, ...]
    content: str

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""

        payload = asdict(self)
        payload["lot_numbers"] = list(self.lot_numbers)
        payload["item_numbers"] = list(self.item_numbers)
        return payload


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """Parsed keyword search input.

    Attributes:
        lot_numbers: Lot numbers found in the raw query, sorted.
        terms: Canonical query terms left after lot numbers were removed.
    """

    lot_numbers: tuple[str, ...]
    terms: tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        """Return whether the query has neither lot numbers nor terms."""

        return not self.lot_numbers and not self.terms

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""

        return {"lot_numbers": list(self.lot_numbers), "terms": list(self.terms)}


def build_index_document(normalizer: TextNormalizer, text: str) -> IndexDocument:
    """Extract identifiers from `text` and canonicalize it for the index."""

    lot_result = normalizer.extract_lot_numbers(text)
    item_numbers = normalizer.extract_item_numbers(text)
    content = normalizer.filter_to_unique_sorted_text(normalizer.filter(text))
    return IndexDocument(
        lot_numbers=tuple(sorted(lot_result.identifiers)),
        item_numbers=tuple(sorted(item_numbers)),
        content=content,
    )


def build_search_query(
    normalizer: TextNormalizer, text: str, min_token_length: int = 1
) -> SearchQuery:
    """Pull lot numbers out of `text` first, then canonicalize what remains into terms."""

    lot_result = normalizer.extract_lot_numbers(text)
    filtered = normalizer.filter(lot_result.remainder)
    unique_text = normalizer.filter_to_unique_sorted_text(filtered)
    terms = normalizer.filter_by_min_length(unique_text, min_token_length)
    return SearchQuery(
        lot_numbers=tuple(sorted(lot_result.identifiers)),
        terms=tuple(terms.split()),
    )
