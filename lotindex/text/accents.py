"""Accent folding for search-index text.

Responsibilities:
- Map accented and special Latin letters onto plain ASCII base letters.
- Keep the transliteration data separate from the substitution algorithm.

Key types:
- `TRANSLITERATION_TABLE`: immutable mapping authored against precomposed text.
- `AccentFolder`: longest-key-first substitution over a transliteration table.
"""

from __future__ import annotations

import re
import unicodedata
from types import MappingProxyType
from typing import Mapping


# Authored against precomposed (NFC) characters. Entries for eth and dotless i
# fold visually similar glyphs that are distinct letters; they are kept as-is
# so previously indexed text keeps matching.
_BASE_TABLE: dict[str, str] = {
    "à": "a", "á": "a", "â": "a", "ã": "a", "ä": "a", "å": "a",
    "ā": "a", "ă": "a", "ą": "a",
    "À": "a", "Á": "a", "Â": "a", "Ã": "a", "Ä": "a", "Å": "a",
    "Ā": "a", "Ă": "a", "Ą": "a",
    "\u212b": "a",
    "è": "e", "é": "e", "ê": "e", "ë": "e", "ē": "e", "ĕ": "e",
    "ė": "e", "ę": "e", "ě": "e",
    "È": "e", "É": "e", "Ê": "e", "Ë": "e",
    "ì": "i", "í": "i", "î": "i", "ï": "i", "ĩ": "i", "ī": "i",
    "ĭ": "i", "į": "i", "ı": "i",
    "Ì": "i", "Í": "i", "Î": "i", "Ï": "i", "İ": "i",
    "ò": "o", "ó": "o", "ô": "o", "õ": "o", "ö": "o", "ø": "o",
    "ō": "o", "ŏ": "o", "ő": "o",
    "Ò": "o", "Ó": "o", "Ô": "o", "Õ": "o", "Ö": "o", "Ø": "o",
    "Ō": "o", "Ő": "o",
    "ù": "u", "ú": "u", "û": "u", "ü": "u", "ũ": "u", "ū": "u",
    "ŭ": "u", "ů": "u", "ű": "u", "ų": "u",
    "Ù": "u", "Ú": "u", "Û": "u", "Ü": "u", "Ů": "u", "Ű": "u",
    "ç": "c", "ć": "c", "ĉ": "c", "č": "c", "Ç": "c", "Č": "c",
    "ĝ": "g", "ğ": "g", "ġ": "g", "ģ": "g", "Ğ": "g", "Ģ": "g",
    "ĥ": "h", "ħ": "h",
    "ď": "d", "đ": "d", "ð": "d",
    "ĵ": "j", "Ĵ": "j",
    "ñ": "n", "Ñ": "n",
    "ř": "r", "Ř": "r",
    "ś": "s", "ŝ": "s", "ş": "s", "š": "s", "Ş": "s", "Š": "s",
    "ţ": "t", "ť": "t", "ŧ": "t", "Ţ": "t", "Ť": "t", "Ŧ": "t",
    "ý": "y", "ÿ": "y", "ỳ": "y", "ỹ": "y", "Ý": "y", "Ÿ": "y",
    "ŷ": "y", "Ŷ": "y",
    "ŵ": "w", "ẁ": "w", "ẃ": "w", "ẅ": "w", "Ŵ": "w", "Ẁ": "w",
    "Ẃ": "w", "Ẅ": "w",
    "ž": "z", "Ž": "z",
}


def _expand_table(base: Mapping[str, str]) -> dict[str, str]:
    """Add uppercase and decomposed spellings for every authored key."""

    expanded = dict(base)
    for key, value in base.items():
        if len(key) != 1:
            continue
        upper = key.upper()
        if upper != key and len(upper) == 1 and upper.lower() == key:
            expanded.setdefault(upper, value)
    for key, value in list(expanded.items()):
        decomposed = unicodedata.normalize("NFD", key)
        if decomposed != key:
            expanded.setdefault(decomposed, value)
    return expanded


TRANSLITERATION_TABLE: Mapping[str, str] = MappingProxyType(_expand_table(_BASE_TABLE))


class AccentFolder:
    """Replace table keys with their folded values, longest key first."""

    def __init__(self, table: Mapping[str, str] | None = None) -> None:
        """Compile the substitution pattern for `table` (default transliteration table)."""

        self._table: Mapping[str, str] = MappingProxyType(
            dict(table if table is not None else TRANSLITERATION_TABLE)
        )
        keys = sorted(self._table, key=len, reverse=True)
        self._pattern = (
            re.compile("|".join(re.escape(key) for key in keys)) if keys else None
        )

    def fold(self, text: str) -> str:
        """Return `text` with every table key replaced in a single pass."""

        if self._pattern is None or not text:
            return text
        return self._pattern.sub(lambda match: self._table[match.group(0)], text)
