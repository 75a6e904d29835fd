"""HTML character reference decoding used before index canonicalization.

Some listing descriptions were saved through the WYSIWYG editor with
character references such as `&auml;` or `&#228;` instead of literal text.
Only references terminated by `;` are decoded; a bare `&` followed by a word
is ordinary text.
"""

from __future__ import annotations

import html
from html.entities import html5
import re
from typing import Protocol


_REFERENCE_RE = re.compile(r"&(?:#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")
_QUOTE_CHARACTERS = frozenset({'"', "'"})


class EntityDecoder(Protocol):
    """Protocol for character reference decoders."""

    def decode(self, text: str) -> str:
        """Return `text` with character references replaced by literal characters."""


class HtmlEntityDecoder:
    """Decode named and numeric references, leaving quote references encoded."""

    def decode(self, text: str) -> str:
        """Decode every reference in `text` except those resolving to `"` or `'`."""

        if "&" not in text:
            return text
        return _REFERENCE_RE.sub(self._decode_reference, text)

    @staticmethod
    def _decode_reference(match: re.Match[str]) -> str:
        """Return the literal text for one reference match."""

        reference = match.group(0)
        # unknown names stay as written, never decoded through a shorter prefix
        if not reference.startswith("&#") and reference[1:] not in html5:
            return reference
        decoded = html.unescape(reference)
        if decoded in _QUOTE_CHARACTERS:
            return reference
        return decoded
