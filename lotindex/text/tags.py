"""Markup tag removal for WYSIWYG-authored listing text.

The rules here are intentionally crude: they do not balance tags and do not
understand quoted attribute values. Listing descriptions come from a trusted
editor, not from adversarial input.
"""

from __future__ import annotations

import re


_START_TAG_RE = re.compile(r"<\s*\w.*?>")
_CLOSE_TAG_RE = re.compile(r"<\s*/\s*\w\s*.*?>|<\s*br\s*>")
_WHITESPACE_RE = re.compile(r"\s+")


class TagStripper:
    """Replace start, end and `<br>` tags with single spaces."""

    def strip_tags(self, text: str) -> str:
        """Remove tags and collapse the resulting whitespace runs."""

        text = _START_TAG_RE.sub(" ", text)
        text = _CLOSE_TAG_RE.sub(" ", text)
        return _WHITESPACE_RE.sub(" ", text)
