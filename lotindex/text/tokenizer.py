"""Token helpers for index and query text.

Responsibilities:
- Split text into unique lowercase tokens of Unicode letters and digits.
- Build sorted, deduplicated token text for the search index.
- Drop short whitespace-delimited chunks from query text.
"""

from __future__ import annotations

from itertools import groupby


def is_token_character(character: str) -> bool:
    """Return whether a character is a Unicode letter or decimal digit."""

    return character.isalpha() or character.isdecimal()


def split_to_unique_tokens(text: str) -> list[str]:
    """Return lowercase letter/digit runs of `text`, first occurrence order, no repeats."""

    runs = (
        "".join(characters)
        for is_token, characters in groupby(text.lower(), key=is_token_character)
        if is_token
    )
    return list(dict.fromkeys(runs))


def filter_to_unique_sorted_text(text: str) -> str:
    """Remove repeated words and numbers and return the rest sorted, space separated."""

    return " ".join(sorted(split_to_unique_tokens(text)))


def filter_by_min_length(text: str, min_length: int) -> str:
    """Keep whitespace-delimited chunks whose length is at least `min_length`."""

    return " ".join(chunk for chunk in text.split() if len(chunk) >= min_length)
