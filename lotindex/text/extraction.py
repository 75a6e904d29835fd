"""Lot number and item number extraction from free-form listing text.

Responsibilities:
- Pull structured identifiers out of text with boundary-aware patterns.
- Shrink the text as identifiers are consumed so weaker patterns cannot claim
  fragments of identifiers already captured by stronger ones.

Key types:
- `SeparatorConfig`: lot number prefix/extension separators.
- `ExtractionResult`: identifiers plus the remaining text.
- `PatternExtractor`: lot number and item number extraction entry points.
"""

from __future__ import annotations

from dataclasses import dataclass
import re


_ALNUM = "a-zA-Z0-9"
_ITEM_NUMBER_RE = re.compile(r"([^0-9])([0-9]+)([^0-9])")


@dataclass(frozen=True, slots=True)
class SeparatorConfig:
    """Separators used inside lot numbers.

    Attributes:
        prefix_separator: Text between the lot prefix and the numeric body.
        extension_separator: Text between the numeric body and the extension.

    Neither separator may contain letters or digits; that is left to the caller.
    """

    prefix_separator: str = "-"
    extension_separator: str = "."


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Identifiers pulled out of a text and the text that remained."""

    identifiers: frozenset[str]
    remainder: str


def extract_all(pattern: re.Pattern[str], text: str) -> ExtractionResult:
    """Consume every match of a three-group `pattern` until the text is stable.

    Group 2 is the identifier; groups 1 and 3 are boundary characters that are
    kept in the text while the identifier between them is deleted. Matches that
    share a boundary character are picked up on the following pass.
    """

    identifiers: set[str] = set()
    while True:
        matches = pattern.findall(text)
        if not matches:
            break
        identifiers.update(match[1] for match in matches)
        text = pattern.sub(r"\g<1>\g<3>", text)
    return ExtractionResult(identifiers=frozenset(identifiers), remainder=text)


def build_lot_number_patterns(separators: SeparatorConfig) -> tuple[re.Pattern[str], ...]:
    """Return the lot number patterns, most specific first.

    1. prefix + separator + number + separator + extension
    2. prefix + separator + number
    3. number + separator + extension
    4. number

    Prefix + extension, bare prefix and bare extension are not recognized.
    """

    prefix = re.escape(separators.prefix_separator)
    extension = re.escape(separators.extension_separator)
    boundary = f"[^{_ALNUM}]"
    return (
        re.compile(
            f"({boundary})([{_ALNUM}]{{1,20}}{prefix}[0-9]+{extension}[{_ALNUM}]{{1,3}})({boundary})"
        ),
        re.compile(
            f"({boundary})([{_ALNUM}]{{1,20}}{prefix}[0-9]+)([^{_ALNUM}{extension}])"
        ),
        re.compile(
            f"([^{_ALNUM}{prefix}])([0-9]+{extension}[{_ALNUM}]{{1,3}})({boundary})"
        ),
        re.compile(f"([^{_ALNUM}{prefix}])([0-9]+)([^{_ALNUM}{extension}])"),
    )


class PatternExtractor:
    """Extract lot numbers and item numbers from listing text."""

    def __init__(self, separators: SeparatorConfig | None = None) -> None:
        """Compile lot number patterns for the given separators."""

        self.separators = separators or SeparatorConfig()
        self._lot_patterns = build_lot_number_patterns(self.separators)

    def extract_lot_numbers(self, text: str) -> ExtractionResult:
        """Return possible lot numbers and the text left after removing them."""

        lot_numbers: set[str] = set()
        remainder = f" {text} "
        for pattern in self._lot_patterns:
            result = extract_all(pattern, remainder)
            lot_numbers.update(result.identifiers)
            remainder = result.remainder
        return ExtractionResult(identifiers=frozenset(lot_numbers), remainder=remainder.strip())

    def extract_item_numbers(self, text: str) -> frozenset[str]:
        """Return possible item numbers: digit runs enclosed by non-digits."""

        return extract_all(_ITEM_NUMBER_RE, f" {text} ").identifiers
