"""Unit tests for the `TextNormalizer.filter` pipeline and its facade methods."""

from __future__ import annotations

from pathlib import Path

from loguru import logger
import pytest

from lotindex.config import IndexConfig
from lotindex.text import SeparatorConfig, TextNormalizer


class _RecordingStopWords:
    """Stopword provider double that records calls and drops one word."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def filter(self, text: str, language: str) -> str:
        self.calls.append((text, language))
        return " ".join(token for token in text.split() if token != "drop")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello, World!", "hello world"),
        ("Price 1,234.50 USD", "price 123450 usd"),
        ("T-shirt well_known", "tshirt wellknown"),
        ("<p>Crème <b>Brûlée</b></p>", "creme brulee"),
        ("Gr&auml;fin &amp; Cr&egrave;me", "grafin creme"),
        ("Size: 10.5cm x 20cm", "size 105cm x 20cm"),
        ("end. Next, word", "end next word"),
        ("Smith&notable Tom&copyright", "smith notable tom copyright"),
        ("120 m² room", "120 m room"),
        ("Set ① of ③, 5³ pcs", "set of 5 pcs"),
        ("   ", ""),
        ("", ""),
    ],
)
def test_filter_canonicalizes_listing_text(
    normalizer: TextNormalizer, text: str, expected: str
) -> None:
    """Filtering folds accents, drops markup and punctuation and lowercases."""

    assert normalizer.filter(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "Lot ABC-123.X9: <i>Vintage</i> CLOCK, 1,200 pieces!",
        "Cr&egrave;me &quot;brûlée&quot; — ÉTÉ 2024",
        "İstanbul Ångström ĤOTEL",
        "été ä",
        "«Ваза» 19-го века, 3½ kg… 東京",
    ],
)
def test_filter_is_idempotent(normalizer: TextNormalizer, text: str) -> None:
    """Filtering already-filtered text changes nothing."""

    once = normalizer.filter(text)

    assert normalizer.filter(once) == once


def test_filter_removes_stopwords_for_configured_language() -> None:
    """Bundled stopwords are removed after lowercasing."""

    normalizer = TextNormalizer(index_language="en")

    assert normalizer.filter("The Lot of the Year") == "lot year"


def test_filter_calls_stopword_provider_once_with_language() -> None:
    """The injected stopword provider receives the lowercased text."""

    stopwords = _RecordingStopWords()
    normalizer = TextNormalizer(index_language="de", stopwords=stopwords)

    assert normalizer.filter("Keep DROP this") == "keep this"
    assert stopwords.calls == [("keep drop this", "de")]


def test_filter_skips_stopwords_without_language() -> None:
    """An empty index language disables stopword removal."""

    stopwords = _RecordingStopWords()
    normalizer = TextNormalizer(stopwords=stopwords)

    assert normalizer.filter("keep drop") == "keep drop"
    assert stopwords.calls == []


def test_unsupported_language_leaves_text_and_warns_once() -> None:
    """Unknown languages keep the text and log a single warning."""

    messages: list[str] = []
    logger.add(messages.append, level="WARNING", format="{message}")
    normalizer = TextNormalizer(index_language="xx")

    assert normalizer.filter("the lot") == "the lot"
    assert normalizer.filter("the lot") == "the lot"
    assert len([message for message in messages if "`xx`" in message]) == 1


def test_facade_delegates_to_extraction_and_token_helpers(normalizer: TextNormalizer) -> None:
    """Facade methods expose the extraction and token operations."""

    lot_result = normalizer.extract_lot_numbers("lot 45 and lot 46")

    assert lot_result.identifiers == frozenset({"45", "46"})
    assert lot_result.remainder == "lot  and lot"
    assert normalizer.extract_item_numbers("item #12, #345 and #6") == frozenset(
        {"12", "345", "6"}
    )
    assert normalizer.split_to_unique_tokens("B a b") == ["b", "a"]
    assert normalizer.filter_to_unique_sorted_text("the the Cat cat 3 3") == "3 cat the"
    assert normalizer.filter_by_min_length("a bb ccc dddd", 3) == "ccc dddd"


def test_from_config_wires_separators_language_and_stopword_file(tmp_path: Path) -> None:
    """Config values reach the extractor and the stopword provider."""

    stopwords_path = tmp_path / "stopwords.yml"
    stopwords_path.write_text("en:\n  - clock\n", encoding="utf-8")
    config = IndexConfig(
        lot_prefix_separator="/",
        lot_extension_separator="#",
        index_language="en",
        stopwords_path=stopwords_path,
    )

    normalizer = TextNormalizer.from_config(config)

    assert normalizer.separators == SeparatorConfig("/", "#")
    assert normalizer.extract_lot_numbers("A/1#B").identifiers == frozenset({"A/1#B"})
    assert normalizer.filter("The antique Clock") == "antique"
