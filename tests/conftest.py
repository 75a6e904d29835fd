"""Shared pytest fixtures for the full Lotindex test suite."""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger
import pytest

from lotindex.text import SeparatorConfig, TextNormalizer


@pytest.fixture(autouse=True)
def _reset_loguru_handlers() -> Iterator[None]:
    """Drop loguru sinks added by a test so later tests never write to closed streams."""

    yield
    logger.remove()


@pytest.fixture
def separators() -> SeparatorConfig:
    """Provide the default `-` prefix and `.` extension separators."""

    return SeparatorConfig(prefix_separator="-", extension_separator=".")


@pytest.fixture
def normalizer(separators: SeparatorConfig) -> TextNormalizer:
    """Provide a normalizer without stopword removal."""

    return TextNormalizer(separators)
