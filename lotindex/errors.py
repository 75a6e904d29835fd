"""Domain exceptions for configuration loading and CLI diagnostics."""

from __future__ import annotations


class LotindexError(Exception):
    """Base class for errors raised outside the pure normalization core."""


class ConfigError(LotindexError, ValueError):
    """Raised when a configuration source holds unsupported keys or invalid values."""

    def __init__(self, source_label: str, detail: str) -> None:
        super().__init__(f"{source_label} {detail}")
        self.source_label = source_label
        self.detail = detail


class CommandStageError(LotindexError):
    """Raised when one stage of a CLI command (config, input, stopwords) fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
