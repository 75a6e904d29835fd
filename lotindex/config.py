"""Configuration model and loaders for Lotindex.

Responsibilities:
- Define normalization settings as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `IndexConfig`: separators, index language and query settings.
- `ConfigLoader`: static construction helpers for `IndexConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import ConfigError
from .parsing import normalize_optional_string, parse_positive_int
from .text.extraction import SeparatorConfig


_DEFAULT_PREFIX_SEPARATOR = "-"
_DEFAULT_EXTENSION_SEPARATOR = "."


@dataclass(slots=True)
class IndexConfig:
    """Settings read by the normalizer and the search query builder.

    Attributes:
        lot_prefix_separator: Separator between lot prefix and lot number.
        lot_extension_separator: Separator between lot number and extension.
        index_language: Stopword language code; empty disables stopword removal.
        min_token_length: Minimum length of search query terms.
        stopwords_path: Optional YAML file with extra stopwords per language.
    """

    lot_prefix_separator: str = _DEFAULT_PREFIX_SEPARATOR
    lot_extension_separator: str = _DEFAULT_EXTENSION_SEPARATOR
    index_language: str = ""
    min_token_length: int = 1
    stopwords_path: Path | None = None

    @property
    def separators(self) -> SeparatorConfig:
        """Return lot number separators as an immutable value."""

        return SeparatorConfig(
            prefix_separator=self.lot_prefix_separator,
            extension_separator=self.lot_extension_separator,
        )

    def validate(self) -> None:
        """Validate configuration values before use."""

        if isinstance(self.min_token_length, bool) or self.min_token_length <= 0:
            raise ValueError("`min_token_length` must be a positive integer.")


class ConfigLoader:
    """Factory helpers for building `IndexConfig` instances."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "lot_prefix_separator",
            "lot_extension_separator",
            "index_language",
            "min_token_length",
            "stopwords_path",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> IndexConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        source_label = f"YAML `{path}`"
        try:
            payload = yaml.safe_load(path_text)
        except yaml.YAMLError as exc:
            raise ConfigError(source_label, f"is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ConfigError(source_label, "must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(payload, source_label=source_label)

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> IndexConfig:
        """Create a validated config from `LOTINDEX_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        source_label = "Environment variable"

        prefix_separator = env_map.get(
            "LOTINDEX_PREFIX_SEPARATOR", _DEFAULT_PREFIX_SEPARATOR
        )
        extension_separator = env_map.get(
            "LOTINDEX_EXTENSION_SEPARATOR", _DEFAULT_EXTENSION_SEPARATOR
        )
        language = normalize_optional_string(env_map.get("LOTINDEX_INDEX_LANGUAGE")) or ""
        stopwords_path = normalize_optional_string(env_map.get("LOTINDEX_STOPWORDS_PATH"))

        min_token_length = 1
        raw_min_length = normalize_optional_string(env_map.get("LOTINDEX_MIN_TOKEN_LENGTH"))
        if raw_min_length is not None:
            try:
                min_token_length = parse_positive_int(raw_min_length, "`LOTINDEX_MIN_TOKEN_LENGTH`")
            except ValueError as exc:
                raise ConfigError(source_label, str(exc)) from exc

        config = IndexConfig(
            lot_prefix_separator=prefix_separator,
            lot_extension_separator=extension_separator,
            index_language=language.lower(),
            min_token_length=min_token_length,
            stopwords_path=Path(stopwords_path) if stopwords_path is not None else None,
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> IndexConfig:
        """Build a validated config from a mapping payload."""

        unknown = sorted(str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            raise ConfigError(source_label, f"includes unsupported key(s): {', '.join(unknown)}.")

        prefix_separator = ConfigLoader._optional_separator(
            payload, "lot_prefix_separator", source_label, _DEFAULT_PREFIX_SEPARATOR
        )
        extension_separator = ConfigLoader._optional_separator(
            payload, "lot_extension_separator", source_label, _DEFAULT_EXTENSION_SEPARATOR
        )
        language = normalize_optional_string(payload.get("index_language")) or ""
        stopwords_path = normalize_optional_string(payload.get("stopwords_path"))

        min_token_length = 1
        if payload.get("min_token_length") is not None:
            try:
                min_token_length = parse_positive_int(
                    payload["min_token_length"], "field `min_token_length`"
                )
            except ValueError as exc:
                raise ConfigError(source_label, str(exc)) from exc

        config = IndexConfig(
            lot_prefix_separator=prefix_separator,
            lot_extension_separator=extension_separator,
            index_language=language.lower(),
            min_token_length=min_token_length,
            stopwords_path=Path(stopwords_path) if stopwords_path is not None else None,
        )
        config.validate()
        return config

    @staticmethod
    def _optional_separator(
        payload: Mapping[str, Any], key: str, source_label: str, default: str
    ) -> str:
        """Read a separator verbatim; an explicit empty value is kept as empty."""

        if key not in payload:
            return default
        raw_value = payload[key]
        if raw_value is None:
            return ""
        if not isinstance(raw_value, str):
            raise ConfigError(source_label, f"field `{key}` must be a string.")
        return raw_value
