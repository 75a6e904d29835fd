"""Structured phase logging for CLI commands.

Responsibilities:
- Emit concise, deterministic phase-level logs through `loguru`.
- Keep command results on stdout separate from log lines.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [f"{key}={_sanitize_context_value(context[key])}" for key in sorted(context)]
    return " " + " ".join(tokens)


class RunLogger:
    """Emit `[phase]` log lines for command stages when enabled."""

    def __init__(self, sink: TextIO | None = None, *, enabled: bool = True) -> None:
        """Route loguru output to `sink` (stderr by default) when enabled."""

        self.enabled = enabled
        if not enabled:
            return
        self._sink = sink or sys.stderr
        logger.remove()
        logger.add(self._sink, format="{message}", level="INFO", colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured log line."""

        if not self.enabled:
            return
        line = f"[phase] level={level} stage={stage} event={event}{_format_context(context)}"
        logger.log(level, line)

    def log_stage_start(self, stage: str, **context: object) -> None:
        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure event without the error payload."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
