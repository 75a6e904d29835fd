"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
extracted identifiers and JSON payloads.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, NoReturn

import typer

from .errors import CommandStageError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_identifiers(label: str, identifiers: Iterable[str]) -> None:
    """Print a sorted, comma separated identifier row, `(none)` when empty."""

    values = sorted(identifiers)
    typer.echo(f"{label}: {', '.join(values) if values else '(none)'}")


def echo_json(payload: dict[str, Any]) -> None:
    """Print a payload as deterministic, human-readable JSON."""

    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True))
