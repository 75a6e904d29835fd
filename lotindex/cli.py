"""Command-line interface for Lotindex.

Responsibilities:
- Expose every normalization operation as a user-facing command.
- Resolve `IndexConfig` from a YAML file or `LOTINDEX_*` environment variables.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Annotated

import typer
import yaml

from .cli_rendering import echo_identifiers, echo_json, exit_with_command_error
from .config import ConfigLoader, IndexConfig
from .errors import CommandStageError, ConfigError
from .indexing import build_index_document, build_search_query
from .telemetry.logger import RunLogger
from .text.normalizer import TextNormalizer
from .text.stopwords import BuiltinStopWords

app = typer.Typer(
    name="lotindex",
    no_args_is_help=True,
    help="Normalize auction listing text for the search index.",
)

TextArgument = Annotated[
    str | None,
    typer.Argument(help="Input text; read from stdin when omitted or `-`."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="YAML config file (defaults to LOTINDEX_* env vars)."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Emit phase logs on stderr."),
]


def _load_config(config_file: Path | None) -> IndexConfig:
    """Load config from YAML when requested, else from the environment."""

    if config_file is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the offending `LOTINDEX_*` variable.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_file)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ConfigError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_file}`: {exc.detail}",
            hint="Fix config keys/values and rerun.",
        ) from exc


def _load_stopwords(config: IndexConfig) -> BuiltinStopWords:
    """Load the stopword provider, extended from `stopwords_path` when configured."""

    if config.stopwords_path is None:
        return BuiltinStopWords()
    try:
        return BuiltinStopWords.from_yaml(config.stopwords_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="stopwords",
            detail=f"Stopword file not found: `{config.stopwords_path}`.",
            hint="Fix `stopwords_path` or remove it from the config.",
        ) from exc
    except (ValueError, yaml.YAMLError) as exc:
        raise CommandStageError(
            stage="stopwords",
            detail=f"Invalid stopword file `{config.stopwords_path}`: {exc}",
            hint="Use a mapping of language codes to word lists.",
        ) from exc


def _read_text(text: str | None) -> str:
    """Return the text argument, or stdin content when omitted or `-`."""

    if text is not None and text != "-":
        return text
    if sys.stdin is None or sys.stdin.isatty():
        raise CommandStageError(
            stage="input",
            detail="No input text given.",
            hint="Pass text as an argument or pipe it via stdin.",
        )
    return sys.stdin.read().rstrip("\r\n")


def _prepare(
    command_name: str, config_file: Path | None, text: str | None, run_logger: RunLogger
) -> tuple[TextNormalizer, IndexConfig, str]:
    """Resolve config, stopwords and input text for one command run."""

    run_logger.log_stage_start("config")
    config = _load_config(config_file)
    stopwords = _load_stopwords(config)
    run_logger.log_stage_complete(
        "config",
        command=command_name,
        language=config.index_language or "none",
    )
    normalizer = TextNormalizer.from_config(config, stopwords=stopwords)
    return normalizer, config, _read_text(text)


@app.command("filter")
def filter_command(
    text: TextArgument = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print canonical index text: folded, tag-free, lowercase, without stopwords."""

    run_logger = RunLogger(enabled=verbose)
    try:
        normalizer, _, source = _prepare("filter", config_file, text, run_logger)
        run_logger.log_stage_start("filter")
        result = normalizer.filter(source)
        run_logger.log_stage_complete("filter", chars=len(result))
    except Exception as exc:
        run_logger.log_stage_failure("filter", type(exc).__name__)
        exit_with_command_error("filter", exc)

    typer.echo(result)


@app.command("lots")
def lots_command(
    text: TextArgument = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print lot numbers found in the text and the remaining text."""

    run_logger = RunLogger(enabled=verbose)
    try:
        normalizer, _, source = _prepare("lots", config_file, text, run_logger)
        run_logger.log_stage_start("extract")
        result = normalizer.extract_lot_numbers(source)
        run_logger.log_stage_complete("extract", lot_numbers=len(result.identifiers))
    except Exception as exc:
        run_logger.log_stage_failure("extract", type(exc).__name__)
        exit_with_command_error("lots", exc)

    echo_identifiers("Lot numbers", result.identifiers)
    typer.echo(f"Remainder: {result.remainder}")


@app.command("items")
def items_command(
    text: TextArgument = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print item numbers found in the text."""

    run_logger = RunLogger(enabled=verbose)
    try:
        normalizer, _, source = _prepare("items", config_file, text, run_logger)
        run_logger.log_stage_start("extract")
        item_numbers = normalizer.extract_item_numbers(source)
        run_logger.log_stage_complete("extract", item_numbers=len(item_numbers))
    except Exception as exc:
        run_logger.log_stage_failure("extract", type(exc).__name__)
        exit_with_command_error("items", exc)

    echo_identifiers("Item numbers", item_numbers)


@app.command("tokens")
def tokens_command(
    text: TextArgument = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print unique lowercase tokens of the text in sorted order."""

    run_logger = RunLogger(enabled=verbose)
    try:
        normalizer, _, source = _prepare("tokens", config_file, text, run_logger)
        run_logger.log_stage_start("tokenize")
        result = normalizer.filter_to_unique_sorted_text(source)
        run_logger.log_stage_complete("tokenize", tokens=len(result.split()))
    except Exception as exc:
        run_logger.log_stage_failure("tokenize", type(exc).__name__)
        exit_with_command_error("tokens", exc)

    typer.echo(result)


@app.command("min-length")
def min_length_command(
    text: TextArgument = None,
    min_length: Annotated[
        int | None,
        typer.Option("--min", min=1, help="Minimum chunk length (defaults to config value)."),
    ] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print whitespace-delimited chunks at least `--min` characters long."""

    run_logger = RunLogger(enabled=verbose)
    try:
        normalizer, config, source = _prepare("min-length", config_file, text, run_logger)
        resolved_min_length = min_length if min_length is not None else config.min_token_length
        run_logger.log_stage_start("length")
        result = normalizer.filter_by_min_length(source, resolved_min_length)
        run_logger.log_stage_complete("length", min_length=resolved_min_length)
    except Exception as exc:
        run_logger.log_stage_failure("length", type(exc).__name__)
        exit_with_command_error("min-length", exc)

    typer.echo(result)


@app.command("document")
def document_command(
    text: TextArgument = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the index document (lot numbers, item numbers, content) as JSON."""

    run_logger = RunLogger(enabled=verbose)
    try:
        normalizer, _, source = _prepare("document", config_file, text, run_logger)
        run_logger.log_stage_start("document")
        document = build_index_document(normalizer, source)
        run_logger.log_stage_complete("document", lot_numbers=len(document.lot_numbers))
    except Exception as exc:
        run_logger.log_stage_failure("document", type(exc).__name__)
        exit_with_command_error("document", exc)

    echo_json(document.to_dict())


@app.command("query")
def query_command(
    text: TextArgument = None,
    min_length: Annotated[
        int | None,
        typer.Option("--min", min=1, help="Minimum term length (defaults to config value)."),
    ] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the parsed keyword search query (lot numbers, terms) as JSON."""

    run_logger = RunLogger(enabled=verbose)
    try:
        normalizer, config, source = _prepare("query", config_file, text, run_logger)
        resolved_min_length = min_length if min_length is not None else config.min_token_length
        run_logger.log_stage_start("query")
        query = build_search_query(normalizer, source, resolved_min_length)
        run_logger.log_stage_complete("query", terms=len(query.terms))
    except Exception as exc:
        run_logger.log_stage_failure("query", type(exc).__name__)
        exit_with_command_error("query", exc)

    echo_json(query.to_dict())


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
