from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, NoReturn

import typer
import yaml

from .config import WordCounterConfig, load_config
from .dictionary import DictionaryClient
from .errors import WordCountIOError
from .export import write_csv
from .frequency_table import FrequencyTable
from .models import RankedEntry, SortMode
from .ranking import rank_entries, search_entries, top_n

app = typer.Typer(help="Book Word Counter CLI.", no_args_is_help=True)

QUERY_PROMPT = "Enter a word to check its count (or type 'exit' to quit): "
EXIT_KEYWORD = "exit"


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Count, rank and look up the words of a book."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"Unknown logging level {log_level!r}.", param_hint="--log-level"
        )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def count(
    document: Path = typer.Argument(..., help="Text (.txt) or EPUB document."),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", file_okay=False, help="Directory for the report."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    query: bool = typer.Option(
        True, "--query/--no-query", help="Prompt for word queries after counting."
    ),
) -> None:
    """Count a document, save the report, then answer word queries until 'exit'."""
    cfg = _load_config(config)
    if output_dir is not None:
        cfg.output_dir = str(output_dir)
    report_path = cfg.report_path(document)

    try:
        table = FrequencyTable.from_file(document)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        table.save_results(report_path)
    except OSError as exc:
        _fail(exc)

    typer.echo(f"Results saved to {report_path}")
    typer.echo(f"Word count completed for {document}")
    if query:
        _query_loop(table)


@app.command()
def rank(
    document: Path = typer.Argument(..., help="Text (.txt) or EPUB document."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    sort: str | None = typer.Option(
        None, "--sort", "-s", help="'alphabetical' or 'frequency' (default)."
    ),
    remove_stop_words: bool | None = typer.Option(
        None,
        "--remove-stop-words/--keep-stop-words",
        help="Hide common English words.",
    ),
    top: int | None = typer.Option(
        None, "--top", "-n", help="Only show the N most frequent words."
    ),
    search: str | None = typer.Option(
        None, "--search", help="Only show words containing this text."
    ),
    csv_path: Path | None = typer.Option(
        None, "--csv", dir_okay=False, help="Also export the rows to this CSV file."
    ),
) -> None:
    """Print a document's word counts, sorted and filtered."""
    cfg = _load_config(config)
    _apply_rank_overrides(cfg, sort, remove_stop_words)
    try:
        sort_mode = SortMode.parse(cfg.sort_mode)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--sort") from exc

    try:
        table = FrequencyTable.from_file(document)
    except WordCountIOError as exc:
        _fail(exc)

    limit = top if top is not None else cfg.top_n
    entries = search_entries(_select_entries(table, cfg, sort_mode, limit), search)
    for row in _format_rows(entries):
        typer.echo(row)

    if csv_path is not None:
        try:
            write_csv(entries, csv_path)
        except WordCountIOError as exc:
            _fail(exc)


@app.command()
def define(
    word: str = typer.Argument(..., help="Word to look up."),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print dictionary definitions for a word."""
    cfg = _load_config(config)
    client = DictionaryClient(cfg.dictionary)
    typer.echo(f"Definition: {word}")
    typer.echo(client.lookup(word))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = WordCounterConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_config(path: Path | None) -> WordCounterConfig:
    """Load the --config file, turning read and parse failures into CLI errors."""
    try:
        return load_config(path)
    except OSError as exc:
        _fail(exc)
    except (yaml.YAMLError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _apply_rank_overrides(
    config: WordCounterConfig,
    sort: str | None,
    remove_stop_words: bool | None,
) -> None:
    """Apply CLI overrides to ranking-related config fields when provided."""
    if sort:
        config.sort_mode = sort
    if remove_stop_words is not None:
        config.remove_stop_words = remove_stop_words


def _select_entries(
    table: FrequencyTable,
    config: WordCounterConfig,
    sort_mode: SortMode,
    top: int | None,
) -> List[RankedEntry]:
    """Rank the table, restricting to the most frequent words when asked."""
    stop_words = config.effective_stop_words()
    if top is None:
        return rank_entries(table.all_entries(), stop_words, sort_mode)
    # Top-N is always cut from frequency order, then shown in the requested order.
    leaders = top_n(rank_entries(table.all_entries(), stop_words, SortMode.FREQUENCY), top)
    return rank_entries({entry.word: entry.count for entry in leaders}, sort_mode=sort_mode)


def _query_loop(table: FrequencyTable) -> None:
    """Answer word-count queries from stdin until 'exit' or end of input."""
    while True:
        typer.echo(QUERY_PROMPT, nl=False)
        line = sys.stdin.readline()
        if not line:
            typer.echo("")
            break
        word = line.strip().lower()
        if word == EXIT_KEYWORD:
            typer.echo("Goodbye")
            break
        typer.echo(f"The word '{word}' appears {table.count(word)} times.")


def _fail(exc: OSError) -> NoReturn:
    typer.echo(f"An error occurred: {exc}", err=True)
    raise typer.Exit(code=1)


def _format_rows(entries: List[RankedEntry]) -> List[str]:
    return [f"{entry.word}: {entry.count}" for entry in entries]


if __name__ == "__main__":
    main()
