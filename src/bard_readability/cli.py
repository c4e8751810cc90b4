from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Dict, List, TypedDict

import typer
import yaml

from .config import ReadabilityConfig, load_config
from .exceptions import CorpusLoadError, InvalidInputError
from .formatting import format_result, grade_of
from .loader import load_corpus
from .models import ScoredResult
from .normalization import normalize_text
from .pipeline import score_corpus
from .ranking import rank_results

app = typer.Typer(help="Flesch-Kincaid grade levels for play scripts.", no_args_is_help=True)


class ResultPayload(TypedDict):
    title: str
    score: float
    grade: int
    line: str


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=False
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    skip_invalid: bool | None = typer.Option(
        None,
        "--skip-invalid/--fail-fast",
        help="Skip documents that cannot be scored instead of aborting the run.",
    ),
    timing: bool | None = typer.Option(
        None, "--timing/--no-timing", help="Report how long the run took."
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Emit results as JSON instead of text lines."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable INFO logging."),
) -> None:
    """Score every play in INPUT_PATH and print the ranked results."""
    _configure_logging(verbose)
    cfg = load_config(config)
    _apply_overrides(cfg, skip_invalid, timing)

    try:
        corpus = load_corpus(input_path, suffix=cfg.file_suffix, encoding=cfg.encoding)
    except CorpusLoadError as exc:
        raise typer.BadParameter(str(exc)) from exc

    started = time.perf_counter()
    try:
        results = score_corpus(corpus, skip_invalid=cfg.skip_invalid)
    except InvalidInputError as exc:
        typer.echo(f"Aborting run: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    ranked = _rank_payloads(results)
    elapsed = time.perf_counter() - started

    if as_json:
        typer.echo(json.dumps({"results": ranked}, indent=2))
    else:
        for entry in ranked:
            typer.echo(entry["line"])

    if cfg.show_timing:
        typer.echo(f"Analyzed {len(results)} documents in {elapsed:.3f}s", err=True)


@app.command()
def normalize(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    encoding: str = typer.Option("utf-8", help="Text encoding of the input file."),
) -> None:
    """Print the normalized text of a single play."""
    text = input_path.read_text(encoding=encoding, errors="replace")
    typer.echo(normalize_text(text))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadabilityConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _apply_overrides(
    config: ReadabilityConfig, skip_invalid: bool | None, timing: bool | None
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if skip_invalid is not None:
        config.skip_invalid = skip_invalid
    if timing is not None:
        config.show_timing = timing


def _rank_payloads(results: List[ScoredResult]) -> List[ResultPayload]:
    """Format results and order them the same way the text output is ordered."""
    by_line: Dict[str, ResultPayload] = {}
    for result in results:
        line = format_result(result.title, result.score)
        by_line[line] = {
            "title": result.title,
            "score": result.score,
            "grade": grade_of(result.score),
            "line": line,
        }
    return [by_line[line] for line in rank_results(by_line)]


if __name__ == "__main__":
    main()
