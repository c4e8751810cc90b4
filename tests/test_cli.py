import json
from pathlib import Path

from typer.testing import CliRunner

from bard_readability.cli import app
from tests.utils import HAMLET_OPENING, write_sample_corpus

runner = CliRunner()


def test_cli_analyze_prints_ranked_lines(tmp_path: Path):
    """analyze prints one formatted line per play in descending order."""
    corpus_dir = write_sample_corpus(tmp_path / "plays")
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir)])

    assert result.exit_code == 0
    lines = [line for line in result.stdout.splitlines() if line]
    assert len(lines) == 2
    assert lines == sorted(lines, reverse=True)
    assert "-1.45 (-1st grade) is the score for cat" in lines


def test_cli_analyze_json(tmp_path: Path):
    corpus_dir = write_sample_corpus(tmp_path / "plays")
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir), "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    titles = {entry["title"] for entry in payload["results"]}
    assert titles == {"cat", "hamlet"}
    cat_entry = next(e for e in payload["results"] if e["title"] == "cat")
    assert cat_entry["grade"] == -1
    assert cat_entry["line"] == "-1.45 (-1st grade) is the score for cat"


def test_cli_analyze_skips_invalid_by_default(tmp_path: Path):
    corpus_dir = write_sample_corpus(
        tmp_path / "plays",
        {"cat": "The cat sat on the mat.", "empty": "[Exit all.]"},
    )
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir)])

    assert result.exit_code == 0
    assert "is the score for cat" in result.stdout
    assert "is the score for empty" not in result.stdout


def test_cli_analyze_fail_fast(tmp_path: Path):
    corpus_dir = write_sample_corpus(
        tmp_path / "plays",
        {"cat": "The cat sat on the mat.", "empty": "[Exit all.]"},
    )
    result = runner.invoke(
        app, ["analyze", "--input-path", str(corpus_dir), "--fail-fast"]
    )

    assert result.exit_code == 1
    assert "Aborting run" in result.output


def test_cli_analyze_reads_config_and_timing(tmp_path: Path):
    corpus_dir = tmp_path / "plays"
    corpus_dir.mkdir()
    (corpus_dir / "hamlet.play").write_text(HAMLET_OPENING, encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_text("file_suffix: .play\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "analyze",
            "--input-path",
            str(corpus_dir),
            "--config",
            str(config_path),
            "--timing",
        ],
    )

    assert result.exit_code == 0
    assert "is the score for hamlet" in result.output
    assert "Analyzed 1 documents in" in result.output


def test_cli_normalize(tmp_path: Path):
    play = tmp_path / "hamlet.txt"
    play.write_text(HAMLET_OPENING, encoding="utf-8")
    result = runner.invoke(app, ["normalize", "--input-path", str(play)])

    assert result.exit_code == 0
    assert "Who's there?" in result.stdout
    assert "BARNARDO" not in result.stdout
    assert "ACT I." not in result.stdout


def test_cli_print_config():
    """print-config dumps the default configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "skip_invalid" in result.stdout
