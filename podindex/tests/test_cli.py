"""CLI smoke tests for the Typer entrypoints."""

from pathlib import Path

from typer.testing import CliRunner

from cli import app

runner = CliRunner()


def _build(corpus_dir: Path, output_dir: Path):
    return runner.invoke(
        app,
        ["--log-level", "WARNING", "build", "--source-dir", str(corpus_dir), "--output-dir", str(output_dir)],
    )


def test_cli_root_help_displays() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Podcast transcript index CLI." in result.stdout


def test_cli_build_writes_index(corpus_dir: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "data"

    result = _build(corpus_dir, output_dir)

    assert result.exit_code == 0, result.stdout
    assert "Wrote 5 episodes" in result.stdout
    assert (output_dir / "episodes-index.json").exists()
    assert (output_dir / "themes.json").exists()


def test_full_pipeline_via_cli(corpus_dir: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "data"
    index_path = output_dir / "episodes-index.json"
    graph_path = output_dir / "graph.json"

    assert _build(corpus_dir, output_dir).exit_code == 0

    result = runner.invoke(app, ["graph", "--index", str(index_path), "--output", str(graph_path)])
    assert result.exit_code == 0, result.stdout
    assert "5 nodes and 2 edges" in result.stdout

    result = runner.invoke(app, ["themes", "--index", str(index_path), "--top", "3"])
    assert result.exit_code == 0, result.stdout
    assert "Total Episodes: 5" in result.stdout

    result = runner.invoke(app, ["list", "--index", str(index_path), "--theme", "起業"])
    assert result.exit_code == 0, result.stdout
    assert "番外編 1" in result.stdout
    assert "1 episodes" in result.stdout

    result = runner.invoke(app, ["show", "2", "--index", str(index_path)])
    assert result.exit_code == 0, result.stdout
    assert "在宅医療の現場 後編 (100%)" in result.stdout

    result = runner.invoke(app, ["check", "--index", str(index_path)])
    assert result.exit_code == 0, result.stdout
    assert "OK: 5 episodes" in result.stdout


def test_cli_show_unknown_episode(corpus_dir: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "data"
    assert _build(corpus_dir, output_dir).exit_code == 0

    result = runner.invoke(app, ["show", "999", "--index", str(output_dir / "episodes-index.json")])

    assert result.exit_code != 0


def test_cli_build_rejects_missing_source(tmp_path: Path) -> None:
    result = runner.invoke(app, ["build", "--source-dir", str(tmp_path / "missing")])

    assert result.exit_code != 0
