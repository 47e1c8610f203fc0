"""Typer CLI entry points for the podindex pipeline."""

from __future__ import annotations

import sys
from pathlib import Path

import click
import typer
from loguru import logger

SRC_DIR = Path(__file__).resolve().parent
if str(SRC_DIR) not in sys.path:  # pragma: no cover - runtime convenience
    sys.path.insert(0, str(SRC_DIR))

try:  # pragma: no cover
    from .build_index import INDEX_FILENAME, build_index, theme_counts
    from .graph_export import export_graph
    from .query import dangling_references, filter_by_themes, find_episode, load_index
    from .schemas.config import RelatednessConfig
    from .vocabulary import DEFAULT_VOCABULARY, load_vocabulary
except ImportError:  # pragma: no cover
    from build_index import INDEX_FILENAME, build_index, theme_counts  # type: ignore
    from graph_export import export_graph  # type: ignore
    from query import dangling_references, filter_by_themes, find_episode, load_index  # type: ignore
    from schemas.config import RelatednessConfig  # type: ignore
    from vocabulary import DEFAULT_VOCABULARY, load_vocabulary  # type: ignore

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SOURCE_DIR = PROJECT_ROOT / "episodes"
DATA_DIR = PROJECT_ROOT / "data"

DEFAULT_INDEX = DATA_DIR / INDEX_FILENAME
DEFAULT_GRAPH = DATA_DIR / "graph.json"

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_CHOICES = [
    "TRACE",
    "DEBUG",
    "INFO",
    "SUCCESS",
    "WARNING",
    "ERROR",
    "CRITICAL",
]


def _configure_logger(level: str = DEFAULT_LOG_LEVEL) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        enqueue=False,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level:<8}</level> | {message}",
    )


app = typer.Typer(help="Podcast transcript index CLI.")


@app.callback()
def main(
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        click_type=click.Choice(LOG_LEVEL_CHOICES, case_sensitive=False),
        help="Set log verbosity.",
    ),
) -> None:
    """Podcast transcript index CLI."""
    _configure_logger(log_level)


@app.command("build")
def build_cli(
    source_dir: Path = typer.Option(
        SOURCE_DIR,
        "--source-dir",
        "-s",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
        resolve_path=True,
        help="Directory holding the episode markdown files.",
    ),
    output_dir: Path = typer.Option(
        DATA_DIR,
        "--output-dir",
        "-o",
        file_okay=False,
        resolve_path=True,
        help="Directory to write episodes-index.json and themes.json.",
    ),
    vocabulary_path: Path = typer.Option(
        None,
        "--vocabulary",
        exists=True,
        dir_okay=False,
        resolve_path=True,
        help="JSON file overriding the theme and keyword vocabularies.",
    ),
    threshold: float = typer.Option(
        0.3,
        "--threshold",
        min=0.0,
        max=1.0,
        help="Minimum similarity for an episode to be listed as related.",
    ),
    max_related: int = typer.Option(
        5,
        "--max-related",
        min=1,
        help="Maximum related episodes per episode.",
    ),
) -> None:
    """Parse transcripts and write the episode index."""
    try:
        vocabulary = load_vocabulary(vocabulary_path) if vocabulary_path else DEFAULT_VOCABULARY
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--vocabulary") from exc
    relatedness = RelatednessConfig(threshold=threshold, max_related=max_related)
    try:
        index = build_index(source_dir, output_dir, vocabulary=vocabulary, relatedness=relatedness)
    except OSError as exc:
        logger.error("build:failed | {}", exc)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Wrote {index.total_episodes} episodes to {output_dir / INDEX_FILENAME}")


@app.command("graph")
def graph_cli(
    index_path: Path = typer.Option(
        DEFAULT_INDEX,
        "--index",
        "-i",
        exists=True,
        readable=True,
        resolve_path=True,
        help="Episode index JSON.",
    ),
    output_path: Path = typer.Option(
        DEFAULT_GRAPH,
        "--output",
        "-o",
        resolve_path=True,
        help="Destination graph JSON.",
    ),
) -> None:
    """Export related episodes as graph nodes and edges."""
    graph = export_graph(load_index(index_path), output_path)
    typer.echo(f"Wrote {len(graph.nodes)} nodes and {len(graph.edges)} edges to {output_path}")


@app.command("themes")
def themes_cli(
    index_path: Path = typer.Option(
        DEFAULT_INDEX,
        "--index",
        "-i",
        exists=True,
        readable=True,
        resolve_path=True,
        help="Episode index JSON.",
    ),
    top: int = typer.Option(10, "--top", "-n", min=1, help="Number of themes to show."),
) -> None:
    """Show the most frequent themes."""
    index = load_index(index_path)
    counts = theme_counts(index)
    typer.echo(f"Total Episodes: {index.total_episodes}")
    typer.echo(f"Total Themes: {len(counts)}")
    for theme, count in counts[:top]:
        typer.echo(f"  {theme}: {count} episodes")


@app.command("list")
def list_cli(
    index_path: Path = typer.Option(
        DEFAULT_INDEX,
        "--index",
        "-i",
        exists=True,
        readable=True,
        resolve_path=True,
        help="Episode index JSON.",
    ),
    themes: list[str] = typer.Option(
        None,
        "--theme",
        "-t",
        help="Only list episodes tagged with any of these themes (repeatable).",
    ),
) -> None:
    """List episodes in display order."""
    index = load_index(index_path)
    episodes = filter_by_themes(index.episodes, themes or [])
    for episode in episodes:
        typer.echo(f"{episode.id}\t{episode.title}")
    typer.echo(f"{len(episodes)} episodes")


@app.command("show")
def show_cli(
    episode_id: str = typer.Argument(..., help="Episode id, e.g. 12 or 3-1."),
    index_path: Path = typer.Option(
        DEFAULT_INDEX,
        "--index",
        "-i",
        exists=True,
        readable=True,
        resolve_path=True,
        help="Episode index JSON.",
    ),
) -> None:
    """Show one episode with its related episodes."""
    episode = find_episode(load_index(index_path), episode_id)
    if episode is None:
        raise typer.BadParameter(f"Unknown episode '{episode_id}'.", param_hint="EPISODE_ID")

    typer.echo(f"[{episode.id}] {episode.title}")
    if episode.summary:
        typer.echo(episode.summary)
    if episode.themes:
        typer.echo(f"Themes: {', '.join(episode.themes)}")
    for section in episode.sections:
        typer.echo(f"  - {section}")
    for related in episode.related_episodes:
        typer.echo(f"  -> {related.id} {related.title} ({related.similarity}%)")


@app.command("check")
def check_cli(
    index_path: Path = typer.Option(
        DEFAULT_INDEX,
        "--index",
        "-i",
        exists=True,
        readable=True,
        resolve_path=True,
        help="Episode index JSON.",
    ),
) -> None:
    """Verify every related episode resolves to an episode in the index."""
    index = load_index(index_path)
    missing = dangling_references(index)
    for source_id, target_id in missing:
        logger.error("check:dangling | episode={} | related={}", source_id, target_id)
    if missing:
        raise typer.Exit(code=1)
    typer.echo(f"OK: {index.total_episodes} episodes")


def run() -> None:
    """Entrypoint when invoking via `python -m`."""
    app()


if __name__ == "__main__":
    run()
