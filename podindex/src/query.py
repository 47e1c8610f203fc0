"""Read back a published index and filter it."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

try:  # pragma: no cover
    from .io_utils import read_json
    from .schemas.episodes import CorpusIndex, EpisodeRecord
except ImportError:  # pragma: no cover
    from io_utils import read_json  # type: ignore
    from schemas.episodes import CorpusIndex, EpisodeRecord  # type: ignore


def load_index(path: Path) -> CorpusIndex:
    """Load and validate an ``episodes-index.json`` artifact."""
    try:
        return CorpusIndex.model_validate(read_json(path))
    except ValidationError as exc:
        raise ValueError(f"Invalid episode index at {path}") from exc


def filter_by_themes(episodes: Iterable[EpisodeRecord], themes: Iterable[str]) -> list[EpisodeRecord]:
    """Keep episodes tagged with at least one of ``themes``; no themes keeps everything."""
    wanted = set(themes)
    if not wanted:
        return list(episodes)
    return [episode for episode in episodes if wanted.intersection(episode.themes)]


def find_episode(index: CorpusIndex, episode_id: str) -> EpisodeRecord | None:
    for episode in index.episodes:
        if episode.id == episode_id:
            return episode
    return None


def dangling_references(index: CorpusIndex) -> list[tuple[str, str]]:
    """(episode id, related id) pairs whose target is missing from the index."""
    known = {episode.id for episode in index.episodes}
    return [
        (episode.id, related.id)
        for episode in index.episodes
        for related in episode.related_episodes
        if related.id not in known
    ]
