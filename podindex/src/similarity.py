"""Pairwise episode similarity and related-episode ranking."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

try:  # pragma: no cover
    from .episode_ids import episode_sort_key
    from .schemas.config import RelatednessConfig
    from .schemas.episodes import EpisodeRecord, RelatedEpisode
except ImportError:  # pragma: no cover
    from episode_ids import episode_sort_key  # type: ignore
    from schemas.config import RelatednessConfig  # type: ignore
    from schemas.episodes import EpisodeRecord, RelatedEpisode  # type: ignore

DEFAULT_RELATEDNESS = RelatednessConfig()


def dice_coefficient(left: Iterable[str], right: Iterable[str]) -> float:
    """Dice overlap of two term sets; 0.0 when both are empty."""
    left_set = set(left)
    right_set = set(right)
    total = len(left_set) + len(right_set)
    if total == 0:
        return 0.0
    return (len(left_set & right_set) * 2) / total


def similarity_score(
    first: EpisodeRecord,
    second: EpisodeRecord,
    config: RelatednessConfig = DEFAULT_RELATEDNESS,
) -> float:
    """Weighted keyword/theme Dice score between two episodes."""
    keyword_score = dice_coefficient(first.keywords, second.keywords)
    theme_score = dice_coefficient(first.themes, second.themes)
    return keyword_score * config.keyword_weight + theme_score * config.theme_weight


def to_percentage(score: float) -> int:
    """Round a [0, 1] score to an integer percentage, halves rounding up."""
    return int(math.floor(score * 100 + 0.5))


def find_related(
    episode: EpisodeRecord,
    episodes: Sequence[EpisodeRecord],
    config: RelatednessConfig = DEFAULT_RELATEDNESS,
) -> list[RelatedEpisode]:
    """Rank the episodes most similar to ``episode``.

    Candidates below the threshold are dropped. Equal percentages fall back to
    canonical episode order so the result does not depend on input order.
    """
    candidates: list[tuple[int, tuple[int, int], str, RelatedEpisode]] = []

    for other in episodes:
        if other.id == episode.id:
            continue
        score = similarity_score(episode, other, config)
        if score < config.threshold:
            continue
        percentage = to_percentage(score)
        candidates.append(
            (
                -percentage,
                episode_sort_key(other.id),
                other.id,
                RelatedEpisode(id=other.id, title=other.title, similarity=percentage),
            )
        )

    candidates.sort(key=lambda item: item[:3])
    return [item[3] for item in candidates[: config.max_related]]


def attach_related(
    episodes: Sequence[EpisodeRecord],
    config: RelatednessConfig = DEFAULT_RELATEDNESS,
) -> list[EpisodeRecord]:
    """Return copies of ``episodes`` carrying their related-episode lists.

    Every score is computed against the unmodified input records, so the
    output does not depend on the order in which episodes are enriched.
    """
    return [
        episode.model_copy(update={"related_episodes": find_related(episode, episodes, config)})
        for episode in episodes
    ]
