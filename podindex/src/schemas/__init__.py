"""Pydantic schemas for the podindex pipeline."""

from .config import RelatednessConfig, VocabularyConfig
from .documents import ParsedMarkdown, SourceDocument
from .episodes import (
    CorpusIndex,
    EpisodeRecord,
    GraphEdge,
    GraphNode,
    GraphPayload,
    RelatedEpisode,
    ThemeCatalog,
)

__all__ = [
    "CorpusIndex",
    "EpisodeRecord",
    "GraphEdge",
    "GraphNode",
    "GraphPayload",
    "ParsedMarkdown",
    "RelatedEpisode",
    "RelatednessConfig",
    "SourceDocument",
    "ThemeCatalog",
    "VocabularyConfig",
]
