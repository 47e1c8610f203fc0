"""Derive the relatedness graph consumed by the network widget."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

try:  # pragma: no cover
    from .io_utils import write_json
    from .schemas.episodes import CorpusIndex, GraphEdge, GraphNode, GraphPayload
except ImportError:  # pragma: no cover
    from io_utils import write_json  # type: ignore
    from schemas.episodes import CorpusIndex, GraphEdge, GraphNode, GraphPayload  # type: ignore

LABEL_TITLE_CHARS = 20
MIN_EDGE_SIMILARITY = 30
EDGE_VALUE_DIVISOR = 20
# ids contain "-", so edge ids need a separator no id can hold
EDGE_ID_SEPARATOR = "|"


def _edge_key(first: str, second: str) -> tuple[str, str]:
    low, high = sorted((first, second))
    return low, high


def build_graph(index: CorpusIndex, min_similarity: int = MIN_EDGE_SIMILARITY) -> GraphPayload:
    """One node per episode and one edge per related pair.

    A pair listed in both directions yields a single edge, oriented from the
    episode that appears first in the index.
    """
    nodes = [
        GraphNode(
            id=episode.id,
            label=f"EP {episode.id}\n{episode.title[:LABEL_TITLE_CHARS]}...",
            title=episode.title,
        )
        for episode in index.episodes
    ]

    edges: dict[tuple[str, str], GraphEdge] = {}
    for episode in index.episodes:
        for related in episode.related_episodes:
            if related.similarity < min_similarity:
                continue
            key = _edge_key(episode.id, related.id)
            if key in edges:
                continue
            edges[key] = GraphEdge(
                id=EDGE_ID_SEPARATOR.join(key),
                source=episode.id,
                target=related.id,
                value=related.similarity / EDGE_VALUE_DIVISOR,
                title=f"関連度: {related.similarity}%",
            )

    return GraphPayload(nodes=nodes, edges=list(edges.values()))


def export_graph(index: CorpusIndex, output_path: Path) -> GraphPayload:
    """Write the graph payload for ``index`` to ``output_path``."""
    graph = build_graph(index)
    write_json(output_path, graph.to_payload())
    logger.info("graph:write | path={} | nodes={} | edges={}", output_path, len(graph.nodes), len(graph.edges))
    return graph
