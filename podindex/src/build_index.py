"""Build the episode index from a directory of markdown transcripts."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from pathlib import Path

from loguru import logger

try:  # pragma: no cover
    from .episode_ids import episode_sort_key, extract_episode_id, generate_title
    from .io_utils import list_source_files, read_text, write_json_files
    from .markdown_parse import parse_markdown
    from .schemas.config import RelatednessConfig, VocabularyConfig
    from .schemas.documents import SourceDocument
    from .schemas.episodes import CorpusIndex, EpisodeRecord, ThemeCatalog
    from .similarity import DEFAULT_RELATEDNESS, attach_related
    from .vocabulary import DEFAULT_VOCABULARY, match_terms
except ImportError:  # pragma: no cover
    from episode_ids import episode_sort_key, extract_episode_id, generate_title  # type: ignore
    from io_utils import list_source_files, read_text, write_json_files  # type: ignore
    from markdown_parse import parse_markdown  # type: ignore
    from schemas.config import RelatednessConfig, VocabularyConfig  # type: ignore
    from schemas.documents import SourceDocument  # type: ignore
    from schemas.episodes import CorpusIndex, EpisodeRecord, ThemeCatalog  # type: ignore
    from similarity import DEFAULT_RELATEDNESS, attach_related  # type: ignore
    from vocabulary import DEFAULT_VOCABULARY, match_terms  # type: ignore

INDEX_FILENAME = "episodes-index.json"
THEMES_FILENAME = "themes.json"


def load_documents(source_dir: Path) -> list[SourceDocument]:
    """Read every episode file in ``source_dir``.

    Files whose names do not encode an episode id are skipped without error.
    """
    documents: list[SourceDocument] = []
    skipped = 0
    for path in list_source_files(source_dir):
        if extract_episode_id(path.name) is None:
            logger.debug("load:skip | file={}", path.name)
            skipped += 1
            continue
        documents.append(SourceDocument(filename=path.name, content=read_text(path)))

    logger.info("load:done | accepted={} | skipped={}", len(documents), skipped)
    return documents


def extract_episode(
    document: SourceDocument,
    vocabulary: VocabularyConfig = DEFAULT_VOCABULARY,
) -> EpisodeRecord:
    """Build an episode record without relatedness from one document."""
    episode_id = extract_episode_id(document.filename)
    if episode_id is None:
        raise ValueError(f"{document.filename} is not an episode file")

    parsed = parse_markdown(document.content)
    record = EpisodeRecord(
        id=episode_id,
        filename=document.filename,
        title=generate_title(episode_id, document.content),
        summary=parsed.summary,
        themes=match_terms(parsed.raw_text, vocabulary.themes),
        keywords=match_terms(parsed.raw_text, vocabulary.keywords),
        sections=parsed.sections,
    )
    logger.trace(
        "extract:episode | id={} | themes={} | keywords={} | sections={}",
        record.id,
        len(record.themes),
        len(record.keywords),
        len(record.sections),
    )
    return record


def sort_episodes(episodes: Iterable[EpisodeRecord]) -> list[EpisodeRecord]:
    """Order episodes for display; ids sharing a rank fall back to id order."""
    return sorted(episodes, key=lambda episode: (episode_sort_key(episode.id), episode.id))


def build_corpus_index(
    documents: Sequence[SourceDocument],
    vocabulary: VocabularyConfig = DEFAULT_VOCABULARY,
    relatedness: RelatednessConfig = DEFAULT_RELATEDNESS,
    generated_at: datetime | None = None,
) -> CorpusIndex:
    """Run extraction, relatedness and ordering over already loaded documents."""
    episodes = [extract_episode(document, vocabulary) for document in documents]
    logger.info("extract:done | episodes={}", len(episodes))

    # relatedness needs every record's themes and keywords to be final
    enriched = attach_related(episodes, relatedness)
    linked = sum(1 for episode in enriched if episode.related_episodes)
    logger.info("related:done | episodes_with_related={}", linked)

    ordered = sort_episodes(enriched)
    return CorpusIndex(
        generated_at=generated_at or datetime.now(timezone.utc),
        total_episodes=len(ordered),
        episodes=ordered,
    )


def collect_themes(index: CorpusIndex) -> ThemeCatalog:
    """Distinct themes across all episodes, sorted ascending."""
    themes = {theme for episode in index.episodes for theme in episode.themes}
    return ThemeCatalog(themes=sorted(themes))


def theme_counts(index: CorpusIndex) -> list[tuple[str, int]]:
    """Episodes per theme, most frequent first; ties in theme order."""
    counter = Counter(theme for episode in index.episodes for theme in episode.themes)
    return sorted(counter.items(), key=lambda item: (-item[1], item[0]))


def write_artifacts(index: CorpusIndex, output_dir: Path) -> tuple[Path, Path]:
    """Write the episode index and theme catalog into ``output_dir``."""
    index_path = output_dir / INDEX_FILENAME
    themes_path = output_dir / THEMES_FILENAME
    catalog = collect_themes(index)

    # both files describe one build, so neither is replaced unless both are staged
    write_json_files(
        {
            index_path: index.to_payload(),
            themes_path: catalog.model_dump(mode="json"),
        }
    )
    logger.info("write:index | path={} | episodes={}", index_path, index.total_episodes)
    logger.info("write:themes | path={} | themes={}", themes_path, len(catalog.themes))
    return index_path, themes_path


def build_index(
    source_dir: Path,
    output_dir: Path,
    vocabulary: VocabularyConfig = DEFAULT_VOCABULARY,
    relatedness: RelatednessConfig = DEFAULT_RELATEDNESS,
) -> CorpusIndex:
    """Load transcripts from ``source_dir`` and publish the index artifacts."""
    logger.info("build:start | source={} | output={}", source_dir, output_dir)
    documents = load_documents(source_dir)
    index = build_corpus_index(documents, vocabulary=vocabulary, relatedness=relatedness)
    write_artifacts(index, output_dir)
    logger.success("build:done | episodes={}", index.total_episodes)
    return index
