"""Schemas for the episode index artifacts."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RelatedEpisode(BaseModel):
    """Reference from one episode to a similar episode."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identifier of the related episode.")
    title: str = Field(..., description="Display title of the related episode.")
    similarity: int = Field(..., ge=0, le=100, description="Rounded similarity percentage.")


class EpisodeRecord(BaseModel):
    """Processed episode as published in the index."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1, description="Stable episode identifier.")
    filename: str = Field(..., description="Originating document name.")
    title: str = Field(..., description="Display title.")
    summary: str = Field("", max_length=500, description="Summary excerpt.")
    themes: list[str] = Field(default_factory=list, description="Matched theme vocabulary terms.")
    keywords: list[str] = Field(default_factory=list, description="Matched keyword vocabulary terms.")
    sections: list[str] = Field(default_factory=list, description="Level-3 headings in document order.")
    related_episodes: list[RelatedEpisode] = Field(
        default_factory=list,
        alias="relatedEpisodes",
        description="Most similar episodes, strongest first.",
    )


class CorpusIndex(BaseModel):
    """Complete episode index consumed by the browser UI."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    generated_at: datetime = Field(..., alias="generatedAt", description="Build timestamp (UTC).")
    total_episodes: int = Field(..., ge=0, alias="totalEpisodes", description="Number of episodes.")
    episodes: list[EpisodeRecord] = Field(..., description="Episodes in canonical display order.")

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class ThemeCatalog(BaseModel):
    """Distinct themes observed across the corpus, sorted ascending."""

    themes: list[str] = Field(default_factory=list)


class GraphNode(BaseModel):
    id: str
    label: str
    title: str


class GraphEdge(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Both endpoint ids sorted and joined with '|'.")
    source: str = Field(..., alias="from")
    target: str = Field(..., alias="to")
    value: float = Field(..., description="Edge weight for the layout widget.")
    title: str = Field(..., description="Hover label.")


class GraphPayload(BaseModel):
    """Node/edge lists for the relatedness graph widget."""

    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
