"""Schemas for raw transcript documents and their parsed form."""

from pydantic import BaseModel, ConfigDict, Field


class SourceDocument(BaseModel):
    """Raw transcript document read from the corpus directory."""

    model_config = ConfigDict(frozen=True)

    filename: str = Field(..., description="Name of the originating file.")
    content: str = Field(..., description="Full document text.")


class ParsedMarkdown(BaseModel):
    """Intermediate record produced by the markdown parser."""

    model_config = ConfigDict(frozen=True)

    summary: str = Field(..., max_length=500, description="Summary excerpt, at most 500 characters.")
    sections: list[str] = Field(default_factory=list, description="Level-3 headings in document order.")
    raw_text: str = Field(..., description="Full document text kept for vocabulary matching.")
