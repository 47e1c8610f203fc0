"""Immutable configuration for vocabulary matching and relatedness ranking."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class VocabularyConfig(BaseModel):
    """Ordered theme and keyword vocabularies."""

    model_config = ConfigDict(frozen=True)

    themes: tuple[str, ...] = Field(..., description="Theme terms used for faceted filtering.")
    keywords: tuple[str, ...] = Field(..., description="Keyword terms used for similarity scoring.")

    @field_validator("themes", "keywords")
    @classmethod
    def _no_empty_terms(cls, terms: tuple[str, ...]) -> tuple[str, ...]:
        if any(not term for term in terms):
            raise ValueError("Vocabulary terms must be non-empty strings.")
        return terms


class RelatednessConfig(BaseModel):
    """Parameters of the related-episode ranking."""

    model_config = ConfigDict(frozen=True)

    threshold: float = Field(0.3, ge=0.0, le=1.0, description="Minimum score to count as related.")
    max_related: int = Field(5, ge=1, description="Maximum related episodes kept per episode.")
    keyword_weight: float = Field(0.6, ge=0.0)
    theme_weight: float = Field(0.4, ge=0.0)

    @model_validator(mode="after")
    def _weights_bounded(self) -> "RelatednessConfig":
        # scores must stay within [0, 1]
        if self.keyword_weight + self.theme_weight > 1.0 + 1e-9:
            raise ValueError("keyword_weight + theme_weight must not exceed 1.0")
        return self
