"""API response models. Serialized with camelCase keys."""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from metapixel.engine.analyzer import AnalysisResult


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FieldAnalysis(_CamelModel):
    pixel_width: int
    character_count: int
    is_truncated: bool
    truncated_text: str
    is_optimal: bool
    recommended_max_chars: int
    max_pixels: int
    min_pixels: int | None = None
    is_too_short: bool | None = None

    @classmethod
    def from_result(cls, result: AnalysisResult) -> FieldAnalysis:
        return cls(**asdict(result))


class AnalyzeResponse(_CamelModel):
    title: FieldAnalysis | None = None
    description: FieldAnalysis | None = None


class BatchItemResult(_CamelModel):
    id: str | int | None = None
    title: FieldAnalysis | None = None
    description: FieldAnalysis | None = None
    error: str | None = None


class BatchAnalyzeResponse(_CamelModel):
    results: list[BatchItemResult] = Field(default_factory=list)
    count: int = 0
    completed_at: datetime
