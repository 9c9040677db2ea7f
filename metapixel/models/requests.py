"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator


class MetaFields(BaseModel):
    """Title and/or description to analyze. Both optional at this level."""

    title: str | None = Field(default=None, description="Meta title to analyze")
    description: str | None = Field(default=None, description="Meta description to analyze")

    @field_validator("title", "description", mode="before")
    @classmethod
    def _non_empty_string(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return None
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{info.field_name.capitalize()} must be a non-empty string")
        return value.strip()


class BatchItem(MetaFields):
    """One entry of a batch request; needs at least one field."""

    id: str | int | None = Field(default=None, description="Caller's identifier, echoed back")

    @model_validator(mode="after")
    def _title_or_description(self) -> BatchItem:
        if self.title is None and self.description is None:
            raise ValueError("Item must have a title or a description")
        return self


class BatchAnalyzeRequest(BaseModel):
    # Items stay raw so one malformed entry cannot reject the whole request
    items: list[Any] = Field(..., description="Ordered items, each with optional id, title, description")
