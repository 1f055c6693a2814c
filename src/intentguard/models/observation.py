"""Observation: one search term seen for one scope in the report window."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class Observation(BaseModel):
    """A (scope, query term) pair with its traffic metadata.

    Traffic metadata is carried through to actions and reports only; it never
    influences classification.
    """

    scope_id: str = Field(..., description="Campaign identifier")
    scope_name: str = Field(default="", description="Campaign display name")
    term: str = Field(default="", description="Raw query text as reported")
    impressions: int = Field(default=0, ge=0)
    clicks: int = Field(default=0, ge=0)
    conversions: float = Field(default=0.0, ge=0)
    cost: float = Field(default=0.0, ge=0)

    @field_validator("scope_id", mode="before")
    @classmethod
    def _scope_id_str(cls, value: object) -> str:
        return str(value).strip() if value is not None else ""

    @field_validator("scope_name", "term", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> str:
        return "" if value is None else str(value)
