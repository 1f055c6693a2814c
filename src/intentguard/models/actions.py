"""Exclusion actions emitted by the reconciliation engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExclusionAction(BaseModel):
    """Create an exact-match negative for ``term`` at the scope (campaign) level."""

    model_config = ConfigDict(frozen=True)

    scope_id: str = Field(..., description="Campaign identifier")
    scope_name: str = Field(default="", description="Campaign display name")
    term: str = Field(..., description="Query text exactly as observed")
    normalized_term: str = Field(..., description="Ledger key for the term")
    matched_tokens: tuple[str, ...] = Field(default=(), description="Suspicious tokens that matched")
    impressions: int = Field(default=0)
    clicks: int = Field(default=0)
    conversions: float = Field(default=0.0)
    cost: float = Field(default=0.0)
