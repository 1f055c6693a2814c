"""Run statistics and reconciliation result."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .actions import ExclusionAction


class ScopeStats(BaseModel):
    """Per-scope counters, accumulated monotonically during a run."""

    scope_id: str
    scope_name: str = ""
    total_terms: int = 0
    keep: int = 0
    block_candidate: int = 0
    uncertain: int = 0
    new_exclusions: int = 0


class RunStatistics(BaseModel):
    """Per-scope counters plus the global new-exclusion budget."""

    cap: int = Field(..., ge=1, description="Maximum new exclusions per run")
    new_exclusions: int = 0
    cap_reached: bool = False
    already_excluded: int = 0
    skipped_unknown_scope: int = 0
    scopes: dict[str, ScopeStats] = Field(default_factory=dict)

    def for_scope(self, scope_id: str, scope_name: str = "") -> ScopeStats:
        """Return the scope's counters, creating them on first sight."""
        stats = self.scopes.get(scope_id)
        if stats is None:
            stats = ScopeStats(scope_id=scope_id, scope_name=scope_name)
            self.scopes[scope_id] = stats
        return stats

    @property
    def total_terms(self) -> int:
        return sum(s.total_terms for s in self.scopes.values())


class ReconcileResult(BaseModel):
    """Output of one reconciliation pass."""

    actions: list[ExclusionAction] = Field(default_factory=list)
    stats: RunStatistics
