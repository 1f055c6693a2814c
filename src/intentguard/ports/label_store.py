"""Port: policy label store and labeled-scope lookup."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field


class LabelHandle(BaseModel):
    """A label as known to the account."""

    label_id: str = Field(..., description="Label identifier")
    name: str = Field(..., description="Label name")


class ScopeHandle(BaseModel):
    """A campaign carrying the policy label."""

    scope_id: str = Field(..., description="Campaign identifier")
    name: str = Field(default="", description="Campaign display name")
    status: str = Field(default="ENABLED", description="Campaign serving status")


@runtime_checkable
class LabelStorePort(Protocol):
    """Get-or-create labels and list the scopes that carry one."""

    def ensure_label_exists(self, name: str) -> LabelHandle: ...

    def list_scopes_with_label(
        self, name: str, status_filter: str | None = "ENABLED"
    ) -> list[ScopeHandle]: ...
