"""Port: campaign-level negative keyword store."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ExclusionStorePort(Protocol):
    """Read existing exact negatives and create new ones."""

    def list_exact_exclusions(self, scope_id: str) -> list[str]: ...

    def create_exact_exclusion(self, scope_id: str, term: str) -> None: ...
