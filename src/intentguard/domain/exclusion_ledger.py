"""ExclusionLedger: per-scope index of terms already excluded as exact negatives.

The ledger is the single source of truth for dedup within a run. It is seeded
once from the exclusion store and then updated by the reconciliation engine
immediately before each exclusion is created.
"""

from __future__ import annotations

from collections.abc import Iterable

EXACT_OPEN = "["
EXACT_CLOSE = "]"


def normalize_term(text: str | None) -> str:
    """Ledger key for an observed query: trimmed and lowercased, nothing else.

    Brackets in a query are part of the query text.
    """
    return (text or "").strip().lower()


def normalize_exclusion_text(text: str | None) -> str:
    """Ledger key for a stored exact exclusion: one wrapping bracket pair removed.

    ``"[Cheap Tours]"`` and the query ``"cheap tours"`` share the key ``"cheap tours"``;
    the exclusion ``"[[cheap tours]]"`` keys as the query ``"[cheap tours]"``.
    """
    key = normalize_term(text)
    if len(key) >= 2 and key.startswith(EXACT_OPEN) and key.endswith(EXACT_CLOSE):
        key = key[1:-1].strip()
    return key


class ExclusionLedger:
    """In-memory key sets, one per scope."""

    def __init__(self) -> None:
        self._keys: dict[str, set[str]] = {}

    def load(self, scope_id: str, existing_exact_exclusions: Iterable[str | None]) -> int:
        """Index a scope's existing exact exclusions. Returns the scope's key count."""
        keys = self._keys.setdefault(str(scope_id), set())
        for text in existing_exact_exclusions:
            key = normalize_exclusion_text(text)
            if key:
                keys.add(key)
        return len(keys)

    def has(self, scope_id: str, term: str | None) -> bool:
        keys = self._keys.get(str(scope_id))
        if not keys:
            return False
        return normalize_term(term) in keys

    def record(self, scope_id: str, term: str | None) -> bool:
        """Add the key; safe to repeat. Returns True if the key was new."""
        key = normalize_term(term)
        keys = self._keys.setdefault(str(scope_id), set())
        if key in keys:
            return False
        keys.add(key)
        return True

    def scopes(self) -> list[str]:
        return sorted(self._keys)

    def size(self, scope_id: str) -> int:
        return len(self._keys.get(str(scope_id), ()))

    def keys(self, scope_id: str) -> list[str]:
        return sorted(self._keys.get(str(scope_id), ()))
