"""SQLite-backed account store: policy labels, campaigns and negative keywords.

Implements LabelStorePort and ExclusionStorePort for local runs and tests.
"""

from __future__ import annotations

import sqlite3
import uuid
from pathlib import Path

from ..domain.exclusion_ledger import EXACT_CLOSE, EXACT_OPEN, normalize_exclusion_text
from ..ports.label_store import LabelHandle, ScopeHandle

MATCH_TYPES = frozenset({"EXACT", "PHRASE", "BROAD"})


class SqliteAccountStore:
    """Stores labels, labeled scopes and campaign-level negatives."""

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        self._ensure_parent_dir()
        self._init_schema()

    def _ensure_parent_dir(self) -> None:
        path = Path(self._db_path)
        if path.parent.exists():
            return
        path.parent.mkdir(parents=True, exist_ok=True)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS labels (
                    label_id TEXT PRIMARY KEY,
                    name TEXT NOT NULL UNIQUE
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS scopes (
                    scope_id TEXT PRIMARY KEY,
                    name TEXT NOT NULL DEFAULT '',
                    status TEXT NOT NULL DEFAULT 'ENABLED'
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS scope_labels (
                    scope_id TEXT NOT NULL,
                    label_id TEXT NOT NULL,
                    PRIMARY KEY (scope_id, label_id)
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS negative_keywords (
                    negative_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    scope_id TEXT NOT NULL,
                    text TEXT NOT NULL,
                    normalized_text TEXT NOT NULL,
                    match_type TEXT NOT NULL
                )
                """
            )
            conn.execute(
                "CREATE UNIQUE INDEX IF NOT EXISTS idx_negative_keywords_unique "
                "ON negative_keywords (scope_id, normalized_text, match_type)"
            )

    # ------------------------------------------------------------------
    # LabelStorePort
    # ------------------------------------------------------------------

    def ensure_label_exists(self, name: str) -> LabelHandle:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT label_id, name FROM labels WHERE name = ?", (name,)
            ).fetchone()
            if row is not None:
                return LabelHandle(label_id=row["label_id"], name=row["name"])
            label_id = str(uuid.uuid4())
            conn.execute("INSERT INTO labels (label_id, name) VALUES (?, ?)", (label_id, name))
        return LabelHandle(label_id=label_id, name=name)

    def list_scopes_with_label(
        self, name: str, status_filter: str | None = "ENABLED"
    ) -> list[ScopeHandle]:
        clauses = ["l.name = ?"]
        params: list[object] = [name]
        if status_filter:
            clauses.append("s.status = ?")
            params.append(status_filter)
        query = (
            "SELECT s.scope_id, s.name, s.status FROM scopes s "
            "JOIN scope_labels sl ON sl.scope_id = s.scope_id "
            "JOIN labels l ON l.label_id = sl.label_id "
            "WHERE " + " AND ".join(clauses) + " ORDER BY s.scope_id"
        )
        with self._connect() as conn:
            rows = conn.execute(query, params).fetchall()
        return [
            ScopeHandle(scope_id=row["scope_id"], name=row["name"], status=row["status"])
            for row in rows
        ]

    # ------------------------------------------------------------------
    # ExclusionStorePort
    # ------------------------------------------------------------------

    def list_exact_exclusions(self, scope_id: str) -> list[str]:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT text FROM negative_keywords "
                "WHERE scope_id = ? AND match_type = 'EXACT' ORDER BY negative_id",
                (str(scope_id),),
            ).fetchall()
        return [row["text"] for row in rows]

    def create_exact_exclusion(self, scope_id: str, term: str) -> None:
        """Store ``[term]`` as an EXACT negative; a repeat is a no-op."""
        self.add_negative(scope_id, f"{EXACT_OPEN}{term}{EXACT_CLOSE}", match_type="EXACT")

    # ------------------------------------------------------------------
    # Account management (seed / inspection)
    # ------------------------------------------------------------------

    def upsert_scope(self, scope_id: str, name: str = "", status: str = "ENABLED") -> None:
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO scopes (scope_id, name, status) VALUES (?, ?, ?)
                ON CONFLICT(scope_id) DO UPDATE SET name = excluded.name, status = excluded.status
                """,
                (str(scope_id), name, status.upper()),
            )

    def attach_label(self, scope_id: str, label_name: str) -> None:
        label = self.ensure_label_exists(label_name)
        with self._connect() as conn:
            conn.execute(
                "INSERT OR IGNORE INTO scope_labels (scope_id, label_id) VALUES (?, ?)",
                (str(scope_id), label.label_id),
            )

    def add_negative(self, scope_id: str, text: str, match_type: str = "EXACT") -> bool:
        """Insert a negative keyword. Returns False if it already existed."""
        match_type = match_type.upper()
        if match_type not in MATCH_TYPES:
            raise ValueError(f"match_type must be one of {sorted(MATCH_TYPES)}, got {match_type!r}")
        with self._connect() as conn:
            cur = conn.execute(
                """
                INSERT OR IGNORE INTO negative_keywords (scope_id, text, normalized_text, match_type)
                VALUES (?, ?, ?, ?)
                """,
                (str(scope_id), text, normalize_exclusion_text(text), match_type),
            )
        return cur.rowcount > 0

    def list_negatives(self, scope_id: str) -> list[dict]:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT text, match_type FROM negative_keywords WHERE scope_id = ? ORDER BY negative_id",
                (str(scope_id),),
            ).fetchall()
        return [{"text": row["text"], "match_type": row["match_type"]} for row in rows]
