"""Composition root: the single place where adapters are wired to services.

Call ``build_enforcement_service()`` to get a fully-constructed service with
real adapters. No ad-hoc construction elsewhere.
"""

from __future__ import annotations

from pathlib import Path

from .adapters.file_report_source import FileReportSource
from .adapters.sqlite_account_store import SqliteAccountStore
from .config.runtime import RuntimeSettings, get_settings
from .services.enforcement_service import EnforcementService


def build_account_store(settings: RuntimeSettings | None = None) -> SqliteAccountStore:
    """Construct the local label/negative keyword store."""
    settings = settings or get_settings()
    return SqliteAccountStore(settings.account_db_path)


def build_enforcement_service(
    report_path: str | Path,
    settings: RuntimeSettings | None = None,
) -> EnforcementService:
    """Construct an EnforcementService reading the given report export."""
    settings = settings or get_settings()
    store = build_account_store(settings)
    return EnforcementService(
        label_store=store,
        report_source=FileReportSource(report_path),
        exclusion_store=store,
        settings=settings,
    )
