"""EnforcementService: one full enforcement run against the account."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date, timedelta
from typing import Any

from pydantic import BaseModel, Field

from ..config.runtime import RuntimeSettings
from ..domain.exclusion_ledger import ExclusionLedger
from ..domain.reconciliation_engine import ReconciliationEngine
from ..models.actions import ExclusionAction
from ..models.observation import Observation
from ..models.run_stats import ReconcileResult
from ..ports.exclusion_store import ExclusionStorePort
from ..ports.label_store import LabelStorePort, ScopeHandle
from ..ports.report_source import TrafficReportPort
from .errors import CollaboratorError

_LOGGER = logging.getLogger(__name__)

STATUS_NOTHING_TO_DO = "nothing_to_do"
STATUS_COMPLETED = "completed"
STATUS_CAP_REACHED = "cap_reached"


class EnforcementReport(BaseModel):
    """Outcome of an enforcement run, read-only once returned."""

    status: str = Field(..., description="nothing_to_do, completed or cap_reached")
    label_name: str
    report_date: date
    dry_run: bool = False
    scopes: list[ScopeHandle] = Field(default_factory=list)
    result: ReconcileResult | None = None

    @property
    def new_exclusions(self) -> int:
        return self.result.stats.new_exclusions if self.result else 0


class EnforcementService:
    """Wire the collaborators around the reconciliation engine."""

    def __init__(
        self,
        label_store: LabelStorePort,
        report_source: TrafficReportPort,
        exclusion_store: ExclusionStorePort,
        settings: RuntimeSettings,
        logger: Any = None,
    ) -> None:
        self._labels = label_store
        self._report = report_source
        self._exclusions = exclusion_store
        self._settings = settings
        self._logger = logger or _LOGGER

    def run(self, report_date: date | None = None, dry_run: bool = False) -> EnforcementReport:
        """Reconcile yesterday's (or ``report_date``'s) search terms for labeled scopes.

        Raises:
            CollaboratorError: a label store, report source or exclusion store
                call failed. Exclusions already created are not rolled back.
        """
        settings = self._settings
        label_name = settings.policy_label_name
        report_date = report_date or (date.today() - timedelta(days=1))
        self._logger.info(
            "enforcement_start",
            extra={"label": label_name, "report_date": report_date.isoformat(), "dry_run": dry_run},
        )

        with _collaborator("label_store", "ensure_label_exists"):
            self._labels.ensure_label_exists(label_name)
        with _collaborator("label_store", "list_scopes_with_label"):
            scopes = self._labels.list_scopes_with_label(label_name, settings.scope_status_filter)

        if not scopes:
            self._logger.info("nothing_to_do", extra={"label": label_name})
            return EnforcementReport(
                status=STATUS_NOTHING_TO_DO,
                label_name=label_name,
                report_date=report_date,
                dry_run=dry_run,
            )

        ledger = self._seed_ledger(scopes)
        engine = ReconciliationEngine(
            settings.intent_policy(),
            ledger=ledger,
            cap=settings.max_new_exclusions_per_run,
            logger=self._logger,
        )
        known_scopes = {s.scope_id: s.name for s in scopes}
        rows = self._stream_rows(list(known_scopes), report_date)
        apply = None if dry_run else self._create_exclusion
        result = engine.reconcile(rows, known_scopes=known_scopes, apply=apply)

        status = STATUS_CAP_REACHED if result.stats.cap_reached else STATUS_COMPLETED
        self._logger.info(
            "enforcement_done",
            extra={
                "status": status,
                "scopes": len(scopes),
                "new_exclusions": result.stats.new_exclusions,
                "cap": result.stats.cap,
            },
        )
        return EnforcementReport(
            status=status,
            label_name=label_name,
            report_date=report_date,
            dry_run=dry_run,
            scopes=scopes,
            result=result,
        )

    def _seed_ledger(self, scopes: list[ScopeHandle]) -> ExclusionLedger:
        ledger = ExclusionLedger()
        for scope in scopes:
            with _collaborator("exclusion_store", "list_exact_exclusions"):
                existing = self._exclusions.list_exact_exclusions(scope.scope_id)
            count = ledger.load(scope.scope_id, existing)
            self._logger.debug("ledger_seeded", extra={"scope_id": scope.scope_id, "exclusions": count})
        return ledger

    def _stream_rows(self, scope_ids: list[str], report_date: date) -> Iterator[Observation]:
        with _collaborator("report_source", "iter_rows"):
            yield from self._report.iter_rows(scope_ids, report_date)

    def _create_exclusion(self, action: ExclusionAction) -> None:
        with _collaborator("exclusion_store", "create_exact_exclusion"):
            self._exclusions.create_exact_exclusion(action.scope_id, action.term)
        self._logger.info(
            "exclusion_created",
            extra={
                "scope_id": action.scope_id,
                "term": action.term,
                "matched_tokens": list(action.matched_tokens),
            },
        )


@contextmanager
def _collaborator(collaborator: str, operation: str) -> Iterator[None]:
    """Re-raise any exception from a collaborator call as CollaboratorError."""
    try:
        yield
    except CollaboratorError:
        raise
    except Exception as exc:
        raise CollaboratorError(collaborator, operation, exc) from exc
