"""ReconciliationEngine: turn observed terms into new exact-negative actions.

Observations are consumed one at a time, in arrival order, from any
single-pass iterable. Processing stops as soon as the run's new-exclusion
cap is reached; the remaining observations are never read.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from ..models.actions import ExclusionAction
from ..models.observation import Observation
from ..models.policy import IntentPolicy
from ..models.run_stats import ReconcileResult, RunStatistics
from .exclusion_ledger import ExclusionLedger, normalize_term
from .intent_classifier import IntentClass, IntentClassifier

_LOGGER = logging.getLogger(__name__)

ActionSink = Callable[[ExclusionAction], None]


class ReconciliationEngine:
    """Classify observations, dedup against the ledger, emit bounded actions."""

    def __init__(
        self,
        policy: IntentPolicy,
        ledger: ExclusionLedger | None = None,
        cap: int = 5000,
        classifier: IntentClassifier | None = None,
        logger: Any = None,
    ) -> None:
        if cap < 1:
            raise ValueError(f"cap must be a positive integer, got {cap}")
        self._policy = policy
        self._ledger = ledger if ledger is not None else ExclusionLedger()
        self._cap = cap
        self._classifier = classifier or IntentClassifier(policy)
        self._logger = logger or _LOGGER

    @property
    def ledger(self) -> ExclusionLedger:
        return self._ledger

    def reconcile(
        self,
        observations: Iterable[Observation],
        known_scopes: Mapping[str, str] | None = None,
        apply: ActionSink | None = None,
    ) -> ReconcileResult:
        """Process ``observations`` until exhausted or the cap is reached.

        Args:
            observations: Lazy sequence of observations, read once.
            known_scopes: scope_id -> display name. When given, observations
                for any other scope are skipped without touching scope stats.
            apply: Called with each action right after the ledger records it.
                Exceptions propagate; nothing is retried.
        """
        stats = RunStatistics(cap=self._cap)
        actions: list[ExclusionAction] = []

        for obs in observations:
            scope_id = obs.scope_id
            if known_scopes is not None and scope_id not in known_scopes:
                stats.skipped_unknown_scope += 1
                self._logger.warning(
                    "unknown_scope_skipped",
                    extra={"scope_id": scope_id, "term": obs.term[:200]},
                )
                continue

            scope_name = obs.scope_name or (known_scopes or {}).get(scope_id, "")
            result = self._classifier.classify(obs.term)
            scope_stats = stats.for_scope(scope_id, scope_name)
            scope_stats.total_terms += 1

            if result.intent is IntentClass.keep:
                scope_stats.keep += 1
                continue
            if result.intent is IntentClass.uncertain:
                scope_stats.uncertain += 1
                continue

            scope_stats.block_candidate += 1
            key = normalize_term(obs.term)
            if self._ledger.has(scope_id, key):
                stats.already_excluded += 1
                continue

            self._ledger.record(scope_id, key)
            action = ExclusionAction(
                scope_id=scope_id,
                scope_name=scope_name,
                term=obs.term,
                normalized_term=key,
                matched_tokens=result.matched_tokens,
                impressions=obs.impressions,
                clicks=obs.clicks,
                conversions=obs.conversions,
                cost=obs.cost,
            )
            if apply is not None:
                apply(action)
            actions.append(action)
            scope_stats.new_exclusions += 1
            stats.new_exclusions += 1

            if stats.new_exclusions >= self._cap:
                stats.cap_reached = True
                self._logger.info(
                    "cap_reached",
                    extra={"cap": self._cap, "new_exclusions": stats.new_exclusions},
                )
                break

        return ReconcileResult(actions=actions, stats=stats)


def reconcile(
    observations: Iterable[Observation],
    policy: IntentPolicy,
    cap: int,
    ledger: ExclusionLedger | None = None,
    known_scopes: Mapping[str, str] | None = None,
    apply: ActionSink | None = None,
) -> ReconcileResult:
    """Run one reconciliation pass with a fresh engine."""
    engine = ReconciliationEngine(policy, ledger=ledger, cap=cap)
    return engine.reconcile(observations, known_scopes=known_scopes, apply=apply)
