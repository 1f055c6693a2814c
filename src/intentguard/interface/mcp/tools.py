"""Tool registry for MCP servers.

Strict inputs via Pydantic models; every tool returns a JSON string and logs
its invocation.
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any

from pydantic import ValidationError

from ...config.runtime import get_settings
from ...domain.exclusion_ledger import ExclusionLedger
from ...domain.intent_classifier import IntentClassifier
from ...domain.reconciliation_engine import ReconciliationEngine
from ...models.observation import Observation
from ...services.errors import CollaboratorError
from ...services.reporting import report_to_dict, summary_lines
from .observability import metrics_snapshot, tool_invocation

REVIEW_ALLOWED_TOOLS = frozenset({
    "intent_classify",
    "intent_policy",
    "negatives_preview",
})

OPERATOR_ALLOWED_TOOLS = frozenset({
    "enforcement_run",
    "negatives_list",
})

_MAX_TERMS_PER_CALL = 1000


def _get_account_store():
    from ...wiring import build_account_store
    return build_account_store()


def _get_enforcement_service(report_path: str):
    from ...wiring import build_enforcement_service
    return build_enforcement_service(report_path)


def register_review_tools(mcp):
    """Register read-only tools: nothing here writes to the account."""

    @mcp.tool()
    def intent_classify(terms: list[str]) -> str:
        """Classify search terms against the configured intent policy.

        Args:
            terms: Query terms to classify (max 1000)

        Returns:
            JSON list of {term, intent, matched_tokens, rule}
        """
        with tool_invocation("intent_classify") as ctx:
            classifier = IntentClassifier(get_settings().intent_policy())
            results = []
            for term in terms[:_MAX_TERMS_PER_CALL]:
                r = classifier.classify(term)
                results.append(
                    {
                        "term": term,
                        "intent": r.intent.value,
                        "matched_tokens": list(r.matched_tokens),
                        "rule": r.rule,
                    }
                )
            ctx["extra"]["terms_count"] = len(results)
            return json.dumps(results, indent=2)

    @mcp.tool()
    def intent_policy() -> str:
        """Return the active intent policy: token sets, label, per-run cap and tool counters."""
        with tool_invocation("intent_policy"):
            settings = get_settings()
            policy = settings.intent_policy()
            return json.dumps(
                {
                    "policy_label_name": settings.policy_label_name,
                    "max_new_exclusions_per_run": settings.max_new_exclusions_per_run,
                    "allow_tokens": list(policy.allow_tokens),
                    "suspicious_tokens": list(policy.suspicious_tokens),
                    "brand_allowlist_tokens": list(policy.brand_allowlist_tokens),
                    "rule_order": ["brand", "allow", "suspicious", "uncertain"],
                    "metrics": metrics_snapshot(),
                },
                indent=2,
            )

    @mcp.tool()
    def negatives_preview(rows_json: str, existing_json: str = "{}", cap: int | None = None) -> str:
        """Dry-run reconciliation over supplied rows; nothing is written.

        Args:
            rows_json: JSON list of {scope_id, scope_name, term, impressions, clicks, conversions, cost}
            existing_json: JSON object mapping scope_id to its existing exact negatives
            cap: Optional per-run cap (defaults to the configured cap)

        Returns:
            JSON with actions and stats, or an error object
        """
        with tool_invocation("negatives_preview") as ctx:
            settings = get_settings()
            try:
                raw_rows = json.loads(rows_json)
                existing = json.loads(existing_json or "{}")
                if not isinstance(raw_rows, list) or not isinstance(existing, dict):
                    raise ValueError("rows_json must be a list and existing_json an object")
                for scope_id, texts in existing.items():
                    if texts is not None and not isinstance(texts, list):
                        raise ValueError(f"existing_json[{scope_id!r}] must be a list of exclusion texts")
                if cap is not None and cap < 1:
                    raise ValueError(f"cap must be >= 1, got {cap}")
                rows = [Observation.model_validate(r) for r in raw_rows]
            except (ValueError, ValidationError) as e:
                ctx["error"] = str(e)
                return json.dumps({"error": str(e)})

            ledger = ExclusionLedger()
            for scope_id, texts in existing.items():
                ledger.load(str(scope_id), texts or [])
            engine = ReconciliationEngine(
                settings.intent_policy(),
                ledger=ledger,
                cap=cap if cap is not None else settings.max_new_exclusions_per_run,
            )
            result = engine.reconcile(rows)
            ctx["extra"]["actions_count"] = len(result.actions)
            return result.model_dump_json(indent=2)


def register_operator_tools(mcp):
    """Register tools that read or write the account store."""

    @mcp.tool()
    def enforcement_run(report_path: str, report_date: str | None = None, dry_run: bool = True) -> str:
        """Run enforcement for labeled campaigns from a search-term report export.

        Args:
            report_path: Path to a .csv or .jsonl search-term report
            report_date: Report day (YYYY-MM-DD); defaults to yesterday
            dry_run: If True (default), compute actions without creating negatives

        Returns:
            JSON run report with summary lines, or an error naming the failed collaborator
        """
        with tool_invocation("enforcement_run") as ctx:
            try:
                day = date.fromisoformat(report_date) if report_date else None
            except ValueError as e:
                ctx["error"] = str(e)
                return json.dumps({"error": str(e)})
            service = _get_enforcement_service(report_path)
            try:
                report = service.run(report_date=day, dry_run=dry_run)
            except CollaboratorError as e:
                ctx["error"] = str(e)
                return json.dumps({"error": str(e), "collaborator": e.collaborator})
            out: dict[str, Any] = report_to_dict(report)
            out["summary"] = summary_lines(report)
            ctx["extra"].update({"status": report.status, "new_exclusions": report.new_exclusions})
            return json.dumps(out, indent=2)

    @mcp.tool()
    def negatives_list(scope_id: str) -> str:
        """List negative keywords stored for a campaign.

        Args:
            scope_id: Campaign identifier

        Returns:
            JSON list of {text, match_type}
        """
        with tool_invocation("negatives_list") as ctx:
            negatives = _get_account_store().list_negatives(scope_id)
            ctx["extra"]["negatives_count"] = len(negatives)
            return json.dumps(negatives, indent=2)
