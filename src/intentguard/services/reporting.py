"""Human-readable and JSON summaries of an enforcement run."""

from __future__ import annotations

from typing import Any

from .enforcement_service import STATUS_NOTHING_TO_DO, EnforcementReport


def summary_lines(report: EnforcementReport) -> list[str]:
    """Render the run summary, one log line per entry."""
    mode = " (dry run)" if report.dry_run else ""
    if report.status == STATUS_NOTHING_TO_DO:
        return [f"No campaigns found with label {report.label_name}. Nothing to do.{mode}"]

    result = report.result
    stats = result.stats if result else None
    lines = [
        f"Intent enforcement run summary{mode} (label: {report.label_name}, date: {report.report_date.isoformat()}):",
        f"Total labeled campaigns: {len(report.scopes)}",
    ]
    if stats is None:
        return lines

    verb = "to add" if report.dry_run else "added"
    lines.append(f"Total new negatives {verb}: {stats.new_exclusions} (cap: {stats.cap})")
    for scope_id, s in stats.scopes.items():
        lines.append(
            f"Campaign {scope_id} - {s.scope_name}"
            f" | terms: {s.total_terms}"
            f" | keep: {s.keep}"
            f" | block_candidate: {s.block_candidate}"
            f" | uncertain: {s.uncertain}"
            f" | new negatives: {s.new_exclusions}"
        )
    if stats.skipped_unknown_scope:
        lines.append(
            f"Skipped {stats.skipped_unknown_scope} report rows for campaigns outside the labeled set."
        )
    if stats.cap_reached:
        lines.append(
            f"Hit max_new_exclusions_per_run ({stats.cap}); some candidates may be left for the next run."
        )
    return lines


def report_to_dict(report: EnforcementReport) -> dict[str, Any]:
    """JSON-serializable view of the run, including the emitted actions."""
    out: dict[str, Any] = {
        "status": report.status,
        "label_name": report.label_name,
        "report_date": report.report_date.isoformat(),
        "dry_run": report.dry_run,
        "scopes": [s.model_dump() for s in report.scopes],
    }
    if report.result is not None:
        stats = report.result.stats
        out["stats"] = stats.model_dump(mode="json")
        out["actions"] = [a.model_dump(mode="json") for a in report.result.actions]
    return out
