"""Summary report tests."""

import json
from datetime import date

from intentguard.domain.reconciliation_engine import reconcile
from intentguard.models.observation import Observation
from intentguard.models.policy import IntentPolicy
from intentguard.ports.label_store import ScopeHandle
from intentguard.services.enforcement_service import (
    STATUS_CAP_REACHED,
    STATUS_COMPLETED,
    STATUS_NOTHING_TO_DO,
    EnforcementReport,
)
from intentguard.services.reporting import report_to_dict, summary_lines

DAY = date(2026, 10, 16)


def _report(observations, cap=10, dry_run=False, known=None):
    result = reconcile(observations, IntentPolicy(), cap=cap, known_scopes=known)
    return EnforcementReport(
        status=STATUS_CAP_REACHED if result.stats.cap_reached else STATUS_COMPLETED,
        label_name="ENFORCE_PRIVATE_TERM",
        report_date=DAY,
        dry_run=dry_run,
        scopes=[ScopeHandle(scope_id="C1", name="Naples")],
        result=result,
    )


def test_nothing_to_do_line():
    report = EnforcementReport(status=STATUS_NOTHING_TO_DO, label_name="L", report_date=DAY)
    assert summary_lines(report) == ["No campaigns found with label L. Nothing to do."]


def test_per_scope_line_has_five_counters():
    report = _report([Observation(scope_id="C1", scope_name="Naples", term="cheap tours")])
    lines = summary_lines(report)
    assert "Total labeled campaigns: 1" in lines
    assert "Total new negatives added: 1 (cap: 10)" in lines
    assert (
        "Campaign C1 - Naples | terms: 1 | keep: 0 | block_candidate: 1 | uncertain: 0 | new negatives: 1"
        in lines
    )


def test_cap_notice():
    obs = [Observation(scope_id="C1", term=f"cheap {i}") for i in range(3)]
    lines = summary_lines(_report(obs, cap=1))
    assert lines[-1].startswith("Hit max_new_exclusions_per_run (1)")


def test_dry_run_wording_and_anomaly_line():
    obs = [Observation(scope_id="C9", term="cheap")]
    lines = summary_lines(_report(obs, dry_run=True, known={"C1": "Naples"}))
    assert "(dry run)" in lines[0]
    assert "Total new negatives to add: 0 (cap: 10)" in lines
    assert any("Skipped 1 report rows" in line for line in lines)


def test_report_to_dict_is_json_serializable():
    report = _report([Observation(scope_id="C1", term="bus tours")])
    d = report_to_dict(report)
    json.dumps(d)
    assert d["report_date"] == "2026-10-16"
    assert d["actions"][0]["term"] == "bus tours"
    assert d["stats"]["scopes"]["C1"]["new_exclusions"] == 1
