"""CLI tests: seed, run, classify and negatives against a temp account store."""

import json

import pytest

from intentguard.interface.cli import main

ACCOUNT = [
    {
        "campaign_id": "1001",
        "name": "Naples Private Tours",
        "labels": ["ENFORCE_PRIVATE_TERM"],
        "negatives": ["[bus tours]", {"text": "free", "match_type": "BROAD"}],
    },
    {"campaign_id": "1003", "name": "Paused", "status": "PAUSED", "labels": ["ENFORCE_PRIVATE_TERM"]},
]

REPORT = (
    "CampaignId,CampaignName,Query,Impressions,Clicks,Conversions,Cost\n"
    "1001,Naples Private Tours,private luxury villa,120,4,1,12.40\n"
    "1001,Naples Private Tours,bus tours naples,300,6,0,9.10\n"
    "1001,Naples Private Tours,bus tours,210,3,0,4.20\n"
    "1001,Naples Private Tours,family trip ideas,90,1,0,1.30\n"
    "1003,Paused,cheap tours,10,1,0,1.00\n"
)


def _seed(tmp_path):
    account = tmp_path / "account.json"
    account.write_text(json.dumps(ACCOUNT), encoding="utf-8")
    report = tmp_path / "report.csv"
    report.write_text(REPORT, encoding="utf-8")
    assert main(["seed", "--file", str(account)]) == 0
    return report


def test_run_creates_negatives_and_prints_summary(tmp_path, capsys):
    report = _seed(tmp_path)
    capsys.readouterr()
    assert main(["run", "--report", str(report)]) == 0
    out = capsys.readouterr().out
    assert "Total labeled campaigns: 1" in out
    assert "Total new negatives added: 1 (cap: 5000)" in out

    assert main(["negatives", "--scope-id", "1001"]) == 0
    out = capsys.readouterr().out
    assert "[bus tours naples]" in out
    assert "BROAD  free" in out


def test_dry_run_json(tmp_path, capsys):
    report = _seed(tmp_path)
    capsys.readouterr()
    assert main(["run", "--report", str(report), "--dry-run", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["dry_run"] is True
    assert [a["term"] for a in payload["actions"]] == ["bus tours naples"]

    main(["negatives", "--scope-id", "1001"])
    assert "[bus tours naples]" not in capsys.readouterr().out


@pytest.mark.parametrize("cap", ["0", "-3", "many"])
def test_invalid_cap_is_rejected_before_any_write(tmp_path, capsys, cap):
    report = _seed(tmp_path)
    capsys.readouterr()
    with pytest.raises(SystemExit) as exc:
        main(["run", "--report", str(report), "--cap", cap])
    assert exc.value.code == 2
    assert "--cap" in capsys.readouterr().err

    main(["negatives", "--scope-id", "1001"])
    assert "[bus tours naples]" not in capsys.readouterr().out


def test_cap_one_limits_the_run(tmp_path, capsys):
    report = _seed(tmp_path)
    capsys.readouterr()
    assert main(["run", "--report", str(report), "--cap", "1"]) == 0
    assert "Total new negatives added: 1 (cap: 1)" in capsys.readouterr().out


def test_missing_report_is_a_collaborator_failure(tmp_path, capsys):
    _seed(tmp_path)
    assert main(["run", "--report", str(tmp_path / "missing.csv")]) == 1
    assert "report_source" in capsys.readouterr().err


def test_classify(capsys):
    assert main(["classify", "private group tour", "cheap bus tours"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("keep")
    assert lines[1].startswith("block_candidate")
