"""CLI commands for enforcement runs, classification and the local account store."""

import argparse
import json
import sys
from datetime import date
from pathlib import Path

from ..config.runtime import get_settings
from ..domain.intent_classifier import IntentClassifier
from ..services.errors import CollaboratorError
from ..services.reporting import report_to_dict, summary_lines
from ..wiring import build_account_store, build_enforcement_service
from .logging_config import configure_logging

# Default report export (project root / data / search_terms.csv)
_DEFAULT_REPORT_PATH = Path(__file__).resolve().parent.parent.parent.parent / "data" / "search_terms.csv"


def _positive_int(value: str) -> int:
    """argparse type for --cap: an integer >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def load_account_from_file(path: Path) -> list[dict]:
    """Load campaign definitions from a JSON file. Exits on missing file or invalid JSON shape."""
    if not path.exists():
        print(f"Error: account file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        print("Error: JSON file must contain a list of campaign objects.", file=sys.stderr)
        sys.exit(1)
    for i, item in enumerate(raw):
        if not isinstance(item, dict) or "campaign_id" not in item:
            print(f"Error: invalid campaign at index {i}: missing campaign_id", file=sys.stderr)
            sys.exit(1)
    return raw


def seed_account(file_path: Path) -> int:
    """Load campaigns, labels and negatives from JSON into the local store.

    Each item: {"campaign_id", "name", "status", "labels": [...],
    "negatives": ["[exact]", ...] or [{"text", "match_type"}, ...]}.
    """
    items = load_account_from_file(file_path)
    store = build_account_store()
    for item in items:
        scope_id = str(item["campaign_id"])
        store.upsert_scope(scope_id, item.get("name", ""), item.get("status", "ENABLED"))
        for label in item.get("labels", []):
            store.attach_label(scope_id, label)
        for neg in item.get("negatives", []):
            if isinstance(neg, dict):
                store.add_negative(scope_id, neg["text"], neg.get("match_type", "EXACT"))
            else:
                store.add_negative(scope_id, str(neg), "EXACT")
    return len(items)


def _cmd_run(args: argparse.Namespace) -> int:
    settings = get_settings()
    if args.cap is not None:
        settings = settings.model_copy(update={"max_new_exclusions_per_run": args.cap})
    report_date = date.fromisoformat(args.date) if args.date else None
    service = build_enforcement_service(args.report, settings=settings)
    try:
        report = service.run(report_date=report_date, dry_run=args.dry_run)
    except CollaboratorError as e:
        print(f"Error: enforcement aborted: {e}", file=sys.stderr)
        return 1
    if args.json:
        print(json.dumps(report_to_dict(report), indent=2))
    else:
        for line in summary_lines(report):
            print(line)
    return 0


def _cmd_classify(args: argparse.Namespace) -> int:
    classifier = IntentClassifier(get_settings().intent_policy())
    for term in args.terms:
        result = classifier.classify(term)
        tokens = ", ".join(result.matched_tokens) or "-"
        print(f"{result.intent.value:<16} {term}  [{tokens}]")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Enforce search-term intent with exact negative keywords")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Reconcile a day of search terms for labeled campaigns")
    run_parser.add_argument(
        "--report",
        type=Path,
        default=_DEFAULT_REPORT_PATH,
        help=f"Search-term report export, .csv or .jsonl (default: {_DEFAULT_REPORT_PATH})",
    )
    run_parser.add_argument("--date", type=str, default=None, help="Report day YYYY-MM-DD (default: yesterday)")
    run_parser.add_argument("--dry-run", action="store_true", help="Compute actions without creating negatives")
    run_parser.add_argument(
        "--cap", type=_positive_int, default=None, help="Override max new negatives for this run (>= 1)"
    )
    run_parser.add_argument("--json", action="store_true", help="Print the run report as JSON")

    classify_parser = subparsers.add_parser("classify", help="Classify search terms against the intent policy")
    classify_parser.add_argument("terms", nargs="+", help="Terms to classify")

    seed_parser = subparsers.add_parser("seed", help="Load campaigns, labels and negatives from a JSON file")
    seed_parser.add_argument("--file", type=Path, required=True, help="Path to account JSON file")

    negatives_parser = subparsers.add_parser("negatives", help="List negatives stored for a campaign")
    negatives_parser.add_argument("--scope-id", type=str, required=True, help="Campaign identifier")

    args = parser.parse_args(argv)
    configure_logging(get_settings().log_level)

    if args.command == "run":
        return _cmd_run(args)
    elif args.command == "classify":
        return _cmd_classify(args)
    elif args.command == "seed":
        count = seed_account(args.file)
        print(f"Loaded {count} campaigns from {args.file}.")
        return 0
    elif args.command == "negatives":
        store = build_account_store()
        for neg in store.list_negatives(args.scope_id):
            print(f"{neg['match_type']:<6} {neg['text']}")
        return 0
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
