"""File-backed search-term report (CSV or JSON Lines), streamed row by row."""

from __future__ import annotations

import csv
import json
import logging
from collections.abc import Iterable, Iterator
from datetime import date
from pathlib import Path

from ..models.observation import Observation

_LOGGER = logging.getLogger(__name__)

# Report column -> Observation field. Both the ads-report headers and
# snake_case forms are accepted.
_COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "scope_id": ("CampaignId", "campaign_id", "scope_id"),
    "scope_name": ("CampaignName", "campaign_name", "scope_name"),
    "term": ("Query", "query", "search_term", "term"),
    "impressions": ("Impressions", "impressions"),
    "clicks": ("Clicks", "clicks"),
    "conversions": ("Conversions", "conversions"),
    "cost": ("Cost", "cost"),
    "date": ("Date", "date"),
}


def _pick(row: dict, field: str):
    for alias in _COLUMN_ALIASES[field]:
        if alias in row and row[alias] not in (None, ""):
            return row[alias]
    return None


def _to_int(value) -> int:
    try:
        return max(0, int(float(str(value).replace(",", ""))))
    except (TypeError, ValueError):
        return 0


def _to_float(value) -> float:
    try:
        return max(0.0, float(str(value).replace(",", "")))
    except (TypeError, ValueError):
        return 0.0


class FileReportSource:
    """Implements TrafficReportPort over a local ``.csv`` or ``.jsonl`` export."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def iter_rows(self, scope_ids: Iterable[str], report_date: date) -> Iterator[Observation]:
        wanted = {str(s) for s in scope_ids}
        day = report_date.isoformat()
        for row in self._iter_raw():
            scope_id = _pick(row, "scope_id")
            if scope_id is None or str(scope_id).strip() not in wanted:
                continue
            row_date = _pick(row, "date")
            if row_date is not None and str(row_date)[:10] != day:
                continue
            clicks = _to_int(_pick(row, "clicks"))
            if clicks < 1:
                continue
            yield Observation(
                scope_id=scope_id,
                scope_name=_pick(row, "scope_name"),
                term=_pick(row, "term"),
                impressions=_to_int(_pick(row, "impressions")),
                clicks=clicks,
                conversions=_to_float(_pick(row, "conversions")),
                cost=_to_float(_pick(row, "cost")),
            )

    def _iter_raw(self) -> Iterator[dict]:
        if self._path.suffix.lower() in {".jsonl", ".ndjson"}:
            yield from self._iter_jsonl()
        else:
            yield from self._iter_csv()

    def _iter_csv(self) -> Iterator[dict]:
        with open(self._path, encoding="utf-8", newline="") as f:
            yield from csv.DictReader(f)

    def _iter_jsonl(self) -> Iterator[dict]:
        with open(self._path, encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    item = json.loads(line)
                except json.JSONDecodeError:
                    _LOGGER.warning(
                        "report_row_unparseable",
                        extra={"path": str(self._path), "line_number": lineno},
                    )
                    continue
                if isinstance(item, dict):
                    yield item
