"""Port: search-term traffic report."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date
from typing import Protocol, runtime_checkable

from ..models.observation import Observation


@runtime_checkable
class TrafficReportPort(Protocol):
    """Stream report rows for the given scopes and day.

    Implementations yield only rows with at least one click and must not
    materialize the whole report.
    """

    def iter_rows(
        self, scope_ids: Iterable[str], report_date: date
    ) -> Iterator[Observation]: ...
