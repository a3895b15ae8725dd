from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .archive import load_week_documents
from .config import DEFAULT_WEEKS
from .errors import LkhcError, NoResultsError
from .results import Results
from .week import assemble


@dataclass(frozen=True)
class WeekFailure:
    week: int
    error: Exception


@dataclass(frozen=True)
class YearSummary:
    year: int
    results: tuple[Results, ...]
    failures: tuple[WeekFailure, ...]

    @property
    def entries(self) -> int:
        return sum(len(r.male) + len(r.female) for r in self.results)


def results_for_year(
    *,
    archive_root: Path,
    year: int,
    weeks: Iterable[int] = DEFAULT_WEEKS,
) -> YearSummary:
    results: list[Results] = []
    failures: list[WeekFailure] = []
    last_error: Optional[Exception] = None

    for week in weeks:
        try:
            docs = load_week_documents(archive_root=archive_root, year=year, week=week)
            results.append(assemble(week, docs.metadata, docs.results))
        except (LkhcError, OSError) as exc:
            print(f"year: {year} week: {week} err: {exc}", file=sys.stderr)
            failures.append(WeekFailure(week=int(week), error=exc))
            last_error = exc

    if not results:
        raise NoResultsError(f"no results for year {year}") from last_error

    return YearSummary(year=int(year), results=tuple(results), failures=tuple(failures))
