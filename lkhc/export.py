from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Iterator, TextIO

import openpyxl

from .config import FEMALE, MALE
from .results import Entry, Results


FIELDNAMES = ("year", "week", "segment", "gender", "rank", "id", "name", "time", "score")


def result_rows(*, year: int, results: Iterable[Results]) -> Iterator[dict[str, object]]:
    """Flatten weekly results into one row per entry, men before women."""
    for r in results:
        for gender, entries in ((MALE.gender, r.male), (FEMALE.gender, r.female)):
            for entry in entries:
                yield _entry_row(year=year, week=r.week, segment_id=r.segment_id, gender=gender, entry=entry)


def _entry_row(*, year: int, week: int, segment_id: int | None, gender: str, entry: Entry) -> dict[str, object]:
    return {
        "year": int(year),
        "week": int(week),
        "segment": "" if segment_id is None else segment_id,
        "gender": gender,
        "rank": entry.rank,
        "id": entry.rider.id,
        "name": entry.rider.name,
        # whole seconds, truncated
        "time": int(entry.elapsed_time.total_seconds()),
        "score": round(entry.score),
    }


def write_csv(rows: Iterable[dict[str, object]], out: Path | TextIO) -> int:
    if isinstance(out, Path):
        out.parent.mkdir(parents=True, exist_ok=True)
        with out.open("w", newline="", encoding="utf-8") as f:
            return _write_csv_stream(rows, f)
    return _write_csv_stream(rows, out)


def _write_csv_stream(rows: Iterable[dict[str, object]], f: TextIO) -> int:
    writer = csv.DictWriter(f, fieldnames=list(FIELDNAMES), lineterminator="\n")
    writer.writeheader()
    count = 0
    for row in rows:
        writer.writerow(row)
        count += 1
    return count


def write_xlsx(rows: Iterable[dict[str, object]], path: Path, *, sheet_title: str = "results") -> int:
    path.parent.mkdir(parents=True, exist_ok=True)
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = sheet_title
    ws.append(list(FIELDNAMES))
    count = 0
    for row in rows:
        ws.append([row[name] for name in FIELDNAMES])
        count += 1
    ws.freeze_panes = "A2"
    wb.save(path)
    return count
