from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Optional, TypeVar

from lxml import html

from .config import (
    CELL_RANK,
    CELL_RIDER_ID,
    CELL_RIDER_NAME,
    CELL_SCORE,
    CELL_TIME,
    DIVISIONS,
    EXPECTED_CELL_COUNT,
    RESULTS_TABLE_CLASS,
    Division,
)
from .errors import FormatError, LkhcError
from .util import norm_text, parse_elapsed_time, parse_integer, parse_score


T = TypeVar("T")

_RESULTS_TABLES_XPATH = (
    f"//table[contains(concat(' ', normalize-space(@class), ' '), ' {RESULTS_TABLE_CLASS} ')]"
)
_ROWS_XPATH = "./tr | ./thead/tr | ./tbody/tr | ./tfoot/tr"


@dataclass(frozen=True)
class Rider:
    id: int
    name: str


@dataclass(frozen=True)
class Entry:
    rank: int
    rider: Rider
    elapsed_time: timedelta
    score: float


@dataclass(frozen=True)
class Results:
    week: int
    segment_id: Optional[int]
    male: tuple[Entry, ...]
    female: tuple[Entry, ...]


def parse_results_tables(doc: html.HtmlElement) -> tuple[tuple[Entry, ...], tuple[Entry, ...]]:
    """Return the (male, female) entries of a week's results page.

    Tables are picked by their caption; a caption other than the two division
    names is skipped. The first malformed row anywhere on the page aborts the
    whole page, so callers never see half a week.

    Rows for tandem and support riders share the table layout with everyone
    else and come back as ordinary entries.
    """
    by_gender: dict[str, list[Entry]] = {d.gender: [] for d in DIVISIONS}
    for table in doc.xpath(_RESULTS_TABLES_XPATH):
        division = _division_for(table)
        if division is None:
            continue
        by_gender[division.gender].extend(_parse_table(table, division))

    male, female = (tuple(by_gender[d.gender]) for d in DIVISIONS)
    return male, female


def _division_for(table: html.HtmlElement) -> Optional[Division]:
    caption = norm_text(table.xpath("string(./caption)"))
    for division in DIVISIONS:
        if caption == division.caption:
            return division
    return None


def _parse_table(table: html.HtmlElement, division: Division) -> tuple[Entry, ...]:
    out: list[Entry] = []
    for row_no, tr in enumerate(table.xpath(_ROWS_XPATH), start=1):
        cells = [c.text_content() for c in tr.xpath("./td")]
        if not cells:
            continue
        if len(cells) != EXPECTED_CELL_COUNT:
            raise FormatError(
                f"{division.caption} table: expected {EXPECTED_CELL_COUNT} cells, found {len(cells)}",
                row=row_no,
            )
        out.append(_parse_entry(cells, row_no=row_no))
    return tuple(out)


def _parse_entry(cells: list[str], *, row_no: int) -> Entry:
    rank = _parse_field("rank", parse_integer, cells[CELL_RANK], row_no)
    rider_id = _parse_field("rider_id", parse_integer, cells[CELL_RIDER_ID], row_no)
    elapsed = _parse_field("time", parse_elapsed_time, cells[CELL_TIME], row_no)
    score = _parse_field("score", parse_score, cells[CELL_SCORE], row_no)
    return Entry(
        rank=rank,
        rider=Rider(id=rider_id, name=norm_text(cells[CELL_RIDER_NAME])),
        elapsed_time=elapsed,
        score=score,
    )


def _parse_field(name: str, parse: Callable[[str], T], text: str, row_no: int) -> T:
    try:
        return parse(text)
    except LkhcError as exc:
        exc.field = name
        exc.row = row_no
        raise
