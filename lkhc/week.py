from __future__ import annotations

from lxml import html

from .errors import LkhcError
from .results import Results, parse_results_tables
from .segment import find_segment_id


def assemble(week: int, metadata_doc: html.HtmlElement, results_doc: html.HtmlElement) -> Results:
    """Build one week's Results from its entry page and its results page.

    Any failure is final for the week and is re-raised with the week number
    attached; no partial Results is returned.
    """
    try:
        segment_id = find_segment_id(metadata_doc)
        male, female = parse_results_tables(results_doc)
    except LkhcError as exc:
        exc.week = int(week)
        raise
    return Results(week=int(week), segment_id=segment_id, male=male, female=female)
