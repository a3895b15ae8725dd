"""
Pytest configuration and shared fixtures.

The fixtures build small archive pages shaped like the real weekly pages:
an entry page that links the Strava segment and a results page with one
captioned table per division.
"""
from pathlib import Path

import pytest
from lxml import html


def _row(rank="1", rider_id="55", name="A Rider", time="59.2s", score="100.00", cells=None):
    if cells is None:
        cells = [rank, rider_id, name, "Team", "M", time, "21.3", "", score]
    return "<tr>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr>"


def _table(caption, rows, css_class="results"):
    header = "<tr><th>Rank</th><th>ID</th><th>Name</th><th>Team</th><th>Cat</th><th>Time</th><th>MPH</th><th>VAM</th><th>Score</th></tr>"
    caption_html = f"<caption>{caption}</caption>" if caption is not None else ""
    return f'<table class="{css_class}">{caption_html}{header}{"".join(rows)}</table>'


def _page(body):
    return f"<html><head><title>Low-Key Hillclimbs</title></head><body>{body}</body></html>"


def _anchor_link(segment_id=9001):
    return f'<p>Climb on <a target="Strava" href="https://www.strava.com/segments/{segment_id}">Strava</a></p>'


def _logo_link(segment_id=9001, logo="/images/strava_logo.png"):
    return f'<p><a href="https://www.strava.com/segments/{segment_id}"><img src="{logo}" alt="segment"></a></p>'


@pytest.fixture
def row():
    """Return a builder for one results row (nine cells by default)."""
    return _row


@pytest.fixture
def table():
    """Return a builder for a captioned results table."""
    return _table


@pytest.fixture
def page():
    """Return a builder wrapping body markup into a full HTML page string."""
    return _page


@pytest.fixture
def anchor_link():
    return _anchor_link


@pytest.fixture
def logo_link():
    return _logo_link


@pytest.fixture
def doc():
    """Parse a page string the way the archive loader does."""
    def _doc(markup):
        return html.fromstring(markup)
    return _doc


@pytest.fixture
def archive(tmp_path: Path):
    """Return a writer that lays out one week of pages under tmp_path."""
    def _write(year, week, *, metadata=None, results=None):
        year_dir = tmp_path / str(year)
        year_dir.mkdir(parents=True, exist_ok=True)
        if metadata is not None:
            (year_dir / f"week{week}.html").write_text(metadata, encoding="utf-8")
        if results is not None:
            week_dir = year_dir / f"week{week}"
            week_dir.mkdir(parents=True, exist_ok=True)
            (week_dir / "results.html").write_text(results, encoding="utf-8")
        return tmp_path
    return _write


@pytest.fixture
def good_week(archive, page, anchor_link, table, row):
    """Write a week with one men's entry and an empty women's table."""
    def _write(year=2016, week=1, segment_id=9001):
        return archive(
            year,
            week,
            metadata=page(anchor_link(segment_id)),
            results=page(table("Men", [row()]) + table("Women", [])),
        )
    return _write
