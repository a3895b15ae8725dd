from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from lxml import etree, html

from .errors import FormatError


@dataclass(frozen=True)
class WeekPaths:
    metadata: Path  # the week's entry page, links the Strava segment
    results: Path


@dataclass(frozen=True)
class WeekDocuments:
    metadata: html.HtmlElement
    results: html.HtmlElement


def week_paths(*, archive_root: Path, year: int, week: int) -> WeekPaths:
    year_dir = archive_root / str(int(year))
    return WeekPaths(
        metadata=year_dir / f"week{int(week)}.html",
        results=year_dir / f"week{int(week)}" / "results.html",
    )


def load_document(path: Path) -> html.HtmlElement:
    if not path.exists():
        raise FileNotFoundError(f"Missing archive page: {path}")
    content = path.read_bytes()
    if not content.strip():
        raise FormatError(f"empty archive page: {path}")
    try:
        return html.fromstring(content)
    except (etree.ParserError, ValueError) as exc:
        raise FormatError(f"unreadable archive page: {path}: {exc}") from exc


def load_week_documents(*, archive_root: Path, year: int, week: int) -> WeekDocuments:
    paths = week_paths(archive_root=archive_root, year=year, week=week)
    return WeekDocuments(
        metadata=load_document(paths.metadata),
        results=load_document(paths.results),
    )
