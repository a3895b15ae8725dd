from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import urlparse

from lxml import html

from .config import STRAVA_LINK_TARGET, STRAVA_LOGO_FILENAMES
from .errors import LkhcError, NotFoundError
from .util import parse_integer


@dataclass(frozen=True)
class SegmentLookup:
    name: str
    find: Callable[[html.HtmlElement], Optional[str]]  # returns the link href, or None


def _anchor_target_href(doc: html.HtmlElement) -> Optional[str]:
    hrefs = doc.xpath("//a[@target=$target][@href]/@href", target=STRAVA_LINK_TARGET)
    return str(hrefs[0]) if hrefs else None


def _logo_image_href(doc: html.HtmlElement) -> Optional[str]:
    for img in doc.xpath("//img[@src]"):
        src_path = urlparse(img.get("src") or "").path
        if posixpath.basename(src_path).lower() not in STRAVA_LOGO_FILENAMES:
            continue
        links = img.xpath("ancestor::a[@href][1]")
        if links:
            return links[0].get("href")
    return None


# Older weekly pages show the Strava link as text, later ones as a logo.
SEGMENT_LOOKUPS: tuple[SegmentLookup, ...] = (
    SegmentLookup(name="anchor-target", find=_anchor_target_href),
    SegmentLookup(name="logo-image", find=_logo_image_href),
)


def find_segment_href(
    doc: html.HtmlElement, lookups: tuple[SegmentLookup, ...] = SEGMENT_LOOKUPS
) -> str:
    for lookup in lookups:
        href = (lookup.find(doc) or "").strip()
        if href:
            return href
    raise NotFoundError("could not find Strava URL", field="segment_id")


def find_segment_id(
    doc: html.HtmlElement, lookups: tuple[SegmentLookup, ...] = SEGMENT_LOOKUPS
) -> int:
    href = find_segment_href(doc, lookups).strip()
    try:
        return parse_integer(href.split("/")[-1])
    except LkhcError as exc:
        exc.field = "segment_id"
        raise
