from __future__ import annotations

import math
import re
from datetime import timedelta

from .errors import FormatError, ParseError


_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_NOT_TIME_RE = re.compile(r"[^0-9:.]")
_NOT_SCORE_RE = re.compile(r"[^0-9.]")
_WHITESPACE_RE = re.compile(r"\s+")


def norm_text(text: str | None) -> str:
    s = (text or "").replace("\u00a0", " ")
    return _WHITESPACE_RE.sub(" ", s).strip()


def parse_integer(text: str | None) -> int:
    s = (text or "").strip()
    if not _INTEGER_RE.fullmatch(s):
        raise ParseError(f"not an integer: {text!r}")
    return int(s)


def parse_float(text: str | None) -> float:
    s = (text or "").strip()
    if not _DECIMAL_RE.fullmatch(s):
        raise ParseError(f"not a number: {text!r}")
    value = float(s)
    if not math.isfinite(value):
        raise ParseError(f"number out of range: {text!r}")
    return value


def parse_elapsed_time(text: str | None) -> timedelta:
    """Parse a finish time written as ``h:mm:ss.s``, ``m:ss.s`` or ``ss.s``.

    Results pages mix all three forms in one table and wrap them in stray
    markup, whitespace and unit letters, so everything except digits, colons
    and periods is dropped before the segments are read right-to-left as
    seconds, minutes and hours.
    """
    cleaned = _NOT_TIME_RE.sub("", text or "")
    if not cleaned:
        raise FormatError(f"no time in {text!r}")

    parts = cleaned.split(":")
    if len(parts) > 3:
        raise FormatError(f"too many time segments in {text!r}")

    *whole, secs = parts
    hours = 0
    minutes = 0
    if len(whole) == 2:
        hours = _non_negative(parse_integer(whole[0]), text)
    if whole:
        minutes = _non_negative(parse_integer(whole[-1]), text)

    # "45.3s" style suffixes; a no-op once the cleaning pattern has run
    seconds = _non_negative(parse_float(secs.rstrip("s")), text)
    try:
        return timedelta(seconds=hours * 3600 + minutes * 60 + seconds)
    except OverflowError as exc:
        raise ParseError(f"time out of range: {text!r}") from exc


def parse_score(text: str | None) -> float:
    return parse_float(_NOT_SCORE_RE.sub("", text or ""))


def _non_negative(value: int | float, text: str | None) -> int | float:
    if value < 0:
        raise ParseError(f"negative time segment in {text!r}")
    return value
