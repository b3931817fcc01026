"""Whitespace and date normalisation for scraped portal text."""

from __future__ import annotations

import re
from datetime import date

_WHITESPACE_RE = re.compile(r"\s+")
_PATTERN_TOKEN_RE = re.compile(r"YYYY|DD|D|MM|M")

# Day and month accept an optional leading zero; the year is always four digits.
_TOKEN_GROUPS = {
    "D": r"(?P<day>\d{1,2})",
    "DD": r"(?P<day>\d{1,2})",
    "M": r"(?P<month>\d{1,2})",
    "MM": r"(?P<month>\d{1,2})",
    "YYYY": r"(?P<year>\d{4})",
}

_compiled_patterns: dict[str, re.Pattern[str]] = {}


def normalise_whitespace(value: str | None) -> str:
    if not value:
        return ""
    return _WHITESPACE_RE.sub(" ", value).strip()


def _compile_pattern(pattern: str) -> re.Pattern[str]:
    compiled = _compiled_patterns.get(pattern)
    if compiled is not None:
        return compiled

    parts: list[str] = []
    position = 0
    for match in _PATTERN_TOKEN_RE.finditer(pattern):
        parts.append(re.escape(pattern[position : match.start()]))
        parts.append(_TOKEN_GROUPS[match.group(0)])
        position = match.end()
    parts.append(re.escape(pattern[position:]))

    # Raises re.error when a token is repeated; callers treat that as an unusable pattern.
    compiled = re.compile("".join(parts))
    _compiled_patterns[pattern] = compiled
    return compiled


def parse_lenient_date(value: str | None, pattern: str = "D/MM/YYYY") -> date | None:
    """Parse ``value`` against a day/month/year ``pattern``.

    Returns ``None`` when the text does not match the pattern or names an
    impossible calendar date. Never raises.
    """
    if not value:
        return None
    try:
        regex = _compile_pattern(pattern)
    except re.error:
        return None

    match = regex.fullmatch(value.strip())
    if match is None:
        return None
    fields = match.groupdict()
    if not {"day", "month", "year"} <= fields.keys():
        return None
    try:
        return date(int(fields["year"]), int(fields["month"]), int(fields["day"]))
    except ValueError:
        return None


def format_date(value: date | None) -> str:
    if value is None:
        return ""
    return value.isoformat()


def format_portal_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")
