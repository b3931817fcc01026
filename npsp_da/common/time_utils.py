"""Date helpers for run metadata."""

from __future__ import annotations

from datetime import date, datetime, timezone


def local_today() -> date:
    # The portal searches by council-local calendar day, not UTC.
    return date.today()


def parse_run_date(value: str | None) -> date:
    if not value:
        return local_today()
    return date.fromisoformat(value)


def utc_timestamp_iso() -> str:
    return datetime.now(tz=timezone.utc).isoformat(timespec="milliseconds")
