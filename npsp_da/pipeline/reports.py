"""Run summary report."""

from __future__ import annotations

from pathlib import Path

from npsp_da.common.fs import write_json
from npsp_da.pipeline.scrape import ScrapeResult


def write_run_summary(
    data_dir: Path,
    *,
    run_id: str,
    run_date: str,
    status: str,
    result: ScrapeResult | None = None,
    error_code: str | None = None,
) -> Path:
    summary_path = data_dir / "run_meta" / f"{run_id}.summary.json"
    payload = {
        "run_id": run_id,
        "run_date": run_date,
        "status": status,
        "error_code": error_code,
        "search_window": None,
        "counts": None,
    }
    if result is not None:
        payload["search_window"] = {"date_from": result.date_from, "date_to": result.date_to}
        payload["counts"] = {
            "extracted": result.extracted,
            "saved": result.saved,
            "skipped": result.skipped,
            "failed": result.failed,
        }
    write_json(summary_path, payload)
    return summary_path
