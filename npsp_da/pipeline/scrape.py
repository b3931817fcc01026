"""One-shot scrape run: fetch, extract, filter and store."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import date

from dateutil.relativedelta import relativedelta

from npsp_da.common.errors import StorageError
from npsp_da.common.http import HttpClient, TimeoutConfig
from npsp_da.common.logging import log_event
from npsp_da.common.text import format_date, format_portal_date
from npsp_da.pipeline.store import ApplicationStore
from npsp_da.portal.extract import iter_development_applications
from npsp_da.portal.session import fetch_main_page, fetch_search_page


@dataclass
class ScrapeResult:
    date_from: str
    date_to: str
    extracted: int = 0
    saved: int = 0
    skipped: int = 0
    failed: int = 0


def compute_search_window(today: date, lookback_months: int = 1) -> tuple[str, str]:
    """Return ``(date_from, date_to)`` in the portal's ``DD/MM/YYYY`` form."""
    start = today - relativedelta(months=lookback_months)
    return format_portal_date(start), format_portal_date(today)


def _http_client_from_config(config: dict) -> HttpClient:
    http_cfg = config["http"]
    return HttpClient(
        timeout=TimeoutConfig(connect=float(http_cfg["connect_timeout"]), read=float(http_cfg["read_timeout"])),
        user_agent=http_cfg.get("user_agent"),
    )


def run_scrape(
    config: dict,
    *,
    store: ApplicationStore,
    run_id: str,
    run_date: date,
    logger: logging.Logger,
    http_client: HttpClient | None = None,
) -> ScrapeResult:
    started = time.monotonic()
    main_url = config["portal"]["main_url"]

    store.ensure_schema()

    date_from, date_to = compute_search_window(run_date, config["search"]["lookback_months"])
    result = ScrapeResult(date_from=date_from, date_to=date_to)

    owns_client = http_client is None
    client = http_client or _http_client_from_config(config)
    try:
        _body, context = fetch_main_page(client, main_url, logger=logger)
        search_html = fetch_search_page(
            client,
            context,
            date_from,
            date_to,
            config["portal"]["search_url_template"],
            logger=logger,
        )
    finally:
        if owns_client:
            client.close()

    candidates = iter_development_applications(
        search_html,
        info_url=main_url,
        date_scraped=format_date(run_date),
    )
    for application in candidates:
        result.extracted += 1
        if not application.has_required_fields():
            result.skipped += 1
            log_event(
                logger,
                f'skipped heading "{application.address}" without application number or address',
                level=logging.DEBUG,
                run_id=run_id,
                stage="scrape",
                event="RECORD_SKIPPED",
                status="skipped",
                application_number=application.application_number or None,
            )
            continue
        try:
            store.upsert(application)
        except StorageError:
            result.failed += 1
            continue
        result.saved += 1

    log_event(
        logger,
        f"scraped applications lodged {date_from} to {date_to}",
        run_id=run_id,
        stage="scrape",
        event="RUN_END",
        status="error" if result.failed else "ok",
        duration_ms=int((time.monotonic() - started) * 1000),
        rows_in=result.extracted,
        rows_out=result.saved,
    )
    return result
