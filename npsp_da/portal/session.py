"""Two-step portal session: main page for the session cookie, then search."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import quote

from requests.cookies import RequestsCookieJar

from npsp_da.common.constants import SESSION_COOKIE_NAME
from npsp_da.common.errors import SessionError
from npsp_da.common.http import HttpClient
from npsp_da.common.logging import log_event


@dataclass(frozen=True)
class SessionContext:
    main_url: str
    cookies: RequestsCookieJar

    @property
    def session_cookie(self) -> str | None:
        return self.cookies.get(SESSION_COOKIE_NAME)


def fetch_main_page(
    client: HttpClient,
    main_url: str,
    *,
    logger: logging.Logger | None = None,
) -> tuple[str, SessionContext]:
    body, cookies = client.get_text(main_url)
    context = SessionContext(main_url=main_url, cookies=cookies)
    if logger is not None:
        log_event(logger, f"retrieved page {main_url}", stage="session", event="PAGE_FETCH", status="ok")
        if context.session_cookie is None:
            log_event(
                logger,
                f"main page did not set {SESSION_COOKIE_NAME}; search results may be empty",
                level=logging.WARNING,
                stage="session",
                event="SESSION_COOKIE_MISSING",
                status="warning",
            )
    return body, context


def build_search_url(search_url_template: str, date_from: str, date_to: str) -> str:
    return search_url_template.format(
        date_from=quote(date_from, safe=""),
        date_to=quote(date_to, safe=""),
    )


def fetch_search_page(
    client: HttpClient,
    context: SessionContext | None,
    date_from: str,
    date_to: str,
    search_url_template: str,
    *,
    logger: logging.Logger | None = None,
) -> str:
    """Fetch the search results for ``date_from``..``date_to`` (``DD/MM/YYYY``).

    The portal only answers the search for a session opened by the main page,
    so ``context`` must come from :func:`fetch_main_page`.
    """
    if context is None:
        raise SessionError("Search page requested without a session from the main page")

    url = build_search_url(search_url_template, date_from, date_to)
    body, _cookies = client.get_text(url, cookies=context.cookies)
    if logger is not None:
        log_event(logger, f"retrieved search results {url}", stage="session", event="PAGE_FETCH", status="ok")
    return body
