"""HTTP client with timeouts and explicit cookie propagation."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType

import requests
from requests.cookies import RequestsCookieJar

from npsp_da.common.constants import USER_AGENT
from npsp_da.common.errors import StageError


@dataclass(frozen=True)
class TimeoutConfig:
    connect: float = 20.0
    read: float = 120.0


class HttpRequestError(StageError):
    error_code = "HTTP_ERROR"


class HttpClient:
    """Fetches page text, carrying cookies only through the jar passed in.

    The underlying ``requests.Session`` is kept for connection pooling; its own
    cookie jar is emptied after every request so cookies never leak between
    calls that do not share a jar.
    """

    def __init__(
        self,
        *,
        timeout: TimeoutConfig | None = None,
        user_agent: str | None = None,
    ) -> None:
        self.timeout = timeout or TimeoutConfig()
        self.user_agent = user_agent or USER_AGENT
        self.session = requests.Session()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _headers(self, headers: dict[str, str] | None) -> dict[str, str]:
        out = {"User-Agent": self.user_agent, "Accept": "text/html,application/xhtml+xml"}
        if headers:
            out.update(headers)
        return out

    def _raise_for_status(self, response: requests.Response, url: str) -> None:
        status = response.status_code
        if status >= 400:
            raise HttpRequestError(f"HTTP status {status} from {url}")

    def get_text(
        self,
        url: str,
        *,
        cookies: RequestsCookieJar | None = None,
        headers: dict[str, str] | None = None,
        timeout: TimeoutConfig | None = None,
    ) -> tuple[str, RequestsCookieJar]:
        """GET ``url`` and return its body with the cookies to send next time.

        The returned jar holds the cookies passed in plus any set by the
        response. The jar passed in is not modified.
        """
        req_timeout = timeout or self.timeout
        jar = RequestsCookieJar()
        if cookies is not None:
            jar.update(cookies)

        try:
            response = self.session.request(
                method="GET",
                url=url,
                cookies=jar,
                headers=self._headers(headers),
                timeout=(req_timeout.connect, req_timeout.read),
            )
            # The session jar holds cookies set anywhere along a redirect chain.
            jar.update(self.session.cookies)
        finally:
            self.session.cookies.clear()

        self._raise_for_status(response, url)
        jar.update(response.cookies)
        return response.text, jar
