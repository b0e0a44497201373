"""Cookie-carrying HTTP session and page fetch helpers.

A :class:`Session` wraps one ``httpx.Client`` so the cookie jar obtained at
login travels explicitly with every later request. Nothing here is global:
two pipelines running side by side each hold their own session.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

import httpx

from config import settings
from core.errors import TransportError

_log = logging.getLogger(__name__)


class Session:
    """Authentication state for one scrape run."""

    def __init__(
        self, client: httpx.Client, *, transport: Optional[httpx.BaseTransport] = None
    ):
        self.client = client
        self._transport = transport

    @property
    def cookies(self) -> httpx.Cookies:
        return self.client.cookies

    def session_cookies(self, prefixes: Iterable[str]) -> set[tuple[str, str | None]]:
        """(name, value) pairs of cookies whose name starts with one of ``prefixes``."""
        prefixes = tuple(prefixes)
        return {(c.name, c.value) for c in self.cookies.jar if c.name.startswith(prefixes)}

    def has_cookie(self, prefixes: Iterable[str]) -> bool:
        return bool(self.session_cookies(prefixes))

    def async_client(self) -> httpx.AsyncClient:
        """Async client sharing a copy of this session's cookies and headers."""
        return httpx.AsyncClient(
            headers=self.client.headers,
            cookies=self.cookies,
            timeout=self.client.timeout,
            follow_redirects=True,
            transport=self._transport,  # type: ignore[arg-type]
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def open_session(
    *,
    user_agent: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> Session:
    """Create a fresh, unauthenticated session.

    ``transport`` lets tests substitute ``httpx.MockTransport`` for the network.
    """
    headers = {"User-Agent": user_agent or settings.DEFAULT_USER_AGENT}
    client = httpx.Client(
        headers=headers,
        timeout=timeout or settings.DEFAULT_TIMEOUT,
        follow_redirects=True,
        transport=transport,
    )
    return Session(client, transport=transport)


def fetch_page(session: Session, url: str) -> str:
    """GET ``url`` with the session cookies; any non-2xx status is an error."""
    _log.debug("GET %s", url)
    try:
        resp = session.client.get(url)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        raise TransportError(f"Failed to fetch {url}: {e}", context={"url": url}) from e
    return resp.text


def submit_form(session: Session, url: str, form: Mapping[str, str]) -> httpx.Response:
    """POST a form-encoded body and return the response whatever its status.

    Login endpoints may answer with an error status while still setting the
    session cookie, so callers inspect the cookie jar instead of the status.
    """
    _log.debug("POST %s", url)
    try:
        resp = session.client.post(url, data=dict(form))
    except httpx.HTTPError as e:
        raise TransportError(f"Failed to submit form to {url}: {e}", context={"url": url}) from e
    _log.debug("POST %s -> %s", url, resp.status_code)
    return resp
