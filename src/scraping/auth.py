"""Session authentication against the Zuluru (Drupal) login form."""

from __future__ import annotations

import logging
from typing import Optional

from config import settings
from core import http_client
from core.errors import AuthConfigError, AuthFailure
from domain.models import Credentials, LoginForm
from parsing import login_parser

_log = logging.getLogger(__name__)


def build_login_payload(form: LoginForm, credentials: Credentials) -> dict[str, str]:
    return {
        "name": credentials.username,
        "pass": credentials.password,
        "form_build_id": form.form_build_id or "",
        "form_id": form.form_id,
        "op": form.op,
    }


def authenticate(
    session: http_client.Session,
    credentials: Optional[Credentials],
    *,
    login_url: Optional[str] = None,
) -> http_client.Session:
    """Log ``session`` in and return it.

    Raises AuthConfigError before any request when credentials are missing.
    The site gives no structured answer to a login attempt, so success is
    judged by the login POST setting a new or changed Drupal session cookie;
    without one AuthFailure is raised. Transport problems surface as TransportError.
    """
    if credentials is None or not credentials.is_complete:
        raise AuthConfigError(
            f"Missing Zuluru credentials (set {settings.USER_ENV_VAR} and {settings.PASSWORD_ENV_VAR})"
        )
    url = login_url or settings.LOGIN_URL

    login_html = http_client.fetch_page(session, url)
    form = login_parser.parse_login_form(login_html)
    if form.form_build_id is None:
        raise AuthFailure("Login page carried no form_build_id token", context={"url": url})

    # an anonymous session cookie from the login page does not count
    before = session.session_cookies(settings.SESSION_COOKIE_PREFIXES)
    resp = http_client.submit_form(session, url, build_login_payload(form, credentials))
    if not session.session_cookies(settings.SESSION_COOKIE_PREFIXES) - before:
        raise AuthFailure(
            f"Login as {credentials.username!r} was not accepted",
            context={"url": url, "status": resp.status_code},
        )
    _log.info("Logged in as %s (status %s)", credentials.username, resp.status_code)
    return session
