"""Login page schema: the hidden anti-forgery token of the Drupal login form."""

from __future__ import annotations

from bs4 import BeautifulSoup  # type: ignore

from domain.models import LoginForm

LOGIN_TOKEN_SELECTOR = "[name=form_build_id]"


def parse_login_form(html: str) -> LoginForm:
    """Return the login form fields issued with this page load.

    ``form_build_id`` is ``None`` when the page carries no token.
    """
    soup = BeautifulSoup(html, "html.parser")
    field = soup.select_one(LOGIN_TOKEN_SELECTOR)
    token = field.get("value") if field is not None else None
    return LoginForm(form_build_id=token or None)
