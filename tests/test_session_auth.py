import pytest

from config import settings
from core import http_client
from core.errors import AuthConfigError, AuthFailure
from domain.models import Credentials
from scraping import auth
from factories import LOGIN_HTML_NO_TOKEN, FakeSite

CREDS = Credentials(username="kevin", password="hunter2")


def test_login_round_trips_token_and_form_fields():
    site = FakeSite()
    with http_client.open_session(transport=site.transport) as session:
        assert auth.authenticate(session, CREDS) is session
        assert session.has_cookie(settings.SESSION_COOKIE_PREFIXES)
    assert [r.method for r in site.requests] == ["GET", "POST"]
    assert site.login_forms == [
        {
            "name": "kevin",
            "pass": "hunter2",
            "form_build_id": "form-Xy9_token123",
            "form_id": "user_login",
            "op": "log_in",
        }
    ]


def test_non_2xx_login_response_with_cookie_is_accepted():
    site = FakeSite(login_status=500)
    with http_client.open_session(transport=site.transport) as session:
        auth.authenticate(session, CREDS)


def test_rejected_login_raises_auth_failure():
    site = FakeSite(accept_login=False)
    with http_client.open_session(transport=site.transport) as session:
        with pytest.raises(AuthFailure) as exc:
            auth.authenticate(session, CREDS)
    assert exc.value.context["status"] == 200


def test_login_page_without_token_raises_before_post():
    site = FakeSite(login_html=LOGIN_HTML_NO_TOKEN)
    with http_client.open_session(transport=site.transport) as session:
        with pytest.raises(AuthFailure):
            auth.authenticate(session, CREDS)
    assert [r.method for r in site.requests] == ["GET"]


@pytest.mark.parametrize(
    "credentials",
    [None, Credentials("", "pw"), Credentials("user", ""), Credentials("", "")],
)
def test_missing_credentials_make_no_request(credentials):
    site = FakeSite()
    with http_client.open_session(transport=site.transport) as session:
        with pytest.raises(AuthConfigError):
            auth.authenticate(session, credentials)
    assert site.requests == []


def test_credentials_from_env_and_repr(monkeypatch):
    monkeypatch.setenv(settings.USER_ENV_VAR, "kevin")
    monkeypatch.setenv(settings.PASSWORD_ENV_VAR, "hunter2")
    creds = Credentials.from_env()
    assert creds.is_complete
    assert "hunter2" not in repr(creds)
    assert not Credentials.from_env({}).is_complete


def test_anonymous_session_cookie_from_login_page_is_not_a_login():
    site = FakeSite(login_page_cookie="SESSanon=anon", accept_login=False)
    with http_client.open_session(transport=site.transport) as session:
        with pytest.raises(AuthFailure):
            auth.authenticate(session, CREDS)


def test_login_replacing_anonymous_session_cookie_is_accepted():
    site = FakeSite(login_page_cookie="SESSanon=anon")
    with http_client.open_session(transport=site.transport) as session:
        auth.authenticate(session, CREDS)
        assert session.has_cookie(settings.SESSION_COOKIE_PREFIXES)
