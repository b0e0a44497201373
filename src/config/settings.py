"""Global configuration and constants for the roster scrape pipeline."""

from __future__ import annotations

import os
from typing import Final

BASE_URL: Final = "http://www.ocua.ca/zuluru"
LOGIN_URL: Final = "http://www.ocua.ca/user/login"
DIVISION_URL_TEMPLATE: Final = BASE_URL + "/divisions/view/division:{division_id}"
TEAM_URL_TEMPLATE: Final = BASE_URL + "/teams/view/team:{team_id}"

# Parity 2016/17; 2015/16 was league 494 under /leagues/view/league:{id}
DEFAULT_DIVISION_ID: Final = os.environ.get("ZULURU_DIVISION_ID", "940")

DEFAULT_USER_AGENT: Final = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/115.0 Safari/537.36"
)
DEFAULT_TIMEOUT: Final = 15  # seconds
DEFAULT_CONCURRENCY: Final = 1  # sequential team fetches

USER_ENV_VAR: Final = "ZULURU_USER"
PASSWORD_ENV_VAR: Final = "ZULURU_PASSWORD"

# Drupal login form identification fields
LOGIN_FORM_ID: Final = "user_login"
LOGIN_FORM_OP: Final = "log_in"
# Drupal issues SESS<hash> (http) or SSESS<hash> (https) cookies once logged in
SESSION_COOKIE_PREFIXES: Final = ("SESS", "SSESS")

TEAM_ID_PREFIX: Final = "teams_team_"
GENDER_COLUMN_INDEX: Final = 3
GENDER_HEADER_LABEL: Final = "Gender"
