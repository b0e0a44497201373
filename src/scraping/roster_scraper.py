"""Division and team page fetching (network side of the page schemas)."""

from __future__ import annotations

import logging
from typing import List

from config import settings
from core import http_client
from domain.models import Roster, TeamId
from parsing import directory_parser, roster_parser

_log = logging.getLogger(__name__)


def division_url(division_id: str | int) -> str:
    return settings.DIVISION_URL_TEMPLATE.format(division_id=division_id)


def team_url(team_id: TeamId) -> str:
    return settings.TEAM_URL_TEMPLATE.format(team_id=team_id)


def fetch_team_ids(session: http_client.Session, division_id: str | int) -> List[TeamId]:
    html = http_client.fetch_page(session, division_url(division_id))
    team_ids = directory_parser.list_team_ids(html)
    _log.info("Division %s lists %d teams", division_id, len(team_ids))
    return team_ids


def fetch_team(session: http_client.Session, team_id: TeamId) -> Roster:
    html = http_client.fetch_page(session, team_url(team_id))
    return parse_team_page(html, team_id)


def parse_team_page(html: str, team_id: TeamId) -> Roster:
    roster = roster_parser.parse_team(html)
    if not roster.team_name:
        _log.warning("Team %s page has no team name; indexed under ''", team_id)
    _log.debug(
        "Team %s %r: %d players (%d male, %d female)",
        team_id,
        roster.team_name,
        len(roster.players),
        len(roster.male_players),
        len(roster.female_players),
    )
    return roster
