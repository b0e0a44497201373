"""Team page schema: team name and roster table with a gender filter.

Parsing is best effort. A page without the expected heading yields an empty
team name and a page without the roster table yields empty player lists;
neither raises.

The roster table is ``table.list``. Its first row is the header and its last
row a summary line, so both are dropped. Columns are positional: the first
cell holds the player link and the fourth cell the gender.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Tag  # type: ignore

from config import settings
from domain.models import Player, Roster
from utils import html_utils

_log = logging.getLogger(__name__)

TEAM_NAME_SELECTOR = "div.teams > h2"
ROSTER_TABLE_SELECTOR = "table.list"
NAME_COLUMN_INDEX = 0

MALE = "Male"
FEMALE = "Female"


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _team_name(soup: BeautifulSoup) -> str:
    heading = soup.select_one(TEAM_NAME_SELECTOR)
    if heading is None:
        _log.debug("Team heading %r not found", TEAM_NAME_SELECTOR)
        return ""
    return html_utils.raw_text(heading)


def _all_rows(soup: BeautifulSoup) -> List[Tag]:
    table = soup.select_one(ROSTER_TABLE_SELECTOR)
    if table is None:
        _log.debug("Roster table %r not found", ROSTER_TABLE_SELECTOR)
        return []
    return html_utils.table_rows(table)


def _player_rows(rows: List[Tag]) -> List[Tag]:
    # header and summary rows excluded; fewer than two rows leaves nothing
    return rows[1:-1]


def _check_gender_header(rows: List[Tag]) -> None:
    if len(rows) <= 2:
        return
    header_cell = html_utils.cell_at(rows[0], settings.GENDER_COLUMN_INDEX, ("td", "th"))
    label = html_utils.raw_text(header_cell).strip()
    if label != settings.GENDER_HEADER_LABEL:
        _log.warning(
            "Roster column %d is headed %r, expected %r; gender lists may be wrong",
            settings.GENDER_COLUMN_INDEX,
            label,
            settings.GENDER_HEADER_LABEL,
        )


def _player_name(row: Tag) -> str:
    cell = html_utils.cell_at(row, NAME_COLUMN_INDEX)
    if cell is None:
        return ""
    return "".join(html_utils.raw_text(a) for a in cell.find_all("a"))


def _filter_gender(rows: List[Tag], gender: str) -> List[Tag]:
    return [
        row
        for row in rows
        if html_utils.raw_text(html_utils.cell_at(row, settings.GENDER_COLUMN_INDEX)) == gender
    ]


def _players(rows: List[Tag], gender: Optional[str] = None) -> List[Player]:
    if gender:
        rows = _filter_gender(rows, gender)
    return [Player(name=_player_name(row)) for row in rows]


def extract_team_name(html: str) -> str:
    return _team_name(_soup(html))


def extract_players(html: str, gender: Optional[str] = None) -> List[Player]:
    """Players in table order, optionally only those whose gender cell equals ``gender``.

    The comparison is exact: ``" Male"`` or ``"male"`` do not match ``"Male"``.
    """
    return _players(_player_rows(_all_rows(_soup(html))), gender)


def parse_team(html: str) -> Roster:
    soup = _soup(html)
    rows = _all_rows(soup)
    _check_gender_header(rows)
    player_rows = _player_rows(rows)
    return Roster(
        team_name=_team_name(soup),
        players=_players(player_rows),
        male_players=_players(player_rows, MALE),
        female_players=_players(player_rows, FEMALE),
    )
