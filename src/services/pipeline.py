"""End-to-end roster scrape: login, team discovery, per-team roster parsing.

Execution contract of :class:`RosterPipeline`:
 - Every ``run`` opens its own session and closes it before returning; no
   cookies or pages survive between runs.
 - Credentials are checked before any request. A rejected login aborts the
   run (``AuthConfigError`` / ``AuthFailure``).
 - Team pages are fetched in discovery order, one at a time by default.
   With ``concurrency > 1`` up to that many requests run at once, but the
   index is still assembled in discovery order. Called from inside a running
   event loop the pipeline falls back to sequential fetching.
 - Any ``TransportError`` aborts the run; no partial index is returned.
 - A malformed team page never aborts the run; it contributes whatever the
   parser could recover (possibly an empty name and empty rosters).
 - Index keys are visible team names. When two teams parse to the same name
   the one discovered later replaces the earlier one.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

import httpx

from config import settings
from core import async_http, http_client
from domain.models import Credentials, Roster, RosterIndex, TeamId, roster_index_to_dict
from scraping import auth, roster_scraper

_log = logging.getLogger(__name__)

ProgressCallback = Callable[[str, dict], None]


class RosterPipeline:
    def __init__(
        self,
        *,
        concurrency: Optional[int] = None,
        transport: Optional[httpx.BaseTransport] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        login_url: Optional[str] = None,
        progress: Optional[ProgressCallback] = None,
    ):
        self.concurrency = max(1, concurrency or settings.DEFAULT_CONCURRENCY)
        self._transport = transport
        self._user_agent = user_agent
        self._timeout = timeout
        self._login_url = login_url
        self._progress = progress

    def _emit(self, event: str, payload: dict) -> None:
        if self._progress is None:
            return
        try:
            self._progress(event, payload)
        except Exception:
            _log.warning("Progress callback raised on %r; ignoring", event, exc_info=True)

    def run(self, division_id: str | int, credentials: Optional[Credentials]) -> RosterIndex:
        with http_client.open_session(
            user_agent=self._user_agent, timeout=self._timeout, transport=self._transport
        ) as session:
            auth.authenticate(session, credentials, login_url=self._login_url)
            self._emit("authenticated", {})
            team_ids = roster_scraper.fetch_team_ids(session, division_id)
            self._emit("teams_discovered", {"division_id": division_id, "count": len(team_ids)})
            if self._use_pool(team_ids):
                rosters = self._fetch_concurrent(session, team_ids)
            else:
                rosters = self._fetch_sequential(session, team_ids)
        return self._build_index(team_ids, rosters)

    def _use_pool(self, team_ids: List[TeamId]) -> bool:
        if self.concurrency <= 1 or len(team_ids) <= 1:
            return False
        if async_http.loop_running():
            _log.info("Event loop already running; fetching teams sequentially")
            return False
        return True

    def _fetch_sequential(
        self, session: http_client.Session, team_ids: List[TeamId]
    ) -> List[Roster]:
        rosters: List[Roster] = []
        for position, team_id in enumerate(team_ids, start=1):
            rosters.append(roster_scraper.fetch_team(session, team_id))
            self._emit(
                "team_fetched", {"team_id": team_id, "position": position, "total": len(team_ids)}
            )
        return rosters

    def _fetch_concurrent(
        self, session: http_client.Session, team_ids: List[TeamId]
    ) -> List[Roster]:
        urls = [roster_scraper.team_url(tid) for tid in team_ids]
        pages = async_http.fetch_all_blocking(urls, session=session, limit=self.concurrency)
        rosters: List[Roster] = []
        for position, (team_id, html) in enumerate(zip(team_ids, pages), start=1):
            rosters.append(roster_scraper.parse_team_page(html, team_id))
            self._emit(
                "team_fetched", {"team_id": team_id, "position": position, "total": len(team_ids)}
            )
        return rosters

    @staticmethod
    def _build_index(team_ids: List[TeamId], rosters: List[Roster]) -> RosterIndex:
        index: RosterIndex = {}
        for team_id, roster in zip(team_ids, rosters):
            if roster.team_name in index:
                _log.warning(
                    "Team %s reuses name %r; replacing the earlier roster", team_id, roster.team_name
                )
            index[roster.team_name] = roster
        return index


def run_roster_scrape(
    division_id: str | int | None = None,
    credentials: Optional[Credentials] = None,
    *,
    concurrency: Optional[int] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> dict:
    """Run the pipeline and return the JSON-ready roster index.

    Credentials default to the ``ZULURU_USER`` / ``ZULURU_PASSWORD``
    environment values and the division to ``settings.DEFAULT_DIVISION_ID``.
    """
    division_id = division_id or settings.DEFAULT_DIVISION_ID
    credentials = credentials if credentials is not None else Credentials.from_env()
    pipeline = RosterPipeline(concurrency=concurrency, transport=transport)
    index = pipeline.run(division_id, credentials)
    _log.info("Scraped %d teams from division %s", len(index), division_id)
    return roster_index_to_dict(index)
