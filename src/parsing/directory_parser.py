"""Division page schema: ordered team identifiers."""

from __future__ import annotations

import logging
from typing import List

from bs4 import BeautifulSoup  # type: ignore

from config import settings
from domain.models import TeamId

_log = logging.getLogger(__name__)

TEAM_ANCHOR_SELECTOR = "tr > td > a.trigger"


def list_team_ids(html: str) -> List[TeamId]:
    """Extract team ids from a division listing, in table row order.

    Team anchors look like ``<a class="trigger" id="teams_team_9261">``; the
    ``teams_team_`` prefix is removed. Anchors without an id are skipped.
    Duplicates are kept as they appear.
    """
    soup = BeautifulSoup(html, "html.parser")
    team_ids: List[TeamId] = []
    for anchor in soup.select(TEAM_ANCHOR_SELECTOR):
        anchor_id = anchor.get("id")
        if not anchor_id:
            _log.debug("Skipping team anchor without id: %s", anchor)
            continue
        team_ids.append(anchor_id.removeprefix(settings.TEAM_ID_PREFIX))
    return team_ids
