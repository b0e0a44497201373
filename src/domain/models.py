"""Domain models for the roster scrape pipeline."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from config import settings

TeamId = str


@dataclass(slots=True)
class Credentials:
    username: str
    password: str

    @property
    def is_complete(self) -> bool:
        return bool(self.username) and bool(self.password)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "Credentials":
        env = os.environ if environ is None else environ
        return cls(
            username=env.get(settings.USER_ENV_VAR, ""),
            password=env.get(settings.PASSWORD_ENV_VAR, ""),
        )

    def __repr__(self) -> str:  # password masked
        return f"Credentials(username={self.username!r}, password=***)"


@dataclass(slots=True)
class LoginForm:
    form_build_id: Optional[str]
    form_id: str = settings.LOGIN_FORM_ID
    op: str = settings.LOGIN_FORM_OP


@dataclass(slots=True)
class Player:
    name: str


@dataclass(slots=True)
class Roster:
    team_name: str
    players: List[Player] = field(default_factory=list)
    male_players: List[Player] = field(default_factory=list)
    female_players: List[Player] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "players": [p.name for p in self.players],
            "malePlayers": [p.name for p in self.male_players],
            "femalePlayers": [p.name for p in self.female_players],
        }


RosterIndex = Dict[str, Roster]


def roster_index_to_dict(index: RosterIndex) -> dict:
    return {name: roster.to_dict() for name, roster in index.items()}


def roster_index_to_json(index: RosterIndex, *, indent: int | None = 2) -> str:
    return json.dumps(roster_index_to_dict(index), indent=indent, ensure_ascii=False)
