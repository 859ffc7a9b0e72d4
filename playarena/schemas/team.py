from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from playarena.schemas.common import APIModel


# --- EQUIPOS ---
class TeamCreate(APIModel):
    name: str = Field(min_length=1)
    short_name: Optional[str] = None
    city: Optional[str] = None
    description: Optional[str] = None
    captain_id: Optional[str] = None
    vice_captain_id: Optional[str] = None
    logo: Optional[str] = None
    home_venue_id: Optional[str] = None


class TeamUpdate(APIModel):
    name: Optional[str] = Field(default=None, min_length=1)
    short_name: Optional[str] = None
    city: Optional[str] = None
    description: Optional[str] = None
    captain_id: Optional[str] = None
    vice_captain_id: Optional[str] = None
    logo: Optional[str] = None
    home_venue_id: Optional[str] = None


class TeamResponse(TeamCreate):
    id: str
    total_matches: int = 0
    matches_won: int = 0
    matches_lost: int = 0
    matches_drawn: int = 0
    total_runs_scored: int = 0
    total_wickets_taken: int = 0
    tournament_points: int = 0
    net_run_rate: float = 0.0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# --- JUGADORES ---
class PlayerCreate(APIModel):
    name: str = Field(min_length=1)
    email: Optional[str] = None
    user_id: Optional[str] = None
    team_id: Optional[str] = None
    role: Optional[str] = None
    batting_style: Optional[str] = None
    bowling_style: Optional[str] = None
    jersey_number: Optional[int] = None


class PlayerUpdate(APIModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    user_id: Optional[str] = None
    team_id: Optional[str] = None
    role: Optional[str] = None
    batting_style: Optional[str] = None
    bowling_style: Optional[str] = None
    jersey_number: Optional[int] = None


class PlayerResponse(PlayerCreate):
    id: str
    # Las claves internas ya están en camelCase (totalRuns, strikeRate...)
    career_stats: dict[str, Any]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
