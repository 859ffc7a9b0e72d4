from datetime import datetime
from typing import Any, Optional

from playarena.schemas.common import APIModel


# --- BALANCE DE EQUIPO (recalculado desde el historial) ---
class TeamStats(APIModel):
    total_matches: int = 0
    matches_won: int = 0
    matches_lost: int = 0
    matches_drawn: int = 0
    win_rate: float = 0.0
    tournament_points: int = 0


class TeamStatsResponse(APIModel):
    team_id: str
    team_name: str
    stats: TeamStats
    # Contadores persistidos en el equipo (proyección cacheada)
    stored: TeamStats
    net_run_rate: float = 0.0


# --- CLASIFICACIÓN ---
class StandingRow(APIModel):
    position: int
    team_id: str
    team_name: str
    total_matches: int
    matches_won: int
    matches_lost: int
    matches_drawn: int
    win_rate: float
    tournament_points: int
    net_run_rate: float


class StandingsResponse(APIModel):
    total_teams: int
    data: list[StandingRow]


# --- ESTADÍSTICAS DE USUARIO (por deporte) ---
class UserStatsUpdate(APIModel):
    matches_played: Optional[int] = None
    matches_won: Optional[int] = None
    total_score: Optional[int] = None
    best_performance: Optional[dict[str, Any]] = None
    stats: Optional[dict[str, Any]] = None


class UserStatsResponse(APIModel):
    id: str
    user_id: str
    sport: str
    matches_played: int
    matches_won: int
    total_score: int
    best_performance: Optional[dict[str, Any]] = None
    stats: Optional[dict[str, Any]] = None
    updated_at: Optional[datetime] = None
