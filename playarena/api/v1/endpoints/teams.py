from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from playarena.core.config import settings
from playarena.core.database import get_db
from playarena.repositories.match_repository import MatchRepository
from playarena.repositories.team_repository import PlayerRepository, TeamRepository
from playarena.schemas.match import MatchResponse
from playarena.schemas.stats import StandingsResponse, TeamStats, TeamStatsResponse
from playarena.schemas.team import (
    PlayerCreate,
    PlayerResponse,
    PlayerUpdate,
    TeamCreate,
    TeamResponse,
    TeamUpdate,
)
from playarena.services.scorecard import net_run_rate
from playarena.services.standings import build_league_table
from playarena.services.team_stats import compute_team_stats

router = APIRouter()


# --- EQUIPOS ---
@router.get("/teams", response_model=list[TeamResponse])
def list_teams(search: Optional[str] = None, db: Session = Depends(get_db)):
    return TeamRepository(db).list(search=search)


@router.get("/teams/{team_id}", response_model=TeamResponse)
def get_team(team_id: str, db: Session = Depends(get_db)):
    team = TeamRepository(db).get(team_id)
    if team is None:
        raise HTTPException(status_code=404, detail="Equipo no encontrado")
    return team


@router.post("/teams", response_model=TeamResponse, status_code=201)
def create_team(payload: TeamCreate, db: Session = Depends(get_db)):
    return TeamRepository(db).create(payload.model_dump())


@router.put("/teams/{team_id}", response_model=TeamResponse)
def update_team(team_id: str, payload: TeamUpdate, db: Session = Depends(get_db)):
    team = TeamRepository(db).update(team_id, payload.model_dump(exclude_unset=True))
    if team is None:
        raise HTTPException(status_code=404, detail="Equipo no encontrado")
    return team


@router.delete("/teams/{team_id}", status_code=204)
def delete_team(team_id: str, db: Session = Depends(get_db)):
    if not TeamRepository(db).delete(team_id):
        raise HTTPException(status_code=404, detail="Equipo no encontrado")


@router.get("/teams/{team_id}/matches", response_model=list[MatchResponse])
def list_team_matches(team_id: str, db: Session = Depends(get_db)):
    return MatchRepository(db).fetch_matches_for_team(team_id)


@router.get("/teams/{team_id}/stats", response_model=TeamStatsResponse)
def get_team_stats(
    team_id: str,
    strict: Optional[bool] = Query(None, description="Rechazar resultados con winnerId no participante"),
    db: Session = Depends(get_db),
):
    """
    Balance del equipo recalculado desde su historial de partidos
    (victorias, derrotas, empates, % de victorias y puntos de torneo),
    junto a los contadores que tiene guardados.
    """
    team = TeamRepository(db).get(team_id)
    if team is None:
        raise HTTPException(status_code=404, detail="Equipo no encontrado")

    matches = MatchRepository(db).fetch_matches_for_team(team_id)
    strict = settings.STRICT_RESULTS if strict is None else strict

    # ResultIntegrityError se traduce a 409 en el handler global
    stats = compute_team_stats(team_id, matches, strict=strict)

    stored = TeamStats(
        total_matches=team.total_matches,
        matches_won=team.matches_won,
        matches_lost=team.matches_lost,
        matches_drawn=team.matches_drawn,
        win_rate=(team.matches_won / team.total_matches * 100) if team.total_matches else 0.0,
        tournament_points=team.tournament_points,
    )
    return TeamStatsResponse(
        team_id=team.id,
        team_name=team.name,
        stats=stats,
        stored=stored,
        net_run_rate=net_run_rate(team_id, matches),
    )


@router.get("/standings", response_model=StandingsResponse)
def get_standings(db: Session = Depends(get_db)):
    teams = TeamRepository(db).list()
    matches = MatchRepository(db).list(status="completed")
    df = build_league_table(teams, matches)
    return {"total_teams": len(df), "data": df.to_dict(orient="records")}


# --- JUGADORES ---
@router.get("/players", response_model=list[PlayerResponse])
def list_players(
    team_id: Optional[str] = None,
    role: Optional[str] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return PlayerRepository(db).list(team_id=team_id, role=role, search=search)


@router.get("/players/{player_id}", response_model=PlayerResponse)
def get_player(player_id: str, db: Session = Depends(get_db)):
    player = PlayerRepository(db).get(player_id)
    if player is None:
        raise HTTPException(status_code=404, detail="Jugador no encontrado")
    return player


@router.post("/players", response_model=PlayerResponse, status_code=201)
def create_player(payload: PlayerCreate, db: Session = Depends(get_db)):
    if payload.team_id and TeamRepository(db).get(payload.team_id) is None:
        raise HTTPException(status_code=404, detail="Equipo no encontrado")
    return PlayerRepository(db).create(payload.model_dump())


@router.put("/players/{player_id}", response_model=PlayerResponse)
def update_player(player_id: str, payload: PlayerUpdate, db: Session = Depends(get_db)):
    player = PlayerRepository(db).update(player_id, payload.model_dump(exclude_unset=True))
    if player is None:
        raise HTTPException(status_code=404, detail="Jugador no encontrado")
    return player


@router.delete("/players/{player_id}", status_code=204)
def delete_player(player_id: str, db: Session = Depends(get_db)):
    if not PlayerRepository(db).delete(player_id):
        raise HTTPException(status_code=404, detail="Jugador no encontrado")
