from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from playarena.core.database import get_db
from playarena.core.exceptions import MatchAlreadyProcessedError
from playarena.models.match import Match
from playarena.repositories.match_repository import MatchRepository
from playarena.schemas.match import (
    MatchCreate,
    MatchResponse,
    MatchResultIn,
    MatchResultResponse,
    MatchUpdate,
    ParticipantCreate,
    ParticipantResponse,
    Scorecard,
)
from playarena.services.match_results import apply_match_result, refresh_teams
from playarena.services.scorecard import scorecard_view
from playarena.services.team_stats import participants

router = APIRouter()


def _get_match_or_404(repo: MatchRepository, match_id: str) -> Match:
    match = repo.get(match_id)
    if match is None:
        raise HTTPException(status_code=404, detail="Partido no encontrado")
    return match


@router.get("/matches", response_model=list[MatchResponse])
def list_matches(
    sport: Optional[str] = Query(None, description="Filtrar por deporte (ej: 'cricket')"),
    status: Optional[str] = Query(None, description="upcoming, live, completed, cancelled"),
    is_public: Optional[bool] = Query(None),
    db: Session = Depends(get_db),
):
    return MatchRepository(db).list(sport=sport, status=status, is_public=is_public)


@router.get("/matches/{match_id}", response_model=MatchResponse)
def get_match(match_id: str, db: Session = Depends(get_db)):
    return _get_match_or_404(MatchRepository(db), match_id)


@router.post("/matches", response_model=MatchResponse, status_code=201)
def create_match(payload: MatchCreate, db: Session = Depends(get_db)):
    return MatchRepository(db).create(payload.model_dump())


@router.put("/matches/{match_id}", response_model=MatchResponse)
def update_match(match_id: str, payload: MatchUpdate, db: Session = Depends(get_db)):
    repo = MatchRepository(db)
    before = participants(_get_match_or_404(repo, match_id))
    match = repo.update(match_id, payload.model_dump(exclude_unset=True))
    # Estado o equipos pueden haber cambiado: los contadores de ambos lados se recalculan
    refresh_teams(db, (*before, *participants(match)))
    return match


@router.delete("/matches/{match_id}", status_code=204)
def delete_match(match_id: str, db: Session = Depends(get_db)):
    repo = MatchRepository(db)
    teams = participants(_get_match_or_404(repo, match_id))
    repo.delete(match_id)
    refresh_teams(db, teams)


@router.get("/users/{user_id}/matches", response_model=list[MatchResponse])
def list_user_matches(user_id: str, db: Session = Depends(get_db)):
    return MatchRepository(db).user_matches(user_id)


# --- PARTICIPANTES ---
@router.get("/matches/{match_id}/participants", response_model=list[ParticipantResponse])
def list_participants(match_id: str, db: Session = Depends(get_db)):
    return MatchRepository(db).participants(match_id)


@router.post("/matches/{match_id}/join", response_model=ParticipantResponse, status_code=201)
def join_match(match_id: str, payload: ParticipantCreate, db: Session = Depends(get_db)):
    repo = MatchRepository(db)
    match = _get_match_or_404(repo, match_id)
    if match.current_players >= match.max_players:
        raise HTTPException(status_code=409, detail="El partido está completo")
    try:
        return repo.add_participant(match_id, payload.model_dump())
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="El usuario ya está apuntado a este partido")


@router.delete("/matches/{match_id}/participants/{user_id}", status_code=204)
def leave_match(match_id: str, user_id: str, db: Session = Depends(get_db)):
    if not MatchRepository(db).remove_participant(match_id, user_id):
        raise HTTPException(status_code=404, detail="Participación no encontrada")


# --- SCORECARD Y RESULTADO ---
@router.put("/matches/{match_id}/scorecard", response_model=MatchResponse)
def update_scorecard(match_id: str, payload: Scorecard, db: Session = Depends(get_db)):
    match = MatchRepository(db).update_match_data(match_id, {"scorecard": payload.model_dump(by_alias=True)})
    if match is None:
        raise HTTPException(status_code=404, detail="Partido no encontrado")
    # Carreras y net run rate salen del scorecard
    refresh_teams(db, participants(match))
    return match


@router.get("/matches/{match_id}/scorecard")
def get_scorecard(match_id: str, db: Session = Depends(get_db)):
    """Ficha del partido lista para pintar: resultado, premios y tablas de bateo/lanzamiento."""
    return scorecard_view(_get_match_or_404(MatchRepository(db), match_id))


@router.post("/matches/{match_id}/result", response_model=MatchResultResponse)
def post_match_result(match_id: str, payload: MatchResultIn, db: Session = Depends(get_db)):
    """
    Cierra el partido y actualiza jugadores y equipos.
    Si ya estaba procesado devuelve el partido tal cual con alreadyProcessed=true.
    """
    try:
        outcome = apply_match_result(db, match_id, payload)
    except MatchAlreadyProcessedError:
        return MatchResultResponse(already_processed=True, match=MatchRepository(db).get(match_id))
    return MatchResultResponse(**outcome)
