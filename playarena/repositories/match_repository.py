from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import or_, select

from playarena.models.match import Match, MatchParticipant
from playarena.repositories.base import CrudRepository
from playarena.services.team_stats import is_participant

# Claves que fija /result; una vez procesado el partido no se pueden pisar por PUT
RESULT_KEYS = ("processed", "team1Id", "team2Id", "resultSummary")


class MatchRepository(CrudRepository[Match]):
    model = Match

    def list(
        self,
        sport: Optional[str] = None,
        status: Optional[str] = None,
        is_public: Optional[bool] = None,
    ) -> list[Match]:
        stmt = select(Match)
        if sport:
            stmt = stmt.where(Match.sport == sport)
        if status:
            stmt = stmt.where(Match.status == status)
        if is_public is not None:
            stmt = stmt.where(Match.is_public == is_public)
        stmt = stmt.order_by(Match.scheduled_at.desc())
        return list(self.db.scalars(stmt).all())

    def fetch_matches_for_team(self, team_id: str) -> list[Match]:
        """
        Partidos en los que el equipo aparece como team1Id o team2Id.

        Las referencias viven dentro del JSON match_data, así que filtramos
        en Python para no depender de operadores JSON del motor.
        """
        stmt = select(Match).where(Match.match_data.is_not(None)).order_by(Match.scheduled_at)
        return [m for m in self.db.scalars(stmt).all() if is_participant(m, team_id)]

    def user_matches(self, user_id: str) -> list[Match]:
        """Partidos organizados por el usuario o a los que se ha unido."""
        joined = select(MatchParticipant.match_id).where(MatchParticipant.user_id == user_id)
        stmt = (
            select(Match)
            .where(or_(Match.organizer_id == user_id, Match.id.in_(joined)))
            .order_by(Match.scheduled_at.desc())
        )
        return list(self.db.scalars(stmt).all())

    def update(self, entity_id: str, data: dict[str, Any]) -> Optional[Match]:
        """
        Como el update genérico, pero match_data se mezcla con el payload actual
        en vez de sustituirlo. Si el partido ya está procesado se conservan
        el resultado y los equipos.
        """
        if "match_data" in data:
            match = self.get(entity_id)
            if match is None:
                return None
            current = match.match_data or {}
            merged = {**current, **(data["match_data"] or {})}
            if current.get("processed"):
                merged.update({k: current[k] for k in RESULT_KEYS if k in current})
            data = {**data, "match_data": merged}
        return super().update(entity_id, data)

    def update_match_data(self, match_id: str, changes: dict[str, Any]) -> Optional[Match]:
        """Mezcla claves en el payload JSON (asignamos un dict nuevo para que SQLAlchemy detecte el cambio)."""
        match = self.get(match_id)
        if match is None:
            return None
        match.match_data = {**(match.match_data or {}), **changes}
        self.db.commit()
        self.db.refresh(match)
        return match

    # --- PARTICIPANTES ---
    def add_participant(self, match_id: str, data: dict[str, Any]) -> MatchParticipant:
        participant = MatchParticipant(match_id=match_id, **data)
        self.db.add(participant)
        match = self.get(match_id)
        if match is not None:
            match.current_players = (match.current_players or 0) + 1
        self.db.commit()
        self.db.refresh(participant)
        return participant

    def get_participant(self, match_id: str, user_id: str) -> Optional[MatchParticipant]:
        stmt = select(MatchParticipant).where(
            MatchParticipant.match_id == match_id,
            MatchParticipant.user_id == user_id,
        )
        return self.db.scalars(stmt).first()

    def remove_participant(self, match_id: str, user_id: str) -> bool:
        participant = self.get_participant(match_id, user_id)
        if participant is None:
            return False
        self.db.delete(participant)
        match = self.get(match_id)
        if match is not None and match.current_players:
            match.current_players -= 1
        self.db.commit()
        return True

    def participants(self, match_id: str) -> list[MatchParticipant]:
        stmt = select(MatchParticipant).where(MatchParticipant.match_id == match_id)
        return list(self.db.scalars(stmt).all())
