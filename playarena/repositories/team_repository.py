from typing import Optional

from sqlalchemy import select

from playarena.models.team import Player, Team, empty_career_stats
from playarena.repositories.base import CrudRepository


class TeamRepository(CrudRepository[Team]):
    model = Team

    def list(self, search: Optional[str] = None) -> list[Team]:
        stmt = select(Team)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(Team.name.ilike(pattern) | Team.city.ilike(pattern))
        return list(self.db.scalars(stmt.order_by(Team.created_at.desc())).all())


class PlayerRepository(CrudRepository[Player]):
    model = Player

    def list(
        self,
        team_id: Optional[str] = None,
        role: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[Player]:
        stmt = select(Player)
        if team_id:
            stmt = stmt.where(Player.team_id == team_id)
        if role:
            stmt = stmt.where(Player.role == role)
        if search:
            stmt = stmt.where(Player.name.ilike(f"%{search}%"))
        return list(self.db.scalars(stmt.order_by(Player.created_at.desc())).all())

    def create(self, data) -> Player:
        return super().create({**data, "career_stats": empty_career_stats()})
