from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from playarena.core.database import Base
from playarena.models.base import generate_id, utcnow

class Match(Base):
    __tablename__ = "matches"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    title: Mapped[str] = mapped_column(String)
    sport: Mapped[str] = mapped_column(String(30), index=True)       # 'cricket', 'football', ...
    match_type: Mapped[str] = mapped_column(String(30))              # 'T20', '90min', ...
    is_public: Mapped[bool] = mapped_column(Boolean, default=True)
    venue_id: Mapped[str] = mapped_column(String(32), index=True)
    organizer_id: Mapped[str] = mapped_column(String(32), index=True)
    scheduled_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    duration: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)  # minutos
    max_players: Mapped[int] = mapped_column(Integer)
    current_players: Mapped[int] = mapped_column(Integer, default=0)
    status: Mapped[str] = mapped_column(String(20), default="upcoming", index=True)  # upcoming / live / completed / cancelled
    team1_name: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    team2_name: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    team1_score: Mapped[Optional[dict[str, Any]]] = mapped_column(JSON, nullable=True)
    team2_score: Mapped[Optional[dict[str, Any]]] = mapped_column(JSON, nullable=True)

    # Payload libre: team1Id, team2Id, resultSummary, scorecard, awards, processed
    match_data: Mapped[Optional[dict[str, Any]]] = mapped_column(JSON, nullable=True)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class MatchParticipant(Base):
    __tablename__ = "match_participants"
    __table_args__ = (UniqueConstraint("match_id", "user_id"),)

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    match_id: Mapped[str] = mapped_column(String(32), index=True)
    user_id: Mapped[str] = mapped_column(String(32), index=True)
    team: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)  # 'team1', 'team2' o None
    role: Mapped[str] = mapped_column(String(20), default="player")  # player / captain / scorer
    status: Mapped[str] = mapped_column(String(20), default="joined")  # joined / invited / declined
    joined_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
