from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from playarena.core.database import Base
from playarena.models.base import generate_id, utcnow


def empty_career_stats() -> dict[str, Any]:
    return {
        # Bateo
        "totalRuns": 0,
        "totalBallsFaced": 0,
        "totalFours": 0,
        "totalSixes": 0,
        "timesOut": 0,
        "highestScore": 0,
        "centuries": 0,
        "halfCenturies": 0,
        "battingAverage": 0.0,
        "strikeRate": 0.0,
        # Lanzamiento
        "totalOvers": 0.0,
        "totalRunsGiven": 0,
        "totalWickets": 0,
        "totalMaidens": 0,
        "bestBowlingFigures": None,
        "fiveWicketHauls": 0,
        "bowlingAverage": 0.0,
        "economy": 0.0,
        # Campo
        "catches": 0,
        "runOuts": 0,
        "stumpings": 0,
        # Partidos
        "totalMatches": 0,
        "matchesWon": 0,
        # Premios
        "manOfTheMatchAwards": 0,
        "bestBatsmanAwards": 0,
        "bestBowlerAwards": 0,
        "bestFielderAwards": 0,
    }


class Team(Base):
    __tablename__ = "teams"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String, index=True)
    short_name: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    captain_id: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    vice_captain_id: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    logo: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    home_venue_id: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    # Contadores persistidos: proyección cacheada del historial de partidos,
    # se refrescan en services.match_results.refresh_team_record
    total_matches: Mapped[int] = mapped_column(Integer, default=0)
    matches_won: Mapped[int] = mapped_column(Integer, default=0)
    matches_lost: Mapped[int] = mapped_column(Integer, default=0)
    matches_drawn: Mapped[int] = mapped_column(Integer, default=0)
    total_runs_scored: Mapped[int] = mapped_column(Integer, default=0)
    total_wickets_taken: Mapped[int] = mapped_column(Integer, default=0)
    tournament_points: Mapped[int] = mapped_column(Integer, default=0)
    net_run_rate: Mapped[float] = mapped_column(Float, default=0.0)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class Player(Base):
    __tablename__ = "players"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String)
    email: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    user_id: Mapped[Optional[str]] = mapped_column(String(32), nullable=True, index=True)
    team_id: Mapped[Optional[str]] = mapped_column(String(32), nullable=True, index=True)
    role: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)  # batsman / bowler / all-rounder / wicket-keeper
    batting_style: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    bowling_style: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    jersey_number: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    career_stats: Mapped[dict[str, Any]] = mapped_column(JSON, default=empty_career_stats)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
