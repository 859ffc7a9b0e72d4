from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import Field

from playarena.schemas.common import APIModel

ResultType = Literal["won-by-runs", "won-by-wickets", "tied", "no-result", "abandoned"]
MatchStatus = Literal["upcoming", "live", "completed", "cancelled"]


# --- SCORECARD (críquet) ---
class BattingEntry(APIModel):
    player_id: str
    runs_scored: int = 0
    balls_faced: int = 0
    fours: int = 0
    sixes: int = 0
    strike_rate: Optional[float] = None
    dismissal_type: Optional[str] = "not-out"


class BowlingEntry(APIModel):
    player_id: str
    overs: float = 0.0  # Notación de críquet: 3.4 = 3 overs y 4 bolas
    maidens: int = 0
    runs_given: int = 0
    wickets: int = 0
    economy: Optional[float] = None


class Innings(APIModel):
    innings_number: int = 1
    total_runs: int = 0
    total_wickets: int = 0
    total_overs: float = 0.0
    run_rate: Optional[float] = None
    extras: dict[str, int] = Field(default_factory=dict)  # wides, noBalls, byes, legByes
    batsmen: list[BattingEntry] = Field(default_factory=list)
    bowlers: list[BowlingEntry] = Field(default_factory=list)


class Scorecard(APIModel):
    team1_innings: list[Innings] = Field(default_factory=list)
    team2_innings: list[Innings] = Field(default_factory=list)


class ResultSummary(APIModel):
    winner_id: Optional[str] = None
    result_type: Optional[ResultType] = None
    margin_runs: Optional[int] = None
    margin_wickets: Optional[int] = None
    margin_balls: Optional[int] = None


class Awards(APIModel):
    man_of_the_match: Optional[str] = None
    best_batsman: Optional[str] = None
    best_bowler: Optional[str] = None
    best_fielder: Optional[str] = None


# --- RESULTADO POST-PARTIDO ---
class PlayerMatchStats(APIModel):
    player_id: str
    team_id: str
    runs_scored: int = 0
    balls_faced: int = 0
    fours: int = 0
    sixes: int = 0
    is_out: bool = False
    overs_bowled: float = 0.0
    runs_given: int = 0
    wickets_taken: int = 0
    maidens: int = 0
    catches: int = 0
    run_outs: int = 0
    stumpings: int = 0
    man_of_match: bool = False
    best_batsman: bool = False
    best_bowler: bool = False
    best_fielder: bool = False


class MatchResultIn(APIModel):
    team1_id: str
    team2_id: str
    result_summary: ResultSummary
    scorecard: Optional[Scorecard] = None
    awards: Optional[Awards] = None
    player_stats: list[PlayerMatchStats] = Field(default_factory=list)


# --- PARTIDOS (CRUD) ---
class MatchBase(APIModel):
    title: str
    sport: str
    match_type: str
    is_public: bool = True
    venue_id: str
    organizer_id: str
    scheduled_at: datetime
    duration: Optional[int] = None
    max_players: int = Field(gt=0)
    current_players: int = 0
    status: MatchStatus = "upcoming"
    team1_name: Optional[str] = None
    team2_name: Optional[str] = None
    team1_score: Optional[dict[str, Any]] = None
    team2_score: Optional[dict[str, Any]] = None
    # Payload opaco (team1Id, team2Id, resultSummary, scorecard...)
    match_data: Optional[dict[str, Any]] = None
    description: Optional[str] = None


class MatchCreate(MatchBase):
    pass


class MatchUpdate(APIModel):
    title: Optional[str] = None
    sport: Optional[str] = None
    match_type: Optional[str] = None
    is_public: Optional[bool] = None
    venue_id: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    duration: Optional[int] = None
    max_players: Optional[int] = Field(default=None, gt=0)
    current_players: Optional[int] = None
    status: Optional[MatchStatus] = None
    team1_name: Optional[str] = None
    team2_name: Optional[str] = None
    team1_score: Optional[dict[str, Any]] = None
    team2_score: Optional[dict[str, Any]] = None
    match_data: Optional[dict[str, Any]] = None
    description: Optional[str] = None


class MatchResponse(MatchBase):
    id: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MatchResultResponse(APIModel):
    already_processed: bool = False
    match: MatchResponse
    updated_teams: list[str] = Field(default_factory=list)
    updated_players: list[str] = Field(default_factory=list)


# --- PARTICIPANTES ---
class ParticipantCreate(APIModel):
    user_id: str
    team: Optional[Literal["team1", "team2"]] = None
    role: str = "player"
    status: str = "joined"


class ParticipantResponse(ParticipantCreate):
    id: str
    match_id: str
    joined_at: Optional[datetime] = None

