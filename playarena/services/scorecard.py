# playarena/services/scorecard.py
from collections.abc import Iterable, Mapping
from typing import Any, Optional

import pandas as pd

from playarena.services.team_stats import is_completed, is_participant, match_field, match_payload

BATTING_COLUMNS = ["Batsman", "Runs", "Balls", "4s", "6s", "SR", "Dismissal"]
BOWLING_COLUMNS = ["Bowler", "Overs", "Maidens", "Runs", "Wickets", "Economy"]


# --- OVERS EN NOTACIÓN DE CRÍQUET ---
def overs_to_balls(overs) -> int:
    """4.3 overs = 4 overs completos + 3 bolas = 27 bolas."""
    if not overs:
        return 0
    whole = int(float(overs))
    balls = round((float(overs) - whole) * 10)
    return whole * 6 + balls


def overs_to_decimal(overs) -> float:
    return overs_to_balls(overs) / 6


def _round(value, ndigits: int) -> Optional[float]:
    # Redondeo de presentación: el valor viene calculado de origen
    if value is None:
        return None
    return round(float(value), ndigits)


# --- RESULTADO ---
def describe_result(match: Any) -> Optional[str]:
    """Texto del resultado, igual que en la ficha del partido. None si no ha terminado."""
    if not is_completed(match):
        return None

    data = match_payload(match)
    summary = data.get("resultSummary") or {}
    winner_id = summary.get("winnerId")
    result_type = summary.get("resultType")

    if winner_id:
        if winner_id == data.get("team1Id"):
            winner_name = match_field(match, "team1_name", "team1Name")
        else:
            winner_name = match_field(match, "team2_name", "team2Name")

        if result_type == "won-by-runs":
            return f"{winner_name} won by {summary.get('marginRuns')} runs"
        if result_type == "won-by-wickets":
            return f"{winner_name} won by {summary.get('marginWickets')} wickets"

    if result_type == "tied":
        return "Match tied"
    if result_type == "no-result":
        return "No result"
    if result_type == "abandoned":
        return "Match abandoned"
    return "Result not available"


# --- TABLAS DE INNINGS ---
def batting_table(innings: Mapping) -> pd.DataFrame:
    rows = []
    for b in innings.get("batsmen") or []:
        dismissal = b.get("dismissalType")
        rows.append([
            b.get("playerId"),
            b.get("runsScored", 0),
            b.get("ballsFaced", 0),
            b.get("fours", 0),
            b.get("sixes", 0),
            _round(b.get("strikeRate"), 1),
            "Not Out" if dismissal == "not-out" else dismissal,
        ])
    return pd.DataFrame(rows, columns=BATTING_COLUMNS)


def bowling_table(innings: Mapping) -> pd.DataFrame:
    rows = []
    for b in innings.get("bowlers") or []:
        rows.append([
            b.get("playerId"),
            b.get("overs", 0),
            b.get("maidens", 0),
            b.get("runsGiven", 0),
            b.get("wickets", 0),
            _round(b.get("economy"), 2),
        ])
    return pd.DataFrame(rows, columns=BOWLING_COLUMNS)


def innings_summary(innings: Mapping) -> dict[str, Any]:
    total_runs = innings.get("totalRuns", 0)
    total_wickets = innings.get("totalWickets", 0)
    total_overs = innings.get("totalOvers", 0)
    return {
        "inningsNumber": innings.get("inningsNumber"),
        "score": f"{total_runs}/{total_wickets} ({total_overs} overs)",
        "runRate": _round(innings.get("runRate"), 2),
        "extras": sum((innings.get("extras") or {}).values()),
    }


def innings_tables(innings_list: Iterable[Mapping]) -> list[dict[str, Any]]:
    tables = []
    for innings in innings_list or []:
        tables.append({
            "summary": innings_summary(innings),
            "batting": batting_table(innings),
            "bowling": bowling_table(innings),
        })
    return tables


def match_label(match: Any) -> str:
    """Etiqueta única para selectores: título, fecha y hora, y el inicio del id."""
    label = match_field(match, "title", "title") or "Partido"
    scheduled = match_field(match, "scheduled_at", "scheduledAt")
    if scheduled is not None:
        label += f" ({scheduled:%d/%m/%Y %H:%M})"
    return f"{label} · {str(match_field(match, 'id', 'id'))[:6]}"


def _records(df: pd.DataFrame) -> list[dict[str, Any]]:
    # NaN no es JSON válido: las celdas vacías salen como null
    return df.astype(object).where(df.notna(), None).to_dict(orient="records")


def scorecard_view(match: Any) -> dict[str, Any]:
    """Vista JSON de la ficha del partido: resultado, premios y ambos equipos."""
    data = match_payload(match)
    scorecard = data.get("scorecard") or {}
    completed = is_completed(match)
    team1_innings = scorecard.get("team1Innings") if completed else None
    team2_innings = scorecard.get("team2Innings") if completed else None

    def team_view(name, innings_list):
        return {
            "name": name,
            "innings": [
                {
                    **t["summary"],
                    "batting": _records(t["batting"]),
                    "bowling": _records(t["bowling"]),
                }
                for t in innings_tables(innings_list)
            ],
        }

    return {
        "matchId": match_field(match, "id", "id"),
        "status": match_field(match, "status", "status"),
        "result": describe_result(match),
        "awards": data.get("awards") if completed else None,
        "hasScorecard": completed and bool(scorecard),
        "team1": team_view(match_field(match, "team1_name", "team1Name"), team1_innings),
        "team2": team_view(match_field(match, "team2_name", "team2Name"), team2_innings),
    }


# --- NET RUN RATE ---
def net_run_rate(team_id: str, matches: Iterable[Any]) -> float:
    """
    NRR = carreras anotadas / overs jugados - carreras concedidas / overs lanzados,
    sobre los partidos completados con scorecard en los que participa el equipo.
    """
    runs_for = balls_for = runs_against = balls_against = 0

    for match in matches:
        if not is_completed(match) or not is_participant(match, team_id):
            continue
        data = match_payload(match)
        scorecard = data.get("scorecard") or {}
        if data.get("team1Id") == team_id:
            own, rival = scorecard.get("team1Innings"), scorecard.get("team2Innings")
        else:
            own, rival = scorecard.get("team2Innings"), scorecard.get("team1Innings")

        for innings in own or []:
            runs_for += innings.get("totalRuns", 0)
            balls_for += overs_to_balls(innings.get("totalOvers"))
        for innings in rival or []:
            runs_against += innings.get("totalRuns", 0)
            balls_against += overs_to_balls(innings.get("totalOvers"))

    if not balls_for or not balls_against:
        return 0.0
    nrr = runs_for / (balls_for / 6) - runs_against / (balls_against / 6)
    return round(nrr, 3)
