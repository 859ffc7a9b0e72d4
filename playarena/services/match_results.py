# playarena/services/match_results.py
import logging
from typing import Any

from sqlalchemy.orm import Session

from playarena.core.exceptions import MatchAlreadyProcessedError, NotFoundError, ResultIntegrityError
from playarena.models.match import Match
from playarena.models.team import Player, Team, empty_career_stats
from playarena.repositories.match_repository import MatchRepository
from playarena.schemas.match import MatchResultIn, PlayerMatchStats
from playarena.services.scorecard import net_run_rate, overs_to_balls, overs_to_decimal
from playarena.services.team_stats import compute_team_stats, match_payload

logger = logging.getLogger("playarena.results")


def _add_overs(current, extra) -> float:
    # Sumamos en bolas y volvemos a notación de críquet (4.5 + 0.2 = 5.1)
    balls = overs_to_balls(current) + overs_to_balls(extra)
    return float(f"{balls // 6}.{balls % 6}")


def apply_player_line(career: dict[str, Any], line: PlayerMatchStats, won: bool) -> dict[str, Any]:
    """Suma la actuación de un partido a las estadísticas de carrera y recalcula medias."""
    stats = {**empty_career_stats(), **(career or {})}

    stats["totalMatches"] += 1
    if won:
        stats["matchesWon"] += 1

    # Bateo
    stats["totalRuns"] += line.runs_scored
    stats["totalBallsFaced"] += line.balls_faced
    stats["totalFours"] += line.fours
    stats["totalSixes"] += line.sixes
    if line.is_out:
        stats["timesOut"] += 1
    if line.runs_scored >= 100:
        stats["centuries"] += 1
    elif line.runs_scored >= 50:
        stats["halfCenturies"] += 1
    stats["highestScore"] = max(stats["highestScore"], line.runs_scored)

    # Lanzamiento
    stats["totalOvers"] = _add_overs(stats["totalOvers"], line.overs_bowled)
    stats["totalRunsGiven"] += line.runs_given
    stats["totalWickets"] += line.wickets_taken
    stats["totalMaidens"] += line.maidens
    if line.wickets_taken >= 5:
        stats["fiveWicketHauls"] += 1
    if line.wickets_taken or line.overs_bowled:
        figures = f"{line.wickets_taken}/{line.runs_given}"
        if _better_figures(figures, stats["bestBowlingFigures"]):
            stats["bestBowlingFigures"] = figures

    # Campo
    stats["catches"] += line.catches
    stats["runOuts"] += line.run_outs
    stats["stumpings"] += line.stumpings

    # Premios
    stats["manOfTheMatchAwards"] += int(line.man_of_match)
    stats["bestBatsmanAwards"] += int(line.best_batsman)
    stats["bestBowlerAwards"] += int(line.best_bowler)
    stats["bestFielderAwards"] += int(line.best_fielder)

    return recalculate_averages(stats)


def _better_figures(new: str, best) -> bool:
    # Más wickets gana; a igualdad, menos carreras
    if not best:
        return True
    new_w, new_r = map(int, new.split("/"))
    best_w, best_r = map(int, best.split("/"))
    return (new_w, -new_r) > (best_w, -best_r)


def recalculate_averages(stats: dict[str, Any]) -> dict[str, Any]:
    if stats["totalMatches"] > 0:
        stats["battingAverage"] = round(stats["totalRuns"] / max(stats["timesOut"], 1), 2)
    if stats["totalBallsFaced"] > 0:
        stats["strikeRate"] = round(stats["totalRuns"] / stats["totalBallsFaced"] * 100, 2)
    if stats["totalWickets"] > 0:
        stats["bowlingAverage"] = round(stats["totalRunsGiven"] / stats["totalWickets"], 2)
    overs = overs_to_decimal(stats["totalOvers"])
    if overs > 0:
        stats["economy"] = round(stats["totalRunsGiven"] / overs, 2)
    return stats


def refresh_team_record(db: Session, team_id: str) -> Team | None:
    """
    Recalcula los contadores persistidos del equipo desde su historial.

    El historial de partidos es la fuente de verdad; los campos del equipo
    son solo una copia para listados rápidos.
    """
    team = db.get(Team, team_id)
    if team is None:
        logger.warning("refresh_team_record: equipo %s no existe", team_id)
        return None

    matches = MatchRepository(db).fetch_matches_for_team(team_id)
    stats = compute_team_stats(team_id, matches)

    runs = wickets = 0
    for match in matches:
        data = match_payload(match)
        if match.status != "completed":
            continue
        scorecard = data.get("scorecard") or {}
        own, rival = ("team1Innings", "team2Innings") if data.get("team1Id") == team_id else ("team2Innings", "team1Innings")
        runs += sum(i.get("totalRuns", 0) for i in scorecard.get(own) or [])
        wickets += sum(i.get("totalWickets", 0) for i in scorecard.get(rival) or [])

    team.total_matches = stats.total_matches
    team.matches_won = stats.matches_won
    team.matches_lost = stats.matches_lost
    team.matches_drawn = stats.matches_drawn
    team.tournament_points = stats.tournament_points
    team.total_runs_scored = runs
    team.total_wickets_taken = wickets
    team.net_run_rate = net_run_rate(team_id, matches)
    db.commit()
    db.refresh(team)
    return team


def refresh_teams(db: Session, team_ids) -> list[str]:
    """Refresca cada equipo una sola vez, ignorando ids vacíos o de equipos que ya no existen."""
    refreshed = []
    for team_id in dict.fromkeys(t for t in team_ids if t):
        if refresh_team_record(db, team_id) is not None:
            refreshed.append(team_id)
    return refreshed


def apply_match_result(db: Session, match_id: str, result: MatchResultIn) -> dict[str, Any]:
    """
    Cierra un partido: guarda resultado, scorecard y premios, suma las
    estadísticas de carrera de los jugadores y refresca los equipos.

    Idempotente: un partido ya procesado lanza MatchAlreadyProcessedError
    sin tocar nada.
    """
    match = db.get(Match, match_id)
    if match is None:
        raise NotFoundError("Match", match_id)

    if match_payload(match).get("processed"):
        raise MatchAlreadyProcessedError(match_id)

    summary = result.result_summary
    if summary.winner_id and summary.winner_id not in (result.team1_id, result.team2_id):
        raise ResultIntegrityError(match_id, summary.winner_id, result.team1_id, result.team2_id)

    logger.info("Aplicando resultado del partido %s (%s vs %s)", match_id, result.team1_id, result.team2_id)

    match.status = "completed"
    match.match_data = {
        **(match.match_data or {}),
        "team1Id": result.team1_id,
        "team2Id": result.team2_id,
        "resultSummary": summary.model_dump(by_alias=True, exclude_none=True),
        "scorecard": result.scorecard.model_dump(by_alias=True) if result.scorecard else None,
        "awards": result.awards.model_dump(by_alias=True, exclude_none=True) if result.awards else None,
        "processed": True,
    }

    updated_players = []
    for line in result.player_stats:
        player = db.get(Player, line.player_id)
        if player is None:
            logger.warning("Partido %s: jugador %s no existe, se ignora", match_id, line.player_id)
            continue
        won = bool(summary.winner_id) and line.team_id == summary.winner_id
        player.career_stats = apply_player_line(player.career_stats, line, won)
        updated_players.append(player.id)

    # Un único commit: partido y jugadores se guardan juntos
    db.commit()
    db.refresh(match)

    updated_teams = refresh_teams(db, (result.team1_id, result.team2_id))

    logger.info(
        "Partido %s procesado: %d equipos, %d jugadores actualizados",
        match_id, len(updated_teams), len(updated_players),
    )
    return {"match": match, "updated_teams": updated_teams, "updated_players": updated_players}
