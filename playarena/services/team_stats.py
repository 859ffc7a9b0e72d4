# playarena/services/team_stats.py
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from playarena.core.exceptions import ResultIntegrityError
from playarena.schemas.stats import TeamStats

logger = logging.getLogger("playarena.stats")

POINTS_PER_WIN = 2
POINTS_PER_DRAW = 1


def match_field(match: Any, attr: str, key: str):
    # Acepta entidades ORM (match.match_data) y dicts JSON (match["matchData"])
    if isinstance(match, Mapping):
        return match.get(key, match.get(attr))
    return getattr(match, attr, None)


def match_payload(match: Any) -> dict:
    data = match_field(match, "match_data", "matchData")
    return data if isinstance(data, Mapping) else {}


def is_completed(match: Any) -> bool:
    return match_field(match, "status", "status") == "completed"


def participants(match: Any) -> tuple[Optional[str], Optional[str]]:
    data = match_payload(match)
    return data.get("team1Id"), data.get("team2Id")


def is_participant(match: Any, team_id: str) -> bool:
    return team_id in participants(match)


def classify_result(match: Any, team_id: str, strict: bool = False) -> Optional[str]:
    """
    Devuelve "won", "lost", "drawn" o None (partido sin resultado utilizable).

    Solo clasifica; la comprobación de completado y participación la hace
    quien llama.
    """
    summary = match_payload(match).get("resultSummary")
    if not isinstance(summary, Mapping):
        return None

    if summary.get("resultType") == "tied":
        return "drawn"

    winner_id = summary.get("winnerId")
    if winner_id:
        team1_id, team2_id = participants(match)
        if winner_id not in (team1_id, team2_id):
            match_id = match_field(match, "id", "id")
            if strict:
                raise ResultIntegrityError(match_id, winner_id, team1_id, team2_id)
            # Se cuenta como derrota, pero dejamos traza del dato corrupto
            logger.warning(
                "Partido %s: winnerId %s no es participante (%s vs %s)",
                match_id, winner_id, team1_id, team2_id,
            )
        return "won" if winner_id == team_id else "lost"

    # no-result / abandoned y cualquier otro caso quedan fuera de las cuentas
    return None


def compute_team_stats(team_id: str, matches: Iterable[Any], strict: bool = False) -> TeamStats:
    """
    Calcula el balance de un equipo a partir de su historial de partidos.

    Solo cuentan los partidos completados en los que el equipo es team1Id o
    team2Id y que tienen un resultado claro (victoria, derrota o empate).
    Con strict=True un winnerId que no es participante lanza
    ResultIntegrityError en vez de contarse como derrota.
    """
    wins = losses = draws = 0

    for match in matches:
        if not is_completed(match) or not is_participant(match, team_id):
            continue

        outcome = classify_result(match, team_id, strict=strict)
        if outcome == "won":
            wins += 1
        elif outcome == "lost":
            losses += 1
        elif outcome == "drawn":
            draws += 1

    total = wins + losses + draws
    win_rate = (wins / total) * 100 if total > 0 else 0.0

    return TeamStats(
        total_matches=total,
        matches_won=wins,
        matches_lost=losses,
        matches_drawn=draws,
        win_rate=win_rate,
        tournament_points=wins * POINTS_PER_WIN + draws * POINTS_PER_DRAW,
    )
