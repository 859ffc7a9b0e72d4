# playarena/services/standings.py
from collections.abc import Iterable
from typing import Any

import pandas as pd

from playarena.services.scorecard import net_run_rate
from playarena.services.team_stats import compute_team_stats

STANDINGS_COLUMNS = [
    "position", "team_id", "team_name",
    "total_matches", "matches_won", "matches_lost", "matches_drawn",
    "win_rate", "tournament_points", "net_run_rate",
]


def build_league_table(teams: Iterable[Any], matches: Iterable[Any]) -> pd.DataFrame:
    """
    Clasificación de la liga a partir del historial de partidos.

    Orden: puntos, victorias, net run rate y nombre.
    """
    matches = list(matches)
    rows = []
    for team in teams:
        stats = compute_team_stats(team.id, matches)
        rows.append({
            "team_id": team.id,
            "team_name": team.name,
            **stats.model_dump(),
            "net_run_rate": net_run_rate(team.id, matches),
        })

    if not rows:
        return pd.DataFrame(columns=STANDINGS_COLUMNS)

    df = pd.DataFrame(rows)
    df = df.sort_values(
        by=["tournament_points", "matches_won", "net_run_rate", "team_name"],
        ascending=[False, False, False, True],
    ).reset_index(drop=True)
    df["position"] = df.index + 1
    return df[STANDINGS_COLUMNS]
