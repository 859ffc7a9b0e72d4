import pandas as pd

from playarena.core.database import SessionLocal
from playarena.repositories.match_repository import MatchRepository
from playarena.repositories.team_repository import TeamRepository
from playarena.services.standings import build_league_table

# Configuración de visualización de pandas
pd.set_option('display.max_rows', 50)
pd.set_option('display.width', 1000)


def main():
    db = SessionLocal()
    print("🏏 Calculando clasificación...")

    try:
        teams = TeamRepository(db).list()
        matches = MatchRepository(db).list(status="completed")
        df = build_league_table(teams, matches)
    finally:
        db.close()

    if df.empty:
        print("❌ No hay equipos en la base de datos. Ejecuta seed.py primero.")
        return

    print(f"\n--- CLASIFICACIÓN ({len(matches)} partidos completados) ---")
    df["win_rate"] = df["win_rate"].round(1)
    print(df.drop(columns=["team_id"]).to_string(index=False))

    print("\n--- MEJOR NET RUN RATE ---")
    print(df.sort_values("net_run_rate", ascending=False).head(3)[["team_name", "net_run_rate"]].to_string(index=False))


if __name__ == "__main__":
    main()
