from playarena.core.database import SessionLocal
from playarena.repositories.match_repository import MatchRepository
from playarena.repositories.team_repository import TeamRepository
from playarena.services.standings import build_league_table


def main():
    print("📊 Generando informe de clasificación...")
    db = SessionLocal()

    try:
        df = build_league_table(TeamRepository(db).list(), MatchRepository(db).list(status="completed"))
    finally:
        db.close()

    if df.empty:
        print("❌ No hay datos suficientes en la base de datos.")
        return

    filename = "playarena_standings.xlsx"

    # Necesitas instalar openpyxl: pip install openpyxl
    try:
        df.to_excel(filename, index=False)
        print(f"✅ Clasificación exportada a: {filename}")
    except ImportError:
        print("❌ Error: Necesitas instalar openpyxl (`pip install openpyxl`)")
        # Fallback a CSV
        df.to_csv("playarena_standings.csv", index=False)
        print("✅ Datos exportados a CSV en su lugar.")


if __name__ == "__main__":
    main()
