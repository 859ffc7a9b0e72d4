from datetime import datetime, timedelta, timezone

from playarena.core.database import SessionLocal, init_db
from playarena.repositories.match_repository import MatchRepository
from playarena.repositories.store_repository import ProductRepository
from playarena.repositories.team_repository import PlayerRepository, TeamRepository
from playarena.repositories.user_repository import UserRepository
from playarena.repositories.venue_repository import VenueRepository
from playarena.schemas.match import MatchResultIn
from playarena.services.match_results import apply_match_result

ADMIN_EMAIL = "admin@playarena.com"

VENUES = [
    {
        "name": "Elite Sports Complex",
        "description": "Campo de críquet con iluminación nocturna y vestuarios",
        "address": "123 Sports Avenue",
        "city": "Mumbai",
        "state": "Maharashtra",
        "sports": ["cricket", "football"],
        "price_per_hour": 2500.0,
        "facilities": ["Parking", "Floodlights", "Changing Rooms"],
    },
    {
        "name": "Green Field Arena",
        "description": "Pista de fútbol 7 de césped artificial",
        "address": "45 Park Road",
        "city": "Bangalore",
        "state": "Karnataka",
        "sports": ["football", "tennis"],
        "price_per_hour": 1800.0,
        "facilities": ["Parking", "Cafeteria"],
    },
]

PRODUCTS = [
    {
        "name": "Professional Cricket Bat",
        "description": "Bate de sauce inglés grado 1",
        "category": "cricket",
        "subcategory": "bats",
        "price": 8999.0,
        "discount_price": 7499.0,
        "brand": "SG",
        "stock_quantity": 25,
    },
    {
        "name": "Leather Cricket Ball",
        "description": "Bola de cuero cosida a mano",
        "category": "cricket",
        "subcategory": "balls",
        "price": 1299.0,
        "brand": "Kookaburra",
        "stock_quantity": 100,
    },
    {
        "name": "Football Size 5",
        "category": "football",
        "price": 1499.0,
        "brand": "Nivia",
        "stock_quantity": 40,
    },
]

TEAMS = {
    "Mumbai Strikers": ["R. Sharma", "S. Yadav", "J. Bumrah"],
    "Bangalore Chargers": ["V. Kohli", "F. du Plessis", "M. Siraj"],
}


def seed_match(db, admin, venue, teams, players):
    """Partido de ejemplo ya cerrado: Strikers ganan por 12 carreras."""
    home, away = teams
    match = MatchRepository(db).create({
        "title": f"{home.name} vs {away.name}",
        "sport": "cricket",
        "match_type": "T20",
        "venue_id": venue.id,
        "organizer_id": admin.id,
        "scheduled_at": datetime.now(timezone.utc) - timedelta(days=2),
        "duration": 180,
        "max_players": 22,
        "team1_name": home.name,
        "team2_name": away.name,
        "match_data": {"team1Id": home.id, "team2Id": away.id},
    })

    h1, h2, h3 = players[home.id]
    a1, a2, a3 = players[away.id]
    result = MatchResultIn.model_validate({
        "team1Id": home.id,
        "team2Id": away.id,
        "resultSummary": {"winnerId": home.id, "resultType": "won-by-runs", "marginRuns": 12},
        "scorecard": {
            "team1Innings": [{
                "inningsNumber": 1, "totalRuns": 168, "totalWickets": 6, "totalOvers": 20.0,
                "runRate": 8.4, "extras": {"wides": 5, "noBalls": 1, "byes": 0, "legByes": 2},
                "batsmen": [
                    {"playerId": h1.id, "runsScored": 72, "ballsFaced": 48, "fours": 7, "sixes": 3,
                     "strikeRate": 150.0, "dismissalType": "caught"},
                    {"playerId": h2.id, "runsScored": 55, "ballsFaced": 31, "fours": 5, "sixes": 2,
                     "strikeRate": 177.42, "dismissalType": "not-out"},
                ],
                "bowlers": [
                    {"playerId": a3.id, "overs": 4.0, "maidens": 0, "runsGiven": 31, "wickets": 3, "economy": 7.75},
                ],
            }],
            "team2Innings": [{
                "inningsNumber": 2, "totalRuns": 156, "totalWickets": 9, "totalOvers": 20.0,
                "runRate": 7.8, "extras": {"wides": 3, "noBalls": 0, "byes": 1, "legByes": 0},
                "batsmen": [
                    {"playerId": a1.id, "runsScored": 61, "ballsFaced": 44, "fours": 6, "sixes": 2,
                     "strikeRate": 138.64, "dismissalType": "bowled"},
                    {"playerId": a2.id, "runsScored": 34, "ballsFaced": 27, "fours": 3, "sixes": 1,
                     "strikeRate": 125.93, "dismissalType": "lbw"},
                ],
                "bowlers": [
                    {"playerId": h3.id, "overs": 4.0, "maidens": 1, "runsGiven": 22, "wickets": 4, "economy": 5.5},
                ],
            }],
        },
        "awards": {"manOfTheMatch": h1.id, "bestBatsman": h1.id, "bestBowler": h3.id},
        "playerStats": [
            {"playerId": h1.id, "teamId": home.id, "runsScored": 72, "ballsFaced": 48, "fours": 7, "sixes": 3,
             "isOut": True, "manOfMatch": True, "bestBatsman": True},
            {"playerId": h2.id, "teamId": home.id, "runsScored": 55, "ballsFaced": 31, "fours": 5, "sixes": 2},
            {"playerId": h3.id, "teamId": home.id, "oversBowled": 4.0, "maidens": 1, "runsGiven": 22,
             "wicketsTaken": 4, "bestBowler": True},
            {"playerId": a1.id, "teamId": away.id, "runsScored": 61, "ballsFaced": 44, "fours": 6, "sixes": 2,
             "isOut": True, "catches": 1},
            {"playerId": a2.id, "teamId": away.id, "runsScored": 34, "ballsFaced": 27, "fours": 3, "sixes": 1,
             "isOut": True},
            {"playerId": a3.id, "teamId": away.id, "oversBowled": 4.0, "runsGiven": 31, "wicketsTaken": 3},
        ],
    })
    apply_match_result(db, match.id, result)
    return match


def seed():
    print("🌱 Sembrando datos de ejemplo...")
    init_db()
    db = SessionLocal()
    try:
        users = UserRepository(db)
        if users.get_by_email(ADMIN_EMAIL) is not None:
            print("ℹ️  Los datos de ejemplo ya existen. No se hace nada.")
            return

        admin = users.create({
            "email": ADMIN_EMAIL,
            "password": "admin123",
            "first_name": "Admin",
            "last_name": "PlayArena",
        })
        print(f"👤 Usuario admin: {admin.email}")

        venues = [VenueRepository(db).create({**v, "owner_id": admin.id}) for v in VENUES]
        print(f"🏟️  {len(venues)} instalaciones")

        for p in PRODUCTS:
            ProductRepository(db).create(p)
        print(f"🛒 {len(PRODUCTS)} productos")

        teams, players = [], {}
        for team_name, names in TEAMS.items():
            team = TeamRepository(db).create({"name": team_name, "city": team_name.split()[0]})
            teams.append(team)
            players[team.id] = [
                PlayerRepository(db).create({"name": name, "team_id": team.id, "jersey_number": i + 1})
                for i, name in enumerate(names)
            ]
        print(f"🏏 {len(teams)} equipos con {sum(len(p) for p in players.values())} jugadores")

        match = seed_match(db, admin, venues[0], teams, players)
        print(f"📋 Partido completado: {match.title}")

        print("✅ ¡Datos de ejemplo listos!")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
