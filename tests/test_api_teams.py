import pytest

API = "/api/v1"


def create_team(client, name):
    return client.post(f"{API}/teams", json={"name": name, "city": "Mumbai"}).json()["id"]


def completed_match(client, team1_id, team2_id, summary, day=1):
    resp = client.post(f"{API}/matches", json={
        "title": "Liga",
        "sport": "cricket",
        "matchType": "T20",
        "venueId": "venue-1",
        "organizerId": "organizer-1",
        "scheduledAt": f"2026-05-0{day}T18:00:00",
        "maxPlayers": 22,
        "status": "completed",
        "matchData": {"team1Id": team1_id, "team2Id": team2_id, "resultSummary": summary},
    })
    assert resp.status_code == 201, resp.text


def test_team_crud_and_search(client):
    team_id = create_team(client, "Mumbai Strikers")
    create_team(client, "Delhi Capitals")

    assert client.get(f"{API}/teams/{team_id}").json()["totalMatches"] == 0
    found = client.get(f"{API}/teams", params={"search": "strik"}).json()
    assert [t["id"] for t in found] == [team_id]

    resp = client.put(f"{API}/teams/{team_id}", json={"shortName": "MS"})
    assert resp.json()["shortName"] == "MS"
    assert resp.json()["name"] == "Mumbai Strikers"

    assert client.delete(f"{API}/teams/{team_id}").status_code == 204
    assert client.get(f"{API}/teams/{team_id}").status_code == 404


def test_team_stats_from_history(client):
    t, o = create_team(client, "Strikers"), create_team(client, "Chargers")
    completed_match(client, t, o, {"winnerId": t, "resultType": "won-by-runs"}, day=1)
    completed_match(client, t, o, {"resultType": "tied"}, day=2)
    completed_match(client, o, t, {"winnerId": o, "resultType": "won-by-wickets"}, day=3)
    completed_match(client, t, o, {"resultType": "abandoned"}, day=4)

    body = client.get(f"{API}/teams/{t}/stats").json()
    stats = body["stats"]
    assert body["teamName"] == "Strikers"
    assert stats["totalMatches"] == 3
    assert stats["matchesWon"] == stats["matchesLost"] == stats["matchesDrawn"] == 1
    assert stats["winRate"] == pytest.approx(100 / 3)
    assert stats["tournamentPoints"] == 3
    # Los partidos se crearon a mano, sin pasar por /result: el equipo no tiene contadores
    assert body["stored"]["totalMatches"] == 0

    assert len(client.get(f"{API}/teams/{t}/matches").json()) == 4


def test_team_stats_unknown_team(client):
    assert client.get(f"{API}/teams/missing/stats").status_code == 404


def test_team_stats_strict_mode(client):
    t, o = create_team(client, "Strikers"), create_team(client, "Chargers")
    completed_match(client, t, o, {"winnerId": "intruder", "resultType": "won-by-runs"})

    lenient = client.get(f"{API}/teams/{t}/stats")
    assert lenient.status_code == 200
    assert lenient.json()["stats"]["matchesLost"] == 1

    strict = client.get(f"{API}/teams/{t}/stats", params={"strict": "true"})
    assert strict.status_code == 409
    assert "intruder" in strict.json()["detail"]


def test_standings(client):
    a, b = create_team(client, "Alpha"), create_team(client, "Bravo")
    completed_match(client, a, b, {"winnerId": b, "resultType": "won-by-runs"})

    body = client.get(f"{API}/standings").json()
    assert body["totalTeams"] == 2
    assert [row["teamName"] for row in body["data"]] == ["Bravo", "Alpha"]
    assert body["data"][0]["position"] == 1
    assert body["data"][0]["tournamentPoints"] == 2


def test_players(client):
    team_id = create_team(client, "Strikers")
    resp = client.post(f"{API}/players", json={"name": "R. Sharma", "teamId": team_id, "role": "batsman"})
    assert resp.status_code == 201
    player = resp.json()
    assert player["careerStats"]["totalRuns"] == 0

    client.post(f"{API}/players", json={"name": "J. Bumrah", "teamId": team_id, "role": "bowler"})
    assert len(client.get(f"{API}/players", params={"team_id": team_id}).json()) == 2
    bowlers = client.get(f"{API}/players", params={"role": "bowler"}).json()
    assert [p["name"] for p in bowlers] == ["J. Bumrah"]

    assert client.post(f"{API}/players", json={"name": "X", "teamId": "missing"}).status_code == 404
    assert client.put(f"{API}/players/{player['id']}", json={"jerseyNumber": 45}).json()["jerseyNumber"] == 45
    assert client.delete(f"{API}/players/{player['id']}").status_code == 204
