from datetime import datetime

import pytest

from playarena.core.exceptions import MatchAlreadyProcessedError, NotFoundError, ResultIntegrityError
from playarena.models.team import Player, Team, empty_career_stats
from playarena.repositories.match_repository import MatchRepository
from playarena.repositories.team_repository import PlayerRepository, TeamRepository
from playarena.schemas.match import Innings, MatchResultIn, PlayerMatchStats, ResultSummary, Scorecard
from playarena.services.match_results import apply_match_result, apply_player_line, recalculate_averages
from playarena.services.team_stats import compute_team_stats


@pytest.fixture
def league(db):
    teams = TeamRepository(db)
    strikers = teams.create({"name": "Strikers"})
    chargers = teams.create({"name": "Chargers"})
    batter = PlayerRepository(db).create({"name": "Batter", "team_id": strikers.id})
    bowler = PlayerRepository(db).create({"name": "Bowler", "team_id": chargers.id})
    return strikers, chargers, batter, bowler


def new_match(db, team1, team2, day=1):
    return MatchRepository(db).create({
        "title": f"{team1.name} vs {team2.name}",
        "sport": "cricket",
        "match_type": "T20",
        "venue_id": "venue-1",
        "organizer_id": "user-1",
        "scheduled_at": datetime(2026, 5, day, 18, 0),
        "max_players": 22,
        "team1_name": team1.name,
        "team2_name": team2.name,
        "match_data": {"team1Id": team1.id, "team2Id": team2.id},
    })


def strikers_win(strikers, chargers, batter, bowler, runs=104, is_out=True):
    return MatchResultIn(
        team1_id=strikers.id,
        team2_id=chargers.id,
        result_summary=ResultSummary(winner_id=strikers.id, result_type="won-by-runs", margin_runs=20),
        scorecard=Scorecard(
            team1_innings=[Innings(total_runs=160, total_wickets=4, total_overs=20.0)],
            team2_innings=[Innings(innings_number=2, total_runs=140, total_wickets=8, total_overs=20.0)],
        ),
        player_stats=[
            PlayerMatchStats(player_id=batter.id, team_id=strikers.id, runs_scored=runs, balls_faced=60,
                             fours=10, sixes=4, is_out=is_out, man_of_match=True),
            PlayerMatchStats(player_id=bowler.id, team_id=chargers.id, overs_bowled=3.4, runs_given=30,
                             wickets_taken=5),
        ],
    )


def test_apply_result_completes_match(db, league):
    strikers, chargers, batter, bowler = league
    match = new_match(db, strikers, chargers)

    outcome = apply_match_result(db, match.id, strikers_win(*league))

    assert outcome["match"].status == "completed"
    assert outcome["updated_teams"] == [strikers.id, chargers.id]
    assert sorted(outcome["updated_players"]) == sorted([batter.id, bowler.id])

    data = outcome["match"].match_data
    assert data["processed"] is True
    assert data["resultSummary"] == {"winnerId": strikers.id, "resultType": "won-by-runs", "marginRuns": 20}
    assert data["scorecard"]["team1Innings"][0]["totalRuns"] == 160


def test_player_career_stats(db, league):
    strikers, chargers, batter, bowler = league
    apply_match_result(db, new_match(db, strikers, chargers).id, strikers_win(*league))

    batting = db.get(Player, batter.id).career_stats
    assert batting["totalMatches"] == 1
    assert batting["matchesWon"] == 1
    assert batting["totalRuns"] == 104
    assert batting["centuries"] == 1
    assert batting["halfCenturies"] == 0
    assert batting["highestScore"] == 104
    assert batting["battingAverage"] == 104.0
    assert batting["strikeRate"] == 173.33
    assert batting["manOfTheMatchAwards"] == 1

    bowling = db.get(Player, bowler.id).career_stats
    assert bowling["matchesWon"] == 0
    assert bowling["totalOvers"] == 3.4
    assert bowling["totalWickets"] == 5
    assert bowling["fiveWicketHauls"] == 1
    assert bowling["bestBowlingFigures"] == "5/30"
    assert bowling["bowlingAverage"] == 6.0
    assert bowling["economy"] == 8.18


def test_career_stats_accumulate(db, league):
    strikers, chargers, batter, bowler = league
    apply_match_result(db, new_match(db, strikers, chargers, day=1).id, strikers_win(*league))
    apply_match_result(
        db, new_match(db, strikers, chargers, day=2).id,
        strikers_win(*league, runs=30, is_out=False),
    )

    batting = db.get(Player, batter.id).career_stats
    assert batting["totalMatches"] == 2
    assert batting["totalRuns"] == 134
    assert batting["timesOut"] == 1
    assert batting["battingAverage"] == 134.0
    assert batting["highestScore"] == 104

    bowling = db.get(Player, bowler.id).career_stats
    # 3.4 + 3.4 overs = 44 bolas = 7.2 overs
    assert bowling["totalOvers"] == 7.2
    assert bowling["fiveWicketHauls"] == 2


def test_team_counters_match_history(db, league):
    strikers, chargers, *_ = league
    apply_match_result(db, new_match(db, strikers, chargers).id, strikers_win(*league))

    for team_id in (strikers.id, chargers.id):
        team = db.get(Team, team_id)
        history = compute_team_stats(team_id, MatchRepository(db).fetch_matches_for_team(team_id))
        assert team.total_matches == history.total_matches == 1
        assert team.matches_won == history.matches_won
        assert team.matches_lost == history.matches_lost
        assert team.tournament_points == history.tournament_points

    home = db.get(Team, strikers.id)
    assert home.matches_won == 1
    assert home.tournament_points == 2
    assert home.total_runs_scored == 160
    assert home.total_wickets_taken == 8
    assert home.net_run_rate == pytest.approx(1.0)

    away = db.get(Team, chargers.id)
    assert away.matches_lost == 1
    assert away.net_run_rate == pytest.approx(-1.0)


def test_apply_result_is_idempotent(db, league):
    strikers, chargers, batter, _ = league
    match = new_match(db, strikers, chargers)
    apply_match_result(db, match.id, strikers_win(*league))

    with pytest.raises(MatchAlreadyProcessedError):
        apply_match_result(db, match.id, strikers_win(*league))

    assert db.get(Player, batter.id).career_stats["totalMatches"] == 1
    assert db.get(Team, strikers.id).total_matches == 1


def test_winner_must_be_participant(db, league):
    strikers, chargers, batter, bowler = league
    match = new_match(db, strikers, chargers)
    result = strikers_win(*league)
    result.result_summary.winner_id = "someone-else"

    with pytest.raises(ResultIntegrityError):
        apply_match_result(db, match.id, result)

    match = MatchRepository(db).get(match.id)
    assert match.status == "upcoming"
    assert "processed" not in match.match_data


def test_unknown_match(db, league):
    with pytest.raises(NotFoundError):
        apply_match_result(db, "missing", strikers_win(*league))


def test_unknown_player_is_skipped(db, league):
    strikers, chargers, batter, bowler = league
    result = strikers_win(*league)
    result.player_stats.append(PlayerMatchStats(player_id="ghost", team_id=strikers.id, runs_scored=10))

    outcome = apply_match_result(db, new_match(db, strikers, chargers).id, result)
    assert "ghost" not in outcome["updated_players"]
    assert len(outcome["updated_players"]) == 2


def test_apply_player_line_from_empty_career():
    line = PlayerMatchStats(player_id="p", team_id="t", runs_scored=55, balls_faced=40, is_out=True,
                            overs_bowled=2.0, runs_given=18, wickets_taken=1, catches=2)
    stats = apply_player_line(None, line, won=False)
    assert stats["halfCenturies"] == 1
    assert stats["centuries"] == 0
    assert stats["catches"] == 2
    assert stats["bestBowlingFigures"] == "1/18"
    assert stats["economy"] == 9.0


def test_better_bowling_figures_keep_more_wickets():
    stats = apply_player_line(None, PlayerMatchStats(player_id="p", team_id="t", overs_bowled=4.0,
                                                     runs_given=20, wickets_taken=3), won=True)
    stats = apply_player_line(stats, PlayerMatchStats(player_id="p", team_id="t", overs_bowled=4.0,
                                                      runs_given=10, wickets_taken=2), won=True)
    assert stats["bestBowlingFigures"] == "3/20"
    stats = apply_player_line(stats, PlayerMatchStats(player_id="p", team_id="t", overs_bowled=4.0,
                                                      runs_given=15, wickets_taken=3), won=True)
    assert stats["bestBowlingFigures"] == "3/15"


def test_recalculate_averages_without_dismissals():
    stats = {**empty_career_stats(), "totalMatches": 1, "totalRuns": 45, "totalBallsFaced": 30}
    stats = recalculate_averages(stats)
    assert stats["battingAverage"] == 45.0
    assert stats["strikeRate"] == 150.0
    assert stats["bowlingAverage"] == 0.0


def test_repository_update_merges_match_data(db, league):
    strikers, chargers, *_ = league
    match = new_match(db, strikers, chargers)
    repo = MatchRepository(db)

    repo.update(match.id, {"match_data": {"note": "lluvia"}})
    assert repo.get(match.id).match_data == {"team1Id": strikers.id, "team2Id": chargers.id, "note": "lluvia"}

    apply_match_result(db, match.id, strikers_win(*league))
    repo.update(match.id, {"match_data": {"processed": False, "team1Id": "other", "resultSummary": None}})

    data = repo.get(match.id).match_data
    assert data["processed"] is True
    assert data["team1Id"] == strikers.id
    assert data["resultSummary"]["winnerId"] == strikers.id
    assert data["note"] == "lluvia"
    with pytest.raises(MatchAlreadyProcessedError):
        apply_match_result(db, match.id, strikers_win(*league))


def test_fetch_matches_for_team_filters_participants(db, league):
    strikers, chargers, *_ = league
    outsiders = TeamRepository(db).create({"name": "Outsiders"})
    home = new_match(db, strikers, chargers, day=1)
    away = new_match(db, chargers, strikers, day=2)
    new_match(db, chargers, outsiders, day=3)

    repo = MatchRepository(db)
    assert [m.id for m in repo.fetch_matches_for_team(strikers.id)] == [home.id, away.id]
    assert len(repo.fetch_matches_for_team(outsiders.id)) == 1
    assert repo.fetch_matches_for_team("nobody") == []
