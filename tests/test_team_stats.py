import logging

import pytest

from conftest import make_match
from playarena.core.exceptions import ResultIntegrityError
from playarena.services.team_stats import classify_result, compute_team_stats

T, OTHER, THIRD = "team-t", "team-o", "team-x"


def scenario_matches():
    return [
        make_match(T, OTHER, summary={"winnerId": T, "resultType": "won-by-runs"}, match_id="A"),
        make_match(T, OTHER, summary={"resultType": "tied"}, match_id="B"),
        make_match(OTHER, T, summary={"winnerId": OTHER, "resultType": "won-by-wickets"}, match_id="C"),
        make_match(T, OTHER, summary={"resultType": "abandoned"}, match_id="D"),
        make_match(T, OTHER, status="upcoming", summary={"winnerId": T}, match_id="E"),
    ]


def test_empty_collection_is_all_zeros():
    stats = compute_team_stats(T, [])
    assert stats.model_dump() == {
        "total_matches": 0,
        "matches_won": 0,
        "matches_lost": 0,
        "matches_drawn": 0,
        "win_rate": 0.0,
        "tournament_points": 0,
    }


def test_concrete_scenario():
    stats = compute_team_stats(T, scenario_matches())
    assert stats.total_matches == 3
    assert stats.matches_won == 1
    assert stats.matches_lost == 1
    assert stats.matches_drawn == 1
    assert stats.win_rate == pytest.approx(100 / 3)
    assert stats.tournament_points == 3


def test_non_completed_matches_do_not_count():
    base = scenario_matches()
    extra = [
        make_match(T, OTHER, status=status, summary={"winnerId": T}, match_id=f"x-{status}")
        for status in ("upcoming", "live", "cancelled")
    ]
    assert compute_team_stats(T, base + extra) == compute_team_stats(T, base)


def test_non_participant_matches_are_skipped():
    others = [
        make_match(OTHER, THIRD, summary={"winnerId": OTHER}, match_id="n1"),
        make_match(OTHER, THIRD, summary={"resultType": "tied"}, match_id="n2"),
    ]
    assert compute_team_stats(T, others).total_matches == 0
    assert compute_team_stats(T, scenario_matches() + others) == compute_team_stats(T, scenario_matches())


@pytest.mark.parametrize("summary", [None, {}, {"resultType": "no-result"}, {"resultType": "something-else"}])
def test_unusable_results_are_excluded(summary):
    stats = compute_team_stats(T, [make_match(T, OTHER, summary=summary)])
    assert stats.total_matches == 0
    assert stats.win_rate == 0.0


def test_missing_match_data_is_excluded():
    assert compute_team_stats(T, [{"id": "m", "status": "completed"}]).total_matches == 0
    assert compute_team_stats(T, [{"id": "m", "status": "completed", "matchData": None}]).total_matches == 0


def test_tied_wins_over_winner_id():
    match = make_match(T, OTHER, summary={"resultType": "tied", "winnerId": OTHER})
    assert classify_result(match, T) == "drawn"


def test_totals_and_points_invariants():
    matches = [
        make_match(T, OTHER, summary={"winnerId": T}, match_id="1"),
        make_match(T, OTHER, summary={"winnerId": T}, match_id="2"),
        make_match(T, THIRD, summary={"winnerId": THIRD}, match_id="3"),
        make_match(THIRD, T, summary={"resultType": "tied"}, match_id="4"),
    ]
    stats = compute_team_stats(T, matches)
    assert stats.total_matches == stats.matches_won + stats.matches_lost + stats.matches_drawn
    assert stats.tournament_points == 2 * stats.matches_won + stats.matches_drawn
    assert stats.win_rate == pytest.approx(stats.matches_won / stats.total_matches * 100)


def test_foreign_winner_counts_as_loss_and_logs(caplog):
    match = make_match(T, OTHER, summary={"winnerId": THIRD})
    with caplog.at_level(logging.WARNING, logger="playarena.stats"):
        stats = compute_team_stats(T, [match])
    assert stats.matches_lost == 1
    assert "no es participante" in caplog.text


def test_foreign_winner_raises_in_strict_mode():
    match = make_match(T, OTHER, summary={"winnerId": THIRD})
    with pytest.raises(ResultIntegrityError) as exc_info:
        compute_team_stats(T, [match], strict=True)
    assert exc_info.value.winner_id == THIRD


def test_accepts_orm_like_objects():
    class FakeMatch:
        id = "orm-1"
        status = "completed"
        match_data = {"team1Id": T, "team2Id": OTHER, "resultSummary": {"winnerId": T}}

    assert compute_team_stats(T, [FakeMatch()]).matches_won == 1
