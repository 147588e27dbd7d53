from tourscore.scoring.player_stats import (
    calculate_aggregate_player_stats,
    calculate_detailed_player_stats,
    calculate_hole_winners,
)
from tourscore.scoring.streaks import Streak
from tourscore.tests.factories import make_round, player_record


def test_detailed_stats_end_to_end() -> None:
    round_ = make_round(scores={"p1": player_record("p1", [3, 3, 4, 5])})

    stats = calculate_detailed_player_stats(round_, "p1")

    assert stats is not None
    assert stats.birdie_count == 2
    assert stats.par_count == 1
    assert stats.bogey_count == 1
    assert stats.best_hole is not None
    assert (stats.best_hole.hole_number, stats.best_hole.score) == (1, 3)
    assert stats.best_hole.to_par == -1
    assert stats.worst_hole is not None
    assert stats.worst_hole.hole_number == 4
    assert stats.current_streak == Streak(type="bogey", length=1)


def test_detailed_stats_missing_player() -> None:
    round_ = make_round(scores={"p1": player_record("p1", [4, 4, 4, 4])})

    assert calculate_detailed_player_stats(round_, "p2") is None


def test_streak_does_not_bridge_unplayed_hole() -> None:
    round_ = make_round(scores={"p1": player_record("p1", [3, None, 3, 4])})

    stats = calculate_detailed_player_stats(round_, "p1")

    assert stats is not None
    assert stats.birdie_count == 2
    assert stats.current_streak == Streak(type="par", length=1)

    trailing = make_round(scores={"p1": player_record("p1", [3, None, 3])})
    trailing_stats = calculate_detailed_player_stats(trailing, "p1")
    assert trailing_stats is not None
    assert trailing_stats.current_streak == Streak(type="birdie", length=1)


def test_front_and_back_nine_split() -> None:
    pars = [4] * 18
    scores = [3] + [4] * 8 + [5, 6] + [4] * 7
    round_ = make_round(pars=pars, scores={"p1": player_record("p1", scores)})

    stats = calculate_detailed_player_stats(round_, "p1")

    assert stats is not None
    assert stats.front9.holes_played == 9
    assert stats.front9.score == 35
    assert stats.front9.to_par == -1
    assert stats.front9.birdies == 1
    assert stats.back9.holes_played == 9
    assert stats.back9.to_par == 3
    assert stats.back9.bogeys == 1
    assert stats.double_bogey_or_worse == 1


def test_detailed_stats_serialise_camel_case() -> None:
    round_ = make_round(scores={"p1": player_record("p1", [2, 4, 4, 4])})

    stats = calculate_detailed_player_stats(round_, "p1")

    assert stats is not None
    payload = stats.model_dump(by_alias=True)
    assert payload["eagleOrBetter"] == 1
    assert payload["bestHole"]["holeNumber"] == 1
    assert payload["currentStreak"] == {"type": "par", "length": 3}


def test_hole_winners_ties_and_single_winner() -> None:
    round_ = make_round(
        scores={
            "p1": player_record("p1", [3, 4, None, 5]),
            "p2": player_record("p2", [3, 5, None, 4]),
        }
    )

    winners = calculate_hole_winners(round_)

    assert [w.hole_number for w in winners] == [1, 2, 4]
    first, second, fourth = winners
    assert first.is_tied is True
    assert first.winner_ids == ["p1", "p2"]
    assert first.to_par == -1
    assert second.is_tied is False
    assert second.winner_ids == ["p1"]
    assert fourth.winner_ids == ["p2"]


def test_hole_winners_subset_of_players() -> None:
    round_ = make_round(
        scores={
            "p1": player_record("p1", [3, 4, 4, 4]),
            "p2": player_record("p2", [5, 5, 5, 5]),
        }
    )

    winners = calculate_hole_winners(round_, ["p2"])

    assert all(w.winner_ids == ["p2"] for w in winners)
    assert len(winners) == 4


def test_aggregate_skips_match_play_rounds() -> None:
    stroke = make_round("r1", scores={"p1": player_record("p1", [3, 4, 4, 5])})
    better = make_round("r2", scores={"p1": player_record("p1", [3, 3, 4, 4])})
    match = make_round(
        "r3",
        isMatchPlay=True,
        scores={"p1": player_record("p1", [2, 2, 2, 2])},
    )
    absent = make_round("r4", scores={"p2": player_record("p2", [4, 4, 4, 4])})

    aggregate = calculate_aggregate_player_stats([stroke, better, match, absent], "p1")

    assert aggregate.rounds_played == 2
    assert aggregate.total_birdies == 3
    assert aggregate.total_eagle_or_better == 0
    assert aggregate.average_score_per_round == 15
    assert aggregate.best_round_score == 14
    assert aggregate.best_round_id == "r2"


def test_aggregate_without_rounds_is_zeroed() -> None:
    aggregate = calculate_aggregate_player_stats([], "p1")

    assert aggregate.rounds_played == 0
    assert aggregate.best_round_score == 0
    assert aggregate.average_score_per_round == 0
    assert aggregate.best_round_id is None


def test_worst_hole_keeps_first_of_tied_scores() -> None:
    round_ = make_round(scores={"p1": player_record("p1", [5, 3, 5, 4])})

    stats = calculate_detailed_player_stats(round_, "p1")

    assert stats is not None
    assert stats.worst_hole is not None
    assert (stats.worst_hole.hole_number, stats.worst_hole.score) == (1, 5)
    assert stats.best_hole is not None
    assert stats.best_hole.hole_number == 2
