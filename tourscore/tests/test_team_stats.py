import pytest

from tourscore.scoring.team_scores import (
    resolve_team_round_score,
    team_score_method,
)
from tourscore.scoring.team_stats import (
    calculate_momentum,
    calculate_team_stats,
    get_momentum_indicator,
)
from tourscore.tours.models import Player, Team
from tourscore.tests.factories import (
    make_round,
    make_tour,
    player_record,
    two_player_team,
)


def test_missing_team_returns_none() -> None:
    tour = make_tour(teams=[])

    assert calculate_team_stats(tour, "nonexistent") is None


def test_team_without_players_has_no_data() -> None:
    team = Team(id="empty", name="Empty")
    tour = make_tour(teams=[team])

    stats = calculate_team_stats(tour, "empty")

    assert stats is not None
    assert stats.momentum == "no-data"
    assert stats.rounds_played == 0
    assert stats.total_score == 0
    assert stats.player_stats == []


def test_stroke_play_sums_member_totals() -> None:
    team, p1, p2 = two_player_team()
    round_ = make_round(
        status="completed",
        scores={
            p1.id: player_record(p1.id, [4, 4, 4, 4]),
            p2.id: player_record(p2.id, [5, 5, 5, 5]),
        },
    )
    tour = make_tour(format="team", players=[p1, p2], teams=[team], rounds=[round_])

    stats = calculate_team_stats(tour, team.id)

    assert stats is not None
    assert stats.total_score == 36
    assert stats.to_par == 36 - 32
    assert len(stats.player_stats) == 2
    assert [ps.player.id for ps in stats.best_performers] == [p1.id, p2.id]
    assert stats.player_stats[1].to_par == 4


def test_best_ball_takes_lowest_per_hole() -> None:
    team, p1, p2 = two_player_team()
    round_ = make_round(
        format="best-ball",
        status="completed",
        scores={
            p1.id: player_record(p1.id, [3, 5, 4, 6]),
            p2.id: player_record(p2.id, [5, 3, 4, 4]),
        },
    )
    tour = make_tour(format="team", players=[p1, p2], teams=[team], rounds=[round_])

    stats = calculate_team_stats(tour, team.id)

    assert stats is not None
    assert stats.total_score == 14
    assert stats.to_par == -2


def test_scramble_uses_team_record() -> None:
    team, p1, p2 = two_player_team()
    round_ = make_round(
        format="scramble",
        scores={
            f"team_{team.id}": {
                "teamId": team.id,
                "isTeamScore": True,
                "scores": [4, 3, 4, 4],
                "totalScore": 15,
                "totalToPar": -1,
            }
        },
    )
    tour = make_tour(format="team", players=[p1, p2], teams=[team], rounds=[round_])

    stats = calculate_team_stats(tour, team.id)

    assert stats is not None
    assert stats.total_score == 15
    assert stats.to_par == -1
    assert stats.round_scores[0].method == "team-score"
    assert stats.player_stats == []


def test_match_play_rounds_count_for_players_not_team_totals() -> None:
    team, p1, p2 = two_player_team()
    match_round = make_round(
        "mp",
        format="singles-match-play",
        ryderCup={
            "matches": [
                {
                    "id": "m1",
                    "roundId": "mp",
                    "teamA": {"id": team.id, "playerIds": [p1.id]},
                    "teamB": {"id": "other", "playerIds": ["x"]},
                    "holes": [{"holeNumber": 1, "teamAScore": 4, "teamBScore": 5}],
                }
            ]
        },
    )
    stroke_round = make_round("sp", scores={p1.id: player_record(p1.id, [4, 4, 4, 4])})
    tour = make_tour(
        players=[p1, p2], teams=[team], rounds=[match_round, stroke_round]
    )

    stats = calculate_team_stats(tour, team.id)

    assert stats is not None
    assert stats.rounds_played == 1
    p1_stats = next(ps for ps in stats.player_stats if ps.player.id == p1.id)
    assert p1_stats.match_play_rounds == 1
    assert p1_stats.stroke_play_rounds == 1
    assert p1_stats.rounds_played == 2
    assert p1_stats.best_round_id == "sp"


@pytest.mark.parametrize(
    ("scores", "momentum"),
    [
        ([], "no-data"),
        ([80], "no-data"),
        ([90, 80], "improving"),
        ([80, 90], "declining"),
        ([80, 81], "stable"),
        ([100, 80, 81, 80], "stable"),
        ([95, 90, 84], "improving"),
    ],
)
def test_momentum(scores: list, momentum: str) -> None:
    assert calculate_momentum(scores) == momentum


def test_momentum_over_team_rounds() -> None:
    team, p1, p2 = two_player_team()
    rounds = [
        make_round(
            f"r{i}",
            scores={
                p1.id: player_record(p1.id, [s, s, s, s]),
                p2.id: player_record(p2.id, [s, s, s, s]),
            },
        )
        for i, s in enumerate([6, 5, 4])
    ]
    tour = make_tour(players=[p1, p2], teams=[team], rounds=rounds)

    stats = calculate_team_stats(tour, team.id)

    assert stats is not None
    assert stats.recent_scores == [48, 40, 32]
    assert stats.momentum == "improving"
    assert stats.best_score == 32
    assert stats.worst_score == 48


def test_momentum_indicator() -> None:
    assert get_momentum_indicator("improving") == "📈"
    assert get_momentum_indicator("no-data") == "❓"


def test_best_performers_are_capped_and_ordered() -> None:
    team = Team(id="t4", name="Four")
    players = [Player(id=f"p{i}", name=f"P{i}", team_id=team.id) for i in range(4)]
    holes = {"p0": [4, 4, 4, 4], "p1": [5, 4, 5, 4], "p2": [3, 4, 3, 4], "p3": [5] * 4}
    round_ = make_round(
        scores={pid: player_record(pid, scores) for pid, scores in holes.items()}
    )
    tour = make_tour(players=players, teams=[team], rounds=[round_])

    stats = calculate_team_stats(tour, team.id)

    assert stats is not None
    assert [ps.player.id for ps in stats.best_performers] == ["p2", "p0", "p1"]
    averages = [ps.average_score for ps in stats.best_performers]
    assert averages == sorted(averages)


def test_team_stats_charge_par_for_whole_roster() -> None:
    team, p1, p2 = two_player_team()
    round_ = make_round(scores={p1.id: player_record(p1.id, [4, 4, 4, 4])})
    tour = make_tour(players=[p1, p2], teams=[team], rounds=[round_])

    stats = calculate_team_stats(tour, team.id)

    assert stats is not None
    assert stats.total_score == 16
    assert stats.to_par == 16 - 32


def test_team_record_without_team_flag_is_summed() -> None:
    team, p1, p2 = two_player_team()
    round_ = make_round(
        scores={
            f"team_{team.id}": {
                "teamId": team.id,
                "isTeamScore": False,
                "scores": [3, 3, 3, 3],
                "totalScore": 12,
            },
            p1.id: player_record(p1.id, [4, 4, 4, 4]),
            p2.id: player_record(p2.id, [5, 5, 5, 5]),
        }
    )

    assert team_score_method(round_, team.id) == "sum"
    resolved = resolve_team_round_score(round_, team.id, [p1.id, p2.id])
    assert resolved.score == 36
    assert resolved.to_par == 36 - 32
