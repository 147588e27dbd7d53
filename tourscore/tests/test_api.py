from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from tourscore.config import reset_settings_cache
from tourscore.tests.factories import (
    make_round,
    make_tour,
    player_record,
    two_player_team,
)


def _round_payload(**fields: Any) -> Dict[str, Any]:
    round_ = make_round(
        scores={
            "p1": player_record("p1", [3, 3, 4, 5], handicapStrokes=2),
            "p2": player_record("p2", [4, 3, 5, 5]),
        },
        **fields,
    )
    return round_.model_dump(by_alias=True, mode="json")


def _tour_payload() -> Dict[str, Any]:
    team, p1, p2 = two_player_team()
    round_ = make_round(
        format="best-ball",
        status="completed",
        scores={
            p1.id: player_record(p1.id, [3, 5, 4, 6], totalToPar=2),
            p2.id: player_record(p2.id, [5, 3, 4, 4], totalToPar=0),
        },
    )
    tour = make_tour(players=[p1, p2], teams=[team], rounds=[round_])
    return tour.model_dump(by_alias=True, mode="json")


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_allocation_and_stableford(client: TestClient) -> None:
    body = _round_payload()

    allocation = client.post("/api/scoring/allocation?playerId=p1", json=body)
    stableford = client.post("/api/scoring/stableford?playerId=p2", json=body)

    assert allocation.status_code == 200
    assert allocation.json()["strokes"] == [1, 1, 0, 0]
    assert stableford.json()["points"] == 2 + 3 + 1 + 1


def test_round_stats_and_missing_player(client: TestClient) -> None:
    body = _round_payload()

    found = client.post("/api/scoring/stats?playerId=p1", json=body)
    missing = client.post("/api/scoring/stats?playerId=ghost", json=body)

    assert found.status_code == 200
    assert found.json()["birdieCount"] == 2
    assert found.json()["bestHole"]["holeNumber"] == 1
    assert missing.status_code == 404


def test_hole_winners_endpoint(client: TestClient) -> None:
    response = client.post(
        "/api/scoring/hole-winners", json={"round": _round_payload()}
    )

    assert response.status_code == 200
    winners = response.json()
    assert winners[1]["isTied"] is True
    assert winners[1]["winnerIds"] == ["p1", "p2"]


def test_match_status_endpoint(client: TestClient) -> None:
    body = {
        "match": {
            "id": "m1",
            "roundId": "r1",
            "teamA": {"id": "a", "playerIds": ["a1"]},
            "teamB": {"id": "b", "playerIds": ["b1"]},
            "holes": [{"holeNumber": 1, "teamAScore": 3, "teamBScore": 4}],
        },
        "totalHoles": 18,
        "teamAName": "USA",
    }

    response = client.post("/api/scoring/match-status", json=body)

    assert response.status_code == 200
    assert response.json()["statusText"] == "USA 1 up"
    assert response.json()["statusCode"] == "in-progress"


def test_strict_stroke_index_maps_to_422(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TOURSCORE_STRICT_STROKE_INDEX", "1")
    reset_settings_cache()
    holes = [{"number": i, "par": 4, "handicap": 1} for i in range(1, 5)]
    body = _round_payload(holeInfo=holes)

    response = client.post("/api/scoring/allocation?playerId=p1", json=body)

    assert response.status_code == 422


def test_team_stats_endpoint(client: TestClient) -> None:
    body = _tour_payload()

    found = client.post("/api/tours/stats/teams/t1", json=body)
    missing = client.post("/api/tours/stats/teams/nope", json=body)

    assert found.status_code == 200
    assert found.json()["totalScore"] == 14
    assert found.json()["momentum"] == "no-data"
    assert missing.status_code == 404


def test_player_stats_endpoint(client: TestClient) -> None:
    response = client.post("/api/tours/stats/players/t1-p1", json=_tour_payload())

    assert response.status_code == 200
    assert response.json()["roundsPlayed"] == 1
    assert response.json()["matchesWon"] == 0


def test_leaderboards(client: TestClient) -> None:
    body = _tour_payload()

    individual = client.post("/api/tours/leaderboard", json=body)
    team = client.post("/api/tours/leaderboard?type=team", json=body)
    missing = client.post("/api/tours/leaderboard?roundId=nope", json=body)

    assert individual.status_code == 200
    assert [e["player"]["id"] for e in individual.json()] == ["t1-p2", "t1-p1"]
    assert team.json()[0]["totalScore"] == 14
    assert team.json()[0]["position"] == 1
    assert missing.status_code == 404


def test_progress_and_validate(client: TestClient) -> None:
    body = _tour_payload()

    progress = client.post("/api/tours/rounds/r1/progress", json=body)
    validation = client.post("/api/tours/rounds/r1/validate", json=body)

    assert progress.json() == {
        "completed": 1,
        "total": 1,
        "percentage": 100,
        "type": "teams",
    }
    assert validation.json() == {"valid": True, "errors": []}


def test_api_key_required_when_enabled(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("REQUIRE_API_KEY", "1")
    monkeypatch.setenv("TOURSCORE_API_KEYS", "sekret")
    reset_settings_cache()
    body = _tour_payload()

    denied = client.post("/api/tours/stats/teams/t1", json=body)
    allowed = client.post(
        "/api/tours/stats/teams/t1", json=body, headers={"x-api-key": "sekret"}
    )
    via_query = client.post("/api/tours/stats/teams/t1?apiKey=sekret", json=body)

    assert denied.status_code == 401
    assert allowed.status_code == 200
    assert via_query.status_code == 200
