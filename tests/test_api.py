import json

import pytest
from fastapi.testclient import TestClient

from footystats.api.main import create_app
from footystats.api.params import validate_pagination
from footystats.data.match_store import MatchStore
from footystats.errors import ValidationFailureError
from footystats.services.match_service import MatchService


@pytest.fixture
def client(dataset_path) -> TestClient:
    return TestClient(create_app(MatchStore(dataset_path)))


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_matches_envelope(client):
    response = client.get("/matches")
    assert response.status_code == 200

    body = response.json()
    assert body["success"] is True
    data = body["data"]

    # Newest first
    assert [m["id"] for m in data["matches"]] == [4, 3, 2, 1]
    assert data["matches"][0]["score"] == {"home": None, "away": None}
    assert data["pagination"] == {
        "current_page": 1,
        "page_size": 100,
        "total_pages": 1,
        "total_matches": 4,
        "has_next_page": False,
        "has_previous_page": False,
    }
    assert data["statistics"]["both_teams_scored_percentage"] == 50.0
    assert data["available_teams"] == ["Arsenal", "Chelsea", "Liverpool"]
    assert "prediction" not in data


def test_root_serves_match_listing(client):
    assert client.get("/").json()["data"]["pagination"]["total_matches"] == 4


def test_filters_and_pagination(client):
    params = {"team": "ARSENAL", "page": 2, "page_size": 2}
    response = client.get("/matches", params=params)
    data = response.json()["data"]

    assert data["pagination"]["total_matches"] == 3
    assert data["pagination"]["total_pages"] == 2
    assert data["pagination"]["has_previous_page"] is True
    assert [m["id"] for m in data["matches"]] == [1]
    # Statistics cover every filtered match, not just the page.
    assert data["statistics"]["head_to_head"]["home_wins"] == 1
    assert data["statistics"]["head_to_head"]["away_wins"] == 1
    assert data["statistics"]["head_to_head"]["draws"] == 1


def test_date_filter_is_lower_bound(client):
    data = client.get("/matches", params={"date": "2023-06-01"}).json()["data"]
    assert sorted(m["id"] for m in data["matches"]) == [2, 3, 4]


def test_prediction_included_when_both_teams_given(client):
    params = {"home_team": "arsenal", "away_team": "Chelsea"}
    data = client.get("/matches", params=params).json()["data"]

    assert [m["id"] for m in data["matches"]] == [1]
    prediction = data["prediction"]
    assert prediction["confidence_level"] == 30.0
    assert prediction["winner_prediction"]["predicted_winner"] == "arsenal"
    assert prediction["winner_prediction"]["confidence"] == 50.0
    assert prediction["expected_goals"] == {"home": 1.0, "away": 1.0}
    assert prediction["form_analysis"] == {"home_form": 44.44, "away_form": 11.11}
    assert prediction["both_teams_to_score_probability"] == 100.0


def test_invalid_pagination_returns_422(client):
    response = client.get("/matches", params={"page_size": 0})
    assert response.status_code == 422

    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == 422
    assert "page_size" in body["error"]["validation_errors"]


def test_error_body_is_built_from_exception(client):
    body = client.get("/matches", params={"page": "0"}).json()

    with pytest.raises(ValidationFailureError) as excinfo:
        validate_pagination({"page": "0"})

    error = dict(body["error"])
    assert error.pop("timestamp")
    assert error == excinfo.value.to_dict()
    assert set(error) == {"message", "code", "validation_errors"}


def test_date_filter_keeps_calendar_day_as_written(client):
    params = {"date": "2023-06-01T23:30:00-05:00"}
    data = client.get("/matches", params=params).json()["data"]
    assert sorted(m["id"] for m in data["matches"]) == [2, 3, 4]


def test_missing_dataset_returns_404_without_leaking_paths(tmp_path):
    missing = tmp_path / "secret-location.json"
    client = TestClient(create_app(MatchStore(missing)))

    response = client.get("/matches")
    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == 404
    assert "secret-location" not in response.text


def test_unexpected_errors_are_generic(client, monkeypatch):
    def boom(self):
        raise RuntimeError("internal detail")

    monkeypatch.setattr(MatchService, "get_available_teams", boom)
    client = TestClient(client.app, raise_server_exceptions=False)

    response = client.get("/matches")
    assert response.status_code == 500
    assert response.json()["error"]["message"] == "An unexpected error occurred"
    assert "internal detail" not in response.text


def test_teams_endpoints(client):
    teams = client.get("/teams").json()["data"]
    assert teams == {"teams": ["Arsenal", "Chelsea", "Liverpool"], "count": 3}

    data = client.get("/teams/liverpool/matches").json()["data"]
    assert data["count"] == 2
    assert [m["id"] for m in data["matches"]] == [4, 3]


def test_prediction_endpoint(client):
    params = {"home_team": "Chelsea", "away_team": "Liverpool"}
    response = client.get("/prediction", params=params)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["confidence_level"] == 30.0
    # The only meeting has no result: all outcomes sit at 0%, home wins the tie.
    assert data["winner_prediction"]["predicted_winner"] == "Chelsea"
    assert data["winner_prediction"]["confidence"] == 0.0
    assert data["head_to_head_stats"]["home_wins"] == 0

    response = client.get("/prediction", params={"home_team": "Chelsea"})
    assert response.status_code == 422
    assert set(response.json()["error"]["validation_errors"]) == {"away_team"}


def test_reload(client, dataset_path):
    assert client.get("/teams").json()["data"]["count"] == 3

    dataset_path.write_text(
        json.dumps({"matches": [{"home_team": "Everton", "away_team": "Fulham"}]}),
        encoding="utf-8",
    )
    assert client.get("/teams").json()["data"]["count"] == 3

    response = client.post("/reload")
    assert response.status_code == 200
    assert response.json()["data"] == {"status": "reloaded", "total_matches": 1}
    assert client.get("/teams").json()["data"]["teams"] == ["Everton", "Fulham"]


def test_cors_headers(client):
    response = client.get("/health", headers={"Origin": "https://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"
