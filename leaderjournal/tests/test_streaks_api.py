"""Tests for the streak HTTP endpoints."""

from fastapi.testclient import TestClient

from leaderjournal.main import app

client = TestClient(app)

NOW = "2024-01-15T18:30:00+00:00"


def test_snapshot_happy_path():
    resp = client.post(
        "/v1/streaks/snapshot",
        json={
            "entries": ["2024-01-13T09:00:00Z", {"created_at": "2024-01-14T09:00:00Z"}, "2024-01-15T09:00:00Z"],
            "now": NOW,
            "timezone": "UTC",
            "week_start": "sunday",
        },
    )

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["snapshot"]["current_streak"] == 3
    assert data["snapshot"]["longest_streak"] == 3
    assert data["snapshot"]["entries_this_week"] == 2
    assert data["motivation"] == "3 days strong! Building momentum 🔥"
    assert len(data["weekly_progress"]) == 7
    assert resp.json()["skipped"] == []


def test_snapshot_reports_skipped_entries():
    resp = client.post(
        "/v1/streaks/snapshot",
        json={"entries": ["2024-01-15T09:00:00Z", "nope", {"title": "draft"}], "now": NOW},
    )

    assert resp.status_code == 200
    skipped = resp.json()["skipped"]
    assert [s["reason"] for s in skipped] == ["unparseable_timestamp", "missing_timestamp"]


def test_snapshot_empty_entries():
    resp = client.post("/v1/streaks/snapshot", json={"entries": [], "now": NOW})

    assert resp.status_code == 200
    snapshot = resp.json()["data"]["snapshot"]
    assert snapshot["current_streak"] == 0
    assert snapshot["longest_streak"] == 0
    assert snapshot["last_active_date"] is None


def test_snapshot_requires_entries_list():
    resp = client.post("/v1/streaks/snapshot", json={"entries": None, "now": NOW})

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "validation_error"


def test_unknown_timezone_is_normalized_error():
    resp = client.post(
        "/v1/streaks/snapshot",
        json={"entries": [], "now": NOW, "timezone": "Atlantis/Lost_City"},
    )

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"]["code"] == "unknown_timezone"
    assert body["error"]["request_id"] == resp.headers.get("x-request-id")


def test_contributions_explicit_range():
    resp = client.post(
        "/v1/streaks/contributions",
        json={
            "entries": ["2024-01-02T09:00:00Z", "2024-01-02T10:00:00Z"],
            "start": "2024-01-01",
            "end": "2024-01-31",
        },
    )

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert len(data["cells"]) == 31
    assert data["cells"][1] == {"date": "2024-01-02", "count": 2, "level": "medium"}
    assert data["total_entries"] == 2


def test_contributions_preset_range():
    resp = client.post(
        "/v1/streaks/contributions",
        json={"entries": [], "range": "year_to_date", "now": NOW},
    )

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["start"] == "2024-01-01"
    assert data["end"] == "2024-01-15"
    assert {cell["level"] for cell in data["cells"]} == {"none"}


def test_contributions_start_after_end():
    resp = client.post(
        "/v1/streaks/contributions",
        json={"entries": [], "start": "2024-02-01", "end": "2024-01-01"},
    )

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "invalid_range"


def test_contributions_half_open_range_rejected():
    resp = client.post(
        "/v1/streaks/contributions",
        json={"entries": [], "start": "2024-02-01"},
    )

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "validation_error"


def test_healthz():
    resp = client.get("/healthz")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers.get("x-request-id")


def test_readyz_reports_streak_config():
    resp = client.get("/readyz")

    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    assert body["timezone"]
    assert body["week_start"] in {"monday", "sunday", "rolling_7_days"}


def test_contributions_span_is_capped():
    resp = client.post(
        "/v1/streaks/contributions",
        json={"entries": [], "start": "0001-01-01", "end": "9999-12-30"},
    )

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"]["code"] == "validation_error"
    assert "maximum" in body["error"]["message"]


def test_contributions_last_representable_days():
    resp = client.post(
        "/v1/streaks/contributions",
        json={"entries": [], "start": "9999-12-30", "end": "9999-12-31"},
    )

    assert resp.status_code == 200
    assert len(resp.json()["data"]["cells"]) == 2


def test_snapshot_skips_out_of_range_entries():
    resp = client.post(
        "/v1/streaks/snapshot",
        json={"entries": ["2024-01-15T09:00:00Z", "0001-01-01T00:00:00+05:00"], "now": NOW},
    )

    assert resp.status_code == 200
    assert resp.json()["skipped"][0]["reason"] == "out_of_range_timestamp"
    assert resp.json()["data"]["snapshot"]["current_streak"] == 1
