"""HTTP tests for the journal API."""

import pytest
from sqlmodel import SQLModel

DAY = "2024-01-01"


def _schedule(client, hours=(9, 10, 11), kpi=5, min_hours=3, day=DAY):
    return client.post(
        "/daily-schedule",
        json={"date": day, "trading_hours": list(hours), "kpi_per_hour": kpi, "min_hours": min_hours},
    )


def _record(client, hour, balance, kpi=4, token="BTC", day=DAY):
    return client.post(
        "/trading-sessions",
        json={"date": day, "hour": hour, "balance": balance, "token": token, "kpi": kpi},
    )


# ---------------------------------------------------------------------------
# 1. Daily schedule
# ---------------------------------------------------------------------------

class TestDailySchedule:
    def test_create_and_fetch(self, client):
        resp = _schedule(client, hours=(11, 9, 10))
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["id"] == body["schedule"]["id"]
        assert body["schedule"]["trading_hours"] == [9, 10, 11]

        fetched = client.get("/daily-schedule", params={"date": DAY}).json()
        assert fetched["trading_hours"] == [9, 10, 11]
        assert fetched["kpi_per_hour"] == 5

    def test_missing_schedule_is_null(self, client):
        resp = client.get("/daily-schedule", params={"date": DAY})
        assert resp.status_code == 200
        assert resp.json() is None

    def test_date_required(self, client):
        resp = client.get("/daily-schedule")
        assert resp.status_code == 400
        assert resp.json()["error"] == "Date parameter required"

    def test_replace(self, client):
        _schedule(client, hours=(9, 10, 11))
        _schedule(client, hours=(20, 21), kpi=8, min_hours=2)
        fetched = client.get("/daily-schedule", params={"date": DAY}).json()
        assert fetched["trading_hours"] == [20, 21]
        assert fetched["min_hours"] == 2

    def test_too_few_hours(self, client):
        resp = _schedule(client, hours=(9, 10), min_hours=3)
        assert resp.status_code == 400
        assert resp.json()["error"] == "Minimum 3 hours required"
        assert client.get("/daily-schedule", params={"date": DAY}).json() is None

    def test_missing_fields(self, client):
        resp = client.post("/daily-schedule", json={"date": DAY, "trading_hours": [9]})
        assert resp.status_code == 400
        assert "error" in resp.json()


# ---------------------------------------------------------------------------
# 2. Trading sessions
# ---------------------------------------------------------------------------

class TestTradingSessions:
    def test_create_applies_penalty(self, client):
        assert _record(client, 4, -10).status_code == 200
        resp = _record(client, 5, 30)
        assert resp.status_code == 200
        assert resp.json()["success"] is True

        sessions = client.get("/trading-sessions", params={"date": DAY}).json()
        assert [s["hour"] for s in sessions] == [4, 5]
        assert sessions[0]["penalty"] == 0
        assert sessions[1]["penalty"] == 18
        assert sessions[1]["token"] == "BTC"

    def test_token_optional(self, client):
        resp = client.post("/trading-sessions", json={"date": DAY, "hour": 3, "balance": 1, "kpi": 4})
        assert resp.status_code == 200
        assert client.get("/trading-sessions", params={"date": DAY}).json()[0]["token"] == ""

    def test_list_without_date_newest_first(self, client):
        _record(client, 9, 1, day="2024-01-01")
        _record(client, 8, 1, day="2024-01-02")
        _record(client, 10, 1, day="2024-01-02")
        sessions = client.get("/trading-sessions").json()
        assert [(s["date"], s["hour"]) for s in sessions] == [
            ("2024-01-02", 10),
            ("2024-01-02", 8),
            ("2024-01-01", 9),
        ]

    def test_update(self, client):
        session_id = _record(client, 9, 10).json()["id"]
        resp = client.put(
            f"/trading-sessions/{session_id}",
            json={"date": DAY, "hour": 9, "balance": -4, "token": "ETH", "kpi": 4},
        )
        assert resp.status_code == 200
        assert resp.json() == {"success": True}

        stored = client.get("/trading-sessions", params={"date": DAY}).json()[0]
        assert stored["balance"] == -4
        assert stored["token"] == "ETH"

    def test_update_unknown_id(self, client):
        resp = client.put(
            "/trading-sessions/999",
            json={"date": DAY, "hour": 9, "balance": -4, "token": "ETH", "kpi": 4},
        )
        assert resp.status_code == 404
        assert resp.json()["error"] == "Session not found"
        assert client.get("/trading-sessions").json() == []

    def test_invalid_hour(self, client):
        resp = _record(client, 24, 1)
        assert resp.status_code == 400

    def test_required_minimum(self, client):
        _record(client, 4, -10)
        body = client.get(
            "/trading-sessions/required-minimum",
            params={"date": DAY, "hour": 5, "kpi": 4},
        ).json()
        assert body["required_minimum"] == 18
        assert body["previous_loss"] == 10

        body = client.get(
            "/trading-sessions/required-minimum",
            params={"date": DAY, "hour": 7, "kpi": 4},
        ).json()
        assert body["required_minimum"] == 4


# ---------------------------------------------------------------------------
# 3. Grid, statistics, failures
# ---------------------------------------------------------------------------

def test_grid(client):
    _schedule(client, hours=(9, 10, 11), kpi=4)
    _record(client, 9, -6)

    slots = client.get("/daily-schedule/grid", params={"date": DAY}).json()
    assert [s["label"] for s in slots] == ["09:00", "10:00", "11:00"]
    assert slots[0]["session"]["balance"] == -6
    assert slots[0]["required_minimum"] == 4
    assert slots[1]["session"] is None
    assert slots[1]["previous_loss"] == 6
    assert slots[1]["required_minimum"] == 14
    assert slots[2]["required_minimum"] == 4


def test_grid_without_schedule(client):
    resp = client.get("/daily-schedule/grid", params={"date": DAY})
    assert resp.status_code == 200
    assert resp.json() is None


def test_statistics(client):
    _record(client, 9, 50, day="2024-03-15")
    _record(client, 10, 0, day="2024-03-15")
    _record(client, 9, -20, day="2024-03-01")
    _record(client, 9, 5, day="2024-02-01")

    stats = client.get("/statistics", params={"date": "2024-03-15"}).json()
    assert stats == {
        "daily_balance": 50,
        "monthly_balance": 30,
        "yearly_balance": 35,
        "total_sessions": 4,
        "profit_sessions": 2,
        "loss_sessions": 1,
    }


def test_statistics_default_today(client):
    resp = client.get("/statistics")
    assert resp.status_code == 200
    assert resp.json()["total_sessions"] == 0


def test_statistics_bad_date(client):
    assert client.get("/statistics", params={"date": "March"}).status_code == 400


def test_store_failure_is_500(client, engine):
    SQLModel.metadata.drop_all(engine)
    resp = client.get("/trading-sessions")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch sessions"}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


# ---------------------------------------------------------------------------
# 4. Non-finite numbers and unexpected failures
# ---------------------------------------------------------------------------

def _post_raw(client, url, raw):
    return client.post(url, content=raw, headers={"Content-Type": "application/json"})


@pytest.mark.parametrize("literal", ["Infinity", "-Infinity", "NaN"])
def test_schedule_rejects_non_finite_kpi(client, literal):
    resp = _post_raw(
        client,
        "/daily-schedule",
        f'{{"date": "{DAY}", "trading_hours": [9], "kpi_per_hour": {literal}, "min_hours": 1}}',
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid request"
    assert client.get("/daily-schedule", params={"date": DAY}).json() is None


@pytest.mark.parametrize("field", ["balance", "kpi"])
@pytest.mark.parametrize("literal", ["Infinity", "-Infinity", "NaN"])
def test_session_rejects_non_finite_numbers(client, field, literal):
    values = {"balance": "10", "kpi": "4"}
    values[field] = literal
    raw = (
        f'{{"date": "{DAY}", "hour": 9, "token": "BTC", '
        f'"balance": {values["balance"]}, "kpi": {values["kpi"]}}}'
    )
    resp = _post_raw(client, "/trading-sessions", raw)
    assert resp.status_code == 400
    assert client.get("/trading-sessions").json() == []


def test_update_rejects_non_finite_balance(client):
    session_id = _record(client, 9, 10).json()["id"]
    resp = client.put(
        f"/trading-sessions/{session_id}",
        content=f'{{"date": "{DAY}", "hour": 9, "balance": -Infinity, "kpi": 4}}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert client.get("/trading-sessions", params={"date": DAY}).json()[0]["balance"] == 10


def test_unexpected_error_is_json_500(engine, monkeypatch):
    from fastapi.testclient import TestClient
    from journal.api import statistics as statistics_api
    from journal.main import app

    def _boom(session, today):
        raise RuntimeError("boom")

    monkeypatch.setattr(statistics_api, "compute_statistics", _boom)
    app.state.engine = engine
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            resp = test_client.get("/statistics", params={"date": "2024-03-15"})
    finally:
        app.state.engine = None

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
