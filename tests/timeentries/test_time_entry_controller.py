from __future__ import annotations

from datetime import date, timedelta
from types import SimpleNamespace

import pytest
from flask import Flask

from src.tyotrack.tyotrack.core.enums import EntryStatus
from src.tyotrack.tyotrack.main import create_app
from src.tyotrack.tyotrack.timeentries.controller import register


@pytest.fixture
def client(service):
    app = Flask(__name__)
    app.secret_key = "test-secret"
    register(app, SimpleNamespace(time_entry_service=service))
    return app.test_client()


def _login(client, *, user_id=2, role="EMPLOYEE", company_id=1):
    with client.session_transaction() as sess:
        sess["user_id"] = user_id
        sess["role"] = role
        sess["company_id"] = company_id


def _yesterday() -> str:
    return (date.today() - timedelta(days=1)).isoformat()


def test_log_time_requires_login(client):
    resp = client.post("/api/time-entries", json={})
    assert resp.status_code == 401


def test_log_time_creates_split_entries(client, entries_repo):
    _login(client)

    resp = client.post(
        "/api/time-entries",
        json={"date": _yesterday(), "start_time": "22:00", "end_time": "02:00", "project_id": 1},
    )

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["success"] is True
    assert body["message"] == "Split shift logged successfully!"
    assert len(body["entry_ids"]) == 2
    assert body["status"] == "PENDING"
    assert len(entries_repo.rows) == 2


def test_future_entry_returns_reason(client):
    _login(client)
    tomorrow = (date.today() + timedelta(days=1)).isoformat()

    resp = client.post(
        "/api/time-entries",
        json={"date": tomorrow, "start_time": "09:00", "end_time": "10:00", "project_id": 1},
    )

    assert resp.status_code == 400
    assert resp.get_json()["reason"] == "FUTURE_DATE"


def test_bad_time_and_bad_date_are_client_errors(client):
    _login(client)

    bad_time = client.post(
        "/api/time-entries",
        json={"date": _yesterday(), "start_time": "9am", "end_time": "10:00", "project_id": 1},
    )
    bad_date = client.post(
        "/api/time-entries",
        json={"date": "yesterday", "start_time": "09:00", "end_time": "10:00", "project_id": 1},
    )

    assert bad_time.status_code == 400
    assert bad_date.status_code == 400


def test_employee_cannot_approve(client, entries_repo, make_entry):
    entries_repo.add(make_entry(entry_id=5))
    _login(client)

    resp = client.post("/api/time-entries/5/approve")

    assert resp.status_code == 403
    assert entries_repo.get_by_id(5).status == EntryStatus.PENDING


def test_admin_approves_then_cannot_reject(client, entries_repo, make_entry):
    entries_repo.add(make_entry(entry_id=5))
    _login(client, user_id=1, role="ADMIN")

    approved = client.post("/api/time-entries/5/approve")
    again = client.post("/api/time-entries/5/reject")

    assert approved.status_code == 200
    assert approved.get_json()["entry"]["status"] == "APPROVED"
    assert again.status_code == 409
    assert entries_repo.get_by_id(5).status == EntryStatus.APPROVED


def test_missing_entry_is_404(client):
    _login(client, user_id=1, role="ADMIN")
    assert client.post("/api/time-entries/999/reject").status_code == 404


def test_pending_list_for_admin(client, entries_repo, make_entry):
    entries_repo.add(make_entry(entry_id=5))
    entries_repo.add(make_entry(entry_id=6, status=EntryStatus.APPROVED))
    _login(client, user_id=1, role="ADMIN")

    resp = client.get("/api/time-entries/pending")

    assert resp.status_code == 200
    assert [e["id"] for e in resp.get_json()["entries"]] == [5]


def test_my_entries_include_summary(client, entries_repo, make_entry):
    entries_repo.add(make_entry(entry_id=5, status=EntryStatus.APPROVED))
    entries_repo.add(make_entry(entry_id=6, work_date=date(2025, 6, 9)))
    _login(client)

    resp = client.get("/api/time-entries/me?month=2025-06")

    body = resp.get_json()
    assert resp.status_code == 200
    assert len(body["entries"]) == 2
    assert body["summary"]["month"] == "2025-06"
    assert body["summary"]["total_hours"] == 8
    assert body["summary"]["entry_count"] == 1


def test_my_summary_covers_the_requested_month_only(client, entries_repo, make_entry):
    entries_repo.add(make_entry(entry_id=5, status=EntryStatus.APPROVED))
    entries_repo.add(make_entry(entry_id=6, work_date=date(2025, 5, 31), status=EntryStatus.APPROVED))
    _login(client)

    resp = client.get("/api/time-entries/me?month=2025-05&limit=1")

    body = resp.get_json()
    assert [e["id"] for e in body["entries"]] == [5]
    assert body["summary"]["month"] == "2025-05"
    assert body["summary"]["entry_count"] == 1


@pytest.mark.parametrize("query", ["limit=0", "limit=-5", "limit=100000", "month=2025-13", "month=june"])
def test_my_entries_reject_bad_query(client, query):
    _login(client)

    resp = client.get(f"/api/time-entries/me?{query}")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_create_app_registers_routes(service, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    app = create_app(SimpleNamespace(time_entry_service=service))

    rules = {r.rule for r in app.url_map.iter_rules()}
    assert "/api/time-entries" in rules
    assert "/api/time-entries/<int:entry_id>/approve" in rules
    assert app.config["TESTING"] is True
