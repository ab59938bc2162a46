from __future__ import annotations

import pytest
from flask import Flask

from salary_tracker.container import build_container
from salary_tracker.main import create_app, register_error_handlers
from salary_tracker.records.controller import register as register_records
from salary_tracker.settings.controller import register as register_settings
from salary_tracker.storage.key_value_store import MemoryKeyValueStore


@pytest.fixture
def client():
    app = Flask(__name__)
    app.config["TESTING"] = True
    container = build_container(data_file="", store=MemoryKeyValueStore())
    register_error_handlers(app)
    register_records(app, container)
    register_settings(app, container)
    return app.test_client()


def add(client, **overrides):
    payload = {"date": "2025-03-03", "check_in": "09:00", "check_out": "18:00", "day_type": "NORMAL"}
    payload.update(overrides)
    return client.post("/api/records", json=payload)


def test_add_record_returns_breakdown_and_next_date(client):
    resp = add(client)

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["record"]["salary"] == 1600
    assert body["record"]["regular_hours"] == "8.00"
    assert body["record"]["break_minutes"] == 60
    assert body["record"]["applied_rate"] == "200"
    assert body["next_date"] == "2025-03-04"


def test_summary_and_months_follow_filters(client):
    add(client)
    add(client, date="2025-03-04", check_out="21:00")
    add(client, date="2025-04-01", day_type="SICK_LEAVE")

    march = client.get("/api/summary?month=2025-03").get_json()["totals"]
    assert march["count"] == 2
    assert march["salary"] == 1600 + 2470
    assert march["overtime_total_hours"] == "3.00"

    assert client.get("/api/summary?month=all").get_json()["totals"]["count"] == 3
    assert client.get("/api/summary?start=2025-03-04&end=2025-04-30").get_json()["totals"]["salary"] == 2470
    assert client.get("/api/months").get_json()["months"] == ["2025-04", "2025-03"]


def test_settings_change_keeps_old_records(client):
    add(client)

    resp = client.put("/api/settings", json={"hourly_rate": "250"})
    assert resp.status_code == 200
    assert resp.get_json()["settings"]["hourly_rate"] == "250"

    add(client, date="2025-03-04")

    salaries = [r["salary"] for r in client.get("/api/records").get_json()["records"]]
    assert salaries == [2000, 1600]


def test_delete_single_and_bulk(client):
    first = add(client).get_json()["record"]["id"]
    add(client, date="2025-03-10")
    add(client, date="2025-03-20")

    assert client.delete(f"/api/records/{first}").status_code == 200
    assert client.delete(f"/api/records/{first}").status_code == 404

    resp = client.post("/api/records/delete", json={"start": "2025-03-15", "end": "2025-03-31"})
    assert resp.get_json()["removed"] == 1
    assert len(client.get("/api/records").get_json()["records"]) == 1


def test_validation_errors_are_400(client):
    assert add(client, check_in="9am").status_code == 400
    assert client.put("/api/settings", json={"hourly_rate": "-1"}).status_code == 400
    assert client.get("/api/summary?month=March").status_code == 400
    assert client.post("/api/records/delete", json={}).status_code == 400
    assert client.post("/api/records/delete", json={"ids": "abc"}).status_code == 400
    assert client.post("/api/records/delete", json={"ids": "12"}).status_code == 400


def test_bulk_delete_requires_a_list_of_ids(client):
    ids = [add(client, date=f"2025-03-0{d}").get_json()["record"]["id"] for d in (1, 2)]

    assert client.post("/api/records/delete", json={"ids": "12"}).status_code == 400
    assert client.post("/api/records/delete", json={"ids": 12}).status_code == 400
    assert client.post("/api/records/delete", json={"ids": {"1": 1}}).status_code == 400
    assert len(client.get("/api/records").get_json()["records"]) == 2

    resp = client.post("/api/records/delete", json={"ids": ids})
    assert resp.get_json()["removed"] == 2


def test_export_endpoints(client):
    add(client)

    tsv = client.get("/api/export.tsv?month=2025-03")
    assert tsv.mimetype == "text/tab-separated-values"
    assert tsv.get_data(as_text=True).strip().split("\n")[-1].startswith("Total\t")

    xlsx = client.get("/api/export.xlsx")
    assert xlsx.status_code == 200
    assert xlsx.data[:2] == b"PK"


def test_create_app_uses_configured_data_file(tmp_path, monkeypatch):
    import config.testing

    data_file = tmp_path / "app.json"
    monkeypatch.setattr(config.testing, "DATA_FILE", str(data_file))

    app = create_app("config.testing")
    client = app.test_client()

    assert client.get("/api/settings").get_json()["settings"]["hourly_rate"] == "200"
    assert add(client).status_code == 201
    assert data_file.exists()
