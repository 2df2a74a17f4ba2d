from __future__ import annotations


PERIOD = {"start_date": "2024-01-15", "end_date": "2024-01-28"}


def test_upsert_overwrites_same_period(client, auth_headers):
    first = client.put("/api/settlements", json={**PERIOD, "actual_amount": 1500, "note": "first"}, headers=auth_headers)
    second = client.put("/api/settlements", json={**PERIOD, "actual_amount": 1620.4, "note": "corrected"}, headers=auth_headers)

    assert first.status_code == 200
    assert second.json()["id"] == first.json()["id"]

    rows = client.get("/api/settlements", headers=auth_headers).json()
    assert len(rows) == 1
    assert rows[0]["actual_amount"] == 1620.4
    assert rows[0]["note"] == "corrected"


def test_distinct_periods_are_kept_apart(client, auth_headers):
    client.put("/api/settlements", json={**PERIOD, "actual_amount": 1500}, headers=auth_headers)
    client.put("/api/settlements", json={"start_date": "2024-01-01", "end_date": "2024-01-14", "actual_amount": 1400}, headers=auth_headers)

    rows = client.get("/api/settlements", headers=auth_headers).json()
    assert [r["start_date"] for r in rows] == ["2024-01-15", "2024-01-01"]


def test_lookup(client, auth_headers):
    assert client.get("/api/settlements/lookup", params=PERIOD, headers=auth_headers).status_code == 404

    client.put("/api/settlements", json={**PERIOD, "actual_amount": 99.5}, headers=auth_headers)
    resp = client.get("/api/settlements/lookup", params=PERIOD, headers=auth_headers)
    assert resp.json()["actual_amount"] == 99.5


def test_settlements_are_per_user(client, auth_headers, register_user):
    client.put("/api/settlements", json={**PERIOD, "actual_amount": 10}, headers=auth_headers)
    other = register_user("other@example.com")

    assert client.get("/api/settlements", headers=other).json() == []
    resp = client.put("/api/settlements", json={**PERIOD, "actual_amount": 20}, headers=other)
    assert resp.status_code == 200

    mine = client.get("/api/settlements", headers=auth_headers).json()
    assert mine[0]["actual_amount"] == 10


def test_end_before_start_is_rejected(client, auth_headers):
    resp = client.put("/api/settlements", json={"start_date": "2024-01-28", "end_date": "2024-01-15"}, headers=auth_headers)
    assert resp.status_code == 422
