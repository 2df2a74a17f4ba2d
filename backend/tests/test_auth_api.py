from __future__ import annotations


def test_register_login_and_me(client, register_user):
    register_user("Driver@Example.com", "correct-horse")

    resp = client.post("/api/auth/login", data={"username": "driver@example.com", "password": "correct-horse"})
    assert resp.status_code == 200
    token = resp.json()["access_token"]
    assert resp.json()["token_type"] == "bearer"

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"}).json()
    assert me["email"] == "driver@example.com"
    assert me["default_truck_reg"] is None


def test_duplicate_registration(client, register_user):
    register_user()
    resp = client.post("/api/auth/register", json={"email": "driver@example.com", "password": "another-pass"})
    assert resp.status_code == 400


def test_wrong_password(client, register_user):
    register_user()
    resp = client.post("/api/auth/login", data={"username": "driver@example.com", "password": "nope-nope"})
    assert resp.status_code == 401


def test_bad_token(client):
    resp = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert resp.status_code == 401


def test_update_profile(client, auth_headers):
    resp = client.patch("/api/auth/me", json={"full_name": "Sam Driver", "phone": "07700900000"}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["full_name"] == "Sam Driver"
    assert resp.json()["phone"] == "07700900000"
