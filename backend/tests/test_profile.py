"""Tests for the singleton /api/profile routes."""

import pytest


@pytest.fixture
def profile_payload():
    return {
        "name": "Jane Doe",
        "title": "Full-stack Developer",
        "bio": "I build things.",
        "email": "jane@example.com",
        "yearsOfExperience": 6,
    }


class TestProfile:
    def test_get_before_create_is_404(self, client):
        resp = client.get("/api/profile")
        assert resp.status_code == 404
        assert resp.json()["message"] == "Profile not found."

    def test_first_post_creates(self, client, profile_payload):
        resp = client.post("/api/profile", json=profile_payload)

        assert resp.status_code == 201
        body = resp.json()
        for key, value in profile_payload.items():
            assert body[key] == value

    def test_second_post_updates_in_place(self, client, db, profile_payload):
        first = client.post("/api/profile", json=profile_payload).json()

        resp = client.post("/api/profile", json={**profile_payload, "title": "Staff Engineer"})

        assert resp.status_code == 200
        assert resp.json()["title"] == "Staff Engineer"
        assert resp.json()["id"] == first["id"]
        assert resp.json()["createdAt"] == first["createdAt"]
        assert len(db["profiles"].docs) == 1

    def test_post_requires_name_and_title(self, client, db):
        resp = client.post("/api/profile", json={"bio": "no name"})

        assert resp.status_code == 400
        assert resp.json()["message"] == "Missing required fields: name, title."
        assert db["profiles"].docs == []

    def test_negative_counters_rejected(self, client, profile_payload):
        resp = client.post("/api/profile", json={**profile_payload, "awards": -1})
        assert resp.status_code == 400

    def test_put_updates_existing(self, client, profile_payload):
        client.post("/api/profile", json=profile_payload)

        resp = client.put("/api/profile", json={"location": "Lisbon"})

        assert resp.status_code == 200
        assert resp.json()["location"] == "Lisbon"
        assert resp.json()["name"] == "Jane Doe"

    def test_put_without_profile_is_404(self, client, db):
        assert client.put("/api/profile", json={"location": "Lisbon"}).status_code == 404
        assert db["profiles"].docs == []

    def test_delete(self, client, profile_payload):
        client.post("/api/profile", json=profile_payload)

        assert client.delete("/api/profile").json() == {"message": "Profile deleted successfully."}
        assert client.get("/api/profile").status_code == 404
        assert client.delete("/api/profile").status_code == 404
