"""Tests for the /api/technologies routes."""

from bson import ObjectId


class TestTechnologies:
    def test_create_then_filter_by_category(self, client):
        resp = client.post("/api/technologies", json={"name": "Rust", "category": "Backend"})

        assert resp.status_code == 201
        created = resp.json()
        assert created["proficiencyLevel"] == "Intermediate"
        assert created["isActive"] is True

        backend = client.get("/api/technologies/category/Backend")
        assert backend.status_code == 200
        assert [t["id"] for t in backend.json()] == [created["id"]]

        frontend = client.get("/api/technologies/category/Frontend")
        assert frontend.status_code == 200
        assert frontend.json() == []

    def test_unknown_category_is_rejected_on_create(self, client, db):
        resp = client.post("/api/technologies", json={"name": "COBOL", "category": "Legacy"})

        assert resp.status_code == 400
        assert resp.json()["errors"][0]["field"] == "category"
        assert db["technologies"].docs == []

    def test_unknown_category_lists_nothing(self, client):
        client.post("/api/technologies", json={"name": "Rust", "category": "Backend"})
        assert client.get("/api/technologies/category/Legacy").json() == []

    def test_invalid_proficiency_is_rejected(self, client):
        resp = client.post(
            "/api/technologies",
            json={"name": "Go", "category": "Backend", "proficiencyLevel": "Guru"},
        )
        assert resp.status_code == 400

    def test_update_and_deactivate(self, client):
        created = client.post("/api/technologies", json={"name": "Vue", "category": "Frontend"}).json()

        resp = client.put(
            f"/api/technologies/{created['id']}",
            json={"proficiencyLevel": "Expert", "isActive": False},
        )

        assert resp.status_code == 200
        assert resp.json()["proficiencyLevel"] == "Expert"
        assert client.get("/api/technologies").json() == []
        assert client.get(f"/api/technologies/{created['id']}").json()["isActive"] is False

    def test_update_rejects_bad_category(self, client):
        created = client.post("/api/technologies", json={"name": "Vue", "category": "Frontend"}).json()

        resp = client.put(f"/api/technologies/{created['id']}", json={"category": "Design"})

        assert resp.status_code == 400

    def test_delete(self, client):
        created = client.post("/api/technologies", json={"name": "Docker", "category": "DevOps"}).json()

        assert client.delete(f"/api/technologies/{created['id']}").status_code == 200
        assert client.get(f"/api/technologies/{created['id']}").status_code == 404
        assert client.delete(f"/api/technologies/{str(ObjectId())}").status_code == 404
