"""Tests for the /api/services routes."""

from bson import ObjectId


class TestServices:
    def test_create_applies_defaults(self, client):
        resp = client.post("/api/services", json={"title": "Web Development", "description": "Sites and APIs"})

        assert resp.status_code == 201
        body = resp.json()
        assert body["price"] == "Custom Quote"
        assert body["icon"] == "bi-gear"
        assert body["link"] == "#"
        assert body["isActive"] is True

    def test_create_requires_description(self, client, db):
        resp = client.post("/api/services", json={"title": "Consulting"})

        assert resp.status_code == 400
        assert resp.json()["message"] == "Missing required fields: description."
        assert db["services"].docs == []

    def test_list_only_active(self, client):
        client.post("/api/services", json={"title": "A", "description": "a"})
        client.post("/api/services", json={"title": "B", "description": "b", "isActive": False})

        assert [s["title"] for s in client.get("/api/services").json()] == ["A"]

    def test_crud_cycle(self, client):
        created = client.post(
            "/api/services",
            json={"title": "Mobile Apps", "description": "iOS and Android", "price": "From 2000 EUR"},
        ).json()
        service_id = created["id"]

        assert client.get(f"/api/services/{service_id}").json()["price"] == "From 2000 EUR"

        updated = client.put(f"/api/services/{service_id}", json={"price": "Custom Quote"})
        assert updated.status_code == 200
        assert updated.json()["price"] == "Custom Quote"
        assert updated.json()["title"] == "Mobile Apps"

        assert client.delete(f"/api/services/{service_id}").json() == {"message": "Service deleted successfully."}
        assert client.get(f"/api/services/{service_id}").status_code == 404

    def test_missing_service(self, client):
        missing = str(ObjectId())
        assert client.get(f"/api/services/{missing}").status_code == 404
        assert client.put(f"/api/services/{missing}", json={"title": "x"}).status_code == 404
        assert client.delete(f"/api/services/{missing}").status_code == 404
