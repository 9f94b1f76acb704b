import pytest


class TestConfigRoutes:
    """Test the per-client config endpoints."""

    def test_write_then_read(self, client):
        resp = client.post("/api/config", json={"clientId": "c1", "key": "k", "version": "v1", "token": "t1"})
        assert resp.status_code == 200
        assert resp.json() == {"ok": True}

        resp = client.get("/api/config", params={"clientId": "c1"})
        assert resp.status_code == 200
        assert resp.json() == {"ok": True, "config": {"key": "k", "version": "v1", "token": "t1"}}

    def test_overwrite_returns_last_write(self, client, registered):
        client.post("/api/config", json={"clientId": "c1", "key": "k2", "version": "v2", "token": "t2"})

        config = client.get("/api/config", params={"clientId": "c1"}).json()["config"]
        assert config == {"key": "k2", "version": "v2", "token": "t2"}

    def test_clients_are_isolated(self, client, registered):
        client.post("/api/config", json={"clientId": "c2", "key": "x", "version": "y", "token": "z"})

        assert client.get("/api/config", params={"clientId": "c1"}).json()["config"]["key"] == "k"
        assert client.get("/api/config", params={"clientId": "c2"}).json()["config"]["key"] == "x"

    @pytest.mark.parametrize("body", [{"key": "k", "version": "v", "token": "t"}, {"clientId": ""}, None])
    def test_missing_client_id(self, client, body):
        resp = client.post("/api/config", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"ok": False, "msg": "clientId is required"}

    def test_non_string_fields(self, client):
        resp = client.post("/api/config", json={"clientId": "c1", "key": 1, "version": "v", "token": "t"})
        assert resp.status_code == 400
        assert resp.json() == {"ok": False, "msg": "key/version/token must be strings"}

        assert client.get("/api/config", params={"clientId": "c1"}).status_code == 404

    @pytest.mark.parametrize("params", [{"clientId": "nobody"}, {}])
    def test_read_unregistered(self, client, params):
        resp = client.get("/api/config", params=params)
        assert resp.status_code == 404
        assert resp.json() == {"ok": False, "msg": "config not found"}

    def test_malformed_json_body(self, client):
        resp = client.post(
            "/api/config",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["ok"] is False
