"""End-to-end tests through the FastAPI app."""
from app import app, get_store
from conftest import RecordingStore
from store import CreateStatus


class TestRegisterEndpoint:
    def test_register_then_login(self, client):
        r = client.post("/register", json={"username": "alice", "password": "secret123"})
        assert r.status_code == 200
        assert r.json()["ok"] is True

        r = client.post("/login", json={"username": "alice", "password": "secret123"})
        assert r.status_code == 200
        assert r.json() == {"ok": True, "message": "Login successful.", "username": "alice"}

    def test_duplicate_is_conflict(self, client):
        client.post("/register", json={"username": "alice", "password": "secret123"})
        r = client.post("/register", json={"username": "alice", "password": "other"})
        assert r.status_code == 409
        assert r.json()["ok"] is False

    def test_empty_fields_are_bad_request(self, client):
        r = client.post("/register", json={"username": "", "password": "x"})
        assert r.status_code == 400

    def test_malformed_json_is_bad_request(self, client):
        r = client.post(
            "/register", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert r.status_code == 400

    def test_nul_byte_password_is_bad_request(self, client):
        r = client.post("/register", json={"username": "alice", "password": "sec\x00ret"})
        assert r.status_code == 400
        assert r.json()["ok"] is False

    def test_lone_surrogate_username_is_bad_request(self, client):
        r = client.post(
            "/register",
            content=b'{"username": "al\\ud800ice", "password": "secret123"}',
            headers={"Content-Type": "application/json"},
        )
        assert r.status_code == 400

    def test_storage_error_is_500(self, client):
        app.dependency_overrides[get_store] = lambda: RecordingStore(
            create_status=CreateStatus.STORAGE_ERROR
        )
        r = client.post("/register", json={"username": "alice", "password": "secret123"})
        assert r.status_code == 500


class TestLoginEndpoint:
    def test_wrong_password_is_unauthorized(self, client):
        client.post("/register", json={"username": "alice", "password": "secret123"})
        r = client.post("/login", json={"username": "alice", "password": "wrong"})
        assert r.status_code == 401

    def test_unknown_user_matches_wrong_password(self, client):
        client.post("/register", json={"username": "alice", "password": "secret123"})
        wrong = client.post("/login", json={"username": "alice", "password": "wrong"})
        unknown = client.post("/login", json={"username": "nobody", "password": "x"})
        assert unknown.status_code == wrong.status_code
        assert unknown.json() == wrong.json()

    def test_response_never_echoes_password(self, client):
        client.post("/register", json={"username": "alice", "password": "secret123"})
        for path, pw in (("/register", "secret123"), ("/login", "secret123"), ("/login", "bad")):
            r = client.post(path, json={"username": "alice", "password": pw})
            assert pw not in r.text
            assert "$2b$" not in r.text

    def test_list_body_is_bad_request(self, client):
        r = client.post("/login", json=["alice", "secret123"])
        assert r.status_code == 400


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}
