"""
Component tests for signup / login / protected routes.
"""
from datetime import timedelta

from fastapi.testclient import TestClient
from jose import jwt

from shop.data.models.user import UserModel
from shop.domain.errors import StoreConnectionError
from shop.repos.user_repo import UserRepo
from shop.utils.clock import now_utc
from tests.conftest import TEST_SECRET, signup_and_login


class TestSignup:
    def test_signup_creates_user_with_hashed_password(self, test_client: TestClient, db_session):
        resp = test_client.post("/signup", json={"username": "alice", "password": "s3cret"})

        assert resp.status_code == 200
        assert resp.json() == {"message": "User created successfully"}

        user = db_session.query(UserModel).filter_by(username="alice").one()
        assert user.password_hash != "s3cret"
        assert "s3cret" not in user.password_hash

    def test_duplicate_username_fails(self, test_client: TestClient):
        test_client.post("/signup", json={"username": "alice", "password": "one"})

        resp = test_client.post("/signup", json={"username": "alice", "password": "two"})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to create user"}

    def test_store_failure_is_500(self, test_client: TestClient, monkeypatch):
        def broken(self, user):
            raise StoreConnectionError("disk I/O error")

        monkeypatch.setattr(UserRepo, "create_user", broken)

        resp = test_client.post("/signup", json={"username": "alice", "password": "s3cret"})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to create user"}

    def test_missing_fields_rejected(self, test_client: TestClient):
        resp = test_client.post("/signup", json={"username": "alice"})
        assert resp.status_code == 422


class TestLogin:
    def test_signup_then_login_round_trip(self, test_client: TestClient, db_session, token_service):
        test_client.post("/signup", json={"username": "alice", "password": "s3cret"})

        resp = test_client.post("/login", json={"username": "alice", "password": "s3cret"})

        assert resp.status_code == 200
        claims = token_service.validate(resp.json()["token"])
        user = db_session.query(UserModel).filter_by(username="alice").one()
        assert claims.id == user.id
        assert claims.username == "alice"

    def test_wrong_password_and_unknown_user_look_the_same(self, test_client: TestClient):
        test_client.post("/signup", json={"username": "alice", "password": "s3cret"})

        wrong_password = test_client.post("/login", json={"username": "alice", "password": "nope"})
        unknown_user = test_client.post("/login", json={"username": "mallory", "password": "nope"})

        assert wrong_password.status_code == unknown_user.status_code == 401
        assert wrong_password.json() == unknown_user.json() == {"error": "Authentication failed"}


    def test_store_failure_is_500(self, test_client: TestClient, monkeypatch):
        test_client.post("/signup", json={"username": "alice", "password": "s3cret"})

        def broken(self, username):
            raise StoreConnectionError("connection refused")

        monkeypatch.setattr(UserRepo, "get_by_username", broken)

        resp = test_client.post("/login", json={"username": "alice", "password": "s3cret"})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to query database"}


class TestProtected:
    def test_returns_identity(self, test_client: TestClient):
        headers = signup_and_login(test_client, "carol", "pw")

        resp = test_client.get("/protected", headers=headers)

        assert resp.status_code == 200
        data = resp.json()
        assert data["message"] == "This is a protected route."
        assert data["user"]["username"] == "carol"
        assert data["user"]["exp"] - data["user"]["iat"] == 3600

    def test_missing_header_is_401(self, test_client: TestClient):
        resp = test_client.get("/protected")

        assert resp.status_code == 401
        assert resp.json() == {"error": "Access denied. Token missing."}

    def test_wrong_scheme_is_401(self, test_client: TestClient, auth_headers):
        token = auth_headers["Authorization"].split(" ", 1)[1]

        resp = test_client.get("/protected", headers={"Authorization": f"Token {token}"})

        assert resp.status_code == 401
        assert "Bearer" in resp.json()["error"]

    def test_invalid_token_is_403(self, test_client: TestClient):
        resp = test_client.get("/protected", headers={"Authorization": "Bearer garbage"})

        assert resp.status_code == 403
        assert resp.json() == {"error": "Invalid token."}

    def test_expired_token_is_403(self, test_client: TestClient):
        issued = now_utc() - timedelta(hours=2)
        token = jwt.encode(
            {"id": 1, "username": "alice", "iat": issued, "exp": issued + timedelta(hours=1)},
            TEST_SECRET,
            algorithm="HS256",
        )

        resp = test_client.get("/protected", headers={"Authorization": f"Bearer {token}"})

        assert resp.status_code == 403


class TestHealth:
    def test_health(self, test_client: TestClient):
        assert test_client.get("/health").json() == {"status": "ok"}
