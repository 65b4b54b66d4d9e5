"""Single-admin registration, login and bearer-token verification."""

import time

import pytest
from jose import jwt

from shipco.api.deps import create_access_token, decode_token
from shipco.config import Settings
from shipco.errors import InvalidToken
from shipco.models.credential import Credential


def _register(client, email="a@b.com", password="secret1"):
    return client.post("/api/auth/register", json={"email": email, "password": password})


def _login(client, email="a@b.com", password="secret1"):
    return client.post("/api/auth/login", json={"email": email, "password": password})


class TestRegister:
    def test_first_registration_returns_token(self, client):
        response = _register(client)
        assert response.status_code == 200
        body = response.json()
        assert body["token"]
        assert body["user"]["email"] == "a@b.com"
        assert body["user"]["id"]

    def test_second_registration_is_closed(self, client):
        assert _register(client).status_code == 200
        response = _register(client, email="other@b.com", password="different")
        assert response.status_code == 403
        assert response.json() == {"error": "registration_closed"}

    @pytest.mark.parametrize(
        "payload",
        [{}, {"email": "a@b.com"}, {"password": "secret1"}, {"email": "", "password": "x"}],
    )
    def test_missing_fields(self, client, payload):
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": "missing_fields"}

    def test_password_is_hashed_and_email_lowercased(self, client, db):
        _register(client, email="Admin@Example.COM")
        credential = db.query(Credential).one()
        assert credential.email == "admin@example.com"
        assert credential.password != "secret1"
        assert credential.password.startswith("$2")
        assert credential.role == "admin"


class TestLogin:
    def test_token_verifies_back_to_subject(self, client, settings):
        user_id = _register(client).json()["user"]["id"]
        response = _login(client)
        assert response.status_code == 200
        claims = decode_token(response.json()["token"], settings)
        assert claims.subject == user_id
        assert claims.email == "a@b.com"

    def test_email_is_case_insensitive(self, client):
        _register(client)
        assert _login(client, email="A@B.COM").status_code == 200

    def test_wrong_password(self, client):
        _register(client)
        response = _login(client, password="nope")
        assert response.status_code == 401
        assert response.json() == {"error": "invalid_credentials"}

    def test_unknown_email_looks_the_same(self, client):
        _register(client)
        response = _login(client, email="who@b.com")
        assert response.status_code == 401
        assert response.json() == {"error": "invalid_credentials"}

    def test_missing_fields(self, client):
        response = client.post("/api/auth/login", json={"email": "a@b.com"})
        assert response.status_code == 400
        assert response.json() == {"error": "missing_fields"}


class TestTokens:
    def test_expiry_is_seven_days(self, settings):
        token = create_access_token("abc", "a@b.com", settings)
        claims = jwt.get_unverified_claims(token)
        assert claims["sub"] == "abc"
        assert abs(claims["exp"] - (time.time() + 7 * 86400)) < 60

    def test_wrong_secret_is_rejected(self, settings):
        other = Settings(_env_file=None, jwt_secret="someone-else")
        token = create_access_token("abc", "a@b.com", other)
        with pytest.raises(InvalidToken):
            decode_token(token, settings)

    def test_expired_token_is_rejected(self, settings):
        expired = settings.model_copy(update={"jwt_expire_days": -1})
        token = create_access_token("abc", "a@b.com", expired)
        with pytest.raises(InvalidToken):
            decode_token(token, settings)

    def test_missing_bearer_header(self, client):
        response = client.get("/api/shipments")
        assert response.status_code == 401
        assert response.json() == {"error": "missing_token"}

    def test_non_bearer_scheme_counts_as_missing(self, client):
        response = client.get("/api/shipments", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401
        assert response.json() == {"error": "missing_token"}

    def test_garbage_token(self, client):
        response = client.get(
            "/api/quotes", headers={"Authorization": "Bearer not-a-jwt"}
        )
        assert response.status_code == 401
        assert response.json() == {"error": "invalid_token"}


class TestSingleAdminGuard:
    def test_unique_slot_closes_racing_registration(self, client, monkeypatch):
        # Both requests see an empty table, as two concurrent first registrations would.
        monkeypatch.setattr("shipco.services.auth.count_credentials", lambda db: 0)
        assert _register(client).status_code == 200

        response = _register(client, email="second@b.com", password="other")
        assert response.status_code == 403
        assert response.json() == {"error": "registration_closed"}
