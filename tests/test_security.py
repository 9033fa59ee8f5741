from datetime import datetime, timedelta, timezone

from jose import jwt

from app.core.hashing import Hasher
from app.core.security import create_access_token, decode_access_token

from conftest import auth_headers


def test_protected_route_without_header_is_unauthorized(client):
    response = client.get("/api/chats")

    assert response.status_code == 401
    assert response.json() == {"error": "Access denied"}


def test_malformed_token_is_rejected(client):
    response = client.get("/api/chats", headers=auth_headers("not-a-jwt"))

    assert response.status_code == 401
    assert response.json() == {"error": "Token is not valid"}


def test_expired_token_is_rejected(client, alice):
    token = create_access_token({"sub": str(alice["user"]["id"])}, expires_delta=timedelta(seconds=-10))

    response = client.get("/api/chats", headers=auth_headers(token))

    assert response.status_code == 401


def test_token_signed_with_another_secret_is_rejected(client, alice):
    token = jwt.encode({"sub": str(alice["user"]["id"])}, "some-other-secret", algorithm="HS256")

    response = client.get("/api/chats", headers=auth_headers(token))

    assert response.status_code == 401


def test_token_for_missing_user_is_rejected(client):
    token = create_access_token({"sub": "9999"})

    response = client.get("/api/user/profile", headers=auth_headers(token))

    assert response.status_code == 401
    assert response.json() == {"error": "Token is not valid"}


def test_token_without_numeric_subject_is_rejected(client):
    token = create_access_token({"sub": "alice@example.com"})

    response = client.get("/api/chats", headers=auth_headers(token))

    assert response.status_code == 401


def test_tokens_expire_after_seven_days():
    token = create_access_token({"sub": "1"})

    claims = decode_access_token(token)
    lifetime = datetime.fromtimestamp(claims["exp"], tz=timezone.utc) - datetime.now(timezone.utc)

    assert timedelta(days=6, hours=23) < lifetime <= timedelta(days=7)


def test_hasher_round_trip_and_long_passwords():
    hashed = Hasher.hash_password("secret123")

    assert hashed != "secret123"
    assert Hasher.verify_password("secret123", hashed)
    assert not Hasher.verify_password("secret124", hashed)

    long_password = "é" * 100
    assert Hasher.verify_password(long_password, Hasher.hash_password(long_password))
