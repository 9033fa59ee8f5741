import os

# Point the app at a throwaway in-memory database before it is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from app.main import app as fastapi_app
from app.db.session import Base, SessionLocal, engine
import app.db.models  # noqa: F401


@pytest.fixture(autouse=True)
def database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    with TestClient(fastapi_app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def register(client, name="Alice", email="alice@example.com", password="secret123"):
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client):
    data = register(client)
    data["headers"] = auth_headers(data["token"])
    return data


@pytest.fixture
def bob(client):
    data = register(client, name="Bob", email="bob@example.com", password="hunter22")
    data["headers"] = auth_headers(data["token"])
    return data
