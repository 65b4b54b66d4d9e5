import pytest
from fastapi.testclient import TestClient

from shipco.app import create_app
from shipco.config import Settings


@pytest.fixture()
def settings(tmp_path):
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'shipco.db'}",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
        seed_demo_data=False,
    )


@pytest.fixture()
def app(settings):
    app = create_app(settings)
    yield app
    app.state.engine.dispose()


@pytest.fixture()
def db(app):
    session = app.state.session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def auth_headers(client):
    response = client.post(
        "/api/auth/register", json={"email": "a@b.com", "password": "secret1"}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
