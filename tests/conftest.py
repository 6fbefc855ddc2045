"""Route test fixtures — one in-memory SQLite application per test.

Each test builds its own app through create_app(), so handlers get their
sessions from the real get_db dependency bound to that app's engine.
"""

import pytest
from fastapi.testclient import TestClient

from app.database import Base
from app.main import create_app


@pytest.fixture
def test_app():
    application = create_app("sqlite://")
    Base.metadata.create_all(bind=application.state.engine)
    yield application
    Base.metadata.drop_all(bind=application.state.engine)
    application.state.engine.dispose()


@pytest.fixture
def client(test_app):
    return TestClient(test_app)


@pytest.fixture
def test_db(test_app):
    session = test_app.state.session_factory()
    yield session
    session.close()


@pytest.fixture
def make_user(client):
    counter = {"n": 0}

    def _make_user(**overrides):
        counter["n"] += 1
        payload = {
            "name": f"User {counter['n']}",
            "email": f"user{counter['n']}@example.com",
            "password": "secret",
        }
        payload.update(overrides)
        res = client.post("/usuarios", json=payload)
        assert res.status_code == 201, res.text
        return res.json()

    return _make_user


@pytest.fixture
def make_store(client, make_user):
    def _make_store(user_id=None, name="Corner Shop"):
        if user_id is None:
            user_id = make_user()["id"]
        res = client.post("/stores", json={"name": name, "userId": user_id})
        assert res.status_code == 201, res.text
        return res.json()

    return _make_store


@pytest.fixture
def make_product(client, make_store):
    def _make_product(store_id=None, name="Widget", price="19.99"):
        if store_id is None:
            store_id = make_store()["id"]
        res = client.post("/products", json={"name": name, "price": price, "storeId": store_id})
        assert res.status_code == 201, res.text
        return res.json()

    return _make_product
