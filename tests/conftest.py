"""Shared fixtures for the reading_fluency and api test suites."""
import pytest

from api.app import create_app
from api.store import ReadingStore
from reading_fluency import FluencyConfig


@pytest.fixture
def config():
    return FluencyConfig()


@pytest.fixture
def store():
    return ReadingStore()


@pytest.fixture
def app(config, store):
    app = create_app(config, store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def text_id(client):
    """Id of a stored passage "The cat sat on the mat." with a 60 second limit."""
    resp = client.post(
        "/api/texts",
        json={"title": "Cat", "content": "The cat sat on the mat.", "duration_sec": 60},
    )
    return resp.get_json()["id"]
