import pytest
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from werkzeug.security import generate_password_hash

from webgis import create_app
from webgis.config import TestingConfig


@pytest.fixture
def users_file(tmp_path):
    return tmp_path / "users.json"


@pytest.fixture
def app(users_file, monkeypatch):
    #app per test, pointed at an empty temporary user file
    monkeypatch.delenv("FLASK_CONFIG", raising=False)

    class Config(TestingConfig):
        USERS_FILE = str(users_file)

    return create_app(Config)


@pytest.fixture
def app_ctx(app):
    #only for tests that make no requests, a pushed context would be shared with them
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["user_store"]


@pytest.fixture
def alice(store):
    return store.create("alice", "alice@example.com", generate_password_hash("secret123"))


@pytest.fixture
def login(client):
    def _login(username="alice", password="secret123"):
        return client.post("/login", data={"username": username, "password": password})
    return _login
