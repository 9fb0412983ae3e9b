import json
import threading

import pytest
from werkzeug.security import generate_password_hash

from webgis.user_store import UserStore, UserStoreError, DuplicateUserError


def test_missing_file_is_empty(tmp_path):
    store = UserStore(str(tmp_path / "nothing.json"))
    assert store.get("alice") is None
    assert store.exists("alice") is False


def test_create_writes_flat_mapping(tmp_path):
    path = tmp_path / "users.json"
    store = UserStore(str(path))
    store.create("alice", "alice@example.com", "hash-a")

    data = json.loads(path.read_text())
    assert data == {"alice": {"email": "alice@example.com", "password_hash": "hash-a"}}


def test_get_returns_user(tmp_path):
    store = UserStore(str(tmp_path / "users.json"))
    store.create("bob", "bob@example.com", generate_password_hash("pw123456"))

    user = store.get("bob")
    assert user.username == "bob"
    assert user.email == "bob@example.com"
    assert user.get_id() == "bob"
    assert user.check_password("pw123456")
    assert not user.check_password("wrong")


def test_duplicate_username_rejected(tmp_path):
    store = UserStore(str(tmp_path / "users.json"))
    store.create("alice", "first@example.com", "hash-1")

    with pytest.raises(DuplicateUserError):
        store.create("alice", "second@example.com", "hash-2")

    assert store.get("alice").email == "first@example.com"


def test_reads_changes_made_outside_the_store(tmp_path):
    path = tmp_path / "users.json"
    store = UserStore(str(path))
    path.write_text(json.dumps({"carol": {"email": "c@example.com", "password_hash": "h"}}))
    assert store.exists("carol")


def test_malformed_file_raises(tmp_path):
    path = tmp_path / "users.json"
    path.write_text("{not json")
    store = UserStore(str(path))
    with pytest.raises(UserStoreError):
        store.get("alice")


def test_non_object_file_raises(tmp_path):
    path = tmp_path / "users.json"
    path.write_text("[1, 2, 3]")
    with pytest.raises(UserStoreError):
        UserStore(str(path)).exists("alice")


def test_record_without_hash_raises(tmp_path):
    path = tmp_path / "users.json"
    path.write_text(json.dumps({"alice": {"email": "a@example.com"}}))
    with pytest.raises(UserStoreError):
        UserStore(str(path)).get("alice")


def test_creates_missing_directory(tmp_path):
    path = tmp_path / "data" / "users.json"
    UserStore(str(path)).create("alice", "a@example.com", "h")
    assert path.exists()


def test_concurrent_creates_keep_every_user(tmp_path):
    store = UserStore(str(tmp_path / "users.json"))
    names = [f"user{i}" for i in range(20)]

    threads = [
        threading.Thread(target=store.create, args=(name, f"{name}@example.com", "h"))
        for name in names
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(store.exists(name) for name in names)
    assert len(json.loads((tmp_path / "users.json").read_text())) == len(names)
