import os

# Keep the module-level engine off the on-disk default database.
os.environ.setdefault("CREDENTIALS_DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from database import build_engine, init_db
from store import CreateStatus, CredentialStore, Lookup, LookupStatus


@pytest.fixture
def engine(tmp_path):
    eng = build_engine(f"sqlite:///{tmp_path / 'credentials.db'}")
    init_db(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def store(engine):
    return CredentialStore(sessionmaker(autocommit=False, autoflush=False, bind=engine))


class RecordingStore:
    """Stand-in store that records calls and returns canned results."""

    def __init__(self, create_status=CreateStatus.OK, lookup=None):
        self.create_status = create_status
        self.lookup = lookup or Lookup(LookupStatus.NOT_FOUND)
        self.calls = []

    def try_create(self, username, password_hash):
        self.calls.append(("try_create", username, password_hash))
        return self.create_status

    def get(self, username):
        self.calls.append(("get", username))
        return self.lookup


@pytest.fixture
def recording_store():
    return RecordingStore()


@pytest.fixture
def client(store):
    from app import app, get_store

    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
