import os
import shutil
import tempfile
import uuid

TEST_DB_DIR = tempfile.mkdtemp(prefix="kindred-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(TEST_DB_DIR, 'test_kindred.db')}")
os.environ.setdefault("TRANSLATE_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from kindred.main import app
from kindred.core.db import Base, engine
from kindred.core.config import settings

@pytest.fixture(autouse=True, scope="session")
def setup_db():
    # fresh db for tests
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if settings.DATABASE_URL.startswith(f"sqlite:///{TEST_DB_DIR}"):
        shutil.rmtree(TEST_DB_DIR, ignore_errors=True)

@pytest.fixture()
def client():
    settings.ALLOW_DEV_DEBUG_META = True
    return TestClient(app)

@pytest.fixture()
def auth(client):
    """Registers a fresh user and returns (headers, user json)."""
    email = f"user-{uuid.uuid4().hex[:8]}@example.com"
    r = client.post("/auth/register", json={
        "name": "Asha Rao",
        "email": email,
        "password": "P@ssw0rd!",
        "age": 29,
    })
    assert r.status_code == 201, r.text
    data = r.json()
    return {"Authorization": f"Bearer {data['token']}"}, data["user"]
