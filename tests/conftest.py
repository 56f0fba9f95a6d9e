import os
import sys
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from alembic import command
from alembic.config import Config

SERVICE_ROOT = Path(__file__).resolve().parents[1]
if str(SERVICE_ROOT) not in sys.path:
    sys.path.insert(0, str(SERVICE_ROOT))

# Settings and the engine are built on first import of the package, so the
# database location has to be in the environment before test modules load.
_TMP_DIR = Path(tempfile.mkdtemp(prefix="consultations_db_"))
TEST_DB_URL = f"sqlite:///{_TMP_DIR / 'test_consultations.db'}"
OWNER_ID = "owner-admin"

os.environ["CONSULTATIONS_DATABASE_URL"] = TEST_DB_URL
os.environ["CONSULTATIONS_OWNER_ID"] = OWNER_ID
os.environ["CONSULTATIONS_STORAGE_BASE_URL"] = "http://storage.test/uploads"
os.environ.setdefault("APP_ENV", "test")
os.environ.pop("SENTRY_DSN", None)

from consultations_service.services.storage_service import ObjectStorage  # noqa: E402


def _alembic_upgrade_head(db_url: str) -> None:
    cfg = Config(str(SERVICE_ROOT / "alembic.ini"))
    # Pin script_location explicitly to avoid picking up wrong migrations when running from another cwd
    cfg.set_main_option("script_location", str(SERVICE_ROOT / "alembic"))
    cfg.set_main_option("sqlalchemy.url", db_url)
    command.upgrade(cfg, "head")


class FakeObjectStorage(ObjectStorage):
    """Keeps uploaded objects in memory instead of calling the storage service."""

    def __init__(self):
        super().__init__("http://storage.test/uploads", public_base_url="https://cdn.test/uploads")
        self.objects: dict[str, tuple[bytes, str]] = {}

    def put(self, key: str, data: bytes, content_type: str) -> str:
        self.objects[key] = (data, content_type)
        return self.public_url(key)


@pytest.fixture(scope="session")
def migrated_db():
    _alembic_upgrade_head(TEST_DB_URL)
    yield TEST_DB_URL


@pytest.fixture()
def fake_storage() -> FakeObjectStorage:
    return FakeObjectStorage()


@pytest.fixture()
def client(migrated_db: str, fake_storage: FakeObjectStorage):
    from consultations_service.database import SessionLocal, get_db
    from consultations_service.main import app
    from consultations_service.services.storage_service import get_object_storage

    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_object_storage] = lambda: fake_storage

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture()
def db_session(migrated_db: str):
    from consultations_service.database import SessionLocal

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def auto_clean_tables(migrated_db: str):
    """Fixture to automatically clean all tables after each test."""
    yield
    from consultations_service.database import Base, engine

    with engine.connect() as connection:
        transaction = connection.begin()
        for table in reversed(Base.metadata.sorted_tables):
            connection.execute(table.delete())
        transaction.commit()


def user_headers(user_id: str, name: str | None = None, email: str | None = None) -> dict[str, str]:
    headers = {"X-User-Id": user_id}
    if name is not None:
        headers["X-User-Name"] = name
    if email is not None:
        headers["X-User-Email"] = email
    return headers


@pytest.fixture()
def admin_headers(client: TestClient) -> dict[str, str]:
    headers = user_headers(OWNER_ID, name="Owner")
    resp = client.get("/auth/me", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["role"] == "admin"
    return headers


@pytest.fixture()
def make_trainer(client: TestClient, admin_headers: dict[str, str]):
    """Factory: sign a user in, switch them to trainer and (optionally) approve them."""

    def _make(user_id: str, *, approved: bool = True, name: str | None = None) -> dict[str, str]:
        headers = user_headers(user_id, name=name)
        resp = client.put("/trainers/me/user-type", json={"user_type": "trainer"}, headers=headers)
        assert resp.status_code == 200
        if approved:
            resp = client.post(f"/admin/users/{user_id}/approve-trainer", headers=admin_headers)
            assert resp.status_code == 200
        return headers

    return _make


@pytest.fixture()
def make_consultation(client: TestClient):
    def _make(owner_id: str = "customer-1", **overrides) -> str:
        payload = {
            "title": "Lose 5kg",
            "description": "I want to lose 5kg before summer",
            "goals": "weight loss",
            "current_level": "beginner",
            "tags": ["weight-loss", "cardio"],
        }
        payload.update(overrides)
        resp = client.post("/consultations", json=payload, headers=user_headers(owner_id))
        assert resp.status_code == 201, resp.text
        return resp.json()["id"]

    return _make


def sample_program() -> list[dict]:
    return [
        {
            "day": "Day 1",
            "exercises": [
                {"name": "Squat", "sets": "3", "reps": "10"},
                {"name": "Plank", "duration": "60s"},
            ],
        },
        {"day": 2, "exercises": [{"name": "Running", "duration": "30min", "notes": "easy pace"}]},
    ]
