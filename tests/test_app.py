import pytest
from fastapi.testclient import TestClient

import main
from app.core.config import settings
from app.core.database import Base
from app.models.time_slot_db.time_slot_db import TimeSlotSetting


def test_startup_seeds_slots_without_touching_schema(db, session_factory, monkeypatch):
    db.query(TimeSlotSetting).delete()
    db.commit()

    def no_create_all(*args, **kwargs):
        pytest.fail("schema is managed by alembic migrations")

    monkeypatch.setattr(Base.metadata, "create_all", no_create_all)
    monkeypatch.setattr(main, "SessionLocal", session_factory)
    monkeypatch.setattr(settings, "SEED_TIME_SLOTS", True)

    with TestClient(main.app) as client:
        assert client.get("/").status_code == 200

    assert db.query(TimeSlotSetting).count() == 27
