import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["ADMIN_STUDENT_IDS"] = '["admin01"]'
os.environ["SEED_TIME_SLOTS"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.models.profile_db.profile_db import Profile
from app.models.time_slot_db.time_slot_crud import seed_time_slots
from app.models.user_db.user_db import User
from main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    seed_time_slots(session)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db, session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_profile(db):
    """Insert an account and its profile straight into the database."""
    def _make(student_id, gender, seat, day="mon", time="18:00", phone=None):
        user = User(student_id=student_id)
        db.add(user)
        db.flush()
        profile = Profile(
            user_id=user.id,
            student_id=student_id,
            event_day=day,
            event_time=time,
            gender=gender,
            participant_number=seat,
            phone_number=phone or f"010-0000-{seat:04d}",
        )
        db.add(profile)
        db.commit()
        db.refresh(profile)
        return profile

    return _make


@pytest.fixture
def login(client):
    """Enter with a student ID and return bearer auth headers."""
    def _login(student_id, password=None):
        payload = {"student_id": student_id}
        if password is not None:
            payload["password"] = password
        response = client.post("/auth/enter", json=payload)
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login


@pytest.fixture
def admin_headers(login):
    return login("admin01")


@pytest.fixture
def register(client, login):
    """Enter with a student ID and save a profile through the API."""
    def _register(student_id, gender, seat, day="mon", time="18:00", phone="010-1234-5678"):
        headers = login(student_id)
        response = client.post("/profiles", headers=headers, json={
            "event_day": day,
            "event_time": time,
            "gender": gender,
            "participant_number": seat,
            "phone_number": phone,
        })
        assert response.status_code == 201, response.text
        return headers, response.json()

    return _register
