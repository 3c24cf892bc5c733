import os
import tempfile
from pathlib import Path

# Point the app at a throwaway SQLite file before anything imports its settings
_db_dir = tempfile.mkdtemp(prefix="mentor_match_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_db_dir) / 'test.db'}"
os.environ["SEED_DEFAULT_ACCOUNTS"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient

from mentor_match.database import Base, SessionLocal, engine
from mentor_match.main import app, limiter
from mentor_match.models import User, UserRole
from mentor_match.security import create_token_for_user, get_password_hash
from mentor_match.utils.profile_utils import encode_skills

PASSWORD = "password123"
_HASHED_PASSWORD = get_password_hash(PASSWORD)


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_user(db):
    """Inserts a user directly and returns it; skips the bcrypt cost of signing up over HTTP."""
    counter = {"n": 0}

    def _make(role=UserRole.MENTEE, name=None, email=None, bio=None, skills=None):
        counter["n"] += 1
        role_value = role.value if isinstance(role, UserRole) else role
        user = User(
            email=email or f"{role_value}{counter['n']}@example.com",
            hashed_password=_HASHED_PASSWORD,
            name=name or f"{role_value.title()} {counter['n']}",
            role=role_value,
            bio=bio,
            skills=encode_skills(skills) if skills is not None else None,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def auth_headers():
    def _headers(user):
        return {"Authorization": f"Bearer {create_token_for_user(user)}"}

    return _headers
