import os

# app import 전에 설정 :: in-memory sqlite + 테스트용 secret
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-testing-only"

import fakeredis  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from goodjob.core.database import Base, SessionLocal, engine  # noqa: E402
from goodjob.features.auth import token_store  # noqa: E402
from goodjob.features.member import service as member_service  # noqa: E402
from goodjob.init_db import init_db  # noqa: E402
from goodjob.main import app  # noqa: E402


@pytest.fixture
def redis_client(monkeypatch):
    client = fakeredis.FakeRedis(decode_responses=True)
    monkeypatch.setattr(token_store, "redis_client", client)
    yield client
    client.flushall()


@pytest.fixture
def db():
    init_db()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db, redis_client):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def join_data():
    return {
        "account": "tester1",
        "password": "1234",
        "confirmPassword": "1234",
        "username": "tester1",
        "email": "tester1@naver.com",
    }


@pytest.fixture
def test_member(db):
    """Existing member ``test`` / ``1234``."""
    form = member_service.validate_join_form(
        {
            "account": "test",
            "password": "1234",
            "confirmPassword": "1234",
            "username": "test",
            "email": "test@naver.com",
        }
    )
    return member_service.join(db, form)
