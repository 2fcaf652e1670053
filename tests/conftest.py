import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import Base, get_db
from core.security import get_current_owner_id
from models.user import User
from models.word_pair import WordPair
from tests.fakes import VOCABULARY, FakeWordStore, make_pair


@pytest.fixture
def fake_store():
    def _build(words=VOCABULARY, user_id: int = 1, seed: int | None = 7) -> FakeWordStore:
        pairs = [make_pair(i, pl, uk, user_id) for i, (pl, uk) in enumerate(words, start=1)]
        return FakeWordStore(pairs, seed=seed)

    return _build


# --- SQLAlchemy session -------------------------------------------------------

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def make_user(db_session):
    counter = {"n": 0}

    def _make(username: str | None = None) -> User:
        counter["n"] += 1
        name = username or f"user{counter['n']}"
        user = User(email=f"{name}@example.com", username=name)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make


@pytest.fixture
def add_pairs(db_session):
    def _add(user: User, words=VOCABULARY) -> list[WordPair]:
        pairs = [
            WordPair(user_id=user.id, polish_word=pl, ukrainian_word=uk)
            for pl, uk in words
        ]
        db_session.add_all(pairs)
        db_session.commit()
        for pair in pairs:
            db_session.refresh(pair)
        return pairs

    return _add


# --- HTTP client --------------------------------------------------------------

@pytest.fixture
def owner(make_user):
    return make_user("john")


@pytest.fixture
def client(session_factory, owner):
    from main import app

    owner_id = owner.id

    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_current_owner_id] = lambda: owner_id
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
