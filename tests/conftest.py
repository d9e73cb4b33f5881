import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from quizapp.core.database import Base, get_db
from quizapp.core.security import create_access_token
from quizapp.models.quiz_db.question_db import Question
from quizapp.models.user_db.user_db_crud import create_user
from quizapp.schemas.users.user_base import UserCreate

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def catalog(db):
    """Three questions whose correct indexes, in order, are [1, 0, 2]."""
    questions = [
        Question(text="Second", options=["a", "b", "c"], correct_index=0, order=20),
        Question(text="First", options=["a", "b", "c"], correct_index=1, order=10),
        Question(text="Third", options=["a", "b", "c"], correct_index=2, order=30),
    ]
    db.add_all(questions)
    db.commit()
    return questions


@pytest.fixture
def make_user(db):
    def _make_user(email="player@example.com", password="secret-pass"):
        return create_user(db, UserCreate(email=email, name="Player", password=password))

    return _make_user


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        return {"Authorization": f"Bearer {create_access_token({'sub': user.email})}"}

    return _auth_headers


@pytest.fixture
def headers(user, auth_headers):
    return auth_headers(user)
