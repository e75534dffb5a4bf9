import os

# Keep tests off any real database and signing key.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import taskflow.models as models  # noqa: E402
from taskflow import auth  # noqa: E402
from taskflow.database import Base, get_db  # noqa: E402
from taskflow.main import app  # noqa: E402

TEST_DATABASE_URL = "sqlite://"
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def db_session() -> Session:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def make_user(session: Session, name: str, email: str, password: str = "secret123") -> models.User:
    user = models.User(name=name, email=email.lower(), password_hash=auth.get_password_hash(password))
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def auth_headers(user: models.User) -> dict:
    return {"Authorization": f"Bearer {auth.create_access_token(user.id, user.email)}"}


@pytest.fixture
def alice(db_session: Session) -> models.User:
    return make_user(db_session, "Alice", "alice@example.com")


@pytest.fixture
def bob(db_session: Session) -> models.User:
    return make_user(db_session, "Bob", "bob@example.com")
