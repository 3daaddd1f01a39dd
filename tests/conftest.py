from __future__ import annotations

import os
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["ORM_DB_URL"] = "sqlite:///./test.db"
    os.environ.pop("DB_URL", None)

    # Ensure local .env cannot leak into tests.
    os.environ["ENVIRONMENT"] = "test"
    os.environ["JWT_SECRET"] = "test-secret"
    os.environ["ACCEPT_BODY_TOKEN"] = "true"
    # bcrypt's minimum cost keeps the suite fast.
    os.environ["BCRYPT_WORK_FACTOR"] = "4"


@pytest.fixture(scope="session")
def _schema() -> Any:
    from jobly.database import Base, create_tables, engine
    import jobly.models  # noqa: F401  # ensure all models are registered

    Base.metadata.drop_all(bind=engine)
    create_tables(engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session(_schema: Any) -> Any:
    # Every test runs inside one outer transaction that is rolled back afterwards.
    # Session.commit() inside the app does not end that outer transaction.
    from jobly.database import engine

    connection = engine.connect()
    transaction = connection.begin()
    session = Session(bind=connection, autoflush=False)
    try:
        yield session
    finally:
        session.close()
        transaction.rollback()
        connection.close()


@pytest.fixture()
def client(db_session: Session) -> Any:
    from jobly.database import get_db
    from jobly.main import create_app

    app = create_app()

    def _override_get_db() -> Any:
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def seeded(client: TestClient, db_session: Session) -> dict[str, Any]:
    """One company, one job and one admin user, plus a login token for that user."""
    from jobly.models import Company, Job, User
    from jobly.utils.password_hash import hash_password

    db_session.add(
        Company(
            handle="testHandle2",
            name="testCompany2",
            num_employees=1000,
            description="The best test of the rest, I DO NOT JEST",
            logo_url="https://www.url.com",
        )
    )
    db_session.flush()
    db_session.add(Job(id=1, title="testJob", salary=22.22, equity=0.5, company_handle="testHandle2"))
    db_session.add(
        User(
            username="testUsername",
            password=hash_password("12345"),
            first_name="testFirstName",
            last_name="testLastName",
            email="test@test.com",
            photo_url="https://www.photo.com",
            is_admin=True,
        )
    )
    db_session.commit()

    r = client.post("/users/login", json={"username": "testUsername", "password": "12345"})
    assert r.status_code == 200
    return {"token": r.json()["token"], "company_handle": "testHandle2", "job_id": 1}



@pytest.fixture()
def scratch_session(_schema: Any) -> Any:
    """A session on a throwaway in-memory DB, for paths that roll back and really commit."""
    from sqlalchemy import create_engine, event
    from sqlalchemy.pool import StaticPool

    from jobly.database import create_tables

    scratch = create_engine("sqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False})

    @event.listens_for(scratch, "connect")
    def _fk_on(dbapi_connection, connection_record) -> None:
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    create_tables(scratch)
    session = Session(bind=scratch)
    try:
        yield session
    finally:
        session.close()
        scratch.dispose()
