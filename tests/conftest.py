"""Shared fixtures: an in-memory SQLite database and a FastAPI test client."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Ensure the project root (which contains ``app`` and ``main``) is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

# Configure the database before any application module builds the engine
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("APP_TIMEZONE", "America/Chicago")
for _name in (
    "SENDGRID_API_KEY",
    "SENDGRID_SENDER",
    "TWILIO_ACCOUNT_SID",
    "TWILIO_AUTH_TOKEN",
    "TWILIO_PHONE_NUMBER",
    "QUIET_HOURS_EXEMPT_TYPES",
):
    os.environ.pop(_name, None)

from app.config import reset_settings_cache  # noqa: E402
from app.infrastructure import database  # noqa: E402
from app.infrastructure import models  # noqa: E402,F401

reset_settings_cache()


@pytest.fixture()
def db_session():
    """Yield a session bound to freshly created tables."""

    database.Base.metadata.drop_all(bind=database.engine)
    database.Base.metadata.create_all(bind=database.engine)
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db_session):
    """Return a test client bound to a clean application instance."""

    from fastapi.testclient import TestClient

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
        # End the test's transaction before the lifespan disposes the engine
        db_session.rollback()
