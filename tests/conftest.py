"""Pytest configuration and fixtures for the football backend tests."""

import os
from types import SimpleNamespace

# Settings are read at import time, so the environment goes first
os.environ.setdefault("FOOTBALL_APP_ENV", "test")
os.environ.setdefault("FOOTBALL_DATABASE_URL", "sqlite://")
os.environ.setdefault("FOOTBALL_JWT_SECRET", "test-secret-key-for-pytest-only-0123456789")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

import football_backend.models  # noqa: F401 - registers every table
from football_backend.core.auth import get_current_admin
from football_backend.core.database import get_session
from football_backend.main import app
from football_backend.models.admin_model import Admin
from football_backend.models.player_model import PlayerPosition
from football_backend.models.team_model import Team
from tests.factories import add_player


@pytest.fixture
def session():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def anon_client(session):
    """Client sharing the test session, with real token checks."""
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client(anon_client):
    """Client with admin authentication bypassed."""
    app.dependency_overrides[get_current_admin] = lambda: Admin(id=1, username="tester", password_hash="x")
    return anon_client


@pytest.fixture
def league(session):
    """
    Three teams (A, B, C) with a couple of players each:
    a1, a2 -> A; b1, b2 -> B; c1 -> C.
    """
    teams = {}
    for key, name in (("A", "Alpha FC"), ("B", "Beta United"), ("C", "Gamma Town")):
        team = Team(name=name, city=f"{name} City", founded_year=1950)
        session.add(team)
        session.commit()
        session.refresh(team)
        teams[key] = team

    return SimpleNamespace(
        A=teams["A"], B=teams["B"], C=teams["C"],
        a1=add_player(session, teams["A"], "Alan Archer", 9),
        a2=add_player(session, teams["A"], "Andy Ames", 10, PlayerPosition.MIDFIELDER),
        b1=add_player(session, teams["B"], "Ben Baker", 9),
        b2=add_player(session, teams["B"], "Bruno Bell", 4, PlayerPosition.DEFENDER),
        c1=add_player(session, teams["C"], "Carl Cole", 7),
    )

