"""Pagination helpers, demo seeding and timestamp defaults."""

import importlib

from sqlmodel import select

from football_backend.core.pagination import sanitize_pagination, page_offset, page_meta
from football_backend.models.player_model import Player
from football_backend.models.team_model import Team
from football_backend.seed.seed_demo import seed_demo, DEMO_TEAMS
from football_backend.services import store

seed_module = importlib.import_module("football_backend.seed.seed_demo")


def test_sanitize_pagination():
    assert sanitize_pagination(1, 10) == (1, 10)
    assert sanitize_pagination(0, 0) == (1, 10)
    assert sanitize_pagination(-3, 1000) == (1, 100)


def test_page_offset_and_meta():
    assert page_offset(3, 20) == 40
    assert page_meta(1, 10, 0)["total_pages"] == 0
    assert page_meta(2, 10, 21) == {"page": 2, "per_page": 10, "total": 21, "total_pages": 3}


def test_seed_demo_runs_once(session):
    assert seed_demo(session) == len(DEMO_TEAMS)
    assert seed_demo(session) == 0

    players = session.exec(select(Player)).all()
    assert len(players) == sum(len(t["squad"]) for t in DEMO_TEAMS)


def test_timestamps_are_timezone_aware(session):
    team = Team(name="Clockwork FC")
    assert team.created_at.tzinfo is not None
    assert team.updated_at.tzinfo is not None

    session.add(team)
    session.commit()
    session.refresh(team)

    store.soft_delete(session, team)
    assert team.deleted_at.tzinfo is not None
    session.commit()


def test_seed_demo_opens_its_own_session(session, monkeypatch):
    monkeypatch.setattr(seed_module, "get_sync_session", lambda: session)

    assert seed_demo() == len(DEMO_TEAMS)

    teams = session.exec(select(Team)).all()
    assert sorted(t.name for t in teams) == sorted(t["name"] for t in DEMO_TEAMS)
