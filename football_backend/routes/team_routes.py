# team_routes.py
# Defines API routes for team operations (create, list, update, soft delete).

from fastapi import APIRouter, Depends
from sqlmodel import Session

from football_backend.core.database import get_session
from football_backend.core.errors import TeamNotFound
from football_backend.core.pagination import SortOrder, sanitize_pagination, page_offset, page_meta
from football_backend.models.team_model import Team, TeamCreate, TeamUpdate, TeamRead
from football_backend.models.timestamps import utc_now
from football_backend.services import store

router = APIRouter()


@router.post("", response_model=TeamRead, status_code=201)
def create_team(data: TeamCreate, session: Session = Depends(get_session)):
    team = Team(**data.model_dump())
    session.add(team)
    session.commit()
    session.refresh(team)
    return team


@router.get("")
def list_teams(
    session: Session = Depends(get_session),
    page: int = 1,
    per_page: int = 10,
    sort_by: str = "created_at",
    sort_order: SortOrder = "desc",
):
    """Paginated list of active teams."""
    page, per_page = sanitize_pagination(page, per_page)
    teams = store.find_teams(session, page_offset(page, per_page), per_page, sort_by, sort_order)
    total = store.count_teams(session)
    return {
        "teams": [TeamRead.model_validate(team) for team in teams],
        **page_meta(page, per_page, total),
    }


@router.get("/{team_id}", response_model=TeamRead)
def get_team(team_id: int, session: Session = Depends(get_session)):
    team = store.find_team_by_id(session, team_id)
    if not team:
        raise TeamNotFound()
    return team


@router.put("/{team_id}", response_model=TeamRead)
def update_team(team_id: int, data: TeamUpdate, session: Session = Depends(get_session)):
    team = store.find_team_by_id(session, team_id)
    if not team:
        raise TeamNotFound()

    for field, value in data.model_dump().items():
        setattr(team, field, value)
    team.updated_at = utc_now()

    session.add(team)
    session.commit()
    session.refresh(team)
    return team


@router.delete("/{team_id}")
def delete_team(team_id: int, session: Session = Depends(get_session)):
    """
    Soft-deletes a team. Its matches and goals stay readable for reports,
    but the team can no longer be scheduled.
    """
    team = store.find_team_by_id(session, team_id)
    if not team:
        raise TeamNotFound()

    store.soft_delete(session, team)
    session.commit()
    return {"message": "Team deleted"}
