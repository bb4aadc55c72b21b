# match_routes.py
# API routes for match schedules and result submission.

from fastapi import APIRouter, Depends
from sqlmodel import Session

from football_backend.core.database import get_session
from football_backend.core.pagination import SortOrder
from football_backend.models.match_model import MatchCreate, MatchUpdate, MatchResultRequest, MatchRead
from football_backend.services import match_service

router = APIRouter()


@router.get("")
def list_matches(
    session: Session = Depends(get_session),
    page: int = 1,
    per_page: int = 10,
    sort_by: str = "created_at",
    sort_order: SortOrder = "desc",
):
    matches, meta = match_service.list_matches(session, page, per_page, sort_by, sort_order)
    return {"matches": matches, **meta}


@router.get("/{match_id}", response_model=MatchRead)
def get_match(match_id: int, session: Session = Depends(get_session)):
    """Match with both teams and the goal list (ordered by minute)."""
    return match_service.get_match_read(session, match_id)


@router.post("", response_model=MatchRead, status_code=201)
def create_match(data: MatchCreate, session: Session = Depends(get_session)):
    match = match_service.create_match(
        session, data.home_team_id, data.away_team_id, data.match_date, data.match_time
    )
    return match_service.get_match_read(session, match.id)


@router.put("/{match_id}", response_model=MatchRead)
def update_match(match_id: int, data: MatchUpdate, session: Session = Depends(get_session)):
    """Reschedule a match. Rejected once the match is completed."""
    match = match_service.update_match(
        session, match_id, data.home_team_id, data.away_team_id, data.match_date, data.match_time
    )
    return match_service.get_match_read(session, match.id)


@router.delete("/{match_id}")
def delete_match(match_id: int, session: Session = Depends(get_session)):
    match_service.delete_match(session, match_id)
    return {"message": "Match deleted"}


# ==========================================
# RESULTS
# ==========================================
@router.post("/{match_id}/result", response_model=MatchRead)
def submit_result(match_id: int, data: MatchResultRequest, session: Session = Depends(get_session)):
    """
    Submit the full goal list for a scheduled match.
    Scores are tallied from the goals and the match becomes completed.
    """
    match = match_service.submit_result(session, match_id, data.goals)
    return match_service.get_match_read(session, match.id)


@router.put("/{match_id}/result", response_model=MatchRead)
def update_result(match_id: int, data: MatchResultRequest, session: Session = Depends(get_session)):
    """Replace the goal list of a completed match; scores are recomputed from scratch."""
    match = match_service.update_result(session, match_id, data.goals)
    return match_service.get_match_read(session, match.id)
