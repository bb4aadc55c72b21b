# report_routes.py
# Read-only match reports.

from fastapi import APIRouter, Depends
from sqlmodel import Session

from football_backend.core.database import get_session
from football_backend.models.report_model import MatchReport
from football_backend.services import report_service

router = APIRouter()


@router.get("/matches")
def list_match_reports(
    session: Session = Depends(get_session),
    page: int = 1,
    per_page: int = 10,
):
    """Completed matches, newest first, each with its outcome label."""
    reports, meta = report_service.build_report_list(session, page, per_page)
    return {"reports": reports, **meta}


@router.get("/matches/{match_id}", response_model=MatchReport)
def get_match_report(match_id: int, session: Session = Depends(get_session)):
    """Full report: outcome, goals, top scorer, and both teams' total wins."""
    return report_service.build_match_report(session, match_id)
