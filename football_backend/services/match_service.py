# match_service.py
# Match schedule management and the result processor (scheduled -> completed state machine).

from typing import List, Tuple

from loguru import logger
from sqlmodel import Session

from football_backend.core.config import TEST_MODE
from football_backend.core.errors import (
    TeamNotFound, PlayerNotFound, MatchNotFound, AlreadyCompleted, NotYetCompleted,
    MatchAlreadyCompleted, goal_message
)
from football_backend.core.pagination import sanitize_pagination, page_offset, page_meta
from football_backend.models.match_model import (
    Match, MatchStatus, Goal, GoalInput, GoalRead, MatchRead
)
from football_backend.models.team_model import TeamRead
from football_backend.services import store
from football_backend.services.match_validator import (
    validate_schedule, validate_goal_team, validate_goal
)


# ==========================================
# READ HELPERS
# ==========================================
def to_match_read(details: store.MatchDetails) -> MatchRead:
    """Converts a MatchDetails bundle into the API schema (teams + goals with names)."""
    match = details.match
    goals = [
        GoalRead(
            id=goal.id,
            match_id=goal.match_id,
            player_id=goal.player_id,
            team_id=goal.team_id,
            minute=goal.minute,
            player_name=goal.player.name if goal.player else None,
            team_name=goal.team.name if goal.team else None,
        )
        for goal in details.goals
    ]
    return MatchRead(
        **match.model_dump(),
        home_team=TeamRead.model_validate(details.home_team) if details.home_team else None,
        away_team=TeamRead.model_validate(details.away_team) if details.away_team else None,
        goals=goals,
    )


def get_match(session: Session, match_id: int) -> store.MatchDetails:
    details = store.find_match_by_id_with_details(session, match_id)
    if not details:
        raise MatchNotFound()
    return details


def list_matches(session: Session, page: int, per_page: int,
                 sort_by: str = "created_at", sort_order: str = "desc") -> Tuple[List[MatchRead], dict]:
    page, per_page = sanitize_pagination(page, per_page)
    matches = store.find_matches(session, page_offset(page, per_page), per_page, sort_by, sort_order)
    total = store.count_matches(session)

    items = [
        to_match_read(store.MatchDetails(
            match=match,
            home_team=match.home_team,
            away_team=match.away_team,
            goals=[],
        ))
        for match in matches
    ]
    return items, page_meta(page, per_page, total)


# ==========================================
# SCHEDULE MUTATIONS
# ==========================================
def _require_teams(session: Session, home_team_id: int, away_team_id: int) -> None:
    if not store.find_team_by_id(session, home_team_id):
        raise TeamNotFound("Home team not found")
    if not store.find_team_by_id(session, away_team_id):
        raise TeamNotFound("Away team not found")


def create_match(session: Session, home_team_id: int, away_team_id: int,
                 match_date: str, match_time: str) -> Match:
    """
    Schedules a new match.
    - Teams must differ (checked before any lookup)
    - Both teams must exist and be active
    """
    # 1️⃣ Distinct teams
    validate_schedule(home_team_id, away_team_id)

    # 2️⃣ Both teams exist
    _require_teams(session, home_team_id, away_team_id)

    # 3️⃣ Create as scheduled 0-0
    match = Match(
        home_team_id=home_team_id,
        away_team_id=away_team_id,
        match_date=match_date,
        match_time=match_time,
        status=MatchStatus.SCHEDULED,
        home_score=0,
        away_score=0,
    )
    try:
        store.create_match(session, match)
        session.commit()
    except Exception:
        session.rollback()
        raise
    session.refresh(match)

    logger.info(f"Match {match.id} scheduled: team {home_team_id} vs team {away_team_id} on {match_date} {match_time}")
    return match


def update_match(session: Session, match_id: int, home_team_id: int, away_team_id: int,
                 match_date: str, match_time: str) -> Match:
    """Changes teams/date/time of a scheduled match. A completed match's schedule is frozen."""
    match = store.find_match_by_id(session, match_id)
    if not match:
        raise MatchNotFound()

    if match.is_completed:
        raise MatchAlreadyCompleted()

    validate_schedule(home_team_id, away_team_id)
    _require_teams(session, home_team_id, away_team_id)

    match.home_team_id = home_team_id
    match.away_team_id = away_team_id
    match.match_date = match_date
    match.match_time = match_time
    try:
        store.update_match(session, match)
        session.commit()
    except Exception:
        session.rollback()
        raise
    session.refresh(match)
    return match


def delete_match(session: Session, match_id: int) -> None:
    """Removes a match together with its goals."""
    match = store.find_match_by_id(session, match_id)
    if not match:
        raise MatchNotFound()

    try:
        store.delete_match(session, match)
        session.commit()
    except Exception:
        session.rollback()
        raise
    logger.info(f"Match {match_id} deleted")


# ==========================================
# RESULT PROCESSOR
# ==========================================
def _build_goals(session: Session, match: Match, goals: List[GoalInput]) -> Tuple[List[Goal], int, int]:
    """
    Validates every submitted goal (in caller order) and tallies both sides.
    Nothing is written here; the first failure aborts the whole batch.
    """
    home_score = 0
    away_score = 0
    new_goals = []

    for index, goal_input in enumerate(goals, start=1):
        # Scoring side must be in the match, even before the scorer is looked up
        validate_goal_team(goal_input, match, index)

        player = store.find_player_by_id(session, goal_input.player_id)
        if not player:
            raise PlayerNotFound(goal_message(index, "player not found"))

        validate_goal(goal_input, match, player, index)

        if goal_input.team_id == match.home_team_id:
            home_score += 1
        else:
            away_score += 1

        new_goals.append(Goal(
            match_id=match.id,
            player_id=player.id,
            team_id=goal_input.team_id,
            minute=goal_input.minute,
        ))

        if TEST_MODE:
            logger.debug(f"[match {match.id}] goal #{index} ok: player {player.id} team {goal_input.team_id} minute {goal_input.minute}")

    return new_goals, home_score, away_score


def _process_result(session: Session, match: Match, goals: List[GoalInput], replace: bool) -> Match:
    """
    Shared core of submit/update: validate, (optionally) drop old goals, insert the new
    batch, write scores and mark the match completed. Runs as one transaction.
    """
    try:
        new_goals, home_score, away_score = _build_goals(session, match, goals)

        if replace:
            store.delete_goals_by_match_id(session, match.id)
        store.create_goals_batch(session, new_goals)

        match.home_score = home_score
        match.away_score = away_score
        match.status = MatchStatus.COMPLETED
        store.update_match(session, match)

        session.commit()
    except Exception:
        session.rollback()
        raise

    session.refresh(match)
    logger.info(f"Match {match.id} result {'updated' if replace else 'submitted'}: {home_score}-{away_score} ({len(new_goals)} goals)")
    return match


def _load_for_result(session: Session, match_id: int) -> Match:
    match = store.find_match_by_id(session, match_id, for_update=True)
    if not match:
        raise MatchNotFound()
    return match


def submit_result(session: Session, match_id: int, goals: List[GoalInput]) -> Match:
    """Scheduled -> Completed. Fails with AlreadyCompleted if a result exists."""
    match = _load_for_result(session, match_id)
    if match.is_completed:
        session.rollback()
        raise AlreadyCompleted()
    return _process_result(session, match, goals, replace=False)


def update_result(session: Session, match_id: int, goals: List[GoalInput]) -> Match:
    """Completed -> Completed with goals and scores recomputed from scratch."""
    match = _load_for_result(session, match_id)
    if not match.is_completed:
        session.rollback()
        raise NotYetCompleted()
    return _process_result(session, match, goals, replace=True)


def get_match_read(session: Session, match_id: int) -> MatchRead:
    return to_match_read(get_match(session, match_id))
