# store.py
# Entity store: thin query helpers over a SQLModel session.
# Helpers add/flush but never commit; the calling service owns the transaction.

from typing import List, NamedTuple, Optional

from sqlalchemy import and_, or_
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select, func

from football_backend.models.team_model import Team
from football_backend.models.player_model import Player
from football_backend.models.match_model import Match, MatchStatus, Goal
from football_backend.models.timestamps import utc_now

TEAM_SORT_FIELDS = {"created_at", "name", "founded_year", "city"}
PLAYER_SORT_FIELDS = {"created_at", "name", "jersey_number", "position"}
MATCH_SORT_FIELDS = {"created_at", "match_date", "status"}


class MatchDetails(NamedTuple):
    """A match with both teams and its goals (scorer + team loaded), goals ordered by minute."""
    match: Match
    home_team: Team
    away_team: Team
    goals: List[Goal]


def _order_clause(model, sort_by: str, sort_order: str, allowed: set):
    column = getattr(model, sort_by) if sort_by in allowed else model.created_at
    return column.asc() if sort_order == "asc" else column.desc()


# ==========================================
# TEAMS
# ==========================================
def find_team_by_id(session: Session, team_id: int) -> Optional[Team]:
    """Active (not soft-deleted) team, or None."""
    return session.exec(
        select(Team).where(Team.id == team_id, Team.deleted_at.is_(None))
    ).first()


def find_teams(session: Session, offset: int, limit: int,
               sort_by: str = "created_at", sort_order: str = "desc") -> List[Team]:
    return session.exec(
        select(Team)
        .where(Team.deleted_at.is_(None))
        .order_by(_order_clause(Team, sort_by, sort_order, TEAM_SORT_FIELDS), Team.id.desc())
        .offset(offset)
        .limit(limit)
    ).all()


def count_teams(session: Session) -> int:
    return session.exec(
        select(func.count()).select_from(Team).where(Team.deleted_at.is_(None))
    ).one()


# ==========================================
# PLAYERS
# ==========================================
def find_player_by_id(session: Session, player_id: int) -> Optional[Player]:
    """Active (not soft-deleted) player, or None."""
    return session.exec(
        select(Player).where(Player.id == player_id, Player.deleted_at.is_(None))
    ).first()


def find_player_by_jersey(session: Session, team_id: int, jersey_number: int) -> Optional[Player]:
    return session.exec(
        select(Player).where(
            Player.team_id == team_id,
            Player.jersey_number == jersey_number,
            Player.deleted_at.is_(None),
        )
    ).first()


def find_players_by_team(session: Session, team_id: int, offset: int, limit: int,
                         sort_by: str = "created_at", sort_order: str = "desc") -> List[Player]:
    return session.exec(
        select(Player)
        .where(Player.team_id == team_id, Player.deleted_at.is_(None))
        .order_by(_order_clause(Player, sort_by, sort_order, PLAYER_SORT_FIELDS), Player.id.desc())
        .offset(offset)
        .limit(limit)
    ).all()


def count_players_by_team(session: Session, team_id: int) -> int:
    return session.exec(
        select(func.count()).select_from(Player)
        .where(Player.team_id == team_id, Player.deleted_at.is_(None))
    ).one()


def soft_delete(session: Session, entity) -> None:
    entity.deleted_at = utc_now()
    session.add(entity)
    session.flush()


# ==========================================
# MATCHES
# ==========================================
def find_match_by_id(session: Session, match_id: int, for_update: bool = False) -> Optional[Match]:
    statement = select(Match).where(Match.id == match_id)
    if for_update:
        # Row lock on server databases; SQLite ignores it
        statement = statement.with_for_update()
    return session.exec(statement).first()


def find_match_by_id_with_details(session: Session, match_id: int) -> Optional[MatchDetails]:
    match = session.get(Match, match_id)
    if not match:
        return None

    # Teams are fetched without the soft-delete filter so history stays readable
    home_team = session.get(Team, match.home_team_id)
    away_team = session.get(Team, match.away_team_id)
    goals = find_goals_by_match_id(session, match_id)
    return MatchDetails(match=match, home_team=home_team, away_team=away_team, goals=goals)


def find_matches(session: Session, offset: int, limit: int,
                 sort_by: str = "created_at", sort_order: str = "desc") -> List[Match]:
    return session.exec(
        select(Match)
        .options(selectinload(Match.home_team), selectinload(Match.away_team))
        .order_by(_order_clause(Match, sort_by, sort_order, MATCH_SORT_FIELDS), Match.id.desc())
        .offset(offset)
        .limit(limit)
    ).all()


def count_matches(session: Session) -> int:
    return session.exec(select(func.count()).select_from(Match)).one()


def create_match(session: Session, match: Match) -> Match:
    session.add(match)
    session.flush()
    return match


def update_match(session: Session, match: Match) -> Match:
    match.updated_at = utc_now()
    session.add(match)
    session.flush()
    return match


def delete_match(session: Session, match: Match) -> None:
    delete_goals_by_match_id(session, match.id)
    session.delete(match)
    session.flush()


# ==========================================
# GOALS
# ==========================================
def create_goals_batch(session: Session, goals: List[Goal]) -> None:
    if not goals:
        return
    session.add_all(goals)
    session.flush()


def delete_goals_by_match_id(session: Session, match_id: int) -> None:
    for goal in session.exec(select(Goal).where(Goal.match_id == match_id)).all():
        session.delete(goal)
    session.flush()


def find_goals_by_match_id(session: Session, match_id: int) -> List[Goal]:
    """Goals of a match ordered by minute ascending (goal id breaks ties)."""
    return session.exec(
        select(Goal)
        .where(Goal.match_id == match_id)
        .order_by(Goal.minute.asc(), Goal.id.asc())
    ).all()


# ==========================================
# REPORT QUERIES
# ==========================================
def count_completed_matches(session: Session) -> int:
    return session.exec(
        select(func.count()).select_from(Match).where(Match.status == MatchStatus.COMPLETED)
    ).one()


def find_completed_matches(session: Session, offset: int, limit: int) -> List[Match]:
    """Completed matches, newest scheduled first."""
    return session.exec(
        select(Match)
        .where(Match.status == MatchStatus.COMPLETED)
        .options(selectinload(Match.home_team), selectinload(Match.away_team))
        .order_by(Match.match_date.desc(), Match.match_time.desc(), Match.id.desc())
        .offset(offset)
        .limit(limit)
    ).all()


def count_wins_for_team(session: Session, team_id: int) -> int:
    """Completed matches won by the team, home or away."""
    return session.exec(
        select(func.count()).select_from(Match).where(
            Match.status == MatchStatus.COMPLETED,
            or_(
                and_(Match.home_team_id == team_id, Match.home_score > Match.away_score),
                and_(Match.away_team_id == team_id, Match.away_score > Match.home_score),
            ),
        )
    ).one()
