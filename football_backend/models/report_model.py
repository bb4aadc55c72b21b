# report_model.py
# Read-only report schemas derived from completed matches (nothing here is a table).

from enum import Enum
from typing import Optional, List
from pydantic import BaseModel

from .team_model import TeamRead


class MatchOutcome(str, Enum):
    HOME_WIN = "Home Win"
    AWAY_WIN = "Away Win"
    DRAW = "Draw"


class ReportGoal(BaseModel):
    player_id: int
    player_name: str
    team_id: int
    team_name: str
    minute: int


class TopScorer(BaseModel):
    player_id: int
    player_name: str
    team_name: str
    goals_in_match: int


class MatchReport(BaseModel):
    """Detailed report for one completed match."""
    match_id: int
    match_date: str
    match_time: str
    home_team: TeamRead
    away_team: TeamRead
    home_score: int
    away_score: int
    match_result: MatchOutcome
    goals: List[ReportGoal]
    top_scorer: Optional[TopScorer] = None
    home_team_total_wins: int
    away_team_total_wins: int


class MatchReportListItem(BaseModel):
    """Summary row for the report list (no top scorer / win totals)."""
    match_id: int
    match_date: str
    match_time: str
    home_team: TeamRead
    away_team: TeamRead
    home_score: int
    away_score: int
    match_result: MatchOutcome
